#!/usr/bin/env python3
"""
Main entry point for Code Reviewer workflow
"""

import asyncio
import sys
import argparse
import logging

from dotenv import load_dotenv

from .workflow import create_code_reviewer
from ..config.llm_config import setup_logging
from ..config.workflow_config import get_github_config, get_waiter_config
from ..github.api_client import create_github_client

logger = logging.getLogger(__name__)


async def main():
    """Main function for code reviewer"""
    parser = argparse.ArgumentParser(description="Post an AI code review on a GitHub pull request")
    parser.add_argument("--pr-number", type=int, help="Pull request number (default: PR_NUMBER)")
    parser.add_argument("--skip-wait", action="store_true",
                        help="Do not wait for the prerequisite workflow before reviewing")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")

    args = parser.parse_args()

    load_dotenv()
    setup_logging(level=args.log_level)

    try:
        github_config = get_github_config()
        if args.pr_number is not None:
            github_config.pr_number = args.pr_number
        github_config.require_pull_request()

        waiter_config = get_waiter_config()
        if args.skip_wait:
            waiter_config.enabled = False

        workflow = create_code_reviewer(
            github_client=create_github_client(github_config),
            waiter_config=waiter_config
        )

        print(f"Reviewing PR #{github_config.pr_number} in {github_config.repository}")
        final_state = await workflow.execute(github_config.pr_number)

        if final_state.get("wait_result"):
            print(f"Prerequisite workflow result: {final_state['wait_result']}")
        if final_state.get("review"):
            print("✅ Review posted successfully!")
        else:
            print("✅ No changes found in PR, notice posted.")

    except Exception as e:
        logger.error(f"Error reviewing PR: {str(e)}")
        print(f"❌ Error: {str(e)}")
        if args.log_level == "DEBUG":
            import traceback
            traceback.print_exc()
        sys.exit(1)


def run():
    """Console script entry point"""
    asyncio.run(main())


if __name__ == "__main__":
    run()
