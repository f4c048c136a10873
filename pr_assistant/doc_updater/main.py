#!/usr/bin/env python3
"""
Main entry point for Documentation Updater workflow
"""

import asyncio
import sys
import argparse
import logging

from dotenv import load_dotenv

from .workflow import create_doc_updater
from ..config.llm_config import setup_logging
from ..config.workflow_config import get_doc_updater_config, get_github_config

logger = logging.getLogger(__name__)


async def main():
    """Main function for documentation updater"""
    parser = argparse.ArgumentParser(description="Update documentation files based on the code changes of a merged pull request")
    parser.add_argument("--repo-root", help="Working tree to analyze and update (default: current directory)")
    parser.add_argument("--trunk-ref", help="Ref the merge base is computed against (default: origin/main)")
    parser.add_argument("--dry-run", action="store_true", help="Log planned updates without writing files")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")

    args = parser.parse_args()

    load_dotenv()
    setup_logging(level=args.log_level)

    try:
        config = get_doc_updater_config(args.repo_root)
        if args.trunk_ref:
            config.trunk_ref = args.trunk_ref
        config.dry_run = args.dry_run

        github_config = get_github_config()
        workflow = create_doc_updater(config=config)

        print(f"Analyzing documentation update needs in {config.repo_root}")
        final_state = await workflow.execute(github_config.pr_title, github_config.pr_body)

        written = final_state.get("written_files", [])
        failed = final_state.get("failed_files", [])

        print("=" * 50)
        if written:
            print(f"📝 Updated {len(written)} documentation files:")
            for file in written:
                print(f"  - {file}")
        if failed:
            print(f"⚠️  Failed to update {len(failed)} files:")
            for file in failed:
                print(f"  - {file}")
        if final_state.get("summary"):
            print(f"\nSummary: {final_state['summary']}")

        print("✅ Documentation update completed!")

    except Exception as e:
        logger.error(f"Fatal error: {str(e)}")
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
