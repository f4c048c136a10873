#!/usr/bin/env python3
"""
Main entry point for PR Assistant
Dispatches to the code reviewer or documentation updater
"""

import sys
import argparse
import asyncio

from .code_reviewer.main import main as code_reviewer_main
from .doc_updater.main import main as doc_updater_main

# Workflow name -> (module name shown in usage, async main)
WORKFLOWS = {
    "code-reviewer": ("pr_assistant.code_reviewer", code_reviewer_main),
    "doc-updater": ("pr_assistant.doc_updater", doc_updater_main),
}


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description="PR Assistant - AI code review and documentation updates for CI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Available workflows:
  code-reviewer   Wait for the prerequisite workflow, then post an AI review on the pull request
  doc-updater     Rewrite documentation files for code changes since the merge base

Remaining arguments are passed to the selected workflow, e.g.:
  python -m pr_assistant code-reviewer --pr-number 42 --skip-wait
  python -m pr_assistant doc-updater --trunk-ref origin/develop --dry-run
        """
    )


def main(argv=None):
    """Run the workflow named by the first argument"""
    parser = build_parser()
    parser.add_argument("workflow", choices=sorted(WORKFLOWS), help="Workflow to execute")

    args, remaining_args = parser.parse_known_args(argv)
    prog, workflow_main = WORKFLOWS[args.workflow]

    # Workflow mains parse sys.argv themselves
    sys.argv = [prog] + remaining_args
    asyncio.run(workflow_main())


if __name__ == "__main__":
    main()
