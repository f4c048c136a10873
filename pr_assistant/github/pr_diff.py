"""
Pull request diff fetching for PR Assistant
"""

import logging

from ..models.pr_models import PullRequestSummary
from .api_client import GitHubAPIClient

logger = logging.getLogger(__name__)


class PullRequestDiffFetcher:
    """Retrieves pull request metadata and its unified diff"""

    def __init__(self, github_client: GitHubAPIClient):
        self.github_client = github_client

    async def fetch_metadata(self, pr_number: int) -> PullRequestSummary:
        """
        Fetch pull request metadata

        Args:
            pr_number: Pull request number

        Returns:
            PullRequestSummary: Metadata view, with empty fields if the response was unusable
        """
        pr_data = await self.github_client.get_pull_request(pr_number)
        summary = PullRequestSummary.from_api(pr_data)

        logger.info(f"PR #{pr_number}: {summary.title} ({summary.state})")
        logger.info(f"  - {summary.commits} commits")
        logger.info(f"  - {summary.changed_files} changed files")
        logger.info(f"  - {summary.additions} additions")
        logger.info(f"  - {summary.deletions} deletions")
        return summary

    async def fetch_diff(self, pr_number: int) -> str:
        """
        Fetch the pull request diff

        A response that is not text (for example an empty JSON object for a
        merge with no content delta) is treated as no diff.

        Args:
            pr_number: Pull request number

        Returns:
            str: Unified diff text, or an empty string when there are no changes
        """
        diff = await self.github_client.get_pull_request_diff(pr_number)

        if not isinstance(diff, str) or not diff.strip():
            logger.info(f"PR #{pr_number} has no diff content")
            return ""

        logger.info(f"Fetched diff for PR #{pr_number} ({len(diff)} characters)")
        return diff


__all__ = ["PullRequestDiffFetcher"]
