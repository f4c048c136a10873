"""
GitHub package for PR Assistant
"""

from .api_client import GitHubAPIClient, create_github_client, DIFF_MEDIA_TYPE
from .workflow_waiter import WorkflowCompletionWaiter, WaiterState
from .pr_diff import PullRequestDiffFetcher

__all__ = [
    "GitHubAPIClient",
    "create_github_client",
    "DIFF_MEDIA_TYPE",
    "WorkflowCompletionWaiter",
    "WaiterState",
    "PullRequestDiffFetcher"
]
