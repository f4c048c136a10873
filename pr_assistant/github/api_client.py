"""
GitHub REST API client for PR Assistant
Issues single authenticated requests and returns parsed JSON or raw text
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..config.workflow_config import GitHubConfig, get_github_config
from ..models.pr_models import RequestSpec

logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


class GitHubAPIClient:
    """
    Thin client for the GitHub REST API

    Every call performs exactly one HTTP request. Transport errors propagate
    unchanged; HTTP error statuses are returned as the response body.
    """

    def __init__(self, config: GitHubConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize GitHub API client

        Args:
            config: GitHub settings (token, repository, API host)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config
        self.transport = transport

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"token {self.config.token}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.config.owner}/{self.config.repo}"

    def build_request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> RequestSpec:
        """Build the request description with caller headers merged over the defaults"""
        return RequestSpec(
            host=self.config.api_url.rstrip("/"),
            path=path,
            method=method.upper(),
            headers=RequestSpec.merge_headers(self.default_headers, headers),
            body=body,
        )

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Perform one request and return the parsed JSON body, or the raw text if it is not JSON

        Args:
            path: API path (e.g. /repos/owner/repo/pulls/1)
            method: HTTP method, GET by default
            body: Optional payload, JSON-encoded when present
            headers: Header overrides, applied key by key over the defaults

        Returns:
            Any: Parsed JSON value or raw response text
        """
        spec = self.build_request(path, method, body, headers)
        content = json.dumps(spec.body) if spec.body is not None else None

        logger.debug(f"{spec.method} {spec.host}{spec.path}")
        async with httpx.AsyncClient(
            base_url=spec.host,
            timeout=self.config.request_timeout,
            transport=self.transport
        ) as client:
            response = await client.request(
                spec.method,
                spec.path,
                headers=spec.headers,
                content=content
            )

        text = response.text
        logger.debug(f"Response status: {response.status_code}")
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def get_pull_request(self, pr_number: int) -> Any:
        """Fetch pull request metadata"""
        return await self.request(f"{self.repo_path}/pulls/{pr_number}")

    async def get_pull_request_diff(self, pr_number: int) -> Any:
        """Fetch the pull request as unified diff text"""
        return await self.request(
            f"{self.repo_path}/pulls/{pr_number}",
            headers={"Accept": DIFF_MEDIA_TYPE}
        )

    async def list_workflow_runs(self, head_sha: str) -> Any:
        """List workflow runs associated with a commit"""
        return await self.request(f"{self.repo_path}/actions/runs?head_sha={head_sha}")

    async def post_issue_comment(self, issue_number: int, body: str) -> Any:
        """Post a comment on an issue or pull request"""
        return await self.request(
            f"{self.repo_path}/issues/{issue_number}/comments",
            method="POST",
            body={"body": body}
        )


def create_github_client(config: Optional[GitHubConfig] = None) -> GitHubAPIClient:
    """
    Factory function to create GitHub API client

    Args:
        config: Optional GitHub configuration, read from the environment when omitted

    Returns:
        GitHubAPIClient: Configured client
    """
    return GitHubAPIClient(config or get_github_config())


__all__ = ["GitHubAPIClient", "create_github_client", "DIFF_MEDIA_TYPE"]
