"""
Workflow configuration for PR Assistant
GitHub access, workflow waiting and documentation update settings loaded from the CI environment
"""

import os
import logging
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class GitHubConfig(BaseModel):
    """GitHub access and pull request context"""
    token: Optional[str] = Field(default=None, description="Token forwarded as the Authorization header")
    owner: Optional[str] = Field(default=None, description="Repository owner")
    repo: Optional[str] = Field(default=None, description="Repository name")
    pr_number: Optional[int] = Field(default=None, description="Pull request number")
    pr_title: str = Field(default="", description="Pull request title")
    pr_body: str = Field(default="", description="Pull request description")
    api_url: str = Field(default="https://api.github.com", description="REST API base URL")
    user_agent: str = Field(default="PR-Review-Bot")
    request_timeout: float = Field(default=30.0, gt=0)

    @property
    def repository(self) -> str:
        """Full repository name (owner/repo)"""
        return f"{self.owner}/{self.repo}"

    def require_pull_request(self) -> None:
        """Raise if the settings needed to address a pull request are missing"""
        missing = [
            name for name, value in (
                ("GITHUB_TOKEN", self.token),
                ("REPO_OWNER", self.owner),
                ("REPO_NAME", self.repo),
                ("PR_NUMBER", self.pr_number),
            ) if not value
        ]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class WaiterConfig(BaseModel):
    """Settings for waiting on a prerequisite CI workflow"""
    workflow_name: str = Field(default="Update Documentation", description="Display name of the workflow run")
    timeout_seconds: float = Field(default=600.0, gt=0)
    poll_interval_seconds: float = Field(default=15.0, gt=0)
    enabled: bool = Field(default=True)


class DocUpdaterConfig(BaseModel):
    """Settings for the documentation updater"""
    trunk_ref: str = Field(default="origin/main", description="Ref the merge base is computed against")
    doc_extension: str = Field(default=".md", description="Extension identifying documentation files")
    max_files: int = Field(default=10, gt=0, description="Maximum changed files included in the prompt")
    excluded_dirs: List[str] = Field(default_factory=lambda: ["node_modules", ".git"])
    repo_root: Path = Field(default_factory=Path.cwd)
    dry_run: bool = Field(default=False)


def _parse_pr_number(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PR_NUMBER must be an integer, got {raw!r}")


def get_github_config() -> GitHubConfig:
    """
    Get GitHub configuration from environment variables

    Returns:
        GitHubConfig: Configured GitHub settings
    """
    return GitHubConfig(
        token=os.getenv("GITHUB_TOKEN"),
        owner=os.getenv("REPO_OWNER"),
        repo=os.getenv("REPO_NAME"),
        pr_number=_parse_pr_number(os.getenv("PR_NUMBER")),
        pr_title=os.getenv("PR_TITLE", ""),
        pr_body=os.getenv("PR_BODY", ""),
        api_url=os.getenv("GITHUB_API_URL") or "https://api.github.com",
    )


def get_waiter_config() -> WaiterConfig:
    """Get workflow waiter configuration from environment variables"""
    return WaiterConfig(
        workflow_name=os.getenv("PR_ASSISTANT_WAIT_WORKFLOW", "Update Documentation"),
        timeout_seconds=float(os.getenv("PR_ASSISTANT_WAIT_TIMEOUT", "600")),
        poll_interval_seconds=float(os.getenv("PR_ASSISTANT_WAIT_INTERVAL", "15")),
    )


def get_doc_updater_config(repo_root: Optional[str] = None) -> DocUpdaterConfig:
    """Get documentation updater configuration from environment variables"""
    return DocUpdaterConfig(
        trunk_ref=os.getenv("PR_ASSISTANT_TRUNK_REF", "origin/main"),
        doc_extension=os.getenv("PR_ASSISTANT_DOC_EXTENSION", ".md"),
        max_files=int(os.getenv("PR_ASSISTANT_MAX_FILES", "10")),
        repo_root=Path(repo_root) if repo_root else Path.cwd(),
    )


__all__ = [
    "GitHubConfig",
    "WaiterConfig",
    "DocUpdaterConfig",
    "get_github_config",
    "get_waiter_config",
    "get_doc_updater_config",
]
