"""
PR Assistant Data Models
Pydantic models for the data exchanged with GitHub and the language model
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

WAIT_TIMEOUT = "timeout"
WAIT_COMPLETED = "completed"


class RequestSpec(BaseModel):
    """A single REST request against the GitHub API"""
    host: str = Field(..., description="Base URL of the API host")
    path: str = Field(..., description="Request path, including any query string")
    method: str = Field(default="GET", description="HTTP method")
    headers: Dict[str, str] = Field(default_factory=dict, description="Final request headers")
    body: Optional[Any] = Field(default=None, description="JSON-serializable payload")

    @staticmethod
    def merge_headers(defaults: Dict[str, str], overrides: Optional[Dict[str, str]]) -> Dict[str, str]:
        """
        Merge caller headers over defaults key by key, matching names case-insensitively

        Args:
            defaults: Built-in headers
            overrides: Caller-supplied headers, which win on conflicts

        Returns:
            Dict[str, str]: Merged headers
        """
        merged = dict(defaults)
        for name, value in (overrides or {}).items():
            for existing in [key for key in merged if key.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
        return merged


class PullRequestSummary(BaseModel):
    """Read-only view of a pull request's metadata"""
    head_sha: Optional[str] = Field(default=None, description="Head commit SHA")
    base_sha: Optional[str] = Field(default=None, description="Base commit SHA")
    title: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None)
    commits: int = Field(default=0)
    additions: int = Field(default=0)
    deletions: int = Field(default=0)
    changed_files: int = Field(default=0)

    @classmethod
    def from_api(cls, data: Any) -> "PullRequestSummary":
        """Build a summary from a pulls API response, tolerating missing fields"""
        if not isinstance(data, dict):
            return cls()
        head = data.get("head") if isinstance(data.get("head"), dict) else {}
        base = data.get("base") if isinstance(data.get("base"), dict) else {}
        return cls(
            head_sha=head.get("sha"),
            base_sha=base.get("sha"),
            title=data.get("title"),
            state=data.get("state"),
            commits=data.get("commits") or 0,
            additions=data.get("additions") or 0,
            deletions=data.get("deletions") or 0,
            changed_files=data.get("changed_files") or 0,
        )


class WorkflowRun(BaseModel):
    """A CI workflow run as listed by the actions API"""
    name: Optional[str] = Field(default=None, description="Workflow display name")
    status: Optional[str] = Field(default=None, description="queued, in_progress, completed, ...")
    conclusion: Optional[str] = Field(default=None, description="success, failure, cancelled or null")

    @property
    def is_terminal(self) -> bool:
        return self.status == "completed"


class DocUpdate(BaseModel):
    """One planned documentation file write"""
    file: str = Field(..., min_length=1, description="Path of the documentation file")
    action: Literal["update", "create"] = Field(..., description="Whether the file is updated or created")
    content: str = Field(..., description="Full content of the file, not a patch")
    reason: str = Field(default="", description="Why the update is needed")


class DocUpdatePlan(BaseModel):
    """Documentation update plan produced by the language model"""
    updates: List[DocUpdate] = Field(..., description="Planned writes, applied in order")
    summary: str = Field(default="")


__all__ = [
    "WAIT_TIMEOUT",
    "WAIT_COMPLETED",
    "RequestSpec",
    "PullRequestSummary",
    "WorkflowRun",
    "DocUpdate",
    "DocUpdatePlan",
]
