"""
Data models package for PR Assistant
"""

from .pr_models import *

__all__ = [
    "WAIT_TIMEOUT",
    "WAIT_COMPLETED",
    "RequestSpec",
    "PullRequestSummary",
    "WorkflowRun",
    "DocUpdate",
    "DocUpdatePlan",
]
