"""
PR Assistant - AI code review and documentation updates for pull requests
"""

from .code_reviewer import CodeReviewerWorkflow, create_code_reviewer
from .doc_updater import DocUpdaterWorkflow, create_doc_updater

__all__ = [
    "CodeReviewerWorkflow",
    "DocUpdaterWorkflow",
    "create_code_reviewer",
    "create_doc_updater"
]
