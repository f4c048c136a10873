"""
Code Reviewer Workflow Package
Posts an AI-generated code review as a pull request comment
"""

from .workflow import CodeReviewerWorkflow, CodeReviewerState, create_code_reviewer
from .prompts import CodeReviewerPrompts, REVIEW_COMMENT_HEADER, NO_CHANGES_COMMENT

__all__ = [
    "CodeReviewerWorkflow",
    "CodeReviewerState",
    "create_code_reviewer",
    "CodeReviewerPrompts",
    "REVIEW_COMMENT_HEADER",
    "NO_CHANGES_COMMENT"
]
