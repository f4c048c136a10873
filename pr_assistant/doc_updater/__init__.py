"""
Documentation Updater Workflow Package
Proposes documentation updates for merged code changes and writes them to disk
"""

from .workflow import DocUpdaterWorkflow, DocUpdaterState, create_doc_updater
from .git_changes import GitChangeReader, filter_changed_files
from .doc_store import ApplyResult, apply_plan, find_documentation_files, read_documentation
from .plan_parser import extract_first_json_object, parse_doc_update_plan
from .prompts import DocUpdaterPrompts

__all__ = [
    "DocUpdaterWorkflow",
    "DocUpdaterState",
    "create_doc_updater",
    "GitChangeReader",
    "filter_changed_files",
    "ApplyResult",
    "apply_plan",
    "find_documentation_files",
    "read_documentation",
    "extract_first_json_object",
    "parse_doc_update_plan",
    "DocUpdaterPrompts"
]
