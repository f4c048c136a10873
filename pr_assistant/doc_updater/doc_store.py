"""
Documentation file discovery, reading and writing for the Documentation Updater
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

from ..models.pr_models import DocUpdatePlan

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Outcome of applying a documentation update plan"""
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def find_documentation_files(
    repo_root: Union[str, Path],
    doc_extension: str = ".md",
    excluded_dirs: Iterable[str] = ("node_modules", ".git")
) -> List[str]:
    """
    Find documentation files in the working tree

    Args:
        repo_root: Root of the working tree
        doc_extension: Extension identifying documentation files
        excluded_dirs: Directory names whose subtrees are not searched

    Returns:
        List[str]: Sorted POSIX paths relative to repo_root
    """
    root = Path(repo_root)
    excluded = set(excluded_dirs)
    found = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in filenames:
            if filename.endswith(doc_extension):
                found.append((Path(dirpath) / filename).relative_to(root).as_posix())

    return sorted(found)


def read_documentation(repo_root: Union[str, Path], doc_files: Iterable[str]) -> Dict[str, str]:
    """
    Read the full text of each documentation file, skipping unreadable ones

    Returns:
        Dict[str, str]: Mapping of relative path to file content
    """
    root = Path(repo_root)
    docs = {}
    for doc_file in doc_files:
        try:
            docs[doc_file] = (root / doc_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {doc_file}: {str(e)}")
    return docs


def resolve_target(repo_root: Union[str, Path], file_path: str) -> Path:
    """
    Resolve a planned file path inside the working tree

    Raises:
        ValueError: If the path escapes repo_root
    """
    root = Path(repo_root).resolve()
    target = (root / file_path).resolve()
    if target != root and root not in target.parents:
        raise ValueError(f"Refusing to write outside the repository: {file_path}")
    if target == root:
        raise ValueError(f"Not a file path: {file_path}")
    return target


def apply_plan(plan: DocUpdatePlan, repo_root: Union[str, Path], dry_run: bool = False) -> ApplyResult:
    """
    Write every planned update, replacing the whole file

    A failing update is logged and skipped; the remaining updates still apply.

    Args:
        plan: Validated documentation update plan
        repo_root: Root of the working tree
        dry_run: Log the planned writes without touching the filesystem

    Returns:
        ApplyResult: Written, failed and skipped (dry run) files
    """
    result = ApplyResult()

    for update in plan.updates:
        try:
            target = resolve_target(repo_root, update.file)
            if dry_run:
                logger.info(f"[dry run] Would {update.action} {update.file}")
                result.skipped.append(update.file)
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(update.content, encoding="utf-8")

            verb = "Created" if update.action == "create" else "Updated"
            logger.info(f"✓ {verb} {update.file}")
            logger.info(f"  Reason: {update.reason}")
            result.written.append(update.file)

        except (OSError, ValueError) as e:
            logger.error(f"Error updating {update.file}: {str(e)}")
            result.failed.append(update.file)

    return result


__all__ = ["ApplyResult", "find_documentation_files", "read_documentation", "resolve_target", "apply_plan"]
