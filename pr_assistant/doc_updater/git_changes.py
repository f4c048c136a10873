"""
Local git access for the Documentation Updater
Merge base, changed files and per-file diffs through the git CLI
"""

import logging
import subprocess
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


def filter_changed_files(file_names: Iterable[str], doc_extension: str = ".md") -> List[str]:
    """
    Drop blank entries and documentation files from a changed-file listing

    Documentation files are excluded so that updates written by this tool do
    not trigger further updates.

    Args:
        file_names: Paths reported by git
        doc_extension: Extension identifying documentation files

    Returns:
        List[str]: Changed non-documentation files, in the original order
    """
    return [
        name for name in (raw.strip() for raw in file_names)
        if name and not name.endswith(doc_extension)
    ]


class GitChangeReader:
    """Reads changes between HEAD and its merge base with the trunk"""

    def __init__(self, repo_root: Union[str, Path], trunk_ref: str = "origin/main", doc_extension: str = ".md"):
        self.repo_root = Path(repo_root)
        self.trunk_ref = trunk_ref
        self.doc_extension = doc_extension

    def _git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_root,
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout

    def merge_base(self) -> str:
        """
        Compute the merge base of HEAD and the trunk ref

        Raises:
            subprocess.CalledProcessError: If git cannot compute the merge base
        """
        return self._git("merge-base", "HEAD", self.trunk_ref).strip()

    def changed_files(self, base_sha: str) -> List[str]:
        """
        List non-documentation files changed between base_sha and HEAD

        Args:
            base_sha: Merge base commit

        Returns:
            List[str]: Changed files, empty if git fails
        """
        try:
            output = self._git("diff", "--name-only", base_sha, "HEAD")
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.error(f"Error getting changed files: {_describe(e)}")
            return []
        return filter_changed_files(output.splitlines(), self.doc_extension)

    def file_diff(self, base_sha: str, file_path: str) -> str:
        """
        Get the diff of one file against base_sha

        Args:
            base_sha: Merge base commit
            file_path: Path relative to the repository root

        Returns:
            str: Unified diff, empty if git fails
        """
        try:
            return self._git("diff", base_sha, "HEAD", "--", file_path)
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.error(f"Error getting diff for {file_path}: {_describe(e)}")
            return ""


def _describe(error: Exception) -> str:
    if isinstance(error, subprocess.CalledProcessError) and error.stderr:
        return error.stderr.strip()
    return str(error)


__all__ = ["GitChangeReader", "filter_changed_files"]
