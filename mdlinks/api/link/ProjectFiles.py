"""ProjectFiles snapshot (UNO: single class)."""

from __future__ import annotations

__all__ = ["ProjectFiles"]

import fnmatch
from collections.abc import Iterable

from .FileRef import FileRef
from .FileReferenceList import FileReferenceList
from .GitHubRepo import GitHubRepo
from .is_external_reference import is_external_reference


class ProjectFiles:
    """Read-only view of a project: its files, repositories and VCS status.

    Resolution never touches the filesystem; it only asks this snapshot.
    ``untracked`` holds absolute paths or glob patterns of files that exist
    in a repository directory but are not committed.
    """

    def __init__(
        self,
        files: Iterable[FileRef | str],
        repos: Iterable[GitHubRepo] = (),
        untracked: Iterable[str] = (),
    ):
        by_path: dict[str, FileRef] = {}
        for item in files:
            file_ref = item if isinstance(item, FileRef) else FileRef(item)
            by_path[file_ref.path] = file_ref
        self._by_path = by_path
        self._files = FileReferenceList(by_path[p] for p in sorted(by_path))
        # Longest root first so nested repos (wiki inside main checkout) win
        self._repos = tuple(sorted(repos, key=lambda r: len(r.root_path), reverse=True))
        self._untracked = tuple(untracked)

    @property
    def repos(self) -> tuple[GitHubRepo, ...]:
        return self._repos

    def __len__(self) -> int:
        return len(self._files)

    def list_project_files(self, root_scope: str | None = None) -> FileReferenceList:
        """All files, path-sorted, optionally limited to those under ``root_scope``."""
        if root_scope is None:
            return self._files
        return self._files.filter(lambda f: f.is_under(root_scope.rstrip("/") or "/"))

    def find(self, path: str) -> FileRef | None:
        """Exact, case-sensitive lookup of an absolute path."""
        return self._by_path.get(FileRef(path).path)

    def repo_for_path(self, path: str) -> GitHubRepo | None:
        """Innermost repository containing ``path``."""
        for repo in self._repos:
            if repo.contains(path):
                return repo
        return None

    def is_wiki_page(self, file_ref: FileRef) -> bool:
        """Markdown file of a wiki repository, or under a ``*.wiki`` directory."""
        if not file_ref.is_markdown:
            return False
        repo = self.repo_for_path(file_ref.path)
        return (repo is not None and repo.is_wiki) or file_ref.path_info.is_wiki_dir_path

    def is_untracked(self, path: str) -> bool:
        return any(path == pattern or fnmatch.fnmatchcase(path, pattern) for pattern in self._untracked)

    def is_under_vcs(self, path: str) -> bool:
        """True when ``path`` is inside a repository and not marked untracked."""
        return self.repo_for_path(path) is not None and not self.is_untracked(path)

    @staticmethod
    def is_external_reference(target: str) -> bool:
        return is_external_reference(target)
