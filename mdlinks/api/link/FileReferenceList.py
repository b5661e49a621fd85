"""FileReferenceList model (UNO: single class)."""

from __future__ import annotations

__all__ = ["FileReferenceList"]

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from .FileRef import FileRef

if TYPE_CHECKING:
    from .FileReferenceListQuery import FileReferenceListQuery
    from .ProjectFiles import ProjectFiles


def canonical_key(file_ref: FileRef, relative_to: str | None = None) -> tuple[int, str]:
    """Sort key: fewer path segments first, then the path itself.

    With ``relative_to`` the segments are counted on the path relative to that
    directory, so files next to it come before files deeper or farther away.
    """
    rel = file_ref.relative_to_dir(relative_to) if relative_to else file_ref.path.lstrip("/")
    return len(rel.split("/")), file_ref.path


class FileReferenceList:
    """Immutable, ordered list of project files."""

    def __init__(self, files: Iterable[FileRef] = ()):
        self._files: tuple[FileRef, ...] = tuple(files)

    @property
    def files(self) -> tuple[FileRef, ...]:
        return self._files

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self._files]

    def __iter__(self) -> Iterator[FileRef]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, index: int) -> FileRef:
        return self._files[index]

    def __bool__(self) -> bool:
        return bool(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileReferenceList):
            return NotImplemented
        return self._files == other._files

    def __hash__(self) -> int:
        return hash(self._files)

    def __repr__(self) -> str:
        return f"FileReferenceList({list(self.paths)!r})"

    def filter(self, predicate: Callable[[FileRef], bool]) -> FileReferenceList:
        return FileReferenceList(f for f in self._files if predicate(f))

    def path_sorted(self) -> FileReferenceList:
        return FileReferenceList(sorted(self._files, key=lambda f: f.path))

    def sorted(self, relative_to: str | None = None) -> FileReferenceList:
        """Canonical order, see :func:`canonical_key`."""
        return FileReferenceList(sorted(self._files, key=lambda f: canonical_key(f, relative_to)))

    def first(self, relative_to: str | None = None) -> FileReferenceList:
        """At most one element: the head of the canonical order."""
        return FileReferenceList(self.sorted(relative_to)._files[:1])

    def query(self, project: ProjectFiles | None = None, source: FileRef | None = None) -> FileReferenceListQuery:
        """Start a filter chain over this list, seen from ``source``."""
        from .FileReferenceListQuery import FileReferenceListQuery

        return FileReferenceListQuery(file_list=self, project=project, source=source)
