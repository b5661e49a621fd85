"""FileReferenceListQuery builder (UNO: single class)."""

from __future__ import annotations

__all__ = ["FileReferenceListQuery"]

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ._wiki_name import normalize_wiki_name
from .FileRef import FileRef
from .FileReferenceList import FileReferenceList

if TYPE_CHECKING:
    from .GitHubRepo import GitHubRepo
    from .ProjectFiles import ProjectFiles

# Predicates see the finished query so policy switches apply regardless of call order
Predicate = Callable[["FileReferenceListQuery", FileRef], bool]


@dataclass(frozen=True)
class FileReferenceListQuery:
    """Composable filter over a FileReferenceList.

    Every builder call returns a new query; nothing is evaluated until
    ``all()`` or ``first()``. ``source`` is the file the query is made from,
    usually the file containing a link.
    """

    file_list: FileReferenceList
    project: ProjectFiles | None = None
    source: FileRef | None = None
    wiki_rules: bool = False
    predicates: tuple[Predicate, ...] = ()

    def _with(self, predicate: Predicate) -> FileReferenceListQuery:
        return replace(self, predicates=self.predicates + (predicate,))

    # Policy
    def git_hub_wiki_rules(self) -> FileReferenceListQuery:
        """Apply GitHub wiki matching when the source is a wiki page.

        Wiki page names then compare case-insensitively with dash and space
        treated as equal. Has no effect for other sources.
        """
        if self.source is None or not self.is_wiki_page(self.source):
            return self
        return replace(self, wiki_rules=True)

    def source_repo(self) -> GitHubRepo | None:
        if self.project is None or self.source is None:
            return None
        return self.project.repo_for_path(self.source.path)

    def is_wiki_page(self, file_ref: FileRef) -> bool:
        if self.project is not None:
            return self.project.is_wiki_page(file_ref)
        return file_ref.is_wiki_page

    def is_case_insensitive(self, file_ref: FileRef) -> bool:
        return self.wiki_rules and self.is_wiki_page(file_ref)

    # Filters
    def same_git_hub_repo(self, also_dir: str | None = None) -> FileReferenceListQuery:
        """Keep files of the source's repository group (main repo plus wiki).

        Files directly in ``also_dir`` are kept as well, so an explicit
        relative path can reach outside the group. No-op when the source
        belongs to no known repository.
        """
        repo = self.source_repo()
        if repo is None:
            return self
        return self._with(lambda q, f: repo.in_group(f.path) or (also_dir is not None and f.dir_path == also_dir))

    def want_markdown_files(self) -> FileReferenceListQuery:
        return self._with(lambda q, f: f.is_markdown)

    def want_extensions(self, extensions: Iterable[str]) -> FileReferenceListQuery:
        """Keep files whose lower-cased extension is listed; ``""`` selects extension-less files."""
        wanted = frozenset(ext.lower().lstrip(".") for ext in extensions)
        return self._with(lambda q, f: f.ext in wanted)

    def match_link_ref_no_ext(self, link_ref_no_ext: str, loose: bool = False) -> FileReferenceListQuery:
        """Keep files whose name (without extension) matches the last segment of ``link_ref_no_ext``.

        Exact match by default, prefix match with ``loose``. An empty name
        matches every file under ``loose``.
        """
        name = link_ref_no_ext.rsplit("/", 1)[-1]
        return self._with(lambda q, f: q.name_matches(f, name, loose))

    def in_source(self, file_ref: FileRef | None = None) -> FileReferenceListQuery:
        """Keep files at or below the directory of ``file_ref`` (default: the source)."""
        anchor = file_ref or self.source
        if anchor is None:
            return self
        dir_path = anchor.dir_path
        return self._with(lambda q, f: f.is_under(dir_path))

    def where(self, predicate: Callable[[FileRef], bool]) -> FileReferenceListQuery:
        return self._with(lambda q, f: predicate(f))

    # Matching
    def name_matches(self, file_ref: FileRef, name: str, loose: bool = False) -> bool:
        candidate = file_ref.file_name_no_ext
        if self.is_case_insensitive(file_ref):
            candidate, name = normalize_wiki_name(candidate), normalize_wiki_name(name)
        return candidate.startswith(name) if loose else candidate == name

    def matches(self, file_ref: FileRef) -> bool:
        return all(predicate(self, file_ref) for predicate in self.predicates)

    # Terminals
    def all(self) -> FileReferenceList:
        """Every matching file, path-sorted."""
        return FileReferenceList(f for f in self.file_list if self.matches(f)).path_sorted()

    def first(self) -> FileReferenceList:
        """At most one match: the nearest to the source in canonical order."""
        relative_to = self.source.dir_path if self.source is not None else None
        return self.all().first(relative_to)
