"""FileReferenceLink model (UNO: single model)."""

from __future__ import annotations

__all__ = ["FileReferenceLink"]

import posixpath
from dataclasses import dataclass
from urllib.parse import quote

from ._constants import WIKI_DIR_SUFFIX
from .FileRef import FileRef
from .ProjectFiles import ProjectFiles


@dataclass(frozen=True)
class FileReferenceLink:
    """Link text that reaches ``target`` from a markdown file ``source``.

    Paths are relative to the source directory and percent-encoded, so
    resolving the text again from ``source`` finds ``target``. Under GitHub
    rules a wiki page linked from a page of the same wiki is its bare page
    name, the way GitHub flattens wiki URLs.
    """

    source: FileRef
    target: FileRef
    git_hub_rules: bool = True
    project: ProjectFiles | None = None

    def _is_wiki_page(self, file_ref: FileRef) -> bool:
        if self.project is not None:
            return self.project.is_wiki_page(file_ref)
        return file_ref.is_wiki_page

    def _wiki_root(self, file_ref: FileRef) -> str | None:
        if self.project is not None:
            repo = self.project.repo_for_path(file_ref.path)
            if repo is not None and repo.is_wiki:
                return repo.root_path
        dir_path = file_ref.dir_path
        while dir_path != "/":
            if posixpath.basename(dir_path).endswith(WIKI_DIR_SUFFIX):
                return dir_path
            dir_path = posixpath.dirname(dir_path)
        return None

    @property
    def is_wiki_page(self) -> bool:
        return self._is_wiki_page(self.target)

    @property
    def is_same_wiki(self) -> bool:
        """Source and target are pages of one wiki."""
        if not (self._is_wiki_page(self.source) and self.is_wiki_page):
            return False
        root = self._wiki_root(self.target)
        return root is not None and root == self._wiki_root(self.source)

    @property
    def ext(self) -> str:
        return self.target.ext

    @property
    def link_ref(self) -> str:
        """Relative link with extension."""
        if self.git_hub_rules and self.is_same_wiki:
            return quote(self.target.file_name)
        rel = self.target.relative_to_dir(self.source.dir_path)
        if not self.ext and "/" not in rel:
            # A bare extension-less name would read as a wiki page name
            rel = f"./{rel}"
        return quote(rel)

    @property
    def link_ref_no_ext(self) -> str:
        link = self.link_ref
        if not self.ext:
            return link
        return link[: -(len(self.ext) + 1)]

    @property
    def link(self) -> str:
        """Preferred link text: wiki pages of the same wiki without extension."""
        if self.git_hub_rules and self.is_same_wiki:
            return self.link_ref_no_ext
        return self.link_ref

    def link_ref_with_anchor(self, anchor: str | None) -> str:
        return self.link if anchor is None else f"{self.link}#{anchor}"

    @property
    def remote_url(self) -> str | None:
        """GitHub URL of the target, None when it has no tracked remote."""
        if self.project is None or not self.project.is_under_vcs(self.target.path):
            return None
        repo = self.project.repo_for_path(self.target.path)
        return repo.remote_url_for_file(self.target.path) if repo is not None else None
