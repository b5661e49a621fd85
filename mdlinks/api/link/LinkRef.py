"""Link reference model (UNO: single model)."""

from __future__ import annotations

__all__ = ["LinkRef"]

import posixpath
from dataclasses import dataclass, field
from urllib.parse import unquote

from ._constants import MARKDOWN_EXTENSIONS
from .FileRef import FileRef
from .PathInfo import PathInfo


@dataclass(frozen=True)
class LinkRef:
    """What the author typed as a link target, seen from its containing file.

    The raw ``target`` keeps its classification (external vs local). Name,
    directory and extension are taken from the percent-decoded target with
    the anchor removed. An explicit ``anchor`` argument wins over one parsed
    from the target.
    """

    containing_file: FileRef
    target: str
    anchor: str | None = None
    is_wiki_link: bool = False
    path_info: PathInfo = field(init=False, repr=False, compare=False)
    path: str = field(init=False, compare=False)
    file_name: str = field(init=False, compare=False)
    file_name_no_ext: str = field(init=False, compare=False)
    ext: str = field(init=False, compare=False)

    def __post_init__(self):
        raw = PathInfo.parse(self.target)
        object.__setattr__(self, "path_info", raw)
        if self.anchor is None and raw.anchor is not None:
            object.__setattr__(self, "anchor", raw.anchor)

        decoded = PathInfo.parse(unquote(raw.file_path), anchor=False) if raw.is_local else raw
        name_no_ext, ext = decoded.file_name_no_ext, decoded.ext
        if self.is_wiki_link and ext not in MARKDOWN_EXTENSIONS:
            # [[Release v1.2]] names a page, the dot is part of the name
            name_no_ext, ext = decoded.file_name, ""

        object.__setattr__(self, "path", decoded.path)
        object.__setattr__(self, "file_name", decoded.file_name)
        object.__setattr__(self, "file_name_no_ext", name_no_ext)
        object.__setattr__(self, "ext", ext)

    @classmethod
    def wiki_link(cls, containing_file: FileRef, text: str) -> LinkRef:
        """Build a link from ``[[Page Name#anchor|alias]]`` inner text."""
        # Handle escaped pipe (\|) - common in markdown tables
        if "\\|" in text:
            text = text.split("\\|", 1)[0]
        elif "|" in text:
            text = text.split("|", 1)[0]
        return cls(containing_file, text.strip(), is_wiki_link=True)

    @property
    def is_external(self) -> bool:
        return self.path_info.is_external

    @property
    def is_empty(self) -> bool:
        return self.path_info.is_empty

    @property
    def has_ext(self) -> bool:
        return bool(self.ext)

    @property
    def has_dir(self) -> bool:
        return bool(self.path)

    @property
    def is_markdown_ext(self) -> bool:
        return self.ext in MARKDOWN_EXTENSIONS

    @property
    def wants_loose_ext(self) -> bool:
        """Extension-less targets accept any extension of their family."""
        return not self.has_ext

    @property
    def containing_is_wiki_page(self) -> bool:
        return self.containing_file.is_wiki_page

    @property
    def file_path_no_ext(self) -> str:
        return self.path + self.file_name_no_ext

    def expected_dir(self, repo_root: str | None = None) -> str:
        """Directory the target points into.

        Absolute targets are taken relative to the repository root, the way
        GitHub renders ``/docs/page.md``.
        """
        if self.path.startswith("/"):
            base = repo_root or "/"
            return posixpath.normpath(base + "/" + self.path.lstrip("/"))
        if not self.path:
            return self.containing_file.dir_path
        return posixpath.normpath(posixpath.join(self.containing_file.dir_path, self.path))
