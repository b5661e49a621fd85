"""PathInfo model (UNO: single model)."""

from dataclasses import dataclass, replace
from enum import Enum

from ._constants import IMAGE_EXTENSIONS, MARKDOWN_EXTENSIONS, WIKI_DIR_SUFFIX
from .is_external_reference import is_external_reference


class PathKind(str, Enum):
    EMPTY = "empty"
    LOCAL = "local"
    EXTERNAL = "external"


@dataclass(frozen=True)
class PathInfo:
    """A link target string split into directory, file name and anchor.

    Invariant: ``full_path == path + file_name + ("#" + anchor if anchor is not None)``.
    ``anchor`` is None when the string has no ``#`` and ``""`` when it ends in one.
    Extensions are compared lower-cased and without the dot.
    """

    full_path: str
    path: str
    file_name: str
    anchor: str | None
    kind: PathKind

    @classmethod
    def parse(cls, full_path: str, anchor: bool = True) -> "PathInfo":
        """Split any string into its parts. Never raises.

        With ``anchor=False`` a ``#`` belongs to the file name, as in a file
        path on disk (``C#-Tips.md``).
        """
        if not full_path:
            return cls(full_path="", path="", file_name="", anchor=None, kind=PathKind.EMPTY)

        kind = PathKind.EXTERNAL if is_external_reference(full_path) else PathKind.LOCAL

        hash_pos = full_path.find("#") if anchor else -1
        if hash_pos >= 0:
            file_path, anchor_text = full_path[:hash_pos], full_path[hash_pos + 1 :]
        else:
            file_path, anchor_text = full_path, None

        slash_pos = file_path.rfind("/")
        path, file_name = file_path[: slash_pos + 1], file_path[slash_pos + 1 :]
        return cls(full_path=full_path, path=path, file_name=file_name, anchor=anchor_text, kind=kind)

    # Classification
    @property
    def is_empty(self) -> bool:
        return self.kind is PathKind.EMPTY

    @property
    def is_external(self) -> bool:
        return self.kind is PathKind.EXTERNAL

    @property
    def is_local(self) -> bool:
        return self.kind is PathKind.LOCAL

    @property
    def is_absolute(self) -> bool:
        return self.is_local and self.full_path.startswith("/")

    # Name and extension
    @property
    def _ext_pos(self) -> int:
        return self.file_name.rfind(".")

    @property
    def ext(self) -> str:
        pos = self._ext_pos
        return self.file_name[pos + 1 :].lower() if pos >= 0 else ""

    @property
    def has_ext(self) -> bool:
        return bool(self.ext)

    @property
    def file_name_no_ext(self) -> str:
        pos = self._ext_pos
        return self.file_name[:pos] if pos >= 0 else self.file_name

    @property
    def has_anchor(self) -> bool:
        return self.anchor is not None

    @property
    def is_markdown_ext(self) -> bool:
        return self.ext in MARKDOWN_EXTENSIONS

    @property
    def is_image_ext(self) -> bool:
        return self.ext in IMAGE_EXTENSIONS

    # Derived paths
    @property
    def dir_path(self) -> str:
        """Directory part without the trailing slash ("/" stays "/")."""
        if self.path == "/":
            return "/"
        return self.path[:-1] if self.path.endswith("/") else self.path

    @property
    def file_path(self) -> str:
        return self.path + self.file_name

    @property
    def file_path_no_ext(self) -> str:
        return self.path + self.file_name_no_ext

    @property
    def file_path_with_anchor_no_ext(self) -> str:
        if self.anchor is None:
            return self.file_path_no_ext
        return f"{self.file_path_no_ext}#{self.anchor}"

    @property
    def is_wiki_dir_path(self) -> bool:
        """True when some directory segment is a cloned GitHub wiki (``Name.wiki``)."""
        return any(
            len(segment) > len(WIKI_DIR_SUFFIX) and segment.endswith(WIKI_DIR_SUFFIX)
            for segment in self.path.split("/")
        )

    def with_ext(self, ext: str) -> "PathInfo":
        """Return a copy whose file name carries ``ext`` (no dot) instead of the current one."""
        file_name = f"{self.file_name_no_ext}.{ext}" if ext else self.file_name_no_ext
        anchor_part = f"#{self.anchor}" if self.anchor is not None else ""
        return replace(self, file_name=file_name, full_path=f"{self.path}{file_name}{anchor_part}")

    def __str__(self) -> str:
        return self.full_path
