"""FileRef model (UNO: single model)."""

import posixpath
from dataclasses import dataclass, field
from pathlib import Path

from .PathInfo import PathInfo


@dataclass(frozen=True)
class FileRef:
    """A project file that exists, or might exist, at an absolute posix path."""

    path: str
    exists: bool = True
    path_info: PathInfo = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        normalized = posixpath.normpath(str(self.path).replace("\\", "/"))
        if not normalized.startswith("/"):
            raise ValueError(f"FileRef path must be absolute: {self.path}")
        object.__setattr__(self, "path", normalized)
        object.__setattr__(self, "path_info", PathInfo.parse(normalized, anchor=False))

    @classmethod
    def from_path(cls, path: Path, exists: bool = True) -> "FileRef":
        return cls(path.as_posix(), exists=exists)

    @property
    def file_name(self) -> str:
        return self.path_info.file_name

    @property
    def file_name_no_ext(self) -> str:
        return self.path_info.file_name_no_ext

    @property
    def ext(self) -> str:
        return self.path_info.ext

    @property
    def dir_path(self) -> str:
        return self.path_info.dir_path

    @property
    def is_markdown(self) -> bool:
        return self.path_info.is_markdown_ext

    @property
    def is_image(self) -> bool:
        return self.path_info.is_image_ext

    @property
    def is_wiki_page(self) -> bool:
        """Markdown file living under a cloned GitHub wiki directory."""
        return self.is_markdown and self.path_info.is_wiki_dir_path

    def is_under(self, dir_path: str) -> bool:
        """True when this file is at or below ``dir_path``."""
        if dir_path == "/":
            return True
        return self.dir_path == dir_path or self.path.startswith(dir_path.rstrip("/") + "/")

    def relative_to_dir(self, dir_path: str) -> str:
        """Posix path of this file relative to ``dir_path`` (may contain ``..``)."""
        return posixpath.relpath(self.path, dir_path)

    def __str__(self) -> str:
        return self.path
