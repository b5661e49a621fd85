"""Resolution flags (UNO: single model)."""

from __future__ import annotations

__all__ = [
    "LOOSE_MATCH",
    "NONE",
    "ONLY_LOCAL",
    "ONLY_MARKDOWN",
    "ONLY_REMOTE",
    "ONLY_URI",
    "PREFER_LOCAL",
    "WANT_WIKI_REF",
    "ResolveFlags",
]

from collections.abc import Iterable
from dataclasses import dataclass, fields

_FLAG_NAMES = {
    "prefer_local": "PREFER_LOCAL",
    "only_remote": "ONLY_REMOTE",
    "only_local": "ONLY_LOCAL",
    "only_uri": "ONLY_URI",
    "loose_match": "LOOSE_MATCH",
    "want_wiki_ref": "WANT_WIKI_REF",
    "markdown_only": "ONLY_MARKDOWN",
}


@dataclass(frozen=True)
class ResolveFlags:
    """Independent selectors controlling how a link is resolved and rendered.

    Combine with ``|``: ``ONLY_URI | LOOSE_MATCH``. ``ONLY_LOCAL`` and
    ``ONLY_REMOTE`` exclude each other and raise ValueError when combined.
    """

    prefer_local: bool = False
    only_remote: bool = False
    only_local: bool = False
    only_uri: bool = False
    loose_match: bool = False
    want_wiki_ref: bool = False
    markdown_only: bool = False

    def __post_init__(self):
        if self.only_local and self.only_remote:
            raise ValueError("ONLY_LOCAL and ONLY_REMOTE cannot be combined")

    def __or__(self, other: ResolveFlags) -> ResolveFlags:
        if not isinstance(other, ResolveFlags):
            return NotImplemented
        return ResolveFlags(**{f.name: getattr(self, f.name) or getattr(other, f.name) for f in fields(self)})

    def __contains__(self, other: ResolveFlags) -> bool:
        return all(getattr(self, f.name) for f in fields(other) if getattr(other, f.name))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ResolveFlags:
        """Build flags from constant names such as ``"ONLY_URI"``."""
        by_name = {v: k for k, v in _FLAG_NAMES.items()}
        values: dict[str, bool] = {}
        for name in names:
            key = by_name.get(name.upper())
            if key is None:
                raise ValueError(f"Unknown resolve flag: {name}")
            values[key] = True
        return cls(**values)

    @property
    def names(self) -> list[str]:
        return [_FLAG_NAMES[f.name] for f in fields(self) if getattr(self, f.name)]

    # Rendering axes
    @property
    def wants_local_forms(self) -> bool:
        return self.only_local or self.prefer_local or not self.only_remote

    @property
    def wants_remote_forms(self) -> bool:
        return not self.only_local and (self.only_remote or self.prefer_local)

    @property
    def remote_as_url(self) -> bool:
        """Remote forms are full URLs; ONLY_REMOTE alone gives repository-relative paths."""
        return self.only_uri or self.prefer_local

    def __repr__(self) -> str:
        return " | ".join(self.names) or "NONE"


NONE = ResolveFlags()
PREFER_LOCAL = ResolveFlags(prefer_local=True)
ONLY_REMOTE = ResolveFlags(only_remote=True)
ONLY_LOCAL = ResolveFlags(only_local=True)
ONLY_URI = ResolveFlags(only_uri=True)
LOOSE_MATCH = ResolveFlags(loose_match=True)
WANT_WIKI_REF = ResolveFlags(want_wiki_ref=True)
ONLY_MARKDOWN = ResolveFlags(markdown_only=True)
