"""LinkMatcher diagnostic model (UNO: single model)."""

from __future__ import annotations

__all__ = ["LinkMatcher"]

import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from ._wiki_name import normalize_wiki_name


def _name_pattern(name: str, wiki_rules: bool) -> str:
    if not wiki_rules:
        return re.escape(name)
    return "".join("[- ]" if ch == "-" else re.escape(ch) for ch in normalize_wiki_name(name))


def _ext_pattern(extensions: Iterable[str]) -> str:
    exts = [e for e in extensions if e]
    optional = "" in extensions
    if not exts:
        return ""
    pattern = r"\.(?:" + "|".join(re.escape(e) for e in exts) + ")"
    return f"(?:{pattern})?" if optional else pattern


@dataclass(frozen=True)
class LinkMatcher:
    """The rule the last resolution applied, for diagnostics and completion.

    ``link_exact_match`` and ``link_loose_match`` are regular expressions over
    absolute posix paths. ``extensions`` lists the extensions accepted on the
    pass that produced the result (``""`` means no extension).
    """

    link_ref: str
    link_exact_match: str
    link_loose_match: str
    extensions: tuple[str, ...]
    case_insensitive: bool
    wiki_rules: bool
    loose: bool
    expected_dir: str

    @classmethod
    def build(
        cls,
        link_ref: str,
        name: str,
        extensions: Iterable[str],
        scope_roots: Iterable[str] = (),
        expected_dir: str = "",
        loose: bool = False,
        wiki_rules: bool = False,
    ) -> LinkMatcher:
        extensions = tuple(extensions)
        roots = [r.rstrip("/") for r in scope_roots]
        prefix = "^(?:" + "|".join(re.escape(r) for r in roots) + ")/(?:.*/)?" if roots else "^(?:.*/)?"
        flags = "(?i)" if wiki_rules else ""
        name_pat = _name_pattern(name, wiki_rules)
        ext_pat = _ext_pattern(extensions)
        return cls(
            link_ref=link_ref,
            link_exact_match=f"{flags}{prefix}{name_pat}{ext_pat}$",
            link_loose_match=f"{flags}{prefix}{name_pat}[^/]*{ext_pat}$",
            extensions=extensions,
            case_insensitive=wiki_rules,
            wiki_rules=wiki_rules,
            loose=loose,
            expected_dir=expected_dir,
        )

    @property
    def pattern(self) -> str:
        """The regex that was applied."""
        return self.link_loose_match if self.loose else self.link_exact_match

    def to_dict(self) -> dict:
        data = asdict(self)
        data["extensions"] = list(self.extensions)
        return data
