"""ResolveResult model (UNO: single model)."""

from dataclasses import dataclass, field

from .LinkMatcher import LinkMatcher


@dataclass(frozen=True)
class ResolveResult:
    """Ordered, de-duplicated matches and the matcher that produced them.

    ``matcher`` is None for external targets, which are never matched against files.
    """

    matches: list[str] = field(default_factory=list)
    matcher: LinkMatcher | None = None

    @property
    def first(self) -> str | None:
        return self.matches[0] if self.matches else None
