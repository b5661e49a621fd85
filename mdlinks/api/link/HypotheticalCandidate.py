"""HypotheticalCandidate model (UNO: single model)."""

from dataclasses import dataclass

from ._constants import HYPOTHETICAL_GITHUB_LINK, HYPOTHETICAL_WIKI_PAGE
from .GitHubRepo import GitHubRepo


@dataclass(frozen=True)
class HypotheticalCandidate:
    """A match that does not exist on disk.

    Either a wiki page the author is about to create (``kind == "wiki_page"``,
    ``path`` is where it would be created) or a GitHub repository page such
    as ``issues`` (``kind == "github_link"``, ``path`` is empty).
    """

    name: str
    kind: str
    repo: GitHubRepo | None
    path: str = ""

    @property
    def is_wiki_page(self) -> bool:
        return self.kind == HYPOTHETICAL_WIKI_PAGE

    @property
    def is_github_link(self) -> bool:
        return self.kind == HYPOTHETICAL_GITHUB_LINK
