"""GitHubLinkResolver (UNO: single class)."""

from __future__ import annotations

__all__ = ["GitHubLinkResolver"]

import posixpath

from ._constants import GITHUB_LINKS, HYPOTHETICAL_GITHUB_LINK, HYPOTHETICAL_WIKI_PAGE, MARKDOWN_EXTENSIONS, WIKI_DIR_SUFFIX
from ._wiki_name import wiki_page_file_name
from .ExtensionFamilies import github_links_matching
from .FileRef import FileRef
from .FileReferenceListQuery import FileReferenceListQuery
from .GitHubRepo import GitHubRepo
from .HypotheticalCandidate import HypotheticalCandidate
from .LinkRef import LinkRef
from .LinkResolver import LinkResolver
from .ProjectFiles import ProjectFiles
from .ResolveFlags import ResolveFlags


class GitHubLinkResolver(LinkResolver):
    """LinkResolver following GitHub wiki and repository browsing conventions.

    From a wiki page, page names match case-insensitively with dash and space
    equivalent and without extension. Bare names may also resolve to GitHub
    repository pages (``issues``, ``pulls``, ...) and, under loose matching,
    to a wiki page that does not exist yet.
    """

    git_hub_rules = True

    def __init__(
        self,
        project: ProjectFiles,
        containing_file: FileRef | str,
        markdown_extensions: tuple[str, ...] = MARKDOWN_EXTENSIONS,
        github_links: tuple[str, ...] = GITHUB_LINKS,
    ):
        super().__init__(project, containing_file, markdown_extensions=markdown_extensions)
        self.github_links = tuple(github_links)

    def hypothetical_candidates(
        self, link_ref: LinkRef, flags: ResolveFlags, query: FileReferenceListQuery, has_existing: bool
    ) -> list[HypotheticalCandidate]:
        name = link_ref.file_name_no_ext
        repo = query.source_repo()
        candidates: list[HypotheticalCandidate] = []

        if not has_existing and query.wiki_rules and not link_ref.has_ext and name and flags.loose_match:
            path = f"{self.wiki_root(link_ref.containing_file, repo)}/{wiki_page_file_name(name)}.md"
            candidates.append(
                HypotheticalCandidate(
                    name=name,
                    kind=HYPOTHETICAL_WIKI_PAGE,
                    repo=self.project.repo_for_path(path),
                    path=path,
                )
            )

        if (
            not link_ref.has_ext
            and not link_ref.has_dir
            and not link_ref.is_wiki_link
            and repo is not None
            and repo.has_remote
        ):
            candidates.extend(
                HypotheticalCandidate(name=link, kind=HYPOTHETICAL_GITHUB_LINK, repo=repo)
                for link in github_links_matching(name, flags.loose_match, self.github_links)
            )
        return candidates

    @staticmethod
    def wiki_root(containing_file: FileRef, repo: GitHubRepo | None) -> str:
        """Directory new wiki pages are created in."""
        if repo is not None and repo.is_wiki:
            return repo.root_path
        dir_path = containing_file.dir_path
        while dir_path != "/":
            if posixpath.basename(dir_path).endswith(WIKI_DIR_SUFFIX):
                return dir_path
            dir_path = posixpath.dirname(dir_path)
        return containing_file.dir_path
