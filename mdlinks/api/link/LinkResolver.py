"""LinkResolver (UNO: single class)."""

from __future__ import annotations

__all__ = ["LinkResolver"]

import logging
import re
from dataclasses import replace

from ..URI import URI
from ._constants import MARKDOWN_EXTENSIONS
from .Candidate import Candidate
from .ExistingCandidate import ExistingCandidate
from .FileRef import FileRef
from .FileReferenceListQuery import FileReferenceListQuery
from .HypotheticalCandidate import HypotheticalCandidate
from .is_external_reference import is_malformed_reference
from .LinkMatcher import LinkMatcher
from .LinkRef import LinkRef
from .ProjectFiles import ProjectFiles
from .ResolveFlags import (
    LOOSE_MATCH,
    NONE,
    ONLY_LOCAL,
    ONLY_MARKDOWN,
    ONLY_REMOTE,
    ONLY_URI,
    PREFER_LOCAL,
    WANT_WIKI_REF,
    ResolveFlags,
)
from .ResolveResult import ResolveResult

logger = logging.getLogger(__name__)

_URI_LIKE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]+:")


class LinkResolver:
    """Resolve a link typed in a markdown file to ranked, rendered matches.

    The resolver only reads the ``ProjectFiles`` snapshot. ``last_matcher``
    is the single piece of per-call state; use ``multi_resolve_with_matcher``
    when one resolver is shared.

    Example:
        resolver = GitHubLinkResolver(project, "/src/Project/Project.wiki/Home.md")
        resolver.multi_resolve(resolver.link_ref("Other Page"), LinkResolver.LOOSE_MATCH)
    """

    NONE = NONE
    PREFER_LOCAL = PREFER_LOCAL
    ONLY_REMOTE = ONLY_REMOTE
    ONLY_LOCAL = ONLY_LOCAL
    ONLY_URI = ONLY_URI
    LOOSE_MATCH = LOOSE_MATCH
    WANT_WIKI_REF = WANT_WIKI_REF
    ONLY_MARKDOWN = ONLY_MARKDOWN

    # Wiki matching and GitHub virtual links are turned on by GitHubLinkResolver
    git_hub_rules = False

    def __init__(
        self,
        project: ProjectFiles,
        containing_file: FileRef | str,
        markdown_extensions: tuple[str, ...] = MARKDOWN_EXTENSIONS,
    ):
        self.project = project
        self.containing_file = containing_file if isinstance(containing_file, FileRef) else FileRef(containing_file)
        self.markdown_extensions = tuple(ext.lower().lstrip(".") for ext in markdown_extensions)
        self._last_matcher: LinkMatcher | None = None

    @property
    def last_matcher(self) -> LinkMatcher | None:
        """Matcher of the most recent ``multi_resolve``/``resolve`` call."""
        return self._last_matcher

    def link_ref(self, target: str, anchor: str | None = None) -> LinkRef:
        return LinkRef(self.containing_file, target, anchor=anchor)

    # Public operations
    def resolve(self, link_ref: LinkRef | str, flags: ResolveFlags = NONE) -> str | None:
        """Best match or None."""
        matches = self.multi_resolve(link_ref, flags)
        return matches[0] if matches else None

    def multi_resolve(self, link_ref: LinkRef | str, flags: ResolveFlags = NONE) -> list[str]:
        """All matches, best first. Never raises for a LinkRef; no match is ``[]``."""
        result = self.multi_resolve_with_matcher(link_ref, flags)
        self._last_matcher = result.matcher
        return result.matches

    def multi_resolve_with_matcher(self, link_ref: LinkRef | str, flags: ResolveFlags = NONE) -> ResolveResult:
        if isinstance(link_ref, str):
            link_ref = self.link_ref(link_ref)

        if link_ref.is_external:
            return ResolveResult(self._resolve_external(link_ref, flags), None)

        candidates, matcher = self.match_candidates(link_ref, flags)
        matches = self.render(candidates, link_ref, flags)
        logger.debug(
            f"Resolved {link_ref.target!r} from {link_ref.containing_file} [{flags!r}]: "
            f"{len(candidates)} candidates, {len(matches)} matches"
        )
        return ResolveResult(matches, matcher)

    def _resolve_external(self, link_ref: LinkRef, flags: ResolveFlags) -> list[str]:
        if flags.only_local:
            return []
        target = link_ref.target
        if flags.only_uri:
            if target.startswith("//"):
                return [f"https:{target}"]
            if is_malformed_reference(target) or not _URI_LIKE.match(target):
                return []
        return [target]

    # Matching
    def base_query(self, link_ref: LinkRef, flags: ResolveFlags, expected_dir: str) -> FileReferenceListQuery:
        """Scope, policy and name filter for ``link_ref``; extensions are applied by the caller."""
        query = self.project.list_project_files().query(self.project, link_ref.containing_file)
        if self.git_hub_rules:
            query = query.git_hub_wiki_rules()
        query = query.same_git_hub_repo(also_dir=expected_dir)
        if flags.markdown_only:
            query = query.want_markdown_files()
        return query.match_link_ref_no_ext(link_ref.file_name_no_ext, loose=flags.loose_match)

    def extension_passes(self, link_ref: LinkRef, flags: ResolveFlags, wiki_rules: bool) -> list[tuple[str, ...]]:
        """Extension sets to try in order; the first set with any match wins."""
        markdown = self.markdown_extensions
        if link_ref.has_ext:
            exact = (link_ref.ext,)
            family = markdown if link_ref.ext in markdown else exact
            return [exact, family] if flags.loose_match and family != exact else [exact]
        if link_ref.is_wiki_link:
            return [markdown]
        if wiki_rules and not link_ref.has_dir:
            # Page link: GitHub drops the extension of wiki pages
            return [markdown, ("",)]
        return [("",), markdown] if flags.loose_match else [("",)]

    def rank(
        self, files: list[FileRef], link_ref: LinkRef, query: FileReferenceListQuery, expected_dir: str
    ) -> list[FileRef]:
        def key(f: FileRef) -> tuple[int, int, int, str]:
            exact = 0 if query.name_matches(f, link_ref.file_name_no_ext) else 1
            if f.dir_path == expected_dir:
                proximity = 0
            elif f.is_under(expected_dir):
                proximity = 1
            else:
                proximity = 2
            return exact, proximity, len(f.relative_to_dir(expected_dir).split("/")), f.path

        return sorted(files, key=key)

    def match_candidates(self, link_ref: LinkRef, flags: ResolveFlags) -> tuple[list[Candidate], LinkMatcher]:
        """Ranked existing files, then hypothetical candidates, plus the rule that selected them."""
        repo = self.project.repo_for_path(link_ref.containing_file.path)
        expected_dir = link_ref.expected_dir(repo.root_path if repo is not None else None)
        query = self.base_query(link_ref, flags, expected_dir)
        hits, extensions = self.first_pass_hits(query, link_ref, flags)

        if not hits and self.is_dotted_page_name(link_ref, query.wiki_rules):
            # Release-v1.2 names the page Release-v1.2.md
            page_ref = replace(link_ref, is_wiki_link=True)
            page_query = self.base_query(page_ref, flags, expected_dir)
            page_hits, page_extensions = self.first_pass_hits(page_query, page_ref, flags)
            if page_hits:
                link_ref, query, hits, extensions = page_ref, page_query, page_hits, page_extensions

        candidates: list[Candidate] = [ExistingCandidate(f) for f in self.rank(hits, link_ref, query, expected_dir)]
        if not flags.only_local:
            candidates.extend(self.hypothetical_candidates(link_ref, flags, query, has_existing=bool(candidates)))

        matcher = LinkMatcher.build(
            link_ref=link_ref.target,
            name=link_ref.file_name_no_ext,
            extensions=extensions,
            scope_roots=repo.group_roots if repo is not None else (),
            expected_dir=expected_dir,
            loose=flags.loose_match,
            wiki_rules=query.wiki_rules,
        )
        return candidates, matcher

    def first_pass_hits(
        self, query: FileReferenceListQuery, link_ref: LinkRef, flags: ResolveFlags
    ) -> tuple[list[FileRef], tuple[str, ...]]:
        """Files of the first extension pass that names any, with that pass's extensions."""
        named = list(query.all())
        passes = self.extension_passes(link_ref, flags, query.wiki_rules)
        for extensions in passes:
            hits = [f for f in named if f.ext in extensions]
            if hits:
                return hits, extensions
        return [], passes[0]

    def is_dotted_page_name(self, link_ref: LinkRef, wiki_rules: bool) -> bool:
        """A bare page link whose last dot is part of the page name, not a markdown extension."""
        return (
            wiki_rules
            and not link_ref.is_wiki_link
            and not link_ref.has_dir
            and link_ref.has_ext
            and link_ref.ext not in self.markdown_extensions
        )

    def hypothetical_candidates(
        self, link_ref: LinkRef, flags: ResolveFlags, query: FileReferenceListQuery, has_existing: bool
    ) -> list[HypotheticalCandidate]:
        """Candidates that do not exist on disk. None without GitHub rules."""
        return []

    # Rendering
    def render(self, candidates: list[Candidate], link_ref: LinkRef, flags: ResolveFlags) -> list[str]:
        """Render candidates as local forms, then remote forms, without duplicates."""
        rendered: list[str | None] = []
        if flags.wants_local_forms:
            rendered.extend(self.local_form(c, link_ref, flags) for c in candidates)
        if flags.wants_remote_forms:
            rendered.extend(self.remote_form(c, link_ref, flags) for c in candidates)
        return list(dict.fromkeys(r for r in rendered if r))

    def local_form(self, candidate: Candidate, link_ref: LinkRef, flags: ResolveFlags) -> str | None:
        if isinstance(candidate, HypotheticalCandidate) and candidate.is_github_link:
            if flags.only_uri:
                return self._with_anchor(candidate.repo.github_link_url(candidate.name) if candidate.repo else None, link_ref)
            return self.github_link_text(candidate, link_ref)

        path = candidate.path
        if flags.only_uri:
            return URI.from_path(path, link_ref.anchor).value
        if flags.want_wiki_ref and self.project.is_wiki_page(FileRef(path, exists=False)):
            return FileRef(path).file_name_no_ext
        return path

    def remote_form(self, candidate: Candidate, link_ref: LinkRef, flags: ResolveFlags) -> str | None:
        if isinstance(candidate, ExistingCandidate):
            path = candidate.path
            repo = self.project.repo_for_path(path)
            if repo is None or not repo.has_remote or not self.project.is_under_vcs(path):
                return None
        else:
            repo = candidate.repo
            if repo is None or not repo.has_remote:
                return None
            if candidate.is_github_link:
                if flags.remote_as_url:
                    return self._with_anchor(repo.github_link_url(candidate.name), link_ref)
                return candidate.name
            path = candidate.path

        if flags.remote_as_url:
            return repo.remote_url_for_file(path, link_ref.anchor)
        return repo.remote_relative_path(path)

    def github_link_text(self, candidate: HypotheticalCandidate, link_ref: LinkRef) -> str:
        """Relative link from the containing file to a GitHub repository page."""
        containing = link_ref.containing_file
        repo = candidate.repo
        if repo is None or repo.is_wiki or self.project.is_wiki_page(containing):
            # Wiki pages are served at {base}/wiki/<page>
            return f"../{candidate.name}"
        rel = repo.relative_path(containing.dir_path) or "."
        depth = 0 if rel == "." else len(rel.split("/"))
        # Main repo files are served at {base}/blob/<branch>/<rel>
        return "../" * (depth + 2) + candidate.name

    @staticmethod
    def _with_anchor(url: str | None, link_ref: LinkRef) -> str | None:
        if url is None or link_ref.anchor is None:
            return url
        return f"{url}#{link_ref.anchor}"
