"""Link resolution API.

Command functions (``cmd_resolve``, ``cmd_render``) live in their own
modules and are imported from there.
"""

from .FileRef import FileRef
from .FileReferenceLink import FileReferenceLink
from .FileReferenceList import FileReferenceList
from .FileReferenceListQuery import FileReferenceListQuery
from .GitHubLinkResolver import GitHubLinkResolver
from .GitHubRepo import GitHubRepo
from .is_external_reference import is_external_reference
from .LinkMatcher import LinkMatcher
from .LinkRef import LinkRef
from .LinkResolver import LinkResolver
from .PathInfo import PathInfo, PathKind
from .ProjectFiles import ProjectFiles
from .resolve_relative_link import resolve_relative_link
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
from .scan_project import scan_project

__all__ = [
    "LOOSE_MATCH",
    "NONE",
    "ONLY_LOCAL",
    "ONLY_MARKDOWN",
    "ONLY_REMOTE",
    "ONLY_URI",
    "PREFER_LOCAL",
    "WANT_WIKI_REF",
    "FileRef",
    "FileReferenceLink",
    "FileReferenceList",
    "FileReferenceListQuery",
    "GitHubLinkResolver",
    "GitHubRepo",
    "LinkMatcher",
    "LinkRef",
    "LinkResolver",
    "PathInfo",
    "PathKind",
    "ProjectFiles",
    "ResolveFlags",
    "ResolveResult",
    "is_external_reference",
    "resolve_relative_link",
    "scan_project",
]
