"""GitHub repository metadata (UNO: single class)."""

from __future__ import annotations

__all__ = ["GitHubRepo", "normalize_remote_url"]

import configparser
import posixpath
import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from ._constants import DEFAULT_BRANCH, MARKDOWN_EXTENSIONS, WIKI_DIR_SUFFIX

# git@github.com:user/repo.git, ssh://git@github.com/user/repo.git, https://user@github.com/user/repo.git
_SCP_REMOTE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")
_URL_REMOTE = re.compile(r"^(?:https?|ssh|git)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$")


def normalize_remote_url(url: str) -> tuple[str | None, bool]:
    """Turn a git remote URL into a browsable https base URL.

    Returns:
        Tuple of (base_url, is_wiki). base_url is None for remotes that are
        not hosted (local paths, unknown forms).
    """
    url = url.strip()
    match = _URL_REMOTE.match(url)
    if match is None and "://" not in url:
        match = _SCP_REMOTE.match(url)
    if match is None:
        return None, False

    path = match.group("path").rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    is_wiki = path.endswith(WIKI_DIR_SUFFIX)
    if is_wiki:
        path = path[: -len(WIKI_DIR_SUFFIX)]
    if not path:
        return None, False
    return f"https://{match.group('host')}/{path}", is_wiki


@dataclass(frozen=True)
class GitHubRepo:
    """A repository root found in the project, main code repo or wiki.

    A main repo and its wiki form one repository group. The wiki may be
    cloned inside the main checkout (``Project/Project.wiki``) or beside it
    (``src/Project`` and ``src/Project.wiki``).
    """

    root_path: str
    remote_base_url: str | None = None
    is_wiki: bool = False
    branch: str = DEFAULT_BRANCH

    def __post_init__(self):
        object.__setattr__(self, "root_path", posixpath.normpath(str(self.root_path).replace("\\", "/")))
        if self.remote_base_url is not None:
            object.__setattr__(self, "remote_base_url", self.remote_base_url.rstrip("/"))

    @classmethod
    def from_git_dir(cls, root: Path, is_wiki: bool | None = None) -> GitHubRepo:
        """Build repo metadata from ``<root>/.git``.

        Prefers the ``origin`` remote, otherwise the first remote listed.
        Unreadable or missing metadata yields a repo without a remote.
        """
        git_dir = _find_git_dir(root)
        base_url: str | None = None
        remote_is_wiki = False
        branch = DEFAULT_BRANCH

        if git_dir is not None:
            parser = configparser.ConfigParser(strict=False, interpolation=None, allow_no_value=True)
            try:
                parser.read(git_dir / "config", encoding="utf-8")
            except (configparser.Error, OSError, UnicodeDecodeError):
                parser = configparser.ConfigParser(interpolation=None)

            remotes = [s for s in parser.sections() if s.startswith("remote ")]
            remotes.sort(key=lambda s: s != 'remote "origin"')
            for section in remotes:
                url = parser.get(section, "url", fallback="")
                if url:
                    base_url, remote_is_wiki = normalize_remote_url(url)
                    break

            try:
                head = (git_dir / "HEAD").read_text(encoding="utf-8").strip()
                if head.startswith("ref: refs/heads/"):
                    branch = head[len("ref: refs/heads/") :]
            except (OSError, UnicodeDecodeError):
                pass

        if is_wiki is None:
            is_wiki = remote_is_wiki or root.name.endswith(WIKI_DIR_SUFFIX)
        return cls(root_path=root.as_posix(), remote_base_url=base_url, is_wiki=is_wiki, branch=branch)

    # Membership
    @property
    def name(self) -> str:
        return posixpath.basename(self.root_path)

    @property
    def group_roots(self) -> tuple[str, ...]:
        """Directories holding every file of this repository group."""
        parent = posixpath.dirname(self.root_path)
        if self.is_wiki:
            if not self.name.endswith(WIKI_DIR_SUFFIX):
                return (self.root_path,)
            main_name = self.name[: -len(WIKI_DIR_SUFFIX)]
            if posixpath.basename(parent) == main_name:
                return (parent,)
            return (posixpath.join(parent, main_name), self.root_path)
        return (self.root_path, self.root_path + WIKI_DIR_SUFFIX)

    def contains(self, path: str) -> bool:
        return _is_under(path, self.root_path)

    def in_group(self, path: str) -> bool:
        return any(_is_under(path, root) for root in self.group_roots)

    def relative_path(self, path: str) -> str | None:
        """Posix path relative to the repo root, None if outside the repo."""
        if not self.contains(path):
            return None
        return posixpath.relpath(path, self.root_path)

    # Remote URLs
    @property
    def has_remote(self) -> bool:
        return self.remote_base_url is not None

    def repo_url_for(self, relative_path: str) -> str | None:
        """Browsable URL for a repo-relative path, None without a remote."""
        if self.remote_base_url is None:
            return None
        prefix = f"{self.remote_base_url}/wiki" if self.is_wiki else f"{self.remote_base_url}/blob/{self.branch}"
        return f"{prefix}/{quote(relative_path)}" if relative_path else prefix

    def remote_relative_path(self, path: str) -> str | None:
        """How the remote addresses a local file.

        Wiki pages are flattened to their page name without extension.
        """
        rel = self.relative_path(path)
        if rel is None:
            return None
        file_name = posixpath.basename(rel)
        stem, dot, ext = file_name.rpartition(".")
        if self.is_wiki and dot and ext.lower() in MARKDOWN_EXTENSIONS:
            return stem
        return rel

    def remote_url_for_file(self, path: str, anchor: str | None = None) -> str | None:
        rel = self.remote_relative_path(path)
        if rel is None:
            return None
        url = self.repo_url_for(rel)
        if url is not None and anchor is not None:
            url += f"#{anchor}"
        return url

    def github_link_url(self, name: str) -> str | None:
        """URL of a repository page such as ``issues`` or ``pulls``."""
        if self.remote_base_url is None:
            return None
        return f"{self.remote_base_url}/{name}"


def _is_under(path: str, root: str) -> bool:
    return path == root or path.startswith(root.rstrip("/") + "/")


def _find_git_dir(root: Path) -> Path | None:
    dot_git = root / ".git"
    if dot_git.is_dir():
        return dot_git
    if dot_git.is_file():
        # Worktrees and submodules: "gitdir: <path>"
        try:
            content = dot_git.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            return None
        if content.startswith("gitdir:"):
            git_dir = Path(content[len("gitdir:") :].strip())
            if not git_dir.is_absolute():
                git_dir = root / git_dir
            return git_dir if git_dir.is_dir() else None
    return None
