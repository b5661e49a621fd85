"""Build a ProjectFiles snapshot from a directory tree."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from ...constants import DEFAULT_EXCLUDE_DIRNAMES
from ...utils import get_logger, normalize_path
from .FileRef import FileRef
from .GitHubRepo import GitHubRepo
from .ProjectFiles import ProjectFiles


def _walk(directory: Path, exclude: frozenset[str], repo_roots: list[Path]) -> Iterator[Path]:
    if (directory / ".git").exists():
        repo_roots.append(directory)
    try:
        children = sorted(directory.iterdir())
    except OSError:
        return
    for child in children:
        if child.is_dir() and not child.is_symlink():
            if child.name not in exclude:
                yield from _walk(child, exclude, repo_roots)
        elif child.is_file():
            yield child


def scan_project(
    root: Path | str,
    exclude_dirnames: Iterable[str] = DEFAULT_EXCLUDE_DIRNAMES,
    repos: Iterable[GitHubRepo] = (),
    untracked_globs: Iterable[str] = (),
) -> ProjectFiles:
    """Snapshot every file under ``root`` together with its git repositories.

    Repositories are discovered from ``.git`` entries and read from their
    ``.git/config``. Entries in ``repos`` replace discovered repositories
    with the same root, or add ones that have no ``.git`` on disk.

    Raises:
        NotADirectoryError: If root is not a directory.
    """
    logger = get_logger("link.scan")
    root_path = normalize_path(root)
    if not root_path.is_dir():
        raise NotADirectoryError(f"Project root is not a directory: {root_path}")

    repo_roots: list[Path] = []
    files = [FileRef.from_path(p) for p in _walk(root_path, frozenset(exclude_dirnames), repo_roots)]

    by_root = {r.as_posix(): GitHubRepo.from_git_dir(r) for r in repo_roots}
    for repo in repos:
        by_root[repo.root_path] = repo

    logger.debug(f"Scanned {root_path}: {len(files)} files, {len(by_root)} repositories")
    return ProjectFiles(files, repos=by_root.values(), untracked=untracked_globs)
