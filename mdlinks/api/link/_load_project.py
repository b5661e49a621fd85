"""Load configuration and scan the configured project (private)."""

from ...utils import logger
from ..config.MdLinksConfig import MdLinksConfig
from .ProjectFiles import ProjectFiles
from .scan_project import scan_project


def _load_project(root: str | None = None) -> tuple[MdLinksConfig, ProjectFiles]:
    """Return the effective config and a fresh project snapshot.

    Raises:
        ConfigError: If no root is given and the config file is missing or invalid
        NotADirectoryError: If the project root is not a directory
    """
    config = MdLinksConfig.for_root(root) if root is not None else MdLinksConfig.load()
    logger.set_level(config.log.level)
    project = scan_project(
        config.project.root,
        exclude_dirnames=config.project.exclude_dirnames,
        repos=[repo.to_github_repo() for repo in config.project.repos],
        untracked_globs=config.project.untracked_globs,
    )
    return config, project
