"""Get mdlinks home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MDLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mdlinks home directory path or path under it.

    Checks MDLINKS_HOME environment variable first, defaults to ~/.mdlinks if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mdlinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mdlinks/config.json")
    """
    home_env = os.environ.get("MDLINKS_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / MDLINKS_HOME_EXT
    return home / Path(*parts) if parts else home
