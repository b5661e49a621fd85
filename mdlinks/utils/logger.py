import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME, MDLINKS_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(mdlinks_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mdlinks logging.

    Args:
        mdlinks_home: Path to mdlinks home directory. If None, derived from environment.
        level: Logging level name for the ``mdlinks`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if mdlinks_home is None:
        env_home = os.environ.get("MDLINKS_HOME")
        mdlinks_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / MDLINKS_HOME_EXT

    # Ensure directory exists
    mdlinks_home.mkdir(parents=True, exist_ok=True)
    log_file = mdlinks_home / LOG_FILE_NAME

    root_logger = logging.getLogger("mdlinks")
    root_logger.setLevel(_level_name(level))

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach mdlinks handlers so the next get_logger() reconfigures."""
    global _CONFIGURED
    root_logger = logging.getLogger("mdlinks")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    _CONFIGURED = False


def set_level(level: str) -> None:
    """Apply a configured level name to the ``mdlinks`` logger, configuring it first if needed."""
    if not _CONFIGURED:
        configure_logging()
    logging.getLogger("mdlinks").setLevel(_level_name(level))


def _level_name(level: str) -> str:
    return "WARNING" if level == "WARN" else level
