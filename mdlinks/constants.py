"""Shared constants for mdlinks dot-directories and artefact locations."""

MDLINKS_HOME_EXT = ".mdlinks"  # user-level state/config directory suffix

MDLINKS_HOME_DISPLAY = f"~/{MDLINKS_HOME_EXT}"  # user-readable path hint

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "mdlinks.log"

# Directories never descended into when scanning a project
DEFAULT_EXCLUDE_DIRNAMES = [".git", ".hg", ".svn", ".idea", "node_modules", "__pycache__", MDLINKS_HOME_EXT]
