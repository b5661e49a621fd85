"""Config API module."""

from .ConfigError import ConfigError
from .MdLinksConfig import MdLinksConfig

__all__ = ["ConfigError", "MdLinksConfig"]
