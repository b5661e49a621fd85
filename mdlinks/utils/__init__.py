"""mdlinks utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .get_logger import get_logger
from .get_package_version import get_package_version
from .normalize_path import normalize_path

__all__ = [
    "get_logger",
    "get_package_version",
    "normalize_path",
]
