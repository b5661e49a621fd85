"""Output schemas for mdlinks API commands.

Importing this package registers every schema.
"""

from . import config, link  # noqa: F401
from ._registry import get_output_schema, register_output_schema

__all__ = ["get_output_schema", "register_output_schema"]
