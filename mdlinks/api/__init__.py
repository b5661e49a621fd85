"""API module for mdlinks.

Command functions defined here (``cmd_*``) are the single source of truth for
the CLI. Each returns a StageResult following the 4-stage pattern.
"""

__all__ = []
