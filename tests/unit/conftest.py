"""Unit test fixtures.

Shared fixtures and helpers live in tests/conftest.py.
"""

# Re-export commonly used helpers from root conftest
from tests.conftest import ROOT, WIKI, markdown_test_project, run_cmd

__all__ = ["ROOT", "WIKI", "markdown_test_project", "run_cmd"]
