"""Unit tests for get_home_dir and get_config_path."""

from pathlib import Path

import pytest

from mdlinks.api.config.get_config_path import get_config_path
from mdlinks.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


def test_get_home_dir_from_env(mdlinks_home):
    assert get_home_dir() == mdlinks_home.resolve()
    assert get_home_dir("a", "b.txt") == mdlinks_home.resolve() / "a" / "b.txt"


def test_get_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("MDLINKS_HOME")
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_home_dir() == tmp_path / ".mdlinks"


def test_get_config_path(mdlinks_home):
    assert get_config_path() == mdlinks_home.resolve() / "config.json"
