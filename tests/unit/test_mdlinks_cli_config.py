"""CLI tests for the config sub-app."""

import pytest
import yaml
from typer.testing import CliRunner

from mdlinks.cli.config import config

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_config_cli_lists_sections(config_file):
    result = runner.invoke(config(), [])
    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout)["content"] == {"sections": ["project", "resolve", "log"]}


def test_config_cli_show_section(config_file, disk_project):
    result = runner.invoke(config(), ["show", "resolve"])
    assert result.exit_code == 0
    content = yaml.safe_load(result.stdout)["content"]
    assert content["loose_match"] is False
    assert "md" in content["markdown_extensions"]


def test_config_cli_show_missing_config():
    result = runner.invoke(config(), ["show", "project"])
    assert result.exit_code == 1
    assert "Configuration file not found" in result.stderr


def test_config_cli_version():
    result = runner.invoke(config(), ["version"])
    assert result.exit_code == 0
    assert "version" in yaml.safe_load(result.stdout)
