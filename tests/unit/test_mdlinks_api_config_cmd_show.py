"""Unit tests for config cmd_show and cmd_version."""

import pytest

from mdlinks.api.config.cmd_show import cmd_show
from mdlinks.api.config.cmd_version import cmd_version
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_cmd_show_lists_sections(self, config_file):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["section"] == ""
        assert result.output["content"] == {"sections": ["project", "resolve", "log"]}
        assert result.output["config_path"] == str(config_file)

    def test_cmd_show_with_valid_section(self, config_file, disk_project):
        result = run_cmd(cmd_show, "project")
        assert result.success
        assert result.output["section"] == "project"
        assert result.output["content"]["root"] == disk_project.as_posix()

    def test_cmd_show_with_invalid_section(self, config_file):
        result = run_cmd(cmd_show, "invalid_section")
        assert not result.success
        assert result.output["errors"] == ["Unknown section: invalid_section"]

    def test_cmd_show_missing_config(self):
        result = run_cmd(cmd_show, "project")
        assert result.success is False
        assert result.output["section"] == "project"
        assert result.output["content"] == {}
        assert result.output["errors"]

    def test_cmd_show_invalid_config_file(self, mdlinks_home):
        mdlinks_home.mkdir(parents=True)
        (mdlinks_home / "config.json").write_text("{invalid json")

        result = run_cmd(cmd_show, "project")
        assert result.success is False
        assert "Invalid JSON" in result.output["errors"][0]


def test_cmd_version():
    result = run_cmd(cmd_version)
    assert result.success
    assert result.output["errors"] == []
    assert result.result == f"mdlinks version: {result.output['version']}"
