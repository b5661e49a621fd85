"""CLI tests for the link sub-app."""

import pytest
import yaml
from typer.testing import CliRunner

from mdlinks.cli.link import link

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_link_resolve_cli(disk_project):
    wiki = disk_project / "Project.wiki"
    result = runner.invoke(link(), ["resolve", str(wiki / "Home.md"), "some page", "--root", str(disk_project)])

    assert result.exit_code == 0
    output = yaml.safe_load(result.stdout)
    assert output["matches"] == [(wiki / "Some-Page.md").as_posix()]
    assert "Found 1 match" in result.stderr


def test_link_resolve_cli_flags(disk_project):
    result = runner.invoke(
        link(),
        ["resolve", str(disk_project / "Readme.md"), "images/logo.png", "--root", str(disk_project), "--only-remote", "--only-uri"],
    )

    assert result.exit_code == 0
    output = yaml.safe_load(result.stdout)
    assert output["flags"] == ["ONLY_REMOTE", "ONLY_URI"]
    assert output["matches"] == ["https://github.com/user/Project/blob/main/images/logo.png"]


def test_link_resolve_cli_wiki_link(disk_project):
    wiki = disk_project / "Project.wiki"
    result = runner.invoke(
        link(), ["resolve", str(wiki / "Home.md"), "Some Page|see also", "--wiki-link", "--root", str(disk_project)]
    )

    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout)["matches"] == [(wiki / "Some-Page.md").as_posix()]


def test_link_resolve_cli_conflicting_flags(disk_project):
    result = runner.invoke(
        link(),
        ["resolve", str(disk_project / "Readme.md"), "x.md", "--root", str(disk_project), "--only-local", "--only-remote"],
    )

    assert result.exit_code == 1
    assert yaml.safe_load(result.stdout)["errors"] == ["ONLY_LOCAL and ONLY_REMOTE cannot be combined"]


def test_link_render_cli(disk_project):
    result = runner.invoke(
        link(),
        ["render", str(disk_project / "docs" / "Guide.md"), str(disk_project / "Readme.md"), "--root", str(disk_project), "--anchor", "top"],
    )

    assert result.exit_code == 0
    output = yaml.safe_load(result.stdout)
    assert output["link"] == "../Readme.md#top"
    assert output["remote_url"] == "https://github.com/user/Project/blob/main/Readme.md"


def test_link_cli_without_subcommand_shows_help():
    result = runner.invoke(link(), [])
    assert result.exit_code == 0
    assert "resolve" in result.stderr
