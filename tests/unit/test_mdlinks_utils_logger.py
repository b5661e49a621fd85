"""Unit tests for mdlinks logging."""

import json
import logging

from mdlinks.api.link.cmd_resolve import cmd_resolve
from mdlinks.api.link.GitHubLinkResolver import GitHubLinkResolver
from mdlinks.utils import get_logger, logger
from tests.unit.conftest import WIKI, run_cmd


def test_get_logger_namespaces_and_configures(mdlinks_home):
    log = get_logger("link.test")
    assert log.name == "mdlinks.link.test"
    assert logger._CONFIGURED is True

    log.info("hello from test")
    assert "hello from test" in (mdlinks_home.resolve() / "mdlinks.log").read_text()


def test_configure_logging_once(tmp_path):
    logger.configure_logging(tmp_path)
    logger.configure_logging(tmp_path)
    assert len(logging.getLogger("mdlinks").handlers) == 1


def test_set_level_accepts_warn():
    logger.set_level("WARN")
    assert logging.getLogger("mdlinks").level == logging.WARNING


def test_reset_logging_detaches_handlers(tmp_path):
    logger.configure_logging(tmp_path, level="DEBUG")
    logger.reset_logging()
    root_logger = logging.getLogger("mdlinks")
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET
    assert logger._CONFIGURED is False


def test_configured_level_reaches_log_file(mdlinks_home, disk_project):
    mdlinks_home.mkdir(parents=True, exist_ok=True)
    (mdlinks_home / "config.json").write_text(json.dumps({"project": {"root": str(disk_project)}, "log": {"level": "DEBUG"}}))

    run_cmd(cmd_resolve, str(disk_project / "Readme.md"), "docs/Guide.md")

    text = (mdlinks_home.resolve() / "mdlinks.log").read_text()
    assert "mdlinks.link.scan - DEBUG - Scanned" in text
    assert "mdlinks.api.link.LinkResolver - DEBUG - Resolved 'docs/Guide.md'" in text


def test_resolving_does_not_configure_logging(mdlinks_home, markdown_test_project):
    resolver = GitHubLinkResolver(markdown_test_project, f"{WIKI}/Home.md")
    assert resolver.resolve("Some Page") == f"{WIKI}/Some-Page.md"
    assert logger._CONFIGURED is False
    assert not mdlinks_home.exists()
