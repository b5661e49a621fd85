"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from mdlinks.api.link import FileRef, GitHubRepo, ProjectFiles
from mdlinks.utils import logger


def pytest_configure(config):
    for marker in ("unit", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def mdlinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point MDLINKS_HOME at a fresh directory so no test touches ~/.mdlinks."""
    home = tmp_path / ".mdlinks"
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    logger.reset_logging()
    yield home
    logger.reset_logging()


# =============================================================================
# MarkdownTest project snapshot
# =============================================================================

SRC = "/Users/test/src"
ROOT = f"{SRC}/MarkdownTest"
WIKI = f"{ROOT}/MarkdownTest.wiki"
REMOTE = "https://github.com/vsch/MarkdownTest"

MARKDOWN_TEST_FILES = [
    f"{ROOT}/LICENSE",
    f"{ROOT}/MarkdownTest.iml",
    f"{ROOT}/Readme.md",
    f"{ROOT}/docs/Guide.md",
    f"{ROOT}/docs/Notes.markdown",
    f"{ROOT}/images/logo.png",
    f"{ROOT}/images/untracked.png",
    f"{ROOT}/src/main/kotlin/Main.kt",
    f"{ROOT}/untitled/untitled.iml",
    f"{WIKI}/Home.md",
    f"{WIKI}/Some-Page.md",
    f"{WIKI}/images/wiki-logo.png",
    f"{WIKI}/normal-file.md",
    f"{WIKI}/sub/Nested-Page.md",
    f"{SRC}/Other/Other.md",
]


def markdown_test_project() -> ProjectFiles:
    """Main repo with a nested wiki clone, plus one file outside any repository."""
    return ProjectFiles(
        MARKDOWN_TEST_FILES,
        repos=[
            GitHubRepo(ROOT, REMOTE),
            GitHubRepo(WIKI, REMOTE, is_wiki=True),
        ],
        untracked=[f"{ROOT}/images/untracked.png"],
    )


@pytest.fixture(name="markdown_test_project")
def markdown_test_project_fixture() -> ProjectFiles:
    return markdown_test_project()


# Names with a dot in the stem, a hash or a percent sign, in both repositories
UNUSUAL_NAME_FILES = [
    f"{ROOT}/Release-v1.2.md",
    f"{ROOT}/docs/C#-Tips.md",
    f"{ROOT}/docs/100%.md",
    f"{WIKI}/Release-v1.2.md",
    f"{WIKI}/C#-Tips.md",
    f"{WIKI}/sub/100%.md",
]


def unusual_names_project() -> ProjectFiles:
    """The MarkdownTest project plus ``UNUSUAL_NAME_FILES``."""
    return ProjectFiles(
        MARKDOWN_TEST_FILES + UNUSUAL_NAME_FILES,
        repos=[
            GitHubRepo(ROOT, REMOTE),
            GitHubRepo(WIKI, REMOTE, is_wiki=True),
        ],
        untracked=[f"{ROOT}/images/untracked.png"],
    )


@pytest.fixture(name="unusual_names_project")
def unusual_names_project_fixture() -> ProjectFiles:
    return unusual_names_project()


@pytest.fixture
def wiki_page() -> FileRef:
    """The containing file most scenarios resolve from."""
    return FileRef(f"{WIKI}/normal-file.md")


@pytest.fixture
def readme() -> FileRef:
    return FileRef(f"{ROOT}/Readme.md")


# =============================================================================
# On-disk project
# =============================================================================


def write_git_dir(repo_root: Path, remote_url: str | None, branch: str = "main") -> None:
    """Create a minimal .git directory the way ``git clone`` leaves it."""
    git_dir = repo_root / ".git"
    git_dir.mkdir(parents=True)
    config = "[core]\n\trepositoryformatversion = 0\n\tbare = false\n"
    if remote_url is not None:
        config += f'[remote "origin"]\n\turl = {remote_url}\n\tfetch = +refs/heads/*:refs/remotes/origin/*\n'
    (git_dir / "config").write_text(config)
    (git_dir / "HEAD").write_text(f"ref: refs/heads/{branch}\n")


@pytest.fixture
def disk_project(tmp_path: Path) -> Path:
    """A small project on disk: main repo, nested wiki clone, ignored directories."""
    root = tmp_path / "Project"
    wiki = root / "Project.wiki"
    for rel in ("Readme.md", "docs/Guide.md", "images/logo.png", "node_modules/pkg/index.md"):
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x")
    for rel in ("Home.md", "Some-Page.md"):
        path = wiki / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x")
    write_git_dir(root, "git@github.com:user/Project.git")
    write_git_dir(wiki, "https://github.com/user/Project.wiki.git", branch="master")
    return root


@pytest.fixture
def config_file(mdlinks_home: Path, disk_project: Path) -> Path:
    """Write a config file whose project root is ``disk_project``."""
    mdlinks_home.mkdir(parents=True, exist_ok=True)
    path = mdlinks_home / "config.json"
    path.write_text(json.dumps({"project": {"root": str(disk_project)}}))
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
