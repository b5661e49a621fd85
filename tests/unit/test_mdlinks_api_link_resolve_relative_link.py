"""Unit tests for resolve_relative_link."""

import pytest

from mdlinks.api.link.resolve_relative_link import resolve_relative_link
from tests.unit.conftest import ROOT, WIKI

pytestmark = pytest.mark.link


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("some page", f"{WIKI}/Some-Page.md"),
        ("Some%20Page", f"{WIKI}/Some-Page.md"),
        ("Nested Page", f"{WIKI}/sub/Nested-Page.md"),
        ("Home.md", f"{WIKI}/Home.md"),
        ("../Readme.md", f"{ROOT}/Readme.md"),
        ("images/wiki-logo.png", f"{WIKI}/images/wiki-logo.png"),
    ],
)
def test_from_wiki_page(markdown_test_project, wiki_page, target, expected):
    file_ref = resolve_relative_link(markdown_test_project, wiki_page, target)
    assert file_ref is not None
    assert file_ref.path == expected


@pytest.mark.parametrize("target", ["Home.markdown", "../readme.md", "Missing Page", "images/wiki-logo"])
def test_from_wiki_page_unresolved(markdown_test_project, wiki_page, target):
    assert resolve_relative_link(markdown_test_project, wiki_page, target) is None


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("docs/Guide.md", f"{ROOT}/docs/Guide.md"),
        ("/docs/Guide.md", f"{ROOT}/docs/Guide.md"),
        ("LICENSE", f"{ROOT}/LICENSE"),
        ("./LICENSE", f"{ROOT}/LICENSE"),
        ("MarkdownTest.wiki/Home.md", f"{WIKI}/Home.md"),
        ("../Other/Other.md", "/Users/test/src/Other/Other.md"),
    ],
)
def test_from_main_repo(markdown_test_project, readme, target, expected):
    file_ref = resolve_relative_link(markdown_test_project, readme, target)
    assert file_ref is not None
    assert file_ref.path == expected


@pytest.mark.parametrize("target", ["docs/guide.md", "docs/Guide", "Home", "issues"])
def test_from_main_repo_is_strict(markdown_test_project, readme, target):
    assert resolve_relative_link(markdown_test_project, readme, target) is None


@pytest.mark.parametrize("target", ["", "#top", "https://github.com/vsch/MarkdownTest", "mailto:a@b.c"])
def test_nothing_to_open(markdown_test_project, readme, target):
    assert resolve_relative_link(markdown_test_project, readme, target) is None


def test_accepts_string_containing_file(markdown_test_project):
    file_ref = resolve_relative_link(markdown_test_project, f"{WIKI}/Home.md", "normal file")
    assert file_ref is not None
    assert file_ref.path == f"{WIKI}/normal-file.md"
