"""Unit tests for FileReferenceLink."""

import pytest

from mdlinks.api.link.FileRef import FileRef
from mdlinks.api.link.FileReferenceLink import FileReferenceLink
from mdlinks.api.link.GitHubLinkResolver import GitHubLinkResolver
from tests.conftest import MARKDOWN_TEST_FILES, REMOTE, UNUSUAL_NAME_FILES
from tests.unit.conftest import ROOT, WIKI

pytestmark = pytest.mark.link


@pytest.mark.parametrize("containing", [f"{WIKI}/normal-file.md", f"{ROOT}/Readme.md", f"{ROOT}/docs/Guide.md"])
@pytest.mark.parametrize("target", MARKDOWN_TEST_FILES)
def test_rendered_link_resolves_back(markdown_test_project, containing, target):
    link = FileReferenceLink(FileRef(containing), FileRef(target), project=markdown_test_project)
    resolver = GitHubLinkResolver(markdown_test_project, containing)
    assert resolver.resolve(link.link) == target


@pytest.mark.parametrize("containing", [f"{WIKI}/normal-file.md", f"{ROOT}/Readme.md", f"{ROOT}/docs/Guide.md"])
@pytest.mark.parametrize("target", MARKDOWN_TEST_FILES + UNUSUAL_NAME_FILES)
def test_rendered_link_resolves_back_for_unusual_names(unusual_names_project, containing, target):
    link = FileReferenceLink(FileRef(containing), FileRef(target), project=unusual_names_project)
    resolver = GitHubLinkResolver(unusual_names_project, containing)
    assert resolver.resolve(link.link) == target


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        (f"{WIKI}/Release-v1.2.md", "Release-v1.2"),
        (f"{WIKI}/C#-Tips.md", "C%23-Tips"),
        (f"{WIKI}/sub/100%.md", "100%25"),
    ],
)
def test_same_wiki_unusual_page_names(unusual_names_project, wiki_page, target, expected):
    link = FileReferenceLink(wiki_page, FileRef(target), project=unusual_names_project)
    assert link.is_same_wiki
    assert link.link == expected


def test_same_wiki_page_is_bare_name(markdown_test_project, wiki_page):
    link = FileReferenceLink(wiki_page, FileRef(f"{WIKI}/sub/Nested-Page.md"), project=markdown_test_project)
    assert link.is_wiki_page
    assert link.is_same_wiki
    assert link.link_ref == "Nested-Page.md"
    assert link.link_ref_no_ext == "Nested-Page"
    assert link.link == "Nested-Page"
    assert link.link_ref_with_anchor("intro") == "Nested-Page#intro"


def test_without_github_rules_keeps_path(markdown_test_project, wiki_page):
    link = FileReferenceLink(
        wiki_page, FileRef(f"{WIKI}/sub/Nested-Page.md"), git_hub_rules=False, project=markdown_test_project
    )
    assert link.link == "sub/Nested-Page.md"


def test_wiki_page_from_main_repo(markdown_test_project, readme):
    link = FileReferenceLink(readme, FileRef(f"{WIKI}/Home.md"), project=markdown_test_project)
    assert link.is_wiki_page
    assert not link.is_same_wiki
    assert link.link == "MarkdownTest.wiki/Home.md"
    assert link.ext == "md"


def test_non_markdown_in_wiki_keeps_path(markdown_test_project, wiki_page):
    link = FileReferenceLink(wiki_page, FileRef(f"{WIKI}/images/wiki-logo.png"), project=markdown_test_project)
    assert not link.is_wiki_page
    assert link.link == "images/wiki-logo.png"
    assert link.link_ref_no_ext == "images/wiki-logo"


def test_spaces_are_percent_encoded():
    link = FileReferenceLink(FileRef("/p/a.md"), FileRef("/p/docs/My File.md"))
    assert link.link == "docs/My%20File.md"
    assert link.link_ref_no_ext == "docs/My%20File"


def test_wiki_detected_from_directory_without_project():
    link = FileReferenceLink(FileRef("/p/x.wiki/A.md"), FileRef("/p/x.wiki/sub/B Page.md"))
    assert link.is_same_wiki
    assert link.link == "B%20Page"


def test_extensionless_sibling_gets_dot_slash(markdown_test_project, readme):
    link = FileReferenceLink(readme, FileRef(f"{ROOT}/LICENSE"), project=markdown_test_project)
    assert link.link == "./LICENSE"
    assert link.link_ref_no_ext == "./LICENSE"


def test_parent_and_outside_paths():
    guide = FileRef(f"{ROOT}/docs/Guide.md")
    assert FileReferenceLink(guide, FileRef(f"{ROOT}/Readme.md")).link == "../Readme.md"
    assert FileReferenceLink(guide, FileRef("/Users/test/src/Other/Other.md")).link == "../../Other/Other.md"


class TestRemoteUrl:
    def test_main_repo_file(self, markdown_test_project, readme):
        link = FileReferenceLink(readme, FileRef(f"{ROOT}/docs/Guide.md"), project=markdown_test_project)
        assert link.remote_url == f"{REMOTE}/blob/master/docs/Guide.md"

    def test_wiki_page(self, markdown_test_project, readme):
        link = FileReferenceLink(readme, FileRef(f"{WIKI}/Home.md"), project=markdown_test_project)
        assert link.remote_url == f"{REMOTE}/wiki/Home"

    def test_none_when_untracked_or_outside(self, markdown_test_project, readme):
        untracked = FileReferenceLink(readme, FileRef(f"{ROOT}/images/untracked.png"), project=markdown_test_project)
        outside = FileReferenceLink(readme, FileRef("/Users/test/src/Other/Other.md"), project=markdown_test_project)
        assert untracked.remote_url is None
        assert outside.remote_url is None

    def test_none_without_project(self, readme):
        assert FileReferenceLink(readme, FileRef(f"{ROOT}/docs/Guide.md")).remote_url is None
