"""Strict single-target link resolution."""

import posixpath

from .FileRef import FileRef
from .LinkRef import LinkRef
from .ProjectFiles import ProjectFiles


def resolve_relative_link(project: ProjectFiles, containing: FileRef | str, target: LinkRef | str) -> FileRef | None:
    """Return the one file ``target`` opens when followed from ``containing``.

    Wiki page links from a wiki page match the page name case-insensitively
    anywhere in the wiki. Anything else must name an existing path exactly,
    extension and case included. External references give None.
    """
    containing_ref = containing if isinstance(containing, FileRef) else FileRef(containing)
    link_ref = target if isinstance(target, LinkRef) else LinkRef(containing_ref, target)
    if link_ref.is_external or link_ref.is_empty or not link_ref.file_name:
        return None

    query = (
        project.list_project_files()
        .query(project, containing_ref)
        .git_hub_wiki_rules()
        .same_git_hub_repo()
    )
    if query.wiki_rules and not link_ref.has_dir and (not link_ref.has_ext or link_ref.is_markdown_ext):
        page = (
            query.want_markdown_files()
            .where(project.is_wiki_page)
            .match_link_ref_no_ext(link_ref.file_name_no_ext)
            .first()
        )
        if page and (not link_ref.has_ext or page[0].ext == link_ref.ext):
            return page[0]

    repo = project.repo_for_path(containing_ref.path)
    expected_dir = link_ref.expected_dir(repo.root_path if repo is not None else None)
    return project.find(posixpath.join(expected_dir, link_ref.file_name))
