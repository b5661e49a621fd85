"""Extension equivalence families."""

from ._constants import GITHUB_LINKS, IMAGE_EXTENSIONS, MARKDOWN_EXTENSIONS


def extension_family(ext: str) -> tuple[str, ...]:
    """Extensions interchangeable with ``ext`` under loose matching.

    Only markdown has a real family; any other extension stands alone.
    """
    ext = ext.lower().lstrip(".")
    if ext in MARKDOWN_EXTENSIONS:
        return MARKDOWN_EXTENSIONS
    return (ext,)


def is_markdown_ext(ext: str) -> bool:
    return ext.lower().lstrip(".") in MARKDOWN_EXTENSIONS


def is_image_ext(ext: str) -> bool:
    return ext.lower().lstrip(".") in IMAGE_EXTENSIONS


def github_links_matching(name: str, loose: bool = False, links: tuple[str, ...] = GITHUB_LINKS) -> list[str]:
    """GitHub repository pages whose name equals ``name``, or starts with it when ``loose``."""
    return [link for link in links if (link.startswith(name) if loose else link == name)]
