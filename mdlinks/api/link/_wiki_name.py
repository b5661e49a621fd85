"""Wiki page name helpers (private)."""


def normalize_wiki_name(name: str) -> str:
    """Fold a wiki page name the way GitHub compares them: case-insensitive, dash equals space."""
    return name.replace(" ", "-").lower()


def wiki_page_file_name(name: str) -> str:
    """Page name as GitHub stores it on disk, without extension."""
    return name.strip().replace(" ", "-")
