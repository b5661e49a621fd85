"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command.

    All fields must always be present for consistency.
    """

    containing_file: str = Field(..., description="Absolute path of the file the link was written in")
    target: str = Field(..., description="Raw link target as typed by the author")
    flags: list[str] = Field(..., description="Names of the resolution flags that were set")
    matches: list[str] = Field(..., description="Ordered matches; empty list when nothing matched")
    matcher: dict[str, Any] = Field(..., description="Description of the match rule used, empty dict for external targets")


class LinkRenderOutput(BaseOutputSchema):
    """Output schema for link render command."""

    link: str = Field(..., description="Relative link text from the containing file, empty string on error")
    link_no_ext: str = Field(..., description="Link text without the target's extension")
    is_wiki_page: bool = Field(..., description="Whether the target is a wiki page")
    remote_url: str = Field(..., description="Remote URL of the target, empty string if it has none")


register_output_schema("link", "resolve", LinkResolveOutput)
register_output_schema("link", "render", LinkRenderOutput)
