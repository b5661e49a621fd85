"""Resolve configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..link._constants import GITHUB_LINKS, MARKDOWN_EXTENSIONS


class ResolveConfig(BaseModel):
    """Defaults for link resolution."""

    model_config = ConfigDict(extra="forbid")

    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(MARKDOWN_EXTENSIONS), description="Markdown extension family, without dots"
    )
    github_links: list[str] = Field(
        default_factory=lambda: list(GITHUB_LINKS), description="GitHub repository pages offered for bare names"
    )
    loose_match: bool = Field(False, description="Add LOOSE_MATCH to every resolve")

    @field_validator("markdown_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        extensions = [ext.lower().lstrip(".") for ext in value]
        if not all(extensions):
            raise ValueError("extensions must not be empty")
        return extensions
