"""Repository configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils import normalize_path
from ..link._constants import DEFAULT_BRANCH
from ..link.GitHubRepo import GitHubRepo, normalize_remote_url


class RepoConfig(BaseModel):
    """A repository declared in config instead of (or on top of) ``.git`` discovery."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field(..., description="Repository root directory")
    remote_url: str | None = Field(None, description="Git remote URL, None for a local-only repository")
    wiki: bool | None = Field(None, description="Whether this is a GitHub wiki; None infers it from the remote or root name")
    branch: str = Field(DEFAULT_BRANCH, description="Branch used in blob URLs")

    @field_validator("root")
    @classmethod
    def _normalize_root(cls, value: str) -> str:
        return normalize_path(value).as_posix()

    def to_github_repo(self) -> GitHubRepo:
        base_url, remote_is_wiki = normalize_remote_url(self.remote_url) if self.remote_url else (None, False)
        is_wiki = self.wiki if self.wiki is not None else remote_is_wiki or self.root.endswith(".wiki")
        return GitHubRepo(root_path=self.root, remote_base_url=base_url, is_wiki=is_wiki, branch=self.branch)
