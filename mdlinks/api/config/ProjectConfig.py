"""Project configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_EXCLUDE_DIRNAMES
from ...utils import normalize_path
from .RepoConfig import RepoConfig


class ProjectConfig(BaseModel):
    """Which directory tree is scanned and how its repositories are described."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field(..., description="Project root directory")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES), description="Directory names skipped while scanning"
    )
    repos: list[RepoConfig] = Field(default_factory=list, description="Repositories overriding discovered ones")
    untracked_globs: list[str] = Field(
        default_factory=list, description="Absolute path globs of files not under version control"
    )

    @field_validator("root")
    @classmethod
    def _normalize_root(cls, value: str) -> str:
        return normalize_path(value).as_posix()
