"""Top-level mdlinks configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .ProjectConfig import ProjectConfig
from .ResolveConfig import ResolveConfig


class MdLinksConfig(BaseModel):
    """Top-level configuration: project, resolve defaults and logging."""

    model_config = ConfigDict(extra="forbid")

    project: ProjectConfig
    resolve: ResolveConfig = Field(default_factory=ResolveConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return get_config_path()

    @classmethod
    def exists(cls) -> bool:
        return get_config_path().exists()

    @classmethod
    def load(cls) -> "MdLinksConfig":
        """Load and validate config from file.

        Raises:
            ConfigError: If config file not found, invalid JSON, or validation error
        """
        path = get_config_path()

        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    @classmethod
    def for_root(cls, root: str | Path) -> "MdLinksConfig":
        """Load the config file when present, with ``root`` as the project root.

        Without a config file, defaults are used.
        """
        if cls.exists():
            config = cls.load()
            data = config.to_dict()
            data["project"]["root"] = str(root)
            return cls(**data)
        return cls(project=ProjectConfig(root=str(root)))

    def to_dict(self) -> dict[str, Any]:
        """Convert config instance to a dictionary for serialization."""
        return {
            "project": self.project.model_dump(),
            "resolve": self.resolve.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
