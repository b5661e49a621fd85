from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class URI:
    """Strongly typed URI value object.

    Ensures that any instance holds a valid URI string (containing '://').
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("URI value must be a string")
        if "://" not in self.value:
            raise ValueError(f"Invalid URI format (missing scheme): {self.value}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"URI('{self.value}')"

    @classmethod
    def from_path(cls, path: str | PurePosixPath, anchor: str | None = None) -> "URI":
        """Create a file:/// URI from an absolute posix path.

        Snapshot paths may not exist on this machine, so no filesystem
        lookups are made here.
        """
        uri = PurePosixPath(path).as_uri()
        if anchor is not None:
            uri += f"#{anchor}"
        return cls(uri)

    @property
    def is_file(self) -> bool:
        """Return True if this is a local filesystem URI (file://)."""
        return self.value.startswith("file://")

    @property
    def is_remote(self) -> bool:
        """Return True if this is an http(s) URI."""
        return self.value.startswith(("http://", "https://"))
