"""ExistingCandidate model (UNO: single model)."""

from dataclasses import dataclass

from .FileRef import FileRef


@dataclass(frozen=True)
class ExistingCandidate:
    """A match backed by a file from the project snapshot."""

    file_ref: FileRef

    @property
    def path(self) -> str:
        return self.file_ref.path
