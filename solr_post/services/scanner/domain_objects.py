"""
File discovery domain objects.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet


@dataclass(frozen=True)
class Candidate:
    """A discovered file and its lower-case extension. Lives for a single run."""

    path: Path
    extension: str

    @classmethod
    def from_path(cls, path: Path) -> "Candidate":
        return cls(path=path, extension=path.suffix.lstrip(".").lower())

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class ScanConfiguration:
    """Configuration object for file discovery."""

    source_directory: Path
    file_extensions: FrozenSet[str]
