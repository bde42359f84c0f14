"""
Stat and directory-entry entities returned by file system adapters.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileStat:
    """Metadata for a single file system entry."""

    is_dir: bool
    size: int = 0

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    @classmethod
    def directory(cls) -> "FileStat":
        return cls(is_dir=True)

    @classmethod
    def file(cls, size: int) -> "FileStat":
        return cls(is_dir=False, size=size)


@dataclass(frozen=True)
class DirEntry:
    """Name and type of one child of a directory listing."""

    name: str
    is_dir: bool
