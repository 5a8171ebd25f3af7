"""InMemoryFileSystem: dict-based file access for development and testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datauri.sources._source import normalize_path

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping


class InMemoryFileSystem:
    """In-memory file system for development and testing."""

    def __init__(self) -> None:
        """Initialize an empty in-memory file system."""
        self._files: dict[str, bytes] = {}

    @classmethod
    def from_preloaded(cls, files_by_path: Mapping[str, bytes]) -> InMemoryFileSystem:
        """Build a file system from preloaded ``path -> bytes`` data."""
        file_system = cls()
        for path, data in files_by_path.items():
            file_system._files[str(normalize_path(path))] = bytes(data)
        return file_system

    def touch(self, path: str | os.PathLike[str]) -> None:
        """Create an empty file unless one already exists."""
        self._files.setdefault(str(normalize_path(path)), b"")

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check whether a file is present."""
        return str(normalize_path(path)) in self._files

    def read_bytes(self, path: str | os.PathLike[str]) -> bytes:
        """Return stored bytes, raising ``FileNotFoundError`` when absent."""
        key = str(normalize_path(path))
        data = self._files.get(key)
        if data is None:
            raise FileNotFoundError(key)
        return data

    def write_bytes(self, path: str | os.PathLike[str], data: bytes, *, append: bool = False) -> None:
        """Store ``data``, concatenating onto existing bytes when ``append`` is set."""
        key = str(normalize_path(path))
        if append:
            self._files[key] = self._files.get(key, b"") + data
        else:
            self._files[key] = bytes(data)
