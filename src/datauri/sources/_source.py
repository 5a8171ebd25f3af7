"""Collaborator protocols consumed by Data builders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Normalize a path selector into a ``Path``."""
    if isinstance(path, Path):
        return path
    return Path(path)


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Fully buffered result of one HTTP GET."""

    status_code: int
    content: bytes
    content_type: str | None = None


@runtime_checkable
class FileSystem(Protocol):
    """File access protocol.

    Implementations resolve existence, read whole files and write whole
    payloads, either truncating or appending.
    """

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Return whether a regular file exists at ``path``."""
        ...

    def read_bytes(self, path: str | os.PathLike[str]) -> bytes:
        """Read the full contents of ``path``."""
        ...

    def write_bytes(self, path: str | os.PathLike[str], data: bytes, *, append: bool = False) -> None:
        """Write ``data`` to ``path``, appending when ``append`` is set."""
        ...


@runtime_checkable
class MimeDetector(Protocol):
    """Media type detection protocol."""

    def detect(self, path: str | os.PathLike[str], content: bytes = b"") -> str | None:
        """Return the media type of the file at ``path`` holding ``content``, or ``None``."""
        ...


@runtime_checkable
class Fetcher(Protocol):
    """Remote resource fetch protocol."""

    def get(self, url: str) -> FetchResponse:
        """Issue a GET and return the buffered response.

        Connection-level failures are raised as ``OSError`` (e.g. ``ConnectionError``).
        """
        ...
