"""LocalFileSystem: pathlib-backed file access."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datauri.sources._source import normalize_path

if TYPE_CHECKING:
    import os

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Read and write regular files on the local disk."""

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Return whether ``path`` is an existing regular file."""
        return normalize_path(path).is_file()

    def read_bytes(self, path: str | os.PathLike[str]) -> bytes:
        """Read the whole file."""
        return normalize_path(path).read_bytes()

    def write_bytes(self, path: str | os.PathLike[str], data: bytes, *, append: bool = False) -> None:
        """Write ``data``, truncating the file unless ``append`` is set."""
        target = normalize_path(path)
        with target.open("ab" if append else "wb") as handle:
            handle.write(data)
        logger.debug("Wrote %d bytes to %s (append=%s)", len(data), target, append)
