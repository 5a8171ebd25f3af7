"""Media type detectors: file extension and file content."""

from __future__ import annotations

import logging
import mimetypes
from typing import TYPE_CHECKING, Final

from datauri.sources._source import normalize_path

try:
    import magic
except ImportError:  # pragma: no cover
    magic = None  # type: ignore[assignment]

if TYPE_CHECKING:
    import os

    from datauri.sources._source import MimeDetector

logger = logging.getLogger(__name__)

# libmagic answers these when it cannot name the content.
_UNDETERMINED_TYPES: Final[frozenset[str]] = frozenset({"application/octet-stream", "inode/x-empty"})


class ExtensionMimeDetector:
    """Guess media types from the file extension via ``mimetypes``."""

    def __init__(self, *, fallback: str | None = None) -> None:
        """Initialize with the type returned for unknown extensions."""
        self._fallback = fallback

    def detect(self, path: str | os.PathLike[str], content: bytes = b"") -> str | None:
        """Return the guessed media type, or the fallback."""
        media_type, _ = mimetypes.guess_type(str(normalize_path(path)))
        if media_type is None:
            return self._fallback
        return media_type


class MagicMimeDetector:
    """Detect media types from the file content with python-magic.

    When libmagic is not available, or cannot name the content, the
    ``fallback`` detector decides.
    """

    def __init__(self, *, fallback: MimeDetector | None = None) -> None:
        """Initialize with the detector consulted when content sniffing is inconclusive."""
        self._fallback = fallback

    @property
    def available(self) -> bool:
        """Return whether python-magic could be imported."""
        return magic is not None

    def detect(self, path: str | os.PathLike[str], content: bytes = b"") -> str | None:
        """Return the sniffed media type, deferring to the fallback when unknown."""
        media_type = None
        if magic is not None and content:
            media_type = magic.from_buffer(content, mime=True)
        if media_type and media_type not in _UNDETERMINED_TYPES:
            return media_type

        if self._fallback is None:
            return media_type or None
        guessed = self._fallback.detect(path, content)
        logger.debug("Content of %s undetermined (%s), fallback gave %s", path, media_type, guessed)
        return guessed if guessed is not None else media_type or None
