"""datauri: RFC 2397 data URI values for Python."""

import importlib.metadata as importlib_metadata

from datauri.data import (
    ATTS_TAG_LIMIT,
    BASE_64,
    DEFAULT_CHARSET,
    DEFAULT_MIME_TYPE,
    LIT_LIMIT,
    Data,
    LengthMode,
    length_limit,
)
from datauri.errors import (
    DataFileNotFoundError,
    DataURIError,
    TooLongDataError,
    TransportUnavailableError,
)
from datauri.sources import (
    ExtensionMimeDetector,
    FetchResponse,
    Fetcher,
    FileSystem,
    HttpxFetcher,
    InMemoryFileSystem,
    LocalFileSystem,
    MagicMimeDetector,
    MimeDetector,
)


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("datauri")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "ATTS_TAG_LIMIT",
    "BASE_64",
    "DEFAULT_CHARSET",
    "DEFAULT_MIME_TYPE",
    "LIT_LIMIT",
    "Data",
    "DataFileNotFoundError",
    "DataURIError",
    "ExtensionMimeDetector",
    "FetchResponse",
    "Fetcher",
    "FileSystem",
    "HttpxFetcher",
    "InMemoryFileSystem",
    "LengthMode",
    "LocalFileSystem",
    "MagicMimeDetector",
    "MimeDetector",
    "TooLongDataError",
    "TransportUnavailableError",
    "length_limit",
]
