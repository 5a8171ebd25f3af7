"""Collaborators used by Data builders: file access, media type detection, HTTP fetch."""

from datauri.sources._file import LocalFileSystem
from datauri.sources._http import HttpxFetcher
from datauri.sources._memory import InMemoryFileSystem
from datauri.sources._mime import ExtensionMimeDetector, MagicMimeDetector
from datauri.sources._source import FetchResponse, Fetcher, FileSystem, MimeDetector

__all__ = [
    "ExtensionMimeDetector",
    "FetchResponse",
    "Fetcher",
    "FileSystem",
    "HttpxFetcher",
    "InMemoryFileSystem",
    "LocalFileSystem",
    "MagicMimeDetector",
    "MimeDetector",
]
