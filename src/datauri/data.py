"""Data: an RFC 2397 ``data:`` URI value held in memory."""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Mapping
from enum import IntEnum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from datauri.errors import DataFileNotFoundError, TooLongDataError
from datauri.serde import as_str_object_dict, optional_bool, optional_string, require_string, string_mapping
from datauri.sources import ExtensionMimeDetector, HttpxFetcher, LocalFileSystem, MagicMimeDetector

if TYPE_CHECKING:
    import os

    from datauri.sources import Fetcher, FileSystem, MimeDetector

logger = logging.getLogger(__name__)


class LengthMode(IntEnum):
    """SGML length quantities used to pick the strict-mode limit."""

    # Characters in a single attribute value literal.
    LITLEN = 0
    # Sum of all attribute value specifications in a tag.
    ATTSPLEN = 1
    # Overall length of a tag.
    TAGLEN = 2


LIT_LIMIT: Final[int] = 1024
ATTS_TAG_LIMIT: Final[int] = 2100
BASE_64: Final[str] = "base64"
DEFAULT_MIME_TYPE: Final[str] = "text/plain"
DEFAULT_CHARSET: Final[str] = "US-ASCII"


def length_limit(length_mode: LengthMode) -> int:
    """Return the maximum payload length allowed under ``length_mode``."""
    if length_mode == LengthMode.LITLEN:
        return LIT_LIMIT
    return ATTS_TAG_LIMIT


class Data:
    """Payload bytes bundled with a media type, parameters and a binary flag.

    Without a media type the object defaults to ``text/plain`` with
    ``charset=US-ASCII``. In strict mode the payload length is checked once,
    at construction, against the limit of ``length_mode``.
    """

    __slots__ = ("_data", "_is_binary_data", "_mime_type", "_parameters")

    def __init__(
        self,
        data: bytes,
        mime_type: str | None = None,
        parameters: Mapping[str, str] | None = None,
        strict: bool = False,
        length_mode: LengthMode = LengthMode.TAGLEN,
    ) -> None:
        """Validate the payload and derive defaults.

        Raises:
            TypeError: ``data`` is not bytes-like.
            TooLongDataError: ``strict`` is set and ``data`` exceeds the limit.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            msg = f"data must be bytes-like; got {type(data).__name__}."
            raise TypeError(msg)
        if strict and len(data) > length_limit(length_mode):
            raise TooLongDataError(len(data))

        self._data = bytes(data)
        self._mime_type = mime_type
        self._parameters: dict[str, str] = dict(parameters) if parameters is not None else {}

        if self._mime_type is None:
            self._mime_type = DEFAULT_MIME_TYPE
            self.add_parameters("charset", DEFAULT_CHARSET)

        self._is_binary_data = not self._mime_type.startswith("text/")

    def __repr__(self) -> str:
        """Return a short debugging representation without the payload."""
        return (
            f"Data(size={len(self._data)}, mime_type={self._mime_type!r}, "
            f"parameters={self._parameters!r}, is_binary_data={self._is_binary_data})"
        )

    def __eq__(self, other: object) -> bool:
        """Compare payload, media type, parameters and binary flag."""
        if not isinstance(other, Data):
            return NotImplemented
        return (
            self._data == other._data
            and self._mime_type == other._mime_type
            and list(self._parameters.items()) == list(other._parameters.items())
            and self._is_binary_data == other._is_binary_data
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def data(self) -> bytes:
        """Return the payload bytes."""
        return self._data

    @property
    def mime_type(self) -> str | None:
        """Return the media type."""
        return self._mime_type

    @property
    def parameters(self) -> Mapping[str, str]:
        """Return a live read-only view of the parameters."""
        return MappingProxyType(self._parameters)

    @property
    def is_binary_data(self) -> bool:
        """Return whether the payload is treated as binary."""
        return self._is_binary_data

    def set_binary_data(self, value: bool) -> Data:
        """Override the binary flag and return ``self``."""
        self._is_binary_data = value
        return self

    def add_parameters(self, name: str, value: str) -> Data:
        """Append a parameter and return ``self``.

        A name that is already present keeps its current value.
        """
        if name not in self._parameters:
            self._parameters[name] = value
        return self

    def write(
        self,
        path: str | os.PathLike[str],
        *,
        overwrite: bool = False,
        file_system: FileSystem | None = None,
    ) -> Path:
        """Write the payload into an existing file and return its path.

        The payload is appended unless ``overwrite`` is set, in which case the
        file contents are replaced.

        Raises:
            DataFileNotFoundError: the file does not exist or cannot be written.
        """
        if file_system is None:
            file_system = LocalFileSystem()
        target = Path(path)
        if not file_system.exists(target):
            raise DataFileNotFoundError(str(path))

        try:
            file_system.write_bytes(target, self._data, append=not overwrite)
        except OSError as exc:
            raise DataFileNotFoundError(str(path)) from exc
        logger.debug("Wrote %d bytes of %s to %s", len(self._data), self._mime_type, target)
        return target

    def to_dict(self) -> dict[str, object]:
        """Serialize Data to a plain dictionary with a base64 payload."""
        return {
            "data_b64": base64.b64encode(self._data).decode("ascii"),
            "encoding": BASE_64,
            "mime_type": self._mime_type,
            "parameters": dict(self._parameters),
            "is_binary_data": self._is_binary_data,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object]) -> Data:
        """Deserialize Data from a plain dictionary produced by ``to_dict``."""
        payload = as_str_object_dict(value, field_name="Data")

        encoding = require_string(payload.get("encoding", BASE_64), field_name="Data.encoding")
        if encoding != BASE_64:
            msg = f"Data.encoding must be {BASE_64!r}; got {encoding!r}."
            raise ValueError(msg)

        data_b64 = require_string(payload.get("data_b64"), field_name="Data.data_b64")
        try:
            data = base64.b64decode(data_b64, validate=True)
        except (binascii.Error, ValueError) as exc:
            msg = "Data.data_b64 must be valid base64."
            raise ValueError(msg) from exc

        mime_type = optional_string(payload.get("mime_type"), field_name="Data.mime_type")
        parameters = string_mapping(payload.get("parameters"), field_name="Data.parameters")
        is_binary_data = optional_bool(payload.get("is_binary_data"), field_name="Data.is_binary_data")

        result = cls(data, mime_type, parameters)
        if is_binary_data is not None:
            result.set_binary_data(is_binary_data)
        return result

    @classmethod
    def build_from_file(
        cls,
        path: str | os.PathLike[str],
        *,
        strict: bool = False,
        length_mode: LengthMode = LengthMode.TAGLEN,
        file_system: FileSystem | None = None,
        mime_detector: MimeDetector | None = None,
    ) -> Data:
        """Build Data from a local file, detecting its media type.

        Raises:
            DataFileNotFoundError: the file does not exist or cannot be read.
            TooLongDataError: ``strict`` is set and the file is too long.
        """
        if file_system is None:
            file_system = LocalFileSystem()
        if mime_detector is None:
            mime_detector = MagicMimeDetector(fallback=ExtensionMimeDetector())

        source = Path(path)
        if not file_system.exists(source):
            raise DataFileNotFoundError(str(path))
        try:
            data = file_system.read_bytes(source)
        except OSError as exc:
            raise DataFileNotFoundError(str(path)) from exc

        mime_type = mime_detector.detect(source, data)
        logger.debug("Read %d bytes from %s (mime_type=%s)", len(data), source, mime_type)
        return cls(data, mime_type, {}, strict, length_mode)

    @classmethod
    def build_from_url(
        cls,
        url: str,
        *,
        strict: bool = False,
        length_mode: LengthMode = LengthMode.TAGLEN,
        fetcher: Fetcher | None = None,
    ) -> Data:
        """Build Data from a remote resource fetched with a single GET.

        The response ``Content-Type`` header becomes the media type verbatim.
        A fetcher created here is closed before returning; an injected one is left open.

        Raises:
            TransportUnavailableError: no fetcher was given and httpx is not installed.
            DataFileNotFoundError: the server answered with a status other than 200
                or could not be reached.
            TooLongDataError: ``strict`` is set and the body is too long.
        """
        if fetcher is None:
            with HttpxFetcher() as owned:
                return cls._fetch(url, owned, strict, length_mode)
        return cls._fetch(url, fetcher, strict, length_mode)

    @classmethod
    def _fetch(cls, url: str, fetcher: Fetcher, strict: bool, length_mode: LengthMode) -> Data:
        """GET ``url`` through ``fetcher`` and build Data from a 200 response."""
        message = f"{url} file does not exist or the remote server does not respond"
        try:
            response = fetcher.get(url)
        except OSError as exc:
            raise DataFileNotFoundError(url, message) from exc

        if response.status_code != 200:
            logger.debug("GET %s answered %d", url, response.status_code)
            raise DataFileNotFoundError(url, message)

        return cls(response.content, response.content_type, {}, strict, length_mode)
