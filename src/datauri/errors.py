"""Typed errors for datauri."""


class DataURIError(Exception):
    """Base exception for all datauri errors."""


class TooLongDataError(DataURIError):
    """Raised in strict mode when the payload exceeds the active length limit."""

    def __init__(self, length: int) -> None:
        """Initialize with the offending payload length."""
        self.length = length
        super().__init__(f"Too long data: {length} bytes")


class DataFileNotFoundError(DataURIError):
    """Raised when a local file or remote resource cannot be resolved."""

    def __init__(self, path: str, message: str | None = None) -> None:
        """Initialize with the missing path or URL and an optional message."""
        self.path = path
        super().__init__(message if message is not None else f"{path} file does not exist")


class TransportUnavailableError(DataURIError):
    """Raised when the HTTP transport library is not installed."""
