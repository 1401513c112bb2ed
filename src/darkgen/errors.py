"""Error hierarchy for darkgen."""
from __future__ import annotations


class DarkgenError(Exception):
    """Base error for all darkgen errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkError(DarkgenError):
    """Fetching the root page or a linked stylesheet failed."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.url = url
        self.status_code = status_code


class FileError(DarkgenError):
    """Reading or writing the target stylesheet failed."""

    def __init__(
        self, message: str, *, path: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path
