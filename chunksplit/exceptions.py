"""Error kinds raised by the splitter and the offset resolver."""

from typing import Any


class ChunkingError(Exception):
    """Base exception for all chunking-related errors."""

    def __init__(
        self,
        detail: str,
        error_code: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or self.__class__.__name__
        self.cause = cause

    def __str__(self) -> str:
        return self.detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for serialization."""
        result: dict[str, Any] = {
            "error_code": self.error_code,
            "detail": self.detail,
            "type": self.__class__.__name__,
        }
        if self.cause is not None:
            result["cause"] = type(self.cause).__name__
        return result


class InvalidConfiguration(ChunkingError, ValueError):
    """Raised before any splitting work when chunk size, overlap or strategy are invalid."""


class OutOfRange(ChunkingError, IndexError):
    """Raised when offsets passed to get_chunk fall outside the virtual document."""

    def __init__(self, detail: str, start: int, end: int | None, total_length: int) -> None:
        super().__init__(detail)
        self.start = start
        self.end = end
        self.total_length = total_length

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update({"start": self.start, "end": self.end, "total_length": self.total_length})
        return result


class LengthFunctionError(ChunkingError):
    """Raised when the injected length function fails or returns something that is not a length."""
