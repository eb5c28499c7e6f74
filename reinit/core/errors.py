"""
Error taxonomy for file initialization.

Per-request failures (everything except ``InvalidFileType`` and
``ConfigError``) are caught by the init orchestrator and turned into an
``error`` result. They never abort a batch.
"""

from __future__ import annotations


class ReinitError(Exception):
    """Base class for all reinit errors."""


class InvalidFileType(ReinitError):
    """Raised when a file type is not registered where a known one is required."""

    def __init__(self, file_type: str, known: list[str] | None = None):
        self.file_type = file_type
        self.known = list(known or [])
        message = f"Invalid file type: {file_type}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class SourceNotFound(ReinitError):
    """Raised when the resolved copy source does not exist."""

    def __init__(self, path: str, label: str = "Source"):
        self.path = path
        super().__init__(f"{label} file not found: {path}")


class FallbackExhausted(ReinitError):
    """Raised when both the primary and the fallback copy failed."""

    def __init__(self, primary: BaseException, fallback: BaseException):
        self.primary = str(primary)
        self.fallback = str(fallback)
        super().__init__(
            f"Primary copy error: {self.primary}\n"
            f"Fallback copy error: {self.fallback}"
        )


class WriteFailure(ReinitError):
    """Raised when creating directories or writing a file fails."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


class ConfigError(ReinitError):
    """Raised when reinit configuration is invalid or unreadable."""
