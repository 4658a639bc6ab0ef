"""Custom exception hierarchy for the FCU to JSON converter.

Provides structured exceptions with error context and correction hints
so the CLI can report load failures with field-level diagnostics.
"""

from enum import Enum
from typing import Any


class ConverterError(Exception):
    """Base exception for all converter errors.

    ``error_data`` carries the structured context (path, record, field)
    that the CLI logs; ``suggestion`` is a hint for fixing the input file.
    """

    def __init__(
        self,
        message: str,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_data = error_data or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """Log-ready view of the error, keyed by the exception class name."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_data": self.error_data,
            "suggestion": self.suggestion,
        }


class LoadErrorKind(Enum):
    """The two ways loading an FCU configuration file can fail."""

    OPEN_FAILED = "OpenFailed"
    PARSE_FAILED = "ParseFailed"


class LoadError(ConverterError):
    """Failure to load an FCU configuration file.

    Never raised directly; see ``OpenFailedError`` and ``ParseFailedError``.
    """

    kind: LoadErrorKind

    def __init__(
        self,
        message: str,
        path: str,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize load error.

        Args:
            message: Human-readable error message.
            path: The configuration file that failed to load.
            error_data: Additional context; ``kind`` and ``path`` are added.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"kind": self.kind.value, "path": path})
        super().__init__(message, data, suggestion)
        self.path = path


class OpenFailedError(LoadError):
    """The configuration file could not be opened.

    Examples:
        - File does not exist
        - Path is a directory
        - Permission denied
    """

    kind = LoadErrorKind.OPEN_FAILED

    def __init__(
        self,
        path: str,
        reason: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize open failure.

        Args:
            path: The path that could not be opened.
            reason: OS-level reason (e.g. "No such file or directory").
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"reason": reason})

        default_suggestion = suggestion or (
            "Check that the file exists and is readable. "
            "Export the layout configuration from FCU as XML if needed."
        )

        super().__init__(
            f"error opening file {path}", path, data, default_suggestion
        )
        self.reason = reason


class ParseFailedError(LoadError):
    """The configuration file is not a valid FCU XML document.

    Examples:
        - Malformed XML
        - Wrong root element
        - Missing required element (e.g. ``moduleType``)
        - Non-numeric or out of range text in a numeric field
    """

    kind = LoadErrorKind.PARSE_FAILED

    def __init__(
        self,
        message: str,
        path: str,
        record: str | None = None,
        index: int | None = None,
        field: str | None = None,
        expected: str | None = None,
        received: Any = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize parse failure.

        Args:
            message: Human-readable error message.
            path: The file being parsed.
            record: Record element tag (e.g. "userEvents").
            index: Zero-based position of the record among its siblings.
            field: XML name of the failing leaf (e.g. "eventNode").
            expected: Expected data type or format.
            received: Actual text received (None when the leaf is missing).
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update(
            {
                "record": record,
                "index": index,
                "field": field,
                "expected": expected,
                "received": str(received)[:200] if received is not None else None,
            }
        )

        default_suggestion = suggestion or (
            f"Expected {expected} for '{field}' in {record}[{index}], "
            f"but received: {received!r}. Check the FCU export."
            if field and expected
            else "Check that the file is a complete FCU XML export."
        )

        super().__init__(message, path, data, default_suggestion)
        self.record = record
        self.index = index
        self.field = field
        self.expected = expected
        self.received = received
