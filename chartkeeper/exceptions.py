"""
Custom exception hierarchy for chartkeeper.

All exceptions inherit from :class:`ChartKeeperError` and carry optional
structured metadata via the ``details`` attribute for diagnostics and
logging.

Note that the extraction core never raises these for manifest content
problems: unparsable or unrelated files simply produce no dependencies.
They surface from the outer layers (configuration, file access, CLI).
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class ChartKeeperError(Exception):
    """Base exception for all chartkeeper errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ManifestParseError(ChartKeeperError):
    """Describes a YAML document that could not be parsed.

    Instances are attached to failed documents by the splitter rather than
    raised, so one broken document never hides the others in a file.

    Args:
        message: Error description.
        document_index: Zero-based position of the document in the file.
        line_number: First line (1-indexed) of the document in the file.
    """

    __slots__ = ("document_index", "line_number")

    def __init__(
        self,
        message: str,
        *,
        document_index: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "document", document_index)
        _add_if(details, "line", line_number)

        super().__init__(message, details)

        self.document_index = document_index
        self.line_number = line_number


class ConfigError(ChartKeeperError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class FileOperationError(ChartKeeperError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed (read/search).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error
