"""Custom exceptions for the converter."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base exception for conversion errors.

    Carries the offending source path and, where a pattern matched, the
    exact text that could not be converted.
    """

    def __init__(self, message: str, *, path: Path | None = None, text: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.text = text

    def __str__(self) -> str:
        parts = [self.message]
        if self.path is not None:
            parts.append(f"file = '{self.path}'")
        if self.text is not None:
            parts.append(f"match = '{self.text}'")
        return "\n".join(parts)


class ExportStructureError(ConversionError):
    """Raised when the export tree does not follow the expected layout."""
    pass


class UnresolvedReferenceError(ConversionError):
    """Raised when a [[note reference]] names a note that was not exported."""
    pass


class MalformedReferenceError(ConversionError):
    """Raised when a matched reference cannot be taken apart."""
    pass


class FileAccessError(ConversionError):
    """Raised when a file cannot be read or written."""
    pass


class IndexSealedError(ConversionError):
    """Raised when document paths are changed after links were resolved."""
    pass
