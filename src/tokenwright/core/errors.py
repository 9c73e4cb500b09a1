"""
Error types for tokenwright color parsing, spec loading, and export.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenwrightError(Exception):
    """Base exception for all tokenwright errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class InvalidColorFormat(TokenwrightError, ValueError):
    """
    Raised when a color string cannot be parsed as hex.

    Examples:
    - Wrong length (not 3 or 6 hex digits)
    - Non-hex characters
    - Non-string input
    """

    pass


class TokenSpecError(TokenwrightError):
    """
    Raised when a token spec cannot be loaded or parsed.

    Examples:
    - Missing tokenspec.yaml when defaults are disabled
    - Invalid YAML syntax
    - Schema violations (unknown casing, bad separator)
    """

    pass


class ExportError(TokenwrightError):
    """
    Raised when tokens cannot be exported.

    Examples:
    - Unknown export format
    - Output path is a directory
    """

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        source: Optional path of the file being processed
        field_path: Optional dotted/indexed path inside the spec,
            e.g. ``groups[0].variants[1].palette_ref``
    """

    source: Path | None = None
    field_path: str | None = None

    def format(self) -> str:
        """
        Format context as a human-readable prefix.

        Returns:
            String like ``tokenspec.yaml (palettes[2].base_value)``
        """
        if self.source and self.field_path:
            return f"{self.source} ({self.field_path})"
        if self.source:
            return str(self.source)
        return self.field_path or ""


def make_color_error(value: object, field_path: str | None = None) -> InvalidColorFormat:
    """
    Helper to create an InvalidColorFormat with optional context.

    Args:
        value: The offending input
        field_path: Optional location inside a spec

    Returns:
        InvalidColorFormat with context attached when a path is given
    """
    message = f"Invalid hex color: {value!r}"
    if field_path:
        return InvalidColorFormat(message, ErrorContext(field_path=field_path))
    return InvalidColorFormat(message)
