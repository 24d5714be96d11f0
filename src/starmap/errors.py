"""Exceptions raised by starmap."""

from typing import Optional


class StarmapError(Exception):
    """Base exception for starmap-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class InvalidArgumentError(StarmapError, ValueError):
    """Raised when an argument violates a documented precondition."""


class NullOperandError(InvalidArgumentError):
    """Raised when a star is compared against None."""

    def __init__(self):
        super().__init__(
            "Cannot compare a star with None",
            suggestions=["Filter missing catalog rows before ordering stars"],
        )


class TimeParseError(InvalidArgumentError):
    """Raised when UTC time cannot be parsed."""

    def __init__(self, utc_time: str):
        message = f"Invalid UTC time format: '{utc_time}'"
        suggestions = [
            "Use ISO-8601 format with 'Z' suffix for UTC (e.g., '2024-01-15T18:00:00Z')",
        ]
        super().__init__(message, suggestions)


def out_of_range(
    name: str, value: object, valid_range: str, suggestions: Optional[list[str]] = None
) -> InvalidArgumentError:
    """Build the error for a value outside its documented range.

    Args:
        name: Parameter name as the caller knows it
        value: Offending value
        valid_range: Human readable description of the allowed range
        suggestions: Optional list of actionable suggestions

    Returns:
        InvalidArgumentError ready to raise
    """
    return InvalidArgumentError(
        f"{name} {value!r} outside valid range {valid_range}", suggestions
    )
