"""Custom exceptions for configuration management."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Exception raised when configuration validation fails.

    Carries every validation error found, suggestions for fixing them, and
    where the bad settings came from (a config file path or "environment"),
    and renders all of it in one human-readable message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[str] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: List of specific validation errors
            suggestions: List of helpful suggestions to fix the errors
            source: Config file path or "environment", when known
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with its source, all errors and suggestions."""
        parts = [self.message]

        if self.source:
            parts.append(f"Source: {self.source}")

        if self.errors:
            parts.append("\nValidation Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)
