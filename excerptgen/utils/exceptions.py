"""
Custom exception definitions.

This module defines the exception hierarchy for excerptgen-specific
errors raised while rendering excerpts into source text.
"""

from typing import Optional


class ExcerptgenError(Exception):
    """
    Base exception for all excerptgen-related errors.

    This is the root exception class for all excerptgen-specific
    errors, carrying an optional dictionary of diagnostic details.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize excerptgen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class FormattingError(ExcerptgenError):
    """
    Raised when a template and its arguments disagree.

    The source buffer raises this when the number of placeholders in a
    template does not match the number of arguments supplied, or when the
    template itself is malformed.
    """

    def __init__(self, template: str, arguments: int, reason: str = ""):
        """
        Initialize formatting error.

        Args:
            template: Template that failed to format
            arguments: Number of arguments supplied
            reason: Optional explanation from the formatter
        """
        message = f"Cannot format template {template!r} with {arguments} argument(s)"
        if reason:
            message += f": {reason}"

        super().__init__(message, {'arguments': arguments})
        self.template = template
        self.arguments = arguments
        self.reason = reason


class DuplicateStaticExcerptError(ExcerptgenError):
    """
    Raised when two distinct static excerpts claim the same placement.

    Static excerpts are ordered by (type, name); two different excerpts
    sharing that key would make the generated member order ambiguous.
    """

    def __init__(self, excerpt_type: str, name: str):
        """
        Initialize duplicate static excerpt error.

        Args:
            excerpt_type: Name of the shared static excerpt type
            name: Shared member name
        """
        super().__init__(
            f"Distinct static excerpts share type {excerpt_type} and name '{name}'",
            {'type': excerpt_type, 'name': name},
        )
        self.excerpt_type = excerpt_type
        self.name = name


class GenerationError(ExcerptgenError):
    """
    Raised when a rendering pass fails.

    The driver raises this after discarding its buffer, chaining the
    original exception as the cause.
    """

    def __init__(self, message: str, excerpt_count: Optional[int] = None):
        """
        Initialize generation error.

        Args:
            message: Error description
            excerpt_count: Optional number of excerpts in the failed pass
        """
        details = {}
        if excerpt_count is not None:
            details['excerpt_count'] = excerpt_count

        super().__init__(message, details)
        self.excerpt_count = excerpt_count
