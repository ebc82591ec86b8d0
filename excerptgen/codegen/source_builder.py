"""
Source Buffer for Excerpt Rendering.

SourceBuilder accumulates generated text in memory. Excerpts write to it
with ``%s``-style positional templates and query it for optional
capabilities of the target environment.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .features import Capability, CapabilityLookup, Environment, FeatureType
from ..utils.exceptions import FormattingError


def format_template(template: str, args: Sequence[Any]) -> str:
    """
    Substitute ``args`` into the positional placeholders of ``template``.

    Args:
        template: Template using ``%s`` placeholders (``%%`` for a literal percent)
        args: Values matched left to right against the placeholders

    Returns:
        Formatted text

    Raises:
        TypeError: If the template is not a string
        FormattingError: If placeholders and arguments do not match
    """
    if not isinstance(template, str):
        raise TypeError(f"Template must be a string, got {type(template).__name__}")

    try:
        return template % tuple(args)
    except (TypeError, ValueError, KeyError) as e:
        raise FormattingError(template, len(args), str(e)) from e


class SourceBuilder:
    """
    Mutable, sequential output buffer for a single rendering pass.

    The builder is not thread-safe; each pass uses its own instance.
    """

    def __init__(self, environment: Optional[CapabilityLookup] = None, line_separator: str = "\n"):
        """Initialize an empty buffer."""
        self._environment = environment if environment is not None else Environment()
        self._line_separator = line_separator
        self._parts: List[str] = []

    @property
    def environment(self) -> CapabilityLookup:
        return self._environment

    def add(self, template: str, *args: Any) -> 'SourceBuilder':
        """Append formatted text."""
        self._parts.append(format_template(template, args))
        return self

    def add_line(self, template: str, *args: Any) -> 'SourceBuilder':
        """Append formatted text followed by a line break."""
        text = format_template(template, args)
        self._parts.append(text + self._line_separator)
        return self

    def feature(self, feature: FeatureType) -> Capability:
        """Query an optional capability of the target environment."""
        return Capability(feature, self._environment.lookup(feature))

    def to_source(self) -> str:
        """Return the accumulated text."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.to_source()
