"""
Static Excerpts: Top-Level Members With a Fixed Placement Order.

Members discovered during analysis may arrive in any order. Wrapping them
in static excerpts lets the driver sort them by (type, name) so the
generated source is identical from run to run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Tuple

from .excerpt import Excerpt, FieldReceiver
from .source_builder import SourceBuilder


class StaticExcerptType(Enum):
    """Kinds of static member, in placement order."""

    TYPE = auto()
    METHOD = auto()


@dataclass(frozen=True, eq=False, repr=False)
class StaticExcerpt(Excerpt):
    """
    Abstract excerpt for a named top-level member.

    Static excerpts are totally ordered by type (in declaration order of
    StaticExcerptType) and then by name. Callers must not create two
    different static excerpts with the same type and name.
    """

    type: StaticExcerptType
    name: str

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.type.value, self.name)

    def report_fields(self, fields: FieldReceiver) -> None:
        fields.add("type", self.type)
        fields.add("name", self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StaticExcerpt):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StaticExcerpt):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StaticExcerpt):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StaticExcerpt):
            return NotImplemented
        return self.sort_key >= other.sort_key


@dataclass(frozen=True, eq=False, repr=False)
class FormattedStaticExcerpt(StaticExcerpt):
    """Static member whose body is a formatted template."""

    template: str = ""
    args: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.template, str):
            raise TypeError(f"Template must be a string, got {type(self.template).__name__}")
        object.__setattr__(self, "args", tuple(self.args))

    def render(self, source: SourceBuilder) -> None:
        source.add(self.template, *self.args)

    def report_fields(self, fields: FieldReceiver) -> None:
        super().report_fields(fields)
        fields.add("template", self.template)
        fields.add("args", self.args)


def static_excerpt(excerpt_type: StaticExcerptType, name: str, template: str, *args: Any) -> StaticExcerpt:
    """Return a static excerpt named ``name`` that renders ``template % args``."""
    return FormattedStaticExcerpt(excerpt_type, name, template, args)
