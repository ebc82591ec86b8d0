"""
Primitive Excerpts.

Factory functions for the basic building blocks of generated source:
formatted text, the empty excerpt, the optional generated annotation and
separator-joined sequences. The concrete classes are exported as well so
that descriptions can be evaluated back into equal excerpts.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any, Iterable, Tuple

from .excerpt import Excerpt, FieldReceiver
from .features import FeatureType
from .source_builder import SourceBuilder
from ..utils.logging import GenerationLogger

_generation_logger = GenerationLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class FormattedTextExcerpt(Excerpt):
    """Text produced by substituting arguments into a template."""

    template: str
    args: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.template, str):
            raise TypeError(f"Template must be a string, got {type(self.template).__name__}")
        object.__setattr__(self, "args", tuple(self.args))

    def render(self, source: SourceBuilder) -> None:
        source.add(self.template, *self.args)

    def report_fields(self, fields: FieldReceiver) -> None:
        fields.add("template", self.template)
        fields.add("args", self.args)


def add(template: str, *args: Any) -> Excerpt:
    """Return an excerpt that renders ``template % args``."""
    return FormattedTextExcerpt(template, args)


@dataclass(frozen=True, eq=False, repr=False)
class EmptyExcerpt(Excerpt):
    """Excerpt that renders nothing. There is only one instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def render(self, source: SourceBuilder) -> None:
        pass

    def report_fields(self, fields: FieldReceiver) -> None:
        pass


EMPTY = EmptyExcerpt()


def empty() -> Excerpt:
    """Return the empty excerpt."""
    return EMPTY


def qualified_name(entity: Any) -> str:
    """Return the fully qualified dotted name of a class, function or module."""
    if isinstance(entity, str):
        return entity
    if isinstance(entity, types.ModuleType):
        return entity.__name__
    module = getattr(entity, "__module__", None)
    qualname = getattr(entity, "__qualname__", None)
    if module is None or qualname is None:
        raise TypeError(f"Cannot determine the qualified name of {entity!r}")
    return f"{module}.{qualname}"


@dataclass(frozen=True, eq=False, repr=False)
class GeneratedAnnotationExcerpt(Excerpt):
    """
    Generated-code marker naming the generator that produced the source.

    Whether a marker type exists is decided by the target environment at
    render time. When it is missing nothing is written. The generator is
    stored as its qualified name, so ``generated(Cls)`` and
    ``generated("module.Cls")`` are the same excerpt.
    """

    generator: str

    def __post_init__(self):
        object.__setattr__(self, "generator", qualified_name(self.generator))

    def render(self, source: SourceBuilder) -> None:
        capability = source.feature(FeatureType.GENERATED_ANNOTATION)
        capability.if_present(
            lambda marker: source.add_line('@%s("%s")', marker, self.generator)
        )
        if not capability:
            _generation_logger.log_capability_missing(capability.feature.value, self)

    def report_fields(self, fields: FieldReceiver) -> None:
        fields.add("generator", self.generator)


def generated(generator: Any) -> Excerpt:
    """
    Return an excerpt of the generated annotation, if available, with its
    value set to the fully qualified name of ``generator``.
    """
    return GeneratedAnnotationExcerpt(generator)


@dataclass(frozen=True, eq=False, repr=False)
class JoinedExcerpt(Excerpt):
    """
    Descriptions of several items with a separator between each pair.

    Items are interpolated as text, so an excerpt item contributes its
    description rather than its rendered output. Empty excerpts are
    dropped, so they never add a separator.
    """

    separator: str
    excerpts: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.separator, str):
            raise TypeError(f"Separator must be a string, got {type(self.separator).__name__}")
        items = tuple(item for item in self.excerpts if not isinstance(item, EmptyExcerpt))
        object.__setattr__(self, "excerpts", items)

    def render(self, source: SourceBuilder) -> None:
        item_prefix = ""
        for item in self.excerpts:
            source.add("%s%s", item_prefix, item)
            item_prefix = self.separator

    def report_fields(self, fields: FieldReceiver) -> None:
        fields.add("separator", self.separator)
        fields.add("excerpts", self.excerpts)


def join(separator: str, excerpts: Iterable[Any]) -> Excerpt:
    """Return an excerpt joining ``excerpts`` with ``separator``."""
    return JoinedExcerpt(separator, tuple(excerpts))
