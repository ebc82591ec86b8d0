"""
Code generation package for excerptgen.

This package provides the Excerpt value type and its primitive variants,
the SourceBuilder buffer they render into, optional environment
capabilities, static excerpts and the rendering driver.
"""

from .excerpt import Excerpt, FieldReceiver, FieldList
from .excerpts import (
    FormattedTextExcerpt,
    EmptyExcerpt,
    GeneratedAnnotationExcerpt,
    JoinedExcerpt,
    add,
    empty,
    generated,
    join,
    qualified_name,
)
from .features import FeatureType, Capability, CapabilityLookup, Environment
from .source_builder import SourceBuilder, format_template
from .static_excerpt import (
    StaticExcerptType,
    StaticExcerpt,
    FormattedStaticExcerpt,
    static_excerpt,
)
from .source_file import sort_static_excerpts, render_source

__all__ = [
    # Core
    "Excerpt",
    "FieldReceiver",
    "FieldList",

    # Primitive excerpts
    "FormattedTextExcerpt",
    "EmptyExcerpt",
    "GeneratedAnnotationExcerpt",
    "JoinedExcerpt",
    "add",
    "empty",
    "generated",
    "join",
    "qualified_name",

    # Environment
    "FeatureType",
    "Capability",
    "CapabilityLookup",
    "Environment",

    # Buffer
    "SourceBuilder",
    "format_template",

    # Static excerpts
    "StaticExcerptType",
    "StaticExcerpt",
    "FormattedStaticExcerpt",
    "static_excerpt",

    # Driver
    "sort_static_excerpts",
    "render_source",
]
