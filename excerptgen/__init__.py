"""
excerptgen: Composable Excerpts for Source Code Generation

Generators build source artifacts out of small immutable excerpts that
render themselves into a shared buffer, compare by value and describe
themselves for debugging and deduplication.

Usage:
    from excerptgen import add, generated, join, render_source

    source = render_source([
        generated(MyGenerator),
        add("class %s {\\n", "Person"),
        add("}\\n"),
    ])
"""

__version__ = "0.1.0"
__author__ = "excerptgen Team"
__email__ = "excerptgen@example.com"

# Public API exports
from .codegen import (
    Excerpt,
    FieldReceiver,
    SourceBuilder,
    FeatureType,
    Environment,
    StaticExcerpt,
    StaticExcerptType,
    add,
    empty,
    generated,
    join,
    static_excerpt,
    sort_static_excerpts,
    render_source,
)

from .utils import (
    get_config,
    ExcerptgenConfig,
    ExcerptgenError,
)

__all__ = [
    "Excerpt",
    "FieldReceiver",
    "SourceBuilder",
    "FeatureType",
    "Environment",
    "StaticExcerpt",
    "StaticExcerptType",
    "add",
    "empty",
    "generated",
    "join",
    "static_excerpt",
    "sort_static_excerpts",
    "render_source",
    "get_config",
    "ExcerptgenConfig",
    "ExcerptgenError",
]
