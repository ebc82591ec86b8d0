"""
Source Rendering Driver.

Renders a sequence of excerpts into a fresh SourceBuilder, followed by
the static excerpts in their sorted order and then any footer excerpts.
A failed pass never returns partial output: the buffer is dropped and a
GenerationError is raised.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .excerpt import Excerpt
from .features import CapabilityLookup, Environment
from .source_builder import SourceBuilder
from .static_excerpt import StaticExcerpt
from ..utils.config import ExcerptgenConfig, get_config
from ..utils.exceptions import DuplicateStaticExcerptError, GenerationError
from ..utils.logging import GenerationLogger

_generation_logger = GenerationLogger(__name__)


def sort_static_excerpts(
    excerpts: Iterable[StaticExcerpt],
    check_duplicates: bool = True,
) -> Tuple[StaticExcerpt, ...]:
    """
    Sort static excerpts into placement order.

    Args:
        excerpts: Static excerpts in discovery order
        check_duplicates: Reject distinct excerpts sharing a type and name

    Returns:
        Excerpts ordered by type, then name

    Raises:
        DuplicateStaticExcerptError: If ``check_duplicates`` is set and two
            different excerpts share a type and name
    """
    ordered = sorted(excerpts)
    if not check_duplicates:
        return tuple(ordered)

    result: List[StaticExcerpt] = []
    for excerpt in ordered:
        if result and result[-1].sort_key == excerpt.sort_key:
            # Equal excerpts are interchangeable, keep one
            if result[-1] == excerpt:
                continue
            raise DuplicateStaticExcerptError(excerpt.type.name, excerpt.name)
        result.append(excerpt)
    return tuple(result)


def render_source(
    excerpts: Iterable[Excerpt],
    static_excerpts: Iterable[StaticExcerpt] = (),
    footer: Iterable[Excerpt] = (),
    environment: Optional[CapabilityLookup] = None,
    config: Optional[ExcerptgenConfig] = None,
) -> str:
    """
    Render excerpts into source text.

    Args:
        excerpts: Excerpts rendered in the given order
        static_excerpts: Static excerpts, sorted and rendered after ``excerpts``
        footer: Excerpts rendered last, e.g. a closing brace
        environment: Capability lookup; built from ``config`` when omitted
        config: Configuration; the global configuration when omitted

    Returns:
        The generated source text

    Raises:
        GenerationError: If any excerpt fails to render
    """
    if config is None:
        config = get_config()
    if environment is None:
        environment = Environment.from_config(config)

    excerpts = tuple(excerpts)
    static_excerpts = tuple(static_excerpts)
    footer = tuple(footer)
    _generation_logger.log_generation_start(len(excerpts) + len(footer), len(static_excerpts))

    source = SourceBuilder(environment, line_separator=config.generation.line_separator)
    try:
        ordered = sort_static_excerpts(
            static_excerpts, config.generation.check_duplicate_static_excerpts
        )
        _generation_logger.log_static_order(list(ordered))
        for excerpt in excerpts + ordered + footer:
            excerpt.render(source)
    except Exception as e:
        _generation_logger.log_generation_failed(str(e))
        raise GenerationError(
            f"Failed to render source: {e}", len(excerpts) + len(static_excerpts) + len(footer)
        ) from e

    return source.to_source()
