"""
Utils package for excerptgen.

This module provides logging, configuration and the exception
hierarchy shared by the code generation modules.
"""

from .exceptions import (
    ExcerptgenError,
    FormattingError,
    DuplicateStaticExcerptError,
    GenerationError,
)

from .config import (
    ExcerptgenConfig,
    LoggingConfig,
    GenerationConfig,
    FeatureConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, GenerationLogger

__all__ = [
    # Exceptions
    "ExcerptgenError",
    "FormattingError",
    "DuplicateStaticExcerptError",
    "GenerationError",

    # Configuration
    "ExcerptgenConfig",
    "LoggingConfig",
    "GenerationConfig",
    "FeatureConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "GenerationLogger",
]
