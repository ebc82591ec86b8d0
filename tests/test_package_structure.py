"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import sys
from pathlib import Path

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_main_package_import():
    """Test that the main excerptgen package can be imported."""
    import excerptgen

    assert hasattr(excerptgen, '__version__')
    assert hasattr(excerptgen, '__author__')
    assert hasattr(excerptgen, 'render_source')
    assert hasattr(excerptgen, 'Excerpt')


def test_codegen_imports():
    """Test that codegen submodules can be imported."""
    from excerptgen.codegen import (
        Excerpt,
        FieldReceiver,
        SourceBuilder,
        Environment,
        StaticExcerpt,
        add,
        empty,
        generated,
        join,
        render_source,
    )

    assert Excerpt is not None
    assert FieldReceiver is not None
    assert SourceBuilder is not None
    assert Environment is not None
    assert StaticExcerpt is not None
    assert callable(add)
    assert callable(empty)
    assert callable(generated)
    assert callable(join)
    assert callable(render_source)


def test_utils_imports():
    """Test that utility modules can be imported."""
    from excerptgen.utils import (
        ExcerptgenError,
        ExcerptgenConfig,
        get_config,
        get_logger,
        GenerationLogger,
    )

    assert issubclass(ExcerptgenError, Exception)
    assert ExcerptgenConfig is not None
    assert callable(get_config)
    assert callable(get_logger)
    assert GenerationLogger is not None


def test_public_api_matches_all():
    """Test that every name in __all__ is exported."""
    import excerptgen

    for name in excerptgen.__all__:
        assert hasattr(excerptgen, name), name
