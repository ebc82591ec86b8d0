"""
Pytest configuration and shared fixtures for excerptgen tests.

This module provides common test fixtures used across the test suite:
environments with and without optional capabilities, fresh source
buffers and configurations isolated from the user's environment.
"""

import pytest

from excerptgen.codegen import (
    Environment,
    FeatureType,
    SourceBuilder,
)
from excerptgen.utils.config import ExcerptgenConfig, set_config


GENERATED_MARKER = "javax.annotation.Generated"


@pytest.fixture
def generated_environment():
    """Environment that supports the generated annotation."""
    return Environment({FeatureType.GENERATED_ANNOTATION: GENERATED_MARKER})


@pytest.fixture
def bare_environment():
    """Environment without any optional capabilities."""
    return Environment()


@pytest.fixture
def source(generated_environment):
    """Fresh source buffer with the generated annotation available."""
    return SourceBuilder(generated_environment)


@pytest.fixture
def bare_source(bare_environment):
    """Fresh source buffer without optional capabilities."""
    return SourceBuilder(bare_environment)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove excerptgen environment variable overrides."""
    for name in (
        "EXCERPTGEN_LOG_LEVEL",
        "EXCERPTGEN_DISABLE_DUPLICATE_CHECK",
        "EXCERPTGEN_GENERATED_ANNOTATION",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def default_config(clean_env, tmp_path):
    """Default configuration that does not read any file on disk."""
    return ExcerptgenConfig(str(tmp_path / "missing_config.json"))


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure tests do not leak a global configuration."""
    yield
    set_config(None)
