"""
Unit tests for the excerptgen exception hierarchy.
"""

import pytest

from excerptgen.utils.exceptions import (
    ExcerptgenError,
    FormattingError,
    DuplicateStaticExcerptError,
    GenerationError,
)


class TestExcerptgenExceptions:
    """Test cases for custom exception classes."""

    def test_base_error(self):
        """Test basic ExcerptgenError functionality."""
        error = ExcerptgenError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_base_error_with_details(self):
        """Test ExcerptgenError with details."""
        error = ExcerptgenError("Test error", {"key1": "value1", "key2": 42})

        assert error.message == "Test error"
        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_formatting_error(self):
        error = FormattingError("%s + %s", 1, "not enough arguments for format string")

        assert error.template == "%s + %s"
        assert error.arguments == 1
        assert error.details["arguments"] == 1
        assert "'%s + %s'" in str(error)
        assert "not enough arguments" in str(error)

    def test_duplicate_static_excerpt_error(self):
        error = DuplicateStaticExcerptError("METHOD", "build")

        assert error.excerpt_type == "METHOD"
        assert error.name == "build"
        assert "METHOD" in str(error)
        assert "'build'" in str(error)

    def test_generation_error(self):
        error = GenerationError("Failed to render source", excerpt_count=3)

        assert error.excerpt_count == 3
        assert str(error) == "Failed to render source (excerpt_count=3)"

    def test_generation_error_without_count(self):
        error = GenerationError("Failed")

        assert error.details == {}
        assert str(error) == "Failed"

    @pytest.mark.parametrize("error", [
        FormattingError("%s", 0),
        DuplicateStaticExcerptError("TYPE", "Builder"),
        GenerationError("Failed"),
    ])
    def test_hierarchy(self, error):
        """Test that all errors share the package base class."""
        assert isinstance(error, ExcerptgenError)
        assert isinstance(error, Exception)
