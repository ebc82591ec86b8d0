"""
Unit tests for the SourceBuilder buffer and environment capabilities.
"""

import pytest

from excerptgen.codegen import (
    Capability,
    Environment,
    FeatureType,
    SourceBuilder,
    format_template,
)
from excerptgen.utils.exceptions import FormattingError


class TestFormatTemplate:
    """Test positional template substitution."""

    def test_positional_arguments(self):
        assert format_template("%s(%s)", ["f", "x"]) == "f(x)"

    def test_no_arguments(self):
        assert format_template("plain", []) == "plain"

    def test_placeholder_mismatch(self):
        """Test that mismatched counts raise a FormattingError."""
        with pytest.raises(FormattingError) as exc_info:
            format_template("%s and %s", ["one"])

        assert exc_info.value.template == "%s and %s"
        assert exc_info.value.arguments == 1

    def test_malformed_template(self):
        """Test that a dangling percent sign is rejected."""
        with pytest.raises(FormattingError):
            format_template("100%", [])

    def test_tuple_argument_is_single_value(self):
        """Test that a tuple argument fills one placeholder."""
        assert format_template("%s", [(1, 2)]) == "(1, 2)"

    def test_non_string_template(self):
        with pytest.raises(TypeError):
            format_template(b"%s", ["x"])


class TestSourceBuilder:
    """Test buffer accumulation."""

    def test_add_accumulates(self):
        """Test that successive writes are concatenated."""
        source = SourceBuilder()
        source.add("a").add("%s", "b")

        assert source.to_source() == "ab"
        assert str(source) == "ab"

    def test_add_line(self):
        """Test that add_line appends a line break."""
        source = SourceBuilder()
        source.add_line("int %s;", "x").add_line("}")

        assert source.to_source() == "int x;\n}\n"

    def test_custom_line_separator(self):
        source = SourceBuilder(line_separator="\r\n")
        source.add_line("x")

        assert source.to_source() == "x\r\n"

    def test_failed_write_leaves_buffer_unchanged(self):
        """Test that a formatting error writes nothing."""
        source = SourceBuilder()
        source.add("kept")

        with pytest.raises(FormattingError):
            source.add_line("%s %s", "only one")

        assert source.to_source() == "kept"

    def test_default_environment_has_no_features(self):
        source = SourceBuilder()
        assert not source.feature(FeatureType.GENERATED_ANNOTATION).is_present


class TestCapability:
    """Test capability queries."""

    def test_present_capability(self, source):
        """Test the value and consumer of an available capability."""
        capability = source.feature(FeatureType.GENERATED_ANNOTATION)
        received = []

        capability.if_present(received.append)

        assert capability.is_present
        assert bool(capability)
        assert received == ["javax.annotation.Generated"]

    def test_absent_capability(self, bare_source):
        """Test that the consumer is not called for a missing capability."""
        capability = bare_source.feature(FeatureType.GENERATED_ANNOTATION)
        received = []

        capability.if_present(received.append)

        assert capability == Capability(FeatureType.GENERATED_ANNOTATION, None)
        assert not capability
        assert received == []


class TestEnvironment:
    """Test the static capability lookup."""

    def test_lookup(self, generated_environment):
        assert generated_environment.lookup(FeatureType.GENERATED_ANNOTATION) == "javax.annotation.Generated"

    def test_with_feature_returns_copy(self, bare_environment):
        """Test that with_feature leaves the original untouched."""
        updated = bare_environment.with_feature(FeatureType.GENERATED_ANNOTATION, "a.Generated")

        assert updated.lookup(FeatureType.GENERATED_ANNOTATION) == "a.Generated"
        assert bare_environment.lookup(FeatureType.GENERATED_ANNOTATION) is None

    def test_with_feature_none_removes(self, generated_environment):
        updated = generated_environment.with_feature(FeatureType.GENERATED_ANNOTATION, None)
        assert updated.lookup(FeatureType.GENERATED_ANNOTATION) is None

    def test_from_config(self, default_config):
        """Test that the features section populates the environment."""
        environment = Environment.from_config(default_config)
        assert environment.lookup(FeatureType.GENERATED_ANNOTATION) == "javax.annotation.Generated"

        default_config.features.generated_annotation = None
        assert Environment.from_config(default_config).lookup(FeatureType.GENERATED_ANNOTATION) is None

    def test_custom_lookup(self):
        """Test that any object with a lookup method can back a buffer."""

        class AlwaysGenerated:
            def lookup(self, feature):
                return "x.Generated"

        source = SourceBuilder(AlwaysGenerated())
        assert source.feature(FeatureType.GENERATED_ANNOTATION).value == "x.Generated"
