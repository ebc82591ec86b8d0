#!/usr/bin/env python3
"""
Basic usage example for excerptgen.

This example builds a small Java value class out of excerpts and renders
it twice: once for an environment that provides the generated annotation
and once for an environment that does not.
"""

from excerptgen import (
    Environment,
    FeatureType,
    StaticExcerptType,
    add,
    generated,
    join,
    render_source,
    static_excerpt,
)


class ValueTypeGenerator:
    """Generator named in the generated annotation."""


def main():
    """Demonstrate basic excerpt composition."""
    print("excerptgen - Basic Usage Example")
    print("=" * 60)

    fields = ["name", "email"]
    body = [
        generated(ValueTypeGenerator),
        add("public class %s {\n", "Person"),
        add("  public %s(", "Person"),
        join(", ", [f"String {field}" for field in fields]),
        add(") {}\n"),
    ]

    # Discovered out of order, rendered sorted
    members = [
        static_excerpt(StaticExcerptType.METHOD, "of", "  public static Person of() { return null; }\n"),
        static_excerpt(StaticExcerptType.TYPE, "Builder", "  public static class Builder {}\n"),
    ]
    closing = add("}\n")

    with_annotation = Environment({FeatureType.GENERATED_ANNOTATION: "javax.annotation.Generated"})
    without_annotation = Environment()

    print("\n1. Environment with the generated annotation:\n")
    print(render_source(body, members, [closing], environment=with_annotation))

    print("2. Environment without the generated annotation:\n")
    print(render_source(body, members, [closing], environment=without_annotation))


if __name__ == "__main__":
    main()
