"""
Rendering Example
=================

This example demonstrates how to build syntax trees with fixdsl and observe
them through catamorphisms. It covers:

1. Building trees bottom-up from Fix layers
2. Rendering with the debug, plain and pretty algebras
3. Writing your own algebra (free variables, node counts)
4. Plugging a custom document type into the pretty algebra
"""

from typing import assert_never

from fixdsl import (
    Abstract,
    Apply,
    Assign,
    Group,
    Literal,
    Syntax,
    Variable,
    abstract,
    apply,
    assign,
    cata,
    debug,
    group,
    literal,
    plain,
    pretty,
    render,
    variable,
)


# ============================================================================
# Step 1: Build a Tree
# ============================================================================
# Trees are built leaves first. Each helper wraps one Syntax layer in a Fix.


def example_tree():
    """Build: Main{inc = λx. add(x, 1)\nresult = inc(41)}"""

    return group(
        "Main",
        assign("inc", abstract(["x"], apply(variable("add"), variable("x"), literal("1")))),
        assign("result", apply(variable("inc"), literal("41"))),
    )


# ============================================================================
# Step 2: Built-in Renderers
# ============================================================================


def example_renderers():
    """Render the same tree three ways."""

    tree = example_tree()

    print("Debug:")
    print(debug(tree))
    print()

    print("Plain:")
    print(plain(tree))
    print()

    print("Pretty (naive layout):")
    print(render(pretty(tree)))
    print()

    assert render(pretty(tree)) == plain(tree)


# ============================================================================
# Step 3: Custom Algebras
# ============================================================================
# An algebra sees one layer whose children are already folded. cata does
# the walking.


def free_variables(layer: Syntax[frozenset[str]]) -> frozenset[str]:
    """Names referenced but not bound by an enclosing abstraction."""
    match layer:
        case Variable(name):
            return frozenset({name})
        case Literal():
            return frozenset()
        case Abstract(parameters, body):
            return body - frozenset().union(*parameters)
        case Apply() | Assign() | Group():
            return frozenset().union(*layer.payloads())
        case _:
            assert_never(layer)


def example_custom_algebra():
    """Compute free variables and node counts."""

    tree = example_tree()

    free = cata(free_variables)(tree)
    print(f"Free variables: {sorted(free)}")
    assert free == {"Main", "add", "inc"}

    size = cata(lambda layer: 1 + sum(layer.payloads()))(tree)
    print(f"Node count: {size}")
    print()


# ============================================================================
# Step 4: Custom Document Type
# ============================================================================
# Any object offering text/horizontal/vertical/join/wrap can receive the
# pretty rendering. This one indents group members.


class IndentingBuilder:
    """Builds lists of lines, indenting vertical stacks."""

    def text(self, text):
        return [text]

    def horizontal(self, parts):
        lines = [""]
        for part in parts:
            if part:
                lines[-1] += part[0]
                lines.extend(part[1:])
        return lines

    def vertical(self, parts):
        return ["", *("    " + line for part in parts for line in part), ""]

    def join(self, separator, parts):
        joined = []
        for i, part in enumerate(parts):
            if i:
                joined.append(separator)
            joined.append(part)
        return self.horizontal(joined)

    def wrap(self, open, body, close):
        return self.horizontal([open, body, close])


def example_custom_document():
    """Pretty-print through a different document type."""

    lines = pretty(example_tree(), IndentingBuilder())
    print("\n".join(lines))
    print()


# ============================================================================
# Main: Run All Examples
# ============================================================================


def main():
    """Run all rendering examples."""

    print("=" * 80)
    print("Rendering Example")
    print("=" * 80)
    print()

    print("--- Example 1: Built-in Renderers ---")
    example_renderers()

    print("--- Example 2: Custom Algebras ---")
    example_custom_algebra()

    print("--- Example 3: Custom Document Type ---")
    example_custom_document()

    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
