"""
Rendering algebras.

Each algebra maps one layer whose children are already rendered to the
rendering of that layer. They are meant to be passed to `cata`; the
`debug`, `plain` and `pretty` helpers do that for you.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, assert_never

from fixdsl.doc import DOCS, DocBuilder
from fixdsl.fold import cata
from fixdsl.syntax import Abstract, Apply, Assign, Group, Literal, Syntax, Variable

if TYPE_CHECKING:
    from fixdsl.fix import Fix

LAMBDA = "λ"

# =============================================================================
# Debug
# =============================================================================


def debug_algebra(layer: Syntax[str]) -> str:
    """Tagged, fully parenthesized form, e.g. Apply(Variable(f), [Literal(1)])."""
    match layer:
        case Apply(callee, arguments):
            return f"Apply({callee}, [{', '.join(arguments)}])"
        case Abstract(parameters, body):
            return f"Abstract([{', '.join(parameters)}], {body})"
        case Assign(name, value):
            return f"Assign({name}, {value})"
        case Variable(name):
            return f"Variable({name})"
        case Literal(value):
            return f"Literal({value})"
        case Group(label, members):
            return f"Group({label}, [{', '.join(members)}])"
        case _:
            assert_never(layer)


# =============================================================================
# Plain
# =============================================================================


def plain_algebra(layer: Syntax[str]) -> str:
    """Human-facing source-like form, e.g. f(1, 2) or Block{a = 1\\nb = 2}."""
    match layer:
        case Apply(callee, arguments):
            return f"{callee}({', '.join(arguments)})"
        case Abstract(parameters, body):
            return f"{LAMBDA}{', '.join(parameters)}. {body}"
        case Assign(name, value):
            return f"{name} = {value}"
        case Variable(name):
            return name
        case Literal(value):
            return value
        case Group(label, members):
            return label + "{" + "\n".join(members) + "}"
        case _:
            assert_never(layer)


# =============================================================================
# Pretty
# =============================================================================


def pretty_algebra[D](builder: DocBuilder[D]) -> Callable[[Syntax[D]], D]:
    """
    Build an algebra assembling documents through builder.

    The layout mirrors the plain rendering: rendered with a layout engine
    that never breaks lines, a pretty document reads the same as `plain`.
    """
    text = builder.text
    comma = text(", ")

    def algebra(layer: Syntax[D]) -> D:
        match layer:
            case Apply(callee, arguments):
                return builder.horizontal([
                    callee,
                    builder.wrap(text("("), builder.join(comma, arguments), text(")")),
                ])
            case Abstract(parameters, body):
                return builder.horizontal([
                    text(LAMBDA),
                    builder.join(comma, parameters),
                    text(". "),
                    body,
                ])
            case Assign(name, value):
                return builder.horizontal([text(name), text(" = "), value])
            case Variable(name):
                return text(name)
            case Literal(value):
                return text(value)
            case Group(label, members):
                return builder.horizontal([
                    label,
                    builder.wrap(text("{"), builder.vertical(members), text("}")),
                ])
            case _:
                assert_never(layer)

    return algebra


# =============================================================================
# Entry Points
# =============================================================================

debug: Callable[[Fix], str] = cata(debug_algebra)
plain: Callable[[Fix], str] = cata(plain_algebra)


def pretty[D](term: Fix, builder: DocBuilder[D] = DOCS) -> D:
    """Fold term into a document built by builder."""
    return cata(pretty_algebra(builder))(term)
