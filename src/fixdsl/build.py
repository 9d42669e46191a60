"""Helpers for building Fix trees from already-built children."""

from __future__ import annotations

from collections.abc import Iterable

from fixdsl.fix import Fix
from fixdsl.syntax import Abstract, Apply, Assign, Group, Literal, Variable


def variable(name: str) -> Fix:
    return Fix(Variable(name))


def literal(value: str) -> Fix:
    return Fix(Literal(value))


def apply(callee: Fix, *arguments: Fix) -> Fix:
    """callee(arguments...)"""
    return Fix(Apply(callee, arguments))


def abstract(parameters: Iterable[Fix | str], body: Fix) -> Fix:
    """Lambda over parameters; plain names are wrapped as variables."""
    params = tuple(variable(p) if isinstance(p, str) else p for p in parameters)
    return Fix(Abstract(params, body))


def assign(name: str, value: Fix) -> Fix:
    return Fix(Assign(name, value))


def group(label: Fix | str, *members: Fix) -> Fix:
    """Labeled block; a plain string label becomes a variable."""
    return Fix(Group(variable(label) if isinstance(label, str) else label, members))
