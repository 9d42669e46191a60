"""
Node shape domain for the generic, non-recursive syntax layer.

`Syntax[P]` describes one level of a syntax tree. `P` stands for whatever a
child reference currently is: a placeholder, a `Fix` subtree, or an
already-computed result while folding. The variant family is closed; the six
classes below are the only node kinds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, assert_never, dataclass_transform

# =============================================================================
# Base
# =============================================================================


@dataclass_transform(frozen_default=True)
class Syntax[P]:
    """Base for syntax node shapes. P is the child payload type."""

    _tag: ClassVar[str]
    _registry: ClassVar[dict[str, type[Syntax[Any]]]] = {}
    _sealed: ClassVar[bool] = False

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if Syntax._sealed:
            raise TypeError(
                f"Cannot define {cls.__name__}: the Syntax variant family is closed"
            )
        dataclass(frozen=True)(cls)
        cls._tag = tag or cls.__name__.lower()
        Syntax._registry[cls._tag] = cls

    def map[T](self, transform: Callable[[P], T]) -> Syntax[T]:
        """
        Apply transform to every payload position, preserving the variant.

        The transform runs once per occurrence in declared order: Apply visits
        the callee then its arguments, Abstract its parameters then the body,
        Group its label then its members. Name and literal strings are copied
        without calling transform.
        """
        match self:
            case Apply(callee, arguments):
                return Apply(transform(callee), tuple(transform(a) for a in arguments))
            case Abstract(parameters, body):
                return Abstract(tuple(transform(p) for p in parameters), transform(body))
            case Assign(name, value):
                return Assign(name, transform(value))
            case Variable(name):
                return Variable(name)
            case Literal(value):
                return Literal(value)
            case Group(label, members):
                return Group(transform(label), tuple(transform(m) for m in members))
            case _:
                assert_never(self)

    def payloads(self) -> tuple[P, ...]:
        """Return every payload occurrence in declared order."""
        collected: list[P] = []
        self.map(collected.append)
        return tuple(collected)


def _freeze(node: Syntax[Any], *names: str) -> None:
    for name in names:
        object.__setattr__(node, name, tuple(getattr(node, name)))


# =============================================================================
# Variants
# =============================================================================


class Apply[P](Syntax[P], tag="apply"):
    """Function application: callee(arguments...)."""

    callee: P
    arguments: tuple[P, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "arguments")


class Abstract[P](Syntax[P], tag="abstract"):
    """
    Function abstraction.

    Parameters are payloads rather than bare names, so a tree of Fix values
    holds Variable subtrees here.
    """

    parameters: tuple[P, ...]
    body: P

    def __post_init__(self) -> None:
        _freeze(self, "parameters")


class Assign[P](Syntax[P], tag="assign"):
    """Named binding of a value."""

    name: str
    value: P


class Variable[P](Syntax[P], tag="variable"):
    """Reference to a name."""

    name: str


class Literal[P](Syntax[P], tag="literal"):
    """Opaque literal token."""

    value: str


class Group[P](Syntax[P], tag="group"):
    """Labeled collection of sub-terms, e.g. a block or scope."""

    label: P
    members: tuple[P, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "members")


Syntax._sealed = True

VARIANTS: tuple[type[Syntax[Any]], ...] = (Apply, Abstract, Assign, Variable, Literal, Group)
