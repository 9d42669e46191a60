"""
Fixpoint wrapper tying `Syntax[P]` into a recursive tree type.

A `Fix` stands for the whole subtree rooted at it; `Fix.layer` unwraps one
level, a `Syntax[Fix]` whose children are again full subtrees. Trees must be
well-founded: a node that is its own descendant is rejected by the fold and
comparison guards (see `fixdsl.config`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fixdsl.algebras import debug, plain, pretty
from fixdsl.doc import Doc
from fixdsl.equality import structural_hash, structurally_equal
from fixdsl.syntax import Syntax


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Fix:
    """
    A syntax tree node owning a production function for its layer.

    Built either from a `Syntax[Fix]` value, captured and returned on every
    access, or from a zero-argument function invoked afresh on every access.
    Production functions must be pure: repeated calls return equal layers.

    Equality and hashing walk the tree under the process default
    `FoldSettings`, read at call time. Lowering `max_depth` with `configure`
    can make a tree already stored as a dict key raise `DepthLimitError` on
    the next hash. A cyclic tree compares equal to itself, since comparison
    stops at identical objects, but hashing it raises `CyclicTreeError`.
    """

    produce: Callable[[], Syntax[Fix]]

    def __init__(self, production: Syntax[Fix] | Callable[[], Syntax[Fix]]):
        if isinstance(production, Syntax):
            layer = production
            produce = lambda: layer  # noqa: E731
        elif callable(production):
            produce = production
        else:
            raise TypeError(
                f"Fix expects a Syntax layer or a zero-argument function, "
                f"got {type(production).__name__}"
            )
        object.__setattr__(self, "produce", produce)

    @property
    def layer(self) -> Syntax[Fix]:
        """The current layer of this node."""
        return self.produce()

    @property
    def doc(self) -> Doc:
        """Pretty document built with the reference document builder."""
        return pretty(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fix):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return structural_hash(self)

    def __repr__(self) -> str:
        return debug(self)

    def __str__(self) -> str:
        return plain(self)
