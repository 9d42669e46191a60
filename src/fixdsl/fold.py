"""
Catamorphism over Fix trees.

`cata` is the single tree-walking primitive: every consumer of a tree (the
renderers, structural hashing) supplies an algebra and lets `cata` do the
walk. The walk keeps an explicit stack of frames so tree depth is bounded by
`FoldSettings.max_depth` rather than the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING

from fixdsl.config import FoldSettings, get_settings
from fixdsl.errors import CyclicTreeError, DepthLimitError
from fixdsl.syntax import Syntax

if TYPE_CHECKING:
    from fixdsl.fix import Fix

logger = logging.getLogger(__name__)

type Algebra[T] = Callable[[Syntax[T]], T]


class _Frame[T]:
    """One node whose children are being folded."""

    __slots__ = ("term", "layer", "pending", "results")

    def __init__(self, term: Fix):
        self.term = term
        self.layer: Syntax[Fix] = term.layer
        self.pending: deque[Fix] = deque(self.layer.payloads())
        self.results: list[T] = []

    def collapse(self, algebra: Algebra[T]) -> T:
        results = iter(self.results)
        return algebra(self.layer.map(lambda _: next(results)))


def cata[T](algebra: Algebra[T], *, settings: FoldSettings | None = None) -> Callable[[Fix], T]:
    """
    Build a fold that collapses a Fix tree bottom-up with algebra.

    Every child is folded before its parent; the parent's layer is then
    mapped so each child position holds its folded result, and algebra
    combines that layer into the parent's result. Exceptions raised by the
    algebra or by a production function propagate unchanged.

    Raises:
        CyclicTreeError: a node appears below itself (when cycle detection is on)
        DepthLimitError: a path is deeper than settings.max_depth
    """

    def fold(term: Fix) -> T:
        guards = settings or get_settings()
        stack: list[_Frame[T]] = [_Frame(term)]
        ancestors: set[int] | None = {id(term)} if guards.detect_cycles else None

        while True:
            frame = stack[-1]

            if frame.pending:
                child = frame.pending.popleft()
                if ancestors is not None and id(child) in ancestors:
                    logger.debug("Cycle detected at depth %d", len(stack))
                    raise CyclicTreeError(details={"depth": len(stack)})
                if len(stack) >= guards.max_depth:
                    logger.debug("Depth limit %d reached", guards.max_depth)
                    raise DepthLimitError(
                        f"Tree depth exceeds max_depth={guards.max_depth}",
                        details={"max_depth": guards.max_depth},
                    )
                stack.append(_Frame(child))
                if ancestors is not None:
                    ancestors.add(id(child))
                continue

            value = frame.collapse(algebra)
            stack.pop()
            if ancestors is not None:
                ancestors.discard(id(frame.term))
            if not stack:
                return value
            stack[-1].results.append(value)

    return fold
