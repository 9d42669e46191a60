"""Structural equality and hashing for Fix trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fixdsl.config import FoldSettings, get_settings
from fixdsl.errors import DepthLimitError
from fixdsl.fold import cata
from fixdsl.syntax import Syntax

if TYPE_CHECKING:
    from fixdsl.fix import Fix

logger = logging.getLogger(__name__)


def _erase(_: Any) -> None:
    return None


def same_shape(left: Syntax[Any], right: Syntax[Any]) -> bool:
    """Compare variant, names and sequence lengths, ignoring payload values."""
    return left.map(_erase) == right.map(_erase)


def structurally_equal(left: Fix, right: Fix, *, settings: FoldSettings | None = None) -> bool:
    """
    Compare two trees layer by layer in lockstep.

    Identical objects are equal without descending. Trees that never bottom
    out are stopped by the depth guard.
    """
    guards = settings or get_settings()
    pending: list[tuple[Fix, Fix, int]] = [(left, right, 1)]

    while pending:
        a, b, depth = pending.pop()
        if a is b:
            continue
        if depth > guards.max_depth:
            logger.debug("Depth limit %d reached during comparison", guards.max_depth)
            raise DepthLimitError(
                f"Tree depth exceeds max_depth={guards.max_depth}",
                details={"max_depth": guards.max_depth},
            )

        layer_a, layer_b = a.layer, b.layer
        if not same_shape(layer_a, layer_b):
            return False

        children = list(zip(layer_a.payloads(), layer_b.payloads()))
        pending.extend((x, y, depth + 1) for x, y in reversed(children))

    return True


def _hash_layer(layer: Syntax[int]) -> int:
    return hash((layer._tag, layer))


structural_hash = cata(_hash_layer)
