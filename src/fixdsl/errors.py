"""Error hierarchy for tree traversal guards."""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = (
    "FixDSLError",
    "CyclicTreeError",
    "DepthLimitError",
)


class FixDSLError(Exception):
    """Base for all fixdsl errors."""

    default_message: ClassVar[str] = "fixdsl error"

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize error to a structured dictionary for logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class CyclicTreeError(FixDSLError):
    """A Fix node was reached again below itself."""

    default_message = "Tree is not well-founded: a node is its own descendant"


class DepthLimitError(FixDSLError):
    """A path through the tree exceeded the configured maximum depth."""

    default_message = "Tree depth exceeds the configured maximum"
