"""
Document domain for pretty-printing.

The pretty algebra only talks to a `DocBuilder`, so any layout engine that
offers the five construction operations can consume a tree. This module
also ships a small reference document type and a naive renderer that lays
documents out without width fitting.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Protocol, dataclass_transform

# =============================================================================
# Builder Protocol
# =============================================================================


class DocBuilder[D](Protocol):
    """Construction operations a document type must expose."""

    def text(self, text: str) -> D: ...

    def horizontal(self, parts: Sequence[D]) -> D: ...

    def vertical(self, parts: Sequence[D]) -> D: ...

    def join(self, separator: D, parts: Sequence[D]) -> D: ...

    def wrap(self, open: D, body: D, close: D) -> D: ...


# =============================================================================
# Reference Documents
# =============================================================================


@dataclass_transform(frozen_default=True)
class Doc:
    """Base for reference document nodes."""

    _tag: ClassVar[str]
    _registry: ClassVar[dict[str, type[Doc]]] = {}

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)
        cls._tag = tag or cls.__name__.lower()
        Doc._registry[cls._tag] = cls


class Text(Doc, tag="text"):
    text: str


class Horizontal(Doc, tag="horizontal"):
    parts: tuple[Doc, ...]


class Vertical(Doc, tag="vertical"):
    parts: tuple[Doc, ...]


class Join(Doc, tag="join"):
    separator: Doc
    parts: tuple[Doc, ...]


class Wrap(Doc, tag="wrap"):
    open: Doc
    body: Doc
    close: Doc


class DocumentBuilder:
    """DocBuilder producing reference documents."""

    def text(self, text: str) -> Doc:
        return Text(text)

    def horizontal(self, parts: Sequence[Doc]) -> Doc:
        return Horizontal(tuple(parts))

    def vertical(self, parts: Sequence[Doc]) -> Doc:
        return Vertical(tuple(parts))

    def join(self, separator: Doc, parts: Sequence[Doc]) -> Doc:
        return Join(separator, tuple(parts))

    def wrap(self, open: Doc, body: Doc, close: Doc) -> Doc:
        return Wrap(open, body, close)


DOCS = DocumentBuilder()

# =============================================================================
# Rendering
# =============================================================================

type Block = list[str]


def _children(doc: Doc) -> tuple[Doc, ...]:
    match doc:
        case Text():
            return ()
        case Horizontal(parts) | Vertical(parts):
            return parts
        case Join(separator, parts):
            return (separator, *parts)
        case Wrap(open, body, close):
            return (open, body, close)
        case _:
            raise TypeError(f"Unknown document node: {type(doc).__name__}")


def _glue(blocks: Sequence[Block]) -> Block:
    """Concatenate blocks, continuing each one on the previous block's last line."""
    lines = [""]
    for block in blocks:
        if not block:
            continue
        lines[-1] += block[0]
        lines.extend(block[1:])
    return lines


def _interleave(separator: Block, parts: Sequence[Block]) -> list[Block]:
    joined: list[Block] = []
    for i, part in enumerate(parts):
        if i:
            joined.append(separator)
        joined.append(part)
    return joined


def _layout(doc: Doc, blocks: list[Block]) -> Block:
    match doc:
        case Text(text):
            return text.split("\n")
        case Horizontal() | Wrap():
            return _glue(blocks)
        case Vertical():
            return [line for block in blocks for line in block]
        case Join():
            return _glue(_interleave(blocks[0], blocks[1:]))
        case _:
            raise TypeError(f"Unknown document node: {type(doc).__name__}")


def render(doc: Doc) -> str:
    """Lay a reference document out as text."""
    stack: list[tuple[Doc, deque[Doc], list[Block]]] = [(doc, deque(_children(doc)), [])]

    while True:
        node, pending, blocks = stack[-1]
        if pending:
            child = pending.popleft()
            stack.append((child, deque(_children(child)), []))
            continue

        block = _layout(node, blocks)
        stack.pop()
        if not stack:
            return "\n".join(block)
        stack[-1][2].append(block)

