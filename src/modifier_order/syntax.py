"""Read-only syntax tree types consumed by the walker."""

from __future__ import annotations

from typing import NamedTuple

from modifier_order.kinds import ModifierKind, NodeKind, is_declaration_shaped


class Span(NamedTuple):
    """Source location of a token.

    Offsets are 0-based character positions; line and column are 1-based.
    """

    start: int
    end: int
    line: int
    column: int


class ModifierToken(NamedTuple):
    """A single modifier keyword on a declaration."""

    kind: ModifierKind
    span: Span


class SyntaxNode(NamedTuple):
    """A syntax tree node with its modifiers and children in source order."""

    kind: NodeKind
    modifiers: tuple[ModifierToken, ...] = ()
    children: tuple[SyntaxNode, ...] = ()

    @property
    def is_declaration(self) -> bool:
        return is_declaration_shaped(self.kind)


__all__ = ["ModifierToken", "Span", "SyntaxNode"]
