"""Pytest fixtures for modifier_order tests."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest

from modifier_order.kinds import ModifierKind, NodeKind
from modifier_order.order_table import clear_cache
from modifier_order.syntax import ModifierToken, Span, SyntaxNode


def make_modifiers(names: str, line: int = 1) -> tuple[ModifierToken, ...]:
    """Build modifier tokens from space separated keywords on one line.

    Tokens are laid out left to right, one space apart, starting at column 1.
    """
    tokens: list[ModifierToken] = []
    offset = 0
    for name in names.split():
        span = Span(start=offset, end=offset + len(name), line=line, column=offset + 1)
        tokens.append(ModifierToken(kind=ModifierKind(name), span=span))
        offset += len(name) + 1
    return tuple(tokens)


def _make_decl(
    kind: NodeKind,
    modifiers: str = "",
    *children: SyntaxNode,
    line: int = 1,
) -> SyntaxNode:
    return SyntaxNode(kind=kind, modifiers=make_modifiers(modifiers, line), children=children)


@pytest.fixture(autouse=True)
def clear_order_cache() -> Generator[None, None, None]:
    """Autouse fixture that isolates the process-wide OrderTable cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def decl() -> Callable[..., SyntaxNode]:
    """Return a factory for declaration-shaped (or any) nodes."""
    return _make_decl


@pytest.fixture
def mods() -> Callable[..., tuple[ModifierToken, ...]]:
    """Return the modifier token factory."""
    return make_modifiers


@pytest.fixture
def unit() -> Callable[..., SyntaxNode]:
    """Return a factory for compilation units wrapping the given children."""

    def _unit(*children: SyntaxNode) -> SyntaxNode:
        return SyntaxNode(kind=NodeKind.COMPILATION_UNIT, children=children)

    return _unit
