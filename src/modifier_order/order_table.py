"""Compile a preferred modifier order into a rank lookup table.

The preference is a comma and/or whitespace separated list of modifier
keywords, e.g. ``"public, private, static readonly"``. Each recognized
keyword receives a rank equal to the number of recognized keywords before
it. Unknown keywords are skipped without consuming a rank, and a repeated
keyword keeps the rank of its first occurrence.

The most recently compiled table is memoized process-wide by its raw
preference string.
"""

from __future__ import annotations

import re
import sys
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

from modifier_order.kinds import ModifierKind, modifier_kind_from_name

# Rank of every modifier absent from the preference; sorts after all others
UNRANKED = sys.maxsize

_SEPARATOR = re.compile(r"[,\s]+")
_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class OrderTable:
    """Immutable mapping of modifier kind to rank."""

    __slots__ = ("_ranks",)

    def __init__(self, ranks: Mapping[ModifierKind, int]) -> None:
        self._ranks: Mapping[ModifierKind, int] = MappingProxyType(dict(ranks))

    @classmethod
    def from_kinds(cls, kinds: Iterable[ModifierKind]) -> OrderTable:
        """Build a table ranking kinds by first occurrence."""
        ranks: dict[ModifierKind, int] = {}
        for kind in kinds:
            if kind not in ranks:
                ranks[kind] = len(ranks)
        return cls(ranks)

    def rank(self, kind: ModifierKind) -> int:
        """Return the rank of kind, or UNRANKED if it has no preference."""
        return self._ranks.get(kind, UNRANKED)

    @property
    def ranks(self) -> Mapping[ModifierKind, int]:
        return self._ranks

    def __contains__(self, kind: object) -> bool:
        return kind in self._ranks

    def __iter__(self) -> Iterator[ModifierKind]:
        return iter(sorted(self._ranks, key=self._ranks.__getitem__))

    def __len__(self) -> int:
        return len(self._ranks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderTable):
            return NotImplemented
        return dict(self._ranks) == dict(other._ranks)

    def __hash__(self) -> int:
        return hash(frozenset(self._ranks.items()))

    def __repr__(self) -> str:
        names = ", ".join(kind.value for kind in self)
        return f"OrderTable([{names}])"


def _tokenize(preference: str) -> list[str] | None:
    """Split a preference into keyword names, or None if malformed."""
    names = [piece for piece in _SEPARATOR.split(preference.strip()) if piece]
    for name in names:
        if _NAME.match(name) is None:
            return None
    return names


def parse_preference(preference: str) -> OrderTable | None:
    """Compile a preference string without consulting the cache.

    Returns None when the preference is blank, malformed, or names no
    known modifier.
    """
    names = _tokenize(preference)
    if not names:
        return None
    kinds: list[ModifierKind] = []
    for name in names:
        kind = modifier_kind_from_name(name)
        if kind is not None:
            kinds.append(kind)
    if not kinds:
        return None
    return OrderTable.from_kinds(kinds)


class _Compiled(NamedTuple):
    """The last compiled preference; a None table is remembered too."""

    preference: str
    table: OrderTable | None


# Single slot: only the most recent preference is kept. Reads take no lock
# and a write replaces the whole entry with one assignment.
_last: _Compiled | None = None
_last_lock = threading.Lock()


def compile_preference(preference: object) -> OrderTable | None:
    """Return the memoized OrderTable for a raw preference value.

    Any non-string value is treated as "no applicable preference". A None
    result means the caller should skip analysis; it is never an error.
    A changed preference replaces the previously memoized table.
    """
    global _last
    if not isinstance(preference, str):
        return None
    last = _last
    if last is not None and last.preference == preference:
        return last.table
    compiled = _Compiled(preference, parse_preference(preference))
    with _last_lock:
        last = _last
        if last is not None and last.preference == preference:
            return last.table
        _last = compiled
    return compiled.table


def clear_cache() -> None:
    """Drop the memoized table."""
    global _last
    with _last_lock:
        _last = None


def cache_size() -> int:
    return 0 if _last is None else 1


__all__ = [
    "UNRANKED",
    "OrderTable",
    "cache_size",
    "clear_cache",
    "compile_preference",
    "parse_preference",
]
