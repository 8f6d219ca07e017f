"""Decode syntax trees serialized as JSON by an external front end.

Schema::

    {
      "kind": "class",
      "modifiers": [
        {"kind": "public", "span": {"start": 0, "end": 6, "line": 1, "column": 1}}
      ],
      "children": [ ...nodes... ]
    }

``modifiers`` and ``children`` may be omitted. Kinds are the lowercase enum
values of NodeKind and ModifierKind.
"""

from __future__ import annotations

import json
from pathlib import Path

from modifier_order._types import UnknownJson
from modifier_order.kinds import ModifierKind, NodeKind
from modifier_order.syntax import ModifierToken, Span, SyntaxNode

_SPAN_FIELDS = ("start", "end", "line", "column")


def _require_dict(raw: UnknownJson, where: str) -> dict[str, UnknownJson]:
    if not isinstance(raw, dict):
        msg = f"Expected dict at {where}, got {type(raw).__name__}"
        raise TypeError(msg)
    return raw


def _optional_list(raw: dict[str, UnknownJson], key: str, where: str) -> list[UnknownJson]:
    value = raw.get(key, [])
    if not isinstance(value, list):
        msg = f"Expected list for '{key}' at {where}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _decode_span(raw: UnknownJson, where: str) -> Span:
    """Decode a span object.

    Raises:
        TypeError: If the span or one of its fields has the wrong type.
        KeyError: If a field is missing.
    """
    data = _require_dict(raw, where)
    values: list[int] = []
    for field in _SPAN_FIELDS:
        if field not in data:
            msg = f"Missing required key '{field}' at {where}"
            raise KeyError(msg)
        value = data[field]
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"Expected int for '{field}' at {where}, got {type(value).__name__}"
            raise TypeError(msg)
        values.append(value)
    return Span(start=values[0], end=values[1], line=values[2], column=values[3])


def _decode_kind_name(data: dict[str, UnknownJson], where: str) -> str:
    if "kind" not in data:
        msg = f"Missing required key 'kind' at {where}"
        raise KeyError(msg)
    kind = data["kind"]
    if not isinstance(kind, str):
        msg = f"Expected str for 'kind' at {where}, got {type(kind).__name__}"
        raise TypeError(msg)
    return kind


def _decode_modifier(raw: UnknownJson, where: str) -> ModifierToken:
    data = _require_dict(raw, where)
    name = _decode_kind_name(data, where)
    try:
        kind = ModifierKind(name)
    except ValueError as exc:
        msg = f"Unknown modifier kind {name!r} at {where}"
        raise ValueError(msg) from exc
    if "span" not in data:
        msg = f"Missing required key 'span' at {where}"
        raise KeyError(msg)
    return ModifierToken(kind=kind, span=_decode_span(data["span"], f"{where}.span"))


def _decode_node(raw: UnknownJson, where: str) -> SyntaxNode:
    data = _require_dict(raw, where)
    name = _decode_kind_name(data, where)
    try:
        kind = NodeKind(name)
    except ValueError as exc:
        msg = f"Unknown node kind {name!r} at {where}"
        raise ValueError(msg) from exc

    modifiers = tuple(
        _decode_modifier(item, f"{where}.modifiers[{i}]")
        for i, item in enumerate(_optional_list(data, "modifiers", where))
    )
    children = tuple(
        _decode_node(item, f"{where}.children[{i}]")
        for i, item in enumerate(_optional_list(data, "children", where))
    )
    return SyntaxNode(kind=kind, modifiers=modifiers, children=children)


def decode_tree(raw: UnknownJson) -> SyntaxNode:
    """Decode parsed JSON data into a SyntaxNode tree.

    Raises:
        TypeError: If data structure is incorrect.
        KeyError: If required keys are missing.
        ValueError: If a node or modifier kind is unknown.
    """
    return _decode_node(raw, "$")


def _encode_span(span: Span) -> dict[str, UnknownJson]:
    return {"start": span.start, "end": span.end, "line": span.line, "column": span.column}


def encode_tree(node: SyntaxNode) -> dict[str, UnknownJson]:
    """Encode a SyntaxNode tree into JSON-compatible data."""
    modifiers: list[UnknownJson] = [
        {"kind": token.kind.value, "span": _encode_span(token.span)} for token in node.modifiers
    ]
    children: list[UnknownJson] = [encode_tree(child) for child in node.children]
    return {"kind": node.kind.value, "modifiers": modifiers, "children": children}


def load_tree_json(path: str | Path) -> SyntaxNode:
    """Load a syntax tree from a JSON file.

    Raises:
        RuntimeError: If the file cannot be read.
    """
    p = Path(path)
    try:
        content = p.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise RuntimeError(f"failed to read {p}: {exc}") from exc
    raw: UnknownJson = json.loads(content)
    return decode_tree(raw)


__all__ = ["decode_tree", "encode_tree", "load_tree_json"]
