"""Tests for modifier_order.serde module."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from modifier_order._types import UnknownJson
from modifier_order.kinds import ModifierKind, NodeKind
from modifier_order.serde import decode_tree, encode_tree, load_tree_json
from modifier_order.syntax import Span, SyntaxNode


def _span(line: int = 1, column: int = 1) -> dict[str, UnknownJson]:
    return {"start": column - 1, "end": column + 5, "line": line, "column": column}


class TestDecodeTree:
    """Tests for decode_tree."""

    def test_decodes_nested_tree(self) -> None:
        """Test kinds, modifiers, spans and children are decoded."""
        raw: UnknownJson = {
            "kind": "compilation_unit",
            "children": [
                {
                    "kind": "class",
                    "modifiers": [
                        {"kind": "public", "span": _span(3, 5)},
                        {"kind": "static", "span": _span(3, 12)},
                    ],
                    "children": [{"kind": "method"}],
                }
            ],
        }
        root = decode_tree(raw)

        assert root.kind is NodeKind.COMPILATION_UNIT
        cls = root.children[0]
        assert cls.kind is NodeKind.CLASS
        assert [m.kind for m in cls.modifiers] == [ModifierKind.PUBLIC, ModifierKind.STATIC]
        assert cls.modifiers[1].span == Span(start=11, end=17, line=3, column=12)
        assert cls.children[0].kind is NodeKind.METHOD
        assert cls.children[0].modifiers == ()

    def test_not_a_dict(self) -> None:
        """Test a non-object node is rejected with its path."""
        with pytest.raises(TypeError, match=r"at \$\.children\[0\]"):
            decode_tree({"kind": "compilation_unit", "children": [1]})

    def test_missing_kind(self) -> None:
        """Test a node without kind is rejected."""
        with pytest.raises(KeyError, match="'kind'"):
            decode_tree({"children": []})

    def test_unknown_node_kind(self) -> None:
        """Test an unknown node kind is rejected."""
        with pytest.raises(ValueError, match="Unknown node kind 'lambda'"):
            decode_tree({"kind": "lambda"})

    def test_unknown_modifier_kind(self) -> None:
        """Test an unknown modifier kind is rejected."""
        raw: UnknownJson = {"kind": "field", "modifiers": [{"kind": "shared", "span": _span()}]}
        with pytest.raises(ValueError, match="Unknown modifier kind 'shared'"):
            decode_tree(raw)

    def test_missing_span(self) -> None:
        """Test a modifier without span is rejected."""
        with pytest.raises(KeyError, match="'span'"):
            decode_tree({"kind": "field", "modifiers": [{"kind": "public"}]})

    def test_span_field_wrong_type(self) -> None:
        """Test non-integer span fields are rejected, including bools."""
        span = _span()
        span["line"] = True
        raw: UnknownJson = {"kind": "field", "modifiers": [{"kind": "public", "span": span}]}
        with pytest.raises(TypeError, match="'line'"):
            decode_tree(raw)

    def test_span_field_missing(self) -> None:
        """Test a span missing a field is rejected."""
        raw: UnknownJson = {
            "kind": "field",
            "modifiers": [{"kind": "public", "span": {"start": 0, "end": 6, "line": 1}}],
        }
        with pytest.raises(KeyError, match="'column'"):
            decode_tree(raw)

    def test_children_wrong_type(self) -> None:
        """Test a non-list children value is rejected."""
        with pytest.raises(TypeError, match="'children'"):
            decode_tree({"kind": "class", "children": {}})


class TestEncodeAndLoad:
    """Tests for encode_tree and load_tree_json."""

    def test_encode_then_decode(
        self, decl: Callable[..., SyntaxNode], unit: Callable[..., SyntaxNode]
    ) -> None:
        """Test an encoded tree decodes to an equal tree."""
        tree = unit(decl(NodeKind.CLASS, "public sealed", decl(NodeKind.FIELD, "private", line=2)))
        assert decode_tree(json.loads(json.dumps(encode_tree(tree)))) == tree

    def test_load_from_file_with_bom(
        self, tmp_path: Path, decl: Callable[..., SyntaxNode], unit: Callable[..., SyntaxNode]
    ) -> None:
        """Test loading a tree file that starts with a BOM."""
        tree = unit(decl(NodeKind.FIELD, "static public"))
        path = tmp_path / "tree.json"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps(encode_tree(tree)).encode("utf-8"))
        assert load_tree_json(path) == tree

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test reading a nonexistent file raises RuntimeError."""
        with pytest.raises(RuntimeError, match="failed to read"):
            load_tree_json(tmp_path / "missing.json")
