"""Modifier and syntax node kinds.

Both enums are closed sets defined by the C# grammar. The string value of
each member is the keyword (for modifiers) or the lowercase node name used
in serialized trees.
"""

from __future__ import annotations

from enum import Enum


class ModifierKind(Enum):
    """A modifier keyword that can precede a declaration."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    FILE = "file"
    STATIC = "static"
    EXTERN = "extern"
    NEW = "new"
    VIRTUAL = "virtual"
    ABSTRACT = "abstract"
    SEALED = "sealed"
    OVERRIDE = "override"
    READONLY = "readonly"
    UNSAFE = "unsafe"
    REQUIRED = "required"
    VOLATILE = "volatile"
    ASYNC = "async"
    PARTIAL = "partial"
    CONST = "const"
    FIXED = "fixed"
    REF = "ref"


class NodeKind(Enum):
    """Kind tag of a syntax node."""

    COMPILATION_UNIT = "compilation_unit"
    # Declarations
    NAMESPACE = "namespace"
    FILE_SCOPED_NAMESPACE = "file_scoped_namespace"
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    RECORD = "record"
    ENUM = "enum"
    DELEGATE = "delegate"
    ENUM_MEMBER = "enum_member"
    FIELD = "field"
    EVENT_FIELD = "event_field"
    EVENT = "event"
    PROPERTY = "property"
    INDEXER = "indexer"
    METHOD = "method"
    OPERATOR = "operator"
    CONVERSION_OPERATOR = "conversion_operator"
    CONSTRUCTOR = "constructor"
    DESTRUCTOR = "destructor"
    GLOBAL_STATEMENT = "global_statement"
    INCOMPLETE_MEMBER = "incomplete_member"
    # Everything below is not a declaration
    USING_DIRECTIVE = "using_directive"
    ATTRIBUTE_LIST = "attribute_list"
    PARAMETER_LIST = "parameter_list"
    ACCESSOR_LIST = "accessor_list"
    BLOCK = "block"
    STATEMENT = "statement"
    LOCAL_FUNCTION = "local_function"
    EXPRESSION = "expression"


_DECLARATION_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.NAMESPACE,
        NodeKind.FILE_SCOPED_NAMESPACE,
        NodeKind.CLASS,
        NodeKind.STRUCT,
        NodeKind.INTERFACE,
        NodeKind.RECORD,
        NodeKind.ENUM,
        NodeKind.DELEGATE,
        NodeKind.ENUM_MEMBER,
        NodeKind.FIELD,
        NodeKind.EVENT_FIELD,
        NodeKind.EVENT,
        NodeKind.PROPERTY,
        NodeKind.INDEXER,
        NodeKind.METHOD,
        NodeKind.OPERATOR,
        NodeKind.CONVERSION_OPERATOR,
        NodeKind.CONSTRUCTOR,
        NodeKind.DESTRUCTOR,
        NodeKind.GLOBAL_STATEMENT,
        NodeKind.INCOMPLETE_MEMBER,
    }
)

# Keyword text -> kind
MODIFIER_NAMES: dict[str, ModifierKind] = {kind.value: kind for kind in ModifierKind}


def is_declaration_shaped(kind: NodeKind) -> bool:
    """Return True if nodes of this kind are type or member declarations.

    Local functions live inside statement bodies and are deliberately not
    declaration-shaped.
    """
    return kind in _DECLARATION_KINDS


def modifier_kind_from_name(name: str) -> ModifierKind | None:
    """Look up a modifier kind by keyword text, or None if unknown."""
    return MODIFIER_NAMES.get(name)


__all__ = [
    "MODIFIER_NAMES",
    "ModifierKind",
    "NodeKind",
    "is_declaration_shaped",
    "modifier_kind_from_name",
]
