"""Style checker for the order of declaration modifiers."""

from modifier_order.analyzer import OrderModifiersRule, analyze_tree
from modifier_order.cancellation import CancellationToken, OperationCancelledError
from modifier_order.diagnostics import CollectingReporter, Severity, Violation
from modifier_order.kinds import ModifierKind, NodeKind, is_declaration_shaped
from modifier_order.order_table import UNRANKED, OrderTable, compile_preference
from modifier_order.syntax import ModifierToken, Span, SyntaxNode
from modifier_order.walker import check, find_violations, is_ordered

__all__ = [
    "UNRANKED",
    "CancellationToken",
    "CollectingReporter",
    "ModifierKind",
    "ModifierToken",
    "NodeKind",
    "OperationCancelledError",
    "OrderModifiersRule",
    "OrderTable",
    "Severity",
    "Span",
    "SyntaxNode",
    "Violation",
    "analyze_tree",
    "check",
    "compile_preference",
    "find_violations",
    "is_declaration_shaped",
    "is_ordered",
]
