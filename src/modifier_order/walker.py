"""Walk declaration nodes and flag out-of-order modifier lists.

Traversal is depth-first and pre-order. Only declaration-shaped nodes are
descended into: once a statement, expression or other non-declaration node
is reached its subtree is skipped, so method bodies are never entered.
A consequence is that declarations nested inside such constructs (for
example local functions) are never checked.
"""

from __future__ import annotations

from collections.abc import Sequence

from modifier_order.cancellation import CancellationSignal, raise_if_cancelled
from modifier_order.diagnostics import ORDER_MODIFIERS, Reporter, Severity, Violation
from modifier_order.order_table import OrderTable
from modifier_order.syntax import ModifierToken, SyntaxNode

# Below every real rank, including UNRANKED
_BEFORE_FIRST = -1


def is_ordered(table: OrderTable, modifiers: Sequence[ModifierToken]) -> bool:
    """Return True if modifier ranks never decrease from left to right.

    Equal ranks are allowed in any order, so unranked modifiers never
    conflict with each other.
    """
    last_rank = _BEFORE_FIRST
    for modifier in modifiers:
        current_rank = table.rank(modifier.kind)
        if current_rank < last_rank:
            return False
        last_rank = current_rank
    return True


class _Walk:
    """State of a single traversal."""

    def __init__(
        self,
        table: OrderTable,
        severity: Severity,
        rule_id: str,
        cancellation: CancellationSignal | None,
    ) -> None:
        self.table = table
        self.severity = severity
        self.rule_id = rule_id
        self.cancellation = cancellation
        self.violations: list[Violation] = []

    def visit_children(self, node: SyntaxNode) -> None:
        for child in node.children:
            self.visit(child)

    def visit(self, node: SyntaxNode) -> None:
        raise_if_cancelled(self.cancellation)
        if not node.is_declaration:
            return
        self.check_declaration(node)
        self.visit_children(node)

    def check_declaration(self, node: SyntaxNode) -> None:
        modifiers = node.modifiers
        if not is_ordered(self.table, modifiers):
            self.violations.append(
                Violation(rule_id=self.rule_id, severity=self.severity, token=modifiers[0])
            )


def find_violations(
    root: SyntaxNode | None,
    table: OrderTable,
    *,
    severity: Severity = Severity.SILENT,
    rule_id: str = ORDER_MODIFIERS.id,
    cancellation: CancellationSignal | None = None,
) -> list[Violation]:
    """Return violations for every out-of-order declaration under root.

    The children of root are always visited. Root itself is checked only
    when it is a declaration.

    Raises:
        ValueError: If root is None.
        OperationCancelledError: If cancellation is requested mid-walk.
    """
    if root is None:
        msg = "root node is required"
        raise ValueError(msg)

    walk = _Walk(table, severity, rule_id, cancellation)
    raise_if_cancelled(cancellation)
    if root.is_declaration:
        walk.check_declaration(root)
    walk.visit_children(root)
    return walk.violations


def check(
    root: SyntaxNode | None,
    table: OrderTable,
    reporter: Reporter,
    *,
    severity: Severity = Severity.SILENT,
    rule_id: str = ORDER_MODIFIERS.id,
    cancellation: CancellationSignal | None = None,
) -> int:
    """Walk root and report each violation to reporter.

    Nothing is reported unless the whole walk completes. Returns the number
    of violations reported.
    """
    violations = find_violations(
        root, table, severity=severity, rule_id=rule_id, cancellation=cancellation
    )
    for violation in violations:
        reporter.report(violation)
    return len(violations)


__all__ = ["check", "find_violations", "is_ordered"]
