"""Order-modifiers analysis: option resolution, table compilation, walk.

This is the entry point an analysis host calls once per syntax tree.
"""

from __future__ import annotations

from pathlib import Path

from modifier_order.cancellation import CancellationSignal
from modifier_order.diagnostics import (
    ORDER_MODIFIERS,
    CollectingReporter,
    FileViolation,
    Reporter,
    Severity,
)
from modifier_order.options import ModifierOrderOption, resolve_option
from modifier_order.order_table import compile_preference
from modifier_order.serde import load_tree_json
from modifier_order.syntax import SyntaxNode
from modifier_order.walker import check


def analyze_tree(
    root: SyntaxNode,
    option_value: str | ModifierOrderOption | None,
    reporter: Reporter,
    *,
    cancellation: CancellationSignal | None = None,
) -> int:
    """Report out-of-order modifiers in one tree.

    option_value may be a raw editorconfig value, an already resolved
    option, or None for the language default. Analysis is skipped when
    the severity is ``none`` or the order does not compile.

    Returns:
        Number of violations reported.
    """
    if isinstance(option_value, ModifierOrderOption):
        option = option_value
    else:
        option = resolve_option(option_value)

    if option.severity is Severity.NONE:
        return 0
    table = compile_preference(option.preferred_order)
    if table is None:
        return 0
    return check(
        root,
        table,
        reporter,
        severity=option.severity,
        rule_id=ORDER_MODIFIERS.id,
        cancellation=cancellation,
    )


class OrderModifiersRule:
    """Rule that checks modifier order in JSON tree files."""

    name = "order-modifiers"

    def __init__(self, option: str | ModifierOrderOption | None = None) -> None:
        if isinstance(option, ModifierOrderOption):
            self.option = option
        else:
            self.option = resolve_option(option)

    def run(self, files: list[Path]) -> list[FileViolation]:
        out: list[FileViolation] = []

        for path in files:
            tree = load_tree_json(path)
            reporter = CollectingReporter()
            analyze_tree(tree, self.option, reporter)
            out.extend(FileViolation(file=path, violation=v) for v in reporter.violations)

        return out


__all__ = ["OrderModifiersRule", "analyze_tree"]
