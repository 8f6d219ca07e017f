"""Violation records and the sinks that receive them."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import NamedTuple, Protocol

from modifier_order.syntax import ModifierToken, Span


class Severity(Enum):
    """Notification level attached to a reported violation."""

    NONE = "none"
    SILENT = "silent"
    SUGGESTION = "suggestion"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticDescriptor(NamedTuple):
    """Identity and message template of a diagnostic."""

    id: str
    title: str
    message: str


ORDER_MODIFIERS = DiagnosticDescriptor(
    id="IDE0036",
    title="Order modifiers",
    message="Modifiers are not ordered",
)


class Violation(NamedTuple):
    """A declaration whose modifiers are out of order.

    Anchored at the first modifier token of the declaration.
    """

    rule_id: str
    severity: Severity
    token: ModifierToken

    @property
    def span(self) -> Span:
        return self.token.span


class FileViolation(NamedTuple):
    """A violation found in a tree loaded from a file."""

    file: Path
    violation: Violation


class RuleReport(NamedTuple):
    """Summary of violations for a rule."""

    name: str
    violations: int


class Reporter(Protocol):
    """Sink that accepts violations."""

    def report(self, violation: Violation) -> None: ...


class CollectingReporter:
    """Reporter that keeps violations in arrival order."""

    def __init__(self) -> None:
        self.violations: list[Violation] = []

    def report(self, violation: Violation) -> None:
        self.violations.append(violation)


__all__ = [
    "ORDER_MODIFIERS",
    "CollectingReporter",
    "DiagnosticDescriptor",
    "FileViolation",
    "Reporter",
    "RuleReport",
    "Severity",
    "Violation",
]
