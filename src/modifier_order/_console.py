"""Rich console wrapper for styled terminal output.

This module provides typed console functions for checker output.
All print statements in the codebase should use these functions instead.
"""

from __future__ import annotations

from typing import Protocol

from modifier_order.diagnostics import FileViolation, RuleReport, Severity


class _RichConsole(Protocol):
    """Protocol for rich.console.Console interface."""

    def print(
        self,
        *objects: str,
        style: str | None = None,
        highlight: bool = True,
        soft_wrap: bool = False,
        markup: bool | None = None,
    ) -> None:
        """Print styled output to console."""
        ...


def _get_console(stderr: bool = False) -> _RichConsole:
    """Get rich Console instance with strict typing."""
    rich_console_mod = __import__("rich.console", fromlist=["Console"])
    console_cls = rich_console_mod.Console
    console: _RichConsole = console_cls(stderr=stderr)
    return console


class _EscapeFn(Protocol):
    """Protocol for rich.markup.escape."""

    def __call__(self, markup: str) -> str:
        """Escape text so rich prints it literally."""
        ...


def _get_escape() -> _EscapeFn:
    """Get rich markup escape function with strict typing."""
    rich_markup_mod = __import__("rich.markup", fromlist=["escape"])
    escape_fn: _EscapeFn = rich_markup_mod.escape
    return escape_fn


# Module-level console instances
_console: _RichConsole = _get_console()
_err_console: _RichConsole = _get_console(stderr=True)
_escape: _EscapeFn = _get_escape()


# =============================================================================
# Style Constants
# =============================================================================

STYLE_HEADER = "bold cyan"
STYLE_LOCATION = "dim white"
STYLE_RULE = "magenta"
STYLE_ERROR = "bold red"
STYLE_SUCCESS = "bold green"
STYLE_INFO = "cyan"

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.NONE: "dim",
    Severity.SILENT: "dim white",
    Severity.SUGGESTION: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}


# =============================================================================
# Output Functions
# =============================================================================


def log_header(text: str) -> None:
    """Print a section header with separator lines."""
    separator = "=" * 60
    _console.print(separator, style=STYLE_HEADER)
    _console.print(text, style=STYLE_HEADER)
    _console.print(separator, style=STYLE_HEADER)


def log_info(text: str) -> None:
    """Print an informational message."""
    _console.print(text, style=STYLE_INFO, highlight=False, soft_wrap=True, markup=False)


def log_error(text: str) -> None:
    """Print an error message to stderr."""
    _err_console.print(text, style=STYLE_ERROR, highlight=False, soft_wrap=True, markup=False)


def log_summary(reports: list[RuleReport]) -> None:
    """Print per-rule violation counts."""
    _console.print("Rule summary:", style=STYLE_HEADER)
    for rep in reports:
        _console.print(f"  {rep.name}: {rep.violations} violations", highlight=False)


def log_violation(item: FileViolation, message: str) -> None:
    """Print one violation as ``path:line:col: severity id message``."""
    v = item.violation
    style = SEVERITY_STYLES[v.severity]
    loc = _escape(f"{item.file}:{v.span.line}:{v.span.column}")
    _console.print(
        f"  [{STYLE_LOCATION}]{loc}[/{STYLE_LOCATION}]: "
        f"[{style}]{v.severity.value}[/{style}] "
        f"[{STYLE_RULE}]{v.rule_id}[/{STYLE_RULE}] {message}",
        highlight=False,
        soft_wrap=True,
    )


def log_passed() -> None:
    """Print the all-clear message."""
    _console.print("Modifier order checks passed: no violations found.", style=STYLE_SUCCESS)


def log_failed(count: int) -> None:
    """Print the failure message."""
    _console.print(f"Modifier order checks failed: {count} violations.", style=STYLE_ERROR)


__all__ = [
    "log_error",
    "log_failed",
    "log_header",
    "log_info",
    "log_passed",
    "log_summary",
    "log_violation",
]
