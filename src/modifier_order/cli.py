"""Command-line checker for modifier order in serialized syntax trees.

Run with: modifier-order tree1.json tree2.json --order "public,static"
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TypedDict

from modifier_order._console import (
    log_error,
    log_failed,
    log_header,
    log_info,
    log_passed,
    log_summary,
    log_violation,
)
from modifier_order.analyzer import OrderModifiersRule
from modifier_order.diagnostics import ORDER_MODIFIERS, RuleReport, Severity
from modifier_order.options import (
    DEFAULT_OPTION,
    OPTION_NAME,
    ModifierOrderOption,
    format_option,
    load_options_json,
    parse_option_value,
    parse_severity,
)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_VIOLATIONS = 2


class ParsedArgs(TypedDict):
    """Parsed command-line arguments."""

    trees: list[str]
    order: str | None
    severity: str | None
    options: str | None


def _extract_args(args: argparse.Namespace) -> ParsedArgs:
    """Extract and validate arguments from Namespace.

    Raises:
        TypeError: If argument types are incorrect.
    """
    trees = args.trees
    if not isinstance(trees, list) or not all(isinstance(t, str) for t in trees):
        msg = f"Expected list[str] for trees, got {type(trees).__name__}"
        raise TypeError(msg)
    trees_typed: list[str] = [str(t) for t in trees]

    order = args.order
    if order is not None and not isinstance(order, str):
        msg = f"Expected str or None for order, got {type(order).__name__}"
        raise TypeError(msg)

    severity = args.severity
    if severity is not None and not isinstance(severity, str):
        msg = f"Expected str or None for severity, got {type(severity).__name__}"
        raise TypeError(msg)

    options = args.options
    if options is not None and not isinstance(options, str):
        msg = f"Expected str or None for options, got {type(options).__name__}"
        raise TypeError(msg)

    return {"trees": trees_typed, "order": order, "severity": severity, "options": options}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="modifier-order",
        description="Report declarations whose modifiers are not in the preferred order",
    )
    parser.add_argument("trees", nargs="*", help="Syntax tree JSON files to check")
    parser.add_argument(
        "--order",
        type=str,
        default=None,
        help=f"Preferred modifier order, as a {OPTION_NAME} value optionally "
        "suffixed with :severity (default: the language default order)",
    )
    parser.add_argument(
        "--severity",
        type=str,
        default=None,
        choices=[s.value for s in Severity],
        help="Severity to report with; overrides any :severity suffix",
    )
    parser.add_argument(
        "--options",
        type=str,
        default=None,
        help="JSON options file with preferred_modifier_order and severity",
    )
    return parser.parse_args(argv)


def build_option(args: ParsedArgs) -> ModifierOrderOption:
    """Combine the options file, --order and --severity into one option.

    Later sources override earlier ones: file, then --order, then --severity.
    """
    option = DEFAULT_OPTION
    if args["options"] is not None:
        option = load_options_json(args["options"])
    if args["order"] is not None:
        option = parse_option_value(args["order"])
    if args["severity"] is not None:
        option = option._replace(severity=parse_severity(args["severity"]))
    return option


def run_check(files: list[Path], option: ModifierOrderOption) -> int:
    """Check files and print results; return the exit code."""
    rule = OrderModifiersRule(option)
    log_header(f"{ORDER_MODIFIERS.id} {ORDER_MODIFIERS.title}")
    log_info(f"{OPTION_NAME} = {format_option(option)}")

    violations = rule.run(files)
    log_summary([RuleReport(name=rule.name, violations=len(violations))])

    if violations:
        for item in violations:
            log_violation(item, ORDER_MODIFIERS.message)
        log_failed(len(violations))
        return EXIT_VIOLATIONS

    log_passed()
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point for the modifier-order command."""
    args = _extract_args(parse_args(argv))

    try:
        option = build_option(args)
    except (OSError, TypeError, ValueError) as exc:
        log_error(f"ERROR: invalid options: {exc}")
        return EXIT_USAGE

    files = [Path(t) for t in args["trees"]]
    missing = [f for f in files if not f.is_file()]
    if missing:
        log_error(f"ERROR: tree file not found: {missing[0]}")
        return EXIT_USAGE

    try:
        return run_check(files, option)
    except RuntimeError as exc:
        log_error(f"ERROR: {exc}")
        return EXIT_USAGE
    except (KeyError, TypeError, ValueError) as exc:
        log_error(f"ERROR: invalid syntax tree: {exc}")
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
