"""
Command line front end.

Usage:
    python -m calculette "2+3*4" "(1+2"
    echo "2^3^2" | python -m calculette --postfix
    CALCULETTE_LOG_LEVEL=debug python -m calculette "10-3-2"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

import yaml
from pydantic import ValidationError

from .ast import ast_to_infix, ast_to_string, build_ast
from .config import CalculatorConfig, load_config
from .converter import convert, to_rpn_string
from .session import CalculatorSession, HistoryEntry
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def enable_logging(log_level: str = "warning") -> None:
    """Configures root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calculette",
        description="Evaluate infix arithmetic expressions (+ - * / ^ and parentheses).",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate; read one per line from stdin when omitted",
    )
    parser.add_argument("--config", help="YAML or JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="override the configured log level",
    )
    parser.add_argument(
        "--postfix", action="store_true", help="also print the postfix form"
    )
    parser.add_argument(
        "--tree", action="store_true", help="also print the expression tree"
    )
    return parser


def _read_expressions(stream: TextIO) -> Iterable[str]:
    for line in stream:
        expression = line.rstrip("\n")
        if expression.strip():
            yield expression


def _print_details(
    entry: HistoryEntry, config: CalculatorConfig, out: TextIO
) -> None:
    if not entry.result.success or not (config.show_postfix or config.show_tree):
        return

    limits = config.to_limits()
    postfix = convert(tokenize(entry.expression, limits), entry.expression, limits)
    if config.show_postfix:
        print(f"  postfix: {to_rpn_string(postfix)}", file=out)
    if config.show_tree:
        tree = build_ast(postfix, entry.expression)
        print(f"  tree: {ast_to_infix(tree)}", file=out)
        print(ast_to_string(tree, indent=2), file=out)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Runs the command line calculator and returns the exit status."""
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"calculette: invalid configuration: {e}", file=sys.stderr)
        return 2

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.postfix:
        overrides["show_postfix"] = True
    if args.tree:
        overrides["show_tree"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    enable_logging(config.log_level)
    logger.debug("calculator_started", extra={"config": config.model_dump()})

    session = CalculatorSession(config.to_limits())
    expressions = args.expressions or _read_expressions(stdin)

    for expression in expressions:
        entry = session.submit(expression)
        print(entry.line, file=stdout)
        _print_details(entry, config, stdout)

    failed = sum(1 for entry in session.history if not entry.result.success)
    logger.info(
        "calculator_finished",
        extra={"computed": len(session.history), "failed": failed},
    )
    return 1 if failed else 0
