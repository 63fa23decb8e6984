"""Mdcver CLI entry points.

This module exposes diagnostic commands over the MDC version table.
It maps argparse commands onto library calls.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from cli.check_command import add_check_command, run_check_command
from core.config import MdcverConfig
from core.errors import MdcverError
from core.logging_config import configure_logging
from mdc.version_compare import compare, parse_operator
from mdc.version_id import parse_version_string, version_to_string
from mdc.version_registry import DEFAULT_REGISTRY


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="mdcver", description="MDC content version tool")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_current_command(subparsers)
    _add_history_command(subparsers)
    _add_comment_command(subparsers)
    _add_compare_command(subparsers)
    add_check_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mdcver CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = MdcverConfig.from_env()
        configure_logging(config.log_level)
        return _dispatch(config, args)
    except MdcverError as error:
        print(f"error={error}")
        return 2


def _dispatch(config: MdcverConfig, args: argparse.Namespace) -> int:
    if args.command == "current":
        return _run_current_command()
    if args.command == "history":
        return _run_history_command()
    if args.command == "comment":
        return _run_comment_command(args)
    if args.command == "compare":
        return _run_compare_command(args)
    return run_check_command(config, args)


def _run_current_command() -> int:
    """Print the version this binary writes and its comment."""
    version = DEFAULT_REGISTRY.current_version()
    print(f"version={version_to_string(version)}")
    print(f"comment={DEFAULT_REGISTRY.comment_for(version)}")
    return 0


def _run_history_command() -> int:
    """Print one row per version table entry."""
    for entry in DEFAULT_REGISTRY:
        type_names = ",".join(record_type.name for record_type in sorted(entry.record_types))
        print(f"{version_to_string(entry.version)}\t{entry.comment}\t{type_names}")
    return 0


def _run_comment_command(args: argparse.Namespace) -> int:
    """Print the comment for an exact version, or not_found."""
    version = parse_version_string(args.version)
    comment = DEFAULT_REGISTRY.comment_for(version)
    if comment is None:
        print("not_found")
        return 1
    print(comment)
    return 0


def _run_compare_command(args: argparse.Namespace) -> int:
    """Print the result of a relational comparison."""
    left = parse_version_string(args.left)
    operator = parse_operator(args.operator)
    right = parse_version_string(args.right)
    print(str(compare(left, operator, right)).lower())
    return 0


def _add_current_command(subparsers: Any) -> None:
    """Register current subcommand."""
    subparsers.add_parser("current", help="Show the content version this binary writes")


def _add_history_command(subparsers: Any) -> None:
    """Register history subcommand."""
    subparsers.add_parser("history", help="List every known content version")


def _add_comment_command(subparsers: Any) -> None:
    """Register comment subcommand."""
    parser = subparsers.add_parser("comment", help="Show the comment of an exact version")
    parser.add_argument("version", help="Version, e.g. 1.0.0.0")


def _add_compare_command(subparsers: Any) -> None:
    """Register compare subcommand."""
    parser = subparsers.add_parser("compare", help="Compare two content versions")
    parser.add_argument("left", help="Left version, e.g. 1.0.0.0")
    parser.add_argument("operator", help="One of ==, <, >, >=, <=")
    parser.add_argument("right", help="Right version, e.g. 1.0.0.1")
