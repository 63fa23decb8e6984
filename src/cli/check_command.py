"""Stamp check command wiring for mdcver CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any

from core.config import MdcverConfig
from core.errors import MdcverError, UnsupportedFormatError
from mdc.format_gate import assess_stamp, require_readable
from mdc.stamp_manifest import load_stamp_manifest
from mdc.version_id import VersionId, parse_version_string, version_to_string


def add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    parser = subparsers.add_parser(
        "check",
        help="Check whether content stamps are readable by this binary",
    )
    parser.add_argument("versions", nargs="*", help="Stamps to check, e.g. 1.0.0.0")
    parser.add_argument("--stamps-file", help="YAML manifest with a 'stamps' list")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject legacy content versions (overrides MDCVER_ALLOW_LEGACY)",
    )


def run_check_command(config: MdcverConfig, args: argparse.Namespace) -> int:
    """Assess each stamp and print one verdict row per stamp."""
    if args.strict:
        config = replace(config, allow_legacy_reads=False)
    stamps = _collect_stamps(args)
    if not stamps:
        raise MdcverError("No stamps to check. Pass versions or --stamps-file.")
    unreadable = 0
    for stamp in stamps:
        verdict, status = _check_stamp(stamp, config.allow_legacy_reads)
        print(f"{version_to_string(stamp)}\t{verdict}\t{status}")
        if status == "rejected":
            unreadable += 1
    print(f"unreadable={unreadable}")
    return 0 if unreadable == 0 else 1


def _check_stamp(stamp: VersionId, allow_legacy: bool) -> tuple[str, str]:
    try:
        assessment = require_readable(stamp, allow_legacy=allow_legacy)
    except UnsupportedFormatError:
        return assess_stamp(stamp).verdict, "rejected"
    return assessment.verdict, "ok"


def _collect_stamps(args: argparse.Namespace) -> list[VersionId]:
    stamps = [parse_version_string(raw) for raw in args.versions]
    if args.stamps_file:
        stamps.extend(load_stamp_manifest(args.stamps_file))
    return stamps
