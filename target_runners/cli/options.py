"""CLI option models and parser helpers."""

from __future__ import annotations

import argparse
from enum import StrEnum


class LogFormat(StrEnum):
    """CLI log formatter mode."""

    READABLE = "readable"
    JSON = "json"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--devices", type=str, required=True, help="Device inventory file")
    parser.add_argument("--config", type=str, default=None, help="Config YAML override")
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        default=None,
        help="Match platforms case-insensitively",
    )
    parser.add_argument(
        "--literal",
        action="store_true",
        default=None,
        help="Match platforms as plain substrings instead of patterns",
    )
    parser.add_argument(
        "--available-only",
        action="store_true",
        help="Ignore devices whose runtime is unavailable",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=[fmt.value for fmt in LogFormat],
        help="Terminal log format",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="target-runners",
        description="List the simulators and devices each project target can run on",
    )
    subparsers = parser.add_subparsers(dest="command")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve runners for every target")
    resolve_parser.add_argument("--project", type=str, required=True, help="Project definition file")
    _add_common_arguments(resolve_parser)

    match_parser = subparsers.add_parser("match", help="List runners for a single platform")
    match_parser.add_argument("platform", type=str, help="Platform pattern, e.g. iOS")
    _add_common_arguments(match_parser)

    return parser
