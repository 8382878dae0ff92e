"""Command line interface for target runner resolution."""

from __future__ import annotations

import argparse
import logging
import sys

from target_runners.cli.helpers import (
    _configure_logging,
    _emit_json,
    _resolve_match_options,
    _serialize_entries,
    _serialize_runners,
)
from target_runners.cli.options import LogFormat, build_arg_parser
from target_runners.config.loader import Config, load_config
from target_runners.loaders import load_devices, load_project
from target_runners.runtime.matcher import match_runners
from target_runners.runtime.resolver import resolve_target_runners

logger = logging.getLogger(__name__)


def _load_command_config(args: argparse.Namespace) -> Config:
    """Load config and reconfigure logging from it."""
    config = load_config(getattr(args, "config", None))
    _configure_logging(
        level=str(config.logging.level),
        log_format=str(getattr(args, "log_format", None) or config.logging.format),
    )
    return config


def resolve_command(args: argparse.Namespace) -> int:
    """Execute the `resolve` command."""
    if args.command != "resolve":
        raise ValueError(f"Unsupported command: {args.command}")

    config = _load_command_config(args)
    project = load_project(args.project)
    devices = load_devices(args.devices, available_only=bool(args.available_only))
    entries = resolve_target_runners(
        project,
        devices,
        options=_resolve_match_options(args, config),
    )
    _emit_json(_serialize_entries(entries))
    return 0


def match_command(args: argparse.Namespace) -> int:
    """Execute the `match` command."""
    if args.command != "match":
        raise ValueError(f"Unsupported command: {args.command}")

    config = _load_command_config(args)
    devices = load_devices(args.devices, available_only=bool(args.available_only))
    runners = match_runners(
        str(args.platform),
        devices,
        options=_resolve_match_options(args, config),
    )
    _emit_json(_serialize_runners(runners))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint function."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Configure a sane bootstrap logger before config loading.
    _configure_logging(
        level="INFO",
        log_format=str(getattr(args, "log_format", None) or LogFormat.READABLE.value),
    )

    try:
        if args.command == "resolve":
            return resolve_command(args)
        if args.command == "match":
            return match_command(args)
        raise ValueError(f"Unsupported command: {args.command}")
    except Exception as exc:
        logger.error("[BOOT] CLI execution failed: %s", exc)
        return 1


__all__ = [
    "LogFormat",
    "_configure_logging",
    "build_arg_parser",
    "main",
    "match_command",
    "resolve_command",
]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
