"""Shared helper utilities for CLI commands."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from typing import Any

from target_runners.cli.options import LogFormat
from target_runners.config.loader import Config
from target_runners.models.devices import Runner
from target_runners.models.project import TargetRunnerEntry
from target_runners.runtime.matcher import MatchOptions


class _JSONLogFormatter(logging.Formatter):
    """Compact JSON formatter for machine-readable logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=True)


def _configure_logging(
    level: str = "INFO",
    log_format: str = LogFormat.READABLE.value,
) -> None:
    """Configure process-wide logging.

    Logs go to stderr so that stdout carries only command output.
    """
    normalized_level = level.upper()
    resolved_level = getattr(logging, normalized_level, logging.INFO)
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if not getattr(h, "_targetrunners_handler", False)]

    handler = logging.StreamHandler()
    handler._targetrunners_handler = True  # type: ignore[attr-defined]
    if log_format == LogFormat.JSON.value:
        formatter: logging.Formatter = _JSONLogFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(resolved_level)


def _resolve_match_options(args: argparse.Namespace, config: Config) -> MatchOptions:
    """Merge CLI matching flags over configured defaults."""
    ignore_case = getattr(args, "ignore_case", None)
    literal = getattr(args, "literal", None)
    return MatchOptions(
        ignore_case=config.matching.ignore_case if ignore_case is None else bool(ignore_case),
        literal=config.matching.literal if literal is None else bool(literal),
    )


def _serialize_runners(runners: Sequence[Runner]) -> list[dict[str, Any]]:
    return [runner.model_dump() for runner in runners]


def _serialize_entries(entries: Sequence[TargetRunnerEntry]) -> list[dict[str, Any]]:
    """Render resolved entries as JSON-ready records."""
    return [
        {
            "name": entry.name,
            "target": entry.target,
            "platform": entry.platform,
            "runners": _serialize_runners(entry.runners),
        }
        for entry in entries
    ]


def _emit_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))
