"""Resolve which simulators and devices can run each target of a project."""

from target_runners.models import Device, DeviceInventory, Project, Runner, Target, TargetRunnerEntry
from target_runners.runtime import (
    InvalidPlatformError,
    InvalidTargetError,
    InventoryDataError,
    MatchOptions,
    match_runners,
    resolve_target_runners,
)

__all__ = [
    "Device",
    "DeviceInventory",
    "InvalidPlatformError",
    "InvalidTargetError",
    "InventoryDataError",
    "MatchOptions",
    "Project",
    "Runner",
    "Target",
    "TargetRunnerEntry",
    "match_runners",
    "resolve_target_runners",
]
