"""Runner matching and target resolution."""

from target_runners.runtime.matcher import (
    InvalidPlatformError,
    InventoryDataError,
    MatchOptions,
    match_runners,
)
from target_runners.runtime.resolver import (
    InvalidTargetError,
    group_entries_by_target,
    resolve_target_runners,
)

__all__ = [
    "InvalidPlatformError",
    "InvalidTargetError",
    "InventoryDataError",
    "MatchOptions",
    "group_entries_by_target",
    "match_runners",
    "resolve_target_runners",
]
