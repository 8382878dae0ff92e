"""Platform to device matching.

A platform value is treated as a regular expression and searched for inside
each device's runtime identifier, so ``ios`` matches
``com.apple.ios-simulator`` and ``iOS|tvOS`` matches either runtime. Callers
that need plain substring semantics can enable ``MatchOptions.literal``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from target_runners.models.devices import Device, Runner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchOptions:
    """Knobs for how platform patterns are applied."""

    ignore_case: bool = False
    literal: bool = False


def platform_pattern(platform: str, options: MatchOptions | None = None) -> re.Pattern[str]:
    """Compile a platform value into a search pattern.

    Raises:
        InvalidPlatformError: If the platform is not a valid pattern.
    """
    opts = options or MatchOptions()
    source = re.escape(platform) if opts.literal else platform
    flags = re.IGNORECASE if opts.ignore_case else 0
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise InvalidPlatformError(platform, str(exc)) from exc


def _runtime_identifier(device: Device, index: int) -> str:
    identifier = getattr(device, "runtime_identifier", None)
    if not isinstance(identifier, str) or not identifier:
        raise InventoryDataError(index, getattr(device, "name", None))
    return identifier


def device_matches(pattern: re.Pattern[str], device: Device, index: int = 0) -> bool:
    """Check whether a device's runtime identifier matches a compiled platform."""
    return pattern.search(_runtime_identifier(device, index)) is not None


def match_runners(
    platform: str,
    devices: Iterable[Device],
    *,
    options: MatchOptions | None = None,
) -> list[Runner]:
    """Return runners for every device compatible with the platform.

    Args:
        platform: Platform pattern, e.g. ``"iOS"``.
        devices: Device inventory, in the order runners should be returned.
        options: Matching options. Defaults to case-sensitive pattern search.

    Returns:
        Runners for matching devices in inventory order. Empty when nothing
        matches.

    Raises:
        InvalidPlatformError: If the platform is not a valid pattern.
        InventoryDataError: If a device lacks a usable runtime identifier.
    """
    pattern = platform_pattern(platform, options)
    runners = [
        Runner.from_device(device)
        for index, device in enumerate(devices)
        if device_matches(pattern, device, index)
    ]
    logger.debug("[MATCH] platform=%r matched %d device(s)", platform, len(runners))
    return runners


class InvalidPlatformError(ValueError):
    """Error raised when a platform value cannot be used as a pattern."""

    def __init__(self, platform: str, reason: str) -> None:
        super().__init__(f"Invalid platform pattern {platform!r}: {reason}")
        self.platform = platform


class InventoryDataError(ValueError):
    """Error raised when device inventory data is incomplete or malformed."""

    def __init__(self, index: int, device_name: str | None, reason: str | None = None) -> None:
        detail = reason or "missing runtime identifier"
        super().__init__(f"Malformed device at position {index} ({device_name!r}): {detail}")
        self.index = index
        self.device_name = device_name
