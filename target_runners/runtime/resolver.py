"""Resolve project targets to the runners each of them can use."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

from target_runners.models.devices import Device
from target_runners.models.project import Project, Target, TargetRunnerEntry
from target_runners.runtime.matcher import InvalidPlatformError, MatchOptions, match_runners

logger = logging.getLogger(__name__)


def entry_name(target_name: str, platform: str, *, multi_platform: bool) -> str:
    """Build the display label for a (target, platform) entry."""
    if multi_platform:
        return f"{target_name}_{platform}"
    return target_name


def _resolve_target(
    target_name: str,
    target: Target,
    devices: Sequence[Device],
    options: MatchOptions | None,
) -> list[TargetRunnerEntry]:
    if not target.platform:
        raise InvalidTargetError(target_name, None, "no platform declared")

    seen: set[str] = set()
    for platform in target.platform:
        if platform in seen:
            raise InvalidTargetError(target_name, platform, "platform declared more than once")
        seen.add(platform)

    multi_platform = target.is_multi_platform
    entries: list[TargetRunnerEntry] = []
    for platform in target.platform:
        try:
            runners = match_runners(platform, devices, options=options)
        except InvalidPlatformError as exc:
            raise InvalidTargetError(target_name, platform, str(exc)) from exc

        name = entry_name(target_name, platform, multi_platform=multi_platform)
        logger.debug("[RESOLVE] %s -> %d runner(s)", name, len(runners))
        entries.append(
            TargetRunnerEntry(name=name, target=target_name, platform=platform, runners=runners)
        )
    return entries


def resolve_target_runners(
    project: Project,
    devices: Iterable[Device],
    *,
    options: MatchOptions | None = None,
) -> list[TargetRunnerEntry]:
    """Resolve one runner entry per (target, platform) pair.

    Multi-platform targets produce one entry per platform, labelled
    ``<target>_<platform>``. Single-platform targets produce one entry
    labelled with the bare target name. Ordering across targets follows the
    project mapping and should not be relied on.

    Args:
        project: Project whose targets should be resolved.
        devices: Current device inventory.
        options: Platform matching options.

    Returns:
        Resolved entries.

    Raises:
        InvalidTargetError: If a target declares no platform or an unusable one.
        InventoryDataError: If the device inventory is malformed.
    """
    inventory = tuple(devices)
    entries: list[TargetRunnerEntry] = []
    for target_name, target in project.targets.items():
        entries.extend(_resolve_target(target_name, target, inventory, options))

    _warn_on_label_collisions(entries)
    logger.info(
        "[RESOLVE] %d target(s) resolved into %d entr%s against %d device(s)",
        len(project.targets),
        len(entries),
        "y" if len(entries) == 1 else "ies",
        len(inventory),
    )
    return entries


def _warn_on_label_collisions(entries: Sequence[TargetRunnerEntry]) -> None:
    counts = Counter(entry.name for entry in entries)
    for name, count in counts.items():
        if count > 1:
            logger.warning(
                "[RESOLVE] %d entries share the label %r; use entry keys to tell them apart",
                count,
                name,
            )


def group_entries_by_target(
    entries: Iterable[TargetRunnerEntry],
) -> dict[str, list[TargetRunnerEntry]]:
    """Group resolved entries by the target they belong to."""
    grouped: dict[str, list[TargetRunnerEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.target].append(entry)
    return dict(grouped)


class InvalidTargetError(ValueError):
    """Error raised when a target cannot be resolved."""

    def __init__(self, target: str, platform: str | None, reason: str) -> None:
        location = f"target {target!r}"
        if platform is not None:
            location += f" platform {platform!r}"
        super().__init__(f"Invalid {location}: {reason}")
        self.target = target
        self.platform = platform
