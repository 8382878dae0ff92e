"""Load projects and device inventories from files.

Projects use the XcodeGen ``project.yml`` shape::

    name: MyApp
    targets:
      App:
        type: application
        platform: [iOS, macOS]
      Widget:
        platform: iOS

Device inventories are either a flat list of device records or the output of
``xcrun simctl list devices --json``, whose ``devices`` mapping is keyed by
runtime identifier.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from target_runners.models.devices import Device
from target_runners.models.project import Project, Target
from target_runners.runtime.matcher import InventoryDataError

logger = logging.getLogger(__name__)


class ProjectDefinitionError(ValueError):
    """Error raised when a project definition cannot be loaded."""

    pass


def _read_structured(path: Path) -> Any:
    # JSON is a subset of YAML, so one parser handles both.
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f)


def parse_project(data: Any, *, name: str | None = None) -> Project:
    """Build a project from a parsed project definition.

    Args:
        data: Parsed mapping with a ``targets`` section.
        name: Fallback project name when the data carries none.

    Returns:
        Validated Project.

    Raises:
        ProjectDefinitionError: If the definition is malformed.
    """
    if not isinstance(data, dict):
        raise ProjectDefinitionError("Project definition must be a mapping")

    raw_targets = data.get("targets")
    if not isinstance(raw_targets, dict):
        raise ProjectDefinitionError("Project definition is missing a 'targets' mapping")

    targets: dict[str, Target] = {}
    for target_name, spec in raw_targets.items():
        if not isinstance(spec, dict):
            raise ProjectDefinitionError(f"Target {target_name!r} must be a mapping")
        try:
            targets[str(target_name)] = Target(
                name=str(target_name),
                platform=spec.get("platform") or [],
            )
        except ValidationError as exc:
            raise ProjectDefinitionError(f"Invalid target {target_name!r}: {exc}") from exc

    project_name = data.get("name") or name
    return Project(name=str(project_name) if project_name is not None else None, targets=targets)


def load_project(path: str | Path) -> Project:
    """Load a project definition file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ProjectDefinitionError: If the definition is malformed.
    """
    path = Path(path)
    project = parse_project(_read_structured(path), name=path.resolve().parent.name)
    logger.info("[LOAD] project %s: %d target(s)", project.name, len(project.targets))
    return project


def _device_from_record(record: Any, index: int, runtime_identifier: str | None = None) -> Device:
    if not isinstance(record, dict):
        raise InventoryDataError(index, None, "device record must be a mapping")

    identifier = runtime_identifier
    if identifier is None:
        identifier = record.get("runtime_identifier", record.get("runtimeIdentifier"))

    try:
        return Device(
            name=record.get("name"),
            udid=record.get("udid"),
            runtime_identifier=identifier,
            state=record.get("state"),
            is_available=record.get("is_available", record.get("isAvailable", True)),
        )
    except ValidationError as exc:
        raise InventoryDataError(index, record.get("name"), str(exc)) from exc


def parse_devices(data: Any, *, available_only: bool = False) -> list[Device]:
    """Build a device inventory from parsed device data.

    Args:
        data: Flat list of device records, or a simctl ``{"devices": {...}}``
            listing.
        available_only: Drop devices whose runtime is unavailable.

    Returns:
        Devices in listing order.

    Raises:
        InventoryDataError: If the data is malformed.
    """
    devices: list[Device] = []

    if isinstance(data, dict) and "devices" in data:
        runtimes = data["devices"]
        if not isinstance(runtimes, dict):
            raise InventoryDataError(0, None, "'devices' must map runtime identifiers to lists")
        for runtime_identifier, records in runtimes.items():
            if not isinstance(records, list):
                raise InventoryDataError(
                    len(devices), None, f"runtime {runtime_identifier!r} must list devices"
                )
            for record in records:
                devices.append(_device_from_record(record, len(devices), str(runtime_identifier)))
    elif isinstance(data, list):
        for index, record in enumerate(data):
            devices.append(_device_from_record(record, index))
    else:
        raise InventoryDataError(0, None, "expected a device list or a simctl listing")

    if available_only:
        devices = [device for device in devices if device.is_available]
    return devices


def load_devices(path: str | Path, *, available_only: bool = False) -> list[Device]:
    """Load a device inventory file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        InventoryDataError: If the data is malformed.
    """
    devices = parse_devices(_read_structured(Path(path)), available_only=available_only)
    logger.info("[LOAD] inventory %s: %d device(s)", path, len(devices))
    return devices
