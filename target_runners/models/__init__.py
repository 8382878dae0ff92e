"""Shared data models for target runner resolution.

All models use Pydantic for validation and serialization.
"""

from target_runners.models.devices import Device, DeviceInventory, Runner
from target_runners.models.project import Project, Target, TargetRunnerEntry

__all__ = [
    "Device",
    "DeviceInventory",
    "Project",
    "Runner",
    "Target",
    "TargetRunnerEntry",
]
