"""Device inventory models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field


class Device(BaseModel):
    """A known simulator or physical device."""

    name: str = Field(..., min_length=1, description="Display name")
    udid: str = Field(..., min_length=1, description="Unique device identifier")
    runtime_identifier: str = Field(
        ..., min_length=1, description="Runtime identifier encoding the device OS"
    )
    state: str | None = Field(default=None, description="Simulator state, e.g. Booted")
    is_available: bool = Field(default=True, description="Whether the runtime is usable")

    model_config = {"frozen": True}


class Runner(BaseModel):
    """A runnable destination projected from a device."""

    name: str = Field(..., description="Device display name")
    udid: str = Field(..., description="Device identifier")

    model_config = {"frozen": True}

    @classmethod
    def from_device(cls, device: Device) -> Runner:
        """Project a device into a runner record."""
        return cls(name=device.name, udid=device.udid)


class DeviceInventory:
    """Host-owned holder for the current device list.

    The resolver never reads this directly; callers pass ``inventory.devices``
    (or the inventory itself) on each call so that refreshes are explicit.

    Example:
        >>> inventory = DeviceInventory()
        >>> inventory.replace(discovered_devices)
        >>> entries = resolve_target_runners(project, inventory.devices)
    """

    def __init__(self, devices: Iterable[Device] | None = None) -> None:
        self._devices: tuple[Device, ...] = tuple(devices or ())

    @property
    def devices(self) -> tuple[Device, ...]:
        """Get the current device snapshot."""
        return self._devices

    def replace(self, devices: Iterable[Device]) -> None:
        """Replace the inventory, e.g. after a device was plugged in."""
        self._devices = tuple(devices)

    def find(self, udid: str) -> Device | None:
        """Find a device by its identifier."""
        for device in self._devices:
            if device.udid == udid:
                return device
        return None

    def __iter__(self) -> Iterator[Device]:
        return iter(self._devices)

    def __len__(self) -> int:
        return len(self._devices)
