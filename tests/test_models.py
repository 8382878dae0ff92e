"""Tests for shared data models.

These tests verify that:
1. Valid instances can be created
2. Invalid instances raise ValidationError
3. Model helpers work as expected
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from target_runners.models import (
    Device,
    DeviceInventory,
    Project,
    Runner,
    Target,
    TargetRunnerEntry,
)


class TestDeviceModel:
    """Tests for Device model."""

    def test_create_valid_device(self) -> None:
        device = Device(name="iPhone 14", udid="A1", runtime_identifier="com.apple.ios")
        assert device.name == "iPhone 14"
        assert device.state is None
        assert device.is_available is True

    def test_device_requires_runtime_identifier(self) -> None:
        with pytest.raises(ValidationError):
            Device(name="iPhone 14", udid="A1")  # type: ignore[call-arg]

    def test_device_rejects_empty_runtime_identifier(self) -> None:
        with pytest.raises(ValidationError):
            Device(name="iPhone 14", udid="A1", runtime_identifier="")

    def test_device_is_frozen(self) -> None:
        device = Device(name="iPhone 14", udid="A1", runtime_identifier="com.apple.ios")
        with pytest.raises(ValidationError):
            device.name = "iPhone 15"  # type: ignore


class TestRunnerModel:
    """Tests for Runner model."""

    def test_from_device_projects_name_and_udid(self) -> None:
        device = Device(
            name="iPad Air",
            udid="A2",
            runtime_identifier="com.apple.ios",
            state="Booted",
        )

        runner = Runner.from_device(device)

        assert runner.model_dump() == {"name": "iPad Air", "udid": "A2"}


class TestTargetModel:
    """Tests for Target model."""

    def test_single_platform_string_is_normalized(self) -> None:
        target = Target(name="Widget", platform="iOS")  # type: ignore[arg-type]
        assert target.platform == ("iOS",)
        assert target.is_multi_platform is False

    def test_multi_platform_target(self) -> None:
        target = Target(name="App", platform=["iOS", "macOS"])
        assert target.is_multi_platform is True

    def test_empty_platform_list_is_allowed(self) -> None:
        target = Target(name="Broken")
        assert target.platform == ()

    def test_target_rejects_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            Target(name="", platform=["iOS"])

    def test_target_is_hashable(self) -> None:
        target = Target(name="App", platform=["iOS", "macOS"])
        assert hash(target) == hash(Target(name="App", platform=("iOS", "macOS")))


class TestProjectModel:
    """Tests for Project model."""

    def test_get_target(self) -> None:
        widget = Target(name="Widget", platform=["iOS"])
        project = Project(name="Demo", targets={"Widget": widget})

        assert project.get_target("Widget") == widget
        assert project.get_target("Missing") is None


class TestTargetRunnerEntryModel:
    """Tests for TargetRunnerEntry model."""

    def test_key_and_has_runners(self) -> None:
        entry = TargetRunnerEntry(
            name="App_ios",
            target="App",
            platform="ios",
            runners=[Runner(name="iPhone 14", udid="A1")],
        )

        assert entry.key == ("App", "ios")
        assert entry.has_runners is True

    def test_entry_defaults_to_no_runners(self) -> None:
        entry = TargetRunnerEntry(name="Watch", target="Watch", platform="watchos")
        assert entry.runners == ()
        assert entry.has_runners is False

    def test_entry_is_hashable(self) -> None:
        entry = TargetRunnerEntry(
            name="Widget",
            target="Widget",
            platform="ios",
            runners=[Runner(name="iPhone 14", udid="A1")],
        )
        assert entry in {entry}


class TestDeviceInventory:
    """Tests for the host-side device inventory holder."""

    def test_replace_swaps_snapshot(self) -> None:
        first = Device(name="iPhone 14", udid="A1", runtime_identifier="com.apple.ios")
        second = Device(name="MacBook", udid="B1", runtime_identifier="com.apple.macos")
        inventory = DeviceInventory([first])

        inventory.replace([first, second])

        assert inventory.devices == (first, second)
        assert len(inventory) == 2
        assert list(inventory) == [first, second]

    def test_find_by_udid(self) -> None:
        device = Device(name="iPhone 14", udid="A1", runtime_identifier="com.apple.ios")
        inventory = DeviceInventory([device])

        assert inventory.find("A1") == device
        assert inventory.find("nope") is None

    def test_empty_by_default(self) -> None:
        assert len(DeviceInventory()) == 0
