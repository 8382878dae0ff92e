"""Tests for the package-level API."""

from __future__ import annotations

import target_runners
from target_runners import Device, Project, Target, resolve_target_runners


def test_public_api_resolves_example_project() -> None:
    project = Project(
        targets={
            "App": Target(name="App", platform=["ios", "macos"]),
            "Widget": Target(name="Widget", platform=["ios"]),
        }
    )
    devices = [
        Device(name="iPhone 14", udid="A1", runtime_identifier="com.apple.ios-simulator"),
        Device(name="MacBook", udid="B1", runtime_identifier="com.apple.macos"),
    ]

    entries = resolve_target_runners(project, devices)

    assert {entry.name: [r.udid for r in entry.runners] for entry in entries} == {
        "App_ios": ["A1"],
        "App_macos": ["B1"],
        "Widget": ["A1"],
    }


def test_public_api_exports() -> None:
    for name in target_runners.__all__:
        assert hasattr(target_runners, name)
