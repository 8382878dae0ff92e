"""Project, target and resolution result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from target_runners.models.devices import Runner


class Target(BaseModel):
    """A buildable unit declaring the platforms it supports."""

    name: str = Field(..., min_length=1, description="Target name")
    platform: tuple[str, ...] = Field(
        default=(), description="Supported platforms in declaration order"
    )

    model_config = {"frozen": True}

    @field_validator("platform", mode="before")
    @classmethod
    def coerce_single_platform(cls, value: Any) -> Any:
        # Project files may declare `platform: iOS` for single-platform targets.
        if isinstance(value, str):
            return (value,)
        return value

    @property
    def is_multi_platform(self) -> bool:
        """Check if the target declares more than one platform."""
        return len(self.platform) > 1


class Project(BaseModel):
    """A named collection of targets keyed by target name."""

    name: str | None = Field(default=None, description="Project display name")
    targets: dict[str, Target] = Field(default_factory=dict, description="Targets by name")

    model_config = {"frozen": True}

    def get_target(self, name: str) -> Target | None:
        """Get a target by name."""
        return self.targets.get(name)


class TargetRunnerEntry(BaseModel):
    """Runners available for one (target, platform) pair.

    ``name`` is a display label only. Two entries can share a label when a
    target is literally named like a synthesized ``<target>_<platform>``
    label, so ``key`` should be used wherever uniqueness matters. The resolver
    rejects targets that declare a platform twice, which keeps keys unique.
    """

    name: str = Field(..., description="Display label")
    target: str = Field(..., description="Target the entry belongs to")
    platform: str = Field(..., description="Platform runners were matched against")
    runners: tuple[Runner, ...] = Field(default=(), description="Matching runners")

    model_config = {"frozen": True}

    @property
    def key(self) -> tuple[str, str]:
        """Get the structured (target, platform) key."""
        return (self.target, self.platform)

    @property
    def has_runners(self) -> bool:
        """Check if any runner matched."""
        return bool(self.runners)
