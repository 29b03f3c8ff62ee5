"""Common spindle presets.

Only the maximum speed is used, to scale the RPM axis of the plot and to
prefill the form.  The generated G-code is never checked against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class SpindleProfile:
    """Name and speed limit of a spindle."""

    name: str
    max_rpm: int

    def __str__(self) -> str:
        return f"{self.name}  (max {self.max_rpm} RPM)"


class SpindleModel(Enum):
    ROUTER_24K = "24k router spindle"
    ROUTER_18K = "18k router spindle"
    MILL_10K = "10k mill spindle"


_PROFILES: dict[SpindleModel, SpindleProfile] = {
    SpindleModel.ROUTER_24K: SpindleProfile(name="24k router spindle", max_rpm=24000),
    SpindleModel.ROUTER_18K: SpindleProfile(name="18k router spindle", max_rpm=18000),
    SpindleModel.MILL_10K: SpindleProfile(name="10k mill spindle", max_rpm=10000),
}


def get_profile(model: SpindleModel) -> SpindleProfile:
    return _PROFILES[model]


def list_profiles() -> list[SpindleProfile]:
    return list(_PROFILES.values())
