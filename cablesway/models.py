"""Simulator message data: model configurations, link poses and clock conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

__all__ = [
    "ModelConfiguration",
    "Pose",
    "PLATFORM_LINK_INDEX",
    "clock_to_seconds",
    "platform_pose",
]

PLATFORM_LINK_INDEX = 6
_NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class ModelConfiguration:
    """Request that places the named joints of a model at the given positions [rad]."""

    model_name: str
    joint_names: tuple[str, ...]
    joint_positions: tuple[float, ...]
    urdf_param_name: str = "robot_description"

    def __post_init__(self) -> None:
        object.__setattr__(self, "joint_names", tuple(self.joint_names))
        object.__setattr__(
            self, "joint_positions", tuple(float(p) for p in self.joint_positions)
        )
        if len(self.joint_names) != len(self.joint_positions):
            raise ValueError("every joint name needs exactly one position")

    def as_dict(self) -> dict[str, float]:
        """Joint positions keyed by joint name."""
        return dict(zip(self.joint_names, self.joint_positions))


@dataclass(frozen=True)
class Pose:
    """Position and orientation quaternion of a link."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    qx: float = 0.0
    qy: float = 0.0
    qz: float = 0.0
    qw: float = 1.0

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Pose:
        """Build a pose from seven numbers: x, y, z, qx, qy, qz, qw."""
        items = tuple(float(v) for v in values)
        if len(items) != 7:
            raise ValueError("a pose needs exactly seven values")
        return cls(*items)

    def as_tuple(self) -> tuple[float, ...]:
        return (self.x, self.y, self.z, self.qx, self.qy, self.qz, self.qw)


def clock_to_seconds(sec: int, nsec: int) -> float:
    """Convert a seconds/nanoseconds clock stamp to seconds."""
    return sec + nsec / _NSEC_PER_SEC


def platform_pose(link_poses: Sequence[Union[Pose, Iterable[float]]]) -> Pose:
    """Pick the platform link's pose out of a link-state list."""
    if len(link_poses) <= PLATFORM_LINK_INDEX:
        raise ValueError(
            f"link state holds {len(link_poses)} poses; "
            f"the platform is link {PLATFORM_LINK_INDEX}"
        )
    entry = link_poses[PLATFORM_LINK_INDEX]
    return entry if isinstance(entry, Pose) else Pose.from_values(entry)