"""Platform oscillation induced by swinging the two arms of the CraneBot."""

from __future__ import annotations

import time
from enum import Enum
from itertools import pairwise
from typing import Callable, Optional, Sequence

from .models import ModelConfiguration, Pose, clock_to_seconds, platform_pose
from .trajectory import Trajectory, multi_joint_cubic_vel_traj

__all__ = [
    "OscillationAxis",
    "ArmsInducedOscillation",
    "ARMS_CONFIGURATION",
    "JOINT_COUNT",
    "SWINGS",
    "RATE_HZ",
    "HOLD_SAMPLES",
    "TOPICS",
    "waypoints",
    "build_setpoints",
]

JOINT_COUNT = 6
SWINGS = 10
RATE_HZ = 1000.0
HOLD_SAMPLES = 20000

_TOPIC_PREFIX = "/cranebot/"
_TOPIC_SUFFIX = "_effort_pos_controller/command"
_JOINT_STEMS = (
    "platform_erb145_joint",
    "erb145_link2_joint",
    "link2_erb145_joint",
    "erb145_link4_joint",
    "link4_erb115_joint",
    "link5_gripper_joint",
)

TOPICS: dict[str, tuple[str, ...]] = {
    arm: tuple(f"{_TOPIC_PREFIX}{stem}_{arm}{_TOPIC_SUFFIX}" for stem in _JOINT_STEMS)
    for arm in ("A", "B")
}

# Only the second and third joint of each arm are driven.
_DRIVEN_JOINTS = (1, 2)

ARMS_CONFIGURATION = ModelConfiguration(
    model_name="CraneBot",
    joint_names=(
        "cables_joint_z",
        "cables_joint_x",
        "cables_joint_y",
        "platform_erb145_joint_A",
        "platform_erb145_joint_B",
    ),
    joint_positions=(0.0, 0.0, 0.0, 0.0, 0.0),
)


class OscillationAxis(Enum):
    """Axis about which the arms make the platform swing."""

    Z = "z"
    X = "x"

    @property
    def amplitude(self) -> float:
        return 0.15 if self is OscillationAxis.Z else 0.3

    @property
    def segment_duration(self) -> float:
        return 1.5 if self is OscillationAxis.Z else 2.0


Waypoint = tuple[float, ...]


def _joints(j1: float = 0.0, j2: float = 0.0) -> Waypoint:
    return (0.0, j1, j2, 0.0, 0.0, 0.0)


def waypoints(
    axis: OscillationAxis,
) -> tuple[list[float], list[Waypoint], list[Waypoint]]:
    """Segment durations and the joint waypoints of arm A and arm B.

    Each arm starts and ends at rest and swings back and forth ``SWINGS`` times.
    """
    axis = OscillationAxis(axis)
    amp = axis.amplitude
    rest = _joints()
    if axis is OscillationAxis.Z:
        swing_a = [_joints(-amp if k % 2 == 0 else amp) for k in range(SWINGS)]
        swing_b = list(swing_a)
    else:
        swing_a = [
            _joints(amp, -amp) if k % 2 == 0 else _joints(-amp, amp)
            for k in range(SWINGS)
        ]
        swing_b = [
            _joints(-amp, amp) if k % 2 == 0 else _joints(amp, -amp)
            for k in range(SWINGS)
        ]
    durations = [axis.segment_duration] * JOINT_COUNT
    return durations, [rest, *swing_a, rest], [rest, *swing_b, rest]


def _chain(
    dt: float, durations: Sequence[float], points: Sequence[Waypoint]
) -> list[Trajectory]:
    at_rest = [0.0] * JOINT_COUNT
    joints: Optional[list[Trajectory]] = None
    for start, end in pairwise(points):
        joints = multi_joint_cubic_vel_traj(
            dt, durations, start, end, at_rest, at_rest, joints
        )
    if joints is None:
        raise ValueError("at least two waypoints are needed")
    return joints


def build_setpoints(
    axis: OscillationAxis,
    dt: float = 1.0 / RATE_HZ,
    hold_samples: int = HOLD_SAMPLES,
) -> tuple[list[Trajectory], list[Trajectory]]:
    """Per-joint trajectories of arm A and arm B, with the final pose held."""
    if hold_samples < 0:
        raise ValueError("number of held samples must not be negative")
    durations, points_a, points_b = waypoints(axis)
    arm_a = _chain(dt, durations, points_a)
    arm_b = _chain(dt, durations, points_b)
    for joint in (*arm_a, *arm_b):
        joint.hold(hold_samples)
    return arm_a, arm_b


class ArmsInducedOscillation:
    """Streams arm joint set-points at a fixed rate to make the platform swing.

    ``publish`` is called as ``publish(topic, value)``; ``sleep`` receives the
    sampling period in seconds.
    """

    def __init__(
        self,
        publish: Callable[[str, float], object],
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.configuration = ARMS_CONFIGURATION
        self.gazebo_time = 0.0
        self.platform: Optional[Pose] = None
        self._publish = publish
        self._sleep = sleep

    def on_clock(self, sec: int, nsec: int) -> None:
        """Record the simulation clock."""
        self.gazebo_time = clock_to_seconds(sec, nsec)

    def on_link_states(self, poses: Sequence) -> None:
        """Record the platform link's pose."""
        self.platform = platform_pose(poses)

    def generate_oscillation(
        self, axis: OscillationAxis = OscillationAxis.Z
    ) -> int:
        """Publish every set-point of the driven joints; return the sample count."""
        period = 1.0 / RATE_HZ
        arm_a, arm_b = build_setpoints(axis, period, HOLD_SAMPLES)
        streams = [
            (TOPICS[arm][joint], trajectories[joint].s)
            for joint in _DRIVEN_JOINTS
            for arm, trajectories in (("A", arm_a), ("B", arm_b))
        ]
        count = len(arm_a[_DRIVEN_JOINTS[0]].s)
        for k in range(count):
            for topic, values in streams:
                self._publish(topic, values[k])
            self._sleep(period)
        return count