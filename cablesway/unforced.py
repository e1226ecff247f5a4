"""Free oscillation: hold a model in a displaced pose, then release it."""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

from .models import ModelConfiguration, Pose, clock_to_seconds, platform_pose

__all__ = [
    "UnforcedOscillation",
    "CRANEBOT_CONFIGURATION",
    "LICAS_CONFIGURATION",
    "cranebot_unforced",
    "licas_unforced",
]

_RATE_HZ = 50.0
_RESET_REPETITIONS = 2

CRANEBOT_CONFIGURATION = ModelConfiguration(
    model_name="CraneBot",
    joint_names=(
        "cables_joint_z",
        "cables_joint_x",
        "cables_joint_y",
        "platform_joint_x",
        "platform_erb145_joint_A",
        "platform_erb145_joint_B",
    ),
    joint_positions=(0.0, 0.0, 0.08, 0.0, 0.0, 0.0),
)

LICAS_CONFIGURATION = ModelConfiguration(
    model_name="LiCAS_A1",
    joint_names=(
        "revolute_joint_z",
        "revolute_joint_x",
        "revolute_joint_y",
        "shoulder_joint_z",
        "shoulder_joint_x",
        "shoulder_joint_y",
    ),
    joint_positions=(0.0, 0.1987, 0.08, 0.0, -0.1987, -0.08),
)


class UnforcedOscillation:
    """Repeatedly applies a configuration for a while, then lets the model swing.

    ``set_configuration`` receives the configuration on every call; ``sleep``
    receives the sampling period in seconds. Simulation time comes in through
    :meth:`on_clock`.
    """

    def __init__(
        self,
        configuration: ModelConfiguration,
        set_configuration: Callable[[ModelConfiguration], object],
        sleep: Callable[[float], object] = time.sleep,
        reset_wait_time: float = 5.0,
    ) -> None:
        if reset_wait_time < 0:
            raise ValueError("reset wait time must not be negative")
        self.configuration = configuration
        self.reset_wait_time = reset_wait_time
        self.gazebo_time = 0.0
        self.platform: Optional[Pose] = None
        self._set_configuration = set_configuration
        self._sleep = sleep

    def on_clock(self, sec: int, nsec: int) -> None:
        """Record the simulation clock."""
        self.gazebo_time = clock_to_seconds(sec, nsec)

    def on_link_states(self, poses: Sequence) -> None:
        """Record the platform link's pose."""
        self.platform = platform_pose(poses)

    def generate_oscillation(self) -> float:
        """Hold the configuration for the reset time, twice; return elapsed sim time."""
        period = 1.0 / _RATE_HZ
        start_time = self.gazebo_time
        elapsed = 0.0
        old_elapsed = 0.0
        print("Moving the robot to a non-rest configuration")
        for _ in range(_RESET_REPETITIONS):
            while elapsed <= old_elapsed + self.reset_wait_time:
                elapsed = self.gazebo_time - start_time
                self._set_configuration(self.configuration)
                self._sleep(period)
            old_elapsed = elapsed
        print("Starting pose successfully modified")
        print("Unforced oscillation generated")
        return elapsed


def cranebot_unforced(
    set_configuration: Callable[[ModelConfiguration], object],
    sleep: Callable[[float], object] = time.sleep,
) -> UnforcedOscillation:
    """Unforced oscillation of the CraneBot model."""
    return UnforcedOscillation(CRANEBOT_CONFIGURATION, set_configuration, sleep)


def licas_unforced(
    set_configuration: Callable[[ModelConfiguration], object],
    sleep: Callable[[float], object] = time.sleep,
) -> UnforcedOscillation:
    """Unforced oscillation of the LiCAS model."""
    return UnforcedOscillation(LICAS_CONFIGURATION, set_configuration, sleep)