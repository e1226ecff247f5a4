"""Shoulder controller that counters the cable joint angles of the platform."""

from __future__ import annotations

from typing import Callable

__all__ = ["ShouldersControl", "SHOULDER_X_TOPIC", "SHOULDER_Y_TOPIC"]

SHOULDER_X_TOPIC = "/licasa1/licasa1_shoulder_x_effort_pos_controller/command"
SHOULDER_Y_TOPIC = "/licasa1/licasa1_shoulder_y_effort_pos_controller/command"


class ShouldersControl:
    """On every update, commands each shoulder joint to minus its cable joint angle.

    ``publish`` is called as ``publish(topic, value)``.
    """

    def __init__(self, publish: Callable[[str, float], object]) -> None:
        self._publish = publish

    def on_update(
        self, joint_x_position: float, joint_y_position: float
    ) -> tuple[float, float]:
        """Publish and return the shoulder commands for the given cable joint angles."""
        command_x = -joint_x_position
        command_y = -joint_y_position
        self._publish(SHOULDER_X_TOPIC, command_x)
        self._publish(SHOULDER_Y_TOPIC, command_y)
        return command_x, command_y