"""Sampled joint trajectories: cubic, trapezoidal-velocity and sinusoidal profiles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

__all__ = [
    "Trajectory",
    "step",
    "step_strict",
    "cubic_vel_traj",
    "trap_vel_traj",
    "trap_vel_traj_tf",
    "sinusoidal_traj",
    "damped_sinusoidal_traj",
    "multi_joint_cubic_vel_traj",
]

_VELOCITY_DECREMENT = 0.05


@dataclass
class Trajectory:
    """Time samples with position, velocity and acceleration at each sample."""

    t: list[float] = field(default_factory=list)
    s: list[float] = field(default_factory=list)
    s_dot: list[float] = field(default_factory=list)
    s_ddot: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.t)

    def extend(self, other: Trajectory) -> None:
        """Append every sample of ``other`` to this trajectory."""
        self.t.extend(other.t)
        self.s.extend(other.s)
        self.s_dot.extend(other.s_dot)
        self.s_ddot.extend(other.s_ddot)

    def hold(self, samples: int) -> None:
        """Repeat the final sample ``samples`` times, advancing time by the last step."""
        if samples < 0:
            raise ValueError("number of held samples must not be negative")
        if not self.t:
            raise ValueError("cannot hold an empty trajectory")
        step_size = self.t[-1] - self.t[-2] if len(self.t) > 1 else 0.0
        last_t = self.t[-1]
        self.t.extend(last_t + step_size * (k + 1) for k in range(samples))
        self.s.extend([self.s[-1]] * samples)
        self.s_dot.extend([self.s_dot[-1]] * samples)
        self.s_ddot.extend([self.s_ddot[-1]] * samples)


def step(t: float) -> float:
    """Unit step that is 1 at ``t == 0``; NaN maps to 0."""
    if math.isnan(t):
        return 0.0
    if t >= 0:
        return 1.0
    return 0.0


def step_strict(t: float) -> float:
    """Unit step that is 0 at ``t == 0``; NaN maps to 0."""
    if math.isnan(t):
        return 0.0
    if t > 0:
        return 1.0
    return 0.0


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def _check_sampling(dt: float, t_final: float) -> None:
    if dt <= 0:
        raise ValueError("sampling time must be positive")
    if t_final < 0:
        raise ValueError("trajectory duration must not be negative")


def _sample(
    dt: float,
    t_final: float,
    profile: Callable[[float], tuple[float, float, float]],
) -> Trajectory:
    _check_sampling(dt, t_final)
    traj = Trajectory()
    for k in range(_round_half_away(t_final / dt) + 1):
        time = k * dt
        s, s_dot, s_ddot = profile(time)
        traj.t.append(time)
        traj.s.append(s)
        traj.s_dot.append(s_dot)
        traj.s_ddot.append(s_ddot)
    return traj


def cubic_vel_traj(
    dt: float,
    t_final: float,
    s_init: float,
    s_final: float,
    s_dot_init: float = 0.0,
    s_dot_final: float = 0.0,
    t_start: float = 0.0,
) -> Trajectory:
    """Cubic polynomial from ``s_init`` to ``s_final`` over ``t_final`` seconds.

    The polynomial is evaluated at local time; the time vector starts at ``t_start``.
    """
    if dt <= 0:
        raise ValueError("sampling time must be positive")
    if t_final <= 0:
        raise ValueError("trajectory duration must be positive")

    n_samples = int(t_final / dt)
    a0 = s_init
    a1 = s_dot_init
    a3 = (s_dot_final * t_final - 2 * s_final + a1 * t_final + 2 * a0) / t_final**3
    a2 = (s_final - a3 * t_final**3 - a1 * t_final - a0) / t_final**2

    traj = Trajectory()
    for k in range(n_samples + 1):
        local = k * dt
        traj.t.append(t_start + local)
        traj.s.append(a3 * local**3 + a2 * local**2 + a1 * local + a0)
        traj.s_dot.append(3 * a3 * local**2 + 2 * a2 * local + a1)
        traj.s_ddot.append(6 * a3 * local + 2 * a2)
    return traj


def multi_joint_cubic_vel_traj(
    dt: float,
    t_final: Sequence[float],
    s_init: Sequence[float],
    s_final: Sequence[float],
    s_dot_init: Sequence[float],
    s_dot_final: Sequence[float],
    previous: Sequence[Trajectory] | None = None,
) -> list[Trajectory]:
    """One cubic segment per joint, appended after ``previous`` when given."""
    joints = len(s_init)
    if any(len(seq) != joints for seq in (t_final, s_final, s_dot_init, s_dot_final)):
        raise ValueError("all per-joint sequences must have the same length")
    if previous is not None and len(previous) != joints:
        raise ValueError("previous trajectories must match the number of joints")

    result = []
    for joint, (tf, si, sf, sdi, sdf) in enumerate(
        zip(t_final, s_init, s_final, s_dot_init, s_dot_final)
    ):
        combined = Trajectory()
        t_start = 0.0
        if previous is not None:
            prev = previous[joint]
            combined.extend(prev)
            if prev.t:
                t_start = prev.t[-1] + dt
        combined.extend(cubic_vel_traj(dt, tf, si, sf, sdi, sdf, t_start))
        result.append(combined)
    return result


def _trapezoid_profile(
    time: float,
    acc: float,
    cruise_vel: float,
    t_acc: float,
    t_final: float,
    s_init: float,
    s_final: float,
) -> tuple[float, float, float]:
    accel = step(time) * step(t_acc - time)
    cruise = step_strict(time - t_acc) * step(t_final - t_acc - time)
    decel = step_strict(time - (t_final - t_acc)) * step(t_final - time)
    done = step_strict(time - t_final)

    s = (
        (s_init + 0.5 * acc * time**2) * accel
        + (s_init + cruise_vel * (time - t_acc / 2)) * cruise
        + (s_final - 0.5 * acc * (t_final - time) ** 2) * decel
        + s_final * done
    )
    s_dot = (
        acc * time * accel
        + cruise_vel * cruise
        + (cruise_vel - acc * (time - (t_final - t_acc))) * decel
    )
    s_ddot = acc * accel - acc * decel
    return s, s_dot, s_ddot


def trap_vel_traj(
    dt: float, acc_des: float, vel_des: float, s_init: float, s_final: float
) -> Trajectory:
    """Trapezoidal velocity profile, lowering cruise velocity until feasible."""
    if acc_des == 0 or vel_des == 0:
        raise ValueError("acceleration and velocity must be non-zero")
    if s_final == s_init:
        raise ValueError("initial and final values must differ")
    if s_final - s_init < 0:
        vel_des, acc_des = -vel_des, -acc_des

    delta = abs(s_final - s_init)
    vel_perc = 1.0

    def timing(perc: float) -> tuple[float, float, float]:
        cruise = perc * vel_des
        t_acc = abs(cruise / acc_des)
        tf = (acc_des * t_acc**2 + s_final - s_init) / (acc_des * t_acc)
        return cruise, t_acc, tf

    cruise_vel, t_acc, t_final = timing(vel_perc)
    while abs(cruise_vel) >= 2 * delta / t_final or abs(cruise_vel) <= delta / t_final:
        vel_perc -= _VELOCITY_DECREMENT
        if vel_perc <= 1e-9:
            raise ValueError("no feasible cruise velocity for this motion")
        cruise_vel, t_acc, t_final = timing(vel_perc)

    return _sample(
        dt,
        t_final,
        lambda time: _trapezoid_profile(
            time, acc_des, cruise_vel, t_acc, t_final, s_init, s_final
        ),
    )


def trap_vel_traj_tf(
    dt: float, t_final: float, acc_des: float, s_init: float, s_final: float
) -> Trajectory:
    """Trapezoidal velocity profile of fixed duration ``t_final``.

    If ``acc_des`` is too low to finish in time, a triangular profile is used.
    """
    if acc_des == 0:
        raise ValueError("acceleration must be non-zero")
    _check_sampling(dt, t_final)
    delta = abs(s_final - s_init)
    sqrt_arg = (t_final * t_final * acc_des - 4 * delta) / acc_des

    if sqrt_arg < 0:
        if t_final == 0:
            raise ValueError("trajectory duration must be positive")
        acc = 4 * delta / (t_final * t_final)
        t_acc = t_final / 2
    else:
        acc = acc_des
        t_acc = t_final / 2 - 0.5 * math.sqrt(sqrt_arg)

    if s_final - s_init < 0:
        acc = -acc
    cruise_vel = t_acc * acc

    return _sample(
        dt,
        t_final,
        lambda time: _trapezoid_profile(
            time, acc, cruise_vel, t_acc, t_final, s_init, s_final
        ),
    )


def sinusoidal_traj(
    dt: float, t_final: float, amp: float, omega: float, phase: float
) -> Trajectory:
    """``amp * sin(omega * t - phase)`` with its derivatives."""

    def profile(time: float) -> tuple[float, float, float]:
        arg = omega * time - phase
        return (
            amp * math.sin(arg),
            amp * omega * math.cos(arg),
            -amp * omega**2 * math.sin(arg),
        )

    return _sample(dt, t_final, profile)


def damped_sinusoidal_traj(
    dt: float,
    t_final: float,
    amp: float,
    omega: float,
    phase: float,
    decay_rate: float,
) -> Trajectory:
    """``amp * exp(-decay_rate * t) * cos(omega * t + phase)`` with its derivatives."""

    def profile(time: float) -> tuple[float, float, float]:
        env = amp * math.exp(-decay_rate * time)
        c = math.cos(phase + omega * time)
        sn = math.sin(phase + omega * time)
        return (
            env * c,
            -env * (decay_rate * c + omega * sn),
            env * (decay_rate**2 * c - omega**2 * c + 2 * decay_rate * omega * sn),
        )

    return _sample(dt, t_final, profile)