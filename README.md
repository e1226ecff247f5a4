# cablesway

Tools for oscillation experiments on cable-suspended robots: joint trajectory
generators, the set-point schedules for arm-induced oscillations, and
controllers that push a model into an unforced oscillation or counter the
cable swing with the shoulder joints.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Trajectories

`cablesway.trajectory` produces sampled time laws as `Trajectory` objects
holding lists `t`, `s`, `s_dot` and `s_ddot`:

- `cubic_vel_traj(dt, t_final, s_init, s_final, s_dot_init=0.0, s_dot_final=0.0, t_start=0.0)`
  — cubic polynomial between two positions with given boundary velocities;
  the time vector starts at `t_start`;
- `trap_vel_traj(dt, acc_des, vel_des, s_init, s_final)` — trapezoidal
  velocity profile; the cruise velocity is lowered in 5 % steps until the
  profile is feasible, and `ValueError` is raised if none is;
- `trap_vel_traj_tf(dt, t_final, acc_des, s_init, s_final)` — trapezoidal
  profile of fixed duration, falling back to a triangular profile when
  `acc_des` is too low to finish in time;
- `sinusoidal_traj(dt, t_final, amp, omega, phase)` —
  `amp * sin(omega * t - phase)`;
- `damped_sinusoidal_traj(dt, t_final, amp, omega, phase, decay_rate)` —
  `amp * exp(-decay_rate * t) * cos(omega * t + phase)`;
- `multi_joint_cubic_vel_traj(dt, t_final, s_init, s_final, s_dot_init, s_dot_final, previous=None)`
  — one cubic segment per joint, appended after the trajectories in
  `previous` when given.

`Trajectory.extend(other)` appends another trajectory's samples, and
`Trajectory.hold(samples)` repeats the final sample, advancing time by the
last step.

```python
from cablesway.trajectory import cubic_vel_traj

traj = cubic_vel_traj(dt=0.001, t_final=1.5, s_init=0.0, s_final=0.15)
traj.hold(1000)   # keep the final sample for another second
```

`step` and `step_strict` are the unit step functions used by the trapezoidal
profiles: the first is 1 at zero, the second 0; both map NaN to 0.

## Models

`cablesway.models` provides:

- `ModelConfiguration` — model name, joint names and joint positions
  (`as_dict()` maps names to positions);
- `Pose` — link position and orientation quaternion (`from_values`,
  `as_tuple`);
- `platform_pose(link_poses)` — the platform link's pose (index
  `PLATFORM_LINK_INDEX`, 6) from a list of link poses;
- `clock_to_seconds(sec, nsec)`.

## Unforced oscillation

`cablesway.unforced.UnforcedOscillation(configuration, set_configuration, sleep=time.sleep, reset_wait_time=5.0)`
calls `set_configuration(configuration)` at 50 Hz until the simulation time,
fed through `on_clock(sec, nsec)`, has advanced by the reset wait time, does
so twice, and then releases the model. `generate_oscillation()` returns the
elapsed simulation time. `on_link_states(poses)` records the platform pose.

`cranebot_unforced` and `licas_unforced` build it with
`CRANEBOT_CONFIGURATION` and `LICAS_CONFIGURATION`.

## Arm-induced oscillation

`cablesway.arms` swings the two CraneBot arms to make the platform oscillate
about the Z or X axis (`OscillationAxis`):

- `waypoints(axis)` — segment durations and the joint waypoints of arm A and
  arm B, starting and ending at rest with `SWINGS` swings between;
- `build_setpoints(axis, dt=0.001, hold_samples=20000)` — per-joint
  trajectories of both arms, with the final pose held;
- `ArmsInducedOscillation(publish, sleep=time.sleep)` —
  `generate_oscillation(axis)` publishes the set-points of the second and
  third joint of each arm at 1000 Hz as `publish(topic, value)` and returns
  the number of samples. Topic names are in `TOPICS`.

## Shoulder compensation

`cablesway.shoulders.ShouldersControl(publish)` — each
`on_update(joint_x_position, joint_y_position)` publishes the negated cable
joint angles to `SHOULDER_X_TOPIC` and `SHOULDER_Y_TOPIC` and returns them.

## What the package does not do

It does not connect to a simulator or any messaging middleware, and it has no
command-line programs. Publishing, service calls, clock updates and link
states are all passed in as plain callables and method calls, so the
controllers can be wired to whatever middleware you use or driven directly.

## Tests

```
pip install .[test]
pytest
```