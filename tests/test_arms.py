import pytest

from cablesway.arms import (
    ARMS_CONFIGURATION,
    JOINT_COUNT,
    SWINGS,
    TOPICS,
    ArmsInducedOscillation,
    OscillationAxis,
    build_setpoints,
    waypoints,
)
from cablesway.models import Pose
from cablesway.trajectory import cubic_vel_traj


def _segment_len(axis, dt):
    return len(cubic_vel_traj(dt, axis.segment_duration, 0.0, 1.0))


def _pairs(values):
    return list(zip(values, values[1:]))


def test_waypoints_start_and_end_at_rest():
    for axis in OscillationAxis:
        durations, a, b = waypoints(axis)
        assert len(durations) == JOINT_COUNT
        assert len(a) == len(b) == SWINGS + 2
        assert a[0] == a[-1] == (0.0,) * JOINT_COUNT
        assert b[0] == b[-1] == (0.0,) * JOINT_COUNT


def test_waypoints_z_axis_values():
    durations, a, b = waypoints(OscillationAxis.Z)
    assert durations == [1.5] * JOINT_COUNT
    assert a[1] == (0.0, -0.15, 0.0, 0.0, 0.0, 0.0)
    assert a[2] == (0.0, 0.15, 0.0, 0.0, 0.0, 0.0)
    assert a == b


def test_waypoints_x_axis_arms_mirror():
    durations, a, b = waypoints(OscillationAxis.X)
    assert durations == [2.0] * JOINT_COUNT
    assert a[1] == (0.0, 0.3, -0.3, 0.0, 0.0, 0.0)
    for pa, pb in zip(a, b):
        assert pa[1] == -pb[1]
        assert pa[2] == -pb[2]
        assert pa[1] == -pa[2]


def test_waypoints_accepts_value():
    assert waypoints("x") == waypoints(OscillationAxis.X)
    with pytest.raises(ValueError):
        waypoints("y")


@pytest.mark.parametrize("axis", list(OscillationAxis))
def test_build_setpoints_lengths(axis):
    dt = 0.01
    hold = 7
    arm_a, arm_b = build_setpoints(axis, dt, hold)
    expected = (SWINGS + 1) * _segment_len(axis, dt) + hold
    assert len(arm_a) == len(arm_b) == JOINT_COUNT
    for joint in (*arm_a, *arm_b):
        assert len(joint.t) == len(joint.s) == len(joint.s_dot) == expected


@pytest.mark.parametrize("axis", list(OscillationAxis))
def test_build_setpoints_pass_through_waypoints(axis):
    dt = 0.01
    _, points_a, points_b = waypoints(axis)
    arm_a, arm_b = build_setpoints(axis, dt, 0)
    seg = _segment_len(axis, dt)
    for arm, points in ((arm_a, points_a), (arm_b, points_b)):
        for joint in range(JOINT_COUNT):
            for k, point in enumerate(points[:-1]):
                assert arm[joint].s[k * seg] == pytest.approx(point[joint])
            assert arm[joint].s[-1] == pytest.approx(points[-1][joint], abs=1e-9)


@pytest.mark.parametrize("axis", list(OscillationAxis))
def test_build_setpoints_within_amplitude(axis):
    arm_a, arm_b = build_setpoints(axis, 0.01, 3)
    for joint in (*arm_a, *arm_b):
        assert max(abs(v) for v in joint.s) <= axis.amplitude + 1e-9


def test_build_setpoints_hold_repeats_final_value():
    arm_a, _ = build_setpoints(OscillationAxis.Z, 0.01, 5)
    tail = arm_a[1].s[-6:]
    assert all(v == tail[0] for v in tail)


def test_build_setpoints_time_increases():
    arm_a, _ = build_setpoints(OscillationAxis.X, 0.01, 4)
    times = arm_a[2].t
    assert all(b > a for a, b in _pairs(times))


def test_build_setpoints_x_axis_arms_opposite():
    arm_a, arm_b = build_setpoints(OscillationAxis.X, 0.01, 2)
    for joint in (1, 2):
        for va, vb in zip(arm_a[joint].s, arm_b[joint].s):
            assert va == pytest.approx(-vb)


def test_build_setpoints_rejects_bad_input():
    with pytest.raises(ValueError):
        build_setpoints(OscillationAxis.Z, 0.01, -1)
    with pytest.raises(ValueError):
        build_setpoints(OscillationAxis.Z, 0.0, 1)


def test_topics_names():
    published = []
    node = ArmsInducedOscillation(
        lambda topic, value: published.append(topic), lambda s: None
    )
    node.generate_oscillation(OscillationAxis.Z)
    assert published[:4] == [
        "/cranebot/erb145_link2_joint_A_effort_pos_controller/command",
        "/cranebot/erb145_link2_joint_B_effort_pos_controller/command",
        "/cranebot/link2_erb145_joint_A_effort_pos_controller/command",
        "/cranebot/link2_erb145_joint_B_effort_pos_controller/command",
    ]
    assert published[0] == TOPICS["A"][1]
    assert published[3] == TOPICS["B"][2]


def test_callbacks_record_state():
    node = ArmsInducedOscillation(lambda topic, value: None, lambda s: None)
    node.on_clock(3, 500_000_000)
    assert node.gazebo_time == pytest.approx(3.5)
    poses = [Pose()] * 6 + [Pose(1, 2, 3, 0, 0, 0, 1)]
    node.on_link_states(poses)
    assert node.platform == Pose(1, 2, 3, 0, 0, 0, 1)
    assert node.configuration == ARMS_CONFIGURATION
    with pytest.raises(ValueError):
        node.on_link_states([Pose()] * 3)


def test_generate_oscillation_publishes_every_sample():
    published = []
    sleeps = []
    node = ArmsInducedOscillation(
        lambda topic, value: published.append((topic, value)), sleeps.append
    )
    count = node.generate_oscillation(OscillationAxis.Z)
    arm_a, arm_b = build_setpoints(OscillationAxis.Z)
    assert count == len(arm_a[1].s)
    assert len(sleeps) == count
    assert all(s == pytest.approx(0.001) for s in sleeps)
    assert len(published) == 4 * count
    order = [t for t, _ in published[:4]]
    assert order == [TOPICS["A"][1], TOPICS["B"][1], TOPICS["A"][2], TOPICS["B"][2]]
    values_a1 = [v for t, v in published if t == TOPICS["A"][1]]
    assert values_a1 == arm_a[1].s
    values_b2 = [v for t, v in published if t == TOPICS["B"][2]]
    assert values_b2 == arm_b[2].s