from cablesway.shoulders import SHOULDER_X_TOPIC, SHOULDER_Y_TOPIC, ShouldersControl


def test_topics_match_controllers():
    sent = []
    control = ShouldersControl(lambda topic, value: sent.append(topic))
    control.on_update(0.5, 0.5)
    assert sent == [
        "/licasa1/licasa1_shoulder_x_effort_pos_controller/command",
        "/licasa1/licasa1_shoulder_y_effort_pos_controller/command",
    ]


def test_commands_negate_joint_angles():
    sent = []
    control = ShouldersControl(lambda topic, value: sent.append((topic, value)))
    result = control.on_update(0.3, -0.1)
    assert result == (-0.3, 0.1)
    assert sent == [(SHOULDER_X_TOPIC, -0.3), (SHOULDER_Y_TOPIC, 0.1)]


def test_zero_angles_give_zero_commands():
    sent = []
    control = ShouldersControl(lambda topic, value: sent.append(value))
    control.on_update(0.0, 0.0)
    assert sent == [0.0, 0.0]


def test_each_update_publishes_twice():
    sent = []
    control = ShouldersControl(lambda topic, value: sent.append(topic))
    for angle in (0.1, 0.2, 0.3):
        control.on_update(angle, angle)
    assert sent == [SHOULDER_X_TOPIC, SHOULDER_Y_TOPIC] * 3


def test_double_negation_round_trip():
    control = ShouldersControl(lambda topic, value: None)
    cx, cy = control.on_update(0.42, -0.17)
    assert control.on_update(cx, cy) == (0.42, -0.17)