import logging

import pytest

from gain_core import ControllerState, GainBounds, GainController, ProtocolParseError
from conftest import FakeDevice

KNOWN = lambda baseline: ControllerState(known=True, baseline=baseline)


def test_initial_state_is_unknown():
    state = ControllerState.unknown()
    assert not state.known


def test_unknown_adopts_observation_without_command(device):
    controller = GainController(device)
    state = controller.step(ControllerState.unknown(), -42.5)
    assert state == KNOWN(-42.5)
    assert device.sent == []


def test_drift_is_amplified_clamped_and_applied(device):
    # -10 -> -8 is +2 dB, scaled x6 to +12 dB = 2.0, clamped to 0.0
    controller = GainController(device, scale=6.0)
    state = controller.step(KNOWN(-10.0), -8.0)
    assert device.sent == ["0.0"]
    assert not state.known


def test_no_drift_sends_nothing(device):
    controller = GainController(device)
    state = KNOWN(-50.0)
    for _ in range(5):
        state = controller.step(state, -50.0)
    assert state == KNOWN(-50.0)
    assert device.sent == []


def test_drift_below_precision_keeps_baseline(device):
    # 0.005 dB x6 = 0.03 dB, still -10.0 at one decimal
    controller = GainController(device)
    state = controller.step(KNOWN(-10.0), -10.005)
    assert state == KNOWN(-10.0)
    assert device.sent == []


def test_downward_drift(device):
    controller = GainController(device)
    state = controller.step(KNOWN(-20.0), -21.0)
    assert device.sent == ["-26.0"]
    assert state == ControllerState.unknown()


def test_correction_clamps_at_minimum(device):
    controller = GainController(device)
    controller.step(KNOWN(-120.0), -125.0)
    assert device.sent == ["-127.0"]


def test_correction_that_clamps_back_to_baseline_is_a_no_op(device):
    controller = GainController(device)
    state = controller.step(KNOWN(0.0), 0.5)
    assert state == KNOWN(0.0)
    assert device.sent == []


def test_custom_scale_and_bounds(device):
    controller = GainController(device, scale=2.0, bounds=GainBounds(-60.0, -10.0))
    controller.step(KNOWN(-30.0), -25.0)
    assert device.sent == ["-20.0"]
    controller.step(KNOWN(-30.0), -15.0)
    assert device.sent == ["-20.0", "-10.0"]


def test_poll_reads_then_corrects():
    device = FakeDevice(script=[-10.0, -8.0, 0.0, 0.0])
    controller = GainController(device)
    state = ControllerState.unknown()

    state = controller.poll(state)
    assert state == KNOWN(-10.0)

    state = controller.poll(state)
    assert device.sent == ["0.0"]
    assert not state.known

    # Fresh baseline is taken from the device, not from what we sent
    state = controller.poll(state)
    assert state == KNOWN(0.0)
    state = controller.poll(state)
    assert state == KNOWN(0.0)
    assert device.sent == ["0.0"]


def test_poll_with_malformed_output_is_fatal():
    device = FakeDevice(script=["minidsp: no device found"])
    controller = GainController(device)
    with pytest.raises(ProtocolParseError):
        controller.poll(KNOWN(-10.0))
    assert device.sent == []


def test_poll_logs_current_and_new_gain(caplog):
    device = FakeDevice(script=[-10.0, -9.0])
    controller = GainController(device)
    with caplog.at_level(logging.INFO):
        controller.poll(controller.poll(ControllerState.unknown()))
    assert "Current gain: -10.0 dB" in caplog.text
    assert "Current gain: -9.0 dB (was -10.0 dB)" in caplog.text
    assert "Setting new gain: -4.0 dB" in caplog.text
