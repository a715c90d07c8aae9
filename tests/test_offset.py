from gain_core import GainBounds, KeyCode, KeyEvent, OffsetAdjuster
from conftest import FakeDevice

UP = KeyEvent(KeyCode.VOLUME_UP, pressed=True)
DOWN = KeyEvent(KeyCode.VOLUME_DOWN, pressed=True)


def test_up_press_adds_offset():
    device = FakeDevice(gain=-20.0)
    assert OffsetAdjuster(device, offset=3.0).handle(UP) == -17.0
    assert device.sent == ["-17.0"]


def test_down_press_removes_offset():
    device = FakeDevice(gain=-20.0)
    OffsetAdjuster(device, offset=3.0).handle(DOWN)
    assert device.sent == ["-23.0"]


def test_up_press_clamps_at_maximum():
    device = FakeDevice(gain=-1.0)
    assert OffsetAdjuster(device).handle(UP) == 0.0
    assert device.sent == ["0.0"]


def test_press_at_limit_sends_nothing():
    device = FakeDevice(gain=-127.0)
    assert OffsetAdjuster(device).handle(DOWN) is None
    assert device.sent == []


def test_every_press_reads_the_device_again():
    device = FakeDevice(gain=-20.0)
    adjuster = OffsetAdjuster(device)
    adjuster.handle(UP)
    device.gain = -40.0  # changed behind our back
    adjuster.handle(UP)
    assert device.sent == ["-17.0", "-37.0"]
    assert device.queries == 2


def test_non_actionable_events_do_not_touch_device():
    device = FakeDevice()
    adjuster = OffsetAdjuster(device)
    assert adjuster.handle(KeyEvent(KeyCode.OTHER, pressed=True)) is None
    assert adjuster.handle(KeyEvent(KeyCode.VOLUME_UP, pressed=False)) is None
    assert device.queries == 0
    assert device.sent == []


def test_custom_bounds():
    device = FakeDevice(gain=-11.0)
    OffsetAdjuster(device, offset=5.0, bounds=GainBounds(-60.0, -10.0)).handle(UP)
    assert device.sent == ["-10.0"]
