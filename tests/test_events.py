import pytest
from evdev import InputEvent, ecodes

from gain_core import KeyCode, KeyEvent, KeyEventClassifier


def key(code, value=1):
    return InputEvent(0, 0, ecodes.EV_KEY, code, value)


@pytest.fixture
def classifier():
    return KeyEventClassifier()


def test_up_press(classifier):
    event = classifier.classify(key(ecodes.KEY_U))
    assert event == KeyEvent(KeyCode.VOLUME_UP, pressed=True)
    assert event.actionable


def test_down_press(classifier):
    event = classifier.classify(key(ecodes.KEY_D))
    assert event == KeyEvent(KeyCode.VOLUME_DOWN, pressed=True)
    assert event.actionable


@pytest.mark.parametrize("value", [0, 2])
def test_release_and_repeat_are_ignored(classifier, value):
    event = classifier.classify(key(ecodes.KEY_U, value))
    assert event.code is KeyCode.OTHER
    assert not event.actionable


def test_unbound_key_press_is_not_actionable(classifier):
    event = classifier.classify(key(ecodes.KEY_A))
    assert event == KeyEvent(KeyCode.OTHER, pressed=True)
    assert not event.actionable


def test_non_key_events_are_ignored(classifier):
    assert not classifier.classify(InputEvent(0, 0, ecodes.EV_SYN, ecodes.SYN_REPORT, 0)).actionable
    # MSC_SCAN carries the scancode, value can be anything
    assert not classifier.classify(InputEvent(0, 0, ecodes.EV_MSC, ecodes.MSC_SCAN, 1)).actionable


def test_configured_keys():
    classifier = KeyEventClassifier(ecodes.KEY_VOLUMEUP, ecodes.KEY_VOLUMEDOWN)
    assert classifier.classify(key(ecodes.KEY_VOLUMEUP)).code is KeyCode.VOLUME_UP
    assert classifier.classify(key(ecodes.KEY_VOLUMEDOWN)).code is KeyCode.VOLUME_DOWN
    assert classifier.classify(key(ecodes.KEY_U)).code is KeyCode.OTHER


def test_same_key_for_both_directions_is_rejected():
    with pytest.raises(ValueError):
        KeyEventClassifier(ecodes.KEY_U, ecodes.KEY_U)
