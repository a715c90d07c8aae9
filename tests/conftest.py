import pytest

from gain_core import format_gain

# Shape of the minidsp utility's status line
STATUS_TEMPLATE = (
    "MasterStatus {{ preset: Some(0), source: Some(Toslink), "
    "volume: Some(Gain({gain})), mute: Some(false), dirac: None }}"
)


def status_line(gain: float) -> str:
    return STATUS_TEMPLATE.format(gain=format_gain(gain))


class FakeDevice:
    """Stands in for the minidsp binary.

    Reports `gain` unless `script` holds queued outputs (floats are wrapped
    in a status line, strings are returned as-is). `set` records the value
    and, like the real device, reports it on the next query.
    """

    def __init__(self, gain: float = -30.0, script=None, on_query=None):
        self.gain = gain
        self.script = list(script or [])
        self.on_query = on_query
        self.sent = []
        self.queries = 0

    def query(self) -> str:
        self.queries += 1
        if self.on_query is not None:
            self.on_query(self)
        if self.script:
            item = self.script.pop(0)
            return item if isinstance(item, str) else status_line(item)
        return status_line(self.gain)

    def set(self, value: str) -> None:
        self.sent.append(value)
        self.gain = float(value)


@pytest.fixture
def device():
    return FakeDevice()
