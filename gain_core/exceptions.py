"""
Custom exceptions for miniDSP gain sync.

Everything below FatalError terminates the process; nothing is retried.
"""


class GainSyncError(Exception):
    """Base exception for gain sync errors."""
    pass


class FatalError(GainSyncError):
    """Unrecoverable environment fault. The process exits when one is raised."""
    pass


class DeviceError(FatalError):
    """Raised when the gain cannot be read from or written to the device controller."""
    pass


class ProcessInvocationError(DeviceError):
    """Raised when the controller binary cannot be run or its output cannot be read."""

    def __init__(self, message: str, command: list = None):
        super().__init__(message)
        self.command = command


class ProtocolParseError(DeviceError):
    """Raised when the controller output holds no usable Gain(...) value."""

    def __init__(self, message: str, output: str = None):
        super().__init__(message)
        self.output = output


class DeviceReadError(FatalError):
    """Raised when the input device cannot be opened or read."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
