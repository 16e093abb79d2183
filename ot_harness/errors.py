"""
errors.py - Exceptions raised by the tracking harness

Everything here is a startup (fatal) condition. Tracking loss during a
session is not an error and never raises.
"""


class HarnessError(Exception):
    """Base class for fatal harness failures."""


class InvalidConfig(HarnessError, ValueError):
    """A configuration value or CLI argument could not be used."""


class UnsupportedTracker(HarnessError, ValueError):
    """The requested tracker name is not one of the known algorithms."""

    def __init__(self, name, supported=()):
        self.name = name
        self.supported = tuple(supported)
        message = f"Tracker '{name}' is not supported."
        if self.supported:
            message += f" Choose one of: {', '.join(self.supported)}."
        super().__init__(message)


class SourceOpenError(HarnessError):
    """The input video could not be opened."""


class EmptyVideoError(HarnessError):
    """The input video opened but yielded no frames."""


class SelectionCancelled(HarnessError):
    """The user pressed ESC instead of selecting a point."""


class TrackerInitError(HarnessError):
    """The tracker could not lock onto the initial ROI."""


class OutputOpenError(HarnessError):
    """The output video could not be created."""
