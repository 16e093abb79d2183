"""
ot_harness - Interactive single-object tracker test harness

Pick a point on the first frame of a video, track the region around it with
one of OpenCV's trackers and log the box for every frame:

- geometry: ROI seeding and box normalization
- session:  per-frame update with sticky tracking loss
- annotate: ROI marker and "tracking lost" banner
- report:   CSV rows
- pipeline: the whole run over one video
"""

__version__ = "0.1.0"

from .errors import (
    HarnessError, InvalidConfig, UnsupportedTracker, SourceOpenError,
    EmptyVideoError, SelectionCancelled, TrackerInitError, OutputOpenError,
)
from .geometry import Point, ROI, BoundingBox, initialize_roi, normalize, denormalize, parse_size_percent
from .session import TrackingState, TrackingSession, SessionResult
from .report import SessionReporter
from .trackers import TrackerKind, create_tracker

__all__ = [
    "HarnessError",
    "InvalidConfig",
    "UnsupportedTracker",
    "SourceOpenError",
    "EmptyVideoError",
    "SelectionCancelled",
    "TrackerInitError",
    "OutputOpenError",
    "Point",
    "ROI",
    "BoundingBox",
    "initialize_roi",
    "normalize",
    "denormalize",
    "parse_size_percent",
    "TrackingState",
    "TrackingSession",
    "SessionResult",
    "SessionReporter",
    "TrackerKind",
    "create_tracker",
]
