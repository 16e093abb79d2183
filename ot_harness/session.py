"""
session.py - Single-object tracking session

A session owns one tracker, the current ROI and the tracking state for one
video. Loss is sticky: after the first failed update the tracker is never
consulted again and every later frame reports no bounding box.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import TrackerInitError
from .geometry import ROI, BoundingBox, normalize

logger = logging.getLogger(__name__)


class TrackingState(Enum):
    ACTIVE = "active"
    LOST = "lost"


@dataclass(frozen=True)
class SessionResult:
    """Outcome of one ``advance`` call."""
    frame_index: int
    bounding_box: Optional[BoundingBox]
    roi: Optional[ROI]  # pixel ROI behind bounding_box, None when lost

    @property
    def is_lost(self) -> bool:
        return self.bounding_box is None


class TrackingSession:
    def __init__(self, tracker, frame_width: int, frame_height: int):
        self.tracker = tracker
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.state: Optional[TrackingState] = None
        self.roi: Optional[ROI] = None
        self.frame_index = 0
        self.lost_at: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.state is TrackingState.ACTIVE

    def start(self, first_frame, initial_roi: ROI) -> None:
        """Initialize the tracker on the first frame.

        Raises ``TrackerInitError`` when the tracker cannot lock onto the ROI.
        """
        if self.state is not None:
            raise RuntimeError("Tracking session already started")
        if not initial_roi.is_valid():
            raise TrackerInitError(f"Initial ROI has no area: {initial_roi}")

        if not self.tracker.init(first_frame, initial_roi):
            raise TrackerInitError(f"Tracker failed to initialise on ROI {initial_roi}")

        self.roi = initial_roi
        self.state = TrackingState.ACTIVE
        logger.info(
            f"Initial ROI: ({initial_roi.x:.1f};{initial_roi.y:.1f}) "
            f"to ({initial_roi.x2:.1f};{initial_roi.y2:.1f})."
        )

    def _mark_lost(self) -> None:
        self.state = TrackingState.LOST
        self.lost_at = self.frame_index
        logger.warning(f"Tracking lost at frame {self.frame_index}")

    def advance(self, frame) -> SessionResult:
        """Process the next frame and return its result."""
        if self.state is None:
            raise RuntimeError("Tracking session has not been started")

        index = self.frame_index
        result = SessionResult(index, None, None)

        if self.state is TrackingState.ACTIVE:
            roi, ok = self.tracker.update(frame)
            if ok and roi is not None and roi.is_valid():
                self.roi = roi
                logger.debug(
                    f"Updated ROI: ({roi.x:.1f};{roi.y:.1f}) to ({roi.x2:.1f};{roi.y2:.1f})."
                )
                box = normalize(roi, self.frame_width, self.frame_height)
                result = SessionResult(index, box, roi)
            else:
                self._mark_lost()

        self.frame_index += 1
        return result
