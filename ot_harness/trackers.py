"""
trackers.py - OpenCV tracker selection

The harness treats the tracking algorithm as a black box with two calls:
``init(frame, roi) -> bool`` and ``update(frame) -> (roi, bool)``. This module
resolves a tracker name to one of OpenCV's implementations and hides the
differences between the legacy and the current tracker APIs.
"""

import logging
from enum import Enum

import cv2

from .errors import TrackerInitError, UnsupportedTracker
from .geometry import ROI

logger = logging.getLogger(__name__)


class TrackerKind(Enum):
    MIL = "MIL"
    BOOSTING = "Boosting"
    MEDIAN_FLOW = "MedianFlow"
    TLD = "TLD"
    KCF = "KCF"
    GOTURN = "GOTURN"
    MOSSE = "MOSSE"

    @classmethod
    def names(cls):
        return [kind.value for kind in cls]

    @classmethod
    def from_name(cls, name):
        for kind in cls:
            if kind.value == name:
                return kind
        lowered = str(name).lower()
        for kind in cls:
            if kind.value.lower() == lowered:
                return kind
        raise UnsupportedTracker(name, cls.names())


# (attribute name, lives in cv2.legacy in OpenCV >= 4.5)
_FACTORIES = {
    TrackerKind.MIL: ("TrackerMIL_create", False),
    TrackerKind.BOOSTING: ("TrackerBoosting_create", True),
    TrackerKind.MEDIAN_FLOW: ("TrackerMedianFlow_create", True),
    TrackerKind.TLD: ("TrackerTLD_create", True),
    TrackerKind.KCF: ("TrackerKCF_create", False),
    TrackerKind.GOTURN: ("TrackerGOTURN_create", False),
    TrackerKind.MOSSE: ("TrackerMOSSE_create", True),
}


class OpenCVTracker:
    """Wraps a cv2 tracker so both API generations return ``bool`` and ``ROI``."""

    def __init__(self, kind, impl, legacy):
        self.kind = kind
        self.tracker = impl
        self.legacy = legacy

    @property
    def name(self):
        return self.kind.value

    def _rect(self, roi):
        if self.legacy:
            return roi.as_tuple()
        # cv2.Tracker (non-legacy) only accepts integer rectangles
        return tuple(int(round(v)) for v in roi.as_tuple())

    def init(self, frame, roi):
        try:
            ok = self.tracker.init(frame, self._rect(roi))
        except cv2.error as e:
            logger.error(f"{self.name} tracker init failed: {e}")
            return False
        # the current API returns None and raises on failure
        return True if ok is None else bool(ok)

    def update(self, frame):
        try:
            ok, bbox = self.tracker.update(frame)
        except cv2.error as e:
            logger.warning(f"{self.name} tracker update failed: {e}")
            return None, False
        if not ok:
            return None, False
        return ROI.from_tuple(bbox), True


def _resolve_factory(attr, legacy):
    legacy_module = getattr(cv2, "legacy", None)
    candidates = [legacy_module, cv2] if legacy else [cv2, legacy_module]
    for module in candidates:
        if module is None:
            continue
        factory = getattr(module, attr, None)
        if factory is not None:
            return factory, module is legacy_module
    return None, False


def create_tracker(name):
    """Create the tracker registered under ``name``.

    Unknown names raise ``UnsupportedTracker``. A known name whose algorithm
    is missing from the installed OpenCV build raises ``TrackerInitError``.
    """
    kind = name if isinstance(name, TrackerKind) else TrackerKind.from_name(name)
    attr, legacy = _FACTORIES[kind]
    factory, is_legacy = _resolve_factory(attr, legacy)
    if factory is None:
        raise TrackerInitError(
            f"OpenCV build has no {kind.value} tracker. Install opencv-contrib-python."
        )
    logger.debug(f"Creating {kind.value} tracker ({'legacy' if is_legacy else 'current'} API)")
    try:
        impl = factory()
    except cv2.error as e:
        # GOTURN needs its model files in the working directory
        raise TrackerInitError(f"Failed to create {kind.value} tracker: {e}") from e
    return OpenCVTracker(kind, impl, is_legacy)
