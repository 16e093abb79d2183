"""
geometry.py - Points, ROIs and normalized bounding boxes

ROIs live in pixel space and may extend past the frame edges. Nothing in this
module clamps coordinates; consumers decide what out-of-frame boxes mean.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import InvalidConfig

DEFAULT_SIZE_PERCENT = 5.0

# Plain decimal literal: optional sign, digits with an optional fraction.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinates of a click."""
    x: int
    y: int

    @property
    def is_set(self) -> bool:
        return not (self.x == -1 and self.y == -1)


Point.UNSET = Point(-1, -1)


@dataclass(frozen=True)
class ROI:
    """Region of interest in pixels: top-left corner plus size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_tuple(cls, rect) -> "ROI":
        x, y, w, h = rect
        return cls(float(x), float(y), float(w), float(h))


@dataclass(frozen=True)
class BoundingBox:
    """ROI expressed as fractions of the frame size."""
    x1: float
    y1: float
    x2: float
    y2: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def is_within_frame(self) -> bool:
        return 0.0 <= self.x1 and 0.0 <= self.y1 and self.x2 <= 1.0 and self.y2 <= 1.0


def parse_size_percent(value: Union[str, float, int, None]) -> float:
    """Parse the ROI size percentage.

    Strings must be a plain decimal number in full ("5", "2.5", ".5").
    Exponents, ``nan``/``inf``, underscores and trailing characters are
    rejected. ``None`` gives the default of 5%.
    """
    if value is None:
        return DEFAULT_SIZE_PERCENT

    if isinstance(value, bool):
        raise InvalidConfig(f"Invalid ROI size percentage: {value!r}")

    if isinstance(value, (int, float)):
        percent = float(value)
        if not math.isfinite(percent):
            raise InvalidConfig(f"Invalid ROI size percentage: {value!r}")
    else:
        text = str(value)
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidConfig(f"Invalid ROI size percentage: '{text}'")
        percent = float(text)

    if not percent > 0:
        raise InvalidConfig(f"ROI size percentage must be positive, got {percent}")
    return percent


def initialize_roi(click_point: Point, frame_width: int, frame_height: int,
                   size_percent: float = DEFAULT_SIZE_PERCENT) -> ROI:
    """Build a square ROI centered on the clicked point.

    The side is ``size_percent`` of the smaller frame dimension.
    """
    if not click_point.is_set:
        raise InvalidConfig("No point was selected")
    if frame_width <= 0 or frame_height <= 0:
        raise InvalidConfig(f"Invalid frame size {frame_width}x{frame_height}")
    if not size_percent > 0:
        raise InvalidConfig(f"ROI size percentage must be positive, got {size_percent}")

    side = min(frame_width, frame_height) * (size_percent / 100.0)
    return ROI(click_point.x - side / 2, click_point.y - side / 2, side, side)


def normalize(roi: ROI, frame_width: int, frame_height: int) -> BoundingBox:
    """Convert a pixel ROI to frame-relative (x1, y1, x2, y2)."""
    return BoundingBox(
        roi.x / frame_width,
        roi.y / frame_height,
        (roi.x + roi.width) / frame_width,
        (roi.y + roi.height) / frame_height,
    )


def denormalize(box: BoundingBox, frame_width: int, frame_height: int) -> ROI:
    """Scale a normalized box back to a pixel ROI."""
    x = box.x1 * frame_width
    y = box.y1 * frame_height
    return ROI(x, y, box.x2 * frame_width - x, box.y2 * frame_height - y)


def parse_point(text: str) -> Point:
    """Parse an ``X,Y`` pair given on the command line."""
    parts = [p.strip() for p in str(text).split(",")]
    if len(parts) != 2:
        raise InvalidConfig(f"Point must be given as X,Y, got '{text}'")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidConfig(f"Point must be given as X,Y, got '{text}'") from None
    point = Point(x, y)
    if not point.is_set:
        raise InvalidConfig("Point (-1, -1) is reserved for 'not selected'")
    return point
