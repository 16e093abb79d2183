"""
selection.py - Picking the object to track

``ClickSelector`` shows the first frame and blocks until the user releases the
left mouse button on it (a point is returned), presses ESC or closes the
window (``None``).
"""

import logging

import cv2

from .geometry import Point

logger = logging.getLogger(__name__)

ESC_KEY = 27


class ClickSelector:
    def __init__(self, window_title, poll_ms=100):
        self.window_title = window_title
        self.poll_ms = poll_ms

    def select_point(self, frame):
        cv2.namedWindow(self.window_title, cv2.WINDOW_AUTOSIZE)
        cv2.imshow(self.window_title, frame)

        clicked = []

        def on_mouse(event, x, y, flags, userdata):
            if event == cv2.EVENT_LBUTTONUP and not clicked:
                clicked.append(Point(x, y))

        cv2.setMouseCallback(self.window_title, on_mouse)
        logger.info("Click on the object to track (ESC to cancel)")
        closed = False
        try:
            while not clicked:
                if (cv2.waitKey(self.poll_ms) & 0xFF) == ESC_KEY:
                    return None
                if cv2.getWindowProperty(self.window_title, cv2.WND_PROP_VISIBLE) < 1:
                    logger.info("Selection window closed")
                    closed = True
                    return None
        finally:
            if not closed:
                cv2.setMouseCallback(self.window_title, lambda *args: None)

        return clicked[0]


class FixedPointSelector:
    """Non-interactive selector for headless runs."""

    def __init__(self, point):
        self.point = point

    def select_point(self, frame):
        return self.point
