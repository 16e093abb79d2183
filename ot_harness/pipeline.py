"""
pipeline.py - One tracking run over one video

Steps: open the input, show the first frame for point selection, seed the ROI,
initialise the tracker, then process every frame (including the first one
again) writing one CSV row and one output frame per input frame.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import cv2

from .annotate import annotate, display_frame, draw_frame_label, draw_lost_indicator
from .errors import InvalidConfig, SelectionCancelled
from .geometry import initialize_roi
from .report import SessionReporter
from .selection import ESC_KEY, ClickSelector, FixedPointSelector
from .session import TrackingSession
from .trackers import create_tracker
from .video_reader import VideoReader
from .video_writer import VideoWriter

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 30


@dataclass
class SessionSummary:
    frames_read: int = 0
    rows_written: int = 0
    frames_written: int = 0
    lost_at: Optional[int] = None
    cancelled: bool = False


def make_selector(config):
    if config.point is not None:
        return FixedPointSelector(config.point)
    if config.display:
        return ClickSelector(config.window_title, poll_ms=config.click_poll_ms)
    raise InvalidConfig("A point (--point X,Y) is required when the display is disabled")


def run_session(config, input_path, output_path, log_path,
                selector=None,
                tracker_factory=create_tracker,
                reader_factory=VideoReader,
                writer_factory=VideoWriter):
    """Track the selected object through ``input_path``.

    Startup failures raise a ``HarnessError`` before any output file is
    created. Returns a ``SessionSummary``.
    """
    if selector is None:
        selector = make_selector(config)

    logger.info(f"Reading video from file '{input_path}' ...")
    reader = reader_factory(input_path)
    summary = SessionSummary()
    writer = None
    log_file = None
    try:
        first_frame = reader.peek_first_frame()
        width, height = reader.frame_width, reader.frame_height
        logger.info(f"Video's frame size is {width} x {height}, {reader.fps} fps.")

        point = selector.select_point(first_frame)
        if point is None:
            raise SelectionCancelled("ESC pressed, terminating.")
        logger.info(f"Clicked at {point.x} x {point.y}.")

        roi = initialize_roi(point, width, height, config.size_percent)
        tracker = tracker_factory(config.tracker)
        session = TrackingSession(tracker, width, height)
        session.start(first_frame, roi)

        writer = writer_factory(output_path, width, height, reader.fps, config.codec)
        log_file = open(log_path, 'w', newline='', encoding='utf-8')
        reporter = SessionReporter(log_file, config.log_format)

        try:
            while True:
                frame = reader.read_frame()
                if frame is None:
                    break
                summary.frames_read += 1

                result = session.advance(frame)
                fields = reporter.report(result)

                if result.is_lost:
                    draw_lost_indicator(frame, config.lost_color)
                else:
                    annotate(frame, result.roi, config.inner_color, config.outer_color)
                writer.write_frame(frame)

                if summary.frames_read % PROGRESS_EVERY == 0:
                    logger.info(f"Processed {summary.frames_read} frames...")

                if config.display:
                    preview = draw_frame_label(frame.copy(), result, fields)
                    key = display_frame(preview, config.window_title, config.key_wait_ms)
                    if (key & 0xFF) == ESC_KEY:
                        logger.info("ESC was pressed.")
                        summary.cancelled = True
                        break
        except KeyboardInterrupt:
            logger.info("Processing interrupted by user")
            summary.cancelled = True

        summary.rows_written = reporter.rows_written
        summary.frames_written = writer.frames_written
        summary.lost_at = session.lost_at
    finally:
        reader.release()
        if writer is not None:
            writer.release()
        if log_file is not None:
            log_file.close()
        if config.display:
            cv2.destroyAllWindows()

    logger.info(f"Done. Processed {summary.frames_read} frames.")
    return summary
