"""
report.py - Per-frame CSV log

Two row shapes are supported:

- ``normalized``: ``x1,y1,x2,y2`` as fractions of the frame size
- ``pixel``:      ``frame,roi_x,roi_y,roi_w,roi_h`` in pixels

Once tracking is lost the coordinate columns are written as empty strings, so
every row has the same number of fields.
"""

import csv
import logging

logger = logging.getLogger(__name__)

LOG_FORMATS = ("normalized", "pixel")

HEADERS = {
    "normalized": ["x1", "y1", "x2", "y2"],
    "pixel": ["frame", "roi_x", "roi_y", "roi_w", "roi_h"],
}


class SessionReporter:
    def __init__(self, stream, fmt="normalized", echo=True):
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Unknown log format '{fmt}'. Choose one of: {', '.join(LOG_FORMATS)}")
        self.fmt = fmt
        self.echo = echo
        self.writer = csv.writer(stream, lineterminator="\n")
        self.rows_written = 0
        self.writer.writerow(self.header)

    @property
    def header(self):
        return list(HEADERS[self.fmt])

    def row(self, result):
        """Format a SessionResult as a list of CSV fields."""
        if self.fmt == "normalized":
            if result.bounding_box is None:
                return [""] * 4
            return [f"{v:.6f}" for v in result.bounding_box.as_tuple()]

        if result.roi is None or result.bounding_box is None:
            return [str(result.frame_index)] + [""] * 4
        return [str(result.frame_index)] + [f"{v:.1f}" for v in result.roi.as_tuple()]

    def report(self, result):
        fields = self.row(result)
        self.writer.writerow(fields)
        self.rows_written += 1
        if self.echo:
            logger.info(f"frame {result.frame_index}: {','.join(fields)}")
        return fields
