"""
test_report.py - CSV rows
"""

import csv
import io
import logging
import pytest
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ot_harness.geometry import ROI, normalize
from ot_harness.report import SessionReporter
from ot_harness.session import SessionResult


def tracked(index, roi, width=640, height=480):
    return SessionResult(index, normalize(roi, width, height), roi)


def lost(index):
    return SessionResult(index, None, None)


class TestNormalizedRows:

    def test_header(self):
        stream = io.StringIO()
        SessionReporter(stream)

        assert stream.getvalue() == "x1,y1,x2,y2\n"

    def test_tracked_row(self):
        reporter = SessionReporter(io.StringIO())

        fields = reporter.row(tracked(0, ROI(64, 48, 32, 24)))

        assert fields == ["0.100000", "0.100000", "0.150000", "0.150000"]

    def test_lost_row_keeps_width(self):
        reporter = SessionReporter(io.StringIO())

        assert reporter.row(lost(3)) == ["", "", "", ""]

    def test_out_of_frame_values_written(self):
        reporter = SessionReporter(io.StringIO())

        fields = reporter.row(tracked(0, ROI(-64, 0, 64, 48)))

        assert fields[0] == "-0.100000"


class TestPixelRows:

    def test_header(self):
        stream = io.StringIO()
        SessionReporter(stream, "pixel")

        assert stream.getvalue() == "frame,roi_x,roi_y,roi_w,roi_h\n"

    def test_tracked_row(self):
        reporter = SessionReporter(io.StringIO(), "pixel")

        fields = reporter.row(tracked(7, ROI(88.0, 88.25, 24.0, 24.0)))

        assert fields == ["7", "88.0", "88.2", "24.0", "24.0"]

    def test_lost_row_keeps_frame_number(self):
        reporter = SessionReporter(io.StringIO(), "pixel")

        assert reporter.row(lost(12)) == ["12", "", "", "", ""]


def test_uniform_schema_across_loss():
    stream = io.StringIO()
    reporter = SessionReporter(stream)
    results = [tracked(i, ROI(10 + i, 10, 20, 20)) for i in range(3)] + [lost(3), lost(4)]

    for result in results:
        reporter.report(result)

    rows = list(csv.reader(io.StringIO(stream.getvalue())))
    assert len(rows) == 6
    assert {len(row) for row in rows} == {4}
    assert rows[4] == ["", "", "", ""]
    assert reporter.rows_written == 5


def test_rows_echoed_to_log(caplog):
    reporter = SessionReporter(io.StringIO())

    with caplog.at_level(logging.INFO, logger="ot_harness.report"):
        reporter.report(lost(2))

    assert "frame 2: ,,," in caplog.text


def test_unknown_format():
    with pytest.raises(ValueError):
        SessionReporter(io.StringIO(), "json")
