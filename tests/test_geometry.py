"""
test_geometry.py - ROI seeding and box normalization
"""

import pytest
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ot_harness.errors import InvalidConfig
from ot_harness.geometry import (
    Point, ROI, BoundingBox, initialize_roi, normalize, denormalize,
    parse_size_percent, parse_point,
)


class TestInitializeRoi:

    def test_click_on_vga_frame(self):
        """5% of min(640, 480) is a 24 px square centered on the click"""
        roi = initialize_roi(Point(100, 100), 640, 480, 5.0)

        assert roi == ROI(88.0, 88.0, 24.0, 24.0)

    def test_default_size_is_five_percent(self):
        roi = initialize_roi(Point(50, 60), 200, 400)

        assert roi.width == pytest.approx(10.0)
        assert roi.height == pytest.approx(10.0)

    @pytest.mark.parametrize("point,width,height,percent", [
        (Point(0, 0), 1920, 1080, 1.0),
        (Point(321, 17), 640, 480, 12.5),
        (Point(5, 900), 300, 1000, 100.0),
    ])
    def test_centered_on_click(self, point, width, height, percent):
        roi = initialize_roi(point, width, height, percent)
        side = min(width, height) * percent / 100.0

        assert roi.width == pytest.approx(side)
        assert roi.height == pytest.approx(side)
        assert roi.x + roi.width / 2 == pytest.approx(point.x)
        assert roi.y + roi.height / 2 == pytest.approx(point.y)

    def test_not_clamped_at_frame_edge(self):
        roi = initialize_roi(Point(0, 0), 640, 480, 5.0)

        assert roi.x == pytest.approx(-12.0)
        assert roi.y == pytest.approx(-12.0)

    def test_unset_point_rejected(self):
        with pytest.raises(InvalidConfig):
            initialize_roi(Point.UNSET, 640, 480, 5.0)

    def test_non_positive_size_rejected(self):
        with pytest.raises(InvalidConfig):
            initialize_roi(Point(10, 10), 640, 480, 0.0)


class TestParseSizePercent:

    @pytest.mark.parametrize("text,expected", [
        ("5", 5.0),
        ("2.5", 2.5),
        (".5", 0.5),
        ("10.", 10.0),
        ("+7", 7.0),
    ])
    def test_plain_decimals(self, text, expected):
        assert parse_size_percent(text) == pytest.approx(expected)

    def test_none_gives_default(self):
        assert parse_size_percent(None) == 5.0

    def test_numbers_pass_through(self):
        assert parse_size_percent(12) == 12.0

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_numbers_rejected(self, value):
        with pytest.raises(InvalidConfig):
            parse_size_percent(value)

    @pytest.mark.parametrize("text", [
        "", "abc", "5abc", "5%", " 5", "1e2", "nan", "inf", "1_0", "0", "-3", "1.2.3",
    ])
    def test_rejected(self, text):
        with pytest.raises(InvalidConfig):
            parse_size_percent(text)

    def test_invalid_config_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_size_percent("five")


class TestNormalize:

    def test_fractions_of_frame(self):
        box = normalize(ROI(64, 48, 32, 24), 640, 480)

        assert box.as_tuple() == pytest.approx((0.1, 0.1, 0.15, 0.15))
        assert box.is_within_frame()

    def test_deterministic(self):
        roi = ROI(12.3, 45.6, 7.8, 9.1)

        assert normalize(roi, 320, 240) == normalize(roi, 320, 240)

    def test_out_of_frame_preserved(self):
        box = normalize(ROI(-10, 470, 40, 20), 640, 480)

        assert box.x1 < 0
        assert box.y2 > 1
        assert not box.is_within_frame()

    @pytest.mark.parametrize("roi", [
        ROI(88.0, 88.0, 24.0, 24.0),
        ROI(-3.25, 10.5, 17.75, 31.0),
        ROI(600.1, 470.9, 80.0, 40.0),
    ])
    def test_round_trip(self, roi):
        back = denormalize(normalize(roi, 640, 480), 640, 480)

        assert back.as_tuple() == pytest.approx(roi.as_tuple())


class TestParsePoint:

    def test_pair(self):
        assert parse_point("320, 240") == Point(320, 240)

    @pytest.mark.parametrize("text", ["320", "a,b", "1,2,3", "-1,-1"])
    def test_rejected(self, text):
        with pytest.raises(InvalidConfig):
            parse_point(text)


def test_bounding_box_is_immutable():
    box = BoundingBox(0.1, 0.2, 0.3, 0.4)
    with pytest.raises(AttributeError):
        box.x1 = 0.5
