"""
test_cli.py - exit status of the command line entry point
"""

import pytest
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ot_harness.cli import build_parser, main


class TestParser:

    def test_positional_order(self):
        args = build_parser().parse_args(["KCF", "in.mp4", "out.mp4", "log.csv", "7.5"])

        assert (args.tracker, args.input, args.output, args.log) == ("KCF", "in.mp4", "out.mp4", "log.csv")
        assert args.size_percent == "7.5"

    def test_size_is_optional(self):
        args = build_parser().parse_args(["KCF", "in.mp4", "out.mp4", "log.csv"])

        assert args.size_percent is None

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["KCF", "in.mp4"])

        assert excinfo.value.code == 2


class TestMainFailures:

    def test_unsupported_tracker(self, tmp_path):
        code = main(["Foo", str(tmp_path / "in.mp4"), str(tmp_path / "out.mp4"),
                     str(tmp_path / "log.csv"), "--no-display", "--point", "1,1"])

        assert code == 1
        assert not (tmp_path / "log.csv").exists()

    def test_unparsable_size(self, tmp_path):
        code = main(["KCF", str(tmp_path / "in.mp4"), str(tmp_path / "out.mp4"),
                     str(tmp_path / "log.csv"), "5abc", "--no-display", "--point", "1,1"])

        assert code == 1

    def test_unreadable_input(self, tmp_path, caplog):
        code = main(["KCF", str(tmp_path / "missing.mp4"), str(tmp_path / "out.mp4"),
                     str(tmp_path / "log.csv"), "--no-display", "--point", "1,1"])

        assert code == 1
        assert "Cannot open video file" in caplog.text
        assert not (tmp_path / "out.mp4").exists()
        assert not (tmp_path / "log.csv").exists()
