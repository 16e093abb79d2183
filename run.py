#!/usr/bin/env python3
"""
run.py - object tracking test entry point

    python run.py <tracker> <inputvideo> <outputvideo> <logfile> [size_percent]
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from ot_harness.cli import main

if __name__ == "__main__":
    sys.exit(main())
