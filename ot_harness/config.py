"""
config.py - Harness settings

Defaults are merged with an optional YAML file, then CLI options override the
result. ``build_session_config`` validates the merged dict.
"""

import copy
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import InvalidConfig
from .geometry import DEFAULT_SIZE_PERCENT, Point, parse_point, parse_size_percent
from .report import LOG_FORMATS
from .trackers import TrackerKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "tracker": "KCF",
    "size_percent": DEFAULT_SIZE_PERCENT,
    "log_format": "normalized",
    "display": True,
    "point": None,
    "codec": "mp4v",
    "window_title": "Object Tracking Test",
    "key_wait_ms": 10,
    "click_poll_ms": 100,
    "colors": {
        "inner": [255, 255, 255],
        "outer": [0, 0, 0],
        "lost": [0, 0, 255],
    },
}


@dataclass
class SessionConfig:
    tracker: TrackerKind
    size_percent: float
    log_format: str
    display: bool
    point: Optional[Point]
    codec: str
    window_title: str
    key_wait_ms: int
    click_poll_ms: int
    inner_color: Tuple[int, int, int]
    outer_color: Tuple[int, int, int]
    lost_color: Tuple[int, int, int]


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load defaults, updated with the YAML file at ``config_path`` if given."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not config_path:
        return config

    if not os.path.exists(config_path):
        raise InvalidConfig(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            file_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfig(f"Failed to load config file {config_path}: {e}") from e

    if not isinstance(file_config, dict):
        raise InvalidConfig(f"Config file {config_path} must contain a mapping")

    colors = file_config.pop("colors", None) or {}
    config.update(file_config)
    config["colors"].update(colors)

    logger.info(f"Loaded config from: {config_path}")
    return config


def override_config_with_args(config: Dict[str, Any], args) -> Dict[str, Any]:
    """Apply CLI options that were actually given."""
    if getattr(args, "tracker", None):
        config["tracker"] = args.tracker
    if getattr(args, "size_percent", None) is not None:
        config["size_percent"] = args.size_percent
    if getattr(args, "log_format", None):
        config["log_format"] = args.log_format
    if getattr(args, "point", None):
        config["point"] = args.point
    if getattr(args, "no_display", False):
        config["display"] = False
    if getattr(args, "codec", None):
        config["codec"] = args.codec
    return config


def _color(value, key):
    try:
        color = tuple(int(c) for c in value)
    except (TypeError, ValueError):
        raise InvalidConfig(f"colors.{key} must be a list of three integers") from None
    if len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise InvalidConfig(f"colors.{key} must be three values in 0..255, got {value}")
    return color


def _positive_int(config, key):
    try:
        value = int(config[key])
    except (TypeError, ValueError):
        raise InvalidConfig(f"{key} must be an integer, got {config[key]!r}") from None
    if value <= 0:
        raise InvalidConfig(f"{key} must be positive, got {value}")
    return value


def build_session_config(config: Dict[str, Any]) -> SessionConfig:
    tracker = TrackerKind.from_name(config["tracker"])
    size_percent = parse_size_percent(config["size_percent"])

    log_format = config["log_format"]
    if log_format not in LOG_FORMATS:
        raise InvalidConfig(f"log_format must be one of {', '.join(LOG_FORMATS)}, got '{log_format}'")

    point = config.get("point")
    if point is not None and not isinstance(point, Point):
        if isinstance(point, (list, tuple)):
            point = ",".join(str(v) for v in point)
        point = parse_point(point)

    codec = str(config["codec"])
    if len(codec) != 4:
        raise InvalidConfig(f"codec must be a four character code, got '{codec}'")

    colors = config.get("colors") or {}
    defaults = DEFAULT_CONFIG["colors"]
    return SessionConfig(
        tracker=tracker,
        size_percent=size_percent,
        log_format=log_format,
        display=bool(config["display"]),
        point=point,
        codec=codec,
        window_title=str(config["window_title"]),
        key_wait_ms=_positive_int(config, "key_wait_ms"),
        click_poll_ms=_positive_int(config, "click_poll_ms"),
        inner_color=_color(colors.get("inner", defaults["inner"]), "inner"),
        outer_color=_color(colors.get("outer", defaults["outer"]), "outer"),
        lost_color=_color(colors.get("lost", defaults["lost"]), "lost"),
    )
