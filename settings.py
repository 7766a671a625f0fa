# settings.py
# Tuning constants for the field goal game plus the small JSON settings file.
# Every number that shapes the difficulty curve lives here, with its unit.

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# ---------- screen (reference coordinate space, px) ----------
WIDTH, HEIGHT = 800, 600
CENTER_X = WIDTH / 2
FPS = 60

# ---------- distances (yards) ----------
DISTANCES = (20, 30, 40, 50, 60)
MIN_DISTANCE, MAX_DISTANCE = 20, 60

# ---------- meters (value units per frame tick) ----------
METER_BASE_SPEED = 0.025
METER_SPEED_YARDS = 50          # speed grows by 100% every 50 yds past 20
POWER_SPEED_SCALE = 0.9
ACCURACY_SPEED_SCALE = 0.54
POWER_PERFECT, POWER_GOOD = 0.7, 0.3
ACCURACY_PERFECT, ACCURACY_GOOD = 0.15, 0.35   # max deviation from 0.5

# ---------- flight ----------
FLIGHT_CLOCK_RATE = 0.002       # flight-clock units per ms
FLIGHT_BASE_TIME = 0.8          # flight-clock units at zero power
FLIGHT_POWER_TIME = 0.4
DISTANCE_FACTOR_YARDS = 60      # arc/duration grow by 100% every 60 yds past 20
ARC_BASE_HEIGHT = 150           # px
ARC_POWER_HEIGHT = 100          # px at full power
CROSSBAR_Y = HEIGHT * 0.38      # px, where the arc lands
DRIFT_BASE = 80                 # px of drift at a fully missed accuracy
DRIFT_PER_YARD = 1.5            # px
WIND_MULTIPLIER = 3.5           # px per mph at t=1, 30 yds
WIND_REFERENCE_YARDS = 30
END_SCALE = 0.35
ROTATION_RATE = 0.01            # radians per ms

# ---------- field geometry (px) ----------
SCRIMMAGE_NEAR_Y = 380          # line of scrimmage at 20 yds
SCRIMMAGE_FAR_Y = 540           # line of scrimmage at 60 yds
SCALE_NEAR, SCALE_FAR = 1.0, 0.6
KICKER_OFFSET = 70              # kicker stands behind the line
BALL_OFFSET = 5                 # ball sits just in front of the kicker

# ---------- scoring ----------
MIN_POWER_BASE = 0.4
MIN_POWER_PER_YARD = 0.005
UPRIGHT_HALF_WIDTH = 60         # px either side of CENTER_X
YARDS_PER_POINT = 10

# ---------- timers (ms) ----------
SNAP_TIME_LIMIT = 1500
RESULT_DISPLAY = 2000
BLOCKED_DISPLAY = 2500
CAPTION_DISPLAY = 1800

# ---------- wind (mph) ----------
WIND_MODES = {
    "none": None,
    "light": (5, 12),
    "heavy": (15, 25),
}

SETTINGS_FILE = Path(".") / "fieldgoal_settings.json"
DEFAULT_SETTINGS = {"distance": 20, "wind": "none"}


def load_json(path, default):
    try:
        if path.exists():
            return json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {path}: {e}")
    return default


def save_json(path, data):
    try:
        path.write_text(json.dumps(data, indent=2))
    except OSError as e:
        logger.warning(f"Could not write {path}: {e}")


def load_settings(path=SETTINGS_FILE):
    """Read user settings over the defaults, dropping values the game can't use."""
    settings = DEFAULT_SETTINGS.copy()
    data = load_json(path, {})
    if not isinstance(data, dict):
        logger.warning(f"Ignoring malformed settings in {path}")
        return settings
    distance = data.get("distance")
    if type(distance) is int and distance in DISTANCES:
        settings["distance"] = data["distance"]
    if isinstance(data.get("wind"), str) and data["wind"] in WIND_MODES:
        settings["wind"] = data["wind"]
    return settings


def save_settings(settings, path=SETTINGS_FILE):
    save_json(path, {k: settings[k] for k in DEFAULT_SETTINGS if k in settings})
