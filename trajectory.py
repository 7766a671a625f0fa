# trajectory.py
# Ball flight for a field goal attempt and the field geometry it starts from.
# Everything here is a pure function of the attempt and the flight clock.

from dataclasses import dataclass

from settings import (
    ARC_BASE_HEIGHT, ARC_POWER_HEIGHT, BALL_OFFSET, CENTER_X, CROSSBAR_Y,
    DISTANCE_FACTOR_YARDS, DRIFT_BASE, DRIFT_PER_YARD, END_SCALE, FLIGHT_BASE_TIME,
    FLIGHT_POWER_TIME, KICKER_OFFSET, MAX_DISTANCE, MIN_DISTANCE, SCALE_FAR,
    SCALE_NEAR, SCRIMMAGE_FAR_Y, SCRIMMAGE_NEAR_Y, WIND_MULTIPLIER, WIND_REFERENCE_YARDS,
)


@dataclass
class KickAttempt:
    distance: int
    power: float
    accuracy: float
    wind_speed: float = 0.0
    wind_direction: int = 0
    start_x: float = CENTER_X
    start_y: float = 0.0
    start_scale: float = 1.0


@dataclass
class BallPosition:
    x: float
    y: float
    scale: float
    t: float
    landed: bool


# ---------- field geometry ----------
def _distance_ratio(distance):
    return (distance - MIN_DISTANCE) / (MAX_DISTANCE - MIN_DISTANCE)

def line_of_scrimmage_y(distance):
    # longer kicks line up further from the posts, i.e. lower on screen
    return SCRIMMAGE_NEAR_Y + (SCRIMMAGE_FAR_Y - SCRIMMAGE_NEAR_Y) * _distance_ratio(distance)

def distance_scale(distance):
    return SCALE_NEAR - (SCALE_NEAR - SCALE_FAR) * _distance_ratio(distance)

def kicker_y(distance):
    return line_of_scrimmage_y(distance) + KICKER_OFFSET * distance_scale(distance)

def ball_spot_y(distance):
    return kicker_y(distance) - BALL_OFFSET * distance_scale(distance)


# ---------- flight ----------
def distance_factor(distance):
    return 1 + (distance - MIN_DISTANCE) / DISTANCE_FACTOR_YARDS

def flight_duration(power, distance):
    return (FLIGHT_BASE_TIME + power * FLIGHT_POWER_TIME) * distance_factor(distance)

def arc_height(power, distance):
    return (ARC_BASE_HEIGHT + power * ARC_POWER_HEIGHT) * distance_factor(distance)

def max_drift(distance):
    return DRIFT_BASE + (distance - MIN_DISTANCE) * DRIFT_PER_YARD

def accuracy_drift(attempt, t):
    return (attempt.accuracy - 0.5) * 2 * max_drift(attempt.distance) * t

def wind_drift(attempt, t):
    # grows with t squared: the longer the ball hangs, the more the wind carries it
    return (attempt.wind_speed * attempt.wind_direction * t * t
            * (attempt.distance / WIND_REFERENCE_YARDS) * WIND_MULTIPLIER)


def ball_position(attempt, elapsed):
    """
    Where the ball is after `elapsed` flight-clock units.
    Progress is clamped to 1, so asking past the end returns the landing spot.
    """
    duration = flight_duration(attempt.power, attempt.distance)
    raw = elapsed / duration
    t = min(max(raw, 0.0), 1.0)

    y_offset = -4 * arc_height(attempt.power, attempt.distance) * t * (1 - t)
    y = attempt.start_y + (CROSSBAR_Y - attempt.start_y) * t + y_offset
    x = attempt.start_x + accuracy_drift(attempt, t) + wind_drift(attempt, t)
    scale = attempt.start_scale + (END_SCALE - attempt.start_scale) * t
    return BallPosition(x=x, y=y, scale=scale, t=t, landed=raw >= 1)


def landing_position(attempt):
    return ball_position(attempt, flight_duration(attempt.power, attempt.distance))
