# kick.py
# Field goal attempt state machine:
#   READY -> POWER -> ACCURACY -> KICKING -> RESULT -> READY
# plus the snap-clock escape ACCURACY -> RESULT when the kick gets blocked.
# The session never draws or plays sound; it hands back cue names for whoever does.

import logging
import math
import random
from dataclasses import dataclass

from meter import ACCURACY as ACCURACY_METER, POWER as POWER_METER, Meter, meter_speed
from settings import (
    BLOCKED_DISPLAY, CENTER_X, DISTANCES, FLIGHT_CLOCK_RATE, MIN_DISTANCE, MIN_POWER_BASE,
    MIN_POWER_PER_YARD, RESULT_DISPLAY, ROTATION_RATE, SNAP_TIME_LIMIT, UPRIGHT_HALF_WIDTH,
    WIND_MODES, YARDS_PER_POINT,
)
from trajectory import KickAttempt, ball_position, ball_spot_y, distance_scale

logger = logging.getLogger(__name__)

# states
READY = "READY"
POWER = "POWER"
ACCURACY = "ACCURACY"
KICKING = "KICKING"
RESULT = "RESULT"

# triggers
ADVANCE = "advance"
LANDED = "landed"
SNAP_EXPIRED = "snap_expired"
RESULT_EXPIRED = "result_expired"

TRANSITIONS = {
    (READY, ADVANCE): POWER,
    (POWER, ADVANCE): ACCURACY,
    (ACCURACY, ADVANCE): KICKING,
    (ACCURACY, SNAP_EXPIRED): RESULT,
    (KICKING, LANDED): RESULT,
    (RESULT, ADVANCE): READY,
    (RESULT, RESULT_EXPIRED): READY,
}

# outcomes
GOOD = "good"
SHORT = "short"
WIDE_LEFT = "wide_left"
WIDE_RIGHT = "wide_right"
BLOCKED = "blocked"

MESSAGES = {
    GOOD: "GOOD!",
    SHORT: "NO GOOD! (Short)",
    WIDE_LEFT: "NO GOOD! (Wide Left)",
    WIDE_RIGHT: "NO GOOD! (Wide Right)",
    BLOCKED: "BLOCKED!",
}

# cues for the announcer
CUE_KICK = "kick"
CUE_GOOD = "good"
CUE_NO_GOOD = "no_good"
CUE_BLOCKED = "blocked"


def transition(state, trigger):
    """Next state for `trigger`; triggers that don't apply leave the state alone."""
    return TRANSITIONS.get((state, trigger), state)


def min_power(distance):
    return MIN_POWER_BASE + (distance - MIN_DISTANCE) * MIN_POWER_PER_YARD

def points_for_distance(distance):
    return math.floor(distance / YARDS_PER_POINT)

def upright_bounds():
    return CENTER_X - UPRIGHT_HALF_WIDTH, CENTER_X + UPRIGHT_HALF_WIDTH

def judge(power, distance, x):
    """Outcome of a kick that landed at `x`. Short is checked before wide."""
    if power < min_power(distance): return SHORT
    left, right = upright_bounds()
    if x <= left: return WIDE_LEFT
    if x >= right: return WIDE_RIGHT
    return GOOD

def is_good(power, distance, x):
    return judge(power, distance, x) == GOOD


@dataclass
class Ball:
    x: float = CENTER_X
    y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0
    elapsed: float = 0.0
    flying: bool = False


class KickSession:
    """
    One player's run of kicks. Call advance() on space/click and
    update(dt_ms) once per frame; both return the cues raised.
    """
    def __init__(self, distance=20, wind_mode="none", rng=None):
        if distance not in DISTANCES:
            raise ValueError(f"distance must be one of {DISTANCES}, got {distance}")
        if wind_mode not in WIND_MODES:
            raise ValueError(f"unknown wind mode {wind_mode!r}")
        self.rng = rng or random.Random()
        self.power_meter = Meter(POWER_METER)
        self.accuracy_meter = Meter(ACCURACY_METER)
        self.state = READY
        self.distance = distance
        self.score = 0
        self.streak = 0
        self.makes = 0
        self.attempts = 0
        self.wind_mode = wind_mode
        self.wind_speed = 0.0
        self.wind_direction = 0
        self.attempt = None
        self.ball = Ball()
        self.outcome = None
        self.message = ""
        self.snap_timer = 0
        self.rush_progress = 0.0
        self.result_timer = 0
        self.blocked = False
        self.generate_wind()
        self.reset_for_next_kick()

    def _go(self, trigger):
        new = transition(self.state, trigger)
        logger.debug(f"{self.state} --{trigger}--> {new}")
        self.state = new

    def _place_ball(self):
        self.ball.x = CENTER_X
        self.ball.y = ball_spot_y(self.distance)
        self.ball.scale = distance_scale(self.distance)

    # ---------- input ----------
    def advance(self):
        cues = []
        if self.state == READY:
            self.power_meter.start(meter_speed(POWER_METER, self.distance))
            cues.append(CUE_KICK)
            self._go(ADVANCE)
        elif self.state == POWER:
            self.power_meter.stop()
            self.accuracy_meter.start(meter_speed(ACCURACY_METER, self.distance))
            # the rush is on
            self.snap_timer = SNAP_TIME_LIMIT
            self.rush_progress = 0.0
            self._go(ADVANCE)
        elif self.state == ACCURACY:
            self._start_kick()
            self._go(ADVANCE)
        elif self.state == RESULT:
            self._go(ADVANCE)
            self.reset_for_next_kick()
        return cues

    def set_distance(self, distance):
        if self.state == KICKING or distance not in DISTANCES:
            return False
        self.distance = distance
        self._place_ball()
        # changing the spot mid-sequence throws the attempt away
        if self.state in (POWER, ACCURACY):
            self.reset_for_next_kick()
        return True

    def set_wind(self, mode):
        if self.state == KICKING or mode not in WIND_MODES:
            return False
        self.wind_mode = mode
        self.generate_wind()
        return True

    def generate_wind(self):
        span = WIND_MODES[self.wind_mode]
        if span is None:
            self.wind_speed = 0.0; self.wind_direction = 0
            return
        lo, hi = span
        self.wind_speed = lo + self.rng.random() * (hi - lo)
        self.wind_direction = -1 if self.rng.random() < 0.5 else 1

    # ---------- transitions ----------
    def _start_kick(self):
        accuracy = self.accuracy_meter.stop()
        self.generate_wind()
        self.attempt = KickAttempt(
            distance=self.distance,
            power=self.power_meter.locked_value,
            accuracy=accuracy,
            wind_speed=self.wind_speed,
            wind_direction=self.wind_direction,
            start_x=CENTER_X,
            start_y=ball_spot_y(self.distance),
            start_scale=distance_scale(self.distance),
        )
        self.attempts += 1
        self.ball.elapsed = 0.0
        self.ball.flying = True

    def _end_kick(self):
        self.ball.flying = False
        self.outcome = judge(self.attempt.power, self.distance, self.ball.x)
        self.message = MESSAGES[self.outcome]
        if self.outcome == GOOD:
            self.score += points_for_distance(self.distance)
            self.streak += 1
            self.makes += 1
            cue = CUE_GOOD
        else:
            self.streak = 0
            cue = CUE_NO_GOOD
        self.result_timer = RESULT_DISPLAY
        self._go(LANDED)
        logger.info(f"{self.distance} yd attempt: {self.message} score={self.score} streak={self.streak}")
        return [cue]

    def _block(self):
        self.blocked = True
        self.accuracy_meter.stop()
        self.attempts += 1
        self.streak = 0
        self.outcome = BLOCKED
        self.message = MESSAGES[BLOCKED]
        self.result_timer = BLOCKED_DISPLAY
        self._go(SNAP_EXPIRED)
        logger.info(f"{self.distance} yd attempt blocked")
        return [CUE_BLOCKED]

    def reset_for_next_kick(self):
        if self.state != READY:
            logger.debug(f"{self.state} reset to {READY}")
        self.state = READY
        self.power_meter.reset()
        self.accuracy_meter.reset()
        self.attempt = None
        self._place_ball()
        self.ball.rotation = 0.0
        self.ball.elapsed = 0.0
        self.ball.flying = False
        self.outcome = None
        self.message = ""
        self.snap_timer = 0
        self.rush_progress = 0.0
        self.result_timer = 0
        self.blocked = False

    # ---------- per frame ----------
    def update(self, dt):
        """Advance one frame of `dt` ms: meters, ball, snap clock, result clock."""
        cues = []
        self.power_meter.update()
        self.accuracy_meter.update()

        if self.ball.flying:
            self.ball.elapsed += dt * FLIGHT_CLOCK_RATE
            pos = ball_position(self.attempt, self.ball.elapsed)
            self.ball.x, self.ball.y, self.ball.scale = pos.x, pos.y, pos.scale
            self.ball.rotation += dt * ROTATION_RATE
            if pos.landed:
                cues += self._end_kick()

        if self.state == ACCURACY and self.snap_timer > 0:
            self.snap_timer -= dt
            self.rush_progress = min(1.0, 1 - self.snap_timer / SNAP_TIME_LIMIT)
            if self.snap_timer <= 0:
                cues += self._block()

        if self.result_timer > 0:
            self.result_timer -= dt
            if self.result_timer <= 0 and self.state == RESULT:
                self._go(RESULT_EXPIRED)
                self.reset_for_next_kick()
        return cues

    @property
    def power(self):
        return self.power_meter.locked_value

    @property
    def accuracy(self):
        return self.accuracy_meter.locked_value
