# meter.py
# Oscillating power / accuracy meters the player stops by timing a press.

from settings import (
    ACCURACY_GOOD, ACCURACY_PERFECT, ACCURACY_SPEED_SCALE, METER_BASE_SPEED,
    METER_SPEED_YARDS, MIN_DISTANCE, POWER_GOOD, POWER_PERFECT, POWER_SPEED_SCALE,
)

POWER = "power"
ACCURACY = "accuracy"


def meter_speed(kind, distance):
    """Per-tick meter speed; both meters get faster on longer kicks."""
    speed = METER_BASE_SPEED * (1 + (distance - MIN_DISTANCE) / METER_SPEED_YARDS)
    return speed * (POWER_SPEED_SCALE if kind == POWER else ACCURACY_SPEED_SCALE)


class Meter:
    """
    A marker bouncing between 0 and 1. Power starts at the bottom,
    accuracy starts dead centre.
    """
    def __init__(self, kind):
        self.kind = kind
        self.value = self.initial
        self.locked_value = None
        self.direction = 1
        self.speed = 0.02
        self.active = False

    @property
    def initial(self):
        return 0.0 if self.kind == POWER else 0.5

    @property
    def locked(self):
        return self.locked_value is not None

    @property
    def display_value(self):
        return self.locked_value if self.locked else self.value

    def start(self, speed):
        self.active = True
        self.locked_value = None
        self.value = self.initial
        self.direction = 1
        self.speed = speed

    def stop(self):
        self.locked_value = self.value
        self.active = False
        return self.locked_value

    def reset(self):
        self.value = self.initial
        self.locked_value = None
        self.active = False

    def update(self):
        if not self.active: return
        self.value += self.direction * self.speed
        # bounce at the ends
        if self.value >= 1:
            self.value = 1.0; self.direction = -1
        elif self.value <= 0:
            self.value = 0.0; self.direction = 1

    def quality(self):
        if not self.locked: return "none"
        v = self.locked_value
        if self.kind == POWER:
            if v >= POWER_PERFECT: return "perfect"
            if v >= POWER_GOOD: return "good"
            return "weak"
        deviation = abs(v - 0.5)
        if deviation <= ACCURACY_PERFECT: return "perfect"
        if deviation <= ACCURACY_GOOD: return "good"
        return "bad"
