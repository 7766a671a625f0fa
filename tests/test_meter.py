import random

import pytest

from meter import ACCURACY, POWER, Meter, meter_speed


def test_start_sets_initial_value_per_kind():
    power, accuracy = Meter(POWER), Meter(ACCURACY)
    power.start(0.05); accuracy.start(0.05)
    assert power.value == 0.0 and accuracy.value == 0.5
    assert power.active and accuracy.active
    assert power.direction == 1 and accuracy.direction == 1


def test_update_bounces_off_the_top():
    m = Meter(POWER)
    m.start(0.3)
    for _ in range(4):
        m.update()
    assert m.value == 1.0
    assert m.direction == -1
    m.update()
    assert m.value == pytest.approx(0.7)


def test_update_bounces_off_the_bottom():
    m = Meter(ACCURACY)
    m.start(0.4)
    m.direction = -1
    m.update()
    m.update()
    assert m.value == 0.0
    assert m.direction == 1


@pytest.mark.parametrize("speed", [0.01, 0.0135, 0.0225, 0.045, 0.3, 0.77])
def test_value_never_leaves_unit_range(speed):
    for kind in (POWER, ACCURACY):
        m = Meter(kind)
        m.start(speed)
        for _ in range(500):
            m.update()
            assert 0.0 <= m.value <= 1.0


def test_inactive_meter_does_not_move():
    m = Meter(POWER)
    m.update()
    assert m.value == 0.0
    m.start(0.1); m.update(); m.stop()
    frozen = m.value
    m.update()
    assert m.value == frozen


def test_stop_locks_and_returns_value():
    m = Meter(POWER)
    m.start(0.1)
    m.update(); m.update()
    locked = m.stop()
    assert locked == m.locked_value == m.value
    assert not m.active
    assert m.display_value == locked


def test_stop_then_reset_restores_initial_value():
    rng = random.Random(7)
    for kind, initial in ((POWER, 0.0), (ACCURACY, 0.5)):
        m = Meter(kind)
        m.start(rng.uniform(0.01, 0.1))
        for _ in range(rng.randint(1, 60)):
            m.update()
        m.stop()
        m.reset()
        assert m.locked_value is None
        assert m.value == initial
        assert not m.active


def test_start_clears_previous_lock():
    m = Meter(ACCURACY)
    m.start(0.05); m.update(); m.stop()
    m.start(0.05)
    assert m.locked_value is None
    assert m.value == 0.5


@pytest.mark.parametrize("locked, quality", [
    (None, "none"), (0.95, "perfect"), (0.7, "perfect"), (0.5, "good"), (0.3, "good"), (0.1, "weak"),
])
def test_power_quality(locked, quality):
    m = Meter(POWER)
    m.locked_value = locked
    assert m.quality() == quality


@pytest.mark.parametrize("locked, quality", [
    (0.5, "perfect"), (0.6, "perfect"), (0.3, "good"), (0.8, "good"), (0.05, "bad"), (1.0, "bad"),
])
def test_accuracy_quality(locked, quality):
    m = Meter(ACCURACY)
    m.locked_value = locked
    assert m.quality() == quality


def test_meter_speed_grows_with_distance():
    assert meter_speed(POWER, 20) == pytest.approx(0.025 * 0.9)
    assert meter_speed(ACCURACY, 20) == pytest.approx(0.025 * 0.54)
    assert meter_speed(POWER, 60) == pytest.approx(0.025 * 1.8 * 0.9)
    assert meter_speed(POWER, 40) > meter_speed(POWER, 30)
