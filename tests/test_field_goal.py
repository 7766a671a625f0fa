import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

import field_goal
from field_goal import FieldGoalGame
from kick import ACCURACY, BLOCKED, GOOD, KICKING, POWER, READY, RESULT, SHORT, WIDE_LEFT
from settings import HEIGHT, WIDTH


@pytest.fixture
def game():
    pygame.init()
    field_goal.init_fonts()
    g = FieldGoalGame(settings={"distance": 20, "wind": "none"}, rng=random.Random(5))
    yield g
    pygame.quit()


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0)


def test_space_advances_and_announces(game):
    game.handle_event(key(pygame.K_SPACE))
    assert game.session.state == POWER
    assert game.announcer.caption == "If they make, they win!"


def test_click_advances(game):
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert game.session.state == POWER


def test_number_keys_pick_distance(game):
    game.handle_event(key(pygame.K_4))
    assert game.session.distance == 50
    assert game.settings["distance"] == 50
    game.handle_event(key(pygame.K_KP1))
    assert game.session.distance == 20


def test_w_cycles_wind(game):
    game.handle_event(key(pygame.K_w))
    assert game.session.wind_mode == "light"
    game.handle_event(key(pygame.K_w))
    game.handle_event(key(pygame.K_w))
    assert game.session.wind_mode == "none"
    assert game.settings["wind"] == "none"


def test_pause_swallows_input(game):
    game.handle_event(key(pygame.K_p))
    game.handle_event(key(pygame.K_SPACE))
    assert game.session.state == READY
    game.handle_event(key(pygame.K_p))
    game.handle_event(key(pygame.K_SPACE))
    assert game.session.state == POWER


def test_escape_stops_the_loop(game):
    game.handle_event(key(pygame.K_ESCAPE))
    assert not game.running


def test_made_kick_sets_off_particles(game):
    s = game.session
    game.handle_event(key(pygame.K_SPACE))
    s.power_meter.value = 0.9
    game.handle_event(key(pygame.K_SPACE))
    s.accuracy_meter.value = 0.5
    game.handle_event(key(pygame.K_SPACE))
    assert s.state == KICKING
    for _ in range(100):
        game.update(16)
        if s.state == RESULT:
            break
    assert s.outcome == GOOD
    assert game.announcer.caption == "It's good!"
    assert game.particles.ps


def test_every_state_draws(game):
    surf = pygame.Surface((WIDTH, HEIGHT))
    s = game.session
    seen = set()
    for _ in range(4):
        game.draw(surf)
        seen.add(s.state)
        game.handle_event(key(pygame.K_SPACE))
        game.update(16)
    for _ in range(100):
        game.update(16)
        game.draw(surf)
        game.particles.draw(surf)
        seen.add(s.state)
        if s.state == RESULT:
            break
    assert {READY, POWER, ACCURACY, KICKING, RESULT} <= seen


def test_particles_do_not_draw_from_the_session_rng(game):
    assert game.particles.rng is not game.session.rng
    state = game.session.rng.getstate()
    game.particles.emit(100, 100, n=24)
    assert game.session.rng.getstate() == state


def test_result_colour_follows_outcome():
    assert field_goal.result_color(GOOD) == field_goal.COLS["made"]
    for outcome in (SHORT, WIDE_LEFT, BLOCKED):
        assert field_goal.result_color(outcome) == field_goal.COLS["missed"]
