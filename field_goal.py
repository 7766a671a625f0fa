# field_goal.py
# Field Goal - single-screen kicking game, pygame front end.
# Space or click: start / set power / set accuracy / continue.
# 1-5: kick distance 20-60 yds.  W: cycle wind.  P: pause.  Esc: quit.
# Install pygame first: pip install pygame

import logging
import math
import random
import sys

import pygame

from announcer import Announcer
from kick import ACCURACY, CUE_GOOD, GOOD, KICKING, POWER, READY, RESULT, KickSession, upright_bounds
from settings import (
    ACCURACY_GOOD, ACCURACY_PERFECT, CENTER_X, CROSSBAR_Y, FPS, HEIGHT,
    POWER_GOOD, POWER_PERFECT, SETTINGS_FILE, SNAP_TIME_LIMIT, WIDTH, WIND_MODES,
    load_settings, save_settings,
)
from trajectory import distance_scale, kicker_y, line_of_scrimmage_y

logger = logging.getLogger(__name__)

DEFAULT_KEYS = {
    "advance": pygame.K_SPACE,
    "wind": pygame.K_w,
    "pause": pygame.K_p,
    "escape": pygame.K_ESCAPE,
}
DISTANCE_KEYS = {
    pygame.K_1: 20, pygame.K_KP1: 20,
    pygame.K_2: 30, pygame.K_KP2: 30,
    pygame.K_3: 40, pygame.K_KP3: 40,
    pygame.K_4: 50, pygame.K_KP4: 50,
    pygame.K_5: 60, pygame.K_KP5: 60,
}
WIND_ORDER = list(WIND_MODES)

COLS = {
    "sky": (18, 28, 60), "field": (34, 110, 52), "stripe": (44, 126, 62),
    "white": (235, 235, 235), "muted": (150, 150, 160), "accent": (245, 188, 66),
    "post": (250, 215, 60), "panel": (42, 42, 74), "red": (139, 0, 0),
    "yellow": (218, 165, 32), "green": (34, 139, 34), "ball": (139, 69, 19),
    "defense": (200, 60, 60), "offense": (60, 90, 200),
    "made": (74, 222, 128), "missed": (239, 68, 68),
}
INSTRUCTIONS = {
    READY: "Press SPACE or click to start",
    POWER: "Press SPACE or click to set POWER",
    ACCURACY: "Press SPACE or click to set ACCURACY",
}

def result_color(outcome):
    return COLS["made"] if outcome == GOOD else COLS["missed"]

FONT = BIG = XL = None

def init_fonts():
    global FONT, BIG, XL
    FONT = pygame.font.SysFont("consolas", 18)
    BIG = pygame.font.SysFont("consolas", 30)
    XL = pygame.font.SysFont("consolas", 48)

def draw_text(surf, txt, x, y, font=None, color=None, center=False):
    font = font or FONT
    color = color or COLS["white"]
    r = font.render(txt, True, color)
    rect = r.get_rect()
    if center:
        rect.center = (x,y)
    else:
        rect.topleft = (x,y)
    surf.blit(r, rect)
    return rect

# particle burst for made kicks
class Particle:
    def __init__(self,x,y,vx,vy,life,size,color):
        self.x=x; self.y=y; self.vx=vx; self.vy=vy; self.life=life; self.max=life
        self.size=size; self.color=color
    def update(self,dt):
        self.x += self.vx*dt
        self.y += self.vy*dt
        self.life -= dt
    def draw(self,surf):
        if self.life<=0: return
        a = max(0, self.life/self.max)
        col = (int(self.color[0]*a), int(self.color[1]*a), int(self.color[2]*a))
        pygame.draw.circle(surf, col, (int(self.x),int(self.y)), max(1,int(self.size*a)))

class Particles:
    def __init__(self, rng=None):
        self.ps=[]
        self.rng = rng or random.Random()
    def emit(self,x,y,n=12,color=(245,188,66)):
        for _ in range(n):
            ang = self.rng.random()*2*math.pi
            sp = self.rng.uniform(40,300)
            self.ps.append(Particle(x,y,math.cos(ang)*sp,math.sin(ang)*sp,
                                    self.rng.uniform(0.3,0.9),self.rng.uniform(1.8,4.5),color))
    def update(self,dt):
        for p in self.ps: p.update(dt)
        self.ps = [p for p in self.ps if p.life>0]
    def draw(self,surf):
        for p in self.ps: p.draw(surf)


class FieldGoalGame:
    """
    Field Goal - wires keyboard/mouse into a KickSession and draws it.
    """
    name = "Field Goal"
    def __init__(self, settings=None, keys=None, rng=None):
        settings = settings or load_settings()
        self.settings = settings
        self.keys = keys or DEFAULT_KEYS
        self.session = KickSession(settings["distance"], settings["wind"], rng=rng)
        self.announcer = Announcer()
        self.particles = Particles()
        self.paused = False
        self.running = True

    # ---------- input ----------
    def handle_event(self, ev):
        k = self.keys
        s = self.session
        if ev.type==pygame.MOUSEBUTTONDOWN and ev.button==1 and not self.paused:
            self.dispatch(s.advance())
        if ev.type!=pygame.KEYDOWN: return
        if ev.key==k["escape"]:
            self.running = False; return
        if ev.key==k["pause"]:
            self.paused = not self.paused
        if self.paused: return
        if ev.key==k["advance"]:
            self.dispatch(s.advance())
        elif ev.key==k["wind"]:
            nxt = WIND_ORDER[(WIND_ORDER.index(s.wind_mode) + 1) % len(WIND_ORDER)]
            if s.set_wind(nxt): self.settings["wind"] = nxt
        elif ev.key in DISTANCE_KEYS:
            if s.set_distance(DISTANCE_KEYS[ev.key]): self.settings["distance"] = s.distance

    def dispatch(self, cues):
        for cue in cues:
            self.announcer.say(cue)
            if cue == CUE_GOOD:
                self.particles.emit(self.session.ball.x, self.session.ball.y, n=24, color=COLS["post"])

    def update(self, dt):
        self.dispatch(self.session.update(dt))
        self.announcer.update(dt)

    # ---------- drawing ----------
    def draw(self, surf):
        s = self.session
        horizon = HEIGHT * 0.4
        surf.fill(COLS["sky"])
        pygame.draw.rect(surf, COLS["field"], (0, horizon, WIDTH, HEIGHT - horizon))
        for i in range(6):
            y = horizon + (HEIGHT - horizon) * (i / 6) ** 1.6
            pygame.draw.line(surf, COLS["stripe"], (0, int(y)), (WIDTH, int(y)), 2)
        self.draw_posts(surf)

        los = line_of_scrimmage_y(s.distance)
        sc = distance_scale(s.distance)
        pygame.draw.line(surf, COLS["muted"], (0, int(los)), (WIDTH, int(los)), 1)
        self.draw_lines(surf, los, sc)
        if s.state not in (KICKING, RESULT):
            pygame.draw.circle(surf, COLS["white"], (int(CENTER_X), int(kicker_y(s.distance) - 30*sc)), int(12*sc))
        if s.blocked and s.state == RESULT:
            draw_text(surf, "BLOCKED", CENTER_X, los - 50*sc, BIG, COLS["defense"], center=True)

        self.draw_ball(surf)
        if s.state in (READY, POWER, ACCURACY, KICKING):
            self.draw_power_meter(surf)
        if s.state in (ACCURACY, KICKING):
            self.draw_accuracy_meter(surf)
        if s.state == ACCURACY:
            self.draw_snap_timer(surf)
        self.draw_hud(surf)

        if s.state in INSTRUCTIONS:
            draw_text(surf, INSTRUCTIONS[s.state], WIDTH//2, HEIGHT-100, FONT, COLS["white"], center=True)
        if s.message:
            draw_text(surf, s.message, WIDTH//2, HEIGHT//2 - 40, XL, result_color(s.outcome), center=True)
            draw_text(surf, "Press SPACE or click to continue", WIDTH//2, HEIGHT//2 + 10, FONT, COLS["muted"], center=True)
        if self.announcer.caption:
            draw_text(surf, self.announcer.caption, WIDTH//2, HEIGHT-30, FONT, COLS["accent"], center=True)
        if self.paused:
            draw_text(surf, "PAUSED - press P", WIDTH//2, HEIGHT//2 + 60, BIG, COLS["accent"], center=True)

    def draw_posts(self, surf):
        left, right = upright_bounds()
        bar = int(CROSSBAR_Y)
        pygame.draw.line(surf, COLS["post"], (int(CENTER_X), bar), (int(CENTER_X), int(HEIGHT*0.4)), 5)
        pygame.draw.line(surf, COLS["post"], (int(left), bar), (int(right), bar), 5)
        pygame.draw.line(surf, COLS["post"], (int(left), bar), (int(left), bar - 110), 4)
        pygame.draw.line(surf, COLS["post"], (int(right), bar), (int(right), bar - 110), 4)

    def draw_lines(self, surf, los, sc):
        rush = self.session.rush_progress if (self.session.state == ACCURACY or self.session.blocked) else 0
        w = int(18*sc); h = int(26*sc)
        for i in range(-3, 4):
            x = CENTER_X + i * 34 * sc
            pygame.draw.rect(surf, COLS["offense"], (int(x - w/2), int(los + 4), w, h), border_radius=4)
            # defenders close in on the ball as the snap clock runs down
            dx = x + (CENTER_X - x) * rush * 0.5
            pygame.draw.rect(surf, COLS["defense"], (int(dx - w/2), int(los - h - 4 + rush*h*0.8), w, h), border_radius=4)

    def draw_ball(self, surf):
        b = self.session.ball
        rx, ry = max(3, int(14*b.scale)), max(2, int(9*b.scale))
        ball = pygame.Surface((rx*2, ry*2), pygame.SRCALPHA)
        pygame.draw.ellipse(ball, COLS["ball"], ball.get_rect())
        pygame.draw.line(ball, COLS["white"], (rx//2, ry), (rx*3//2, ry), 1)
        ball = pygame.transform.rotate(ball, -math.degrees(b.rotation))
        surf.blit(ball, ball.get_rect(center=(int(b.x), int(b.y))))

    def draw_power_meter(self, surf):
        m = self.session.power_meter
        x, y, w, h = 30, 200, 30, 200
        pygame.draw.rect(surf, COLS["panel"], (x, y, w, h), border_radius=5)
        pad = 3; ih = h - pad*2
        # top of the bar is full power
        pygame.draw.rect(surf, COLS["red"], (x+pad, y+pad+ih*(1-POWER_GOOD), w-pad*2, ih*POWER_GOOD))
        pygame.draw.rect(surf, COLS["yellow"], (x+pad, y+pad+ih*(1-POWER_PERFECT), w-pad*2, ih*(POWER_PERFECT-POWER_GOOD)))
        pygame.draw.rect(surf, COLS["green"], (x+pad, y+pad, w-pad*2, ih*(1-POWER_PERFECT)))
        my = y + h - m.display_value*h
        col = COLS["white"] if m.locked else COLS["post"]
        pygame.draw.line(surf, col, (x, int(my)), (x+w, int(my)), 3)
        pygame.draw.polygon(surf, col, [(x-5, my), (x-15, my-8), (x-15, my+8)])
        draw_text(surf, "POWER", x + w//2, y + h + 16, FONT, COLS["white"], center=True)

    def draw_accuracy_meter(self, surf):
        m = self.session.accuracy_meter
        x, y, w, h = 250, 520, 300, 30
        pygame.draw.rect(surf, COLS["panel"], (x, y, w, h), border_radius=5)
        pad = 3; iw = w - pad*2
        bad = 0.5 - ACCURACY_GOOD; ok = ACCURACY_GOOD - ACCURACY_PERFECT
        zones = [(0, bad, "red"), (bad, ok, "yellow"), (0.5-ACCURACY_PERFECT, ACCURACY_PERFECT*2, "green"),
                 (0.5+ACCURACY_PERFECT, ok, "yellow"), (0.5+ACCURACY_GOOD, bad, "red")]
        for start, span, col in zones:
            pygame.draw.rect(surf, COLS[col], (x+pad+iw*start, y+pad, iw*span, h-pad*2))
        mx = x + m.display_value*w
        col = COLS["white"] if m.locked else COLS["post"]
        pygame.draw.line(surf, col, (int(mx), y), (int(mx), y+h), 3)
        pygame.draw.polygon(surf, col, [(mx, y-5), (mx-8, y-15), (mx+8, y-15)])
        draw_text(surf, "ACCURACY", x + w//2, y - 28, FONT, COLS["white"], center=True)

    def draw_snap_timer(self, surf):
        x, y, r = WIDTH - 80, 80, 30
        progress = max(0.0, self.session.snap_timer / SNAP_TIME_LIMIT)
        col = (74,222,128) if progress > 0.5 else (251,191,36) if progress > 0.25 else (239,68,68)
        pygame.draw.circle(surf, (20,20,30), (x, y), r + 5)
        pygame.draw.circle(surf, (51,51,51), (x, y), r, 8)
        rect = pygame.Rect(x-r, y-r, r*2, r*2)
        if progress > 0:
            pygame.draw.arc(surf, col, rect, math.pi/2, math.pi/2 + 2*math.pi*progress, 8)
        draw_text(surf, f"{self.session.snap_timer/1000:.1f}", x, y, FONT, COLS["white"], center=True)

    def draw_hud(self, surf):
        s = self.session
        wind = "No Wind" if s.wind_direction == 0 else f"{round(s.wind_speed)} mph {'->' if s.wind_direction > 0 else '<-'}"
        draw_text(surf, f"{s.distance} YDS", 20, 16, BIG, COLS["accent"])
        draw_text(surf, f"Score:{s.score}  Streak:{s.streak}  Made:{s.makes}/{s.attempts}", WIDTH//2, 32, FONT, COLS["white"], center=True)
        draw_text(surf, f"Wind: {wind}", WIDTH - 200, 16, FONT, COLS["white"])
        draw_text(surf, "1-5 distance  W wind  P pause  Esc quit", WIDTH//2, 58, FONT, COLS["muted"], center=True)

    def run(self, screen, clock):
        # blocking loop until Esc or window close
        while self.running:
            dt_ms = clock.tick(FPS)
            for ev in pygame.event.get():
                if ev.type==pygame.QUIT:
                    self.running = False
                    break
                self.handle_event(ev)
            if not self.paused:
                self.update(dt_ms)
            self.draw(screen)
            self.particles.update(dt_ms / 1000.0)
            self.particles.draw(screen)
            pygame.display.flip()
        save_settings(self.settings, SETTINGS_FILE)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Field Goal")
    init_fonts()
    game = FieldGoalGame()
    logger.info(f"Starting at {game.session.distance} yds, wind {game.session.wind_mode}")
    game.run(screen, pygame.time.Clock())
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
