# announcer.py
# Stadium announcer: turns session cues into one short line at a time.

import logging

from kick import CUE_BLOCKED, CUE_GOOD, CUE_KICK, CUE_NO_GOOD
from settings import CAPTION_DISPLAY

logger = logging.getLogger(__name__)

LINES = {
    CUE_KICK: "If they make, they win!",
    CUE_GOOD: "It's good!",
    CUE_NO_GOOD: "No good.",
    CUE_BLOCKED: "Blocked!",
}


class Announcer:
    def __init__(self, display_ms=CAPTION_DISPLAY):
        self.display_ms = display_ms
        self.caption = ""
        self.remaining = 0

    def say(self, cue):
        line = LINES.get(cue)
        if line is None:
            logger.debug(f"No line for cue {cue!r}")
            return
        # a new call cuts off whatever was still being said
        if self.caption:
            logger.debug(f"Cancelled: {self.caption}")
        self.caption = line
        self.remaining = self.display_ms
        logger.info(f"Announcer: {line}")

    def update(self, dt):
        if self.remaining <= 0: return
        self.remaining -= dt
        if self.remaining <= 0:
            self.caption = ""
