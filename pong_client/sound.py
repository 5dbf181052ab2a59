# pong_client/sound.py
import logging
import os
import time
from typing import Any, Callable, Dict, Optional

import pygame

from pong_arena.constants import PADDLE_HIT, WALL_HIT, GAME_OVER
from pong_arena.hooks import SoundPlayer

logger = logging.getLogger(__name__)

SOUND_FILES = {
    PADDLE_HIT: "hit_paddle",
    WALL_HIT: "hit_wall",
    GAME_OVER: "game_over",
}
EXTENSIONS = (".ogg", ".wav", ".mp3")


def load_sounds(directory: str) -> Dict[str, Any]:
    """Load whichever effect files exist; audio problems just mean silence."""
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
    except pygame.error as e:
        logger.debug("Mixer unavailable: %s", e)
        return {}

    sounds: Dict[str, Any] = {}
    for effect, stem in SOUND_FILES.items():
        for ext in EXTENSIONS:
            path = os.path.join(directory, stem + ext)
            if not os.path.exists(path):
                continue
            try:
                sounds[effect] = pygame.mixer.Sound(path)
                break
            except pygame.error as e:
                logger.debug("Could not load %s: %s", path, e)
    return sounds


class MixerSound(SoundPlayer):
    """
    Effect player with a one-way unlock gate and a mute toggle.

    Browsers refuse audio until the user interacts; we keep the same rule:
    nothing plays until unlock() is called from the first click/touch.
    One timestamp is shared by all effects, so a wall hit right after a
    paddle hit stays silent for the cooldown.
    """

    def __init__(self, sounds: Dict[str, Any], clock: Optional[Callable[[], float]] = None):
        self.sounds = sounds
        self.clock = clock or time.monotonic
        self.unlocked = False
        self.muted = False
        self._last_at: Optional[float] = None

    def unlock(self):
        if not self.unlocked:
            self.unlocked = True
            logger.debug("Audio unlocked")

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def play(self, effect, cooldown_ms) -> bool:
        if self.muted or not self.unlocked:
            return False
        snd = self.sounds.get(effect)
        if snd is None:
            return False

        now = self.clock() * 1000.0
        if self._last_at is not None and now - self._last_at < cooldown_ms:
            return False
        self._last_at = now

        try:
            snd.stop()
            snd.play()
        except pygame.error as e:
            logger.debug("Playback of %s failed: %s", effect, e)
        return True
