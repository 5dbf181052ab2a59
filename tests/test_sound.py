import pygame
import pytest

from pong_arena.constants import PADDLE_HIT, WALL_HIT, GAME_OVER
from pong_client.sound import MixerSound, load_sounds


class FakeSound:
    def __init__(self, fail=False):
        self.plays = 0
        self.fail = fail

    def stop(self):
        pass

    def play(self):
        if self.fail:
            raise pygame.error("device busy")
        self.plays += 1


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def player():
    sounds = {PADDLE_HIT: FakeSound(), WALL_HIT: FakeSound(), GAME_OVER: FakeSound()}
    return MixerSound(sounds, clock=FakeClock())


def test_silent_until_unlocked(player):
    assert not player.play(WALL_HIT, 40)
    player.unlock()
    assert player.play(WALL_HIT, 40)
    assert player.sounds[WALL_HIT].plays == 1


def test_cooldown_is_shared_between_effects(player):
    player.unlock()
    assert player.play(PADDLE_HIT, 60)
    player.clock.now += 0.030
    assert not player.play(WALL_HIT, 40)
    player.clock.now += 0.015
    assert player.play(WALL_HIT, 40)


def test_mute_toggle(player):
    player.unlock()
    assert player.toggle_mute() is True
    assert not player.play(GAME_OVER, 60)
    assert player.toggle_mute() is False
    assert player.play(GAME_OVER, 60)


def test_missing_effect_is_ignored():
    p = MixerSound({}, clock=FakeClock())
    p.unlock()
    assert not p.play(PADDLE_HIT, 60)


def test_playback_errors_are_swallowed():
    p = MixerSound({WALL_HIT: FakeSound(fail=True)}, clock=FakeClock())
    p.unlock()
    assert p.play(WALL_HIT, 40)


def test_load_sounds_from_empty_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        assert load_sounds(str(tmp_path)) == {}
    finally:
        pygame.mixer.quit()
