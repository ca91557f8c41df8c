"""Sound effects with cooldowns, master volume and an on/off switch."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pygame

SHOT_PATH = "assets/sound/shot_uzi.mp3"
FOOTSTEP_PATH = "assets/sound/footstep.mp3"
SHOT_VOLUME = 20.0
SHOT_COOLDOWN = 0.1
FOOTSTEP_VOLUME = 90.0
FOOTSTEP_COOLDOWN = 0.4


@dataclass
class SoundEffect:
    """A sound that may only be replayed once its cooldown has passed."""

    sound: Any | None
    volume: float
    cooldown: float
    is_playing: bool = False
    last_played: float = field(default_factory=time.monotonic)

    def can_play(self, now: float) -> bool:
        """True when loaded and the cooldown since the last play is over."""
        if self.sound is None:
            return False
        return now - self.last_played >= self.cooldown

    def play(self, now: float) -> bool:
        """Play if allowed and report whether it started."""
        if not self.can_play(now):
            return False
        self.sound.play()
        self.last_played = now
        self.is_playing = True
        return True

    def _set_level(self, level: float) -> None:
        if self.sound is not None:
            self.sound.set_volume(min(max(level / 100.0, 0.0), 1.0))

    def _busy(self) -> bool:
        return self.sound is not None and self.sound.get_num_channels() > 0


@dataclass
class SoundManager:
    """The game's shot and footstep sounds."""

    shot: SoundEffect
    footstep: SoundEffect
    sound_enabled: bool = True
    master_volume: float = 100.0
    clock: Callable[[], float] = time.monotonic

    @property
    def _effects(self) -> tuple[SoundEffect, SoundEffect]:
        return (self.shot, self.footstep)

    def play_shot(self) -> bool:
        """Play the gunshot when sound is on and its cooldown allows."""
        return self.sound_enabled and self.shot.play(self.clock())

    def play_footstep(self) -> bool:
        """Play a footstep when sound is on and its cooldown allows."""
        return self.sound_enabled and self.footstep.play(self.clock())

    def set_master_volume(self, volume: float) -> None:
        """Set the master volume in percent and apply it to every effect."""
        self.master_volume = volume
        for effect in self._effects:
            effect._set_level(effect.volume * (volume / 100.0))

    def update(self, volume_setting: float) -> None:
        """Apply the settings volume (5 is neutral) and track finished sounds."""
        multiplier = volume_setting / 5.0
        for effect in self._effects:
            effect._set_level(effect.volume * multiplier)
        for effect in self._effects:
            if effect.is_playing and not effect._busy():
                effect.is_playing = False

    def toggle(self) -> bool:
        """Mute or unmute and return whether sound is now on."""
        self.sound_enabled = not self.sound_enabled
        return self.sound_enabled


def _load(path: str) -> Any | None:
    if os.path.isfile(path):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            return pygame.mixer.Sound(path)
        except (pygame.error, OSError):
            pass
    sys.stderr.write(f"Failed to load sound: {path}\n")
    return None


def _effect(path: str, volume: float, cooldown: float) -> SoundEffect:
    effect = SoundEffect(_load(path), volume, cooldown)
    effect._set_level(volume)
    return effect


def load_sound_manager(
    shot_path: str = SHOT_PATH, footstep_path: str = FOOTSTEP_PATH
) -> SoundManager:
    """Load both effects; a sound that fails to load stays silent."""
    return SoundManager(
        shot=_effect(shot_path, SHOT_VOLUME, SHOT_COOLDOWN),
        footstep=_effect(footstep_path, FOOTSTEP_VOLUME, FOOTSTEP_COOLDOWN),
    )