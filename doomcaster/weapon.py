"""The player's gun: fire cooldown, recoil animation and idle bobbing."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

from .config import Config

FRAME_SIZE = 256
SPRITE_SCALE = 1.2
BOB_STEP = 0.1
BOB_AMPLITUDE = 5.0


@dataclass
class WeaponAnimation:
    """Frame counter of the firing animation and its timers."""

    current_frame: int = 0
    total_frames: int = 5
    frame_time: float = 0.05
    cooldown_time: float = 0.5
    is_animating: bool = False
    frame_started: float = field(default_factory=time.monotonic)
    cooldown_started: float = field(default_factory=time.monotonic)


@dataclass
class Weapon:
    """A gun drawn from a horizontal sprite sheet of square frames."""

    animation: WeaponAnimation = field(default_factory=WeaponAnimation)
    bob_offset: float = 0.0
    is_firing: bool = False
    frame_width: int = FRAME_SIZE
    frame_height: int = FRAME_SIZE

    def can_fire(self, now: float) -> bool:
        """True once the cooldown since the last shot has run out."""
        anim = self.animation
        return now - anim.cooldown_started >= anim.cooldown_time

    def update(self, fire_pressed: bool, now: float) -> bool:
        """Advance one frame; return True when a shot is fired this frame."""
        anim = self.animation
        self.bob_offset += BOB_STEP
        if fire_pressed and not anim.is_animating and self.can_fire(now):
            self.is_firing = True
            anim.is_animating = True
            anim.current_frame = 0
            anim.frame_started = now
            anim.cooldown_started = now
        else:
            self.is_firing = False
        self._advance_animation(now)
        return self.is_firing

    def _advance_animation(self, now: float) -> None:
        anim = self.animation
        if not anim.is_animating:
            return
        if now - anim.frame_started >= anim.frame_time:
            anim.current_frame += 1
            anim.frame_started = now
            if anim.current_frame >= anim.total_frames:
                anim.current_frame = 0
                anim.is_animating = False

    def frame_rect(self) -> tuple[int, int, int, int]:
        """Sprite sheet rectangle (left, top, width, height) of the frame."""
        left = self.animation.current_frame * self.frame_width
        return (left, 0, self.frame_width, self.frame_height)

    def sprite_position(self, config: Config) -> tuple[float, float]:
        """Screen position of the gun, bobbing gently up and down."""
        bob = math.sin(self.bob_offset) * BOB_AMPLITUDE
        return (
            float(config.window.width // 2 + 150),
            config.window.height - 350 + bob,
        )