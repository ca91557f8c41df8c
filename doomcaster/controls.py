"""Translating pressed keys and mouse motion into player movement."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from .config import Config
from .player import Player

RUN_MULTIPLIER = 1.5
NEUTRAL_SENSITIVITY = 5.0


class FunctionKeyAction(Enum):
    """What a freshly pressed function key asks for."""

    TOGGLE_FLASHLIGHT = "toggle_flashlight"
    QUICK_SAVE = "quick_save"
    QUICK_LOAD = "quick_load"


def movement_speed(config: Config, run_pressed: bool) -> float:
    """Walking speed, faster while the run key is held."""
    speed = config.player.move_speed
    return speed * RUN_MULTIPLIER if run_pressed else speed


def _offset(angle: float, speed: float) -> tuple[float, float]:
    radians = math.radians(angle)
    return math.cos(radians) * speed, math.sin(radians) * speed


def movement_target(
    player: Player, pressed_actions: Collection[str], speed: float
) -> tuple[float, float]:
    """Where the player tries to go; later actions override earlier ones."""
    x, y = player.x, player.y
    target = (x, y)
    fx, fy = _offset(player.angle, speed)
    sx, sy = _offset(player.angle + 90, speed)
    if "Forward" in pressed_actions:
        target = (x + fx, y - fy)
    if "Backward" in pressed_actions:
        target = (x - fx, y + fy)
    if "Left" in pressed_actions:
        target = (x - sx, y + sy)
    if "Right" in pressed_actions:
        target = (x + sx, y - sy)
    return target


@dataclass
class Controls:
    """Edge detection for function keys and mouse look."""

    f_last_pressed: bool = False
    f5_last_pressed: bool = False
    f9_last_pressed: bool = False

    def look(
        self,
        player: Player,
        mouse_pos: tuple[int, int],
        base_sensitivity: float,
        user_sensitivity: float,
        center: tuple[int, int],
    ) -> float:
        """Turn the player by the horizontal mouse motion; return the turn."""
        if player.first_mouse_frame:
            player.last_mouse_pos = mouse_pos
            player.first_mouse_frame = False
            return 0.0
        delta_x = mouse_pos[0] - player.last_mouse_pos[0]
        turn = delta_x * base_sensitivity * (user_sensitivity / NEUTRAL_SENSITIVITY)
        player.angle += turn
        player.last_mouse_pos = center
        return turn

    def function_keys(
        self, f_key: bool, f5_key: bool, f9_key: bool
    ) -> list[FunctionKeyAction]:
        """Actions for keys pressed this frame but not the one before."""
        actions: list[FunctionKeyAction] = []
        if f_key and not self.f_last_pressed:
            actions.append(FunctionKeyAction.TOGGLE_FLASHLIGHT)
        if f5_key and not self.f5_last_pressed:
            actions.append(FunctionKeyAction.QUICK_SAVE)
        if f9_key and not self.f9_last_pressed:
            actions.append(FunctionKeyAction.QUICK_LOAD)
        self.f_last_pressed = f_key
        self.f5_last_pressed = f5_key
        self.f9_last_pressed = f9_key
        return actions