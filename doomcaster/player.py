"""The player's position, view angle and input edge state."""

from __future__ import annotations

from dataclasses import dataclass

from .world import GameMap


@dataclass
class Player:
    """Where the player stands and looks, plus per-frame input memory."""

    x: float = 150.0
    y: float = 150.0
    angle: float = 0.0
    height: float = 0.0
    is_jumping: bool = False
    jump_velocity: float = 0.0
    last_mouse_pos: tuple[int, int] = (0, 0)
    first_mouse_frame: bool = True
    f_key_last_pressed: bool = False
    f5_key_last_pressed: bool = False
    f9_key_last_pressed: bool = False

    def move(self, dx: float, dy: float, game_map: GameMap) -> bool:
        """Step by (dx, dy) unless the target is a wall; report whether it moved."""
        new_x, new_y = self.x + dx, self.y + dy
        if game_map.check_collision(new_x, new_y):
            return False
        self.x, self.y = new_x, new_y
        return True

    def minimap_position(self, rate_map: float) -> tuple[float, float]:
        """Position scaled down to minimap pixels."""
        return (self.x / rate_map, self.y / rate_map)