"""Enemies: spawning, shooting and where their sprites appear on screen."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .config import Config
from .player import Player
from .raycaster import Raycaster
from .world import GameMap

MAX_ENEMIES = 20
HIT_TOLERANCE = 5.0
MIN_SPRITE_SIZE = 10.0
SPRITE_VERTICAL_OFFSET = 50.0

INITIAL_GRID_POSITIONS = (
    (1, 1),
    (5, 3),
    (10, 5),
    (3, 7),
    (16, 8),
    (18, 11),
    (9, 15),
    (15, 17),
    (2, 17),
)


class SpawnError(Exception):
    """An enemy could not be placed."""


@dataclass
class Enemy:
    """One enemy in world coordinates."""

    x: float
    y: float
    alive: bool = True


@dataclass
class SpritePlacement:
    """Where and how large an enemy sprite is drawn, and how bright."""

    screen_x: float
    screen_y: float
    size: float
    brightness: float


def _wrap180(angle: float) -> float:
    while angle < -180.0:
        angle += 360.0
    while angle > 180.0:
        angle -= 360.0
    return angle


def _bearing(dx: float, dy: float) -> float:
    return math.degrees(math.atan2(-dy, dx))


def angle_difference(angle_a: float, angle_b: float) -> float:
    """Smallest absolute difference between two angles, in [0, 180]."""
    diff = abs(angle_a % 360.0 - angle_b % 360.0)
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def sprite_size(distance: float) -> float:
    """On-screen size of a sprite; shrinks more slowly past 100 units."""
    min_distance = 100.0
    adjusted = (
        distance
        if distance < min_distance
        else min_distance + (distance - min_distance) * 0.4
    )
    if adjusted <= 0:
        return math.inf
    return 800.0 / adjusted * 25.0


def sprite_brightness(distance: float) -> float:
    """Sprite tint factor: full up close, down to 0.2 far away."""
    if distance > 50.0:
        return 1.0 - min((distance - 50.0) / 300.0, 0.8)
    return 1.0


def sprite_placement(
    enemy: Enemy, player: Player, raycaster: Raycaster, config: Config
) -> SpritePlacement | None:
    """Screen placement of an enemy, or None when it cannot be seen."""
    dx, dy = enemy.x - player.x, enemy.y - player.y
    distance = math.hypot(dx, dy)
    ray_angle = _bearing(dx, dy)
    result = raycaster.cast(player, ray_angle, 0.1)
    relative = _wrap180(player.angle - ray_angle)
    if result.hit_wall and result.distance < distance:
        return None
    if distance > config.render.max_distance:
        return None
    if abs(relative) > config.render.fov / 1.5:
        return None
    size = sprite_size(distance)
    if size < MIN_SPRITE_SIZE:
        return None
    width = config.window.width
    screen_x = width / 2.0 - (relative / config.render.fov) * width
    screen_y = config.window.height // 2 + SPRITE_VERTICAL_OFFSET
    return SpritePlacement(screen_x, screen_y, size, sprite_brightness(distance))


@dataclass
class EnemyManager:
    """Holds up to MAX_ENEMIES enemies on a map."""

    config: Config
    game_map: GameMap
    enemies: list[Enemy] = field(default_factory=list)

    def spawn(self, x: float, y: float) -> Enemy:
        """Place an enemy; raise SpawnError when full or inside a wall."""
        if len(self.enemies) >= MAX_ENEMIES:
            raise SpawnError("Cannot spawn more enemies, maximum reached")
        if self.game_map.check_collision(x, y):
            raise SpawnError(f"Cannot spawn enemy at ({x:f}, {y:f}): wall present")
        enemy = Enemy(x, y)
        self.enemies.append(enemy)
        return enemy

    def _is_free_cell(self, x: int, y: int) -> bool:
        gm = self.game_map
        if not (0 <= x < gm.width and 0 <= y < gm.height):
            return False
        return gm.cells[y * gm.width + x] == 0

    def spawn_initial(self) -> list[Enemy]:
        """Spawn enemies at the centres of the preset free cells."""
        cell_w = self.config.world.width / self.config.map.grid_width
        cell_h = self.config.world.height / self.config.map.grid_height
        return [
            self.spawn((gx + 0.5) * cell_w, (gy + 0.5) * cell_h)
            for gx, gy in INITIAL_GRID_POSITIONS
            if self._is_free_cell(gx, gy)
        ]

    def alive(self) -> list[Enemy]:
        """Enemies still standing, in spawn order."""
        return [enemy for enemy in self.enemies if enemy.alive]

    def shoot(self, player: Player, angle: float) -> Enemy | None:
        """Kill the first living enemy within reach along the angle."""
        for enemy in self.alive():
            dx, dy = enemy.x - player.x, enemy.y - player.y
            if math.hypot(dx, dy) > self.config.render.max_distance:
                continue
            if angle_difference(angle, _bearing(dx, dy)) <= HIT_TOLERANCE:
                enemy.alive = False
                return enemy
        return None