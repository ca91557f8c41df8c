"""Ray casting against the grid map and wall slice geometry."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from .config import Config
from .flashlight import Flashlight
from .player import Player
from .world import GameMap

EDGE_EPSILON = 0.01
WALL_SCALE = 40.0


@dataclass
class RaycastResult:
    """What a single ray found."""

    angle: float
    distance: float = 0.0
    wall_height: float = 0.0
    hit_wall: bool = False
    wall_type: int = 0
    tex_x: float = 0.0
    hit_x: float = 0.0
    hit_y: float = 0.0


def handle_edge_cases(hit_x: float, hit_y: float, epsilon: float) -> float | None:
    """Texture column for a hit lying on a cell edge, or None off the edges."""
    if hit_x < epsilon:
        return hit_y
    if hit_x > 1.0 - epsilon:
        return 1.0 - hit_y
    if hit_y < epsilon:
        return 1.0 - hit_x
    if hit_y > 1.0 - epsilon:
        return hit_x
    return None


def handle_texture_mapping(hit_x: float, hit_y: float) -> float:
    """Texture column from the nearest cell side to the hit point."""
    dist_x = min(hit_x, 1.0 - hit_x)
    dist_y = min(hit_y, 1.0 - hit_y)
    if dist_x < dist_y:
        return hit_y if hit_x < 0.5 else 1.0 - hit_y
    return 1.0 - hit_x if hit_y < 0.5 else hit_x


def calculate_texture_x(
    hit_x: float, hit_y: float, cell_width: float, cell_height: float
) -> float:
    """Horizontal texture coordinate in [0, 1] for a world-space hit."""
    pos_x = math.fmod(hit_x, cell_width) / cell_width
    pos_y = math.fmod(hit_y, cell_height) / cell_height
    edge = handle_edge_cases(pos_x, pos_y, EDGE_EPSILON)
    if edge is not None and edge >= 0.0:
        return edge
    return handle_texture_mapping(pos_x, pos_y)


def _wrap180(angle: float) -> float:
    while angle > 180.0:
        angle -= 360.0
    while angle < -180.0:
        angle += 360.0
    return angle


@dataclass
class Raycaster:
    """Casts rays from the player through a map, lit by a flashlight."""

    config: Config
    game_map: GameMap
    flashlight: Flashlight

    @property
    def ray_count(self) -> int:
        return math.ceil(self.config.render.fov * self.config.render.precision)

    def max_distance(self, player: Player, ray_angle: float) -> float:
        """How far a ray may travel; further inside a lit flashlight cone."""
        angle_diff = _wrap180(ray_angle - player.angle)
        if (
            self.flashlight.enabled
            and abs(angle_diff) <= self.flashlight.cone_angle / 2.0
        ):
            return self.flashlight.max_distance
        return float(self.config.render.max_distance)

    def cast(self, player: Player, ray_angle: float, step: float) -> RaycastResult:
        """March a ray until it hits a wall or runs out of range."""
        result = RaycastResult(angle=ray_angle)
        cell_w, cell_h = self.config.cell_size()
        limit = self.max_distance(player, ray_angle)
        radians = math.radians(ray_angle)
        step_x = math.cos(radians) * step
        step_y = -math.sin(radians) * step
        ray_x, ray_y = player.x, player.y
        while result.distance < limit:
            ray_x += step_x
            ray_y += step_y
            result.distance += step
            if self.game_map.is_wall_at(int(ray_x / cell_w), int(ray_y / cell_h)):
                result.hit_wall = True
                result.wall_type = 1
                result.hit_x = ray_x
                result.hit_y = ray_y
                result.tex_x = calculate_texture_x(ray_x, ray_y, cell_w, cell_h)
                break
        self._set_wall_height(result, player, ray_angle)
        return result

    def _set_wall_height(
        self, result: RaycastResult, player: Player, ray_angle: float
    ) -> None:
        height = self.config.window.height
        result.distance *= math.cos(math.radians(ray_angle - player.angle))
        if result.distance > 0:
            result.wall_height = min(height / (result.distance / WALL_SCALE), height)
        else:
            result.wall_height = float(height)

    def view(self, player: Player) -> Iterator[tuple[int, float, RaycastResult]]:
        """Cast every ray across the field of view, left to right."""
        render = self.config.render
        start = player.angle - render.fov / 2
        for index in range(self.ray_count):
            ray_angle = start + index / render.precision
            yield index, ray_angle, self.cast(player, ray_angle, 1.0)

    def slice_rect(
        self, ray_index: int, result: RaycastResult
    ) -> tuple[float, float, float, float]:
        """Screen rectangle (left, top, width, height) of one wall slice."""
        render = self.config.render
        slice_width = self.config.window.width / (render.fov * render.precision)
        top = (self.config.window.height - result.wall_height) / 2
        return (ray_index * slice_width, top, slice_width, result.wall_height)

    def light_intensity(
        self, player: Player, ray_index: int, result: RaycastResult
    ) -> float:
        """Brightness of the wall slice drawn for a ray."""
        render = self.config.render
        ray_angle = player.angle - render.fov / 2 + ray_index / render.precision
        return self.flashlight.light_intensity(
            result.distance, ray_angle - player.angle
        )