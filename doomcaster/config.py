"""Static tuning values for the window, world, map, player and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class WindowConfig:
    """Size of the render window in pixels."""

    width: int = 1600
    height: int = 900
    bits_per_pixel: int = 32


@dataclass
class WorldConfig:
    """Size of the world in world units and the minimap shrink ratio."""

    width: int = 900
    height: int = 900
    scale_factor: int = 1
    rate_map: int = 5


@dataclass
class MapConfig:
    """Number of cells in the map grid."""

    grid_width: int = 20
    grid_height: int = 20


@dataclass
class PlayerConfig:
    """Movement parameters for the player."""

    move_speed: float = 5.0
    rotate_speed: float = 10.0
    radius: float = 1.0
    jump_force: float = 15.0
    gravity: float = 1.0


@dataclass
class RenderConfig:
    """Ray casting parameters."""

    fov: float = 90.0
    precision: int = 10
    max_distance: int = 500
    fps: int = 30


@dataclass
class Config:
    """All configuration sections together."""

    window: WindowConfig = field(default_factory=WindowConfig)
    world: WorldConfig = field(default_factory=WorldConfig)
    map: MapConfig = field(default_factory=MapConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def cell_size(self) -> tuple[int, int]:
        """Width and height of one map cell in world units."""
        return (
            self.world.width // self.map.grid_width,
            self.world.height // self.map.grid_height,
        )