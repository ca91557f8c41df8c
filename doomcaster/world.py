"""The grid map of walls and free cells."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .config import Config

_DEFAULT_LAYOUT = (
    "11111111111111111111",
    "10100100010100010101",
    "10100101010101010101",
    "10001101000101000001",
    "11101101110111011101",
    "10000000000000000001",
    "10111111111111111101",
    "10000000000000000101",
    "11111111111111110101",
    "10000000000000010101",
    "10111111111111010101",
    "10000000000001010001",
    "11111111111101111101",
    "10000000000100000101",
    "10111111110111110101",
    "10000000000000000101",
    "10111111111111111101",
    "10000000000000000001",
    "10111111111111111111",
    "11111111111111111111",
)

_DEFAULT_CELLS = tuple(int(ch) for row in _DEFAULT_LAYOUT for ch in row)


@dataclass
class GameMap:
    """A row-major grid where 1 marks a wall and 0 a free cell."""

    cells: list[int]
    width: int
    height: int
    config: Config = field(default_factory=Config)

    def __post_init__(self) -> None:
        self.cells = list(self.cells)
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"map of {self.width}x{self.height} needs "
                f"{self.width * self.height} cells, got {len(self.cells)}"
            )

    def is_wall_at(self, x: int, y: int) -> bool:
        """True for a wall cell or any cell outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return True
        return self.cells[y * self.width + x] == 1

    def check_collision(self, x: float, y: float) -> bool:
        """True when the world position lies inside a wall cell."""
        cell_w, cell_h = self.config.cell_size()
        return self.is_wall_at(int(x / cell_w), int(y / cell_h))

    def tile_rect(self, index: int) -> tuple[int, int, int, int]:
        """Minimap rectangle (left, top, width, height) of the cell at index."""
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} outside the map")
        rate = self.config.world.rate_map
        size_x = self.config.world.width // self.width // rate
        size_y = self.config.world.height // self.height // rate
        x, y = index % self.width, index // self.width
        return (x * size_x, y * size_y, size_x, size_y)

    def wall_indices(self) -> Iterator[int]:
        """Indices of every wall cell, in row-major order."""
        return (i for i, cell in enumerate(self.cells) if cell == 1)


def default_map(config: Config) -> GameMap:
    """Build the built-in level sized by the config's grid."""
    width, height = config.map.grid_width, config.map.grid_height
    count = width * height
    if count > len(_DEFAULT_CELLS):
        raise ValueError(
            f"default map holds {len(_DEFAULT_CELLS)} cells, {count} requested"
        )
    cells: Sequence[int] = _DEFAULT_CELLS[:count]
    return GameMap(list(cells), width, height, config)