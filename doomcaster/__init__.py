"""Building blocks for a raycasting shooter: map, player, rays, enemies, effects and saves."""

__version__ = "1.0.0"

__all__ = ["__version__"]