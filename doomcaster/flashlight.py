"""Flashlight state and the lighting model for walls and colours."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config

Color = tuple[int, int, int, int]

_MIN_BRIGHTNESS = 40


@dataclass
class Flashlight:
    """A cone of light; when off only distance-based ambient light remains."""

    enabled: bool = False
    cone_angle: float = 45.0
    max_distance: float = 750.0
    intensity: float = 1.0
    ambient_light: float = 0.3
    ambient_range: float = 500.0

    def toggle(self) -> bool:
        """Switch the light on or off and return the new state."""
        self.enabled = not self.enabled
        return self.enabled

    def _ambient(self, distance: float) -> float:
        distance_factor = 1.0 - min(distance / self.ambient_range, 1.0) * 0.7
        return max(0.55 * distance_factor, 0.3)

    def light_intensity(self, distance: float, angle_diff: float) -> float:
        """Brightness at a distance and an angle off the view centre."""
        if not self.enabled:
            return self._ambient(distance)
        distance_factor = 1.0 - min(distance / self.max_distance, 1.0) * 0.8
        angle_factor = 1.0
        if abs(angle_diff) > 0:
            angle_factor = 1.0 - min(abs(angle_diff) / (self.cone_angle / 2.0), 1.0)
            angle_factor = angle_factor * angle_factor * 0.7 + 0.3
        return max(
            self.intensity * max(distance_factor * angle_factor, 0.4),
            self.ambient_light * 0.8,
        )


def create_flashlight(config: Config) -> Flashlight:
    """A switched-off flashlight reaching half again the render distance."""
    return Flashlight(
        max_distance=config.render.max_distance * 1.5,
        ambient_range=float(config.render.max_distance),
    )


def apply_lighting(color: tuple[int, ...], intensity: float) -> Color:
    """Scale an RGB(A) colour by a light intensity, keeping a minimum glow."""
    r, g, b = color[:3]
    alpha = color[3] if len(color) > 3 else 255
    intensity = max(0.0, min(1.0, intensity * 1.2))
    return (
        max(int(r * intensity), _MIN_BRIGHTNESS),
        max(int(g * intensity), _MIN_BRIGHTNESS),
        max(int(b * intensity), _MIN_BRIGHTNESS),
        alpha,
    )