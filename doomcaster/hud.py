"""Heads-up display: crosshair, status bar and stat labels."""

from __future__ import annotations

import sys

import pygame

from .config import Config
from .flashlight import Flashlight

FONT_PATH = "assets/fonts/videotype.ttf"
FONT_SIZE = 18
BAR_HEIGHT = 50

_RED = (255, 0, 0, 255)
_BAR_COLOR = (65, 65, 75, 255)
_BORDER_COLOR = (160, 160, 160, 255)
_HEALTH_COLOR = (220, 50, 50, 255)
_AMMO_COLOR = (240, 220, 50, 255)
_LIGHT_ON_COLOR = (80, 220, 80, 255)
_LIGHT_OFF_COLOR = (220, 220, 220, 255)


def load_hud_font(path: str | None = FONT_PATH) -> pygame.font.Font | None:
    """Load the HUD font, or report the failure and return None."""
    pygame.font.init()
    try:
        return pygame.font.Font(path, FONT_SIZE)
    except (OSError, pygame.error):
        sys.stderr.write("Error: Could not load font\n")
        return None


def flashlight_label(flashlight: Flashlight) -> tuple[str, tuple[int, int, int, int]]:
    """Text and colour of the flashlight status label."""
    if flashlight.enabled:
        return "FLASHLIGHT: ON", _LIGHT_ON_COLOR
    return "FLASHLIGHT: OFF", _LIGHT_OFF_COLOR


def draw_crosshair(surface: pygame.Surface, config: Config) -> list[pygame.Rect]:
    """Draw a red cross at the window centre."""
    cx, cy = config.window.width // 2, config.window.height // 2
    shapes = [
        pygame.Rect(cx - 10, cy - 1, 20, 2),
        pygame.Rect(cx - 1, cy - 10, 2, 20),
    ]
    for rect in shapes:
        pygame.draw.rect(surface, _RED, rect)
    return shapes


def draw_hud_bar(surface: pygame.Surface, config: Config) -> list[pygame.Rect]:
    """Draw the status bar along the bottom with a thin border above it."""
    width, height = config.window.width, config.window.height
    bar = pygame.Rect(0, height - BAR_HEIGHT, width, BAR_HEIGHT)
    border = pygame.Rect(0, height - BAR_HEIGHT - 2, width, 2)
    pygame.draw.rect(surface, _BAR_COLOR, bar)
    pygame.draw.rect(surface, _BORDER_COLOR, border)
    return [bar, border]


def draw_stats(
    surface: pygame.Surface,
    font: pygame.font.Font | None,
    config: Config,
    flashlight: Flashlight,
) -> list[pygame.Rect]:
    """Draw health, ammo and flashlight labels; nothing without a font."""
    if font is None:
        return []
    width, height = config.window.width, config.window.height
    light_text, light_color = flashlight_label(flashlight)
    labels = [
        ("HEALTH: 100%", _HEALTH_COLOR, (25, height - 38)),
        ("AMMO: 30", _AMMO_COLOR, (width - 130, height - 38)),
        (light_text, light_color, (width // 2 - 85, height - 38)),
    ]
    return [
        surface.blit(font.render(text, True, color), position)
        for text, color, position in labels
    ]


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font | None,
    config: Config,
    flashlight: Flashlight,
) -> None:
    """Draw the whole HUD: crosshair, bar, then the labels on top."""
    draw_crosshair(surface, config)
    draw_hud_bar(surface, config)
    draw_stats(surface, font, config, flashlight)