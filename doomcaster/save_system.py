"""Binary save files holding the player's position and a few settings."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from pathlib import Path

from .flashlight import Flashlight
from .player import Player
from .sound import SoundManager

SAVE_DIR = "saves"
QUICK_SAVE_FILE = "saves/quicksave.sav"
NAME_SIZE = 64
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_RECORD = struct.Struct(f"<fffii?3xf{NAME_SIZE}s{NAME_SIZE}s")
SAVE_SIZE = _RECORD.size


class SaveError(Exception):
    """A save file could not be written or read."""


@dataclass
class SaveData:
    """Everything stored in one save slot."""

    player_x: float = 0.0
    player_y: float = 0.0
    player_angle: float = 0.0
    player_health: int = 100
    player_ammo: int = 30
    flashlight_enabled: bool = False
    master_volume: float = 100.0
    save_name: str = ""
    timestamp: str = ""


def _fixed(text: str) -> bytes:
    return text.encode("utf-8")[: NAME_SIZE - 1]


def _unfixed(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


def encode_save(data: SaveData) -> bytes:
    """Pack a save into its fixed-size binary record."""
    return _RECORD.pack(
        data.player_x,
        data.player_y,
        data.player_angle,
        data.player_health,
        data.player_ammo,
        data.flashlight_enabled,
        data.master_volume,
        _fixed(data.save_name),
        _fixed(data.timestamp),
    )


def decode_save(raw: bytes) -> SaveData:
    """Unpack a binary record; raise SaveError when it is too short."""
    if len(raw) < SAVE_SIZE:
        raise SaveError(f"save record needs {SAVE_SIZE} bytes, got {len(raw)}")
    x, y, angle, health, ammo, light, volume, name, stamp = _RECORD.unpack_from(raw)
    return SaveData(
        x, y, angle, health, ammo, light, volume, _unfixed(name), _unfixed(stamp)
    )


def collect_save_data(
    name: str, player: Player, flashlight: Flashlight, master_volume: float
) -> SaveData:
    """Snapshot the current game state, stamped with the local time."""
    return SaveData(
        player_x=player.x,
        player_y=player.y,
        player_angle=player.angle,
        flashlight_enabled=flashlight.enabled,
        master_volume=master_volume,
        save_name=name,
        timestamp=time.strftime(TIMESTAMP_FORMAT),
    )


def apply_save_data(
    data: SaveData,
    player: Player,
    flashlight: Flashlight,
    sound_manager: SoundManager,
) -> None:
    """Restore position, view angle, flashlight and master volume."""
    player.x = data.player_x
    player.y = data.player_y
    player.angle = data.player_angle
    flashlight.enabled = data.flashlight_enabled
    sound_manager.set_master_volume(data.master_volume)


def save_game(path: str | Path, data: SaveData) -> None:
    """Write a save file, creating its directory when needed."""
    target = Path(path)
    try:
        target.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        target.write_bytes(encode_save(data))
    except OSError as exc:
        raise SaveError(f"cannot write {target}: {exc}") from exc


def load_game(path: str | Path) -> SaveData:
    """Read a save file; raise SaveError when missing or damaged."""
    target = Path(path)
    try:
        raw = target.read_bytes()
    except OSError as exc:
        raise SaveError(f"cannot read {target}: {exc}") from exc
    return decode_save(raw)


def quick_save(data: SaveData) -> None:
    """Write the quick save slot."""
    save_game(QUICK_SAVE_FILE, data)


def quick_load() -> SaveData:
    """Read the quick save slot."""
    return load_game(QUICK_SAVE_FILE)


def get_save_info(path: str | Path) -> SaveData:
    """Describe a save file, or a blank 'Invalid Save' entry if unreadable."""
    try:
        return load_game(path)
    except SaveError:
        return SaveData(
            player_health=0,
            player_ammo=0,
            master_volume=0.0,
            save_name="Invalid Save",
            timestamp="Unknown",
        )