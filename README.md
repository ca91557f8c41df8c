# doomcaster

The game logic of a small retro first-person shooter drawn with a classic
raycaster: a 20×20 maze, a player who walks and turns, a flashlight,
enemies to shoot, a gun with a firing animation, shell and muzzle-flash
particles, sound effects and binary quick saves.

## Installing

```
pip install .
```

`pygame` is the only dependency. It is used for the HUD drawing and for
loading sound effects; everything else is plain Python.

## What is in the package

| Module | What it holds |
|--------|---------------|
| `doomcaster.config` | `Config` and its sections (`WindowConfig`, `WorldConfig`, `MapConfig`, `PlayerConfig`, `RenderConfig`); `Config.cell_size()` gives the size of one map cell in world units. |
| `doomcaster.world` | `GameMap`, a row-major grid of walls (1) and free cells (0), with `is_wall_at`, `check_collision`, `tile_rect` and `wall_indices`; `default_map(config)` builds the built-in level. Cells outside the grid count as walls. |
| `doomcaster.player` | `Player`, with `move(dx, dy, game_map)` that refuses to step into a wall, and `minimap_position(rate_map)`. |
| `doomcaster.flashlight` | `Flashlight` with `toggle()` and `light_intensity(distance, angle_diff)`; `create_flashlight(config)`; `apply_lighting(color, intensity)`, which never drops a channel below 40. |
| `doomcaster.raycaster` | `Raycaster` with `cast`, `view`, `max_distance`, `slice_rect` and `light_intensity`, returning `RaycastResult`s; texture helpers `calculate_texture_x`, `handle_edge_cases` and `handle_texture_mapping`. |
| `doomcaster.enemy` | `EnemyManager` (at most 20 enemies) with `spawn`, `spawn_initial`, `alive` and `shoot`; `sprite_placement` says where an enemy sprite goes on screen, or `None` when it cannot be seen. `spawn` raises `SpawnError` when full or inside a wall. |
| `doomcaster.weapon` | `Weapon` with `update(fire_pressed, now)`, which returns `True` on the frame a shot is fired, plus `can_fire`, `frame_rect` and `sprite_position`. |
| `doomcaster.particles` | `ShellParticles` (50 slots) and `MuzzleFlash` (10 sparks), each with `spawn`, `update(dt)` and `active()`. |
| `doomcaster.sound` | `SoundEffect` with cooldowns and `SoundManager` with `play_shot`, `play_footstep`, `set_master_volume`, `update` and `toggle`; `load_sound_manager()` loads `assets/sound/shot_uzi.mp3` and `assets/sound/footstep.mp3`, leaving a sound silent when it fails to load. |
| `doomcaster.controls` | `movement_speed`, `movement_target` for the actions `"Forward"`, `"Backward"`, `"Left"` and `"Right"`, and `Controls` for mouse look and edge-detected F, F5 and F9 presses (`FunctionKeyAction`). |
| `doomcaster.hud` | `draw_crosshair`, `draw_hud_bar`, `draw_stats` and `draw_hud` onto a pygame surface; `load_hud_font()` loads `assets/fonts/videotype.ttf`. |
| `doomcaster.save_system` | `SaveData`, `encode_save`/`decode_save` for the fixed-size binary record, `save_game`, `load_game`, `quick_save`, `quick_load` (the file `saves/quicksave.sav`), `get_save_info`, `collect_save_data` and `apply_save_data`. Failures raise `SaveError`. |

## Example

```python
from doomcaster.config import Config
from doomcaster.enemy import EnemyManager
from doomcaster.flashlight import create_flashlight
from doomcaster.player import Player
from doomcaster.raycaster import Raycaster
from doomcaster.world import default_map

config = Config()
game_map = default_map(config)
player = Player()
raycaster = Raycaster(config, game_map, create_flashlight(config))

result = raycaster.cast(player, player.angle, 1.0)
print(result.hit_wall, result.distance, result.wall_height)

enemies = EnemyManager(config, game_map)
enemies.spawn_initial()
hit = enemies.shoot(player, player.angle)
print("hit" if hit else "missed", len(enemies.alive()), "left")
```

Saving and loading:

```python
from doomcaster.save_system import collect_save_data, save_game, load_game

data = collect_save_data("slot 1", player, raycaster.flashlight, 100.0)
save_game("saves/slot1.sav", data)
print(load_game("saves/slot1.sav").timestamp)
```

## What the package does not do

There is no command to start a game, no window or main loop, and no
function that draws a whole frame of the 3D view: the pieces above
compute what to draw and where, but putting them on screen each frame is
left to the caller (only the HUD draws itself). There are no menus, no
settings screen, and no key rebinding; movement uses the action names
listed above, and the volume and sensitivity values are passed in by the
caller.

## Running the tests

```
pip install .[test]
pytest
```