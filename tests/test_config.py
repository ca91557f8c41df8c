from doomcaster.config import Config, RenderConfig, WindowConfig, WorldConfig


def test_world_defaults_match_source():
    world = WorldConfig()
    assert (world.width, world.height, world.rate_map) == (900, 900, 5)


def test_render_defaults_match_source():
    render = RenderConfig()
    assert (render.fov, render.precision, render.max_distance, render.fps) == (
        90.0,
        10,
        500,
        30,
    )


def test_window_defaults_match_created_window():
    window = WindowConfig()
    assert (window.width, window.height) == (1600, 900)


def test_cell_size_tiles_the_world():
    config = Config()
    cell_w, cell_h = config.cell_size()
    assert cell_w * config.map.grid_width == config.world.width
    assert cell_h * config.map.grid_height == config.world.height


def test_cell_size_uses_integer_division():
    config = Config(world=WorldConfig(width=910, height=905))
    cell_w, cell_h = config.cell_size()
    assert isinstance(cell_w, int) and isinstance(cell_h, int)
    assert cell_w * config.map.grid_width <= 910
    assert (cell_w + 1) * config.map.grid_width > 910


def test_sections_are_independent_between_instances():
    first = Config()
    second = Config()
    first.player.move_speed = 42.0
    assert second.player.move_speed == 5.0