import random

import pytest

from doomcaster.config import Config
from doomcaster.particles import (
    MAX_MUZZLE_PARTICLES,
    MAX_PARTICLES,
    MuzzleFlash,
    Particle,
    ShellParticles,
)


def test_age_fades_alpha():
    p = Particle(max_lifetime=1.0, active=True)
    assert p.age(0.5) is True
    assert p.color[3] == 153
    assert p.active


def test_age_expires():
    p = Particle(max_lifetime=1.0, active=True)
    assert p.age(1.5) is False
    assert p.active is False


def test_age_zero_keeps_full_alpha():
    p = Particle(max_lifetime=2.0, active=True)
    p.age(0.0)
    assert p.color[3] == 255


def test_shell_pool_size():
    shells = ShellParticles(rng=random.Random(1))
    assert len(shells.particles) == MAX_PARTICLES
    assert shells.active() == []


def test_shell_spawn_values_in_range():
    shells = ShellParticles(rng=random.Random(3))
    p = shells.spawn()
    assert p.active
    r, g, b, a = p.color
    assert 220 <= r < 255 and 180 <= g < 220 and 50 <= b < 80 and a == 255
    assert p.size in (4.0, pytest.approx(4.2))
    assert 1.5 <= p.max_lifetime <= 2.4 + 1e-9
    vx, vy = p.velocity
    assert vx > 0 and vy < 0


def test_shell_spawn_fills_then_refuses():
    shells = ShellParticles(rng=random.Random(0))
    spawned = [shells.spawn() for _ in range(MAX_PARTICLES)]
    assert all(p is not None for p in spawned)
    assert shells.spawn() is None
    assert len(shells.active()) == MAX_PARTICLES


def test_shell_update_moves_and_expires():
    shells = ShellParticles(rng=random.Random(5))
    p = shells.spawn()
    start = p.position
    shells.update(0.01)
    assert p.position != start
    shells.update(10.0)
    assert shells.active() == []


def test_shell_bounces_on_floor():
    config = Config()
    shells = ShellParticles(config=config, rng=random.Random(2))
    p = shells.particles[0]
    floor = config.window.height * 0.98
    p.active = True
    p.max_lifetime = 5.0
    p.position = (10.0, floor - 1.0)
    p.velocity = (2.0, 10.0)
    shells.update(0.01)
    assert p.position[1] == pytest.approx(floor)
    assert p.velocity[1] < 0
    assert p.velocity[0] == pytest.approx(1.0)


def test_muzzle_spawn_count_and_active():
    flash = MuzzleFlash(rng=random.Random(7))
    sparks = flash.spawn()
    assert 3 <= len(sparks) < MAX_MUZZLE_PARTICLES
    assert flash.is_active
    assert flash.active() == sparks
    for s in sparks:
        assert 200 <= s.color[3] < 255
        assert 3.0 <= s.size <= 8.0


def test_muzzle_respawn_replaces():
    flash = MuzzleFlash(rng=random.Random(11))
    for _ in range(5):
        sparks = flash.spawn()
        assert len(flash.active()) == len(sparks)


def test_muzzle_update_ends_flash():
    flash = MuzzleFlash(rng=random.Random(4))
    flash.spawn()
    flash.update(1.0)
    assert flash.is_active is False
    assert flash.active() == []


def test_muzzle_inactive_update_is_noop():
    flash = MuzzleFlash(rng=random.Random(4))
    flash.update(1.0)
    assert flash.active() == []
    assert flash.is_active is False