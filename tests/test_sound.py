import pytest

from doomcaster.sound import SoundEffect, SoundManager, load_sound_manager


class FakeSound:
    def __init__(self):
        self.plays = 0
        self.level = None
        self.channels = 0

    def play(self):
        self.plays += 1
        self.channels = 1

    def set_volume(self, value):
        self.level = value

    def get_num_channels(self):
        return self.channels


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_manager():
    clock = Clock()
    manager = SoundManager(
        shot=SoundEffect(FakeSound(), 20.0, 0.1, last_played=0.0),
        footstep=SoundEffect(FakeSound(), 90.0, 0.4, last_played=0.0),
        clock=clock,
    )
    return manager, clock


def test_cooldown_blocks_early_play():
    effect = SoundEffect(FakeSound(), 20.0, 0.1, last_played=0.0)
    assert effect.can_play(0.05) is False
    assert effect.can_play(0.2) is True


def test_play_records_and_restarts_cooldown():
    sound = FakeSound()
    effect = SoundEffect(sound, 20.0, 0.1, last_played=0.0)
    assert effect.play(0.2) is True
    assert sound.plays == 1
    assert effect.is_playing
    assert effect.play(0.25) is False
    assert sound.plays == 1


def test_missing_sound_never_plays():
    effect = SoundEffect(None, 20.0, 0.1, last_played=0.0)
    assert effect.can_play(100.0) is False
    assert effect.play(100.0) is False


def test_manager_plays_and_mutes():
    manager, clock = make_manager()
    clock.now = 1.0
    assert manager.play_shot() is True
    assert manager.toggle() is False
    clock.now = 5.0
    assert manager.play_footstep() is False
    assert manager.footstep.sound.plays == 0
    assert manager.toggle() is True
    assert manager.play_footstep() is True


def test_master_volume_scales_effects():
    manager, _ = make_manager()
    manager.set_master_volume(50.0)
    assert manager.master_volume == 50.0
    assert manager.shot.sound.level == pytest.approx(0.1)
    assert manager.footstep.sound.level == pytest.approx(0.45)


def test_update_applies_setting_and_clamps():
    manager, _ = make_manager()
    manager.update(5)
    assert manager.shot.sound.level == pytest.approx(0.2)
    assert manager.footstep.sound.level == pytest.approx(0.9)
    manager.update(10)
    assert manager.footstep.sound.level == 1.0


def test_update_clears_finished_sounds():
    manager, clock = make_manager()
    clock.now = 1.0
    manager.play_shot()
    manager.update(5)
    assert manager.shot.is_playing is True
    manager.shot.sound.channels = 0
    manager.update(5)
    assert manager.shot.is_playing is False


def test_load_missing_files(tmp_path, capsys):
    shot = str(tmp_path / "missing_shot.mp3")
    step = str(tmp_path / "missing_step.mp3")
    manager = load_sound_manager(shot, step)
    assert manager.shot.sound is None
    assert manager.footstep.sound is None
    assert manager.shot.volume == 20.0
    assert manager.footstep.cooldown == 0.4
    assert manager.play_shot() is False
    assert f"Failed to load sound: {shot}" in capsys.readouterr().err