import pytest
from pydantic import ValidationError

from skyflap.config.settings import (
    FieldSettings, ObstacleSettings, Settings, get_settings,
)


def test_defaults_match_classic_game(settings):
    assert settings.playfield.width == 320
    assert settings.playfield.height == 480
    assert settings.playfield.ground_y == 368
    assert settings.bird.gravity == 0.25
    assert settings.bird.jump == 4.6
    assert settings.obstacles.spawn_interval == 120
    assert settings.obstacles.base_offset == -150
    assert settings.seed is None
    assert settings.is_simulator


def test_nested_values_from_environment(monkeypatch):
    monkeypatch.setenv("SKYFLAP_BIRD__GRAVITY", "0.5")
    monkeypatch.setenv("SKYFLAP_SEED", "7")
    loaded = Settings(_env_file=None)
    assert loaded.bird.gravity == 0.5
    assert loaded.seed == 7


def test_ground_must_fit_in_field():
    with pytest.raises(ValidationError):
        FieldSettings(height=100, ground_height=100)


def test_spawn_offset_must_be_negative():
    with pytest.raises(ValidationError):
        ObstacleSettings(base_offset=10)


def test_speed_must_be_positive():
    with pytest.raises(ValidationError):
        ObstacleSettings(speed=0)


def test_get_settings_is_cached(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
