"""Tests for config loader: YAML to dataclasses."""

import pytest
import yaml

from lib_tapquest.config import GameConfig, load_config, seconds


def test_load_config_overrides(tmp_path):
    raw = {
        "display": {"width": 800, "height": 600},
        "timing": {"answer_delay_ms": 500, "countdown_from": 5},
        "audio": {"enabled": False},
        "asset_dir": "/opt/tapquest",
        "seed": 11,
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(raw))

    cfg = load_config(path)
    assert cfg.display.width == 800
    assert cfg.display.fps == 60
    assert cfg.timing.answer_delay_ms == 500
    assert cfg.timing.countdown_from == 5
    assert cfg.timing.countdown_step_ms == 1000
    assert cfg.audio.enabled is False
    assert cfg.asset_dir == "/opt/tapquest"
    assert cfg.seed == 11


def test_load_config_defaults(tmp_path):
    """Missing sections fall back to defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("display: {}\n")

    cfg = load_config(path)
    assert cfg == GameConfig()
    assert cfg.timing.answer_delay_ms == 1200
    assert seconds(cfg.timing.countdown_go_ms) == 0.5


def test_empty_file_is_all_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == GameConfig()


def test_unknown_key_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"timing": {"warp_speed": 9}}))
    with pytest.raises(TypeError):
        load_config(path)
