import json

import pytest

from sgf_replay.board import Color
from sgf_replay.config import ReplayConfig
from sgf_replay.errors import InvalidColor


def test_defaults_without_file():
    config = ReplayConfig()
    assert config.get_initial_player() is Color.BLACK
    assert config.requires_go_game()
    assert config.get_log_level() == "INFO"
    assert config.get_log_file() is None


def test_missing_file_uses_defaults(tmp_path):
    config = ReplayConfig(str(tmp_path / "absent.json"))
    assert config.get("replay", "initial_player") == "B"
    assert not (tmp_path / "absent.json").exists()


def test_loaded_values_merge_with_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"logging": {"level": "debug"}, "extra": {"x": 1}}))
    config = ReplayConfig(str(config_file))
    assert config.get_log_level() == "DEBUG"
    assert config.get("logging", "file") is None
    assert config.requires_go_game()
    assert config.get("extra", "x") == 1


def test_invalid_json_falls_back_to_defaults(tmp_path, caplog):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")
    config = ReplayConfig(str(config_file))
    assert config.get_initial_player() is Color.BLACK
    assert "Error loading config" in caplog.text


def test_defaults_are_not_shared():
    first = ReplayConfig()
    first.set("replay", "initial_player", "W")
    assert ReplayConfig().get_initial_player() is Color.BLACK


def test_get_with_default():
    assert ReplayConfig().get("missing", "key", 3) == 3


def test_save_and_reload(tmp_path):
    config_file = tmp_path / "config.json"
    config = ReplayConfig(str(config_file))
    config.set("replay", "initial_player", "W")
    config.save()
    assert ReplayConfig(str(config_file)).get_initial_player() is Color.WHITE


def test_save_without_file():
    with pytest.raises(ValueError):
        ReplayConfig().save()


def test_bad_initial_player():
    config = ReplayConfig()
    config.set("replay", "initial_player", "red")
    with pytest.raises(InvalidColor):
        config.get_initial_player()
