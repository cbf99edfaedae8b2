"""Tests for configuration classes and persistence."""

import json
from pathlib import Path

import pytest

from recall_trainer.config import ConfigManager, RecallTrainerConfig, create_default_config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point ConfigManager at a temporary file."""
    path = tmp_path / "cfg" / "config.json"
    monkeypatch.setattr(ConfigManager, "CONFIG_FILE", path)
    return path


class TestRecallTrainerConfig:
    """Tests for RecallTrainerConfig."""

    def test_defaults(self):
        config = RecallTrainerConfig()
        assert config.language_code == "en"
        assert config.char_limit == 1200
        assert config.max_attempts == 3
        assert config.backoff_base == 0.5
        assert config.history_key == "readingSessionHistory"
        assert config.export_filename == "speed_reading_progress.csv"

    def test_string_path_converted(self):
        config = RecallTrainerConfig(history_db_path="/tmp/x/history.db")
        assert isinstance(config.history_db_path, Path)

    def test_frozen(self):
        config = RecallTrainerConfig()
        with pytest.raises(AttributeError):
            config.language_code = "de"

    def test_api_url(self):
        config = RecallTrainerConfig(language_code="sv")
        assert config.api_url() == "https://sv.wikipedia.org/w/api.php"
        assert config.api_url("ja") == "https://ja.wikipedia.org/w/api.php"

    def test_create_default_config_overrides(self):
        config = create_default_config(char_limit=2000)
        assert config.char_limit == 2000
        assert config.language_code == "en"


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_load_without_file_returns_defaults(self, config_file):
        assert ConfigManager.config_exists() is False
        assert ConfigManager.load_config() == create_default_config()

    def test_save_and_load(self, config_file, tmp_path):
        config = create_default_config(language_code="de", history_db_path=tmp_path / "h.db")
        ConfigManager.save_config(config)

        assert config_file.exists()
        loaded = ConfigManager.load_config()
        assert loaded == config

    def test_overrides_win(self, config_file):
        ConfigManager.save_config(create_default_config(language_code="de"))
        loaded = ConfigManager.load_config(language_code="fr", char_limit=None)
        assert loaded.language_code == "fr"
        assert loaded.char_limit == 1200

    def test_invalid_json_falls_back(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{broken", encoding="utf-8")
        assert ConfigManager.load_config() == create_default_config()

    def test_unknown_keys_fall_back(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"colour": "blue"}), encoding="utf-8")
        assert ConfigManager.load_config() == create_default_config()

    def test_delete_config(self, config_file):
        ConfigManager.save_config(create_default_config())
        ConfigManager.delete_config()
        assert not config_file.exists()
