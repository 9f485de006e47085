"""Tests for the configuration manager."""

import json

import pytest

from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def fresh_singleton():
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


def test_defaults_when_no_file(tmp_path):
    config = ConfigManager(str(tmp_path)).get_config()

    assert config["allowedDirectories"] == []
    assert config["server"] == {"host": "127.0.0.1", "port": 8000}
    assert config["logLevel"] == "INFO"


def test_file_values_override_defaults(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"allowedDirectories": ["/srv/docs"], "server": {"port": 9100}})
    )

    config = ConfigManager(str(tmp_path)).get_config()

    assert config["allowedDirectories"] == ["/srv/docs"]
    assert config["server"] == {"host": "127.0.0.1", "port": 9100}


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("{not json")
    assert ConfigManager(str(tmp_path)).get_config()["allowedDirectories"] == []


def test_non_object_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("[1, 2]")
    assert ConfigManager(str(tmp_path)).get_config()["logLevel"] == "INFO"


def test_environment_selects_directory(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "conf"))

    manager = ConfigManager.get_instance()

    assert manager.config_file == tmp_path / "conf" / "config.json"
    assert ConfigManager.get_instance() is manager


def test_get_reads_single_value(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"logLevel": "DEBUG"}))

    manager = ConfigManager(str(tmp_path))

    assert manager.get("logLevel") == "DEBUG"
    assert manager.get("missing", "fallback") == "fallback"


def test_allowed_directories_merges_without_duplicates(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"allowedDirectories": ["/a", "/b"]}))

    manager = ConfigManager(str(tmp_path))

    assert manager.allowed_directories(["/b", "/c"]) == ["/a", "/b", "/c"]
    assert manager.allowed_directories() == ["/a", "/b"]
