"""Tests for process bootstrap."""

import logging

import pytest

import main
from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "config"))
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def uvicorn_calls(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_no_directories_is_usage_error(capsys, uvicorn_calls):
    assert main.main([]) == 1
    assert "Usage:" in capsys.readouterr().err
    assert uvicorn_calls == []


def test_missing_directory_exits_non_zero(tmp_path, capsys, uvicorn_calls):
    assert main.main([str(tmp_path / "missing")]) == 1
    assert "does not exist" in capsys.readouterr().err
    assert uvicorn_calls == []


def test_file_instead_of_directory(tmp_path, capsys, uvicorn_calls):
    target = tmp_path / "file.txt"
    target.write_text("x")

    assert main.main([str(target)]) == 1
    assert "is not a directory" in capsys.readouterr().err


def test_serves_allowed_directories(tmp_path, uvicorn_calls):
    assert main.main([str(tmp_path), "--port", "9123"]) == 0

    app, kwargs = uvicorn_calls[0]
    assert kwargs["port"] == 9123
    assert kwargs["host"] == "127.0.0.1"
    assert app.state.edit_service.path_guard.is_allowed(tmp_path / "a.txt")


def test_fatal_server_error_exits_non_zero(tmp_path, monkeypatch):
    import uvicorn

    def fail(app, **kwargs):
        raise OSError("address already in use")

    monkeypatch.setattr(uvicorn, "run", fail)
    assert main.main([str(tmp_path)]) == 1
