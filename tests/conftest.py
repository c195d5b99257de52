"""Shared fixtures: keep tests away from the user's real config."""

import logging

import pytest

import nazuke.config as nazuke_config
from nazuke.cli.commands import config_cmd
from nazuke.generator import reset_tables

_ENV_VARS = (
    "NAZUKE_DEFAULT_STYLE",
    "NAZUKE_DEFAULT_COUNT",
    "NAZUKE_OUTPUT_FORMAT",
    "NAZUKE_DATA_DIR",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(nazuke_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(nazuke_config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    nazuke_config.reset_config()
    reset_tables()
    yield config_file
    nazuke_config.reset_config()
    reset_tables()


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI callback reconfigures logging; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("nazuke").setLevel(logging.NOTSET)
