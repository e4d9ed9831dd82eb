"""Shared fixtures for tagstyle tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at an empty temporary directory."""
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def tmp_config_dir(isolated_config):
    """Provide the (created) tagstyle config directory."""
    config_dir = isolated_config / "tagstyle"
    config_dir.mkdir(parents=True)
    return config_dir
