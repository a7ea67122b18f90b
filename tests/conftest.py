"""Shared fixtures for deptree tests."""

import os

import pytest

import deptree.config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config module at a throwaway directory."""
    config_dir = tmp_path / "deptree-config"
    monkeypatch.setattr(deptree.config, "CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(deptree.config, "CONFIG_FILE", os.path.join(str(config_dir), "config.json"))
    monkeypatch.delenv("DEPTREE_INDEX", raising=False)
    return config_dir
