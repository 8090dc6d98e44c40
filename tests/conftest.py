"""Shared fixtures: keep every test away from the real config and word dirs."""

import os

import pytest

from slugsmith import config as config_module
from slugsmith.cli.commands import config_cmd
from slugsmith.wordlists import WordListStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)

    for name in list(os.environ):
        if name.startswith("SLUGSMITH_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("SLUGSMITH_WORDS_DIR", str(tmp_path / "words"))

    config_module.reset_config()
    yield config_file
    config_module.reset_config()


@pytest.fixture
def fox_store(tmp_path):
    """Store whose small tier holds exactly one word per category."""
    store = WordListStore(tmp_path / "fox-words")
    store.save("names", "small", ["fox"])
    store.save("adjectives", "small", ["quick"])
    store.save("adverbs", "small", ["very"])
    return store
