"""Tests for layered configuration (defaults, config file, env vars)."""

import json
import logging

import pytest

from slugsmith import config as config_module
from slugsmith.config import (
    GenerateConfig,
    SlugsmithConfig,
    WordListsConfig,
    coerce_field,
    configure,
    get_config,
    parse_bool,
    reset_config,
)


class TestDefaults:
    def test_generate_defaults(self):
        config = SlugsmithConfig()
        assert config.generate.words_per_name == 3
        assert config.generate.separator == "-"
        assert config.generate.number_of_names == 1
        assert config.generate.pascal_case is False
        assert config.generate.size == "small"

    def test_wordlists_defaults(self):
        config = SlugsmithConfig()
        assert config.wordlists.source_url == ""
        assert config.wordlists.timeout == 30.0

    def test_words_dir_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        config = SlugsmithConfig(wordlists=WordListsConfig(directory="~/w"))
        assert config.words_dir == tmp_path / "w"


class TestLoad:
    def test_load_without_file(self, isolated_config):
        assert not isolated_config.exists()
        config = SlugsmithConfig.load()
        assert config.generate == GenerateConfig()

    def test_load_from_file(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps(
                {
                    "generate": {"separator": "_", "words_per_name": "2"},
                    "wordlists": {"source_url": "https://words.test/{size}/{category}"},
                    "unknown_zone": {"x": 1},
                }
            )
        )
        config = SlugsmithConfig.load()
        assert config.generate.separator == "_"
        assert config.generate.words_per_name == 2
        assert config.wordlists.source_url == "https://words.test/{size}/{category}"

    def test_corrupt_file_is_ignored(self, isolated_config, caplog):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="slugsmith.config"):
            config = SlugsmithConfig.load()
        assert config.generate == GenerateConfig()
        assert "Failed to load config" in caplog.text

    @pytest.mark.parametrize("payload", ["[]", '"generate"', "3", "null"])
    def test_non_object_file_is_ignored(self, isolated_config, caplog, payload):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(payload)
        with caplog.at_level(logging.WARNING, logger="slugsmith.config"):
            config = SlugsmithConfig.load()
        assert config.generate == GenerateConfig()
        assert "expected a JSON object" in caplog.text

    def test_load_without_env(self, isolated_config, monkeypatch):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"generate": {"separator": "_"}}))
        monkeypatch.setenv("SLUGSMITH_SEPARATOR", ".")
        assert SlugsmithConfig.load(env=False).generate.separator == "_"
        assert SlugsmithConfig.load().generate.separator == "."

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"generate": {"separator": "_"}}))
        monkeypatch.setenv("SLUGSMITH_SEPARATOR", ".")
        monkeypatch.setenv("SLUGSMITH_PASCAL_CASE", "yes")
        monkeypatch.setenv("SLUGSMITH_NUMBER_OF_NAMES", "4")
        monkeypatch.setenv("SLUGSMITH_FETCH_TIMEOUT", "2.5")

        config = SlugsmithConfig.load()
        assert config.generate.separator == "."
        assert config.generate.pascal_case is True
        assert config.generate.number_of_names == 4
        assert config.wordlists.timeout == 2.5

    def test_empty_separator_from_env(self, monkeypatch):
        monkeypatch.setenv("SLUGSMITH_SEPARATOR", "")
        assert SlugsmithConfig.load().generate.separator == ""

    def test_invalid_env_value_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("SLUGSMITH_WORDS_PER_NAME", "three")
        with caplog.at_level(logging.WARNING, logger="slugsmith.config"):
            config = SlugsmithConfig.load()
        assert config.generate.words_per_name == 3
        assert "SLUGSMITH_WORDS_PER_NAME" in caplog.text

    def test_words_dir_from_env(self, tmp_path):
        # conftest points SLUGSMITH_WORDS_DIR at tmp_path / "words"
        assert SlugsmithConfig.load().words_dir == tmp_path / "words"


class TestSave:
    def test_round_trip(self, isolated_config):
        config = SlugsmithConfig(
            generate=GenerateConfig(separator="", pascal_case=True, size="large")
        )
        config.save()

        data = json.loads(isolated_config.read_text())
        assert data["generate"]["pascal_case"] is True

        loaded = SlugsmithConfig.load()
        assert loaded.generate.separator == ""
        assert loaded.generate.pascal_case is True
        assert loaded.generate.size == "large"

    def test_to_dict(self):
        data = SlugsmithConfig().to_dict()
        assert set(data) == {"generate", "wordlists"}
        assert data["generate"]["separator"] == "-"


class TestCoercion:
    @pytest.mark.parametrize("value", ["true", "1", "YES", "on"])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "Off"])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    def test_invalid_bool(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")

    def test_coerce_field_types(self):
        assert coerce_field("words_per_name", "5") == 5
        assert coerce_field("timeout", "1") == 1.0
        assert coerce_field("pascal_case", True) is True
        assert coerce_field("separator", "_") == "_"


class TestSingleton:
    def test_get_config_caches(self):
        assert get_config() is get_config()

    def test_configure_and_reset(self):
        custom = SlugsmithConfig(generate=GenerateConfig(separator="+"))
        configure(custom)
        assert get_config() is custom
        reset_config()
        assert get_config() is not custom

    def test_config_file_is_isolated(self, tmp_path):
        assert config_module.CONFIG_FILE == tmp_path / "config" / "config.json"
