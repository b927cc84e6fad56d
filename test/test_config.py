"""Tests for mention_scan.config.ScanConfig."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mention_scan.config import CONFIG_ENV_VAR, ConfigError, ScanConfig, default_config_path, validate_config


class TestScanConfigLoad:
    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = ScanConfig.load(tmp_path / "missing.json")
        assert cfg.prefixes == ["@", "#"]
        assert cfg.delimiter_sets == {}
        assert cfg.global_delimiter_set == "whitespaces_and_newlines"
        assert cfg.max_space_count_allowed == 0

    def test_load_existing_file(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({
            "prefixes": ["@", "::"],
            "delimiter_sets": {"::": ["whitespaces", "."]},
            "global_delimiter_set": "whitespaces",
            "max_space_count_allowed": 2,
        }))
        cfg = ScanConfig.load(f)
        assert cfg.config_path == f
        assert cfg.prefixes == ["@", "::"]
        assert cfg.delimiter_sets == {"::": ["whitespaces", "."]}
        assert cfg.global_delimiter_set == "whitespaces"
        assert cfg.max_space_count_allowed == 2

    def test_partial_file_keeps_defaults(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"max_space_count_allowed": 1}))
        cfg = ScanConfig.load(f)
        assert cfg.prefixes == ["@", "#"]
        assert cfg.global_delimiter_set == "whitespaces_and_newlines"

    def test_null_global_set(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"global_delimiter_set": None}))
        assert ScanConfig.load(f).global_delimiter_set is None

    def test_invalid_json(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text("{not json")
        with pytest.raises(ConfigError, match="invalid JSON"):
            ScanConfig.load(f)

    def test_schema_violation(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"prefixes": [""], "max_space_count_allowed": -1}))
        with pytest.raises(ConfigError) as excinfo:
            ScanConfig.load(f)
        message = str(excinfo.value)
        assert "prefixes/0" in message
        assert "max_space_count_allowed" in message


class TestValidateConfig:
    def test_valid(self):
        validate_config({"prefixes": ["@"], "delimiter_sets": {"@": "punctuation"}})

    def test_unknown_key(self):
        with pytest.raises(ConfigError):
            validate_config({"prefix": ["@"]})

    def test_not_an_object(self):
        with pytest.raises(ConfigError, match=r"\(root\)"):
            validate_config(["@"])

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestScanConfigSave:
    def test_save_creates_parent_dirs(self, tmp_path):
        nested = tmp_path / "a" / "b" / "cfg.json"
        cfg = ScanConfig(config_path=nested, prefixes=["@"])
        cfg.save()
        assert nested.exists()

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "cfg.json"
        ScanConfig(
            config_path=path,
            prefixes=["@", "#"],
            delimiter_sets={"#": "."},
            global_delimiter_set=None,
            max_space_count_allowed=3,
        ).save()
        cfg = ScanConfig.load(path)
        assert cfg.delimiter_sets == {"#": "."}
        assert cfg.global_delimiter_set is None
        assert cfg.max_space_count_allowed == 3


class TestDefaultConfigPath:
    def test_home_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert default_config_path() == Path.home() / ".config" / "mention_scan" / "mention_scan.json"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "other.json"))
        assert default_config_path() == tmp_path / "other.json"
