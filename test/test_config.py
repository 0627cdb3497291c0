"""Tests for flextrigger.config.AppConfig."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flextrigger.config import (
    ENV_CASE_SENSITIVE,
    ENV_LOG_LEVEL,
    ENV_MAX_TRIGGER_LENGTH,
    ENV_SNIPPETS,
    AppConfig,
)
from flextrigger.context.match import TriggerState


class TestAppConfigLoad:
    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = AppConfig.load(tmp_path / "missing.json")
        assert cfg.max_trigger_length == 10
        assert cfg.case_sensitive is True
        assert cfg.delimiters is None
        assert cfg.snippets_path is None
        assert cfg.log_level == "WARNING"

    def test_load_existing_file(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({
            "max_trigger_length": 6,
            "case_sensitive": False,
            "delimiters": " -",
            "snippets_path": "/data/snippets.json",
        }))
        cfg = AppConfig.load(f)
        assert cfg.max_trigger_length == 6
        assert cfg.case_sensitive is False
        assert cfg.delimiters == " -"
        assert cfg.snippets_path == Path("/data/snippets.json")
        assert cfg.log_level == "WARNING"

    def test_invalid_limit_rejected(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"max_trigger_length": 0}))
        with pytest.raises(ValueError):
            AppConfig.load(f)


class TestAppConfigSave:
    def test_save_creates_parent_dirs(self, tmp_path):
        nested = tmp_path / "a" / "b" / "cfg.json"
        cfg = AppConfig(config_path=nested, max_trigger_length=4)
        cfg.save()
        assert nested.exists()
        data = json.loads(nested.read_text())
        assert data["max_trigger_length"] == 4
        assert data["snippets_path"] is None

    def test_round_trip(self, tmp_path):
        f = tmp_path / "cfg.json"
        cfg = AppConfig(
            config_path=f,
            case_sensitive=False,
            snippets_path=tmp_path / "s.json",
            log_level="DEBUG",
        )
        cfg.save()
        loaded = AppConfig.load(f)
        assert loaded == cfg


class TestApplyEnv:
    def setup_method(self):
        self.cfg = AppConfig(config_path=Path("/unused.json"))

    def test_overrides(self, tmp_path):
        self.cfg.apply_env({
            ENV_MAX_TRIGGER_LENGTH: "5",
            ENV_CASE_SENSITIVE: "no",
            ENV_SNIPPETS: str(tmp_path / "s.json"),
            ENV_LOG_LEVEL: "info",
        })
        assert self.cfg.max_trigger_length == 5
        assert self.cfg.case_sensitive is False
        assert self.cfg.snippets_path == tmp_path / "s.json"
        assert self.cfg.log_level == "INFO"

    def test_empty_environment_keeps_values(self):
        assert self.cfg.apply_env({}) is self.cfg
        assert self.cfg.max_trigger_length == 10

    def test_bad_integer(self):
        with pytest.raises(ValueError, match=ENV_MAX_TRIGGER_LENGTH):
            self.cfg.apply_env({ENV_MAX_TRIGGER_LENGTH: "ten"})

    def test_bad_limit(self):
        with pytest.raises(ValueError):
            self.cfg.apply_env({ENV_MAX_TRIGGER_LENGTH: "0"})
        assert self.cfg.max_trigger_length == 10

    def test_bad_boolean(self):
        with pytest.raises(ValueError, match=ENV_CASE_SENSITIVE):
            self.cfg.apply_env({ENV_CASE_SENSITIVE: "maybe"})


class TestDetector:
    def test_builds_from_snippet_file(self, tmp_path):
        snippets = tmp_path / "s.json"
        snippets.write_text(json.dumps([{"trigger": "hi", "content": "Hello"}]))
        cfg = AppConfig(config_path=tmp_path / "c.json", snippets_path=snippets, case_sensitive=False)
        detector = cfg.detector()
        assert detector.loaded_count == 1
        assert detector.case_sensitive is False
        assert detector.scan("HI ").content == "Hello"

    def test_custom_delimiters(self, tmp_path):
        snippets = tmp_path / "s.json"
        snippets.write_text(json.dumps([{"trigger": "hi", "content": "Hello"}]))
        cfg = AppConfig(config_path=tmp_path / "c.json", snippets_path=snippets, delimiters="-")
        detector = cfg.detector()
        assert detector.scan("x-hi-").is_match is True
        assert detector.scan("x hi ").state is TriggerState.IDLE
