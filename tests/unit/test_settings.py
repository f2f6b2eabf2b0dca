"""Tests for settings persistence."""

from __future__ import annotations

import json

import pytest

from agentforge.settings import ForgeSettings, SettingsManager


class TestForgeSettings:
    def test_defaults(self) -> None:
        settings = ForgeSettings()
        assert settings.catalog_dir is None
        assert settings.default_author == "Agent Creator"
        assert settings.log_level == "WARNING"
        assert settings.creation_time_target_ms == 30_000

    def test_target_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ForgeSettings(creation_time_target_ms=0)

    @pytest.mark.parametrize("level", ["verbose", "warning", ""])
    def test_log_level_must_be_standard(self, level: str) -> None:
        with pytest.raises(ValueError):
            ForgeSettings(log_level=level)


class TestSettingsManager:
    def test_load_defaults_when_missing(self, tmp_path) -> None:
        mgr = SettingsManager(str(tmp_path / "nonexistent"))
        assert mgr.load() == ForgeSettings()

    def test_save_and_load(self, tmp_path) -> None:
        mgr = SettingsManager(str(tmp_path))
        mgr.save(ForgeSettings(default_author="Ops Team", log_level="DEBUG"))
        loaded = mgr.load()
        assert loaded.default_author == "Ops Team"
        assert loaded.log_level == "DEBUG"

    def test_save_creates_directory(self, tmp_path) -> None:
        config_dir = tmp_path / "nested" / "dir"
        SettingsManager(str(config_dir)).save(ForgeSettings())
        assert (config_dir / "settings.json").exists()

    def test_update_skips_none(self, tmp_path) -> None:
        mgr = SettingsManager(str(tmp_path))
        mgr.save(ForgeSettings(catalog_dir="/srv/catalog"))
        updated = mgr.update({"default_author": "Bot", "catalog_dir": None})
        assert updated.default_author == "Bot"
        assert updated.catalog_dir == "/srv/catalog"
        assert mgr.load().default_author == "Bot"

    def test_corrupt_file_falls_back(self, tmp_path) -> None:
        (tmp_path / "settings.json").write_text("not json{{{")
        assert SettingsManager(str(tmp_path)).load() == ForgeSettings()

    def test_invalid_values_fall_back(self, tmp_path) -> None:
        (tmp_path / "settings.json").write_text(json.dumps({"creation_time_target_ms": -5}))
        assert SettingsManager(str(tmp_path)).load() == ForgeSettings()

    def test_settings_path(self, tmp_path) -> None:
        assert SettingsManager(str(tmp_path)).settings_path == tmp_path / "settings.json"

    def test_invalid_utf8_falls_back(self, tmp_path) -> None:
        (tmp_path / "settings.json").write_bytes(b'{"default_author": "\xff\xfe"}')
        assert SettingsManager(str(tmp_path)).load() == ForgeSettings()

    def test_unknown_log_level_falls_back(self, tmp_path) -> None:
        (tmp_path / "settings.json").write_text(json.dumps({"log_level": "verbose"}))
        assert SettingsManager(str(tmp_path)).load().log_level == "WARNING"
