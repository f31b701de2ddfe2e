"""Tests for the settings store."""

from __future__ import annotations

import json

from plugscan.settings import Settings


class TestSettings:
    def test_defaults_without_file(self, isolate_settings):
        settings = Settings()
        assert settings.path == isolate_settings
        assert settings.get("report.default_mode") == "summary"

    def test_missing_key_default(self, isolate_settings):
        assert Settings().get("report.nope", "fallback") == "fallback"
        assert Settings().get("report.default_mode.deeper") is None

    def test_set_persists(self, isolate_settings):
        Settings().set("report.default_mode", "detailed")

        assert json.loads(isolate_settings.read_text()) == {"report": {"default_mode": "detailed"}}
        assert Settings().get("report.default_mode") == "detailed"

    def test_set_replaces_non_dict_parent(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"report": "flat"}))

        settings = Settings(path)
        settings.set("report.default_mode", "detailed")
        assert settings.get("report") == {"default_mode": "detailed"}

    def test_corrupt_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        assert Settings(path).get("report.default_mode") == "summary"
        assert "Could not load settings" in caplog.text

    def test_non_object_file_ignored(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")

        assert Settings(path).get("report.default_mode") == "summary"
        assert "expected a JSON object" in caplog.text

    def test_save_failure_logged(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        settings = Settings(blocker / "settings.json")
        settings.set("report.default_mode", "detailed")
        assert "Could not save settings" in caplog.text
        assert settings.get("report.default_mode") == "detailed"
