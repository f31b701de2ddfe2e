"""Tests for path helpers."""

from __future__ import annotations

import os
from pathlib import Path

from plugscan.utils import expand_path, xdg_config_home


class TestExpandPath:
    def test_expands_tilde(self, fake_home):
        assert expand_path("~/Library/Audio") == fake_home / "Library" / "Audio"

    def test_absolute_path_unchanged(self):
        assert expand_path("/Library/Audio/Plug-Ins/VST") == Path("/Library/Audio/Plug-Ins/VST")

    def test_normalizes_dot_segments(self):
        assert expand_path("/Library/Audio/../Audio/./Plug-Ins") == Path("/Library/Audio/Plug-Ins")

    def test_relative_path_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert expand_path("Plug-Ins") == Path(os.getcwd()) / "Plug-Ins"

    def test_nonexistent_path_does_not_raise(self):
        result = expand_path("/definitely/not/here")
        assert result == Path("/definitely/not/here")
        assert not result.exists()


class TestXdgConfigHome:
    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert xdg_config_home() == tmp_path

    def test_default(self, fake_home, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert xdg_config_home() == fake_home / ".config"
