"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from plugscan.core.locations import PluginLocation
from plugscan.models.plugin import PluginFormat, Scope


def make_bundles(directory: Path, *names: str) -> Path:
    """Create ``directory`` with one empty bundle directory per name."""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).mkdir()
    return directory


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point ~ at a macOS-style home directory under tmp_path."""
    home = tmp_path / "Users" / "alice"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Redirect the settings file to a temp directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "plugscan" / "settings.json"


@pytest.fixture
def fake_locations(tmp_path, fake_home):
    """Seven locations mirroring the real layout, rooted in tmp_path.

    System folders live under tmp_path/Library, user folders under the
    fake home and are given in ~ form.
    """
    system = tmp_path / "Library" / "Audio" / "Plug-Ins"
    return (
        PluginLocation(PluginFormat.AU_COMPONENTS, Scope.SYSTEM, str(system / "Components")),
        PluginLocation(PluginFormat.AU_COMPONENTS, Scope.USER, "~/Library/Audio/Plug-Ins/Components"),
        PluginLocation(PluginFormat.VST, Scope.SYSTEM, str(system / "VST")),
        PluginLocation(PluginFormat.VST, Scope.USER, "~/Library/Audio/Plug-Ins/VST"),
        PluginLocation(PluginFormat.VST3, Scope.SYSTEM, str(system / "VST3")),
        PluginLocation(PluginFormat.VST3, Scope.USER, "~/Library/Audio/Plug-Ins/VST3"),
        PluginLocation(PluginFormat.AAX, Scope.SYSTEM, str(tmp_path / "Library" / "Avid" / "Plug-Ins")),
    )


@pytest.fixture
def populated(tmp_path, fake_home, fake_locations):
    """Install a handful of plugins across formats and scopes."""
    system = tmp_path / "Library" / "Audio" / "Plug-Ins"
    user = fake_home / "Library" / "Audio" / "Plug-Ins"

    make_bundles(system / "Components", "Reverb.component", "Synth.component")
    make_bundles(system / "VST3", "Synth.vst3", "Delay.vst3")
    make_bundles(user / "VST", "Reverb.vst")
    make_bundles(user / "VST3", "alpha.vst3")
    make_bundles(tmp_path / "Library" / "Avid" / "Plug-Ins", "Synth.aaxplugin")
    # Loose files are not bundles.
    (system / "Components" / "README.txt").write_text("not a plugin")
    return fake_locations
