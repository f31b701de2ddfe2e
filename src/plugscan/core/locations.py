"""Registry of well-known plugin install locations."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from plugscan.models.plugin import PluginFormat, Scope
from plugscan.utils import expand_path

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluginLocation:
    """A directory that holds plugins of one format and scope."""

    format: PluginFormat
    scope: Scope
    raw_path: str

    @property
    def key(self) -> str:
        """Identifier such as 'VST3_User' or 'AU_Components_System'."""
        return f"{self.format.value}_{self.scope.value}"

    def resolve(self) -> Path:
        return expand_path(self.raw_path)


DEFAULT_LOCATIONS: tuple[PluginLocation, ...] = (
    PluginLocation(PluginFormat.AU_COMPONENTS, Scope.SYSTEM, "/Library/Audio/Plug-Ins/Components"),
    PluginLocation(PluginFormat.AU_COMPONENTS, Scope.USER, "~/Library/Audio/Plug-Ins/Components"),
    PluginLocation(PluginFormat.VST, Scope.SYSTEM, "/Library/Audio/Plug-Ins/VST"),
    PluginLocation(PluginFormat.VST, Scope.USER, "~/Library/Audio/Plug-Ins/VST"),
    PluginLocation(PluginFormat.VST3, Scope.SYSTEM, "/Library/Audio/Plug-Ins/VST3"),
    PluginLocation(PluginFormat.VST3, Scope.USER, "~/Library/Audio/Plug-Ins/VST3"),
    PluginLocation(PluginFormat.AAX, Scope.SYSTEM, "/Library/Application Support/Avid/Audio/Plug-Ins"),
)

# Order matters: VST3 must be tried before VST.
_KEY_PATTERNS: tuple[tuple[re.Pattern[str], PluginFormat], ...] = (
    (re.compile(r"Components"), PluginFormat.AU_COMPONENTS),
    (re.compile(r"VST3"), PluginFormat.VST3),
    (re.compile(r"VST(?!3)"), PluginFormat.VST),
    (re.compile(r"AAX"), PluginFormat.AAX),
)


def classify_key(key: str) -> PluginFormat | None:
    """Map a location key like 'VST3_User' to its format bucket."""
    for pattern, fmt in _KEY_PATTERNS:
        if pattern.search(key):
            return fmt
    return None


class LocationRegistry:
    """Ordered store of the locations a scan visits."""

    def __init__(self, locations: Iterable[PluginLocation] | None = None) -> None:
        self._locations: dict[str, PluginLocation] = {}
        for location in DEFAULT_LOCATIONS if locations is None else locations:
            self.register(location)

    def register(self, location: PluginLocation) -> None:
        """Register a location, keeping the first one for a given key."""
        if location.key in self._locations:
            log.warning("Location '%s' already registered, skipping duplicate", location.key)
            return
        self._locations[location.key] = location
        log.debug("Registered location: %s (%s)", location.key, location.raw_path)

    def get(self, key: str) -> PluginLocation | None:
        return self._locations.get(key)

    def by_format(self) -> dict[PluginFormat, list[PluginLocation]]:
        """Group locations by format, every format present."""
        grouped: dict[PluginFormat, list[PluginLocation]] = {fmt: [] for fmt in PluginFormat}
        for location in self._locations.values():
            grouped[location.format].append(location)
        return grouped

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[PluginLocation]:
        return iter(self._locations.values())

    def __contains__(self, key: str) -> bool:
        return key in self._locations
