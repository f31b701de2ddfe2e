"""Raw plugin records produced by directory scans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PluginFormat(Enum):
    """Plugin format bucket. The value is the bucket name."""

    AU_COMPONENTS = "AU_Components"
    VST = "VST"
    VST3 = "VST3"
    AAX = "AAX"

    @property
    def short_code(self) -> str:
        """Short code used when grouping, e.g. 'AU'."""
        return _SHORT_CODES[self]

    @property
    def label(self) -> str:
        """Label stamped on records found in this format's locations."""
        return "AU Component" if self is PluginFormat.AU_COMPONENTS else self.value

    @property
    def breakdown_label(self) -> str:
        return "AU Components" if self is PluginFormat.AU_COMPONENTS else self.value

    @property
    def bundle_suffix(self) -> str:
        return _BUNDLE_SUFFIXES[self]

    @classmethod
    def from_bucket_name(cls, name: str) -> PluginFormat | None:
        """Look up a format by its exact bucket name."""
        for fmt in cls:
            if fmt.value == name:
                return fmt
        return None


_SHORT_CODES = {
    PluginFormat.AU_COMPONENTS: "AU",
    PluginFormat.VST: "VST",
    PluginFormat.VST3: "VST3",
    PluginFormat.AAX: "AAX",
}

_BUNDLE_SUFFIXES = {
    PluginFormat.AU_COMPONENTS: ".component",
    PluginFormat.VST: ".vst",
    PluginFormat.VST3: ".vst3",
    PluginFormat.AAX: ".aaxplugin",
}


class Scope(Enum):
    """Where a plugin is installed."""

    USER = "User"
    SYSTEM = "System"

    @property
    def marker(self) -> str:
        return "🏠" if self is Scope.USER else "🏢"


@dataclass(frozen=True, slots=True)
class PluginRecord:
    """Single plugin bundle found in one scanned location."""

    name: str
    format_label: str
    path: str
    scope: Scope


PluginCollection = dict[PluginFormat, list[PluginRecord]]


def empty_collection() -> PluginCollection:
    """Return a collection with every format bucket present and empty."""
    return {fmt: [] for fmt in PluginFormat}
