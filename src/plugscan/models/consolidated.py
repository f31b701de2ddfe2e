"""Deduplicated plugin entries built from raw records."""

from __future__ import annotations

from dataclasses import dataclass, field

from plugscan.models.plugin import Scope


@dataclass(frozen=True, slots=True)
class PathInfo:
    """One location a consolidated plugin was found at."""

    format: str
    path: str
    format_label: str


@dataclass(slots=True)
class ConsolidatedEntry:
    """A logical plugin, merged across every format it is installed in.

    ``formats`` keeps every short code in the order it was folded in,
    duplicates included. Use ``sorted_formats`` for display. ``paths`` is
    only populated when path detail was requested, otherwise it is None.
    """

    name: str
    scope: Scope
    formats: list[str] = field(default_factory=list)
    paths: list[PathInfo] | None = None

    @property
    def key(self) -> tuple[str, Scope]:
        return (self.name, self.scope)

    @property
    def sorted_formats(self) -> list[str]:
        return sorted(set(self.formats))

    def paths_by_format(self) -> dict[str, list[PathInfo]]:
        """Group paths by short code, keeping encounter order in each group."""
        grouped: dict[str, list[PathInfo]] = {}
        for info in self.paths or []:
            grouped.setdefault(info.format, []).append(info)
        return grouped
