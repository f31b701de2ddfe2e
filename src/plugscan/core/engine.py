"""Scan orchestration across all registered locations."""

from __future__ import annotations

import logging
from typing import Callable

from plugscan.core.locations import LocationRegistry
from plugscan.core.scanner import scan_directory
from plugscan.models.plugin import PluginCollection, empty_collection

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]  # (location_key, status_message)


class ScanEngine:
    """Walks every registered location and buckets the results by format."""

    def __init__(self, registry: LocationRegistry | None = None) -> None:
        self.registry = registry if registry is not None else LocationRegistry()

    def scan(self, on_progress: ProgressCallback | None = None) -> PluginCollection:
        """Scan each location in registry order, one after another.

        Args:
            on_progress: Optional callback receiving (location_key, status).

        Returns:
            A fresh collection with all four format buckets present.
        """
        collection = empty_collection()
        for location in self.registry:
            if on_progress:
                on_progress(location.key, "scanning")
            directory = location.resolve()
            records = scan_directory(directory, location.format.label)
            collection[location.format].extend(records)
            log.debug("%s: %d plugins in %s", location.key, len(records), directory)
            if on_progress:
                on_progress(location.key, "done")

        log.info("Found %d plugin instances", sum(len(r) for r in collection.values()))
        return collection
