"""Plugscan data models."""

from plugscan.models.plugin import PluginCollection, PluginFormat, PluginRecord, Scope, empty_collection
from plugscan.models.consolidated import ConsolidatedEntry, PathInfo

__all__ = [
    "ConsolidatedEntry",
    "PathInfo",
    "PluginCollection",
    "PluginFormat",
    "PluginRecord",
    "Scope",
    "empty_collection",
]
