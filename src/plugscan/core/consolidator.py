"""Merging of per-format records into unique plugins."""

from __future__ import annotations

from typing import Mapping, Sequence

from plugscan.models.consolidated import ConsolidatedEntry, PathInfo
from plugscan.models.plugin import PluginFormat, PluginRecord, Scope


def format_short_name(bucket: PluginFormat | str) -> str:
    """Return the short code for a bucket; unknown bucket names pass through."""
    if isinstance(bucket, PluginFormat):
        return bucket.short_code
    fmt = PluginFormat.from_bucket_name(bucket)
    return fmt.short_code if fmt else bucket


def consolidate(
    collection: Mapping[PluginFormat | str, Sequence[PluginRecord]],
    include_paths: bool = False,
) -> list[ConsolidatedEntry]:
    """Fold records from every bucket into one entry per (name, scope).

    The short code comes from the bucket a record sits in. Codes and paths
    accumulate in encounter order without deduplication. Entries are
    returned in order of first appearance.
    """
    merged: dict[tuple[str, Scope], ConsolidatedEntry] = {}

    for bucket, records in collection.items():
        code = format_short_name(bucket)
        for record in records:
            key = (record.name, record.scope)
            entry = merged.get(key)
            if entry is None:
                entry = ConsolidatedEntry(
                    name=record.name,
                    scope=record.scope,
                    paths=[] if include_paths else None,
                )
                merged[key] = entry
            entry.formats.append(code)
            if entry.paths is not None:
                entry.paths.append(PathInfo(format=code, path=record.path, format_label=record.format_label))

    return list(merged.values())
