"""Text reports over a plugin scan.

Each renderer returns the report as a list of lines and never mutates the
collection it is given. Blank lines are empty strings.
"""

from __future__ import annotations

from plugscan.core.consolidator import consolidate
from plugscan.models.consolidated import ConsolidatedEntry
from plugscan.models.plugin import PluginCollection, PluginFormat

TITLE = "🎵 Audio Plugin Scanner for macOS"

_TOKEN_BUCKETS = {
    "au": PluginFormat.AU_COMPONENTS.value,
    "vst": PluginFormat.VST.value,
    "vst3": PluginFormat.VST3.value,
    "aax": PluginFormat.AAX.value,
}


def total_instances(collection: PluginCollection) -> int:
    return sum(len(records) for records in collection.values())


def sorted_entries(entries: list[ConsolidatedEntry]) -> list[ConsolidatedEntry]:
    """Sort entries by name, ignoring case."""
    return sorted(entries, key=lambda e: e.name.lower())


def format_entry(entry: ConsolidatedEntry) -> str:
    return f"  {entry.scope.marker} {entry.name} [{', '.join(entry.sorted_formats)}]"


def _header(
    title: str, width: int, rule: int, collection: PluginCollection, unique: int, list_title: str
) -> list[str]:
    return [
        "",
        title,
        "=" * width,
        f"Total plugin instances: {total_instances(collection)}",
        f"Unique plugins: {unique}",
        "",
        list_title,
        "-" * rule,
    ]


def _breakdown(collection: PluginCollection) -> list[str]:
    lines = ["Format Breakdown:", "-" * 20]
    for fmt, records in collection.items():
        if not records:
            continue
        lines.append(f"  {fmt.breakdown_label}: {len(records)}")
    return lines


def render_summary(collection: PluginCollection) -> list[str]:
    """Counts, one line per unique plugin, then the per-format breakdown."""
    entries = consolidate(collection)
    lines = _header(TITLE, 50, 40, collection, len(entries), "Consolidated Plugin List:")
    lines.extend(format_entry(entry) for entry in sorted_entries(entries))
    lines.append("")
    lines.extend(_breakdown(collection))
    return lines


def render_detailed(collection: PluginCollection) -> list[str]:
    """Like the summary, with every install path listed under each plugin."""
    entries = consolidate(collection, include_paths=True)
    lines = _header(
        f"{TITLE} (Detailed)", 70, 70, collection, len(entries), "Consolidated Plugin List with Paths:"
    )
    for entry in sorted_entries(entries):
        lines.append(format_entry(entry))
        grouped = entry.paths_by_format()
        for code in sorted(grouped):
            for info in grouped[code]:
                lines.append(f"     {code}: {info.path}")
        lines.append("")
    lines.extend(_breakdown(collection))
    return lines


def resolve_format_token(token: str) -> str:
    """Map a user-supplied format name to a bucket name.

    Known short names are matched case-insensitively. Anything else is
    upper-cased with hyphens turned into underscores.
    """
    return _TOKEN_BUCKETS.get(token.lower(), token.upper().replace("-", "_"))


def render_by_type(collection: PluginCollection, token: str) -> list[str]:
    """List the raw records of a single format, without consolidation."""
    fmt = PluginFormat.from_bucket_name(resolve_format_token(token))
    records = collection.get(fmt) if fmt is not None else None

    if not records:
        return ["", f"No {token} plugins found."]

    lines = ["", f"{fmt.label} Plugins ({len(records)} found):", "-" * 50]
    for record in sorted(records, key=lambda r: r.name.lower()):
        lines.append(f"  {record.scope.marker} {record.name}")
    return lines
