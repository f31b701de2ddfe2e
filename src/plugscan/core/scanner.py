"""Listing of plugin bundles inside a single directory."""

from __future__ import annotations

import re
from pathlib import Path

from plugscan.models.plugin import PluginFormat, PluginRecord, Scope
from plugscan.utils import USER_HOME_MARKER

# Longest first so "Foo.vst3" loses ".vst3", not ".vst".
_BUNDLE_SUFFIX_RE = re.compile(
    "(?:"
    + "|".join(re.escape(fmt.bundle_suffix) for fmt in sorted(PluginFormat, key=lambda f: -len(f.bundle_suffix)))
    + ")$"
)


def strip_bundle_suffix(name: str) -> str:
    """Remove one trailing plugin bundle extension, if present."""
    return _BUNDLE_SUFFIX_RE.sub("", name, count=1)


def infer_scope(path: str) -> Scope:
    return Scope.USER if USER_HOME_MARKER in path else Scope.SYSTEM


def scan_directory(directory: Path, format_label: str) -> list[PluginRecord]:
    """Return a record for every bundle directory directly inside ``directory``.

    A missing directory yields an empty list. A directory that can't be
    read yields whatever was collected before the failure; the error is
    not reported.
    """
    records: list[PluginRecord] = []
    try:
        if not directory.exists():
            return records
        for child in directory.iterdir():
            if not child.is_dir():
                continue
            path = str(child)
            records.append(
                PluginRecord(
                    name=strip_bundle_suffix(child.name),
                    format_label=format_label,
                    path=path,
                    scope=infer_scope(path),
                )
            )
    except PermissionError:
        return records
    return records
