"""CLI interface for Plugscan."""

from __future__ import annotations

import json
import logging

import click

from plugscan.core.consolidator import consolidate
from plugscan.core.engine import ScanEngine
from plugscan.models.consolidated import ConsolidatedEntry
from plugscan.models.plugin import PluginCollection
from plugscan.report import (
    render_by_type,
    render_detailed,
    render_summary,
    sorted_entries,
    total_instances,
)
from plugscan.settings import Settings

log = logging.getLogger(__name__)

REPORT_MODES = ("summary", "detailed")


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _scan() -> PluginCollection:
    return ScanEngine().scan()


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


def _entry_to_dict(entry: ConsolidatedEntry) -> dict:
    data: dict = {
        "name": entry.name,
        "scope": entry.scope.value,
        "formats": entry.sorted_formats,
    }
    if entry.paths is not None:
        data["paths"] = [
            {"format": p.format, "path": p.path, "type": p.format_label}
            for p in entry.paths
        ]
    return data


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """Plugscan: list installed AU, VST, VST3 and AAX plugins."""
    _setup_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    mode = Settings().get("report.default_mode", "summary")
    if mode not in REPORT_MODES:
        log.warning("Unknown report.default_mode '%s', using summary", mode)
        mode = "summary"
    ctx.invoke(detailed if mode == "detailed" else summary)


# ── summary ──────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def summary(as_json: bool = False) -> None:
    """Show unique plugins with their formats."""
    plugins = _scan()

    if as_json:
        data = {
            "total_instances": total_instances(plugins),
            "breakdown": {fmt.value: len(records) for fmt, records in plugins.items()},
            "plugins": [_entry_to_dict(e) for e in sorted_entries(consolidate(plugins))],
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    _echo_lines(render_summary(plugins))


# ── detailed ─────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def detailed(as_json: bool = False) -> None:
    """Show unique plugins with every install path."""
    plugins = _scan()

    if as_json:
        entries = sorted_entries(consolidate(plugins, include_paths=True))
        click.echo(json.dumps([_entry_to_dict(e) for e in entries], indent=2, ensure_ascii=False))
        return

    _echo_lines(render_detailed(plugins))


# ── by-type ──────────────────────────────────────────────────────────────

@main.command("by-type")
@click.argument("plugin_format")
def by_type(plugin_format: str) -> None:
    """List plugins of one format (au, vst, vst3, aax)."""
    _echo_lines(render_by_type(_scan(), plugin_format))


# ── locations ────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def locations(as_json: bool) -> None:
    """List the directories that are scanned."""
    engine = ScanEngine()
    rows = [(loc, loc.resolve()) for loc in engine.registry]

    if as_json:
        data = [
            {
                "key": loc.key,
                "format": loc.format.short_code,
                "scope": loc.scope.value,
                "path": str(path),
                "exists": path.is_dir(),
            }
            for loc, path in rows
        ]
        click.echo(json.dumps(data, indent=2))
        return

    for loc, path in rows:
        status = click.style("found", fg="green") if path.is_dir() else click.style("missing", fg="bright_black")
        click.echo(f"  {click.style(loc.key, fg='cyan', bold=True):30s}  {path}  [{status}]")


# ── config ───────────────────────────────────────────────────────────────

@main.command("config")
@click.argument("key")
@click.argument("value", required=False)
def config_cmd(key: str, value: str | None) -> None:
    """Read or write a setting, e.g. `config report.default_mode detailed`."""
    settings = Settings()
    if value is None:
        current = settings.get(key)
        if current is None:
            click.echo(f"{key} is not set")
        else:
            click.echo(f"{key} = {json.dumps(current)}")
        return

    if key == "report.default_mode" and value not in REPORT_MODES:
        raise click.BadParameter(f"must be one of: {', '.join(REPORT_MODES)}", param_hint="VALUE")
    settings.set(key, value)
    click.echo(f"{key} = {json.dumps(value)}")
