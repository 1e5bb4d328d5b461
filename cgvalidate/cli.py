"""CLI entry point — inspect the host, classify, print the report."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import typer

from .checks.base import SupportTier
from .config import load_settings
from .errors import FatalFetchError, ParseError
from .format import format_json, format_text
from .host.cgroups import load_enabled
from .host.mounts import find_mountpoint, is_unified_mode
from .report import build_report, default_collaborators

app = typer.Typer(help="Check whether this host can run the container monitoring agent.")

# --fail-on values. A check fails CI when its tier ranks at or below the threshold; Unknown never fails.
CI_THRESHOLDS = {
    "UNSUPPORTED": SupportTier.UNSUPPORTED,
    "SUPPORTED": SupportTier.SUPPORTED,
}


def _err(msg: str) -> None:
    """Raise a styled error — used for all CLI errors."""
    raise click.BadParameter(msg)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    json_out: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Colour tier labels (default: when stdout is a TTY)"),
    ci: bool = typer.Option(False, "--ci", help="CI mode: exit 1 if any check is Unsupported"),
    fail_on: str = typer.Option("Unsupported", "--fail-on", help="In CI mode: fail on this tier or worse (Unsupported/Supported)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", dir_okay=False, help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    """Validate kernel, cgroup and container runtime setup."""
    _setup_logging(verbose)
    settings = load_settings(config)
    ctx.obj = settings
    if ctx.invoked_subcommand is not None:
        return

    manager, runtime = default_collaborators(settings)
    try:
        report = build_report(manager, runtime, settings)
    except FatalFetchError as e:
        _err(f"Could not validate host: {e}")

    if json_out:
        typer.echo(format_json(report))
    else:
        use_color = sys.stdout.isatty() if color is None else color
        typer.echo(format_text(report, color=use_color), nl=False, color=use_color)

    if ci:
        _ci_exit(report, fail_on)


def _ci_exit(report, fail_on: str) -> None:
    """Exit 1 if any check is at or below the fail_on tier."""
    threshold = CI_THRESHOLDS.get(fail_on.upper())
    if threshold is None:
        _err(f"Unknown --fail-on tier: {fail_on}\nAvailable: Unsupported, Supported")
    for section in report.checks:
        tier = section.result.tier
        if tier is not SupportTier.UNKNOWN and tier.rank <= threshold.rank:
            raise typer.Exit(1)


@app.command("cgroups")
def cgroups_cmd(
    ctx: typer.Context,
    json_out: bool = typer.Option(False, "-j", "--json", help="JSON output"),
) -> None:
    """List cgroup subsystems, whether they are enabled, and where they are mounted."""
    settings = ctx.obj or load_settings(None)
    paths = settings.paths
    try:
        table = load_enabled(paths.proc_cgroups)
    except OSError as e:
        _err(f"Could not read {paths.proc_cgroups}: {e}")
    except ParseError as e:
        _err(f"Could not parse {paths.proc_cgroups}: {e}")

    unified = is_unified_mode(paths)
    rows = [
        {"name": name, "enabled": flag == 1, "mount_point": find_mountpoint(name, "/", paths)}
        for name, flag in table.items()
    ]
    if json_out:
        typer.echo(json.dumps({"unified": unified, "cgroups": rows}, indent=2))
        return
    typer.echo(f"Hierarchy: {'unified (v2)' if unified else 'v1'}")
    for row in rows:
        status = "enabled" if row["enabled"] else "disabled"
        typer.echo(f"  {row['name']:<12} {status:<9} {row['mount_point'] or '-'}")


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
