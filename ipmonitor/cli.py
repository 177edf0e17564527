#!/usr/bin/env python3
"""ipmonitor CLI - Command-line interface for ipmonitor."""

import click

from ipmonitor.commands.list_cmd import run_list
from ipmonitor.settings import load_settings
from ipmonitor.utils.env import EnvVarError
from ipmonitor.utils.logger import Logger


@click.group()
@click.pass_context
def ipmonitor(ctx):
    """Show this host's IP addresses and follow network changes."""
    try:
        settings = load_settings()
    except EnvVarError as e:
        raise click.UsageError(str(e)) from e
    ctx.obj = settings
    if not Logger.is_configured():
        Logger.configure(level=settings.log_level, timestamps=True)


@ipmonitor.command(name="list")
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    help="Disable every filter (loopback, IPv6 and down adapters included)",
)
@click.option("--include-loopback", is_flag=True, help="Keep loopback addresses")
@click.option("--include-ipv6", is_flag=True, help="Keep IPv6 addresses")
@click.option("--include-down", is_flag=True, help="Keep adapters that are not up")
@click.option(
    "--export",
    is_flag=True,
    default=False,
    help=(
        "Export results to JSON file with default filename "
        "(ipmonitor_list_TIMESTAMP.json)"
    ),
)
@click.option(
    "--export-file",
    default=None,
    help="Export results to JSON file with custom filename",
)
def list_addresses(
    show_all, include_loopback, include_ipv6, include_down, export, export_file
):
    """List active IPv4 addresses, sorted by address."""
    if export_file:
        export_format = "json"
        export_filename = export_file
    elif export:
        export_format = "json"
        export_filename = None
    else:
        export_format = None
        export_filename = None

    run_list(
        exclude_loopback=not (show_all or include_loopback),
        exclude_ipv6=not (show_all or include_ipv6),
        only_status_up=not (show_all or include_down),
        export_format=export_format,
        export_filename=export_filename,
    )


@ipmonitor.command()
@click.option(
    "--interval",
    type=float,
    default=None,
    help="Seconds between network polls (default: IPMONITOR_POLL_INTERVAL or 2)",
)
@click.option(
    "--duration",
    type=float,
    default=None,
    help="Stop after this many seconds instead of running until Ctrl-C",
)
@click.pass_obj
def watch(settings, interval, duration):
    """Print addresses now and again whenever the network changes."""
    from ipmonitor.commands.watch_cmd import run_watch

    if interval is not None and interval <= 0:
        raise click.BadParameter("must be greater than zero", param_hint="--interval")

    run_watch(
        interval_seconds=interval or settings.poll_interval,
        duration_seconds=duration,
    )


@ipmonitor.command(context_settings={"ignore_unknown_options": True})
@click.argument("rect", nargs=4, type=int)
@click.option(
    "--area",
    nargs=4,
    type=int,
    required=True,
    help="Working area as LEFT TOP RIGHT BOTTOM",
)
@click.option(
    "--distance",
    type=click.IntRange(min=0),
    default=None,
    help="Snap threshold (default: IPMONITOR_SNAP_DISTANCE or 100)",
)
@click.pass_obj
def snap(settings, rect, area, distance):
    r"""Snap a window RECT (LEFT TOP RIGHT BOTTOM) to the working area edges.

    \b
    Examples:
      ipmonitor snap 5 5 105 105 --area 0 0 1920 1080      # -> 0 0
      ipmonitor snap 1800 990 1900 1060 --area 0 0 1920 1080
      ipmonitor snap -1915 5 -1815 105 --area -1920 0 0 1080
    """
    from ipmonitor.commands.snap_cmd import run_snap

    if distance is None:
        distance = settings.snap_distance

    try:
        run_snap(rect=rect, area=area, distance=distance)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@ipmonitor.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display ipmonitor version information."""
    from ipmonitor.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


if __name__ == "__main__":
    ipmonitor()
