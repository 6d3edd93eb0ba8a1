"""Click command group exposing metadata and a replay demonstration.

Purpose
-------
Give packaging checks a console script (``lib_log_deferred``) and let users see
a bootstrap log buffer being replayed with its scopes.

Contents
--------
* :func:`summary_info` - metadata banner shared with ``info``.
* :func:`run_demo` - buffers a scripted bootstrap and flushes it to a sink.
* :func:`cli` - group with ``--version`` plus ``info`` and ``demo`` commands.
"""

from __future__ import annotations

import click
from rich.console import Console

from . import __init__conf__
from .adapters.rich_console import RichConsoleSink
from .application.ports.sink import SinkPort
from .application.use_cases import DeferredLogger, DeferredLogQuery, flush_entries
from .domain import EntryQueue


def summary_info() -> str:
    """Return the metadata banner as one string ending with a newline."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def run_demo(sink: SinkPort, *, fail: bool = False) -> tuple[int, bool]:
    """Buffer a scripted bootstrap, flush it into ``sink``.

    Returns the number of replayed entries and whether errors were buffered.
    """

    queue = EntryQueue()
    logger = DeferredLogger(queue)
    logger.info("start")
    with logger.begin_scope("request=42"):
        logger.warning("slow")
        with logger.begin_scope("step=config"):
            logger.debug("loaded %d settings", 12)
    if fail:
        logger.error("boom")
    had_errors = DeferredLogQuery(queue).has_errors()
    return flush_entries(queue, sink), had_errors


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, *, version: bool) -> None:
    """Deferred logging toolkit."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print the metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo")
@click.option("--no-color", is_flag=True, help="Disable ANSI colours.")
@click.option("--with-error", is_flag=True, help="Buffer an error entry as well.")
@click.option("--fail-on-errors", is_flag=True, help="Exit with status 1 when errors were buffered.")
def demo_command(*, no_color: bool, with_error: bool, fail_on_errors: bool) -> None:
    """Buffer a bootstrap sequence and replay it on the console."""

    console = Console(no_color=no_color, soft_wrap=True)
    sink = RichConsoleSink(console=console, no_color=no_color)
    replayed, had_errors = run_demo(sink, fail=with_error)
    click.echo(f"replayed {replayed} entries")
    if fail_on_errors and had_errors:
        raise click.ClickException("errors were logged during bootstrap")


__all__ = ["cli", "run_demo", "summary_info"]
