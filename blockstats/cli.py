"""
CLI Interface
=============
Command-line interface for the block statistics analyzer.

Usage:
    blockstats <text> <left delimiter> <right delimiter> [options]
    python -m blockstats "a[bc]d[ef]g" "[" "]"

Only the first character of each delimiter argument is used. TEXT may
start with "-"; use "--" before it if it collides with an option name.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .engine import AnalyzerConfig, AnalyzerEngine
from .models import AnalysisReport

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _first_char(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Take the first character of a delimiter argument."""
    if not value:
        raise click.BadParameter("delimiter must not be empty")
    return value[0]


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("text")
@click.argument("left_delimiter", metavar="LEFT", callback=_first_char)
@click.argument("right_delimiter", metavar="RIGHT", callback=_first_char)
@click.option(
    "--log-level",
    default="WARNING",
    envvar="BLOCKSTATS_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (logs go to stderr)",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--table",
    is_flag=True,
    default=False,
    help="Render statistics as tables instead of line-delimited JSON",
)
@click.version_option(version=__version__, prog_name="blockstats")
def cli(
    text: str,
    left_delimiter: str,
    right_delimiter: str,
    log_level: str,
    log_file: str,
    table: bool,
):
    """Extract blocks between LEFT and RIGHT delimiters from TEXT and report statistics.

    Put "--" before the arguments if TEXT looks like one of the options.
    """

    config = AnalyzerConfig(
        left_delimiter=left_delimiter,
        right_delimiter=right_delimiter,
        log_level=log_level,
        log_file=log_file,
    )

    try:
        engine = AnalyzerEngine(config)
        if table:
            _display_report(engine.analyze(text))
        else:
            engine.run(text, stream=sys.stdout)
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        err_console.print(f"[red]Unexpected error:[/] {escape(str(e))}")
        if log_level.upper() == "DEBUG":
            err_console.print_exception()
        sys.exit(1)


# ─── Display Helpers ──────────────────────────────────────────────────────────


def _display_report(report: AnalysisReport):
    """Display the report as rich tables."""
    common = report.common

    summary = Table(title="Common Statistics", border_style="cyan")
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right")
    summary.add_row("Total Blocks", str(common.total_blocks))
    summary.add_row("Average Length", str(common.avg_block_length))
    summary.add_row("Max Length", str(common.max_block_length))
    summary.add_row("Min Length", str(common.min_block_length))
    console.print(summary)

    if not report.blocks:
        console.print("[yellow]No blocks found[/]")
        return

    blocks = Table(title="Block Statistics", border_style="green")
    blocks.add_column("#", justify="right", style="dim")
    blocks.add_column("Text", style="bold")
    blocks.add_column("Length", justify="right")
    blocks.add_column("Latin", justify="right")
    blocks.add_column("Cyrillic", justify="right")
    blocks.add_column("Digits", justify="right")
    blocks.add_column("Other", justify="right")

    for idx, stats in enumerate(report.blocks, start=1):
        blocks.add_row(
            str(idx),
            Text(stats.text),
            str(stats.text_length),
            str(stats.latin_count),
            str(stats.cyr_count),
            str(stats.cypher_count),
            str(stats.other_sym_count),
        )

    console.print(blocks)
    logger.debug(f"Displayed {len(report.blocks)} blocks")


# ─── Entry point (for python -m blockstats.cli) ───────────────────────────────


if __name__ == "__main__":
    cli()
