"""The analyze command: parse a log, run one analysis, emit the table."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..analysis import analysis_names
from ..api import run_analysis
from ..exceptions import MaatInsightError
from ..formatters import write_table
from ..logging_config import setup_logging
from ..parsers import VcsKind
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def analyze(
    log: Path = typer.Argument(..., help="VCS log file to analyze", dir_okay=False),
    vcs: str = typer.Option(
        ...,
        "-c",
        "--version-control",
        help="Log format: " + ", ".join(kind.value for kind in VcsKind),
    ),
    analysis: Optional[str] = typer.Option(
        None, "-a", "--analysis", help="Analysis to run (see 'maat-insight analyses'). Default: authors"
    ),
    min_revs: Optional[int] = typer.Option(
        None, "-n", "--min-revs", help="Minimum revisions to include an entity (default: 5)"
    ),
    min_shared_revs: Optional[int] = typer.Option(
        None, "-m", "--min-shared-revs", help="Minimum shared revisions for coupling (default: 5)"
    ),
    min_coupling: Optional[int] = typer.Option(
        None, "-i", "--min-coupling", help="Minimum coupling degree in percent (default: 30)"
    ),
    max_coupling: Optional[int] = typer.Option(
        None, "-x", "--max-coupling", help="Maximum coupling degree in percent (default: 100)"
    ),
    max_changeset_size: Optional[int] = typer.Option(
        None,
        "-s",
        "--max-changeset-size",
        help="Ignore larger changesets in coupling analyses (default: 30)",
    ),
    expression_to_match: Optional[str] = typer.Option(
        None, "-e", "--expression-to-match", help="Regex pre-filter for commit messages"
    ),
    age_time_now: Optional[str] = typer.Option(
        None, "-d", "--age-time-now", help="Reference date for code age (YYYY-MM-DD)"
    ),
    input_encoding: Optional[str] = typer.Option(
        None, "--input-encoding", help="Encoding of the log file (default: utf-8)"
    ),
    rows: Optional[int] = typer.Option(None, "-r", "--rows", help="Maximum rows to output"),
    outfile: Optional[Path] = typer.Option(
        None, "-o", "--outfile", help="Write results to a file instead of stdout", dir_okay=False
    ),
    group_file: Optional[str] = typer.Option(
        None, "-g", "--group", help="File mapping path regexes to layers (regex => layer)"
    ),
    team_map_file: Optional[str] = typer.Option(
        None, "-p", "--team-map-file", help="CSV file mapping authors to teams (author,team)"
    ),
    temporal_period: Optional[str] = typer.Option(
        None, "-t", "--temporal-period", help="Group same-day commits into one logical change"
    ),
    verbose_results: bool = typer.Option(
        False, "--verbose-results", help="Include revision counts in coupling output"
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Output format (default: csv)",
        click_type=click.Choice(["csv", "table"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and tracebacks"),
):
    """
    Analyze a version-control log.

    [bold cyan]Examples:[/bold cyan]

      maat-insight analyze logfile.log -c git2

      maat-insight analyze logfile.log -c git2 -a coupling -n 10

      maat-insight analyze svn.xml -c svn -a age -d 2024-01-01 --format table
    """
    logger = setup_logging(verbose=verbose)

    try:
        settings = resolve_config(
            config=config,
            analysis=analysis,
            vcs=vcs,
            min_revs=min_revs,
            min_shared_revs=min_shared_revs,
            min_coupling=min_coupling,
            max_coupling=max_coupling,
            max_changeset_size=max_changeset_size,
            expression_to_match=expression_to_match,
            age_time_now=age_time_now,
            input_encoding=input_encoding,
            rows=rows,
            group_file=group_file,
            team_map_file=team_map_file,
            temporal_period=temporal_period,
            verbose_results=verbose_results,
            output_format=output_format.lower() if output_format else None,
        )

        table = run_analysis(log, config=settings)
        write_table(table, outfile=outfile, fmt=settings.output_format, max_rows=settings.rows)

    except MaatInsightError as e:
        logger.debug("%s: %s", e.__class__.__name__, e, exc_info=verbose)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


@app.command()
def analyses():
    """List the supported analyses."""
    for name in analysis_names():
        console.print(name, highlight=False)
