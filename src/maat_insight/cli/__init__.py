"""CLI entry point: registers all subcommands."""

import typer

from ._common import console

app = typer.Typer(
    name="maat-insight",
    help="maat-insight - Mine version-control logs for change-based code metrics",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """Run [bold]analyze[/bold] on a VCS log, or list [bold]analyses[/bold]."""
    from .. import __version__

    if version:
        console.print(f"[bold cyan]maat-insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# Import subcommands to register them
from .analyze import analyze as _analyze, analyses as _analyses  # noqa: F401, E402
