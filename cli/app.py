"""
mucomvoice - Converter for MUCOM88 FM voice banks.

A CLI tool for converting and inspecting MUCOM88 voice.dat banks.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.convert import convert
from cli.commands.info import info
from cli.commands.text import text

__version__ = "0.1.0"

console = Console()

# Main app
app = typer.Typer(
    name="mucomvoice",
    help="Convert and inspect MUCOM88 FM voice banks.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="convert")(convert)
app.command(name="info")(info)
app.command(name="text")(text)


def setup_logging(verbose: bool = False) -> None:
    """Route library log messages through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]mucomvoice[/bold] version {__version__}")
    console.print("[dim]Converter for MUCOM88 FM voice banks[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug messages"),
) -> None:
    """
    mucomvoice - Convert MUCOM88 voice banks.

    Converts each voice of a [cyan]voice.dat[/cyan] bank to a
    [cyan]RYM2612[/cyan] preset (.rym2612) or to MUCOM88 voice text.

    [bold]Quick Start:[/bold]

        mucomvoice convert voice.dat -o output   # RYM2612 presets
        mucomvoice info voice.dat                # List voices
        mucomvoice info voice.dat --index 3      # Voice parameters
        mucomvoice text voice.dat -o voices.muc  # MML voice text

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
