"""
Convert command - write one preset per voice of a MUCOM88 bank.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from mucomvoice.converters.bank import (
    DEFAULT_OUTPUT,
    DEFAULT_SOURCE,
    BankConverter,
    ConversionError,
    OutputFormat,
)
from mucomvoice.models.voice import DEFAULT_PREFIX
from mucomvoice.utils.validation import ValidationError

console = Console()
app = typer.Typer()


@app.command()
def convert(
    source: Path = typer.Argument(Path(DEFAULT_SOURCE), help="MUCOM88 voice bank"),
    output: Path = typer.Option(Path(DEFAULT_OUTPUT), "--output", "-o", help="Output directory"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.RYM2612, "--format", "-f", help="Output format", case_sensitive=False
    ),
    prefix: str = typer.Option(DEFAULT_PREFIX, "--prefix", "-p", help="Patch name prefix"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert every voice of a bank to its own file.

    Unnamed voices at the end of the bank are skipped.

    Examples:

        mucomvoice convert voice.dat -o presets

        mucomvoice convert voice.dat -f mucom -o voices
    """
    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task(f"Converting to {fmt.value}...", total=None)

        try:
            converter = BankConverter(prefix, fmt)
            result = converter.convert(source, output)
        except (ConversionError, ValidationError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

        progress.update(task, description="Done!")

    console.print(f"[green]Converted:[/green] {source} -> {output}")
    console.print(
        f"[dim]{len(result.kept)} files written, "
        f"{len(result.removed)} unnamed voices skipped at end of bank[/dim]"
    )

    if result.fallbacks:
        console.print()
        console.print("[yellow]Category guessed as default for:[/yellow]")
        for voice in result.fallbacks:
            console.print(f"[yellow]  - {voice.patch_name} ({escape(voice.decoded_name)})[/yellow]")


if __name__ == "__main__":
    app()
