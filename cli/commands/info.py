"""
Info command - list the voices of a bank or show one voice in detail.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cli.display.tables import display_bank_info, display_voice_detail
from mucomvoice.converters.bank import BankConverter
from mucomvoice.formats.mucom88.reader import MucomBankReader
from mucomvoice.models.voice import DEFAULT_PREFIX
from mucomvoice.utils.validation import ValidationError

console = Console()
app = typer.Typer()


@app.command()
def info(
    source: Path = typer.Argument(..., help="MUCOM88 voice bank"),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="Show one voice in detail"),
    show_empty: bool = typer.Option(False, "--all", "-a", help="Include unnamed voices"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Show raw voice bytes"),
    prefix: str = typer.Option(DEFAULT_PREFIX, "--prefix", "-p", help="Patch name prefix"),
) -> None:
    """
    Display voice bank information.

    Examples:

        mucomvoice info voice.dat

        mucomvoice info voice.dat --index 12 --raw
    """
    if not source.exists():
        console.print(f"[red]Error: File not found: {source}[/red]")
        raise typer.Exit(1)

    try:
        converter = BankConverter(prefix)
    except ValidationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        records = MucomBankReader.read(source)
    except OSError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    voices = converter.name_voices(records)

    if index is None:
        display_bank_info(records, voices, show_empty=show_empty)
        return

    if not 0 <= index < len(records):
        console.print(f"[red]Error: Voice index must be 0-{len(records) - 1}, got {index}[/red]")
        raise typer.Exit(1)

    display_voice_detail(records[index], voices[index], show_raw=raw)


if __name__ == "__main__":
    app()
