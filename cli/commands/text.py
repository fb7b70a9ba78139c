"""
Text command - write a bank as MUCOM88 MML voice definitions.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from mucomvoice.formats.mucom88.reader import MucomBankReader
from mucomvoice.formats.mucom88.text_writer import to_mucom_bank_text

console = Console()
app = typer.Typer()


@app.command()
def text(
    source: Path = typer.Argument(..., help="MUCOM88 voice bank"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """
    Write all voices as MUCOM88 "@n:{...}" voice definitions.

    Examples:

        mucomvoice text voice.dat

        mucomvoice text voice.dat -o voices.muc
    """
    if not source.exists():
        console.print(f"[red]Error: File not found: {source}[/red]")
        raise typer.Exit(1)

    try:
        content = to_mucom_bank_text(MucomBankReader.read(source))
    except OSError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if output is None:
        typer.echo(content, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Written:[/green] {output}")


if __name__ == "__main__":
    app()
