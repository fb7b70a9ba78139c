"""
Rich table displays for voice bank information.
"""

from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import hex_with_ascii, level_bar, value_bar
from mucomvoice.formats.mucom88.voice import OPERATOR_COUNT, VoiceRecord
from mucomvoice.formats.rym2612.tables import is_carrier
from mucomvoice.models.voice import NamedVoice


console = Console()


def display_bank_info(
    records: Sequence[VoiceRecord], voices: Sequence[NamedVoice], show_empty: bool = False
) -> None:
    """Display a summary table of all voices in a bank."""
    table = Table(title="Voices", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=8)
    table.add_column("Patch Name", width=28)
    table.add_column("Category", width=14)
    table.add_column("AL", width=3)
    table.add_column("FB", width=3)

    named = 0
    for record, voice in zip(records, voices):
        if voice.is_empty:
            if not show_empty:
                continue
        else:
            named += 1

        category = voice.category.display_name
        if voice.used_fallback:
            category = f"[yellow]{category}?[/yellow]"

        table.add_row(
            str(voice.index),
            escape(voice.decoded_name) or "[dim]-[/dim]",
            voice.patch_name,
            category,
            str(record.algorithm),
            str(record.feedback),
        )

    console.print(table)
    console.print(f"[dim]{len(records)} voices, {named} named[/dim]")


def display_voice_detail(record: VoiceRecord, voice: NamedVoice, show_raw: bool = False) -> None:
    """Display all parameters of one voice."""
    header = f"""[bold]Name:[/bold] {escape(voice.decoded_name) or "N/A"}
[bold]Patch Name:[/bold] {voice.patch_name}
[bold]Category:[/bold] {voice.category.display_name}
[bold]Algorithm:[/bold] {record.algorithm}
[bold]Feedback:[/bold] {record.feedback}"""

    console.print(
        Panel(
            header,
            title=f"[bold blue]Voice {voice.index}[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold green")
    table.add_column("Parameter", style="cyan", width=12)
    for op in range(OPERATOR_COUNT):
        role = "C" if is_carrier(record.algorithm, op) else "M"
        table.add_column(f"Op.{op + 1} ({role})", width=13)

    rows = [
        ("Attack R.", record.attack_rate, 31),
        ("Decay R.", record.decay_rate, 31),
        ("Sustain R.", record.sustain_rate, 31),
        ("Release R.", record.release_rate, 15),
        ("Sus.Level", record.sustain_level, 15),
        ("KeyScale R.", record.key_scale, 3),
        ("Multiple", record.multiple, 15),
        ("Detune", record.detune, 7),
        ("AM", record.amplitude_modulation, 1),
    ]

    table.add_row(
        "Total Level", *(level_bar(record.total_level(op), 6) for op in range(OPERATOR_COUNT))
    )
    for label, getter, max_value in rows:
        table.add_row(
            label, *(value_bar(getter(op), max_value, 6) for op in range(OPERATOR_COUNT))
        )

    console.print(table)

    if show_raw:
        console.print("\n[bold]Raw Data:[/bold]")
        console.print(hex_with_ascii(record.data), highlight=False)
