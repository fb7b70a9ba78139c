"""
MUCOM88 bank converter.

Converts every voice of a MUCOM88 voice bank to its own output file.

The conversion process:
1. Read the bank and split it into 32-byte voices
2. Name and classify each voice
3. Write one file per voice, in bank order
4. Remove the files of the unnamed voices at the end of the bank

Unnamed voices followed by a named voice are kept, so bank numbering
stays intact; only the empty tail of the bank is dropped.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from mucomvoice.formats.mucom88.reader import MucomBankReader
from mucomvoice.formats.mucom88.text_writer import MUCOM_EXTENSION, to_mucom_text
from mucomvoice.formats.mucom88.voice import VoiceRecord, name_voice
from mucomvoice.formats.rym2612.writer import RYM2612_EXTENSION, to_rym2612
from mucomvoice.models.voice import DEFAULT_PREFIX, NamedVoice
from mucomvoice.utils.romanize import romanize, sanitize
from mucomvoice.utils.validation import validate_prefix

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "voice.dat"
DEFAULT_OUTPUT = "output"


class ConversionError(Exception):
    """Raised when the bank can't be read or an output can't be written."""

    pass


class OutputFormat(Enum):
    """Output file formats."""

    RYM2612 = "rym2612"
    MUCOM = "mucom"

    @property
    def extension(self) -> str:
        return {
            OutputFormat.RYM2612: RYM2612_EXTENSION,
            OutputFormat.MUCOM: MUCOM_EXTENSION,
        }[self]

    def render(self, record: VoiceRecord, voice: NamedVoice) -> str:
        """Serialize one voice in this format."""
        if self is OutputFormat.MUCOM:
            return to_mucom_text(record, voice.index)
        return to_rym2612(record, voice)


@dataclass
class ConversionResult:
    """
    Outcome of a bank conversion.

    Attributes:
        voices: Named voices, in bank order
        written: Every file written, in bank order
        removed: Files removed because they ended the bank unnamed
        fallbacks: Voices whose category was a fallback guess
    """

    voices: List[NamedVoice] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)

    @property
    def kept(self) -> List[Path]:
        removed = set(self.removed)
        return [path for path in self.written if path not in removed]

    @property
    def fallbacks(self) -> List[NamedVoice]:
        return [voice for voice in self.voices if voice.used_fallback]


def trailing_empty_run(empty_flags: Sequence[bool]) -> int:
    """
    Count the unnamed voices at the end of a bank.

    Example:
        >>> trailing_empty_run([False, True, False, True, True])
        2
    """
    count = 0
    for empty in reversed(empty_flags):
        if not empty:
            break
        count += 1
    return count


class BankConverter:
    """
    Converter from a MUCOM88 voice bank to per-voice output files.

    Attributes:
        prefix: Patch name prefix
        output_format: Format of the written files
    """

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        output_format: OutputFormat = OutputFormat.RYM2612,
        transliterate: Callable[[str], str] = romanize,
        make_safe: Callable[[str], str] = sanitize,
    ):
        """
        Initialize converter.

        Args:
            prefix: Patch name prefix (letters, digits, "-" and "_")
            output_format: Format of the written files
            transliterate: Kana to Latin transliteration
            make_safe: Filename sanitizer
        """
        self.prefix = validate_prefix(prefix)
        self.output_format = output_format
        self._transliterate = transliterate
        self._make_safe = make_safe

    def name_voices(self, records: Sequence[VoiceRecord]) -> List[NamedVoice]:
        """Name and classify every voice of a bank."""
        return [
            name_voice(record, index, self.prefix, self._transliterate, self._make_safe)
            for index, record in enumerate(records)
        ]

    def convert(
        self,
        source: Union[str, Path] = DEFAULT_SOURCE,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT,
    ) -> ConversionResult:
        """
        Convert a bank file.

        Args:
            source: Path to the voice bank
            output_dir: Directory for the output files (created if missing)

        Returns:
            ConversionResult describing the written and removed files

        Raises:
            ConversionError: If reading, creating the directory or writing fails
        """
        source = Path(source)
        try:
            records = MucomBankReader.read(source)
        except OSError as e:
            raise ConversionError(f"Cannot read voice bank {source}: {e}") from e

        logger.info("Read %d voices from %s", len(records), source)
        return self.convert_records(records, output_dir)

    def convert_bytes(self, data: bytes, output_dir: Union[str, Path]) -> ConversionResult:
        """Convert bank data already in memory."""
        return self.convert_records(MucomBankReader().parse_bytes(data), output_dir)

    def convert_records(
        self, records: Sequence[VoiceRecord], output_dir: Union[str, Path]
    ) -> ConversionResult:
        """
        Write every voice, then drop the unnamed tail of the bank.

        Args:
            records: Voices in bank order
            output_dir: Directory for the output files (created if missing)

        Returns:
            ConversionResult describing the written and removed files
        """
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConversionError(f"Cannot create output directory {output_dir}: {e}") from e

        result = ConversionResult()
        for record, voice in zip(records, self.name_voices(records)):
            path = self.output_path(output_dir, voice)
            self._write(path, self.output_format.render(record, voice))
            result.voices.append(voice)
            result.written.append(path)

        tail = trailing_empty_run([voice.is_empty for voice in result.voices])
        if tail:
            for path in result.written[-tail:]:
                self._remove(path)
                result.removed.append(path)
            logger.info("Removed %d unnamed voices at the end of the bank", tail)

        return result

    def output_path(self, output_dir: Path, voice: NamedVoice) -> Path:
        return output_dir / f"{voice.patch_name}{self.output_format.extension}"

    def _write(self, path: Path, text: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise ConversionError(f"Cannot write {path}: {e}") from e
        logger.debug("Wrote %s", path)

    def _remove(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as e:
            raise ConversionError(f"Cannot remove {path}: {e}") from e


def convert_bank(
    source: Union[str, Path] = DEFAULT_SOURCE,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT,
    prefix: str = DEFAULT_PREFIX,
    output_format: Optional[OutputFormat] = None,
) -> ConversionResult:
    """
    Convert a MUCOM88 voice bank to RYM2612 presets (or MUCOM88 text).

    Example:
        result = convert_bank("voice.dat", "output")
        print(f"{len(result.kept)} presets written")
    """
    converter = BankConverter(prefix, output_format or OutputFormat.RYM2612)
    return converter.convert(source, output_dir)
