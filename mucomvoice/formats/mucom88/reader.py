"""
MUCOM88 voice bank reader.

Splits a voice.dat file into 32-byte VoiceRecords.
"""

from pathlib import Path
from typing import List, Union

from mucomvoice.formats.mucom88.voice import VOICE_SIZE, VoiceRecord


class MucomBankReader:
    """
    Reader for MUCOM88 voice banks.

    Trailing bytes that don't make up a whole record are ignored.

    Example:
        voices = MucomBankReader.read("voice.dat")
        print(f"{len(voices)} voices, first: {voices[0].name}")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> List[VoiceRecord]:
        """
        Read a voice bank file.

        Args:
            filepath: Path to the bank file

        Returns:
            Voice records in bank order
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> List[VoiceRecord]:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> List[VoiceRecord]:
        """
        Split bank data into voice records.

        Args:
            data: Raw bank contents

        Returns:
            floor(len(data) / 32) voice records
        """
        count = len(data) // VOICE_SIZE
        return [
            VoiceRecord.from_bytes(data[i * VOICE_SIZE : (i + 1) * VOICE_SIZE])
            for i in range(count)
        ]

    @staticmethod
    def can_read(filepath: Union[str, Path]) -> bool:
        """Check if a file holds at least one whole voice record."""
        filepath = Path(filepath)
        return filepath.is_file() and filepath.stat().st_size >= VOICE_SIZE
