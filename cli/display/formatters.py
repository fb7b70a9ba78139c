"""
Display formatting utilities for CLI output.

Provides bar graphics and hex dumps for voice parameters.
"""


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value.

    Args:
        value: Current value
        max_value: Maximum value of the parameter
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like " 91 [███████░░░]"
    """
    if max_value <= 0:
        max_value = 1

    # Clamp value
    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:3d} [{bar}]"
    return f"[{bar}]"


def level_bar(total_level: int, width: int = 10) -> str:
    """
    Show an operator total level as loudness.

    TL is attenuation, so TL 0 is a full bar and TL 127 an empty one.
    """
    bar = value_bar(127 - total_level, 127, width, show_value=False)
    return f"{total_level:3d} {bar}"


def hex_with_ascii(data: bytes, offset: int = 0, bytes_per_line: int = 16) -> str:
    """
    Format bytes as hex dump with ASCII representation.

    Returns:
        Multi-line string with format: "0x000: 00 01 02 ...  .ABC..."
    """
    lines = []
    for i in range(0, len(data), bytes_per_line):
        chunk = data[i : i + bytes_per_line]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        ascii_part = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        # Pad hex part for alignment
        hex_padded = f"{hex_part:<{bytes_per_line * 3 - 1}}"

        lines.append(f"0x{offset + i:03X}: {hex_padded}  {ascii_part}")

    return "\n".join(lines)
