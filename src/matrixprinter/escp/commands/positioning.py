"""
Positioning and paper movement commands.

Contains control characters for line and page feeds, absolute and relative
horizontal positioning, forward vertical feeds, and the metric conversions
between centimeters and printer motion units.

Reference: Epson ESC/P Reference Manual, "Print position motion"
Compatibility: ESC/P (9-pin) and ESC/P2 (24/48-pin)

Units:
    ESC $   1/60 inch
    ESC \\   1/120 inch (draft units)
    ESC J   1/216 inch on 9-pin printers, 1/180 inch on 24/48-pin printers
"""

import math
from typing import Final, Iterator

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "CR",
    "LF",
    "FF",
    "HT",
    "CRLF",
    "CRFF",
    "CM_PER_INCH",
    "UNITS_PER_INCH_9PIN",
    "UNITS_PER_INCH_24PIN",
    "RELATIVE_HORIZONTAL_UNITS_PER_INCH",
    "ABSOLUTE_HORIZONTAL_UNITS_PER_INCH",
    "MAX_VERTICAL_STEP",
    "set_horizontal_position",
    "set_relative_horizontal_position",
    "advance_vertical",
    "centimeters_to_units",
    "split_vertical_advance",
]

# =============================================================================
# BASIC CONTROL CHARACTERS
# =============================================================================

CR: Final[bytes] = b"\r"
"""
Carriage Return.

Command: CR
Hex: 0D
Effect: Moves print head to the left margin without feeding paper
"""

LF: Final[bytes] = b"\n"
"""
Line Feed.

Command: LF
Hex: 0A
Effect: Advances paper by the current line spacing (default 1/6 inch)
"""

FF: Final[bytes] = b"\x0c"
"""
Form Feed.

Command: FF
Hex: 0C
Effect: Advances to top-of-form on continuous paper, ejects cut sheets
"""

HT: Final[bytes] = b"\t"
"""
Horizontal Tab.

Command: HT
Hex: 09
Effect: Moves print head to the next tab stop (default every 8 columns)
"""

CRLF: Final[bytes] = CR + LF
"""
Carriage Return + Line Feed.

The ESC/P manual asks for CR before LF so the horizontal position is reset
even when the printer's auto line feed setting is off.
"""

CRFF: Final[bytes] = CR + FF
"""Carriage Return + Form Feed, the recommended page eject sequence."""

# =============================================================================
# UNIT CONVERSION
# =============================================================================

CM_PER_INCH: Final[float] = 2.54

UNITS_PER_INCH_9PIN: Final[int] = 216
UNITS_PER_INCH_24PIN: Final[int] = 180
RELATIVE_HORIZONTAL_UNITS_PER_INCH: Final[int] = 120
ABSOLUTE_HORIZONTAL_UNITS_PER_INCH: Final[int] = 60

# ESC J accepts 0-255, but feeds above 127 misbehave on real hardware
# (for example at 1.5 cm), so larger feeds are split into 127-unit steps.
MAX_VERTICAL_STEP: Final[int] = 127


def centimeters_to_units(centimeters: float, units_per_inch: int) -> int:
    """
    Convert a distance to whole printer motion units.

    The result is truncated, so the physical motion can fall short of the
    requested distance by less than one unit.

    Args:
        centimeters: Distance in centimeters (>= 0).
        units_per_inch: Motion resolution of the target command.

    Returns:
        floor(centimeters / 2.54 * units_per_inch).

    Raises:
        ValueError: If centimeters is negative, infinite or NaN.

    Example:
        >>> centimeters_to_units(2.54, 120)
        120
        >>> centimeters_to_units(3.0, UNITS_PER_INCH_24PIN)
        212
    """
    if not math.isfinite(centimeters) or centimeters < 0:
        raise ValueError(f"Distance must be a finite value >= 0 cm, got {centimeters}")

    inches = centimeters / CM_PER_INCH
    return int(inches * units_per_inch)


def split_vertical_advance(units: int, step: int = MAX_VERTICAL_STEP) -> Iterator[int]:
    """
    Split a vertical feed into ESC J sized steps.

    Yields min(remaining, step) until the remaining distance is used up, so
    every value is in 1..step and the values sum to units. Nothing is
    yielded for zero units.

    Example:
        >>> list(split_vertical_advance(212))
        [127, 85]
    """
    if step < 1:
        raise ValueError(f"Step must be >= 1, got {step}")

    remaining = units
    while remaining > 0:
        yield min(remaining, step)
        remaining -= step


# =============================================================================
# HORIZONTAL POSITIONING
# =============================================================================


def set_horizontal_position(position: int) -> bytes:
    """
    Set absolute horizontal print position.

    Command: ESC $ nL nH
    Hex: 1B 24 nL nH
    Verified: ✅ ESC/P Reference Manual

    Args:
        position: Position in 1/60 inch units from left margin (0-32767).

    Returns:
        ESC/P command bytes.

    Raises:
        ValueError: If position is out of range.

    Technical Details:
        - Unit: 1/60 inch
        - Origin: Left margin (not paper edge)
        - Position = nH * 256 + nL
        - Commands beyond the right margin are ignored by the printer

    Example:
        >>> set_horizontal_position(120)  # 2 inches
        b'\\x1b$x\\x00'
    """
    if not (0 <= position <= 32767):
        raise ValueError(f"Position must be 0-32767, got {position}")

    # Convert to little-endian 16-bit value
    nL = position & 0xFF
    nH = (position >> 8) & 0xFF

    return ESC + b"$" + bytes([nL, nH])


def set_relative_horizontal_position(offset: int) -> bytes:
    """
    Move print head relative to current position (horizontal).

    Command: ESC '\\' nL nH
    Hex: 1B 5C nL nH
    Verified: ✅ ESC/P Reference Manual

    Args:
        offset: Offset in 1/120 inch units (-32768 to +32767).
                Positive = move right, Negative = move left.

    Returns:
        ESC/P command bytes.

    Raises:
        ValueError: If offset is out of range.

    Technical Details:
        - Unit: 1/120 inch in draft mode
        - Origin: Current print position
        - Negative offsets use two's complement
    """
    if not (-32768 <= offset <= 32767):
        raise ValueError(f"Offset must be -32768 to 32767, got {offset}")

    # Convert to little-endian signed 16-bit value (two's complement)
    if offset < 0:
        offset = (1 << 16) + offset

    nL = offset & 0xFF
    nH = (offset >> 8) & 0xFF

    return ESC + b"\\" + bytes([nL, nH])


# =============================================================================
# VERTICAL POSITIONING
# =============================================================================


def advance_vertical(n: int) -> bytes:
    """
    Advance paper by n vertical motion units.

    Command: ESC J n
    Hex: 1B 4A n
    Verified: ✅ ESC/P Reference Manual

    Args:
        n: Distance in motion units (0-255): n/216 inch on 9-pin printers,
           n/180 inch on 24/48-pin printers.

    Returns:
        ESC/P command bytes.

    Raises:
        ValueError: If n is out of range.

    Note:
        One-time feed. The line spacing setting is not changed and the
        horizontal position is kept.
    """
    if not (0 <= n <= 255):
        raise ValueError(f"Advance distance must be 0-255, got {n}")

    return ESC + b"J" + bytes([n])
