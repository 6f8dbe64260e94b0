"""
Character pitch and proportional spacing commands.

Contains commands for switching the horizontal pitch between 10 and 15
characters per inch and for toggling proportional spacing.

Reference: Epson ESC/P Reference Manual, "Character pitch"
"""

from typing import Final

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "ESC_10CPI",
    "ESC_15CPI",
    "ESC_PROPORTIONAL_ON",
    "ESC_PROPORTIONAL_OFF",
    "set_proportional",
]

# =============================================================================
# CHARACTER PITCH
# =============================================================================

ESC_10CPI: Final[bytes] = ESC + b"P"
"""
Select 10 CPI (pica) pitch.

Command: ESC P
Hex: 1B 50
Effect: 10 characters per inch, condensed mode still available
Default: Power-on pitch on most models
Reset: Changed by ESC M, ESC g or proportional mode

Example:
    >>> printer.send(ESC_10CPI + b"Pica text")
"""

ESC_15CPI: Final[bytes] = ESC + b"g"
"""
Select 15 CPI pitch.

Command: ESC g
Hex: 1B 67
Effect: 15 characters per inch
Note: Condensed mode is not available at 15 CPI
Reset: Changed by ESC P, ESC M or proportional mode

Example:
    >>> printer.send(ESC_15CPI + b"Narrow text")
"""

# =============================================================================
# PROPORTIONAL SPACING
# =============================================================================

ESC_PROPORTIONAL_ON: Final[bytes] = ESC + b"p1"
"""
Enable proportional spacing.

Command: ESC p 1
Hex: 1B 70 31
Effect: Character width varies with the glyph ('i' narrower than 'm')
Note: Firmware accepts both 01h and 31h; the ASCII digit form is sent

Example:
    >>> printer.send(ESC_PROPORTIONAL_ON + b"Proportional text")
"""

ESC_PROPORTIONAL_OFF: Final[bytes] = ESC + b"p0"
"""
Disable proportional spacing (fixed pitch).

Command: ESC p 0
Hex: 1B 70 30
Effect: All characters share the current pitch

Example:
    >>> printer.send(ESC_PROPORTIONAL_OFF + b"Monospace text")
"""


def set_proportional(enabled: bool) -> bytes:
    """
    Return the proportional-mode command for the requested state.

    Args:
        enabled: True for proportional spacing, False for fixed pitch.

    Returns:
        ESC/P command bytes.
    """
    return ESC_PROPORTIONAL_ON if enabled else ESC_PROPORTIONAL_OFF
