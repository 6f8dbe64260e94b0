"""
Text emphasis ESC/P commands.

Reference: Epson ESC/P Reference Manual, "Print enhancement"
Compatibility: All ESC/P and ESC/P2 printers
"""

from typing import Final

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "set_bold",
]

# =============================================================================
# BOLD (EMPHASIZED) MODE
# =============================================================================

ESC_BOLD_ON: Final[bytes] = ESC + b"E"
"""
Enable bold (emphasized) printing.

Command: ESC E
Hex: 1B 45
Effect: Darker text printed with a slight horizontal offset
Reset: Cancelled by ESC F or printer reset

Example:
    >>> printer.send(ESC_BOLD_ON + b"Bold text" + ESC_BOLD_OFF)
"""

ESC_BOLD_OFF: Final[bytes] = ESC + b"F"
"""
Disable bold (emphasized) printing.

Command: ESC F
Hex: 1B 46
"""


def set_bold(enabled: bool) -> bytes:
    """Return ESC E for bold or ESC F for normal weight."""
    return ESC_BOLD_ON if enabled else ESC_BOLD_OFF
