"""
Print quality mode commands.

Contains commands for switching between draft and letter quality (LQ/NLQ)
print modes.

Reference: Epson ESC/P Reference Manual, "Print quality"
"""

from typing import Final

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "ESC_DRAFT_MODE",
    "ESC_LQ_MODE",
    "select_print_quality",
]

# =============================================================================
# PRINT QUALITY MODES
# =============================================================================

ESC_DRAFT_MODE: Final[bytes] = ESC + b"x0"
"""
Select draft quality mode.

Command: ESC x 0
Hex: 1B 78 30
Effect: High-speed draft printing, visible dot pattern
Use Case: High-volume printing, internal documents
Reset: Changed by ESC x 1

Example:
    >>> printer.send(ESC_DRAFT_MODE)
    >>> printer.send(b"Fast draft quality text")
"""

ESC_LQ_MODE: Final[bytes] = ESC + b"x1"
"""
Select letter quality mode.

Command: ESC x 1
Hex: 1B 78 31
Effect: Multi-pass printing with smoother characters
Note: Letter quality on 24-pin heads, near letter quality on 9-pin heads
Reset: Changed by ESC x 0

Example:
    >>> printer.send(ESC_LQ_MODE)
    >>> printer.send(b"High quality text")
"""


def select_print_quality(letter_quality: bool) -> bytes:
    """Return ESC x 1 for letter quality, ESC x 0 for draft."""
    return ESC_LQ_MODE if letter_quality else ESC_DRAFT_MODE
