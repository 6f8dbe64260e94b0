"""
Printer control commands for ESC/P and ESC/P2 printers.

Contains the escape prefix shared by every command and the hardware reset
sequence sent at the start of each print job.

Reference: Epson ESC/P Reference Manual, "Printer control"
Compatibility: LX-300, LQ-570, FX-890 and other ESC/P, ESC/P2 models
"""

from typing import Final

__all__ = [
    "ESC",
    "ESC_INIT_PRINTER",
]

# =============================================================================
# ESCAPE PREFIX
# =============================================================================

ESC: Final[bytes] = b"\x1b"
"""
Escape character.

Hex: 1B
ASCII: 27
Effect: Starts every ESC/P command sequence
"""

# =============================================================================
# PRINTER RESET
# =============================================================================

ESC_INIT_PRINTER: Final[bytes] = ESC + b"@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
ASCII: ESC '@'
Effect: Restores power-on defaults (pitch, quality, margins, tabs, tables)
Buffer: Data already in the print buffer is printed, not discarded
Verified: ✅ ESC/P Reference Manual

Note:
    Does not feed paper. Always send this first so that settings left over
    from a previous job do not leak into the new one.

Example:
    >>> printer.send(ESC_INIT_PRINTER)
    >>> printer.send(b"Fresh defaults\\r\\n")
"""
