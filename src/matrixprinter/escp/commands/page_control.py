"""
Page layout commands.

Reference: Epson ESC/P Reference Manual, "Page format"
"""

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "set_left_margin",
    "set_right_margin",
]

# =============================================================================
# MARGIN CONTROL
# =============================================================================


def set_left_margin(columns: int) -> bytes:
    """
    Set left margin position.

    Command: ESC l n
    Hex: 1B 6C n

    Args:
        columns: Left margin in columns at the current pitch (0-255).

    Returns:
        ESC/P command bytes.

    Raises:
        ValueError: If columns is out of range.

    Note:
        Margin is measured from the left edge of the printable area.
        At 10 CPI: 1 column = 0.1 inch.

    Example:
        >>> # 1 inch left margin at 10 CPI
        >>> printer.send(set_left_margin(10))
    """
    if not (0 <= columns <= 255):
        raise ValueError(f"Left margin must be 0-255, got {columns}")

    return ESC + b"l" + bytes([columns])


def set_right_margin(columns: int) -> bytes:
    """
    Set right margin position.

    Command: ESC Q n
    Hex: 1B 51 n

    Args:
        columns: Right margin in columns from the left edge (0-255).

    Returns:
        ESC/P command bytes.

    Raises:
        ValueError: If columns is out of range.

    Note:
        Right margin must be greater than left margin, otherwise the
        printer ignores the command.
    """
    if not (0 <= columns <= 255):
        raise ValueError(f"Right margin must be 0-255, got {columns}")

    return ESC + b"Q" + bytes([columns])
