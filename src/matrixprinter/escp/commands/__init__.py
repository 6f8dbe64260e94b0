"""
ESC/P command constants for dot matrix printers.

This package contains the low-level ESC/P and ESC/P2 command bytes used by
the printer driver, as named constants and small pure builder functions.
Builders validate their operands and raise ValueError for values the command
cannot encode.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── hardware.py             # ESC prefix, printer reset
    ├── fonts.py                # CPI, proportional spacing
    ├── print_quality.py        # Draft/LQ modes
    ├── text_formatting.py      # Bold
    ├── charset.py              # Character table assignment and selection
    ├── positioning.py          # CR/LF/FF/HT, horizontal/vertical motion
    └── page_control.py         # Margins

Compatibility Notes:
    - 9-pin ESC/P printers (FX, LX series): ESC J unit is 1/216 inch
    - 24/48-pin ESC/P2 printers (LQ series): ESC J unit is 1/180 inch
    - ESC ( t (character table assignment) is an ESC/P2 command

Usage:
    >>> from matrixprinter.escp.commands import ESC_BOLD_ON, ESC_BOLD_OFF
    >>> printer.send(ESC_BOLD_ON + b"Bold text" + ESC_BOLD_OFF)
"""

from matrixprinter.escp.commands.charset import (
    DEFAULT_TABLE_SLOT,
    FALLBACK_CODEC,
    CharacterTable,
    assign_character_table,
    select_character_table,
    set_character_table,
    table_code,
    table_codec,
)
from matrixprinter.escp.commands.fonts import (
    ESC_10CPI,
    ESC_15CPI,
    ESC_PROPORTIONAL_OFF,
    ESC_PROPORTIONAL_ON,
    set_proportional,
)
from matrixprinter.escp.commands.hardware import (
    ESC,
    ESC_INIT_PRINTER,
)
from matrixprinter.escp.commands.page_control import (
    set_left_margin,
    set_right_margin,
)
from matrixprinter.escp.commands.positioning import (
    ABSOLUTE_HORIZONTAL_UNITS_PER_INCH,
    CM_PER_INCH,
    CR,
    CRFF,
    CRLF,
    FF,
    HT,
    LF,
    MAX_VERTICAL_STEP,
    RELATIVE_HORIZONTAL_UNITS_PER_INCH,
    UNITS_PER_INCH_9PIN,
    UNITS_PER_INCH_24PIN,
    advance_vertical,
    centimeters_to_units,
    set_horizontal_position,
    set_relative_horizontal_position,
    split_vertical_advance,
)
from matrixprinter.escp.commands.print_quality import (
    ESC_DRAFT_MODE,
    ESC_LQ_MODE,
    select_print_quality,
)
from matrixprinter.escp.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    set_bold,
)

__all__ = [
    # Hardware
    "ESC",
    "ESC_INIT_PRINTER",
    # Fonts
    "ESC_10CPI",
    "ESC_15CPI",
    "ESC_PROPORTIONAL_ON",
    "ESC_PROPORTIONAL_OFF",
    "set_proportional",
    # Print quality
    "ESC_DRAFT_MODE",
    "ESC_LQ_MODE",
    "select_print_quality",
    # Text formatting
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "set_bold",
    # Charset
    "CharacterTable",
    "DEFAULT_TABLE_SLOT",
    "FALLBACK_CODEC",
    "assign_character_table",
    "select_character_table",
    "set_character_table",
    "table_code",
    "table_codec",
    # Positioning
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
    "centimeters_to_units",
    "split_vertical_advance",
    "set_horizontal_position",
    "set_relative_horizontal_position",
    "advance_vertical",
    # Page control
    "set_left_margin",
    "set_right_margin",
]
