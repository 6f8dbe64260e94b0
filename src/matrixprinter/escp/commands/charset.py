"""
Character table commands for ESC/P2 printers.

ESC/P2 printers keep a set of registered character tables in firmware. A
registered table is first assigned to one of the selectable slots (0-3) and
then the slot is selected as the active table. Printers expect the
assignment to arrive before the selection.

Reference: Epson ESC/P2 Reference Manual, "ESC ( t" and "ESC t"
"""

from enum import Enum
from typing import Final, Union

from matrixprinter.escp.commands.hardware import ESC

__all__ = [
    "CharacterTable",
    "DEFAULT_TABLE_SLOT",
    "FALLBACK_CODEC",
    "assign_character_table",
    "select_character_table",
    "set_character_table",
    "table_code",
    "table_codec",
]

# =============================================================================
# CHARACTER TABLE CONSTANTS
# =============================================================================

DEFAULT_TABLE_SLOT: Final[int] = 1
MAX_TABLE_SLOT: Final[int] = 3

FALLBACK_CODEC: Final[str] = "latin-1"
"""Codec for table codes that have no registered Python codec."""


class CharacterTable(Enum):
    """
    Registered character tables (ESC ( t d3 codes).

    Each table defines the glyphs for codes 128-255. Codes 0-127 are ASCII.
    """

    USA = 1  # PC437
    """PC437 - US/Standard (IBM PC original character set)."""

    PC850 = 3
    """PC850 - Multilingual (Latin 1, Western European)."""

    PC860 = 7
    """PC860 - Portuguese."""

    PC863 = 8
    """PC863 - Canadian-French."""

    PC865 = 9
    """PC865 - Nordic."""

    PC852 = 10
    """PC852 - Eastern European (Latin 2)."""

    PC866 = 14
    """PC866 - Cyrillic."""

    BRAZIL = 25  # BRASCII
    """BRASCII - Brazilian Portuguese."""

    @property
    def codec(self) -> str:
        """Python codec whose byte mapping matches the printer table."""
        return _TABLE_CODECS[self]

    @classmethod
    def from_name(cls, name: str) -> "CharacterTable":
        """Look a table up by member name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown character table: {name!r}") from None


_TABLE_CODECS: Final[dict[CharacterTable, str]] = {
    CharacterTable.USA: "cp437",
    CharacterTable.PC850: "cp850",
    CharacterTable.PC860: "cp860",
    CharacterTable.PC863: "cp863",
    CharacterTable.PC865: "cp865",
    CharacterTable.PC852: "cp852",
    CharacterTable.PC866: "cp866",
    CharacterTable.BRAZIL: "latin-1",
}


def table_code(table: Union[CharacterTable, int]) -> int:
    """Return the ESC ( t code byte for a table, validating raw codes."""
    code = table.value if isinstance(table, CharacterTable) else table
    if not (0 <= code <= 255):
        raise ValueError(f"Character table code must be 0-255, got {code}")
    return code


def table_codec(table: Union[CharacterTable, int]) -> str:
    """
    Return the Python codec matching a character table.

    Raw codes of registered tables resolve to that table's codec; any other
    code maps to FALLBACK_CODEC, which passes bytes 0x00-0xFF through.
    """
    code = table_code(table)
    try:
        return CharacterTable(code).codec
    except ValueError:
        return FALLBACK_CODEC


def _check_slot(slot: int) -> None:
    if not (0 <= slot <= MAX_TABLE_SLOT):
        raise ValueError(f"Table slot must be 0-{MAX_TABLE_SLOT}, got {slot}")


# =============================================================================
# TABLE ASSIGNMENT AND SELECTION
# =============================================================================


def assign_character_table(
    table: Union[CharacterTable, int], slot: int = DEFAULT_TABLE_SLOT
) -> bytes:
    """
    Assign a registered character table to a selectable slot.

    Command: ESC ( t 3 0 d1 d2 0
    Hex: 1B 28 74 03 00 d1 d2 00

    Args:
        table: Registered table (enum member or raw d2 code 0-255).
        slot: Selectable table slot d1 (0-3).

    Returns:
        ESC/P2 command bytes (always 8 bytes).

    Raises:
        ValueError: If slot or table code is out of range.

    Note:
        The parameter length is always 3 (nL=3, nH=0) and d3 is always 0.
        Assigning does not activate the table; follow with
        select_character_table().

    Example:
        >>> assign_character_table(CharacterTable.BRAZIL)
        b'\\x1b(t\\x03\\x00\\x01\\x19\\x00'
    """
    _check_slot(slot)
    code = table_code(table)
    return ESC + b"(t" + bytes([3, 0, slot, code, 0])


def select_character_table(slot: int = DEFAULT_TABLE_SLOT) -> bytes:
    """
    Select a slot as the active character table.

    Command: ESC t n
    Hex: 1B 74 n

    Raises:
        ValueError: If slot is out of range.
    """
    _check_slot(slot)
    return ESC + b"t" + bytes([slot])


def set_character_table(
    table: Union[CharacterTable, int], slot: int = DEFAULT_TABLE_SLOT
) -> bytes:
    """
    Assign a table to a slot and activate it in one sequence.

    Returns the assignment command immediately followed by the selection
    command.

    Example:
        >>> printer.send(set_character_table(CharacterTable.PC866))
        >>> printer.send("Привет".encode(CharacterTable.PC866.codec))
    """
    return assign_character_table(table, slot) + select_character_table(slot)
