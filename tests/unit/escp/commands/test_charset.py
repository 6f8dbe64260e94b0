"""Unit tests for character table assignment and selection."""

import pytest

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


def test_registered_codes() -> None:
    assert CharacterTable.USA.value == 1
    assert CharacterTable.BRAZIL.value == 25
    assert len({table.value for table in CharacterTable}) == len(list(CharacterTable))


def test_every_table_has_a_working_codec() -> None:
    for table in CharacterTable:
        assert "A".encode(table.codec) == b"A"


def test_from_name_is_case_insensitive() -> None:
    assert CharacterTable.from_name("brazil") is CharacterTable.BRAZIL
    assert CharacterTable.from_name(" USA ") is CharacterTable.USA


def test_from_name_unknown() -> None:
    with pytest.raises(ValueError):
        CharacterTable.from_name("KLINGON")


def test_assign_character_table_layout() -> None:
    cmd = assign_character_table(CharacterTable.BRAZIL)
    assert cmd == bytes([27, 40, 116, 3, 0, 1, 25, 0])
    assert DEFAULT_TABLE_SLOT == 1


def test_assign_accepts_raw_code_and_slot() -> None:
    assert assign_character_table(17, slot=2) == bytes([27, 40, 116, 3, 0, 2, 17, 0])


def test_select_character_table() -> None:
    assert select_character_table() == bytes([27, 116, 1])
    assert select_character_table(0) == bytes([27, 116, 0])


@pytest.mark.parametrize("table", list(CharacterTable))
def test_set_character_table_assigns_then_selects(table: CharacterTable) -> None:
    cmd = set_character_table(table)
    assert cmd[:8] == assign_character_table(table)
    assert cmd[8:] == select_character_table(1)
    assert len(cmd) == 11


@pytest.mark.parametrize("slot", [-1, 4])
def test_slot_out_of_range(slot: int) -> None:
    with pytest.raises(ValueError):
        assign_character_table(CharacterTable.USA, slot=slot)
    with pytest.raises(ValueError):
        select_character_table(slot)


@pytest.mark.parametrize("code", [-1, 256])
def test_code_out_of_range(code: int) -> None:
    with pytest.raises(ValueError):
        assign_character_table(code)


def test_table_code() -> None:
    assert table_code(CharacterTable.PC852) == 10
    assert table_code(42) == 42


@pytest.mark.parametrize(
    "table, expected",
    [
        (CharacterTable.USA, "cp437"),
        (CharacterTable.PC866.value, "cp866"),
        (25, "latin-1"),
        (2, FALLBACK_CODEC),
        (0, FALLBACK_CODEC),
        (255, FALLBACK_CODEC),
    ],
)
def test_table_codec(table: object, expected: str) -> None:
    assert table_codec(table) == expected  # type: ignore[arg-type]


def test_fallback_codec_passes_every_byte() -> None:
    assert bytes(range(256)).decode(FALLBACK_CODEC).encode(FALLBACK_CODEC) == bytes(range(256))


@pytest.mark.parametrize("code", [-1, 256])
def test_table_codec_rejects_out_of_range(code: int) -> None:
    with pytest.raises(ValueError):
        table_codec(code)
