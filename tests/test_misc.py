"""Tests for miscellaneous instruction rendering (Fxxx)."""

import pytest
from chipdis import Tag
from chipdis.mnemonics import all_rules
from conftest import render, body


class TestTimers:
    """Test timer-related instructions."""

    def test_get_delay_timer(self):
        assert body(0xF307) == "rmovt V3 // V3 = DelayTimer"

    def test_set_delay_timer(self):
        assert body(0xF315) == "movt V3 // DelayTimer = V3"

    def test_set_sound_timer(self):
        assert body(0xF318) == "movs V3 // SoundTimer = V3"


class TestIndexAndMemory:
    """Test I and memory transfer instructions."""

    def test_wait_for_key(self):
        assert body(0xF30A) == "waitk V3 // V3 = keypress() -- Block until key pressed"

    def test_add_to_index(self):
        assert body(0xF31E) == "iaddr V3 // I += V3"

    def test_font_character(self):
        assert body(0xF329) == "digit V3 // I is set to the address for the character (0-F) in V3"

    def test_bcd(self):
        assert body(0xF333) == "bcd V3 // Stores the BCD of V3 at I, I+1 and I+2"

    def test_store_registers(self):
        assert body(0xFA55) == "store Va // Stores V0 to Va in memory starting at I"

    def test_load_registers(self):
        assert body(0xFF65) == "load Vf // Fills V0 to Vf from memory starting at I"


@pytest.mark.parametrize("word", [0xF300, 0xF306, 0xF366, 0xF3FF])
def test_unknown_misc_instruction(word):
    line = render(word)
    assert line.mnemonic == ""
    assert [s.tag for s in line.segments] == [Tag.ADDRESS, Tag.OPCODE, Tag.KEYWORD, Tag.KEYWORD]


def test_table_covers_documented_opcodes():
    """35 documented opcodes, one distinct mnemonic each."""
    rules = all_rules()
    assert len(rules) == 35
    assert len({rule.mnemonic for rule in rules}) == 35
