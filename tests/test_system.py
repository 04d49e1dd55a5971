"""Tests for system instruction rendering (0xxx)."""

import pytest
from chipdis import Segment, Tag
from conftest import render, body


def test_clear_screen():
    """00E0 - Clear display."""
    line = render(0x00E0)
    assert line.mnemonic == "cls"
    assert body(0x00E0) == "cls //Clear Screen;"


def test_return():
    """00EE - Return from subroutine, no operands."""
    line = render(0x00EE)
    assert line.mnemonic == "return"
    assert [s for s in line.segments if s.tag in (Tag.REGISTER, Tag.LITERAL)] == []


def test_machine_code_call():
    """0NNN - Machine code routine."""
    assert body(0x0123) == "sys 0x123 //Call machine code routine at 0x123 (ignored)"


def test_zero_word_has_no_mnemonic():
    """0000 - Empty memory renders without a mnemonic."""
    line = render(0x0000)
    assert line.mnemonic == ""
    assert line.text == "0x0200 0x0000  "


def test_line_layout():
    """Address, opcode and separator precede the instruction."""
    line = render(0x00E0, address=0x0ABC)
    assert line.segments[0].text == "0x0abc "
    assert line.segments[0].tag is Tag.ADDRESS
    assert line.segments[1].text == "0x00e0 "
    assert line.segments[1].tag is Tag.OPCODE
    assert line.segments[2] == Segment(" ", Tag.KEYWORD)
    assert line.mnemonic == "cls"
    assert line.address == 0x0ABC
    assert line.opcode == 0x00E0


@pytest.mark.parametrize("word", [0x000E, 0x001E, 0x00FE])
def test_return_matches_any_y(word):
    """00?E - Any word with X == 0 and N == E renders as return."""
    line = render(word)
    assert line.mnemonic == "return"
    assert body(word) == "return //Return from subroutine"


@pytest.mark.parametrize("word", [0x01EE, 0x00E1, 0x0F00])
def test_other_system_words_are_sys(word):
    """0NNN outside 00E0 / 00?E falls back to sys."""
    assert render(word).mnemonic == "sys"
