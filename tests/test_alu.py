"""Tests for ALU instruction rendering (8xxx)."""

import pytest
from chipdis.decode import decode
from conftest import render, body


class TestBasicALU:
    """Test register moves and bitwise operations."""

    def test_alu_set(self):
        """8XY0 - Set VX = VY."""
        assert body(0x8120) == "movr V1 V2 //V1 = V2"

    def test_alu_or(self):
        assert body(0x8121) == "or V1 V2 //V1 |= V2 (bitwise OR)"

    def test_alu_and(self):
        assert body(0x8122) == "and V1 V2 //V1 &= V2 (bitwise AND)"

    def test_alu_xor(self):
        assert body(0x8123) == "xor V1 V2 //V1 ^= V2 (bitwise XOR)"


class TestALUArithmetic:
    """Test arithmetic operations and their flag comments."""

    def test_alu_add(self):
        """8XY4 - Add with carry."""
        line = render(0x8124)
        instruction = decode(0x8124)
        assert line.mnemonic == "addr"
        assert (instruction.group, instruction.x, instruction.y, instruction.n) == (8, 1, 2, 4)
        assert body(0x8124) == "addr V1 V2 //V1 = V1 + V2 Vf set to 1 if there's a carry"

    def test_alu_add_hex_registers(self):
        """Register names in comments are hex, like the operands."""
        assert body(0x8AB4) == "addr Va Vb //Va = Va + Vb Vf set to 1 if there's a carry"

    def test_alu_sub_xy(self):
        assert body(0x8125) == "subr V1 V2 //V1 = V1 - V2 Vf set to 0 if there's a borrow"

    def test_alu_sub_yx(self):
        assert body(0x8127) == "nsubr V1 V2 //V1 = V2 - V1 Vf set to 0 if there's a borrow"


class TestALUShifts:
    """Test shifts, which only take VX."""

    def test_shift_right(self):
        assert body(0x8126) == (
            "shr V1 //Stores the least significant bit of V1 in Vf "
            "and then shifts V1 to the right by 1"
        )

    def test_shift_left(self):
        assert body(0x834E) == (
            "shl V3 //Stores the most significant bit of V3 in Vf "
            "and then shifts V3 to the left by 1"
        )


@pytest.mark.parametrize("word", [0x8128, 0x8129, 0x812A, 0x812B, 0x812C, 0x812D, 0x812F])
def test_undefined_alu_operation(word):
    """Unmatched sub-opcodes fall through to an empty mnemonic."""
    line = render(word)
    assert line.mnemonic == ""
    assert body(word) == ""
