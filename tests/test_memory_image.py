"""Tests for memory image helpers."""

import jax.numpy as jnp
import numpy as np
import pytest
from chipdis import BoundsError, create_memory, load_program, load_rom, read_word
from chipdis.memory import as_memory, program_words


class TestCreateMemory:
    """Test memory creation."""

    def test_zeroed(self):
        memory = create_memory()
        assert memory.shape == (4096,)
        assert memory.dtype == jnp.uint8
        assert int(jnp.sum(memory)) == 0

    def test_as_memory_from_bytes(self):
        memory = as_memory(b"\x01\xff")
        assert memory.dtype == jnp.uint8
        assert memory.tolist() == [1, 255]


class TestLoadProgram:
    """Test program loading."""

    def test_load_at_base(self, fresh_memory):
        memory = load_program(fresh_memory, bytes([0x12, 0x34]))
        assert int(memory[0x200]) == 0x12
        assert int(memory[0x201]) == 0x34
        assert int(fresh_memory[0x200]) == 0

    def test_program_too_large(self, fresh_memory):
        with pytest.raises(BoundsError):
            load_program(fresh_memory, bytes(4096 - 0x200 + 1))

    def test_program_fills_memory(self, fresh_memory):
        memory = load_program(fresh_memory, bytes([0xAA]) * (4096 - 0x200))
        assert int(memory[4095]) == 0xAA

    def test_load_rom(self, fresh_memory, tmp_path):
        rom = tmp_path / "test.ch8"
        rom.write_bytes(bytes([0x00, 0xE0, 0x12, 0x00]))
        memory = load_rom(fresh_memory, str(rom))
        assert memory[0x200:0x204].tolist() == [0x00, 0xE0, 0x12, 0x00]


class TestWords:
    """Test word reads."""

    def test_read_word(self, program_memory):
        assert read_word(program_memory, 0x202) == 0x6A3F

    def test_read_word_past_end(self, fresh_memory):
        with pytest.raises(BoundsError):
            read_word(fresh_memory, 4095)

    def test_read_word_negative(self, fresh_memory):
        with pytest.raises(BoundsError):
            read_word(fresh_memory, -2)

    def test_program_words(self, program_memory):
        words = program_words(program_memory, 0x200, 0x208)
        assert isinstance(words, np.ndarray)
        assert words.tolist() == [0x00E0, 0x6A3F, 0x8124, 0x1200]
