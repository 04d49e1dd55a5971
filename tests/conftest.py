"""Test configuration and fixtures for disassembler tests."""

import pytest
import jax.numpy as jnp
from chipdis import create_memory, disassemble_word, load_program, PROGRAM_START


@pytest.fixture
def fresh_memory():
    """Provide a zeroed 4 KiB memory image for each test."""
    return create_memory()


@pytest.fixture
def program_memory(fresh_memory):
    """Memory with a short program at 0x200."""
    program = bytes([
        0x00, 0xE0,  # cls
        0x6A, 0x3F,  # movi Va 0x3f
        0x81, 0x24,  # addr V1 V2
        0x12, 0x00,  # jump 0x200
    ])
    return load_program(fresh_memory, program)


def render(word, address=PROGRAM_START):
    """Helper to disassemble a single word at ``address``."""
    return disassemble_word(word, address)


def body(word):
    """Helper returning the line text after the address and opcode columns."""
    return render(word).text[len("0x0200 0x0000  "):]


def setup_words(memory, address, words):
    """Helper to put big-endian words in memory."""
    data = []
    for word in words:
        data.extend([word >> 8, word & 0xFF])
    return memory.at[address:address + len(data)].set(jnp.array(data, dtype=jnp.uint8))
