"""CHIP-8 memory image helpers."""

import jax.numpy as jnp
import numpy as np

from chipdis.constants import MEMORY_SIZE, PROGRAM_START
from chipdis.decode import pack_word
from chipdis.errors import BoundsError, InvalidAddressError


def create_memory(memory_size: int = MEMORY_SIZE) -> jnp.ndarray:
    """Create a zeroed memory image."""
    return jnp.zeros(memory_size, dtype=jnp.uint8)


def as_memory(memory) -> jnp.ndarray:
    """Coerce bytes, sequences and arrays to a ``uint8`` image."""
    if isinstance(memory, (bytes, bytearray, memoryview)):
        memory = np.frombuffer(bytes(memory), dtype=np.uint8)
    return jnp.asarray(memory, dtype=jnp.uint8)


def load_program(memory, data: bytes, program_base: int = PROGRAM_START) -> jnp.ndarray:
    """Copy program bytes into memory starting at ``program_base``."""
    memory = as_memory(memory)
    end = program_base + len(data)
    if end > memory.shape[0]:
        raise BoundsError(
            f"Program of {len(data)} bytes does not fit at 0x{program_base:03x} "
            f"in {memory.shape[0]} bytes of memory"
        )
    program = jnp.array(list(data), dtype=jnp.uint8)
    return memory.at[program_base:end].set(program)


def load_rom(memory, filename: str, program_base: int = PROGRAM_START) -> jnp.ndarray:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(memory, rom_data, program_base)


def read_word(memory, address: int) -> int:
    """Fetch the big-endian word at ``address``."""
    if address < 0 or address + 1 >= len(memory):
        raise BoundsError(f"Word at 0x{address:04x} lies outside {len(memory)} bytes of memory")
    return pack_word(memory[address], memory[address + 1])


def program_words(memory, program_base: int = PROGRAM_START, memory_size: int = MEMORY_SIZE) -> np.ndarray:
    """All opcode words between ``program_base`` and ``memory_size``.

    Words are packed in one vectorised pass; the result is a host-side
    ``uint16`` array.
    """
    if program_base % 2 or memory_size % 2:
        raise InvalidAddressError(
            f"Program region 0x{program_base:04x}-0x{memory_size:04x} is not word aligned"
        )
    if not 0 <= program_base <= memory_size:
        raise InvalidAddressError(
            f"Program base 0x{program_base:04x} outside memory of {memory_size} bytes"
        )

    memory = as_memory(memory)
    if memory.shape[0] < memory_size:
        raise BoundsError(
            f"Memory image has {memory.shape[0]} bytes, expected at least {memory_size}"
        )

    high = memory[program_base:memory_size:2].astype(jnp.uint16)
    low = memory[program_base + 1:memory_size:2].astype(jnp.uint16)
    return np.asarray((high << 8) | low)
