"""Disassembly session: a memory image together with its cached listing."""

from typing import Tuple

import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from chipdis.constants import MEMORY_SIZE, PROGRAM_START
from chipdis.disassembler import disassemble, line_index_for_address
from chipdis.errors import InvalidAddressError
from chipdis.memory import as_memory
from chipdis.segments import DisassembledLine


class DisassemblySession(PyTreeNode):
    """Immutable pairing of a memory image and the listing built from it.

    The listing is computed once in ``create``. Programs that rewrite
    their own code make it stale; ``is_stale`` detects that but nothing
    re-disassembles automatically.
    """
    memory: jnp.ndarray
    lines: Tuple[DisassembledLine, ...] = field(pytree_node=False, default=())
    program_base: int = field(pytree_node=False, default=PROGRAM_START)
    memory_size: int = field(pytree_node=False, default=MEMORY_SIZE)

    @classmethod
    def create(
        cls,
        memory,
        program_base: int = PROGRAM_START,
        memory_size: int = MEMORY_SIZE,
    ) -> "DisassemblySession":
        memory = as_memory(memory)
        lines = disassemble(memory, program_base, memory_size)
        return cls(
            memory=memory,
            lines=lines,
            program_base=program_base,
            memory_size=memory_size,
        )

    def line_index(self, address: int) -> int:
        """Listing position of ``address``; raises if it is outside the listing."""
        index = line_index_for_address(address, self.program_base)
        if index >= len(self.lines):
            raise InvalidAddressError(
                f"Address 0x{address:04x} is beyond the end of the listing "
                f"(0x{self.memory_size:04x})"
            )
        return index

    def line_at(self, address: int) -> DisassembledLine:
        return self.lines[self.line_index(address)]

    def window(self, address: int, context: int = 8) -> Tuple[DisassembledLine, ...]:
        """Lines within ``context`` positions of ``address``, clamped to the listing."""
        index = self.line_index(address)
        start = max(0, index - context)
        return self.lines[start:index + context + 1]

    def is_stale(self, memory) -> bool:
        """True when the program region of ``memory`` differs from this session's image."""
        memory = as_memory(memory)
        if memory.shape[0] < self.memory_size:
            return True
        region = slice(self.program_base, self.memory_size)
        return not bool(jnp.array_equal(memory[region], self.memory[region]))
