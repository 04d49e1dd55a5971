"""CHIP-8 disassembler and register watch package."""

from chipdis.constants import *
from chipdis.decode import DecodedInstruction, decode
from chipdis.disassembler import disassemble, disassemble_word, line_index_for_address, render_listing
from chipdis.errors import ChipdisError, BoundsError, InvalidAddressError
from chipdis.memory import create_memory, load_program, load_rom, read_word
from chipdis.segments import Tag, Segment, DisassembledLine
from chipdis.session import DisassemblySession
from chipdis.state import MachineSnapshot, create_snapshot
from chipdis.watch import format_snapshot, render_snapshot

__all__ = [
    "DecodedInstruction",
    "decode",
    "disassemble",
    "disassemble_word",
    "line_index_for_address",
    "render_listing",
    "ChipdisError",
    "BoundsError",
    "InvalidAddressError",
    "create_memory",
    "load_program",
    "load_rom",
    "read_word",
    "Tag",
    "Segment",
    "DisassembledLine",
    "DisassemblySession",
    "MachineSnapshot",
    "create_snapshot",
    "format_snapshot",
    "render_snapshot",
    "PROGRAM_START",
    "MEMORY_SIZE",
    "LISTING_LINE_WIDTH",
    "WATCH_LINE_WIDTH",
]
