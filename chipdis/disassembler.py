"""CHIP-8 disassembler.

Turns a memory image into one ``DisassembledLine`` per opcode word,
starting at the program base. Lines are positional: the line for
``address`` is always at ``(address - program_base) // 2``.
"""

from typing import Iterable, Optional, Tuple

from chipdis.constants import LISTING_LINE_WIDTH, MEMORY_SIZE, PROGRAM_START, WORD_SIZE
from chipdis.decode import decode
from chipdis.errors import InvalidAddressError
from chipdis.logging import get_logger
from chipdis.memory import program_words
from chipdis.mnemonics import render_instruction
from chipdis.segments import NEWLINE, DisassembledLine, Segment, Tag, join_segments, split_lines

logger = get_logger()


def disassemble_word(word: int, address: int) -> DisassembledLine:
    """Render the opcode ``word`` found at ``address``."""
    instruction = decode(word)
    rendered = render_instruction(instruction)
    segments = (
        Segment(f"0x{address:04x} ", Tag.ADDRESS),
        Segment(f"0x{instruction.raw:04x} ", Tag.OPCODE),
        Segment(" ", Tag.KEYWORD),
    ) + rendered
    return DisassembledLine(
        address=address,
        opcode=instruction.raw,
        segments=segments,
        mnemonic=rendered[0].text,
    )


def disassemble(
    memory,
    program_base: int = PROGRAM_START,
    memory_size: int = MEMORY_SIZE,
) -> Tuple[DisassembledLine, ...]:
    """Disassemble every word from ``program_base`` up to ``memory_size``.

    Args:
        memory: Memory image (bytes, sequence of ints or uint8 array).
        program_base: Address of the first instruction; must be even.
        memory_size: End of the region; must be even.

    Returns:
        Lines in increasing address order, one per word.

    Raises:
        BoundsError: The image is shorter than ``memory_size``.
        InvalidAddressError: The region is misaligned or inverted.
    """
    words = program_words(memory, program_base, memory_size)
    lines = tuple(
        disassemble_word(word, program_base + WORD_SIZE * i)
        for i, word in enumerate(words.tolist())
    )
    unknown = sum(1 for line in lines if not line.mnemonic)
    logger.debug(
        f"Disassembled {len(lines)} words at 0x{program_base:04x}-0x{memory_size:04x} "
        f"({unknown} unrecognised)"
    )
    return lines


def line_index_for_address(address: int, program_base: int = PROGRAM_START) -> int:
    """Position of the line for ``address`` in a listing built from ``program_base``."""
    if address < program_base:
        raise InvalidAddressError(
            f"Address 0x{address:04x} is below the program base 0x{program_base:04x}"
        )
    if address % WORD_SIZE:
        raise InvalidAddressError(f"Address 0x{address:04x} is not word aligned")
    return (address - program_base) // WORD_SIZE


def listing_segments(
    lines: Iterable[DisassembledLine],
    line_width: Optional[int] = LISTING_LINE_WIDTH,
    highlight: Optional[int] = None,
) -> Tuple[Segment, ...]:
    """Flatten a listing into one segment stream with ``NEWLINE`` between lines.

    The line whose address equals ``highlight`` is prefixed with ``>``;
    every other line gets a space so columns stay aligned. Lines are
    padded to ``line_width`` columns.
    """
    segments = []
    for line in lines:
        used = 0
        if highlight is not None:
            segments.append(Segment(">" if line.address == highlight else " ", Tag.PLAIN))
            used = 1
        segments.extend(line.segments)
        used += len(line.text)
        if line_width is not None and used < line_width:
            segments.append(Segment(" " * (line_width - used), Tag.PLAIN))
        segments.append(NEWLINE)
    return tuple(segments)


def render_listing(
    lines: Iterable[DisassembledLine],
    line_width: Optional[int] = LISTING_LINE_WIDTH,
    highlight: Optional[int] = None,
) -> str:
    """Plain-text listing, one padded line per instruction."""
    segments = listing_segments(lines, line_width, highlight)
    return "\n".join(join_segments(line) for line in split_lines(segments))
