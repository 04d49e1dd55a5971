"""Register watch report.

Formats a ``MachineSnapshot`` as tagged segments, one logical line per
value, in a fixed order: program counter, index register, V0..VF, then
the delay and sound timers.
"""

from typing import List, Optional, Tuple

from chipdis.constants import REGISTER_COUNT
from chipdis.segments import NEWLINE, Segment, Tag, join_segments, split_lines
from chipdis.state import MachineSnapshot


def _line(name: str, value: str, comment: str) -> Tuple[Segment, ...]:
    return (
        Segment(name, Tag.REGISTER),
        Segment(value, Tag.LITERAL),
        Segment(comment, Tag.COMMENT),
    )


def _end_line(segments: List[Segment], line_start: int, line_width: Optional[int]):
    """Pad the current line to ``line_width`` columns and terminate it."""
    if line_width is not None:
        used = len(join_segments(segments[line_start:]))
        if used < line_width:
            segments.append(Segment(" " * (line_width - used), Tag.PLAIN))
    segments.append(NEWLINE)
    return len(segments)


def format_snapshot(snapshot: MachineSnapshot, line_width: Optional[int] = None) -> Tuple[Segment, ...]:
    """Watch report for ``snapshot``.

    The index register comment shows only its low byte in binary, the
    same as the general registers.

    Args:
        snapshot: Register values to report.
        line_width: When set, pad every line with spaces to this width.

    Returns:
        Segments with ``NEWLINE`` between lines.
    """
    registers = [int(value) for value in snapshot.registers]
    if len(registers) != REGISTER_COUNT:
        raise ValueError(f"Expected {REGISTER_COUNT} general registers, got {len(registers)}")

    pc = int(snapshot.program_counter)
    index = int(snapshot.index_register)
    delay = int(snapshot.delay_timer)
    sound = int(snapshot.sound_timer)

    segments: List[Segment] = []
    start = 0

    segments.extend(_line(" PC", f" 0x{pc:04x}", " //Program Counter"))
    start = _end_line(segments, start, line_width)
    segments.extend(_line(" I", f" 0x{index:04x}", f" //b{index & 0xFF:08b}"))
    start = _end_line(segments, start, line_width)
    start = _end_line(segments, start, line_width)

    for i, value in enumerate(registers):
        segments.extend(_line(f"  V{i:x}", f" 0x{value:02x}", f" //b{value:08b}"))
        start = _end_line(segments, start, line_width)

    start = _end_line(segments, start, line_width)
    segments.extend(_line(" DelayTimer", f" {delay}", f" //0x{delay:02x}"))
    start = _end_line(segments, start, line_width)
    segments.extend(_line(" SoundTimer", f" {sound}", f" //0x{sound:02x}"))
    _end_line(segments, start, line_width)

    return tuple(segments)


def render_snapshot(snapshot: MachineSnapshot, line_width: Optional[int] = None) -> str:
    """Watch report as plain text."""
    return join_segments(format_snapshot(snapshot, line_width))


def snapshot_lines(snapshot: MachineSnapshot) -> Tuple[str, ...]:
    """Unpadded report lines, one string per line."""
    return tuple(join_segments(line) for line in split_lines(format_snapshot(snapshot)))
