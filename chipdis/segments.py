"""Tagged text segments shared by the listing and the watch report."""

import enum
from typing import Iterable, NamedTuple, Tuple

from chex import dataclass


class Tag(enum.Enum):
    """Rendering category of a text segment."""
    KEYWORD = "keyword"
    REGISTER = "register"
    LITERAL = "literal"
    COMMENT = "comment"
    ADDRESS = "address"
    OPCODE = "opcode"
    PLAIN = "plain"


class Segment(NamedTuple):
    text: str
    tag: Tag


NEWLINE = Segment("\n", Tag.PLAIN)


@dataclass(frozen=True)
class DisassembledLine:
    """Rendering of the instruction word stored at ``address``.

    ``mnemonic`` is the keyword text, empty when the word was not recognised.
    """
    address: int
    opcode: int
    segments: Tuple[Segment, ...]
    mnemonic: str = ""

    @property
    def text(self) -> str:
        return join_segments(self.segments)


def join_segments(segments: Iterable[Segment]) -> str:
    """Concatenate segment text, dropping tags."""
    return "".join(segment.text for segment in segments)


def split_lines(segments: Iterable[Segment]) -> Tuple[Tuple[Segment, ...], ...]:
    """Group a flat segment stream into lines at ``NEWLINE`` markers."""
    lines = []
    current = []
    for segment in segments:
        if segment == NEWLINE:
            lines.append(tuple(current))
            current = []
        else:
            current.append(segment)
    if current:
        lines.append(tuple(current))
    return tuple(lines)
