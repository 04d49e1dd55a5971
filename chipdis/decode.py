"""CHIP-8 opcode word decoding."""

from typing import Dict

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Bit fields of one 16-bit opcode word.

    Every field is a slice of ``raw``; instances are never mutated.
    """
    raw: int
    group: int   # Top nibble, primary dispatch
    x: int       # Bits 8-11 (VX register)
    y: int       # Bits 4-7 (VY register)
    n: int       # Lowest nibble (sprite height / ALU selector)
    nn: int      # Low byte (8-bit literal)
    nnn: int     # Low 12 bits (address)

    def fields(self) -> Dict[str, int]:
        """Operand fields by name, for comment and operand templates."""
        return {"x": self.x, "y": self.y, "n": self.n, "nn": self.nn, "nnn": self.nnn}


def pack_word(high: int, low: int) -> int:
    """Pack two bytes into a big-endian opcode word."""
    return ((int(high) & 0xFF) << 8) | (int(low) & 0xFF)


def decode(word: int) -> DecodedInstruction:
    """Decode a 16-bit opcode word into its fields.

    Accepts Python ints as well as JAX/NumPy scalars; fields are always
    plain ints so they can key the mnemonic tables.
    """
    word = int(word) & 0xFFFF
    return DecodedInstruction(
        raw=word,
        group=(word & 0xF000) >> 12,
        x=(word & 0x0F00) >> 8,
        y=(word & 0x00F0) >> 4,
        n=word & 0x000F,
        nn=word & 0x00FF,
        nnn=word & 0x0FFF,
    )
