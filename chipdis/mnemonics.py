"""CHIP-8 mnemonic table.

Rendering rules are plain data: a mnemonic, operand templates and a
comment template. Templates are ``str.format`` strings over the decoded
fields ``x``, ``y``, ``n``, ``nn`` and ``nnn``.

Lookup is two-level. Most groups map straight to a rule; groups 0x8,
0xE and 0xF are keyed again by a sub-field and group 0x0 is matched on
its x and n nibbles. A word with no matching rule has no mnemonic.
"""

from typing import Dict, NamedTuple, Optional, Tuple

from chipdis.decode import DecodedInstruction
from chipdis.segments import Segment, Tag


class Operand(NamedTuple):
    template: str
    tag: Tag


class Rule(NamedTuple):
    mnemonic: str
    operands: Tuple[Operand, ...] = ()
    comment: Optional[str] = None


VX = Operand(" V{x:x}", Tag.REGISTER)
VY = Operand(" V{y:x}", Tag.REGISTER)
V0 = Operand(" V0", Tag.REGISTER)
INDEX = Operand(" I", Tag.REGISTER)
N = Operand(" 0x{n:x}", Tag.LITERAL)
NN = Operand(" 0x{nn:02x}", Tag.LITERAL)
NNN = Operand(" 0x{nnn:03x}", Tag.LITERAL)
PLUS = Operand(" + ", Tag.KEYWORD)


# 00E0, and 00?E for return
CLEAR_RULE = Rule("cls", (), "Clear Screen;")
RETURN_RULE = Rule("return", (), "Return from subroutine")

# 0NNN - any other non-zero word in group 0
SYS_RULE = Rule("sys", (NNN,), "Call machine code routine at 0x{nnn:03x} (ignored)")

# 5XY? / 9XY? match on the group alone
GROUP_RULES: Dict[int, Rule] = {
    0x1: Rule("jump", (NNN,), "PC = 0x{nnn:03x}"),
    0x2: Rule("call", (NNN,), "Call subroutine at 0x{nnn:03x}"),
    0x3: Rule("sei", (VX, NN), "if (V{x:x} == 0x{nn:02x}) {{ PC += 2; }}"),
    0x4: Rule("snei", (VX, NN), "if (V{x:x} != 0x{nn:02x}) {{ PC += 2; }}"),
    0x5: Rule("ser", (VX, VY), "if (V{x:x} == V{y:x}) {{ PC += 2; }}"),
    0x6: Rule("movi", (VX, NN), "V{x:x} = 0x{nn:02x}"),
    0x7: Rule("addi", (VX, NN), "V{x:x} += 0x{nn:02x}"),
    0x9: Rule("sner", (VX, VY), "if (V{x:x} != V{y:x}) {{ PC += 2; }}"),
    0xA: Rule("imovi", (INDEX, NNN), "I = 0x{nnn:03x}"),
    0xB: Rule("jumpoff", (NNN, PLUS, V0), "PC = (0x{nnn:03x} + V0);"),
    0xC: Rule("rnd", (VX, NN), "V{x:x} = RND() & 0x{nn:02x}"),
    0xD: Rule(
        "sprite",
        (VX, VY, N),
        "VF = DrawSprite(V{x:x}, V{y:x}, 0x{n:x}, I) DrawSprite(x,y,h,sprite_memaddress)",
    ),
}

# 8XYN
ALU_RULES: Dict[int, Rule] = {
    0x0: Rule("movr", (VX, VY), "V{x:x} = V{y:x}"),
    0x1: Rule("or", (VX, VY), "V{x:x} |= V{y:x} (bitwise OR)"),
    0x2: Rule("and", (VX, VY), "V{x:x} &= V{y:x} (bitwise AND)"),
    0x3: Rule("xor", (VX, VY), "V{x:x} ^= V{y:x} (bitwise XOR)"),
    0x4: Rule("addr", (VX, VY), "V{x:x} = V{x:x} + V{y:x} Vf set to 1 if there's a carry"),
    0x5: Rule("subr", (VX, VY), "V{x:x} = V{x:x} - V{y:x} Vf set to 0 if there's a borrow"),
    0x6: Rule(
        "shr",
        (VX,),
        "Stores the least significant bit of V{x:x} in Vf and then shifts V{x:x} to the right by 1",
    ),
    0x7: Rule("nsubr", (VX, VY), "V{x:x} = V{y:x} - V{x:x} Vf set to 0 if there's a borrow"),
    0xE: Rule(
        "shl",
        (VX,),
        "Stores the most significant bit of V{x:x} in Vf and then shifts V{x:x} to the left by 1",
    ),
}

# EX?E is skr, every other EX?? is snkr.
# Key and timer comments are written "// text", the rest "//text".
KEY_RULES: Dict[int, Rule] = {
    0xE: Rule("skr", (VX,), " if keypress(V{x:x}) skip"),
}
NOT_KEY_RULE = Rule("snkr", (VX,), " if !keypress(V{x:x}) skip")

# FXNN
MISC_RULES: Dict[int, Rule] = {
    0x07: Rule("rmovt", (VX,), " V{x:x} = DelayTimer"),
    0x0A: Rule("waitk", (VX,), " V{x:x} = keypress() -- Block until key pressed"),
    0x15: Rule("movt", (VX,), " DelayTimer = V{x:x}"),
    0x18: Rule("movs", (VX,), " SoundTimer = V{x:x}"),
    0x1E: Rule("iaddr", (VX,), " I += V{x:x}"),
    0x29: Rule("digit", (VX,), " I is set to the address for the character (0-F) in V{x:x}"),
    0x33: Rule("bcd", (VX,), " Stores the BCD of V{x:x} at I, I+1 and I+2"),
    0x55: Rule("store", (VX,), " Stores V0 to V{x:x} in memory starting at I"),
    0x65: Rule("load", (VX,), " Fills V0 to V{x:x} from memory starting at I"),
}

# group -> (sub-key field, second-level table, rule for unmatched sub-keys)
SUB_TABLES: Dict[int, Tuple[str, Dict[int, Rule], Optional[Rule]]] = {
    0x8: ("n", ALU_RULES, None),
    0xE: ("n", KEY_RULES, NOT_KEY_RULE),
    0xF: ("nn", MISC_RULES, None),
}


def system_rule(instruction: DecodedInstruction) -> Optional[Rule]:
    """Group 0: cls, return, sys, or nothing for the zero word."""
    if instruction.x == 0 and instruction.n == 0xE:
        return RETURN_RULE
    if instruction.raw == 0x00E0:
        return CLEAR_RULE
    if instruction.nnn != 0:
        return SYS_RULE
    return None


def lookup(instruction: DecodedInstruction) -> Optional[Rule]:
    """Find the rendering rule for a decoded word, or None."""
    if instruction.group == 0x0:
        return system_rule(instruction)
    if instruction.group not in SUB_TABLES:
        return GROUP_RULES.get(instruction.group)

    key, table, fallback = SUB_TABLES[instruction.group]
    return table.get(getattr(instruction, key), fallback)


def render_instruction(instruction: DecodedInstruction) -> Tuple[Segment, ...]:
    """Mnemonic, operand and comment segments for one instruction.

    Unrecognised words yield a single empty keyword segment.
    """
    rule = lookup(instruction)
    if rule is None:
        return (Segment("", Tag.KEYWORD),)

    fields = instruction.fields()
    segments = [Segment(rule.mnemonic, Tag.KEYWORD)]
    segments.extend(Segment(op.template.format(**fields), op.tag) for op in rule.operands)
    if rule.comment is not None:
        segments.append(Segment(" //" + rule.comment.format(**fields), Tag.COMMENT))
    return tuple(segments)


def all_rules() -> Tuple[Rule, ...]:
    """Every documented rule, in table order."""
    rules = [CLEAR_RULE, RETURN_RULE, SYS_RULE, *GROUP_RULES.values()]
    for _, table, fallback in SUB_TABLES.values():
        rules.extend(table.values())
        if fallback is not None:
            rules.append(fallback)
    return tuple(rules)
