"""Terminal rendering of tagged segments."""

from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from chipdis.segments import Segment, Tag

RGB = Tuple[int, int, int]


class TagStyle(NamedTuple):
    """Foreground/background colour and weight for one tag."""
    foreground: RGB
    background: Optional[RGB] = None
    bold: bool = False
    italic: bool = False


def _hex(colour: str) -> RGB:
    colour = colour.lstrip("#")
    return int(colour[0:2], 16), int(colour[2:4], 16), int(colour[4:6], 16)


def create_tag_palette(scheme: str = "monokai") -> Dict[Tag, TagStyle]:
    """Get a predefined palette mapping every tag to a style.

    Args:
        scheme: Palette name ("monokai", "mono")

    Returns:
        Dictionary with one ``TagStyle`` per ``Tag`` member
    """
    background = _hex("#272822")
    gutter = _hex("#2F3129")
    schemes = {
        "monokai": {
            Tag.KEYWORD: TagStyle(_hex("#F92672"), background),
            Tag.REGISTER: TagStyle(_hex("#A6E22E"), background),
            Tag.LITERAL: TagStyle(_hex("#AE81FF"), background),
            Tag.ADDRESS: TagStyle(_hex("#8F908A"), gutter, bold=True),
            Tag.OPCODE: TagStyle(_hex("#81331e"), gutter),
            Tag.PLAIN: TagStyle(_hex("#ffffff"), background),
            Tag.COMMENT: TagStyle(_hex("#5b814c"), background, italic=True),
        },
        "mono": {tag: TagStyle((255, 255, 255)) for tag in Tag},
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown palette '{scheme}'. Available: {list(schemes.keys())}"
        )

    palette = schemes[scheme]
    missing = [tag.value for tag in Tag if tag not in palette]
    if missing:
        raise ValueError(f"Palette '{scheme}' has no style for tags {missing}")
    return palette


def _escape(style: TagStyle) -> str:
    codes = []
    if style.bold:
        codes.append("1")
    if style.italic:
        codes.append("3")
    codes.append("38;2;{};{};{}".format(*style.foreground))
    if style.background is not None:
        codes.append("48;2;{};{};{}".format(*style.background))
    return "\033[" + ";".join(codes) + "m"


def to_ansi(segments: Iterable[Segment], palette: Dict[Tag, TagStyle]) -> str:
    """Render segments with 24-bit ANSI colour escapes.

    Newlines are emitted outside the escape so each terminal line
    starts clean.
    """
    out = []
    for segment in segments:
        if segment.text == "\n":
            out.append("\n")
            continue
        out.append(f"{_escape(palette[segment.tag])}{segment.text}\033[0m")
    return "".join(out)
