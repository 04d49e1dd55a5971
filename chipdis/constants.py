"""CHIP-8 memory layout and listing constants."""

PROGRAM_START = 0x200
MEMORY_SIZE = 4096
REGISTER_COUNT = 16

WORD_SIZE = 2

# Column widths used by fixed-width text surfaces
LISTING_LINE_WIDTH = 120
WATCH_LINE_WIDTH = 30
