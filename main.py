"""
Print CHIP-8 ROM disassembly listings with the reset-state register watch.

    python main.py roms=[games/pong.ch8] highlight=514 color_scheme=mono
"""

import sys

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig

from chipdis import DisassemblySession, create_memory, create_snapshot, load_rom
from chipdis.disassembler import listing_segments
from chipdis.logging import get_logger, progress
from chipdis.rendering import create_tag_palette, to_ansi
from chipdis.segments import NEWLINE
from chipdis.watch import format_snapshot


def render_rom(path: str, cfg: DictConfig) -> str:
    """Disassemble one ROM and render its listing and watch report."""
    memory = load_rom(create_memory(cfg.memory_size), path, cfg.program_base)
    session = DisassemblySession.create(memory, cfg.program_base, cfg.memory_size)
    palette = create_tag_palette(cfg.color_scheme)

    segments = list(listing_segments(session.lines, cfg.listing_width, cfg.highlight))

    if cfg.show_watch:
        pc = cfg.highlight if cfg.highlight is not None else cfg.program_base
        segments.append(NEWLINE)
        segments.extend(format_snapshot(create_snapshot(program_counter=pc), cfg.watch_width))

    return to_ansi(segments, palette)


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    logger = get_logger()
    logger.set_level(cfg.log_level)

    if not cfg.roms:
        logger.error("No ROM given, pass roms=[path/to/rom.ch8]")
        sys.exit(1)

    paths = [to_absolute_path(rom) for rom in cfg.roms]
    for path in progress(paths, desc="Disassembling"):
        logger.info(f"Disassembling {path}")
        print(render_rom(path, cfg), flush=True)


if __name__ == "__main__":
    main()
