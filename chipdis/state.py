"""Register snapshot supplied by the interpreter on every step."""

from typing import Sequence

import jax.numpy as jnp
from flax.struct import dataclass

from chipdis.constants import PROGRAM_START, REGISTER_COUNT


@dataclass(frozen=True)
class MachineSnapshot:
    """Values shown in the watch report."""
    program_counter: int
    index_register: int
    registers: jnp.ndarray
    delay_timer: int = 0
    sound_timer: int = 0


def create_snapshot(
    program_counter: int = PROGRAM_START,
    index_register: int = 0,
    registers: Sequence[int] = None,
    delay_timer: int = 0,
    sound_timer: int = 0,
) -> MachineSnapshot:
    """Build a snapshot, defaulting to the reset state.

    ``registers`` must hold exactly 16 values; they are stored as a
    ``uint8`` array.
    """
    if registers is None:
        registers = jnp.zeros(REGISTER_COUNT, dtype=jnp.uint8)
    registers = jnp.asarray(registers, dtype=jnp.uint8)
    if registers.shape != (REGISTER_COUNT,):
        raise ValueError(
            f"Expected {REGISTER_COUNT} general registers, got shape {registers.shape}"
        )
    return MachineSnapshot(
        program_counter=program_counter,
        index_register=index_register,
        registers=registers,
        delay_timer=delay_timer,
        sound_timer=sound_timer,
    )


def snapshot_from_state(state) -> MachineSnapshot:
    """Snapshot any interpreter state exposing ``pc``, ``I``, ``V`` and the timers."""
    return create_snapshot(
        program_counter=int(state.pc),
        index_register=int(state.I),
        registers=state.V,
        delay_timer=int(state.delay_timer),
        sound_timer=int(state.sound_timer),
    )
