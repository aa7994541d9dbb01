from typing import Protocol

from pydantic import BaseModel, Field


class SeededState(Protocol):
    """Anything that carries the 32-bit LCG seed (Battle, RngState)."""

    rng_seed: int


class RngState(BaseModel):
    """Stand-alone seed holder for random draws made outside a Battle."""

    rng_seed: int = Field(ge=0, le=0xFFFFFFFF, default=0)


def advance(state: SeededState) -> int:
    """Advance the LCG RNG and return the new 32-bit seed.

    seed = (seed * 1664525 + 1013904223) mod 2^32
    """
    state.rng_seed = (state.rng_seed * 1664525 + 1013904223) & 0xFFFFFFFF
    return state.rng_seed


def rand16(state: SeededState) -> int:
    """Advance RNG and return upper 16 bits (0..65535)."""
    advance(state)
    return (state.rng_seed >> 16) & 0xFFFF


def random_float(state: SeededState) -> float:
    """Uniform float in [0, 1) built from the upper 16 bits."""
    return rand16(state) / 0x10000


def uniform(state: SeededState, low: float, high: float) -> float:
    """Uniform float in [low, high)."""
    return low + (high - low) * random_float(state)


def randint(state: SeededState, low: int, high: int) -> int:
    """Uniform integer in [low, high], both ends inclusive."""
    if high < low:
        raise ValueError("randint requires low <= high")
    return low + rand16(state) % (high - low + 1)


def choice_index(state: SeededState, count: int) -> int:
    """Return a random index in range [0, count) using rand16 modulo.

    Returns -1 when count is not positive.
    """
    if count <= 0:
        return -1
    return rand16(state) % count
