"""Deterministic random numbers compatible with the classic minimal-standard generator."""

from __future__ import annotations

from typing import Protocol


class _Engine(Protocol):
    min: int
    max: int

    def next(self) -> int: ...


class MinStdRand0:
    """Lehmer generator with multiplier 16807 and modulus 2**31 - 1."""

    multiplier = 16807
    modulus = 2**31 - 1
    min = 1
    max = modulus - 1

    def __init__(self, seed: int = 1) -> None:
        state = seed % self.modulus
        self._state = state if state else 1

    def next(self) -> int:
        """Advance the generator and return the new state."""
        self._state = (self.multiplier * self._state) % self.modulus
        return self._state

    def __iter__(self) -> "MinStdRand0":
        return self

    def __next__(self) -> int:
        return self.next()


def uniform_int(engine: _Engine, low: int, high: int) -> int:
    """Draw an integer from [low, high] using the engine, rejecting biased draws."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    engine_range = engine.max - engine.min
    wanted_range = high - low

    if engine_range > wanted_range:
        buckets = wanted_range + 1
        scaling = engine_range // buckets
        past = buckets * scaling
        while True:
            value = engine.next() - engine.min
            if value < past:
                return low + value // scaling

    if engine_range < wanted_range:
        step = engine_range + 1
        while True:
            upper = step * uniform_int(engine, 0, wanted_range // step)
            value = upper + (engine.next() - engine.min)
            if value <= wanted_range:
                return low + value

    return low + (engine.next() - engine.min)