"""
Foundation Types for CTL formulas and transition systems.

Shared configuration and error types used by both the formula AST
(``ctl_foundation.logic``) and the transition system model
(``ctl_foundation.model``), kept here to avoid circular imports.

Contents:
    Alphabet: Single-letter alphabet for atomic propositions and labels
    DEFAULT_ALPHABET: The letters ``a`` .. ``e``
    DEFAULT_DEPTH: Default depth of randomly generated formulas
    Labelling: Mapping from state IDs to label sets
    InvalidSelectorError: Case selector outside the range of a generator
    make_rng: Resolve an injectable random source
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

RandomSource = np.random.Generator | int | None
"""Anything accepted by ``make_rng``: a generator, a seed, or None."""

Labelling = Mapping[int, frozenset[str]]
"""Mapping from state IDs to sets of atomic proposition names."""

DEFAULT_DEPTH = 5
"""Default maximum depth of a random formula."""


@dataclass(frozen=True)
class Alphabet:
    """A contiguous range of single-character names.

    Atomic proposition names and state labels are both drawn from an
    alphabet, so generated formulas and generated systems talk about the
    same propositions.

    Attributes:
        base: First letter of the alphabet
        size: Number of consecutive letters starting at ``base``
    """

    base: str = "a"
    size: int = 5

    def __post_init__(self) -> None:
        if len(self.base) != 1:
            raise ValueError(f"Alphabet base must be a single character, got {self.base!r}")
        if self.size <= 0:
            raise ValueError(f"Alphabet size must be positive, got {self.size}")
        last = ord(self.base) + self.size - 1
        if last > 0x10FFFF or not all(
            chr(code).isalpha() for code in range(ord(self.base), last + 1)
        ):
            raise ValueError(
                f"Alphabet of {self.size} characters from {self.base!r} leaves the letter range"
            )

    @property
    def letters(self) -> tuple[str, ...]:
        """All letters of the alphabet in order."""
        return tuple(self.letter(i) for i in range(self.size))

    def letter(self, index: int) -> str:
        """Return the letter at the given offset from ``base``.

        Raises:
            ValueError: If index is outside [0, size)
        """
        if not 0 <= index < self.size:
            raise ValueError(f"Letter index {index} outside [0, {self.size})")
        return chr(ord(self.base) + index)


DEFAULT_ALPHABET = Alphabet()
"""The five letters ``a`` .. ``e``."""


@dataclass
class InvalidSelectorError(Exception):
    """A random case selector fell outside the cases a generator handles.

    Signals that a generator's case count does not match its branches.
    Never raised by a consistent generator.

    Attributes:
        message: Error message
        selector: The drawn selector value
        cases: Number of cases the selector was drawn from
    """

    message: str
    selector: int | None = None
    cases: int | None = None

    def __str__(self) -> str:
        if self.selector is None:
            return self.message
        return f"{self.message} (selector={self.selector}, cases={self.cases})"


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Resolve a random source to a numpy Generator.

    A Generator is returned unchanged, an int seeds a new Generator and
    None creates a fresh, OS-seeded Generator. Generators are not
    thread-safe; share one across threads only under a lock.

    Args:
        rng: Generator, seed, or None

    Returns:
        A numpy Generator
    """
    return np.random.default_rng(rng)


__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "DEFAULT_DEPTH",
    "InvalidSelectorError",
    "Labelling",
    "RandomSource",
    "make_rng",
]
