"""CTL (Computation Tree Logic) formula syntax trees.

This module provides:
- CTL formula AST (TrueFormula, AtomicProposition, Not, And, ExistsNext, ForAllNext)
- Structural equality and hashing
- Canonical rendering (``repr`` / ``str``)
- Depth-bounded random generation
- Formula metrics (depth, size, subformulas, atomic propositions)

Rendering grammar:
- true            the constant true
- p               an atomic proposition named p
- !φ              negation
- (φ && ψ)        conjunction
- EX φ            there exists a next state satisfying φ
- AX φ            all next states satisfy φ

Formulas are trees of frozen dataclasses. Equality and hashing are purely
structural: two formulas are equal iff they have the same variant and
recursively equal fields. Hashes accumulate child hashes polynomially with
multiplier 31 starting from 1, so equal formulas always hash equal.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from ctl_foundation.types import (
    DEFAULT_ALPHABET,
    DEFAULT_DEPTH,
    Alphabet,
    InvalidSelectorError,
    RandomSource,
    make_rng,
)

logger = logging.getLogger(__name__)

_PRIME = 31


def _accumulate(*hashes: int) -> int:
    """Polynomial hash accumulation: h = 31 * h + child, seeded with 1."""
    result = 1
    for h in hashes:
        result = _PRIME * result + h
    return result


# =============================================================================
# CTL Formula AST
# =============================================================================


class FormulaKind(Enum):
    """Classification of formula variants."""

    TRUE = auto()
    ATOMIC = auto()
    NOT = auto()
    AND = auto()
    EXISTS_NEXT = auto()
    FOR_ALL_NEXT = auto()


class CTLFormula(ABC):
    """Abstract base class for CTL formulas."""

    @property
    @abstractmethod
    def kind(self) -> FormulaKind:
        """Formula classification."""
        ...

    @abstractmethod
    def children(self) -> tuple[CTLFormula, ...]:
        """Return the direct subformulas, left to right."""
        ...

    @abstractmethod
    def __repr__(self) -> str: ...

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...

    @staticmethod
    def random(
        depth: int = DEFAULT_DEPTH,
        rng: RandomSource = None,
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> CTLFormula:
        """Return a random formula of at most the given depth.

        See ``random_formula``.
        """
        return random_formula(depth, rng=rng, alphabet=alphabet)


# --- Base cases ---


@dataclass(frozen=True)
class TrueFormula(CTLFormula):
    """The constant true. All instances are equal."""

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.TRUE

    def children(self) -> tuple[CTLFormula, ...]:
        return ()

    def __repr__(self) -> str:
        return "true"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TrueFormula)

    def __hash__(self) -> int:
        return 1


@dataclass(frozen=True)
class AtomicProposition(CTLFormula):
    """Atomic proposition: holds in states labelled with its name.

    Attributes:
        name: The name of the atomic proposition.
    """

    name: str

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.ATOMIC

    def children(self) -> tuple[CTLFormula, ...]:
        return ()

    def __repr__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AtomicProposition) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


# --- Boolean ---


@dataclass(frozen=True)
class Not(CTLFormula):
    """Negation: !φ.

    Attributes:
        formula: The formula to negate.
    """

    formula: CTLFormula

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.NOT

    def children(self) -> tuple[CTLFormula, ...]:
        return (self.formula,)

    def __repr__(self) -> str:
        return f"!{self.formula!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Not) and self.formula == other.formula

    def __hash__(self) -> int:
        return _accumulate(hash(self.formula))


@dataclass(frozen=True)
class And(CTLFormula):
    """Conjunction: (φ && ψ).

    Structural equality is ordered: ``And(f, g) != And(g, f)`` unless
    ``f == g``.

    Attributes:
        left: Left conjunct.
        right: Right conjunct.
    """

    left: CTLFormula
    right: CTLFormula

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.AND

    def children(self) -> tuple[CTLFormula, ...]:
        return (self.left, self.right)

    def __repr__(self) -> str:
        return f"({self.left!r} && {self.right!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, And) and self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return _accumulate(hash(self.left), hash(self.right))


# --- Next-state path quantifiers ---


@dataclass(frozen=True)
class ExistsNext(CTLFormula):
    """EX φ: there exists a next state satisfying φ.

    Attributes:
        formula: The formula that must hold in some successor.
    """

    formula: CTLFormula

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.EXISTS_NEXT

    def children(self) -> tuple[CTLFormula, ...]:
        return (self.formula,)

    def __repr__(self) -> str:
        return f"EX {self.formula!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExistsNext) and self.formula == other.formula

    def __hash__(self) -> int:
        return _accumulate(hash(self.formula))


@dataclass(frozen=True)
class ForAllNext(CTLFormula):
    """AX φ: all next states satisfy φ.

    Attributes:
        formula: The formula that must hold in all successors.
    """

    formula: CTLFormula

    @property
    def kind(self) -> FormulaKind:
        return FormulaKind.FOR_ALL_NEXT

    def children(self) -> tuple[CTLFormula, ...]:
        return (self.formula,)

    def __repr__(self) -> str:
        return f"AX {self.formula!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ForAllNext) and self.formula == other.formula

    def __hash__(self) -> int:
        return _accumulate(hash(self.formula))


# =============================================================================
# Random Generation
# =============================================================================

BASE_CASES = 2
INDUCTIVE_CASES = 4


def _random_atomic(rng, alphabet: Alphabet) -> AtomicProposition:
    return AtomicProposition(alphabet.letter(int(rng.integers(alphabet.size))))


def _random_formula(depth: int, rng, alphabet: Alphabet) -> CTLFormula:
    if depth == 0:
        selector = int(rng.integers(BASE_CASES))
    else:
        selector = int(rng.integers(BASE_CASES + INDUCTIVE_CASES))

    if selector == 0:
        return TrueFormula()
    if selector == 1:
        return _random_atomic(rng, alphabet)
    if depth == 0:
        raise InvalidSelectorError("Invalid selector in base case", selector, BASE_CASES)

    if selector == 2:
        return Not(_random_formula(depth - 1, rng, alphabet))
    if selector == 3:
        # Children are drawn independently, left first
        left = _random_formula(depth - 1, rng, alphabet)
        right = _random_formula(depth - 1, rng, alphabet)
        return And(left, right)
    if selector == 4:
        return ExistsNext(_random_formula(depth - 1, rng, alphabet))
    if selector == 5:
        return ForAllNext(_random_formula(depth - 1, rng, alphabet))
    raise InvalidSelectorError(
        "Invalid selector in inductive case", selector, BASE_CASES + INDUCTIVE_CASES
    )


def random_formula(
    depth: int = DEFAULT_DEPTH,
    rng: RandomSource = None,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> CTLFormula:
    """Return a random formula of at most the given depth.

    At depth 0 the result is ``true`` or an atomic proposition, each with
    probability 1/2. At depth > 0 each of the six variants is chosen with
    probability 1/6; every child is generated independently at depth - 1.
    Atomic proposition names are single letters drawn uniformly from
    ``alphabet``.

    The selector is drawn over exactly the six buildable cases. Extra
    inductive slots that map to no constructor are deliberately left out,
    so generation never fails and never favours smaller trees through
    rejected draws.

    Args:
        depth: Maximum depth (longest chain of non-leaf constructors).
        rng: numpy Generator, seed, or None for a fresh generator.
        alphabet: Letters used for atomic propositions.

    Returns:
        A formula whose ``formula_depth`` is at most ``depth``.

    Raises:
        ValueError: If depth is negative.

    Example:
        >>> random_formula(0, rng=42) in {TrueFormula(), *map(AtomicProposition, "abcde")}
        True
    """
    if depth < 0:
        raise ValueError(f"Formula depth must be non-negative, got {depth}")
    formula = _random_formula(depth, make_rng(rng), alphabet)
    logger.debug(f"Generated random formula of depth {formula_depth(formula)} (max {depth})")
    return formula


# =============================================================================
# Formula Metrics
# =============================================================================


def subformulas(formula: CTLFormula) -> Iterator[CTLFormula]:
    """Yield every node of the formula tree in pre-order."""
    stack = [formula]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def formula_depth(formula: CTLFormula) -> int:
    """Length of the longest root-to-leaf chain of non-leaf constructors.

    ``true`` and atomic propositions have depth 0.
    """
    children = formula.children()
    if not children:
        return 0
    return 1 + max(formula_depth(child) for child in children)


def formula_size(formula: CTLFormula) -> int:
    """Number of nodes in the formula tree."""
    return sum(1 for _ in subformulas(formula))


def atomic_propositions(formula: CTLFormula) -> frozenset[str]:
    """Names of all atomic propositions occurring in the formula."""
    return frozenset(f.name for f in subformulas(formula) if isinstance(f, AtomicProposition))


__all__ = [
    # Formula AST
    "FormulaKind",
    "CTLFormula",
    "TrueFormula",
    "AtomicProposition",
    "Not",
    "And",
    "ExistsNext",
    "ForAllNext",
    # Generation
    "BASE_CASES",
    "INDUCTIVE_CASES",
    "random_formula",
    # Metrics
    "subformulas",
    "formula_depth",
    "formula_size",
    "atomic_propositions",
]
