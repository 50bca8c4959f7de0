"""Labelled transition systems (Kripke structures) for CTL.

This module provides:
- Transition: a directed edge between two states
- TransitionSystem: states {0, ..., n-1}, a transition set and a labelling
- Random generation with a guaranteed outgoing transition per state
- Graphviz DOT export with label-coloured nodes

A transition system is a tuple (S, →, L) where:
- S = {0, ..., states-1}: the states
- → ⊆ S × S: the transition relation
- L: S → 2^AP: the labelling with atomic propositions

Random systems follow the Erdős–Rényi model G(n, p) on ordered pairs with
p = 2·ln(n)/n, about twice the connectivity threshold, so random graphs are
connected with high probability. States that sample no outgoing edge get a
self-loop, which keeps every path infinite as CTL semantics requires.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType

from ctl_foundation.types import (
    DEFAULT_ALPHABET,
    Alphabet,
    Labelling,
    RandomSource,
    make_rng,
)

logger = logging.getLogger(__name__)

PALETTE_SIZE = 12
"""Number of colours in the ``set312`` Graphviz colour scheme."""

# =============================================================================
# Core Types
# =============================================================================


@dataclass(frozen=True)
class Transition:
    """A transition: source → target. Self-loops are allowed."""

    source: int  # State ID
    target: int  # State ID

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Transition):
            return self.source == other.source and self.target == other.target
        return False

    def __hash__(self) -> int:
        return self.source + 31 * self.target

    def __repr__(self) -> str:
        return f"({self.source}, {self.target})"

    def to_dot(self) -> str:
        """Return the DOT edge statement for this transition."""
        return f"{self.source} -> {self.target}"


@dataclass(frozen=True)
class TransitionSystem:
    """Immutable labelled transition system over states {0, ..., states-1}.

    The constructor trusts its caller apart from ``states > 0``: it does
    not add missing outgoing transitions. Use ``random_transition_system``
    for systems where every state has a successor.

    Attributes:
        states: Number of states
        transitions: Set of transitions (duplicates collapse)
        labelling: Read-only mapping from every state to its labels
    """

    states: int
    transitions: frozenset[Transition] = field(default_factory=frozenset)
    labelling: Labelling = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.states <= 0:
            raise ValueError(f"A transition system needs at least one state, got {self.states}")
        labelling = {state: frozenset() for state in range(self.states)}
        for state, labels in self.labelling.items():
            labelling[state] = frozenset(labels)
        object.__setattr__(self, "transitions", frozenset(self.transitions))
        object.__setattr__(self, "labelling", MappingProxyType(labelling))

    @staticmethod
    def random(
        states: int,
        rng: RandomSource = None,
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> TransitionSystem:
        """Return a random transition system. See ``random_transition_system``."""
        return random_transition_system(states, rng=rng, alphabet=alphabet)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def num_transitions(self) -> int:
        """Number of transitions."""
        return len(self.transitions)

    def successors(self, state: int) -> list[int]:
        """Targets of the transitions leaving state, ascending."""
        return sorted(t.target for t in self.transitions if t.source == state)

    def predecessors(self, state: int) -> list[int]:
        """Sources of the transitions entering state, ascending."""
        return sorted(t.source for t in self.transitions if t.target == state)

    def labels(self, state: int) -> frozenset[str]:
        """Labels of the given state."""
        return self.labelling[state]

    def all_labels(self) -> list[str]:
        """Distinct labels used anywhere in the labelling, sorted."""
        labels: set[str] = set()
        for value in self.labelling.values():
            labels |= value
        return sorted(labels)

    def has_outgoing_transitions(self) -> bool:
        """Check that every state has at least one outgoing transition."""
        sources = {t.source for t in self.transitions}
        return all(state in sources for state in range(self.states))

    # -------------------------------------------------------------------------
    # Equality, hashing, rendering
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TransitionSystem):
            return (
                self.states == other.states
                and self.transitions == other.transitions
                and dict(self.labelling) == dict(other.labelling)
            )
        return False

    def __hash__(self) -> int:
        prime = 37
        labelling_hash = hash(frozenset(self.labelling.items()))
        return self.states + prime * (hash(self.transitions) + prime * labelling_hash)

    def __repr__(self) -> str:
        """Render as ``<{transitions}, {labelling}>``.

        Transitions and states are listed in ascending order and labels are
        sorted. Compare systems with ``==``, not by their rendering.
        """
        transitions = ", ".join(repr(t) for t in self._sorted_transitions())
        labelling = ", ".join(
            f"{state}: {{{', '.join(sorted(self.labelling[state]))}}}"
            for state in sorted(self.labelling)
        )
        return f"<{{{transitions}}}, {{{labelling}}}>"

    def _sorted_transitions(self) -> list[Transition]:
        return sorted(self.transitions, key=lambda t: (t.source, t.target))

    def to_dot(self) -> str:
        """Return a Graphviz DOT description of this transition system.

        Each distinct label gets a colour index from the 12-class ``set312``
        scheme: 1 + its position among all labels in sorted order. A state
        with one label is filled with that colour; a state with several
        labels is drawn as a wedged node with one slice per label. States
        without labels use the default style.

        The scheme has ``PALETTE_SIZE`` colours. Labels beyond the twelfth
        still get their own index, which Graphviz cannot resolve, and a
        warning is logged.

        Example:
            >>> ts = TransitionSystem(1, {Transition(0, 0)}, {0: {"a"}})
            >>> print(ts.to_dot(), end="")
            digraph system {
              node [colorscheme="set312" style=wedged]
              0 -> 0
              0 [style=filled fillcolor=1]
            }
        """
        lines = [
            "digraph system {",
            '  node [colorscheme="set312" style=wedged]',
        ]

        for transition in self._sorted_transitions():
            lines.append(f"  {transition.to_dot()}")

        colours = {label: index for index, label in enumerate(self.all_labels(), start=1)}
        if len(colours) > PALETTE_SIZE:
            logger.warning(
                f"{len(colours)} distinct labels exceed the {PALETTE_SIZE}-colour "
                f"set312 scheme; indices above {PALETTE_SIZE} will not render"
            )
        for state in range(self.states):
            labels = self.labelling.get(state, frozenset())
            if not labels:
                continue
            fill = ":".join(str(colours[label]) for label in sorted(labels))
            if len(labels) == 1:
                lines.append(f"  {state} [style=filled fillcolor={fill}]")
            else:
                lines.append(f'  {state} [fillcolor="{fill}"]')

        lines.append("}")
        return "\n".join(lines) + "\n"


# =============================================================================
# Random Generation
# =============================================================================


def edge_probability(states: int) -> float:
    """Probability 2·ln(n)/n of including each ordered pair as an edge.

    Args:
        states: Number of states n > 0

    Returns:
        Edge probability; 0.0 for a single state
    """
    if states <= 0:
        raise ValueError(f"Number of states must be positive, got {states}")
    return 2 * math.log(states) / states


def _random_labels(rng, alphabet: Alphabet) -> frozenset[str]:
    # Up to size - 1 draws with replacement; repeats collapse
    letters = alphabet.letters
    number = int(rng.integers(len(letters)))
    return frozenset(letters[int(rng.integers(len(letters)))] for _ in range(number))


def random_transition_system(
    states: int,
    rng: RandomSource = None,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> TransitionSystem:
    """Return a random transition system with the given number of states.

    Every ordered pair (source, target), self-loops included, becomes a
    transition independently with probability ``edge_probability(states)``.
    A source that samples no transition gets exactly the self-loop
    (source, source), so every state has an outgoing transition. Each state
    is labelled with n letters drawn uniformly from ``alphabet``, where n is
    uniform in [0, alphabet.size - 1]; repeated letters collapse.

    Args:
        states: Number of states, must be positive
        rng: numpy Generator, seed, or None for a fresh generator
        alphabet: Letters used for labels

    Returns:
        A transition system satisfying ``has_outgoing_transitions()``

    Raises:
        ValueError: If states is not positive
    """
    probability = edge_probability(states)
    generator = make_rng(rng)

    transitions: set[Transition] = set()
    self_loops = 0
    for source in range(states):
        has_outgoing_transition = False
        for target in range(states):
            if generator.random() < probability:
                transitions.add(Transition(source, target))
                has_outgoing_transition = True
        if not has_outgoing_transition:
            transitions.add(Transition(source, source))
            self_loops += 1

    labelling: dict[int, frozenset[str]] = {}
    for state in range(states):
        labelling[state] = _random_labels(generator, alphabet)

    logger.debug(
        f"Generated random transition system: {states} states, "
        f"{len(transitions)} transitions ({self_loops} injected self-loops)"
    )
    return TransitionSystem(states, frozenset(transitions), labelling)


__all__ = [
    "PALETTE_SIZE",
    "Transition",
    "TransitionSystem",
    "edge_probability",
    "random_transition_system",
]
