"""Random CTL formulas and transition systems -- fuzzing inputs for a checker.

Demonstrates seeded generation of formulas and labelled transition systems,
the outgoing-transition guarantee, and Graphviz export.
"""

import numpy as np

from ctl_foundation import (
    Alphabet,
    TransitionSystem,
    formula_depth,
    random_formula,
    random_transition_system,
)
from ctl_foundation.logic import atomic_propositions, formula_size
from ctl_foundation.model import edge_probability

rng = np.random.default_rng(2021)

# =============================================================
# Random formulas
# =============================================================
print("=== Random Formulas ===")

for depth in range(4):
    formula = random_formula(depth, rng=rng)
    print(
        f"depth<={depth}: {formula}  "
        f"(depth {formula_depth(formula)}, size {formula_size(formula)}, "
        f"props {sorted(atomic_propositions(formula))})"
    )

# =============================================================
# Random transition systems
# =============================================================
print("\n=== Random Transition Systems ===")

for states in (1, 5, 20, 100):
    system = random_transition_system(states, rng=rng)
    print(
        f"{states:>3} states: p={edge_probability(states):.3f}, "
        f"{system.num_transitions} transitions, "
        f"every state has a successor: {system.has_outgoing_transitions()}"
    )

# =============================================================
# Custom alphabet and DOT export
# =============================================================
print("\n=== DOT Export ===")

small = TransitionSystem.random(4, rng=rng, alphabet=Alphabet(base="p", size=3))
print(small)
print(small.to_dot())
