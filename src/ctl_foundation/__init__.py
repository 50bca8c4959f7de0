"""
ctl-foundation -- Data model for CTL model checking.

CTL formula syntax trees | Labelled transition systems | Random generation | DOT export

Minimal dependencies (NumPy). Pure Python.
"""

from ctl_foundation._version import __version__
from ctl_foundation.logic import (
    And,
    AtomicProposition,
    CTLFormula,
    ExistsNext,
    ForAllNext,
    FormulaKind,
    Not,
    TrueFormula,
    formula_depth,
    random_formula,
)
from ctl_foundation.model import Transition, TransitionSystem, random_transition_system
from ctl_foundation.types import DEFAULT_ALPHABET, DEFAULT_DEPTH, Alphabet, InvalidSelectorError

# NOTE: Full subpackage APIs are accessible via direct imports:
#   from ctl_foundation.logic import subformulas, atomic_propositions, ...
#   from ctl_foundation.model import edge_probability, ...
#   from ctl_foundation.serialization import formula_to_json, ...

__all__ = [
    "__version__",
    # Formulas
    "FormulaKind",
    "CTLFormula",
    "TrueFormula",
    "AtomicProposition",
    "Not",
    "And",
    "ExistsNext",
    "ForAllNext",
    "random_formula",
    "formula_depth",
    # Transition systems
    "Transition",
    "TransitionSystem",
    "random_transition_system",
    # Configuration
    "Alphabet",
    "DEFAULT_ALPHABET",
    "DEFAULT_DEPTH",
    "InvalidSelectorError",
]
