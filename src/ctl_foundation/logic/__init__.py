"""CTL formula syntax trees.

This module provides:
- The six CTL formula variants with structural equality and hashing
- Canonical rendering (true, !, &&, EX, AX)
- Depth-bounded random generation
- Formula metrics
"""

from __future__ import annotations

from ctl_foundation.logic.formula import (
    BASE_CASES,
    INDUCTIVE_CASES,
    And,
    AtomicProposition,
    CTLFormula,
    ExistsNext,
    ForAllNext,
    FormulaKind,
    Not,
    TrueFormula,
    atomic_propositions,
    formula_depth,
    formula_size,
    random_formula,
    subformulas,
)

__all__ = [
    "FormulaKind",
    "CTLFormula",
    "TrueFormula",
    "AtomicProposition",
    "Not",
    "And",
    "ExistsNext",
    "ForAllNext",
    "BASE_CASES",
    "INDUCTIVE_CASES",
    "random_formula",
    "subformulas",
    "formula_depth",
    "formula_size",
    "atomic_propositions",
]
