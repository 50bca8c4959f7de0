"""Serialization for CTL formulas and transition systems.

Round-trip guarantee: ``from_dict(to_dict(x)) == x`` for all supported types.

Supported types:
- All 6 CTL formula variants (TrueFormula, AtomicProposition, Not, And,
  ExistsNext, ForAllNext)
- Transition, TransitionSystem

Dicts are JSON-compatible; the ``*_to_json`` / ``*_from_json`` helpers
convert to and from JSON strings. Nothing here touches the filesystem.
"""

from __future__ import annotations

import json
from typing import Any

from ctl_foundation.logic.formula import (
    And,
    AtomicProposition,
    CTLFormula,
    ExistsNext,
    ForAllNext,
    Not,
    TrueFormula,
)
from ctl_foundation.model.transition_system import Transition, TransitionSystem

# ── Formula serialization ──────────────────────────────────────────────


def formula_to_dict(formula: CTLFormula) -> dict[str, Any]:
    """Serialize a CTL formula tree to a plain dict.

    Args:
        formula: Any CTL formula instance.

    Returns:
        A JSON-compatible dict with a ``"type"`` discriminator.

    Raises:
        TypeError: If the formula type is unknown.
    """
    if isinstance(formula, TrueFormula):
        return {"type": "True"}

    if isinstance(formula, AtomicProposition):
        return {"type": "AtomicProposition", "name": formula.name}

    if isinstance(formula, Not):
        return {"type": "Not", "formula": formula_to_dict(formula.formula)}

    if isinstance(formula, And):
        return {
            "type": "And",
            "left": formula_to_dict(formula.left),
            "right": formula_to_dict(formula.right),
        }

    if isinstance(formula, ExistsNext):
        return {"type": "ExistsNext", "formula": formula_to_dict(formula.formula)}

    if isinstance(formula, ForAllNext):
        return {"type": "ForAllNext", "formula": formula_to_dict(formula.formula)}

    raise TypeError(f"Unknown formula type: {type(formula).__name__}")


def formula_from_dict(data: dict[str, Any]) -> CTLFormula:
    """Reconstruct a CTL formula tree from a dict.

    Args:
        data: Dict previously produced by :func:`formula_to_dict`.

    Returns:
        The reconstructed formula.

    Raises:
        ValueError: If the dict contains an unknown type tag.
    """
    type_tag = data["type"]

    if type_tag == "True":
        return TrueFormula()

    if type_tag == "AtomicProposition":
        return AtomicProposition(data["name"])

    if type_tag == "Not":
        return Not(formula_from_dict(data["formula"]))

    if type_tag == "And":
        return And(formula_from_dict(data["left"]), formula_from_dict(data["right"]))

    if type_tag == "ExistsNext":
        return ExistsNext(formula_from_dict(data["formula"]))

    if type_tag == "ForAllNext":
        return ForAllNext(formula_from_dict(data["formula"]))

    raise ValueError(f"Unknown formula type tag: {type_tag!r}")


def formula_to_json(formula: CTLFormula) -> str:
    """Serialize a formula to a JSON string."""
    return json.dumps(formula_to_dict(formula))


def formula_from_json(text: str) -> CTLFormula:
    """Deserialize a formula from a JSON string."""
    return formula_from_dict(json.loads(text))


# ── Transition system serialization ────────────────────────────────────


def transition_to_dict(transition: Transition) -> dict[str, Any]:
    """Serialize a Transition."""
    return {"source": transition.source, "target": transition.target}


def transition_from_dict(data: dict[str, Any]) -> Transition:
    """Deserialize a Transition."""
    return Transition(source=data["source"], target=data["target"])


def transition_system_to_dict(system: TransitionSystem) -> dict[str, Any]:
    """Serialize a TransitionSystem to a plain dict.

    Transitions are listed in ascending order and labels are sorted, so
    equal systems serialize identically. State keys of the labelling are
    strings, as JSON requires.
    """
    transitions = sorted(system.transitions, key=lambda t: (t.source, t.target))
    return {
        "states": system.states,
        "transitions": [transition_to_dict(t) for t in transitions],
        "labelling": {
            str(state): sorted(labels) for state, labels in sorted(system.labelling.items())
        },
    }


def transition_system_from_dict(data: dict[str, Any]) -> TransitionSystem:
    """Deserialize a TransitionSystem from a dict.

    Raises:
        ValueError: If ``states`` is not positive.
    """
    return TransitionSystem(
        states=data["states"],
        transitions=frozenset(transition_from_dict(t) for t in data["transitions"]),
        labelling={int(state): frozenset(labels) for state, labels in data["labelling"].items()},
    )


def transition_system_to_json(system: TransitionSystem) -> str:
    """Serialize a transition system to a JSON string."""
    return json.dumps(transition_system_to_dict(system))


def transition_system_from_json(text: str) -> TransitionSystem:
    """Deserialize a transition system from a JSON string."""
    return transition_system_from_dict(json.loads(text))


__all__ = [
    # Formula
    "formula_to_dict",
    "formula_from_dict",
    "formula_to_json",
    "formula_from_json",
    # Transition system
    "transition_to_dict",
    "transition_from_dict",
    "transition_system_to_dict",
    "transition_system_from_dict",
    "transition_system_to_json",
    "transition_system_from_json",
]
