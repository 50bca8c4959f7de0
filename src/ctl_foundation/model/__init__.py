"""Labelled transition systems.

This module provides:
- Transition and TransitionSystem value types
- Random transition systems where every state has a successor
- Graphviz DOT export
"""

from __future__ import annotations

from ctl_foundation.model.transition_system import (
    PALETTE_SIZE,
    Transition,
    TransitionSystem,
    edge_probability,
    random_transition_system,
)

__all__ = [
    "PALETTE_SIZE",
    "Transition",
    "TransitionSystem",
    "edge_probability",
    "random_transition_system",
]
