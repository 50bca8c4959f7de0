"""Shared test fixtures: small hand-built transition systems."""

from __future__ import annotations

import pytest

from ctl_foundation.model import Transition, TransitionSystem


@pytest.fixture
def single_state_system():
    """One state labelled {a} with a self-loop."""
    return TransitionSystem(1, {Transition(0, 0)}, {0: {"a"}})


@pytest.fixture
def cyclic_system():
    """Cycle 0 -> 1 -> 2 -> 0 plus 1 -> 1.

    Labels: {0: {a, b}, 1: {}, 2: {c}}
    """
    return TransitionSystem(
        3,
        {Transition(0, 1), Transition(1, 2), Transition(2, 0), Transition(1, 1)},
        {0: {"b", "a"}, 1: set(), 2: {"c"}},
    )
