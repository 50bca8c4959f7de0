"""Tests for CTL formula syntax trees."""

from __future__ import annotations

import dataclasses
from collections import Counter

import numpy as np
import pytest

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
    _random_formula,
    atomic_propositions,
    formula_depth,
    formula_size,
    random_formula,
    subformulas,
)
from ctl_foundation.types import DEFAULT_ALPHABET, DEFAULT_DEPTH, Alphabet, InvalidSelectorError

a = AtomicProposition("a")
b = AtomicProposition("b")


class _FixedSelector:
    """Stand-in generator whose integer draws always return one value."""

    def __init__(self, value: int):
        self.value = value

    def integers(self, high: int) -> int:
        return self.value


# =============================================================================
# Rendering
# =============================================================================


class TestRendering:
    def test_true(self):
        assert repr(TrueFormula()) == "true"

    def test_atomic(self):
        assert repr(AtomicProposition("ready")) == "ready"

    def test_not(self):
        assert repr(Not(a)) == "!a"

    def test_and(self):
        assert repr(And(a, b)) == "(a && b)"

    def test_and_with_negation(self):
        assert repr(And(TrueFormula(), Not(a))) == "(true && !a)"

    def test_exists_next(self):
        assert repr(ExistsNext(a)) == "EX a"

    def test_for_all_next_of_exists_next(self):
        assert repr(ForAllNext(ExistsNext(TrueFormula()))) == "AX EX true"

    def test_nested_conjunctions(self):
        formula = And(And(a, b), Not(ExistsNext(And(a, TrueFormula()))))
        assert repr(formula) == "((a && b) && !EX (a && true))"

    def test_str_matches_repr(self):
        formula = ForAllNext(And(a, Not(b)))
        assert str(formula) == repr(formula) == "AX (a && !b)"


# =============================================================================
# Equality and Hashing
# =============================================================================


class TestEquality:
    def test_true_instances_equal(self):
        assert TrueFormula() == TrueFormula()
        assert TrueFormula() is not TrueFormula()

    def test_atomic_by_name(self):
        assert AtomicProposition("x") == AtomicProposition("x")
        assert AtomicProposition("x") != AtomicProposition("y")

    def test_structural_not_identity(self):
        left = And(Not(a), ExistsNext(b))
        right = And(Not(AtomicProposition("a")), ExistsNext(AtomicProposition("b")))
        assert left == right
        assert left is not right

    def test_and_is_ordered(self):
        assert And(a, b) != And(b, a)

    def test_and_symmetric_when_children_equal(self):
        assert And(a, AtomicProposition("a")) == And(AtomicProposition("a"), a)

    def test_unary_variants_differ(self):
        assert Not(a) != ExistsNext(a)
        assert ExistsNext(a) != ForAllNext(a)
        assert ForAllNext(a) != Not(a)

    def test_true_not_equal_to_atomic_named_true(self):
        assert TrueFormula() != AtomicProposition("true")

    def test_not_equal_to_other_types(self):
        assert a != "a"
        assert TrueFormula() != 1
        assert Not(a) != None  # noqa: E711


class TestHashing:
    def test_true_hashes_to_one(self):
        assert hash(TrueFormula()) == 1

    def test_atomic_hashes_like_name(self):
        assert hash(AtomicProposition("p")) == hash("p")

    def test_unary_polynomial(self):
        assert hash(Not(TrueFormula())) == 31 + 1
        assert hash(ExistsNext(TrueFormula())) == 31 + 1
        assert hash(ForAllNext(TrueFormula())) == 31 + 1

    def test_and_polynomial(self):
        assert hash(And(TrueFormula(), TrueFormula())) == 31 * (31 + 1) + 1

    def test_equal_formulas_hash_equal(self):
        left = ForAllNext(And(a, Not(b)))
        right = ForAllNext(And(AtomicProposition("a"), Not(AtomicProposition("b"))))
        assert hash(left) == hash(right)

    def test_usable_in_sets(self):
        formulas = {Not(a), Not(AtomicProposition("a")), ExistsNext(a), TrueFormula(), TrueFormula()}
        assert formulas == {Not(a), ExistsNext(a), TrueFormula()}


class TestImmutability:
    def test_fields_cannot_be_reassigned(self):
        formula = And(a, b)
        with pytest.raises(dataclasses.FrozenInstanceError):
            formula.left = b  # type: ignore[misc]

    def test_atomic_name_cannot_be_reassigned(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.name = "z"  # type: ignore[misc]


class TestKinds:
    @pytest.mark.parametrize(
        ("formula", "kind"),
        [
            (TrueFormula(), FormulaKind.TRUE),
            (a, FormulaKind.ATOMIC),
            (Not(a), FormulaKind.NOT),
            (And(a, b), FormulaKind.AND),
            (ExistsNext(a), FormulaKind.EXISTS_NEXT),
            (ForAllNext(a), FormulaKind.FOR_ALL_NEXT),
        ],
    )
    def test_kind(self, formula, kind):
        assert formula.kind == kind

    def test_accessors(self):
        conj = And(a, b)
        assert conj.left == a
        assert conj.right == b
        assert Not(a).formula == a
        assert ExistsNext(b).formula == b
        assert ForAllNext(conj).formula == conj


# =============================================================================
# Random Generation
# =============================================================================


class TestRandomFormula:
    def test_depth_zero_is_base_case(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            formula = random_formula(0, rng=rng)
            assert isinstance(formula, (TrueFormula, AtomicProposition))

    def test_atomic_names_from_alphabet(self):
        rng = np.random.default_rng(1)
        for _ in range(100):
            for name in atomic_propositions(random_formula(4, rng=rng)):
                assert name in {"a", "b", "c", "d", "e"}

    @pytest.mark.parametrize("depth", [0, 1, 2, 3, 5, 8])
    def test_depth_bound(self, depth):
        rng = np.random.default_rng(depth)
        for _ in range(100):
            assert formula_depth(random_formula(depth, rng=rng)) <= depth

    def test_default_depth(self):
        rng = np.random.default_rng(2)
        for _ in range(50):
            assert formula_depth(CTLFormula.random(rng=rng)) <= DEFAULT_DEPTH

    def test_reproducible_with_seed(self):
        assert random_formula(6, rng=1234) == random_formula(6, rng=1234)

    def test_static_random_matches_function(self):
        assert CTLFormula.random(4, rng=99) == random_formula(4, rng=99)

    def test_negative_depth_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            random_formula(-1)

    def test_custom_alphabet(self):
        alphabet = Alphabet(base="p", size=2)
        rng = np.random.default_rng(3)
        names: set[str] = set()
        for _ in range(100):
            names |= atomic_propositions(random_formula(3, rng=rng, alphabet=alphabet))
        assert names == {"p", "q"}

    def test_base_cases_uniform(self):
        rng = np.random.default_rng(4)
        counts = Counter(random_formula(0, rng=rng).kind for _ in range(2000))
        assert set(counts) == {FormulaKind.TRUE, FormulaKind.ATOMIC}
        assert 900 <= counts[FormulaKind.TRUE] <= 1100

    def test_all_variants_uniform_above_depth_zero(self):
        rng = np.random.default_rng(5)
        counts = Counter(random_formula(1, rng=rng).kind for _ in range(6000))
        assert set(counts) == set(FormulaKind)
        for kind in FormulaKind:
            assert 850 <= counts[kind] <= 1150

    def test_case_counts(self):
        assert BASE_CASES == 2
        assert INDUCTIVE_CASES == 4


class TestInvalidSelector:
    def test_base_case_selector_out_of_range(self):
        with pytest.raises(InvalidSelectorError) as excinfo:
            _random_formula(0, _FixedSelector(BASE_CASES), DEFAULT_ALPHABET)
        assert excinfo.value.selector == BASE_CASES
        assert excinfo.value.cases == BASE_CASES

    def test_inductive_selector_out_of_range(self):
        selector = BASE_CASES + INDUCTIVE_CASES
        with pytest.raises(InvalidSelectorError, match="inductive"):
            _random_formula(3, _FixedSelector(selector), DEFAULT_ALPHABET)


# =============================================================================
# Metrics
# =============================================================================


class TestMetrics:
    def test_leaf_depth(self):
        assert formula_depth(TrueFormula()) == 0
        assert formula_depth(a) == 0

    def test_depth_takes_longest_branch(self):
        formula = And(a, ExistsNext(Not(b)))
        assert formula_depth(formula) == 3

    def test_size(self):
        assert formula_size(And(a, ExistsNext(Not(b)))) == 5

    def test_subformulas_preorder(self):
        formula = And(Not(a), b)
        assert list(subformulas(formula)) == [formula, Not(a), a, b]

    def test_atomic_propositions(self):
        formula = And(Not(a), ForAllNext(And(b, a)))
        assert atomic_propositions(formula) == frozenset({"a", "b"})

    def test_no_atomic_propositions(self):
        assert atomic_propositions(ExistsNext(TrueFormula())) == frozenset()
