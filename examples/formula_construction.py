"""Building CTL formulas by hand and comparing them structurally."""

from ctl_foundation import And, AtomicProposition, ExistsNext, ForAllNext, Not, TrueFormula
from ctl_foundation.serialization import formula_from_json, formula_to_json

ready = AtomicProposition("ready")
done = AtomicProposition("done")

# AX (ready && !EX done)
formula = ForAllNext(And(ready, Not(ExistsNext(done))))
print(f"Formula: {formula}")

# Equality is structural, not by identity
copy = ForAllNext(And(AtomicProposition("ready"), Not(ExistsNext(AtomicProposition("done")))))
print(f"Equal to independently built copy: {formula == copy}")
print(f"Same hash: {hash(formula) == hash(copy)}")

# Conjunction is ordered
print(f"(ready && done) == (done && ready): {And(ready, done) == And(done, ready)}")

# All `true` constants are equal
print(f"true == true: {TrueFormula() == TrueFormula()}")

text = formula_to_json(formula)
print(f"JSON: {text}")
print(f"Round trip equal: {formula_from_json(text) == formula}")
