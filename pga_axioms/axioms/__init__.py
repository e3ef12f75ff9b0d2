"""
Origami axiom solvers.

Turns point and line multivectors into the crease line of each of the seven
Huzita–Hatori axioms.
"""

from .solvers import (
    axiom_1,
    axiom_2,
    axiom_3,
    axiom_4,
    axiom_5,
    axiom_5_candidates,
    axiom_6,
    axiom_6_candidates,
    axiom_7,
)

from .dispatch import (
    Axiom,
    AxiomInput,
    solve,
)

__all__ = [
    # Solvers
    "axiom_1",
    "axiom_2",
    "axiom_3",
    "axiom_4",
    "axiom_5",
    "axiom_5_candidates",
    "axiom_6",
    "axiom_6_candidates",
    "axiom_7",
    # Dispatch
    "Axiom",
    "AxiomInput",
    "solve",
]
