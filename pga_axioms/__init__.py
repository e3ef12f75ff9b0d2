"""
pga-axioms: Huzita–Hatori origami axioms in 2D Projective Geometric Algebra

A PyTorch library that computes origami fold lines with the algebra R(2,0,1):
points and lines are multivectors, joins and meets replace ad-hoc line
formulas, and reflections are sandwich products.

Key Features:
- Full 2D PGA algebra (8-component multivectors)
- Point and line primitives built on join, meet and duality
- Solvers for all seven Huzita–Hatori axioms
- Polygon clipping of the sheet along a crease
- Rotors and translators for rigid motions

API Design:
- Solvers take multivectors and return a unit crease line or None
- Degenerate geometry yields None; API misuse raises AxiomArgumentError
- The folding module speaks plain (x, y) and (a, b, c) tuples for the UI

Example:
    >>> from pga_axioms.folding import Paper, axiom_1
    >>> paper = Paper.centered(500, 500)
    >>> result = axiom_1(paper, (250, 125), (250, 375))
    >>> result.crease
    Line(a=1.0, b=0.0, c=-250.0)
"""

__version__ = "0.1.0"
__author__ = "pga-axioms Contributors"

from . import core
from . import pga
from . import axioms
from . import folding
from . import utils

__all__ = [
    "core",
    "pga",
    "axioms",
    "folding",
    "utils",
]
