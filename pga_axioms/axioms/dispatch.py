"""
Axiom selection and dispatch.

The seven axioms form a closed set; each one fixes how many points and lines
it consumes. solve() checks the counts and calls the matching solver with
the tolerance and root choices from a SolverConfig.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

from ..core.exceptions import AxiomArgumentError
from ..pga.algebra import Multivector
from ..utils.config import SolverConfig
from .solvers import (
    axiom_1,
    axiom_2,
    axiom_3,
    axiom_4,
    axiom_5,
    axiom_6,
    axiom_7,
)


class Axiom(IntEnum):
    """The Huzita–Hatori axioms."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7

    @property
    def point_count(self) -> int:
        """Number of points the axiom takes."""
        return _ARITY[self][0]

    @property
    def line_count(self) -> int:
        """Number of lines the axiom takes."""
        return _ARITY[self][1]


# (points, lines) per axiom
_ARITY = {
    Axiom.ONE: (2, 0),
    Axiom.TWO: (2, 0),
    Axiom.THREE: (0, 2),
    Axiom.FOUR: (1, 1),
    Axiom.FIVE: (2, 1),
    Axiom.SIX: (2, 2),
    Axiom.SEVEN: (1, 2),
}


@dataclass(frozen=True)
class AxiomInput:
    """
    Ordered points followed by ordered lines.

    Attributes:
        points: Grade-2 point multivectors
        lines: Grade-1 line multivectors
    """
    points: Tuple[Multivector, ...] = ()
    lines: Tuple[Multivector, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))
        object.__setattr__(self, 'lines', tuple(self.lines))


def _as_axiom(axiom: Union[Axiom, int]) -> Axiom:
    try:
        return Axiom(axiom)
    except ValueError:
        raise AxiomArgumentError(str(axiom), "unknown axiom, expected 1 to 7")


def solve(
    axiom: Union[Axiom, int],
    axiom_input: AxiomInput,
    config: Optional[SolverConfig] = None,
) -> Optional[Multivector]:
    """
    Compute the crease for an axiom.

    Args:
        axiom: Which axiom to apply
        axiom_input: Its points and lines
        config: Solver configuration (defaults to SolverConfig())

    Returns:
        Unit crease line, or None for degenerate geometry

    Raises:
        AxiomArgumentError: If the point or line count does not match the axiom
    """
    axiom = _as_axiom(axiom)
    config = config or SolverConfig()

    points, lines = axiom_input.points, axiom_input.lines
    if len(points) != axiom.point_count or len(lines) != axiom.line_count:
        raise AxiomArgumentError(
            f"axiom {axiom.value}",
            f"expected {axiom.point_count} point(s) and {axiom.line_count} line(s), "
            f"got {len(points)} and {len(lines)}",
        )

    eps = config.eps
    if axiom is Axiom.ONE:
        return axiom_1(points[0], points[1], eps=eps)
    if axiom is Axiom.TWO:
        return axiom_2(points[0], points[1], eps=eps)
    if axiom is Axiom.THREE:
        return axiom_3(lines[0], lines[1], eps=eps)
    if axiom is Axiom.FOUR:
        return axiom_4(points[0], lines[0], eps=eps)
    if axiom is Axiom.FIVE:
        return axiom_5(points[0], points[1], lines[0], eps=eps, root=config.axiom5_root)
    if axiom is Axiom.SIX:
        return axiom_6(points[0], points[1], lines[0], lines[1], eps=eps, index=config.axiom6_root)
    return axiom_7(points[0], lines[0], lines[1], eps=eps)
