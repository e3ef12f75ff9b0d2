"""
Boundary between the UI and the axiom engine.

The UI speaks in sheet coordinates: points are (x, y) pairs and lines are
(a, b, c) triples, or segments it joins itself. This module converts them to
multivectors, runs the solver, clips the sheet and returns plain values.

Example:
    >>> paper = Paper.centered(500, 500)
    >>> result = axiom_1(paper, Point(250, 125), Point(250, 375))
    >>> result.crease
    Line(a=1.0, b=0.0, c=-250.0)
"""

import logging
from typing import List, Optional, Sequence

import torch

from ..core.constants import DEFAULT_DTYPE, DEFAULT_EPS
from ..core.exceptions import AxiomArgumentError
from ..core.types import Line, Point
from ..pga.algebra import Multivector
from ..pga.primitives import (
    point,
    line,
    line_coefficients,
    line_through,
    point_to_cartesian,
)
from ..axioms.dispatch import Axiom, AxiomInput, solve
from ..utils.config import SolverConfig
from .clipping import clip
from .paper import Paper
from .result import AxiomResult

logger = logging.getLogger(__name__)


# =============================================================================
# Conversions
# =============================================================================

def _coordinates(values: Sequence[float], count: int, kind: str) -> List[float]:
    try:
        coords = [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise AxiomArgumentError("input", f"{kind} must be {count} numbers, got {values!r}") from e
    if len(coords) != count:
        raise AxiomArgumentError("input", f"{kind} must be {count} numbers, got {len(coords)}")
    return coords


def to_point(p: Sequence[float], dtype: torch.dtype = DEFAULT_DTYPE) -> Multivector:
    """Convert an (x, y) pair to a PGA point."""
    x, y = (torch.tensor(v, dtype=dtype) for v in _coordinates(p, 2, "point"))
    return point(x, y)


def to_line(l: Sequence[float], dtype: torch.dtype = DEFAULT_DTYPE) -> Multivector:
    """Convert an (a, b, c) triple to a PGA line."""
    a, b, c = (torch.tensor(v, dtype=dtype) for v in _coordinates(l, 3, "line"))
    return line(a, b, c)


def from_point(p: Multivector) -> Point:
    """Convert a Euclidean PGA point to sheet coordinates."""
    x, y = point_to_cartesian(p).tolist()
    return Point(x, y)


def from_line(l: Multivector) -> Line:
    """Convert a PGA line to its (a, b, c) coefficients."""
    a, b, c = line_coefficients(l).tolist()
    return Line(a, b, c)


def segment(
    src: Sequence[float],
    dst: Sequence[float],
    eps: float = DEFAULT_EPS,
) -> Optional[Line]:
    """
    Unit line through the endpoints of a dragged segment, oriented from src
    to dst.

    Returns:
        The line, or None for a zero-length segment
    """
    joined = line_through(to_point(src), to_point(dst), eps)
    if joined is None:
        return None
    return from_line(joined)


# =============================================================================
# Folding
# =============================================================================

def fold(
    paper: Paper,
    axiom: Axiom,
    points: Sequence[Sequence[float]] = (),
    lines: Sequence[Sequence[float]] = (),
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """
    Solve an axiom and split the sheet along the crease.

    Args:
        paper: Sheet to fold
        axiom: Which axiom to apply
        points: (x, y) pairs, in the axiom's order
        lines: (a, b, c) triples, in the axiom's order
        config: Solver configuration

    Returns:
        AxiomResult, or None when the axiom has no fold for these inputs

    Raises:
        AxiomArgumentError: If the number of points or lines is wrong
    """
    config = config or SolverConfig()
    dtype = config.torch_dtype

    axiom_input = AxiomInput(
        tuple(to_point(p, dtype) for p in points),
        tuple(to_line(l, dtype) for l in lines),
    )
    crease = solve(axiom, axiom_input, config)
    if crease is None:
        return None

    positive, negative = clip(paper.corners(), crease, config.eps)
    if not positive or not negative:
        logger.debug(f"axiom {int(axiom)}: crease misses the sheet")
    return AxiomResult(from_line(crease), positive, negative)


def axiom_1(
    paper: Paper,
    p0: Sequence[float],
    p1: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """Fold through p0 and p1."""
    return fold(paper, Axiom.ONE, (p0, p1), (), config)


def axiom_2(
    paper: Paper,
    p0: Sequence[float],
    p1: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """Fold p0 onto p1."""
    return fold(paper, Axiom.TWO, (p0, p1), (), config)


def axiom_3(
    paper: Paper,
    l0: Sequence[float],
    l1: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """Fold l0 onto l1."""
    return fold(paper, Axiom.THREE, (), (l0, l1), config)


def axiom_4(
    paper: Paper,
    p: Sequence[float],
    l: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """Fold through p, perpendicular to l."""
    return fold(paper, Axiom.FOUR, (p,), (l,), config)


def axiom_5(
    paper: Paper,
    p0: Sequence[float],
    p1: Sequence[float],
    l: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> Optional[AxiomResult]:
    """Fold through p1, placing p0 onto l."""
    return fold(paper, Axiom.FIVE, (p0, p1), (l,), config)
