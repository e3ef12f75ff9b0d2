"""
The sheet being folded.

A Paper is an immutable convex quadrilateral given by its four corners in
ring order (upper-left, upper-right, lower-right, lower-left). It is the only
value that outlives a single fold; every fold reads it and none modifies it.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.constants import DEFAULT_EPS, DEFAULT_PAPER_FRACTION, PAPER_CORNER_COUNT
from ..core.exceptions import InvalidPaperError
from ..core.types import Point
from .clipping import polygon_area


def _turns(corners: Tuple[Point, ...]) -> np.ndarray:
    """Cross product of consecutive edges at each corner."""
    xy = np.asarray(corners, dtype=np.float64)
    edges = np.roll(xy, -1, axis=0) - xy
    nxt = np.roll(edges, -1, axis=0)
    return edges[:, 0] * nxt[:, 1] - edges[:, 1] * nxt[:, 0]


@dataclass(frozen=True)
class Paper:
    """
    Convex, consistently wound quadrilateral sheet.

    Attributes:
        ul: Upper-left corner
        ur: Upper-right corner
        lr: Lower-right corner
        ll: Lower-left corner

    Raises:
        InvalidPaperError: If the corners are not finite or do not form a
            convex, non-self-intersecting ring
    """
    ul: Point
    ur: Point
    lr: Point
    ll: Point

    def __post_init__(self):
        for name in ('ul', 'ur', 'lr', 'll'):
            value = getattr(self, name)
            try:
                x, y = value
            except (TypeError, ValueError):
                raise InvalidPaperError(f"corner {name} must be an (x, y) pair, got {value!r}")
            object.__setattr__(self, name, Point(float(x), float(y)))

        corners = self.corners()
        if not np.isfinite(np.asarray(corners, dtype=np.float64)).all():
            raise InvalidPaperError("corners must be finite")

        turns = _turns(corners)
        if np.any(np.abs(turns) < DEFAULT_EPS):
            raise InvalidPaperError("corners are collinear or repeated")
        if not (np.all(turns > 0) or np.all(turns < 0)):
            raise InvalidPaperError("corners do not form a convex, consistently wound ring")

    @classmethod
    def from_corners(cls, corners) -> 'Paper':
        """Build a sheet from a sequence of exactly four corners."""
        corners = tuple(corners)
        if len(corners) != PAPER_CORNER_COUNT:
            raise InvalidPaperError(
                f"expected {PAPER_CORNER_COUNT} corners, got {len(corners)}"
            )
        return cls(*corners)

    @classmethod
    def centered(
        cls,
        width: float,
        height: float,
        fraction: float = DEFAULT_PAPER_FRACTION,
    ) -> 'Paper':
        """
        Square sheet centred on a width x height canvas.

        The side is min(width, height) * fraction. Canvas coordinates grow
        rightwards and downwards, so the upper-left corner has the smallest
        coordinates.
        """
        if width <= 0 or height <= 0:
            raise InvalidPaperError(f"canvas must have positive size, got {width} x {height}")
        if not 0 < fraction <= 1:
            raise InvalidPaperError(f"fraction must be in (0, 1], got {fraction}")

        half = min(width, height) * fraction / 2
        cx, cy = width / 2, height / 2
        return cls(
            Point(cx - half, cy - half),
            Point(cx + half, cy - half),
            Point(cx + half, cy + half),
            Point(cx - half, cy + half),
        )

    def corners(self) -> Tuple[Point, ...]:
        """Corners in ring order."""
        return (self.ul, self.ur, self.lr, self.ll)

    def area(self) -> float:
        """Unsigned area of the sheet."""
        return abs(polygon_area(self.corners()))
