"""
Boundary value types for pga-axioms.

The algebra works on multivectors, but the UI collaborator speaks in plain
coordinates: a point is `(x, y)` and a line is the coefficient triple of
`ax + by + c = 0`. These named tuples are the currency at that boundary and
inside the polygon clipper.
"""

from typing import NamedTuple, Tuple, Dict


class Point(NamedTuple):
    """Euclidean point in sheet coordinates."""
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}


class Line(NamedTuple):
    """Line `a*x + b*y + c = 0`."""
    a: float
    b: float
    c: float

    def evaluate(self, p: Point) -> float:
        """Value of the line equation at `p` (signed distance for unit lines)."""
        return self.a * p.x + self.b * p.y + self.c

    def to_dict(self) -> Dict[str, float]:
        return {"a": float(self.a), "b": float(self.b), "c": float(self.c)}


# Ordered ring of vertices
Polygon = Tuple[Point, ...]
