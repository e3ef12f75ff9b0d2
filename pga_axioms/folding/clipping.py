"""
Polygon clipping against a crease.

The crease divides the plane into the side its normal (a, b) points to
(positive) and the other side (negative). clip() walks the sheet's ring once,
sorting corners by side and inserting the crease crossing on every edge whose
endpoints lie strictly on opposite sides.
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import torch

from ..core.constants import DEFAULT_EPS
from ..core.types import Point, Polygon
from ..pga.algebra import Multivector, join
from ..pga.primitives import (
    point_from_tensor,
    point_to_cartesian,
    intersect,
    signed_distance,
    reflect_point,
)


def _as_points(polygon: Sequence[Sequence[float]]) -> Polygon:
    return tuple(Point(float(x), float(y)) for x, y in polygon)


def _to_multivectors(polygon: Polygon, dtype: torch.dtype) -> Multivector:
    return point_from_tensor(torch.tensor([list(p) for p in polygon], dtype=dtype))


def _to_points(points: Multivector) -> Polygon:
    return _as_points(point_to_cartesian(points).detach().cpu().tolist())


def polygon_area(polygon: Sequence[Sequence[float]]) -> float:
    """
    Signed area of a polygon (shoelace formula).

    Positive for counter-clockwise rings in a y-up frame. Rings with fewer
    than three vertices have zero area.
    """
    if len(polygon) < 3:
        return 0.0
    xy = np.asarray(polygon, dtype=np.float64)
    x, y = xy[:, 0], xy[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def signed_distances(
    polygon: Sequence[Sequence[float]],
    crease: Multivector,
    eps: float = DEFAULT_EPS,
) -> np.ndarray:
    """
    Signed distance of every vertex from the crease.

    Returns:
        Array of shape (N,)
    """
    polygon = _as_points(polygon)
    if not polygon:
        return np.zeros(0)
    points = _to_multivectors(polygon, crease.dtype)
    return signed_distance(points, crease, eps).detach().cpu().numpy()


def _crossing(p: Point, q: Point, crease: Multivector) -> Point:
    """Point where the edge p-q crosses the crease."""
    start, end = _to_multivectors((p, q), crease.dtype).mv.unbind(0)
    crossing = intersect(join(Multivector(start), Multivector(end)), crease)
    x, y = point_to_cartesian(crossing).tolist()
    return Point(x, y)


def clip(
    polygon: Sequence[Sequence[float]],
    crease: Multivector,
    eps: float = DEFAULT_EPS,
) -> Tuple[Polygon, Polygon]:
    """
    Split a convex polygon along a crease.

    Vertices within eps of the crease belong to both halves. Ring order and
    winding are preserved in both outputs.

    Args:
        polygon: Vertices in ring order
        crease: Crease line
        eps: Tolerance

    Returns:
        (positive, negative). When the crease misses the polygon, the whole
        polygon is returned on the side it lies on and the other side is
        empty.
    """
    polygon = _as_points(polygon)
    distances = signed_distances(polygon, crease, eps)

    if not np.any(distances < -eps):
        return polygon, ()
    if not np.any(distances > eps):
        return (), polygon

    positive, negative = [], []
    count = len(polygon)
    for i in range(count):
        j = (i + 1) % count
        here, there = distances[i], distances[j]

        if here >= -eps:
            positive.append(polygon[i])
        if here <= eps:
            negative.append(polygon[i])

        if (here > eps and there < -eps) or (here < -eps and there > eps):
            crossing = _crossing(polygon[i], polygon[j], crease)
            positive.append(crossing)
            negative.append(crossing)

    return tuple(positive), tuple(negative)


def fold_polygon(
    polygon: Sequence[Sequence[float]],
    crease: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Polygon]:
    """
    Reflect a polygon across the crease, vertex by vertex.

    Returns:
        The folded polygon, or None when the crease is not invertible
    """
    polygon = _as_points(polygon)
    if not polygon:
        return ()
    reflected = reflect_point(_to_multivectors(polygon, crease.dtype), crease, eps)
    if reflected is None:
        return None
    return _to_points(reflected)
