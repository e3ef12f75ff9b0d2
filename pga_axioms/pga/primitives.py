"""
Geometric primitives in 2D Projective Geometric Algebra (PGA).

2D PGA represents geometric objects as follows:
- Lines: Grade-1 vectors (a*e1 + b*e2 + c*e0 for ax + by + c = 0)
- Points: Grade-2 bivectors (x*e20 + y*e01 + w*e12, Euclidean when w != 0)
- Ideal points: Bivectors with w = 0, i.e. directions at infinity

Key operations:
- Join (∨): point ∨ point → line through both
- Meet (∧): line ∧ line → intersection point (ideal when parallel)
- Inner product: line · point → perpendicular line through the point
- Sandwich: m X m⁻¹ reflects X across the line m
"""

from __future__ import annotations
from typing import Optional, Tuple, Union
import torch

from ..core.constants import BASIS_COUNT, DEFAULT_DTYPE, DEFAULT_EPS
from .algebra import (
    Multivector,
    join,
    meet,
    e012,
    IDX_E0, IDX_E1, IDX_E2,
    IDX_E01, IDX_E20, IDX_E12,
    IDX_E012,
)


def _as_tensors(*values: Union[float, torch.Tensor]) -> Tuple[torch.Tensor, ...]:
    """Promote floats to tensors and broadcast everything to a common shape."""
    tensors = [
        v if isinstance(v, torch.Tensor) else torch.tensor(v, dtype=DEFAULT_DTYPE)
        for v in values
    ]
    dtype = tensors[0].dtype if tensors[0].is_floating_point() else DEFAULT_DTYPE
    tensors = [t.to(dtype) for t in tensors]
    return tuple(torch.broadcast_tensors(*tensors))


def point(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor],
) -> Multivector:
    """
    Create a normalized PGA point from Cartesian coordinates.

    In 2D PGA, a point is represented as:
        P = x*e20 + y*e01 + e12

    e20 is dual to e1 and e01 is dual to e2, so the coordinates sit on the
    blades complementary to the matching line coefficients.

    Args:
        x, y: Cartesian coordinates (scalars or tensors)

    Returns:
        Point multivector (grade-2 bivector) with weight 1
    """
    x, y = _as_tensors(x, y)
    mv = torch.zeros(*x.shape, BASIS_COUNT, device=x.device, dtype=x.dtype)
    mv[..., IDX_E20] = x
    mv[..., IDX_E01] = y
    mv[..., IDX_E12] = 1.0
    return Multivector(mv)


def ideal_point(
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor],
) -> Multivector:
    """
    Create an ideal point (point at infinity) from a direction.

    Ideal points have e12 component = 0 and represent directions.
    """
    dx, dy = _as_tensors(dx, dy)
    mv = torch.zeros(*dx.shape, BASIS_COUNT, device=dx.device, dtype=dx.dtype)
    mv[..., IDX_E20] = dx
    mv[..., IDX_E01] = dy
    return Multivector(mv)


def point_from_tensor(coords: torch.Tensor) -> Multivector:
    """
    Create points from a tensor of coordinates.

    Args:
        coords: Tensor of shape (..., 2) containing [x, y]
    """
    x, y = coords.unbind(dim=-1)
    return point(x, y)


def point_weight(p: Multivector) -> torch.Tensor:
    """Homogeneous weight W (the e12 coefficient) of a point."""
    return p.mv[..., IDX_E12]


def is_ideal_point(p: Multivector, eps: float = DEFAULT_EPS) -> bool:
    """True when the point has no Euclidean weight (a direction at infinity)."""
    return bool((point_weight(p).abs() < eps).any())


def normalize_point(p: Multivector) -> Multivector:
    """
    Rescale a point so that its weight is exactly 1.

    Ideal points are returned unchanged, so callers that care must check
    is_ideal_point() first.
    """
    w = point_weight(p)
    safe = torch.where(w == 0, torch.ones_like(w), w)
    return p / safe


def point_to_cartesian(p: Multivector) -> torch.Tensor:
    """
    Extract Cartesian coordinates from a PGA point.

    Returns:
        Tensor of shape (..., 2) containing [x, y]
    """
    p = normalize_point(p)
    return torch.stack([p.mv[..., IDX_E20], p.mv[..., IDX_E01]], dim=-1)


def line(
    a: Union[float, torch.Tensor],
    b: Union[float, torch.Tensor],
    c: Union[float, torch.Tensor],
) -> Multivector:
    """
    Create the line a*x + b*y + c = 0.

    In 2D PGA, a line is represented as:
        l = a*e1 + b*e2 + c*e0

    Returns:
        Line multivector (grade-1 vector)
    """
    a, b, c = _as_tensors(a, b, c)
    mv = torch.zeros(*a.shape, BASIS_COUNT, device=a.device, dtype=a.dtype)
    mv[..., IDX_E1] = a
    mv[..., IDX_E2] = b
    mv[..., IDX_E0] = c
    return Multivector(mv)


def line_coefficients(l: Multivector) -> torch.Tensor:
    """
    Extract (a, b, c) from a line.

    Returns:
        Tensor of shape (..., 3)
    """
    return torch.stack([l.mv[..., IDX_E1], l.mv[..., IDX_E2], l.mv[..., IDX_E0]], dim=-1)


def line_weight(l: Multivector) -> torch.Tensor:
    """Euclidean weight √(a² + b²) of a line; zero for the line at infinity."""
    return l.norm()


def normalize_line(l: Multivector, eps: float = DEFAULT_EPS) -> Multivector:
    """Rescale a line so that a² + b² = 1 (ideal lines are left unchanged)."""
    return l.normalize(eps)


def line_through(
    p0: Multivector,
    p1: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Unit line through two points, oriented from p0 towards p1.

    Returns:
        The normalized join, or None when the points coincide (the join
        has no Euclidean weight).
    """
    l = join(normalize_point(p0), normalize_point(p1))
    if bool((line_weight(l) < eps).any()):
        return None
    return normalize_line(l, eps)


def intersect(l0: Multivector, l1: Multivector) -> Multivector:
    """
    Intersection point of two lines.

    The weight of the result is ~0 exactly when the lines are parallel,
    in which case the point is ideal; see is_ideal_point().
    """
    return meet(l0, l1).grade(2)


def normal_direction(l: Multivector) -> Multivector:
    """
    Ideal point pointing along the normal (a, b) of a line.

    Algebraically this is the product l * e012 (metric polarity).
    """
    return (l * e012()).grade(2)


def line_direction(l: Multivector, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """
    Unit direction of travel (-b, a) of a line.

    For line_through(p0, p1) this points from p0 towards p1.

    Returns:
        Tensor of shape (..., 2)
    """
    _, a, b = normalize_line(l, eps).vector().unbind(dim=-1)
    return torch.stack([-b, a], dim=-1)


def perpendicular(l: Multivector, through_p: Multivector) -> Multivector:
    """
    Line through a point, perpendicular to l.

    The crease direction is l's normal, so the result is the join of the
    point with l's normal direction at infinity.
    """
    return normalize_line(join(normalize_point(through_p), normal_direction(l)))


def midpoint(p0: Multivector, p1: Multivector) -> Multivector:
    """Average of two points, re-homogenized to weight 1."""
    return normalize_point((normalize_point(p0) + normalize_point(p1)) * 0.5)


def reflect(x: Multivector, m: Multivector, eps: float = DEFAULT_EPS) -> Optional[Multivector]:
    """
    Reflect a point or line across the line m.

    Uses the sandwich product X' = m X m⁻¹. For points the result carries
    weight -1 (reflections reverse orientation); use reflect_point() for a
    re-homogenized point.

    Returns:
        The reflected element, or None when m has no inverse (ideal line).
    """
    m_inv = m.inverse(eps)
    if m_inv is None:
        return None
    return m * x * m_inv


def reflect_point(p: Multivector, m: Multivector, eps: float = DEFAULT_EPS) -> Optional[Multivector]:
    """Reflect a point across the line m, returning it with weight 1."""
    reflected = reflect(p, m, eps)
    if reflected is None:
        return None
    return normalize_point(reflected.grade(2))


def distance_point_point(p0: Multivector, p1: Multivector) -> torch.Tensor:
    """
    Euclidean distance between two points.

    This is the norm of the line joining the normalized points.
    """
    return join(normalize_point(p0), normalize_point(p1)).norm()


def signed_distance(p: Multivector, l: Multivector, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """
    Signed distance from a point to a line.

    Algebraically the e012 coefficient of p ∧ l for normalized p and l;
    positive on the side the line's normal (a, b) points to.
    """
    return (normalize_point(p) ^ normalize_line(l, eps)).mv[..., IDX_E012]


def angle_between(l0: Multivector, l1: Multivector, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """
    Angle between two oriented lines in [0, π].

    The cosine of the angle is the inner product of the unit lines.
    """
    cos = (normalize_line(l0, eps) | normalize_line(l1, eps)).scalar()
    return torch.acos(cos.clamp(-1.0, 1.0))


def bisector(l0: Multivector, l1: Multivector, eps: float = DEFAULT_EPS) -> Multivector:
    """
    Angle bisector l0/|l0| + l1/|l1| (unnormalized).

    The sum has no Euclidean weight when the unit normals are opposite.
    """
    return normalize_line(l0, eps) + normalize_line(l1, eps)


def project_point_onto_line(p: Multivector, l: Multivector) -> Multivector:
    """
    Foot of the perpendicular from p onto l.

    The perpendicular to l through p always meets l, so the result is a
    Euclidean point with weight 1.
    """
    return normalize_point(intersect(perpendicular(l, p), l))


def project_line_onto_point(l: Multivector, p: Multivector) -> Multivector:
    """
    Line parallel to l passing through p, same orientation as l.

    (l · p) is the perpendicular through p; taking the inner product with p
    once more turns it back by a right angle, flipping the orientation.
    """
    p = normalize_point(p)
    return -normalize_line((l | p) | p)
