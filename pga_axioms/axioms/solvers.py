"""
Huzita–Hatori axiom solvers.

Each solver takes PGA points (grade-2) and lines (grade-1) and returns the
unit crease line satisfying the axiom, or None when the configuration is
degenerate (coincident points, parallel lines, no real solution). Misuse of
the API (wrong grade, batched or non-finite inputs) raises
AxiomArgumentError instead.

Axioms:
1. Fold through two points.
2. Fold one point onto another.
3. Fold one line onto another.
4. Fold through a point, perpendicular to a line.
5. Fold through one point, placing another point onto a line.
6. Fold placing two points onto two lines.
7. Fold perpendicular to one line, placing a point onto another line.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
from numpy.polynomial import Polynomial
import torch

from ..core.constants import (
    DEFAULT_EPS,
    AXIOM5_ROOT_FORWARD,
    AXIOM5_ROOT_BACKWARD,
    AXIOM5_ROOTS,
)
from ..core.exceptions import AxiomArgumentError
from ..pga.algebra import Multivector
from ..pga.primitives import (
    point,
    point_to_cartesian,
    is_ideal_point,
    line_coefficients,
    line_weight,
    normalize_line,
    line_through,
    line_direction,
    perpendicular,
    midpoint,
    distance_point_point,
    signed_distance,
    project_point_onto_line,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Argument checks
# =============================================================================

def _require(axiom: str, name: str, element: Multivector, grade: int, eps: float) -> None:
    kind = "point" if grade == 2 else "line"
    if not isinstance(element, Multivector):
        raise AxiomArgumentError(
            axiom, f"{name} must be a {kind} Multivector, got {type(element).__name__}"
        )
    if element.shape != torch.Size([]):
        raise AxiomArgumentError(
            axiom, f"{name} must be a single {kind}, got batch shape {tuple(element.shape)}"
        )
    if not element.is_finite():
        raise AxiomArgumentError(axiom, f"{name} has non-finite coefficients")
    if not (element - element.grade(grade)).is_zero(eps):
        raise AxiomArgumentError(axiom, f"{name} is not a {kind} (grade {grade})")


def _require_points(axiom: str, eps: float, **points: Multivector) -> None:
    for name, p in points.items():
        _require(axiom, name, p, 2, eps)


def _require_lines(axiom: str, eps: float, **lines: Multivector) -> None:
    for name, l in lines.items():
        _require(axiom, name, l, 1, eps)


def _degenerate_inputs(
    axiom: str,
    points: Tuple[Multivector, ...],
    lines: Tuple[Multivector, ...],
    eps: float,
) -> bool:
    """Ideal points and lines without Euclidean weight have no fold."""
    if any(is_ideal_point(p, eps) for p in points):
        logger.debug(f"{axiom}: ideal point in input")
        return True
    if any(bool(line_weight(l) < eps) for l in lines):
        logger.debug(f"{axiom}: line without Euclidean weight in input")
        return True
    return False


def _finite(axiom: str, crease: Optional[Multivector]) -> Optional[Multivector]:
    if crease is not None and not crease.is_finite():
        logger.debug(f"{axiom}: crease has non-finite coefficients")
        return None
    return crease


# =============================================================================
# Helpers
# =============================================================================

def _xy(p: Multivector) -> np.ndarray:
    return point_to_cartesian(p).detach().cpu().double().numpy()


def _point_like(ref: Multivector, xy: np.ndarray) -> Multivector:
    coords = torch.as_tensor(xy, dtype=ref.dtype, device=ref.device)
    return point(coords[0], coords[1])


def _unit_frame(l: Multivector, eps: float) -> Tuple[np.ndarray, float, np.ndarray]:
    """Unit normal (a, b), offset c and direction (-b, a) of a line."""
    a, b, c = line_coefficients(normalize_line(l, eps)).detach().cpu().double().numpy()
    return np.array([a, b]), float(c), np.array([-b, a])


def _perpendicular_bisector(
    p: Multivector,
    q: Multivector,
    eps: float,
) -> Optional[Multivector]:
    """Crease folding p onto q."""
    joined = line_through(p, q, eps)
    if joined is None:
        return None
    return perpendicular(joined, midpoint(p, q))


# =============================================================================
# Axioms 1-4
# =============================================================================

def axiom_1(
    p0: Multivector,
    p1: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Axiom 1: fold through two points.

    The crease is the unit line p0 ∨ p1, oriented from p0 to p1.

    Returns:
        Crease line, or None when the points coincide
    """
    _require_points("axiom 1", eps, p0=p0, p1=p1)
    if _degenerate_inputs("axiom 1", (p0, p1), (), eps):
        return None

    crease = line_through(p0, p1, eps)
    if crease is None:
        logger.debug("axiom 1: points coincide")
    return _finite("axiom 1", crease)


def axiom_2(
    p0: Multivector,
    p1: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Axiom 2: fold p0 onto p1.

    The crease is the perpendicular bisector of the two points.

    Returns:
        Crease line, or None when the points coincide
    """
    _require_points("axiom 2", eps, p0=p0, p1=p1)
    if _degenerate_inputs("axiom 2", (p0, p1), (), eps):
        return None

    crease = _perpendicular_bisector(p0, p1, eps)
    if crease is None:
        logger.debug("axiom 2: points coincide")
    return _finite("axiom 2", crease)


def axiom_3(
    l0: Multivector,
    l1: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Axiom 3: fold l0 onto l1.

    The crease is the bisector unit(l0) + unit(l1). For intersecting lines
    this bisects the angle between the orientations; for parallel lines with
    the same orientation it is the midline.

    Returns:
        Crease line, or None when the unit normals are opposite (the sum has
        no Euclidean weight)
    """
    _require_lines("axiom 3", eps, l0=l0, l1=l1)
    if _degenerate_inputs("axiom 3", (), (l0, l1), eps):
        return None

    bisector = normalize_line(l0, eps) + normalize_line(l1, eps)
    if bool(line_weight(bisector) < eps):
        logger.debug("axiom 3: bisector has no Euclidean weight")
        return None
    return _finite("axiom 3", normalize_line(bisector, eps))


def axiom_4(
    p: Multivector,
    l: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Axiom 4: fold through p, perpendicular to l.

    Returns:
        Crease line, or None when l has no Euclidean weight
    """
    _require_points("axiom 4", eps, p=p)
    _require_lines("axiom 4", eps, l=l)
    if _degenerate_inputs("axiom 4", (p,), (l,), eps):
        return None
    return _finite("axiom 4", perpendicular(l, p))


# =============================================================================
# Axiom 5
# =============================================================================

def _axiom_5_images(
    p0: Multivector,
    p1: Multivector,
    l: Multivector,
    eps: float,
) -> Optional[Tuple[Multivector, Multivector]]:
    """
    Points of l at distance |p0 - p1| from p1, as (forward, backward).

    l is parametrized as foot + t * u with foot the projection of p1 and u
    the line's direction; the roots are t = +d and t = -d.
    """
    radius = float(distance_point_point(p0, p1))
    if radius < eps:
        logger.debug("axiom 5: p0 and p1 coincide")
        return None

    offset = abs(float(signed_distance(p1, l, eps)))
    if offset - radius > eps:
        logger.debug(f"axiom 5: circle of radius {radius:.6g} misses the line at {offset:.6g}")
        return None

    d = float(np.sqrt(max(radius * radius - offset * offset, 0.0)))
    foot = _xy(project_point_onto_line(p1, l))
    u = line_direction(l, eps).detach().cpu().numpy()
    return _point_like(p0, foot + d * u), _point_like(p0, foot - d * u)


def _axiom_5_crease(
    p0: Multivector,
    p1: Multivector,
    image: Multivector,
    eps: float,
) -> Optional[Multivector]:
    joined = line_through(image, p0, eps)
    if joined is None:
        return None
    return perpendicular(joined, p1)


def axiom_5(
    p0: Multivector,
    p1: Multivector,
    l: Multivector,
    eps: float = DEFAULT_EPS,
    root: str = AXIOM5_ROOT_FORWARD,
) -> Optional[Multivector]:
    """
    Axiom 5: fold through p1, placing p0 onto l.

    The image q of p0 lies on l and on the circle centred at p1 through p0;
    the crease is the perpendicular to q ∨ p0 through p1.

    Args:
        p0: Point that moves
        p1: Point the crease passes through
        l: Line p0 lands on
        eps: Tolerance
        root: 'forward' takes the intersection further along l's direction,
            'backward' the other one. When the chosen image coincides with p0
            the other one is used; when both do, the crease is p1 ∨ p0.

    Returns:
        Crease line, or None when the circle misses l or p0 == p1
    """
    _require_points("axiom 5", eps, p0=p0, p1=p1)
    _require_lines("axiom 5", eps, l=l)
    if root not in AXIOM5_ROOTS:
        raise AxiomArgumentError("axiom 5", f"root must be one of {AXIOM5_ROOTS}, got '{root}'")
    if _degenerate_inputs("axiom 5", (p0, p1), (l,), eps):
        return None

    images = _axiom_5_images(p0, p1, l, eps)
    if images is None:
        return None
    if root == AXIOM5_ROOT_BACKWARD:
        images = images[::-1]

    for image in images:
        crease = _axiom_5_crease(p0, p1, image, eps)
        if crease is not None:
            return _finite("axiom 5", crease)

    # p0 already on l and the circle is tangent there
    logger.debug("axiom 5: both images coincide with p0")
    return _finite("axiom 5", line_through(p1, p0, eps))


def axiom_5_candidates(
    p0: Multivector,
    p1: Multivector,
    l: Multivector,
    eps: float = DEFAULT_EPS,
) -> List[Multivector]:
    """
    All axiom 5 creases, forward root first.

    Images coinciding with p0 are skipped.
    """
    _require_points("axiom 5", eps, p0=p0, p1=p1)
    _require_lines("axiom 5", eps, l=l)
    if _degenerate_inputs("axiom 5", (p0, p1), (l,), eps):
        return []

    images = _axiom_5_images(p0, p1, l, eps)
    if images is None:
        return []

    creases = []
    for image in images:
        crease = _finite("axiom 5", _axiom_5_crease(p0, p1, image, eps))
        if crease is not None:
            creases.append(crease)
    if not creases:
        fallback = _finite("axiom 5", line_through(p1, p0, eps))
        if fallback is not None:
            creases.append(fallback)
    return creases


# =============================================================================
# Axiom 6
# =============================================================================

def _axiom_6_polynomial(
    xy0: np.ndarray,
    xy1: np.ndarray,
    foot0: np.ndarray,
    u0: np.ndarray,
    n1: np.ndarray,
    c1: float,
) -> Polynomial:
    """
    Cubic in t whose roots place p1 on l1.

    p0's image is q(t) = foot0 + t * u0 on l0. With n = q - p0 the crease
    normal and m the midpoint of p0 and q, reflecting p1 gives
    p1' = p1 - 2 ((p1 - m) . n) / |n|^2 n. Requiring L1(p1') = 0 and
    clearing |n|^2:

        F(t) = L1(p1) |n|^2 - 2 ((p1 - m) . n) (N1 . n)

    Coordinates are expected in the normalized frame of _axiom_6_frame, so
    the coefficients stay comparable in size whatever the sheet scale.
    """
    n0 = foot0 - xy0
    w0 = xy1 - 0.5 * (xy0 + foot0)

    # n(t) = n0 + t u0, w(t) = w0 - t/2 u0, coefficients low to high
    n = [Polynomial([n0[i], u0[i]]) for i in range(2)]
    w = [Polynomial([w0[i], -0.5 * u0[i]]) for i in range(2)]

    n_sq = n[0] * n[0] + n[1] * n[1]
    w_dot_n = w[0] * n[0] + w[1] * n[1]
    normal_dot_n = float(n1[0]) * n[0] + float(n1[1]) * n[1]
    value_p1 = float(np.dot(n1, xy1) + c1)

    return value_p1 * n_sq - 2.0 * w_dot_n * normal_dot_n


def _axiom_6_frame(
    p0: Multivector,
    p1: Multivector,
    l0: Multivector,
    l1: Multivector,
    eps: float,
) -> Tuple[float, np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray, float]:
    """
    Inputs measured from p0 in units of the configuration's size.

    Returns:
        (scale, xy0, xy1, foot0, u0, n1, c1) with xy0 = 0 and every length
        divided by scale
    """
    origin = _xy(p0)
    xy1 = _xy(p1) - origin
    foot0 = _xy(project_point_onto_line(p0, l0)) - origin
    _, _, u0 = _unit_frame(l0, eps)
    n1, c1 = _unit_frame(l1, eps)[:2]
    c1 = c1 + float(np.dot(n1, origin))

    scale = max(float(np.hypot(*xy1)), float(np.hypot(*foot0)), abs(c1))
    if scale < eps:
        scale = 1.0
    return scale, np.zeros(2), xy1 / scale, foot0 / scale, u0, n1, c1 / scale


def _reflection_residual(
    xy1: np.ndarray,
    image: np.ndarray,
    n1: np.ndarray,
    c1: float,
) -> float:
    """L1 evaluated at p1 reflected across the bisector of p0 = 0 and image."""
    m = 0.5 * image
    reflected = xy1 - 2.0 * np.dot(xy1 - m, image) / np.dot(image, image) * image
    return float(np.dot(n1, reflected) + c1)


def axiom_6_candidates(
    p0: Multivector,
    p1: Multivector,
    l0: Multivector,
    l1: Multivector,
    eps: float = DEFAULT_EPS,
) -> List[Multivector]:
    """
    All axiom 6 creases, ordered by how far p0's image lies from its
    projection onto l0 (ties broken towards l0's negative direction).

    There are at most three. Every root of the cubic is checked by
    reflecting p1 before it becomes a crease.
    """
    _require_points("axiom 6", eps, p0=p0, p1=p1)
    _require_lines("axiom 6", eps, l0=l0, l1=l1)
    if _degenerate_inputs("axiom 6", (p0, p1), (l0, l1), eps):
        return []

    scale, xy0, xy1, foot0, u0, n1, c1 = _axiom_6_frame(p0, p1, l0, l1, eps)
    cubic = _axiom_6_polynomial(xy0, xy1, foot0, u0, n1, c1)
    if np.max(np.abs(cubic.coef)) < eps:
        logger.debug("axiom 6: every fold along l0 works, no unique crease")
        return []

    cubic = cubic.trim(tol=eps)
    if cubic.degree() < 1:
        logger.debug("axiom 6: no real root")
        return []

    taus = []
    for root in cubic.roots():
        if abs(root.imag) > eps * max(1.0, abs(root.real)):
            continue
        tau = float(root.real)
        image = foot0 + tau * u0
        # q(t) == p0 gives no crease
        if np.hypot(*image) < eps:
            continue
        if abs(_reflection_residual(xy1, image, n1, c1)) > eps:
            logger.debug(f"axiom 6: root t={tau * scale:.6g} does not place p1 on l1")
            continue
        if any(abs(tau - seen) < eps for seen in taus):
            continue
        taus.append(tau)
    taus.sort(key=lambda tau: (abs(tau), tau))

    origin = _xy(p0)
    creases = []
    for tau in taus:
        image = _point_like(p0, origin + scale * (foot0 + tau * u0))
        crease = _finite("axiom 6", _perpendicular_bisector(p0, image, eps))
        if crease is not None:
            creases.append(crease)
    if not creases:
        logger.debug("axiom 6: no real root gives a crease")
    return creases


def axiom_6(
    p0: Multivector,
    p1: Multivector,
    l0: Multivector,
    l1: Multivector,
    eps: float = DEFAULT_EPS,
    index: int = 0,
) -> Optional[Multivector]:
    """
    Axiom 6: fold placing p0 onto l0 and p1 onto l1.

    Args:
        index: Which of the ordered candidates to return

    Returns:
        Crease line, or None when there are fewer than index + 1 solutions
    """
    candidates = axiom_6_candidates(p0, p1, l0, l1, eps)
    if index >= len(candidates):
        logger.debug(f"axiom 6: {len(candidates)} candidate(s), index {index} requested")
        return None
    return candidates[index]


# =============================================================================
# Axiom 7
# =============================================================================

def axiom_7(
    p: Multivector,
    l0: Multivector,
    l1: Multivector,
    eps: float = DEFAULT_EPS,
) -> Optional[Multivector]:
    """
    Axiom 7: fold perpendicular to l1, placing p onto l0.

    A crease perpendicular to l1 moves p along l1's direction u1, so its
    image is q = p + s * u1 with L0(q) = 0.

    Returns:
        Crease line, or None when l0 is parallel to l1
    """
    _require_points("axiom 7", eps, p=p)
    _require_lines("axiom 7", eps, l0=l0, l1=l1)
    if _degenerate_inputs("axiom 7", (p,), (l0, l1), eps):
        return None

    n0, c0, _ = _unit_frame(l0, eps)
    _, _, u1 = _unit_frame(l1, eps)
    rate = float(np.dot(n0, u1))
    if abs(rate) < eps:
        logger.debug("axiom 7: l0 is parallel to l1")
        return None

    xy = _xy(p)
    s = -(float(np.dot(n0, xy)) + c0) / rate
    image = _point_like(p, xy + s * u1)
    return _finite("axiom 7", perpendicular(l1, midpoint(p, image)))
