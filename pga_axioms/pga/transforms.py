"""
Rigid transformations in 2D PGA.

Translators and rotors are even versors applied with the sandwich product
X' = V X ~V. They transform points and lines alike while preserving
distances and angles.
"""

from __future__ import annotations
from typing import Optional, Union
import torch

from ..core.constants import DEFAULT_DTYPE
from .algebra import Multivector, sandwich, scalar, e01, e20
from .primitives import point, normalize_point, point_weight


def translator(
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor],
) -> Multivector:
    """
    Translator moving elements by (dx, dy).

    T = 1 - (dx/2)*e01 + (dy/2)*e20

    Sandwiching a point x*e20 + y*e01 + e12 gives (x + dx)*e20 + (y + dy)*e01 + e12.
    """
    if not isinstance(dx, torch.Tensor):
        dx = torch.tensor(float(dx), dtype=DEFAULT_DTYPE)
    if not isinstance(dy, torch.Tensor):
        dy = torch.tensor(float(dy), dtype=dx.dtype)
    return scalar(torch.ones_like(dx)) + e01(-0.5 * dx) + e20(0.5 * dy)


def rotor(
    angle: Union[float, torch.Tensor],
    cx: Union[float, torch.Tensor] = 0.0,
    cy: Union[float, torch.Tensor] = 0.0,
) -> Multivector:
    """
    Rotor turning elements by `angle` radians about the point (cx, cy).

    R = cos(θ/2) - sin(θ/2) * C, with C the normalized centre point. Positive
    angles rotate counter-clockwise in a y-up frame.
    """
    if not isinstance(angle, torch.Tensor):
        angle = torch.tensor(float(angle), dtype=DEFAULT_DTYPE)
    half = angle * 0.5
    center = point(cx, cy)
    return scalar(torch.cos(half)) - center * torch.sin(half)


def _rehomogenize(result: Multivector, element: Multivector) -> Multivector:
    # Points keep weight 1 if they started with it
    if bool((point_weight(element) != 0).any()) and bool((element.vector() == 0).all()):
        return normalize_point(result)
    return result


def translate(
    element: Multivector,
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor],
) -> Multivector:
    """
    Translate a point or line by (dx, dy).

    Args:
        element: Multivector to translate
        dx, dy: Translation vector components

    Returns:
        Translated multivector
    """
    return _rehomogenize(sandwich(translator(dx, dy), element), element)


def rotate(
    element: Multivector,
    angle: Union[float, torch.Tensor],
    center: Optional[Multivector] = None,
) -> Multivector:
    """
    Rotate a point or line about a centre point.

    Args:
        element: Multivector to rotate
        angle: Rotation angle in radians (counter-clockwise, y-up)
        center: Centre of rotation (defaults to the origin)

    Returns:
        Rotated multivector
    """
    if center is None:
        cx, cy = 0.0, 0.0
    else:
        c = normalize_point(center)
        cx, cy = c.blade('e20'), c.blade('e01')
    return _rehomogenize(sandwich(rotor(angle, cx, cy), element), element)
