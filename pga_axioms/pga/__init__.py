"""
PGA (Projective Geometric Algebra) module.

Implements the algebra R(2,0,1) with 8-component multivectors, the
geometric, inner and outer products, duality, join/meet, and the point and
line primitives built on them.
"""

from .algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
    join,
    meet,
    dual,
    reverse,
    involute,
    conjugate,
    inverse,
    sandwich,
    scalar,
    e0, e1, e2,
    e01, e20, e12,
    e012,
)

from .primitives import (
    point,
    ideal_point,
    point_from_tensor,
    point_to_cartesian,
    point_weight,
    is_ideal_point,
    normalize_point,
    line,
    line_coefficients,
    line_weight,
    normalize_line,
    line_through,
    intersect,
    normal_direction,
    line_direction,
    perpendicular,
    midpoint,
    reflect,
    reflect_point,
    distance_point_point,
    signed_distance,
    angle_between,
    bisector,
    project_point_onto_line,
    project_line_onto_point,
)

from .transforms import (
    translator,
    rotor,
    translate,
    rotate,
)

__all__ = [
    # Algebra
    "Multivector",
    "geometric_product",
    "outer_product",
    "inner_product",
    "regressive_product",
    "join",
    "meet",
    "dual",
    "reverse",
    "involute",
    "conjugate",
    "inverse",
    "sandwich",
    "scalar",
    # Basis elements
    "e0", "e1", "e2",
    "e01", "e20", "e12",
    "e012",
    # Primitives
    "point",
    "ideal_point",
    "point_from_tensor",
    "point_to_cartesian",
    "point_weight",
    "is_ideal_point",
    "normalize_point",
    "line",
    "line_coefficients",
    "line_weight",
    "normalize_line",
    "line_through",
    "intersect",
    "normal_direction",
    "line_direction",
    "perpendicular",
    "midpoint",
    "reflect",
    "reflect_point",
    "distance_point_point",
    "signed_distance",
    "angle_between",
    "bisector",
    "project_point_onto_line",
    "project_line_onto_point",
    # Transforms
    "translator",
    "rotor",
    "translate",
    "rotate",
]
