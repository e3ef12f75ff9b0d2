"""
Folding module for pga-axioms.

Contains:
- Paper: The immutable sheet
- Clipping: Splitting the sheet along a crease
- Result: The fold result and its serialized form
- Interop: Coordinate-level entry points for the UI
"""

from .paper import Paper

from .clipping import (
    clip,
    signed_distances,
    polygon_area,
    fold_polygon,
)

from .result import (
    AxiomResult,
    serialize_result,
    result_to_json,
)

from .interop import (
    to_point,
    to_line,
    from_point,
    from_line,
    segment,
    fold,
    axiom_1,
    axiom_2,
    axiom_3,
    axiom_4,
    axiom_5,
)

__all__ = [
    # Paper
    "Paper",
    # Clipping
    "clip",
    "signed_distances",
    "polygon_area",
    "fold_polygon",
    # Result
    "AxiomResult",
    "serialize_result",
    "result_to_json",
    # Interop
    "to_point",
    "to_line",
    "from_point",
    "from_line",
    "segment",
    "fold",
    "axiom_1",
    "axiom_2",
    "axiom_3",
    "axiom_4",
    "axiom_5",
]
