"""
Fold results and their serialized form.

An AxiomResult is what the UI consumes: the crease as line coefficients and
the two polygons it divides the sheet into.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.constants import DEFAULT_EPS, KEY_LINE, KEY_POSITIVE, KEY_NEGATIVE
from ..core.types import Line, Polygon
from ..pga.primitives import line
from .clipping import fold_polygon


@dataclass(frozen=True)
class AxiomResult:
    """
    Crease plus the two halves of the sheet.

    Attributes:
        crease: Unit crease line
        positive: Part of the sheet on the side the crease normal points to
        negative: Part of the sheet on the other side
    """
    crease: Line
    positive: Polygon
    negative: Polygon

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary the UI consumes."""
        return {
            KEY_LINE: self.crease.to_dict(),
            KEY_POSITIVE: [p.to_dict() for p in self.positive],
            KEY_NEGATIVE: [p.to_dict() for p in self.negative],
        }

    def folded(self, eps: float = DEFAULT_EPS) -> Polygon:
        """The negative half after folding it over the crease."""
        folded = fold_polygon(self.negative, line(*self.crease), eps)
        return folded if folded is not None else ()


def serialize_result(result: Optional[AxiomResult]) -> Dict[str, Any]:
    """
    Serialize a fold result; None (no fold exists) has a null line and
    empty polygons.
    """
    if result is None:
        return {KEY_LINE: None, KEY_POSITIVE: [], KEY_NEGATIVE: []}
    return result.to_dict()


def result_to_json(result: Optional[AxiomResult], indent: Optional[int] = None) -> str:
    """Serialize a fold result to a JSON string."""
    return json.dumps(serialize_result(result), indent=indent)
