"""
Core module for pga-axioms.

Contains:
- Constants: The shared epsilon, dtype and algebra layout
- Types: Boundary value types (Point, Line, Polygon)
- Exceptions: Contract-violation errors
"""

from .constants import (
    DEFAULT_EPS,
    DEFAULT_DTYPE,
    BASIS_COUNT,
    BASIS_ELEMENTS,
    MAX_GRADE,
    DEFAULT_PAPER_FRACTION,
    PAPER_CORNER_COUNT,
    AXIOM5_ROOT_FORWARD,
    AXIOM5_ROOT_BACKWARD,
    AXIOM5_ROOTS,
    KEY_LINE,
    KEY_POSITIVE,
    KEY_NEGATIVE,
)

from .types import (
    Point,
    Line,
    Polygon,
)

from .exceptions import (
    PGAAxiomsError,
    AxiomArgumentError,
    InvalidPaperError,
)

__all__ = [
    # Constants
    "DEFAULT_EPS",
    "DEFAULT_DTYPE",
    "BASIS_COUNT",
    "BASIS_ELEMENTS",
    "MAX_GRADE",
    "DEFAULT_PAPER_FRACTION",
    "PAPER_CORNER_COUNT",
    "AXIOM5_ROOT_FORWARD",
    "AXIOM5_ROOT_BACKWARD",
    "AXIOM5_ROOTS",
    "KEY_LINE",
    "KEY_POSITIVE",
    "KEY_NEGATIVE",
    # Types
    "Point",
    "Line",
    "Polygon",
    # Exceptions
    "PGAAxiomsError",
    "AxiomArgumentError",
    "InvalidPaperError",
]
