"""
Tests for the coordinate-level boundary: fold results and serialization.
"""

import json

import pytest
import torch

from pga_axioms.core.exceptions import AxiomArgumentError
from pga_axioms.core.types import Line, Point
from pga_axioms.folding.interop import (
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
from pga_axioms.folding.result import AxiomResult, serialize_result, result_to_json
from pga_axioms.folding.clipping import polygon_area
from pga_axioms.axioms import Axiom
from pga_axioms.utils.config import SolverConfig


# =============================================================================
# Conversions
# =============================================================================

class TestConversions:
    """Plain tuples to multivectors and back."""

    def test_point_round_trip(self):
        """(x, y) survives the trip through a multivector."""
        assert from_point(to_point((3.5, -2.0))) == Point(3.5, -2.0)

    def test_line_round_trip(self):
        """(a, b, c) survives the trip through a multivector."""
        assert from_line(to_line((1.0, 2.0, 3.0))) == Line(1.0, 2.0, 3.0)

    def test_line_evaluate(self):
        """A unit line evaluates to the signed distance."""
        assert Line(1.0, 0.0, -250.0).evaluate(Point(300.0, 7.0)) == 50.0

    def test_dtype(self):
        """Conversions honour the requested dtype."""
        assert to_point((1.0, 2.0), torch.float32).dtype == torch.float32

    def test_segment(self):
        """A dragged segment becomes the unit line through its ends."""
        l = segment((0.0, 0.0), (0.0, 10.0))
        assert list(l) == pytest.approx([1.0, 0.0, 0.0])
        assert segment((1.0, 1.0), (1.0, 1.0)) is None

    @pytest.mark.parametrize("convert,value", [
        (to_point, (250,)),
        (to_point, (1.0, 2.0, 3.0)),
        (to_point, ("x", 2.0)),
        (to_line, (1.0, 0.0)),
        (to_line, None),
    ])
    def test_malformed_coordinates(self, convert, value):
        """Tuples of the wrong length or type raise AxiomArgumentError."""
        with pytest.raises(AxiomArgumentError):
            convert(value)

    def test_fold_malformed_point(self, paper):
        """fold() reports a malformed point as an argument error."""
        with pytest.raises(AxiomArgumentError, match="point must be 2 numbers"):
            fold(paper, Axiom.ONE, [(250,), (250, 375)])


# =============================================================================
# Axiom Entry Points
# =============================================================================

class TestAxiomEntryPoints:
    """Per-axiom functions: crease plus both halves of the sheet."""

    def test_axiom_1_vertical(self, paper):
        """Through (250, 125) and (250, 375): x = 250, equal halves."""
        result = axiom_1(paper, (250, 125), (250, 375))
        assert list(result.crease) == pytest.approx([1.0, 0.0, -250.0])
        assert abs(polygon_area(result.positive)) == pytest.approx(paper.area() / 2)
        assert abs(polygon_area(result.negative)) == pytest.approx(paper.area() / 2)

    def test_axiom_4_vertical(self, paper):
        """Through (250, 125) perpendicular to y = 250: x = 250."""
        result = axiom_4(paper, (250, 125), (0, 1, -250))
        assert list(result.crease) == pytest.approx([1.0, 0.0, -250.0])

    def test_coincident_points(self, paper):
        """Axioms 1 and 2 have no fold for coincident points."""
        assert axiom_1(paper, (250, 250), (250, 250)) is None
        assert axiom_2(paper, (250, 250), (250, 250)) is None

    def test_antiparallel_lines(self, paper):
        """Axiom 3 has no fold for opposite unit normals."""
        assert axiom_3(paper, (1, 0, -100), (-1, 0, 300)) is None

    def test_axiom_2_halves_swap(self, paper):
        """Folding a corner onto the opposite one along the diagonal."""
        result = axiom_2(paper, paper.ul, paper.lr)
        assert len(result.positive) == 3
        assert len(result.negative) == 3
        total = abs(polygon_area(result.positive)) + abs(polygon_area(result.negative))
        assert total == pytest.approx(paper.area())

    def test_axiom_5(self, paper):
        """Axiom 5 through the boundary, both roots."""
        p0, p1, l = (250, 100), (250, 250), (0, 1, -375)
        forward = axiom_5(paper, p0, p1, l)
        backward = axiom_5(paper, p0, p1, l, SolverConfig(axiom5_root="backward"))
        assert forward is not None and backward is not None
        assert forward.crease != backward.crease

    def test_crease_outside_sheet(self, paper):
        """A crease missing the sheet puts it all on one side."""
        result = axiom_1(paper, (10, 0), (10, 500))
        assert result.positive == paper.corners()
        assert result.negative == ()

    def test_fold_axiom_7(self, paper):
        """Axioms 6 and 7 go through fold()."""
        result = fold(paper, Axiom.SEVEN, [(300, 300)], [(0, 1, -250), (1, 0, 0)])
        assert result is not None
        # Crease is horizontal through y = 275
        a, b, c = result.crease
        assert a == pytest.approx(0.0, abs=1e-12)
        assert -c / b == pytest.approx(275.0)

    def test_fold_wrong_counts(self, paper):
        """fold() rejects a wrong number of points."""
        with pytest.raises(AxiomArgumentError):
            fold(paper, Axiom.ONE, [(0, 0)])

    def test_float32_config(self, paper):
        """The configured dtype flows through the solve."""
        result = axiom_1(paper, (250, 125), (250, 375), SolverConfig(dtype="float32"))
        assert list(result.crease) == pytest.approx([1.0, 0.0, -250.0], abs=1e-3)


# =============================================================================
# Results
# =============================================================================

class TestAxiomResult:
    """Result value and serialization."""

    @pytest.fixture
    def result(self, paper):
        return axiom_1(paper, (250, 125), (250, 375))

    def test_to_dict(self, result):
        """The UI dictionary holds the line and both polygons."""
        data = result.to_dict()
        assert set(data) == {"line", "positive", "negative"}
        assert data["line"] == pytest.approx({"a": 1.0, "b": 0.0, "c": -250.0})
        assert data["positive"][0] == pytest.approx({"x": 250.0, "y": 62.5})

    def test_serialize_none(self):
        """No fold serializes to a null line and empty polygons."""
        assert serialize_result(None) == {"line": None, "positive": [], "negative": []}

    def test_json(self, result):
        """JSON output parses back to the same dictionary."""
        assert json.loads(result_to_json(result)) == result.to_dict()
        assert json.loads(result_to_json(None))["line"] is None

    def test_folded(self, result):
        """Folding the left half over x = 250 lands it on the right half."""
        folded = result.folded()
        xs = sorted(p.x for p in folded)
        assert xs == pytest.approx([250.0, 250.0, 437.5, 437.5])

    def test_frozen(self, result):
        """Results are immutable."""
        with pytest.raises(AttributeError):
            result.crease = Line(0.0, 1.0, 0.0)

    def test_manual_result(self):
        """Results can be built directly."""
        result = AxiomResult(Line(0.0, 1.0, -1.0), (Point(0.0, 2.0),), ())
        assert result.to_dict()["positive"] == [{"x": 0.0, "y": 2.0}]
