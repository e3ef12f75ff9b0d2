"""
Tests for the sheet and the polygon clipper.
"""

import pytest

from pga_axioms.core.exceptions import InvalidPaperError
from pga_axioms.core.types import Point
from pga_axioms.folding import Paper
from pga_axioms.folding.clipping import clip, signed_distances, polygon_area, fold_polygon
from pga_axioms.pga.primitives import line


# =============================================================================
# Paper
# =============================================================================

class TestPaper:
    """Sheet construction and validation."""

    def test_centered(self, paper):
        """A 500 x 500 canvas holds a 375 x 375 sheet."""
        assert paper.corners() == (
            Point(62.5, 62.5),
            Point(437.5, 62.5),
            Point(437.5, 437.5),
            Point(62.5, 437.5),
        )
        assert paper.area() == pytest.approx(375.0 ** 2)

    def test_centered_uses_smaller_side(self):
        """The side is 75% of the smaller canvas side."""
        sheet = Paper.centered(800, 400)
        assert sheet.ul == Point(250.0, 50.0)
        assert sheet.lr == Point(550.0, 350.0)

    def test_from_corners(self, unit_square):
        """Four pairs build a sheet."""
        sheet = Paper.from_corners(unit_square)
        assert sheet.area() == pytest.approx(1.0)

    def test_wrong_corner_count(self, unit_square):
        """Exactly four corners are required."""
        with pytest.raises(InvalidPaperError, match="expected 4 corners"):
            Paper.from_corners(unit_square[:3])

    def test_self_intersecting(self):
        """A bow-tie ring is rejected."""
        with pytest.raises(InvalidPaperError, match="convex"):
            Paper((0, 0), (1, 1), (1, 0), (0, 1))

    def test_non_convex(self):
        """A dart is rejected."""
        with pytest.raises(InvalidPaperError, match="convex"):
            Paper((0, 0), (4, 0), (1, 1), (0, 4))

    def test_repeated_corner(self):
        """Repeated corners are rejected."""
        with pytest.raises(InvalidPaperError, match="collinear or repeated"):
            Paper((0, 0), (0, 0), (1, 1), (0, 1))

    def test_bad_canvas(self):
        """Non-positive canvases are rejected."""
        with pytest.raises(InvalidPaperError):
            Paper.centered(0, 500)

    def test_frozen(self, paper):
        """The sheet is read-only."""
        with pytest.raises(AttributeError):
            paper.ul = Point(0.0, 0.0)


# =============================================================================
# Area
# =============================================================================

class TestPolygonArea:
    """Shoelace area."""

    def test_signed_area(self, unit_square):
        """Counter-clockwise (y-up) rings have positive area."""
        assert polygon_area(unit_square) == pytest.approx(1.0)
        assert polygon_area(unit_square[::-1]) == pytest.approx(-1.0)

    def test_degenerate(self):
        """Fewer than three vertices have no area."""
        assert polygon_area(()) == 0.0
        assert polygon_area(((0.0, 0.0), (1.0, 1.0))) == 0.0


# =============================================================================
# Clipping
# =============================================================================

class TestClip:
    """Splitting a polygon along a crease."""

    def test_signed_distances(self, unit_square):
        """One distance per vertex, positive where the normal points."""
        d = signed_distances(unit_square, line(1.0, 0.0, -0.5))
        assert d.tolist() == pytest.approx([-0.5, 0.5, 0.5, -0.5])

    def test_vertical_split(self, paper):
        """x = 250 splits the sheet into two equal halves."""
        positive, negative = clip(paper.corners(), line(1.0, 0.0, -250.0))
        assert positive == (
            Point(250.0, 62.5),
            Point(437.5, 62.5),
            Point(437.5, 437.5),
            Point(250.0, 437.5),
        )
        assert negative == (
            Point(62.5, 62.5),
            Point(250.0, 62.5),
            Point(250.0, 437.5),
            Point(62.5, 437.5),
        )

    def test_areas_add_up(self, paper):
        """An oblique crease conserves area."""
        positive, negative = clip(paper.corners(), line(1.0, 2.0, -700.0))
        total = abs(polygon_area(positive)) + abs(polygon_area(negative))
        assert total == pytest.approx(paper.area())

    def test_halves_on_opposite_sides(self, paper):
        """Every vertex of a half is on its side of the crease."""
        crease = line(-3.0, 1.0, 400.0)
        positive, negative = clip(paper.corners(), crease)
        assert all(d >= -1e-6 for d in signed_distances(positive, crease))
        assert all(d <= 1e-6 for d in signed_distances(negative, crease))

    def test_winding_preserved(self, paper):
        """Both halves wind the same way as the sheet."""
        positive, negative = clip(paper.corners(), line(1.0, 1.0, -500.0))
        sheet_sign = polygon_area(paper.corners()) > 0
        assert (polygon_area(positive) > 0) == sheet_sign
        assert (polygon_area(negative) > 0) == sheet_sign

    def test_crease_outside_sheet(self, paper):
        """A crease missing the sheet leaves it whole on one side."""
        positive, negative = clip(paper.corners(), line(1.0, 0.0, 10.0))
        assert positive == paper.corners()
        assert negative == ()

    def test_sheet_entirely_negative(self, paper):
        """A sheet wholly behind the crease is returned as negative."""
        positive, negative = clip(paper.corners(), line(1.0, 0.0, -1000.0))
        assert positive == ()
        assert negative == paper.corners()

    def test_crease_through_corners(self, unit_square):
        """Corners on the crease join both halves once each."""
        positive, negative = clip(unit_square, line(1.0, -1.0, 0.0))
        assert positive == (Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0))
        assert negative == (Point(0.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0))
        assert len(set(positive)) == len(positive)
        assert len(set(negative)) == len(negative)

    def test_crease_along_edge(self, unit_square):
        """A crease along an edge keeps the whole square on one side."""
        positive, negative = clip(unit_square, line(0.0, 1.0, 0.0))
        assert positive == unit_square
        assert negative == ()


# =============================================================================
# Folding
# =============================================================================

class TestFoldPolygon:
    """Reflecting a polygon across the crease."""

    def test_fold_half_over(self, unit_square):
        """The left half of the square folds onto the right half."""
        _, negative = clip(unit_square, line(1.0, 0.0, -0.5))
        folded = fold_polygon(negative, line(1.0, 0.0, -0.5))
        assert [list(p) for p in folded] == [
            pytest.approx([1.0, 0.0]),
            pytest.approx([0.5, 0.0]),
            pytest.approx([0.5, 1.0]),
            pytest.approx([1.0, 1.0]),
        ]

    def test_fold_empty(self):
        """Nothing to fold."""
        assert fold_polygon((), line(1.0, 0.0, 0.0)) == ()

    def test_ideal_crease(self, unit_square):
        """The line at infinity cannot fold."""
        assert fold_polygon(unit_square, line(0.0, 0.0, 1.0)) is None
