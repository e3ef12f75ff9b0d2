"""
Tests for axiom selection and dispatch.
"""

import pytest

from pga_axioms.core.exceptions import AxiomArgumentError
from pga_axioms.pga.primitives import point, line, line_coefficients, point_to_cartesian, reflect_point
from pga_axioms.axioms import Axiom, AxiomInput, solve, axiom_5, axiom_6_candidates
from pga_axioms.utils.config import SolverConfig


class TestAxiomEnum:
    """The closed set of axioms and their arities."""

    def test_seven_axioms(self):
        """Axioms are numbered 1 to 7."""
        assert [int(a) for a in Axiom] == [1, 2, 3, 4, 5, 6, 7]

    @pytest.mark.parametrize("axiom,points,lines", [
        (Axiom.ONE, 2, 0),
        (Axiom.TWO, 2, 0),
        (Axiom.THREE, 0, 2),
        (Axiom.FOUR, 1, 1),
        (Axiom.FIVE, 2, 1),
        (Axiom.SIX, 2, 2),
        (Axiom.SEVEN, 1, 2),
    ])
    def test_arity(self, axiom, points, lines):
        """Each axiom fixes its point and line counts."""
        assert axiom.point_count == points
        assert axiom.line_count == lines


class TestAxiomInput:
    """AxiomInput is an immutable pair of tuples."""

    def test_lists_become_tuples(self):
        """Sequences are stored as tuples."""
        axiom_input = AxiomInput([point(0.0, 0.0)], [line(1.0, 0.0, 0.0)])
        assert isinstance(axiom_input.points, tuple)
        assert isinstance(axiom_input.lines, tuple)

    def test_frozen(self):
        """Fields cannot be reassigned."""
        axiom_input = AxiomInput()
        with pytest.raises(AttributeError):
            axiom_input.points = ()


class TestSolve:
    """solve() validates counts and dispatches."""

    def test_axiom_1(self):
        """Dispatches to the two-point fold."""
        crease = solve(Axiom.ONE, AxiomInput((point(250.0, 125.0), point(250.0, 375.0))))
        assert line_coefficients(crease).tolist() == pytest.approx([1.0, 0.0, -250.0])

    def test_integer_axiom(self):
        """Plain integers select axioms too."""
        crease = solve(4, AxiomInput((point(250.0, 125.0),), (line(0.0, 1.0, -250.0),)))
        assert line_coefficients(crease).tolist() == pytest.approx([1.0, 0.0, -250.0])

    def test_degenerate_returns_none(self):
        """Degenerate geometry is not an error."""
        assert solve(Axiom.TWO, AxiomInput((point(1.0, 1.0), point(1.0, 1.0)))) is None

    def test_wrong_counts(self):
        """Too few or too many elements are rejected."""
        with pytest.raises(AxiomArgumentError, match="expected 2 point"):
            solve(Axiom.ONE, AxiomInput((point(0.0, 0.0),)))
        with pytest.raises(AxiomArgumentError, match="expected 0 point"):
            solve(Axiom.THREE, AxiomInput((point(0.0, 0.0),), (line(1.0, 0.0, 0.0), line(0.0, 1.0, 0.0))))

    def test_unknown_axiom(self):
        """Only axioms 1 to 7 exist."""
        with pytest.raises(AxiomArgumentError, match="unknown axiom"):
            solve(8, AxiomInput())

    def test_axiom5_root_from_config(self):
        """The config picks the axiom 5 root."""
        p0, p1, l = point(0.0, 5.0), point(0.0, 0.0), line(0.0, 1.0, 3.0)
        config = SolverConfig(axiom5_root="backward")
        crease = solve(Axiom.FIVE, AxiomInput((p0, p1), (l,)), config)
        assert crease.allclose(axiom_5(p0, p1, l, root="backward"))
        assert point_to_cartesian(reflect_point(p0, crease)).tolist() == pytest.approx([4.0, -3.0])

    def test_axiom6_root_from_config(self):
        """The config indexes the axiom 6 candidates."""
        p0, p1 = point(0.0, 2.0), point(1.0, -2.0)
        l0, l1 = line(0.0, 1.0, 0.0), line(1.0, 0.0, 0.0)
        axiom_input = AxiomInput((p0, p1), (l0, l1))
        candidates = axiom_6_candidates(p0, p1, l0, l1)
        crease = solve(Axiom.SIX, axiom_input, SolverConfig(axiom6_root=1))
        assert crease.allclose(candidates[1])

    def test_axiom_7(self):
        """Dispatches to the perpendicular fold."""
        crease = solve(
            Axiom.SEVEN,
            AxiomInput((point(1.0, 1.0),), (line(0.0, 1.0, 0.0), line(1.0, 0.0, 0.0))),
        )
        assert abs(line_coefficients(crease)[0].item()) == pytest.approx(0.0, abs=1e-12)
