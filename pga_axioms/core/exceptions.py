"""Exception hierarchy for pga-axioms.

Degenerate geometry (coincident points, parallel lines, a circle missing a
line) is never reported through these: solvers return None for it. The
exceptions here signal misuse of the API.
"""


class PGAAxiomsError(Exception):
    """Base exception for all pga-axioms errors."""

    pass


class AxiomArgumentError(PGAAxiomsError, ValueError):
    """An axiom received the wrong number, grade or shape of arguments."""

    def __init__(self, axiom: str, reason: str) -> None:
        self.axiom = axiom
        self.reason = reason
        super().__init__(f"Invalid arguments for {axiom}: {reason}")


class InvalidPaperError(PGAAxiomsError, ValueError):
    """The sheet corners do not form a convex, consistently wound quadrilateral."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid paper: {reason}")
