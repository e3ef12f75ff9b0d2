"""
Projective Geometric Algebra (PGA) implementation for R(2,0,1).

2D PGA is an algebra with 8 basis elements organized by grade:
- Grade 0 (scalar): 1
- Grade 1 (vectors/lines): e₀, e₁, e₂
- Grade 2 (bivectors/points): e₀₁, e₂₀, e₁₂
- Grade 3 (pseudoscalar): e₀₁₂

The metric signature is (2,0,1) meaning:
- e₁² = e₂² = +1 (Euclidean)
- e₀² = 0 (degenerate/null direction)

Component ordering:
[s, e0, e1, e2, e01, e20, e12, e012]
 0   1   2   3   4    5    6    7

Because each blade is the complement of the blade at the mirrored index
(blade * dual(blade) = e012 for every blade), the Poincaré dual is a plain
reversal of the component order.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional, Sequence, Tuple, Union
import torch

from ..core.constants import BASIS_COUNT, BASIS_ELEMENTS, DEFAULT_DTYPE, DEFAULT_EPS, MAX_GRADE


# Component indices for each basis element
IDX_S = 0      # Scalar (grade 0)
IDX_E0 = 1     # e₀
IDX_E1 = 2     # e₁
IDX_E2 = 3     # e₂
IDX_E01 = 4    # e₀₁
IDX_E20 = 5    # e₂₀
IDX_E12 = 6    # e₁₂
IDX_E012 = 7   # e₀₁₂

# Grade masks for extraction
GRADE_0_MASK = [IDX_S]
GRADE_1_MASK = [IDX_E0, IDX_E1, IDX_E2]
GRADE_2_MASK = [IDX_E01, IDX_E20, IDX_E12]
GRADE_3_MASK = [IDX_E012]
GRADE_MASKS = (GRADE_0_MASK, GRADE_1_MASK, GRADE_2_MASK, GRADE_3_MASK)

# Grade of the blade stored at each index
BLADE_GRADES = (0, 1, 1, 1, 2, 2, 2, 3)

# Blades as ordered tuples of generator indices; e20 is stored as e2∧e0
INDEX_TO_BLADE: Dict[int, Tuple[int, ...]] = {
    0: (),
    1: (0,),
    2: (1,),
    3: (2,),
    4: (0, 1),
    5: (2, 0),
    6: (1, 2),
    7: (0, 1, 2),
}

# Metric: e0^2 = 0, e1^2 = e2^2 = 1
METRIC = {0: 0, 1: 1, 2: 1}


def _grade_signs(sign_of_grade: Callable[[int], int]) -> torch.Tensor:
    return torch.tensor(
        [sign_of_grade(k) for k in BLADE_GRADES], dtype=torch.float64
    )


# Reversion: grade k gets sign (-1)^(k*(k-1)/2)
# Grade 0: +1, Grade 1: +1, Grade 2: -1, Grade 3: -1
REVERSION_SIGNS = _grade_signs(lambda k: (-1) ** (k * (k - 1) // 2))

# Grade involution: odd grades get negated
INVOLUTION_SIGNS = _grade_signs(lambda k: (-1) ** k)

# Clifford conjugation: reversion + grade involution
CONJUGATION_SIGNS = REVERSION_SIGNS * INVOLUTION_SIGNS

# Dual: index i maps to the complementary blade at index 7 - i
DUAL_PERMUTATION = [BASIS_COUNT - 1 - i for i in range(BASIS_COUNT)]
DUAL_SIGNS = torch.ones(BASIS_COUNT, dtype=torch.float64)


def _canonical_blade(blade: Sequence[int]) -> Tuple[Tuple[int, ...], int]:
    """Sort a blade's generators, returning (sorted_blade, permutation_sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def _multiply_blades(a: Sequence[int], b: Sequence[int]) -> Tuple[Tuple[int, ...], int]:
    """
    Multiply two basis blades.

    Concatenates the generators and bubble-sorts them into canonical order,
    flipping the sign on every swap of distinct generators and contracting
    equal neighbours through the metric.

    Returns:
        (result_blade, sign) where sign is 0 when an e0 pair was contracted
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                m = METRIC[combined[i]]
                if m == 0:
                    return (), 0
                sign *= m
                del combined[i:i + 2]
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return tuple(combined), sign


def _build_cayley_table() -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table for the geometric product in 2D PGA.

    The Cayley table defines: e_i * e_j = sign * e_k

    Returns:
        signs: (8, 8) tensor of signs (+1, -1, or 0)
        indices: (8, 8) tensor of result indices
    """
    signs = torch.zeros(BASIS_COUNT, BASIS_COUNT, dtype=torch.float64)
    indices = torch.zeros(BASIS_COUNT, BASIS_COUNT, dtype=torch.long)

    # Canonical (sorted) blade -> (storage index, sign of the stored ordering)
    blade_to_index = {}
    for idx, blade in INDEX_TO_BLADE.items():
        canonical, stored_sign = _canonical_blade(blade)
        blade_to_index[canonical] = (idx, stored_sign)

    for i, blade_i in INDEX_TO_BLADE.items():
        for j, blade_j in INDEX_TO_BLADE.items():
            result, sign = _multiply_blades(blade_i, blade_j)
            if sign == 0:
                continue
            k, stored_sign = blade_to_index[result]
            signs[i, j] = sign * stored_sign
            indices[i, j] = k

    return signs, indices


def _build_product_table(keep: Callable[[int, int, int], bool]) -> torch.Tensor:
    """
    Expand the Cayley table into a dense (8, 8, 8) bilinear form.

    Entry [i, j, k] holds the sign with which the product of blades i and j
    contributes to blade k, restricted to the grade combinations accepted by
    `keep(grade_i, grade_j, grade_k)`.
    """
    table = torch.zeros(BASIS_COUNT, BASIS_COUNT, BASIS_COUNT, dtype=torch.float64)
    for i in range(BASIS_COUNT):
        for j in range(BASIS_COUNT):
            k = int(CAYLEY_INDICES[i, j])
            if keep(BLADE_GRADES[i], BLADE_GRADES[j], BLADE_GRADES[k]):
                table[i, j, k] = CAYLEY_SIGNS[i, j]
    return table


# Build Cayley tables at module load time; never mutated afterwards
CAYLEY_SIGNS, CAYLEY_INDICES = _build_cayley_table()

GEOMETRIC_TABLE = _build_product_table(lambda r, s, k: True)
INNER_TABLE = _build_product_table(lambda r, s, k: k == abs(r - s))
OUTER_TABLE = _build_product_table(lambda r, s, k: k == r + s)


class Multivector:
    """
    A multivector in the Projective Geometric Algebra R(2,0,1).

    Components are stored as a tensor of shape (..., 8) where the last
    dimension contains the coefficients for each basis element.

    The algebra supports:
    - Geometric product (multiplication)
    - Outer (wedge) product, used as meet
    - Inner (dot) product
    - Join (dual of the outer product of duals)
    - Reversion, grade involution, Clifford conjugation, dual
    - Normalization and inversion
    """

    def __init__(self, components: torch.Tensor):
        """
        Initialize a multivector from its components.

        Args:
            components: Tensor of shape (..., 8) containing coefficients
                       for each basis element in order:
                       [s, e0, e1, e2, e01, e20, e12, e012]
        """
        if components.dim() == 0 or components.shape[-1] != BASIS_COUNT:
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {BASIS_COUNT} components, got {got}")
        self.mv = components

    @classmethod
    def from_coefficients(
        cls,
        coefficients: Sequence[float],
        dtype: torch.dtype = DEFAULT_DTYPE,
    ) -> 'Multivector':
        """Build a multivector from a flat sequence of 8 coefficients."""
        return cls(torch.tensor(coefficients, dtype=dtype))

    @classmethod
    def zeros(cls, batch_shape: tuple = (), dtype: torch.dtype = DEFAULT_DTYPE) -> 'Multivector':
        """The zero multivector."""
        return cls(torch.zeros(*batch_shape, BASIS_COUNT, dtype=dtype))

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 8 components)."""
        return self.mv.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self.mv.device

    @property
    def dtype(self) -> torch.dtype:
        return self.mv.dtype

    def to(self, device: torch.device) -> 'Multivector':
        """Move to specified device."""
        return Multivector(self.mv.to(device))

    def clone(self) -> 'Multivector':
        """Create a copy."""
        return Multivector(self.mv.clone())

    def detach(self) -> 'Multivector':
        """Detach from computation graph."""
        return Multivector(self.mv.detach())

    def blade(self, name: str) -> torch.Tensor:
        """Coefficient of a named blade, e.g. mv.blade('e12')."""
        try:
            idx = BASIS_ELEMENTS.index(name)
        except ValueError:
            raise ValueError(f"Unknown blade '{name}', expected one of {BASIS_ELEMENTS}")
        return self.mv[..., idx]

    # === Grade extraction ===

    def scalar(self) -> torch.Tensor:
        """Extract scalar (grade 0) component."""
        return self.mv[..., IDX_S]

    def vector(self) -> torch.Tensor:
        """Extract vector (grade 1) components: [e0, e1, e2]."""
        return self.mv[..., GRADE_1_MASK]

    def bivector(self) -> torch.Tensor:
        """Extract bivector (grade 2) components: [e01, e20, e12]."""
        return self.mv[..., GRADE_2_MASK]

    def pseudoscalar(self) -> torch.Tensor:
        """Extract pseudoscalar (grade 3) component."""
        return self.mv[..., IDX_E012]

    trivector = pseudoscalar

    def grade(self, k: int) -> 'Multivector':
        """Extract grade-k part of the multivector."""
        result = torch.zeros_like(self.mv)
        if 0 <= k <= MAX_GRADE:
            mask = GRADE_MASKS[k]
            result[..., mask] = self.mv[..., mask]
        return Multivector(result)

    # === Unary operations ===

    def _signed(self, signs: torch.Tensor) -> 'Multivector':
        return Multivector(self.mv * signs.to(device=self.device, dtype=self.dtype))

    def reverse(self) -> 'Multivector':
        """
        Reversion: ~M

        Reverses the order of basis vectors in each term.
        Grade k gets sign (-1)^(k(k-1)/2).
        """
        return self._signed(REVERSION_SIGNS)

    def __invert__(self) -> 'Multivector':
        """Operator ~: reversion."""
        return self.reverse()

    def conjugate(self) -> 'Multivector':
        """
        Clifford conjugation: reversion + grade involution.
        """
        return self._signed(CONJUGATION_SIGNS)

    def involute(self) -> 'Multivector':
        """
        Grade involution: negate odd grades.
        """
        return self._signed(INVOLUTION_SIGNS)

    def dual(self) -> 'Multivector':
        """
        Poincaré dual: maps each blade to its complement so that
        blade * dual(blade) = e012. Points and lines are dual to one another.
        """
        signs = DUAL_SIGNS.to(device=self.device, dtype=self.dtype)
        return Multivector(self.mv[..., DUAL_PERMUTATION] * signs)

    def norm_squared(self) -> torch.Tensor:
        """
        Compute ⟨M ~M⟩₀

        For a line a*e1 + b*e2 + c*e0 this is a² + b²; for a point it is W².
        """
        product = self * self.reverse()
        return product.scalar()

    def norm(self) -> torch.Tensor:
        """
        Compute |M| = √|⟨M ~M⟩₀|
        """
        return torch.sqrt(torch.abs(self.norm_squared()))

    def ideal_norm(self) -> torch.Tensor:
        """Norm of the dual; the length of an ideal point's direction."""
        return self.dual().norm()

    def normalize(self, eps: float = DEFAULT_EPS) -> 'Multivector':
        """
        Return unit multivector: M / |M|

        Elements whose norm is below eps (ideal elements) are returned unchanged.
        """
        n = self.norm().unsqueeze(-1)
        safe = torch.where(n < eps, torch.ones_like(n), n)
        return Multivector(self.mv / safe)

    def inverse(self, eps: float = DEFAULT_EPS) -> Optional['Multivector']:
        """
        Multiplicative inverse: M^{-1} where M * M^{-1} = 1

        Uses the three-generator formula M^{-1} = M̄ M̂ M̃ / (M M̄ M̂ M̃), whose
        denominator is always a scalar in a 3-generator algebra.

        Returns:
            The inverse, or None when the denominator vanishes (ideal or
            otherwise non-invertible elements).
        """
        numerator = self.conjugate() * self.involute() * self.reverse()
        denominator = (self * numerator).scalar()
        if bool((denominator.abs() < eps).any()):
            return None
        return numerator / denominator

    def is_zero(self, eps: float = DEFAULT_EPS) -> bool:
        """True when every coefficient is within eps of zero."""
        return bool((self.mv.abs() < eps).all())

    def is_finite(self) -> bool:
        """True when no coefficient is NaN or infinite."""
        return bool(torch.isfinite(self.mv).all())

    def allclose(self, other: 'Multivector', atol: float = DEFAULT_EPS) -> bool:
        """Coefficient-wise comparison within an absolute tolerance."""
        a, b = torch.broadcast_tensors(self.mv, other.mv.to(self.dtype))
        return bool(torch.allclose(a, b, rtol=0.0, atol=atol))

    # === Binary operations ===

    def __mul__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Geometric product."""
        if isinstance(other, (int, float)):
            return Multivector(self.mv * other)
        if isinstance(other, torch.Tensor):
            return Multivector(self.mv * other.unsqueeze(-1))
        if isinstance(other, Multivector):
            return geometric_product(self, other)
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Right multiplication by scalar."""
        return self.__mul__(other)

    def __add__(self, other: Union['Multivector', float]) -> 'Multivector':
        """Addition; plain numbers are added to the scalar part."""
        if isinstance(other, Multivector):
            return Multivector(self.mv + other.mv)
        if isinstance(other, (int, float)):
            result = self.mv.clone()
            result[..., IDX_S] += other
            return Multivector(result)
        return NotImplemented

    def __radd__(self, other: float) -> 'Multivector':
        return self.__add__(other)

    def __sub__(self, other: Union['Multivector', float]) -> 'Multivector':
        """Subtraction."""
        if isinstance(other, Multivector):
            return Multivector(self.mv - other.mv)
        if isinstance(other, (int, float)):
            return self.__add__(-other)
        return NotImplemented

    def __neg__(self) -> 'Multivector':
        """Negation."""
        return Multivector(-self.mv)

    def __truediv__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Division by scalar."""
        if isinstance(other, (int, float)):
            return Multivector(self.mv / other)
        if isinstance(other, torch.Tensor):
            return Multivector(self.mv / other.unsqueeze(-1))
        return NotImplemented

    def __xor__(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product: a ^ b."""
        return outer_product(self, other)

    def __or__(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product: a | b."""
        return inner_product(self, other)

    def __and__(self, other: 'Multivector') -> 'Multivector':
        """Join: a & b."""
        return join(self, other)

    def outer(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product."""
        return outer_product(self, other)

    def inner(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product."""
        return inner_product(self, other)

    def join(self, other: 'Multivector') -> 'Multivector':
        """Join (orientation-preserving regressive product)."""
        return join(self, other)

    def meet(self, other: 'Multivector') -> 'Multivector':
        """Meet (outer product)."""
        return meet(self, other)

    def __repr__(self) -> str:
        return f"Multivector(shape={self.shape}, dtype={self.dtype})"

    def __str__(self) -> str:
        """Readable sum of blades, e.g. '1 + 2e0 + -0.5e12'."""
        if self.mv.dim() != 1:
            return repr(self)
        terms = []
        for i, coeff in enumerate(self.mv.tolist()):
            if abs(coeff) > 1e-5:
                value = f"{coeff:.7f}".rstrip("0").rstrip(".")
                terms.append(f"{value}{BASIS_ELEMENTS[i] if i > 0 else ''}")
        return " + ".join(terms) if terms else "0"


def _apply_table(a: Multivector, b: Multivector, table: torch.Tensor) -> Multivector:
    """Evaluate the bilinear product described by an (8, 8, 8) table."""
    # Pairwise coefficient products with broadcasting: (..., 8, 8)
    pairs = a.mv.unsqueeze(-1) * b.mv.unsqueeze(-2)
    table = table.to(device=pairs.device, dtype=pairs.dtype)
    return Multivector(torch.einsum('...ij,ijk->...k', pairs, table))


def geometric_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the geometric product a * b.

    Distributes over all 64 blade pairs using the derived Cayley table.
    """
    return _apply_table(a, b, GEOMETRIC_TABLE)


def outer_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the outer (wedge) product a ∧ b.

    For grade-r and grade-s parts only the grade r + s part of their
    geometric product is kept (nothing survives above grade 3).
    """
    return _apply_table(a, b, OUTER_TABLE)


def inner_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the symmetric inner product a · b.

    For grade-r and grade-s parts only the grade |r - s| part of their
    geometric product is kept, summed over all grade pairs.
    """
    return _apply_table(a, b, INNER_TABLE)


def regressive_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the regressive (vee) product a ∨ b = (a* ∧ b*)*.

    Unlike join(), the operand order is not swapped, so the result carries
    the opposite orientation for two points.
    """
    return outer_product(a.dual(), b.dual()).dual()


def join(a: Multivector, b: Multivector) -> Multivector:
    """
    Join: the smallest element containing both a and b.

    Defined as dual(dual(b) ∧ dual(a)). The swapped operands make
    join(p0, p1) a line oriented from p0 towards p1.
    """
    return outer_product(b.dual(), a.dual()).dual()


def meet(a: Multivector, b: Multivector) -> Multivector:
    """
    Meet: the intersection of a and b (outer product).

    The meet of two lines is their intersection point, an ideal point when
    the lines are parallel.
    """
    return outer_product(a, b)


def dual(a: Multivector) -> Multivector:
    return a.dual()


def reverse(a: Multivector) -> Multivector:
    return a.reverse()


def involute(a: Multivector) -> Multivector:
    return a.involute()


def conjugate(a: Multivector) -> Multivector:
    return a.conjugate()


def inverse(a: Multivector, eps: float = DEFAULT_EPS) -> Optional[Multivector]:
    return a.inverse(eps)


def sandwich(versor: Multivector, element: Multivector) -> Multivector:
    """
    Compute the sandwich product: V * X * ~V

    This is the fundamental operation for applying even versors
    (rotors, translators) in GA.
    """
    return versor * element * versor.reverse()


# === Factory functions for basis elements ===

def _basis(idx: int, coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create a basis element multivector."""
    if isinstance(coeff, (int, float)):
        mv = torch.zeros(BASIS_COUNT, dtype=DEFAULT_DTYPE)
        mv[idx] = coeff
    else:
        dtype = coeff.dtype if coeff.is_floating_point() else DEFAULT_DTYPE
        mv = torch.zeros(*coeff.shape, BASIS_COUNT, device=coeff.device, dtype=dtype)
        mv[..., idx] = coeff
    return Multivector(mv)


def scalar(s: Union[float, torch.Tensor]) -> Multivector:
    """Create a scalar multivector."""
    return _basis(IDX_S, s)


def e0(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀ basis element (degenerate direction, the line at infinity)."""
    return _basis(IDX_E0, coeff)


def e1(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁ basis element (the line x = 0)."""
    return _basis(IDX_E1, coeff)


def e2(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂ basis element (the line y = 0)."""
    return _basis(IDX_E2, coeff)


def e01(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁ basis bivector."""
    return _basis(IDX_E01, coeff)


def e20(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂₀ basis bivector."""
    return _basis(IDX_E20, coeff)


def e12(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁₂ basis bivector (the origin)."""
    return _basis(IDX_E12, coeff)


def e012(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁₂ basis element (the pseudoscalar)."""
    return _basis(IDX_E012, coeff)
