"""Cross-check the derived PGA(2,0,1) Cayley table against the closed-form product."""
import torch

from pga_axioms.pga.algebra import (
    Multivector,
    geometric_product,
    CAYLEY_SIGNS,
    CAYLEY_INDICES,
    INDEX_TO_BLADE,
)
from pga_axioms.core.constants import BASIS_ELEMENTS

# Index: 0:s, 1:e0, 2:e1, 3:e2, 4:e01, 5:e20, 6:e12, 7:e012


def closed_form_product(a, b):
    """Geometric product written out coefficient by coefficient."""
    r = [0.0] * 8
    r[0] = b[0]*a[0] + b[2]*a[2] + b[3]*a[3] - b[6]*a[6]
    r[1] = (b[1]*a[0] + b[0]*a[1] - b[4]*a[2] + b[5]*a[3]
            + b[2]*a[4] - b[3]*a[5] - b[7]*a[6] - b[6]*a[7])
    r[2] = b[2]*a[0] + b[0]*a[2] - b[6]*a[3] + b[3]*a[6]
    r[3] = b[3]*a[0] + b[6]*a[2] + b[0]*a[3] - b[2]*a[6]
    r[4] = (b[4]*a[0] + b[2]*a[1] - b[1]*a[2] + b[7]*a[3]
            + b[0]*a[4] + b[6]*a[5] - b[5]*a[6] + b[3]*a[7])
    r[5] = (b[5]*a[0] - b[3]*a[1] + b[7]*a[2] + b[1]*a[3]
            - b[6]*a[4] + b[0]*a[5] + b[4]*a[6] + b[2]*a[7])
    r[6] = b[6]*a[0] + b[3]*a[2] - b[2]*a[3] + b[0]*a[6]
    r[7] = (b[7]*a[0] + b[6]*a[1] + b[5]*a[2] + b[4]*a[3]
            + b[3]*a[4] + b[2]*a[5] + b[1]*a[6] + b[0]*a[7])
    return r


errors = []

# Every pair of basis blades
for i in range(8):
    for j in range(8):
        a = [0.0] * 8
        b = [0.0] * 8
        a[i] = 1.0
        b[j] = 1.0
        expected = closed_form_product(a, b)

        sign = CAYLEY_SIGNS[i, j].item()
        idx = CAYLEY_INDICES[i, j].item()
        derived = [0.0] * 8
        if sign != 0:
            derived[idx] = sign

        if derived != expected:
            errors.append((i, j, derived, expected))

print(f"Found {len(errors)} discrepancies in the Cayley table:")
for i, j, derived, expected in errors:
    print(f"  ({i}, {j}): {BASIS_ELEMENTS[i]} * {BASIS_ELEMENTS[j]}"
          f"  blades {INDEX_TO_BLADE[i]} * {INDEX_TO_BLADE[j]}")
    print(f"    DERIVED:     {derived}")
    print(f"    CLOSED FORM: {expected}")

# Random multivectors through the tensor product
generator = torch.Generator().manual_seed(0)
a = torch.randn(256, 8, generator=generator, dtype=torch.float64)
b = torch.randn(256, 8, generator=generator, dtype=torch.float64)
product = geometric_product(Multivector(a), Multivector(b)).mv
reference = torch.tensor(
    [closed_form_product(x.tolist(), y.tolist()) for x, y in zip(a, b)],
    dtype=torch.float64,
)
max_error = (product - reference).abs().max().item()
print(f"\nMax deviation over {a.shape[0]} random products: {max_error:.3e}")

# Print the table in a readable form
print("\n# Cayley table (sign, blade):")
for i in range(8):
    row = []
    for j in range(8):
        sign = int(CAYLEY_SIGNS[i, j].item())
        name = BASIS_ELEMENTS[int(CAYLEY_INDICES[i, j].item())]
        row.append("0" if sign == 0 else f"{'-' if sign < 0 else ''}{name}")
    print("    " + "  ".join(f"{item:>5}" for item in row))
