"""Compare the hand-written PGA2D products against the blade-rule Cayley table."""
import torch

from pga2d.core.constants import BLADE_NAMES, NUM_COMPONENTS
from pga2d.pga.algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
)
from pga2d.pga.cayley import build_cayley_table, table_product

PRODUCTS = {
    "geometric": geometric_product,
    "outer": outer_product,
    "inner": inner_product,
    "regressive": regressive_product,
}

table = build_cayley_table()
signs, indices = table

print("Cayley table (row * column):")
header = "".join(f"{name:>8}" for name in BLADE_NAMES)
print(f"{'':>6}{header}")
for i in range(NUM_COMPONENTS):
    cells = []
    for j in range(NUM_COMPONENTS):
        sign = int(signs[i, j].item())
        if sign == 0:
            cells.append(f"{'0':>8}")
        else:
            name = BLADE_NAMES[indices[i, j].item()]
            cells.append(f"{('-' if sign < 0 else '') + name:>8}")
    print(f"{BLADE_NAMES[i]:>6}" + "".join(cells))

# Basis blade pairs exercise every table entry on its own
eye = torch.eye(NUM_COMPONENTS, dtype=torch.float64)
errors = []

for kind, product in PRODUCTS.items():
    for i in range(NUM_COMPONENTS):
        for j in range(NUM_COMPONENTS):
            a, b = Multivector(eye[i]), Multivector(eye[j])
            expected = table_product(a, b, kind, table)
            actual = product(a, b)
            if not torch.equal(actual.mv, expected.mv):
                errors.append((kind, i, j, actual.mv, expected.mv))

print(f"\nFound {len(errors)} discrepancies:")
for kind, i, j, actual, expected in errors:
    print(f"  {kind}: {BLADE_NAMES[i]} x {BLADE_NAMES[j]}")
    print(f"    FORMULA: {actual.tolist()}")
    print(f"    TABLE:   {expected.tolist()}")
