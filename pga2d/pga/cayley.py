"""
Blade-rule derivation of the R(2,0,1) multiplication table.

The closed-form products in ``algebra`` are written out by hand. This module
derives the same table from first principles (anticommuting basis vectors
and the metric e0² = 0, e1² = e2² = 1) so the hand-written formulas can be
checked against it. It is slow and only meant for verification.
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple
import torch

from .algebra import Multivector, dual
from ..core.constants import NUM_COMPONENTS, BLADE_GRADES

# Map index to blade as an ordered tuple of basis vector indices.
# e20 is stored as (2, 0), i.e. e2∧e0 = -e02
INDEX_TO_BLADE: Dict[int, Tuple[int, ...]] = {
    0: (),          # scalar
    1: (0,),        # e0
    2: (1,),        # e1
    3: (2,),        # e2
    4: (0, 1),      # e01
    5: (2, 0),      # e20 (NOT e02!)
    6: (1, 2),      # e12
    7: (0, 1, 2),   # e012
}

# Metric: e0^2 = 0, e1^2 = e2^2 = 1
METRIC: Dict[int, int] = {0: 0, 1: 1, 2: 1}


def canonical_blade(blade: Tuple[int, ...]) -> Tuple[Tuple[int, ...], int]:
    """Sort a blade of distinct indices, returning (sorted_blade, sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def multiply_blades(a: Tuple[int, ...], b: Tuple[int, ...]) -> Tuple[Tuple[int, ...], int]:
    """
    Multiply two blades, returning (result_blade, sign).

    Sorts the concatenated indices with adjacent swaps (each swap of
    distinct vectors flips the sign), then contracts equal neighbours
    using the metric. A zero sign means the product vanishes.
    """
    combined, sign = canonical_blade(tuple(a) + tuple(b))
    result = []
    i = 0
    while i < len(combined):
        if i + 1 < len(combined) and combined[i] == combined[i + 1]:
            sign *= METRIC[combined[i]]
            if sign == 0:
                return (), 0
            i += 2
        else:
            result.append(combined[i])
            i += 1
    return tuple(result), sign


def build_cayley_table() -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table: e_i * e_j = sign * e_k.

    Returns:
        signs: (8, 8) tensor of signs (+1, -1, or 0)
        indices: (8, 8) tensor of result indices
    """
    blade_to_index = {}
    for idx, blade in INDEX_TO_BLADE.items():
        canonical, sign = canonical_blade(blade)
        blade_to_index[canonical] = (idx, sign)

    signs = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=torch.float32)
    indices = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=torch.long)

    for i in range(NUM_COMPONENTS):
        for j in range(NUM_COMPONENTS):
            blade, sign = multiply_blades(INDEX_TO_BLADE[i], INDEX_TO_BLADE[j])
            if sign == 0:
                continue
            idx, idx_sign = blade_to_index[blade]
            signs[i, j] = sign * idx_sign
            indices[i, j] = idx

    return signs, indices


def table_product(
    a: Multivector,
    b: Multivector,
    kind: str = "geometric",
    table: Optional[Tuple[torch.Tensor, torch.Tensor]] = None
) -> Multivector:
    """
    Evaluate a product term by term from the Cayley table.

    Args:
        a, b: Operands
        kind: 'geometric', 'outer' (keep grade r + s), 'inner'
              (keep grade |r - s|) or 'regressive' (dual of the outer
              product of the swapped duals, (b* ∧ a*)*)
        table: Precomputed (signs, indices); built when omitted

    Returns:
        Product multivector
    """
    if kind == "regressive":
        return dual(table_product(dual(b), dual(a), "outer", table))
    if kind not in ("geometric", "outer", "inner"):
        raise ValueError(f"Unknown product kind: {kind}")

    signs, indices = table if table is not None else build_cayley_table()

    a_mv, b_mv = torch.broadcast_tensors(a.mv, b.mv)
    result = torch.zeros_like(a_mv * b_mv)

    for i in range(NUM_COMPONENTS):
        for j in range(NUM_COMPONENTS):
            sign = signs[i, j].item()
            if sign == 0:
                continue
            k = indices[i, j].item()
            gi, gj, gk = BLADE_GRADES[i], BLADE_GRADES[j], BLADE_GRADES[k]
            if kind == "outer" and gk != gi + gj:
                continue
            if kind == "inner" and gk != abs(gi - gj):
                continue
            result[..., k] += sign * a_mv[..., i] * b_mv[..., j]

    return Multivector(result)
