"""
Projective Geometric Algebra (PGA) implementation for R(2,0,1).

PGA2D is an algebra with 8 basis elements organized by grade:
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

The bivector basis uses e₂₀ rather than e₀₂ so that the Poincaré dual is a
plain reversal of the component order with no sign changes.

The four bilinear products are written out as closed-form coefficient
formulas. They are the multiplication table of the algebra and are checked
against an independent blade-rule derivation in ``pga2d.pga.cayley``.
"""

from __future__ import annotations
from typing import List, Union
import torch

from ..core.constants import NUM_COMPONENTS, BLADE_NAMES, MAX_GRADE


# Component indices for each basis element
IDX_S = 0     # Scalar (grade 0)
IDX_E0 = 1    # e₀
IDX_E1 = 2    # e₁
IDX_E2 = 3    # e₂
IDX_E01 = 4   # e₀₁
IDX_E20 = 5   # e₂₀
IDX_E12 = 6   # e₁₂
IDX_E012 = 7  # e₀₁₂

# Grade masks for extraction
GRADE_0_MASK = [IDX_S]
GRADE_1_MASK = [IDX_E0, IDX_E1, IDX_E2]
GRADE_2_MASK = [IDX_E01, IDX_E20, IDX_E12]
GRADE_3_MASK = [IDX_E012]
GRADE_MASKS = [GRADE_0_MASK, GRADE_1_MASK, GRADE_2_MASK, GRADE_3_MASK]

# Reversion sign table: grade k has sign (-1)^(k*(k-1)/2)
REVERSION_SIGNS = torch.tensor([
    1,   # s
    1,   # e0
    1,   # e1
    1,   # e2
    -1,  # e01
    -1,  # e20
    -1,  # e12
    -1,  # e012
], dtype=torch.float32)

# Grade involution sign table: odd grades get negated
INVOLUTION_SIGNS = torch.tensor([
    1,   # s
    -1,  # e0
    -1,  # e1
    -1,  # e2
    1,   # e01
    1,   # e20
    1,   # e12
    -1,  # e012
], dtype=torch.float32)

# Clifford conjugation: reversion + grade involution
CONJUGATION_SIGNS = REVERSION_SIGNS * INVOLUTION_SIGNS

# Poincaré dual: s <-> e012, e0 <-> e12, e1 <-> e20, e2 <-> e01
DUAL_PERMUTATION = [IDX_E012, IDX_E12, IDX_E20, IDX_E01, IDX_E2, IDX_E1, IDX_E0, IDX_S]


class Multivector:
    """
    A multivector in the Projective Geometric Algebra R(2,0,1).

    Components are stored as a tensor of shape (..., 8) where the last
    dimension contains the coefficients for each basis element. Instances
    are treated as immutable values: every operation returns a new
    Multivector and never writes into the stored tensor.

    The algebra supports:
    - Geometric product (multiplication)
    - Outer (wedge / meet) product
    - Inner (dot) product
    - Regressive (vee / join) product
    - Reversion, dual, conjugation, grade involution
    - Normalization
    """

    def __init__(self, components: torch.Tensor):
        """
        Initialize a multivector from its components.

        Args:
            components: Tensor of shape (..., 8) containing coefficients
                       for each basis element in order:
                       [s, e0, e1, e2, e01, e20, e12, e012]
        """
        size = components.shape[-1] if components.dim() > 0 else 0
        if size != NUM_COMPONENTS:
            raise ValueError(f"Expected {NUM_COMPONENTS} components, got {size}")
        self.mv = components

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

    def tolist(self) -> List:
        """Coefficients as (nested) Python lists."""
        return self.mv.tolist()

    # === Named coefficients ===

    @property
    def s(self) -> torch.Tensor:
        return self.mv[..., IDX_S]

    @property
    def e0(self) -> torch.Tensor:
        return self.mv[..., IDX_E0]

    @property
    def e1(self) -> torch.Tensor:
        return self.mv[..., IDX_E1]

    @property
    def e2(self) -> torch.Tensor:
        return self.mv[..., IDX_E2]

    @property
    def e01(self) -> torch.Tensor:
        return self.mv[..., IDX_E01]

    @property
    def e20(self) -> torch.Tensor:
        return self.mv[..., IDX_E20]

    @property
    def e12(self) -> torch.Tensor:
        return self.mv[..., IDX_E12]

    @property
    def e012(self) -> torch.Tensor:
        return self.mv[..., IDX_E012]

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

    def grade(self, k: int) -> 'Multivector':
        """Extract grade-k part of the multivector."""
        if not 0 <= k <= MAX_GRADE:
            raise ValueError(f"Grade must be between 0 and {MAX_GRADE}, got {k}")
        mask = torch.zeros(NUM_COMPONENTS, dtype=self.dtype, device=self.device)
        mask[GRADE_MASKS[k]] = 1
        return Multivector(self.mv * mask)

    # === Unary operations ===

    def reverse(self) -> 'Multivector':
        """Reversion: ~M."""
        return reverse(self)

    def __invert__(self) -> 'Multivector':
        """Operator ~: reversion."""
        return reverse(self)

    def dual(self) -> 'Multivector':
        """Poincaré dual."""
        return dual(self)

    def conjugate(self) -> 'Multivector':
        """Clifford conjugation: reversion + grade involution."""
        return conjugate(self)

    def involute(self) -> 'Multivector':
        """Grade involution: negate odd grades."""
        return involute(self)

    def norm(self) -> torch.Tensor:
        """Compute |M| = √|⟨M M̄⟩₀|."""
        return norm(self)

    def normalize(self) -> 'Multivector':
        """Return M / |M| (no guard against zero magnitude)."""
        return normalize(self)

    # === Binary operations ===

    def __mul__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Geometric product, or scaling by a number/tensor."""
        if isinstance(other, Multivector):
            return geometric_product(self, other)
        if isinstance(other, (int, float, torch.Tensor)):
            return muls(self, other)
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Left multiplication by scalar."""
        if isinstance(other, (int, float, torch.Tensor)):
            return smul(other, self)
        return NotImplemented

    def __add__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Addition (a number or tensor is added to the scalar part)."""
        if isinstance(other, Multivector):
            return add(self, other)
        if isinstance(other, (int, float, torch.Tensor)):
            return adds(self, other)
        return NotImplemented

    def __radd__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        if isinstance(other, (int, float, torch.Tensor)):
            return sadd(other, self)
        return NotImplemented

    def __sub__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Subtraction (a number or tensor is subtracted from the scalar part)."""
        if isinstance(other, Multivector):
            return sub(self, other)
        if isinstance(other, (int, float, torch.Tensor)):
            return subs(self, other)
        return NotImplemented

    def __rsub__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        if isinstance(other, (int, float, torch.Tensor)):
            return ssub(other, self)
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
        """Regressive (vee) product: a & b."""
        return regressive_product(self, other)

    def outer(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product."""
        return outer_product(self, other)

    def inner(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product."""
        return inner_product(self, other)

    def regressive(self, other: 'Multivector') -> 'Multivector':
        """Regressive (vee) product."""
        return regressive_product(self, other)

    def __repr__(self) -> str:
        if self.mv.dim() == 1:
            terms = ", ".join(
                f"{name}={value:g}" for name, value in zip(BLADE_NAMES, self.mv.tolist())
            )
            return f"Multivector({terms})"
        return f"Multivector(shape={tuple(self.shape)}, dtype={self.dtype})"


# === Bilinear products ===

def geometric_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the geometric product a * b.

    Combines all grades and is generally non-commutative. The formulas are
    the full multiplication table of R(2,0,1).
    """
    a0, a1, a2, a3, a4, a5, a6, a7 = a.mv.unbind(-1)
    b0, b1, b2, b3, b4, b5, b6, b7 = b.mv.unbind(-1)

    return Multivector(torch.stack([
        b0 * a0 + b2 * a2 + b3 * a3 - b6 * a6,
        b1 * a0 + b0 * a1 - b4 * a2 + b5 * a3 + b2 * a4 - b3 * a5 - b7 * a6 - b6 * a7,
        b2 * a0 + b0 * a2 - b6 * a3 + b3 * a6,
        b3 * a0 + b6 * a2 + b0 * a3 - b2 * a6,
        b4 * a0 + b2 * a1 - b1 * a2 + b7 * a3 + b0 * a4 + b6 * a5 - b5 * a6 + b3 * a7,
        b5 * a0 - b3 * a1 + b7 * a2 + b1 * a3 - b6 * a4 + b0 * a5 + b4 * a6 + b2 * a7,
        b6 * a0 + b3 * a2 - b2 * a3 + b0 * a6,
        b7 * a0 + b6 * a1 + b5 * a2 + b4 * a3 + b3 * a4 + b2 * a5 + b1 * a6 + b0 * a7,
    ], dim=-1))


def outer_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the outer (wedge) product a ∧ b.

    The grade-raising part of the geometric product: for grade-r and
    grade-s blades the result has grade r + s. Meeting two lines gives
    their intersection point.
    """
    a0, a1, a2, a3, a4, a5, a6, a7 = a.mv.unbind(-1)
    b0, b1, b2, b3, b4, b5, b6, b7 = b.mv.unbind(-1)

    return Multivector(torch.stack([
        b0 * a0,
        b1 * a0 + b0 * a1,
        b2 * a0 + b0 * a2,
        b3 * a0 + b0 * a3,
        b4 * a0 + b2 * a1 - b1 * a2 + b0 * a4,
        b5 * a0 - b3 * a1 + b1 * a3 + b0 * a5,
        b6 * a0 + b3 * a2 - b2 * a3 + b0 * a6,
        b7 * a0 + b6 * a1 + b5 * a2 + b4 * a3 + b3 * a4 + b2 * a5 + b1 * a6 + b0 * a7,
    ], dim=-1))


def inner_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the (symmetric) inner product a · b.

    Keeps the terms of the geometric product whose grade is |r - s| for
    grade-r and grade-s blades. For two unit lines the scalar part is the
    cosine of the angle between them.
    """
    a0, a1, a2, a3, a4, a5, a6, a7 = a.mv.unbind(-1)
    b0, b1, b2, b3, b4, b5, b6, b7 = b.mv.unbind(-1)

    return Multivector(torch.stack([
        b0 * a0 + b2 * a2 + b3 * a3 - b6 * a6,
        b1 * a0 + b0 * a1 - b4 * a2 + b5 * a3 + b2 * a4 - b3 * a5 - b7 * a6 - b6 * a7,
        b2 * a0 + b0 * a2 - b6 * a3 + b3 * a6,
        b3 * a0 + b6 * a2 + b0 * a3 - b2 * a6,
        b4 * a0 + b7 * a3 + b0 * a4 + b3 * a7,
        b5 * a0 + b7 * a2 + b0 * a5 + b2 * a7,
        b6 * a0 + b0 * a6,
        b7 * a0 + b0 * a7,
    ], dim=-1))


def regressive_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the regressive (vee) product a ∨ b.

    Equal to (b* ∧ a*)* where * denotes the dual, written out directly.
    Joining point p with point q gives the line through them whose normal
    (a, b) is (q_y - p_y, p_x - q_x).
    """
    a0, a1, a2, a3, a4, a5, a6, a7 = a.mv.unbind(-1)
    b0, b1, b2, b3, b4, b5, b6, b7 = b.mv.unbind(-1)

    return Multivector(torch.stack([
        a0 * b7 + a1 * b6 + a2 * b5 + a3 * b4 + a4 * b3 + a5 * b2 + a6 * b1 + a7 * b0,
        a1 * b7 + a4 * b5 - a5 * b4 + a7 * b1,
        a2 * b7 - a4 * b6 + a6 * b4 + a7 * b2,
        a3 * b7 + a5 * b6 - a6 * b5 + a7 * b3,
        a4 * b7 + a7 * b4,
        a5 * b7 + a7 * b5,
        a6 * b7 + a7 * b6,
        a7 * b7,
    ], dim=-1))


# === Unary operations ===

def _signed(a: Multivector, signs: torch.Tensor) -> Multivector:
    return Multivector(a.mv * signs.to(device=a.device, dtype=a.dtype))


def reverse(a: Multivector) -> Multivector:
    """
    Reversion: ~M

    Reverses the order of basis vectors in each term.
    Grade k gets sign (-1)^(k(k-1)/2), so grades 2 and 3 flip.
    """
    return _signed(a, REVERSION_SIGNS)


def involute(a: Multivector) -> Multivector:
    """Grade involution: negate grades 1 and 3."""
    return _signed(a, INVOLUTION_SIGNS)


def conjugate(a: Multivector) -> Multivector:
    """Clifford conjugation: negate grades 1 and 2."""
    return _signed(a, CONJUGATION_SIGNS)


def dual(a: Multivector) -> Multivector:
    """
    Poincaré dual.

    Maps every blade to its complement (s <-> e012, e0 <-> e12,
    e1 <-> e20, e2 <-> e01). With this basis no signs change and applying
    the dual twice gives back the input.
    """
    return Multivector(a.mv[..., DUAL_PERMUTATION])


# === Linear operations ===

def _coefficient_for(k: Union[float, torch.Tensor], a: Multivector) -> torch.Tensor:
    """Turn a number or tensor into a tensor matching a's device."""
    if isinstance(k, torch.Tensor):
        return k.to(a.device)
    return torch.tensor(k, dtype=a.dtype, device=a.device)


def add(a: Multivector, b: Multivector) -> Multivector:
    """Component-wise sum."""
    return Multivector(a.mv + b.mv)


def sub(a: Multivector, b: Multivector) -> Multivector:
    """Component-wise difference."""
    return Multivector(a.mv - b.mv)


def smul(k: Union[float, torch.Tensor], a: Multivector) -> Multivector:
    """Scale every component of a by k."""
    return Multivector(_coefficient_for(k, a).unsqueeze(-1) * a.mv)


def muls(a: Multivector, k: Union[float, torch.Tensor]) -> Multivector:
    """Scale every component of a by k."""
    return Multivector(a.mv * _coefficient_for(k, a).unsqueeze(-1))


def sadd(k: Union[float, torch.Tensor], a: Multivector) -> Multivector:
    """k + a: adds k to the scalar part only."""
    return add(scalar(_coefficient_for(k, a)), a)


def adds(a: Multivector, k: Union[float, torch.Tensor]) -> Multivector:
    """a + k: adds k to the scalar part only."""
    return add(a, scalar(_coefficient_for(k, a)))


def ssub(k: Union[float, torch.Tensor], a: Multivector) -> Multivector:
    """k - a, the same as sub(scalar(k), a)."""
    return sub(scalar(_coefficient_for(k, a)), a)


def subs(a: Multivector, k: Union[float, torch.Tensor]) -> Multivector:
    """a - k: subtracts k from the scalar part only."""
    return sub(a, scalar(_coefficient_for(k, a)))


# === Normalization ===

def norm(a: Multivector) -> torch.Tensor:
    """
    Compute |M| = √|⟨M M̄⟩₀| using the Clifford conjugate.

    Ideal elements and the zero multivector have norm 0.
    """
    return torch.sqrt(torch.abs(geometric_product(a, conjugate(a)).s))


def normalize(a: Multivector) -> Multivector:
    """
    Return the unit multivector M / |M|.

    Zero-magnitude inputs are not special-cased: the division yields
    inf/NaN coefficients.
    """
    return muls(a, 1.0 / norm(a))


# Short operator names
mul = geometric_product
meet = outer_product
dot = inner_product
join = regressive_product


# === Factory functions for basis elements ===

def _as_coefficient(value: Union[float, torch.Tensor]) -> torch.Tensor:
    """Convert a number or tensor into a floating point tensor."""
    if isinstance(value, torch.Tensor):
        if value.is_floating_point():
            return value
        return value.to(torch.get_default_dtype())
    return torch.tensor(float(value))


def _basis(idx: int, coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create a basis element multivector."""
    coeff = _as_coefficient(coeff)
    mv = torch.zeros(*coeff.shape, NUM_COMPONENTS, device=coeff.device, dtype=coeff.dtype)
    mv[..., idx] = coeff
    return Multivector(mv)


def multivector(
    s: Union[float, torch.Tensor] = 0.0,
    e0: Union[float, torch.Tensor] = 0.0,
    e1: Union[float, torch.Tensor] = 0.0,
    e2: Union[float, torch.Tensor] = 0.0,
    e01: Union[float, torch.Tensor] = 0.0,
    e20: Union[float, torch.Tensor] = 0.0,
    e12: Union[float, torch.Tensor] = 0.0,
    e012: Union[float, torch.Tensor] = 0.0,
) -> Multivector:
    """
    Create a multivector from literal coefficients.

    Tensor coefficients broadcast against each other and set the batch
    shape of the result.
    """
    values = [_as_coefficient(v) for v in (s, e0, e1, e2, e01, e20, e12, e012)]
    dtype = values[0].dtype
    for v in values[1:]:
        dtype = torch.promote_types(dtype, v.dtype)
    device = next((v.device for v in values if v.dim() > 0), values[0].device)
    values = [v.to(device=device, dtype=dtype) for v in values]
    return Multivector(torch.stack(torch.broadcast_tensors(*values), dim=-1))


def scalar(a: Union[float, torch.Tensor]) -> Multivector:
    """Create a scalar multivector."""
    return _basis(IDX_S, a)


def s(a: Union[float, torch.Tensor]) -> Multivector:
    """Create a scalar multivector (alias of scalar)."""
    return _basis(IDX_S, a)


def e0(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀ basis element (degenerate direction)."""
    return _basis(IDX_E0, coeff)


def e1(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁ basis element."""
    return _basis(IDX_E1, coeff)


def e2(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂ basis element."""
    return _basis(IDX_E2, coeff)


def e01(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁ basis bivector."""
    return _basis(IDX_E01, coeff)


def e20(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂₀ basis bivector."""
    return _basis(IDX_E20, coeff)


def e12(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁₂ basis bivector."""
    return _basis(IDX_E12, coeff)


def e012(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁₂ basis element (the pseudoscalar)."""
    return _basis(IDX_E012, coeff)
