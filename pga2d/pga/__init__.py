"""
PGA (Projective Geometric Algebra) module.

Implements the algebra R(2,0,1) with 8-component multivectors,
the geometric, outer, inner and regressive products, and the 2D
constructors for lines, points, rotors and translators.
"""

from .algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
    mul,
    meet,
    dot,
    join,
    reverse,
    dual,
    conjugate,
    involute,
    add,
    sub,
    smul,
    muls,
    sadd,
    adds,
    ssub,
    subs,
    norm,
    normalize,
    multivector,
    scalar,
    s,
    e0, e1, e2,
    e01, e20, e12,
    e012,
)

from .primitives import (
    line,
    point,
    ideal_point,
    point_from_tensor,
    point_to_cartesian,
    line_to_coefficients,
    rotor,
    translator,
)

from .cayley import (
    build_cayley_table,
    table_product,
)

__all__ = [
    # Algebra
    "Multivector",
    "geometric_product",
    "outer_product",
    "inner_product",
    "regressive_product",
    "mul",
    "meet",
    "dot",
    "join",
    # Involutions
    "reverse",
    "dual",
    "conjugate",
    "involute",
    # Linear operators
    "add",
    "sub",
    "smul",
    "muls",
    "sadd",
    "adds",
    "ssub",
    "subs",
    "norm",
    "normalize",
    # Basis elements
    "multivector",
    "scalar",
    "s",
    "e0", "e1", "e2",
    "e01", "e20", "e12",
    "e012",
    # Primitives
    "line",
    "point",
    "ideal_point",
    "point_from_tensor",
    "point_to_cartesian",
    "line_to_coefficients",
    "rotor",
    "translator",
    # Reference table
    "build_cayley_table",
    "table_product",
]
