"""
Approximate comparison of multivectors.

The arithmetic core is exact float arithmetic; deciding when two results
are "the same" is a policy that belongs to the caller. These helpers apply
an absolute per-coefficient tolerance (strictly less than `atol`).
"""

from typing import Union
import torch

from ..core.constants import DEFAULT_ATOL
from ..pga.algebra import Multivector


def _components(x: Union[Multivector, torch.Tensor, float]) -> torch.Tensor:
    if isinstance(x, Multivector):
        return x.mv
    return torch.as_tensor(x)


def approx_equal(
    a: Union[Multivector, torch.Tensor, float],
    b: Union[Multivector, torch.Tensor, float],
    atol: float = DEFAULT_ATOL
) -> bool:
    """
    Check that every coefficient of a and b differs by less than atol.

    Works on multivectors, tensors and plain numbers; inputs broadcast.
    NaN never compares equal.

    Args:
        a, b: Values to compare
        atol: Absolute tolerance per coefficient

    Returns:
        True if all coefficients are within tolerance
    """
    x, y = _components(a), _components(b)
    dtype = torch.promote_types(x.dtype, y.dtype)
    diff = x.to(dtype) - y.to(device=x.device, dtype=dtype)
    return bool((diff.abs() < atol).all())


def assert_multivector_close(
    actual: Multivector,
    expected: Multivector,
    atol: float = DEFAULT_ATOL
) -> None:
    """
    Raise AssertionError if actual and expected differ beyond atol.

    The message lists both values and the largest deviation.
    """
    if not approx_equal(actual, expected, atol=atol):
        deviation = (_components(actual) - _components(expected)).abs().max().item()
        raise AssertionError(
            f"Multivectors differ (max deviation {deviation:g}, atol {atol:g}):\n"
            f"  actual:   {actual}\n"
            f"  expected: {expected}"
        )
