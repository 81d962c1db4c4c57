"""Floating-point kind helpers.

Every numeric routine in this package runs in the precision of its input:
Python ``float`` (double), or any NumPy floating scalar such as ``float32``,
``float64`` or ``longdouble``. These two helpers resolve that kind and give a
precision-correct π for it.
"""

import math
from typing import Any, Type, Union

import numpy as np

# A Python float or any NumPy floating scalar.
Float = Union[float, np.floating]


def float_kind(value: Any) -> Type:
    """Return the floating-point type that arithmetic on ``value`` should use.

    NumPy floating scalars keep their own type; everything else (Python
    ``float``, ``int``, ``Fraction``...) is treated as a Python ``float``.
    """
    if isinstance(value, np.floating):
        return type(value)
    return float


def common_kind(*values: Any) -> Type:
    """Promote the kinds of several values to the one they should share."""
    kinds = [float_kind(v) for v in values]
    if all(k is float for k in kinds):
        return float
    return np.result_type(*[np.float64 if k is float else k for k in kinds]).type


def pi(kind: Type = float):
    """π at the precision of ``kind``.

    arccos(-1) is evaluated in the target type itself, so ``float32`` gets the
    correctly rounded single-precision value and ``longdouble`` keeps its
    extra mantissa bits instead of inheriting a double literal.
    """
    if kind is float:
        return math.pi
    return kind(np.arccos(kind(-1.0)))
