"""Polynomial and trigonometric series evaluation in SOFA order.

Floating-point addition is not associative, so the order in which terms are
combined is part of each routine's contract. The helpers here reproduce the
grouping of SOFA exactly:

* polynomials are nested innermost-first,
  ``c0 + (c1 + (c2 + c3*t)*t)*t``;
* periodic series are accumulated from the last (smallest) term to the
  first, each argument being built as ``0.0 + n0*a0 + n1*a1 + ...``.
"""

import math
from typing import Sequence, Tuple


def horner(coeffs: Sequence[float], t: float) -> float:
    """Evaluate a polynomial given in ascending powers of ``t``.

    Args:
        coeffs: Coefficients, constant term first
        t: Argument

    Returns:
        The polynomial value, grouped as ``c0 + (c1 + (... + cn*t)*t)*t``
    """
    w = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        w = c + w * t
    return w


def series_argument(multipliers: Sequence[int], arguments: Sequence[float]) -> float:
    """Linear combination of fundamental arguments, summed left to right."""
    a = 0.0
    for n, fa in zip(multipliers, arguments):
        a += n * fa
    return a


def sine_cosine_series(
    terms: Sequence[Tuple[Sequence[int], float, float]],
    arguments: Sequence[float],
    start: float = 0.0,
) -> float:
    """Sum ``s*sin(arg) + c*cos(arg)`` over ``terms``, last term first.

    Args:
        terms: ``(multipliers, sine amplitude, cosine amplitude)`` tuples
        arguments: Fundamental arguments the multipliers apply to
        start: Value the accumulation starts from

    Returns:
        The accumulated series
    """
    w = start
    for multipliers, s, c in reversed(terms):
        a = series_argument(multipliers, arguments)
        w += s * math.sin(a) + c * math.cos(a)
    return w
