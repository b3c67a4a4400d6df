"""Conversions between token ratios and Q64.96 sqrt prices.

UniswapV3 pools store sqrt(token1/token0) scaled by 2^96 (sqrtPriceX96).
All conversions here are integer-only.
"""

from __future__ import annotations

from math import isqrt

from v3route.constants import Q192
from v3route.entities.fractions import Fraction
from v3route.errors import ZeroDenominatorError


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Return sqrtPriceX96 for a price of amount1 token1 per amount0 token0.

    The result is floored, so squaring it back gives a price at or just
    below amount1 / amount0.

    Raises:
        ZeroDenominatorError: If amount0 is zero
        ValueError: If either amount is negative
    """
    if amount0 == 0:
        raise ZeroDenominatorError("encode_sqrt_ratio_x96: amount0 is zero")
    if amount0 < 0 or amount1 < 0:
        raise ValueError(f"Amounts cannot be negative: {amount1}/{amount0}")
    return isqrt((amount1 << 192) // amount0)


def sqrt_price_to_fraction(sqrt_price_x96: int) -> Fraction:
    """Exact token1-per-token0 ratio for a sqrtPriceX96."""
    return Fraction(sqrt_price_x96 * sqrt_price_x96, Q192)


__all__ = ["encode_sqrt_ratio_x96", "sqrt_price_to_fraction"]
