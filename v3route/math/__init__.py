"""Fixed-point helpers for UniswapV3 sqrt prices."""

from v3route.math.sqrt_price import encode_sqrt_ratio_x96, sqrt_price_to_fraction

__all__ = ["encode_sqrt_ratio_x96", "sqrt_price_to_fraction"]
