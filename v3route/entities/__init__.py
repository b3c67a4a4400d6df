"""Route entities and the collaborators they are built from.

- Token / NativeCurrency: currencies and their wrapped forms
- Fraction / Price: exact rationals
- Pool: UniswapV3 pool with spot prices
- Route: validated pool path with a cached mid price
"""

from .currency import Currency, NativeCurrency, Token, weth9
from .fractions import Fraction, Price, Rounding
from .pool import Pool
from .route import Route, RoutePool

__all__ = [
    # Currencies
    "Currency",
    "NativeCurrency",
    "Token",
    "weth9",
    # Fractions
    "Fraction",
    "Price",
    "Rounding",
    # Pools and routes
    "Pool",
    "Route",
    "RoutePool",
]
