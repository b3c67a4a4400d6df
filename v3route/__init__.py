"""UniswapV3 route validation and mid-price aggregation."""

from v3route.entities import (
    Currency,
    Fraction,
    NativeCurrency,
    Pool,
    Price,
    Route,
    Rounding,
    Token,
    weth9,
)
from v3route.errors import (
    BrokenPathError,
    ChainMismatchError,
    EmptyRouteError,
    OutputNotInLastPoolError,
    RouteError,
)

__version__ = "0.1.0"
__all__ = [
    "Currency",
    "Fraction",
    "NativeCurrency",
    "Pool",
    "Price",
    "Route",
    "Rounding",
    "Token",
    "weth9",
    "RouteError",
    "EmptyRouteError",
    "ChainMismatchError",
    "OutputNotInLastPoolError",
    "BrokenPathError",
    "__version__",
]
