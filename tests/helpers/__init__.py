"""Test helpers module for shared test utilities.

- constants: Token addresses and chain ids
- factories: Token and pool factory functions
"""

from tests.helpers.constants import (
    DAI,
    MAINNET,
    OPTIMISM,
    T0,
    T1,
    T2,
    TOKEN_DECIMALS,
    UNKNOWN_CHAIN,
    USDC,
    WETH,
)
from tests.helpers.factories import FixedPricePool, make_pool, make_token

__all__ = [
    # Constants
    "T0",
    "T1",
    "T2",
    "WETH",
    "USDC",
    "DAI",
    "MAINNET",
    "OPTIMISM",
    "UNKNOWN_CHAIN",
    "TOKEN_DECIMALS",
    # Factories
    "make_token",
    "make_pool",
    "FixedPricePool",
]
