"""UniswapV3 constants: fee tiers, fixed-point scales and wrapped native tokens."""

import decimal
from enum import Enum, IntEnum

# Fee tiers in Uniswap units (hundredths of a basis point)
# Fee = units / 1,000,000 (e.g., 3000 = 0.3%)
FEE_LOWEST = 100  # 0.01% - stable pairs
FEE_LOW = 500  # 0.05% - stable pairs
FEE_MEDIUM = 3000  # 0.30% - most pairs
FEE_HIGH = 10000  # 1.00% - exotic pairs

# Upper bound (exclusive) for any fee value
FEE_DENOMINATOR = 1_000_000

# sqrtPriceX96 is sqrt(price) scaled by 2^96, so price = sqrtPriceX96^2 / 2^192
Q96 = 2**96
Q192 = 2**192


class ChainId(IntEnum):
    """Chains with a known canonical wrapped native token."""

    MAINNET = 1
    GOERLI = 5
    SEPOLIA = 11155111
    OPTIMISM = 10
    ARBITRUM_ONE = 42161
    BASE = 8453


# Canonical wrapped native token per chain (lowercase)
WETH9_ADDRESSES: dict[int, str] = {
    ChainId.MAINNET: "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
    ChainId.GOERLI: "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6",
    ChainId.SEPOLIA: "0xfff9976782d46cc05630d1f6ebab18b2324d6b14",
    ChainId.OPTIMISM: "0x4200000000000000000000000000000000000006",
    ChainId.ARBITRUM_ONE: "0x82af49447d8a07e3bd95bd0d56f35241523fbab1",
    ChainId.BASE: "0x4200000000000000000000000000000000000006",
}


class Rounding(str, Enum):
    """Rounding mode for formatting exact rationals."""

    ROUND_DOWN = decimal.ROUND_DOWN
    ROUND_HALF_UP = decimal.ROUND_HALF_UP
    ROUND_UP = decimal.ROUND_UP


__all__ = [
    "FEE_LOWEST",
    "FEE_LOW",
    "FEE_MEDIUM",
    "FEE_HIGH",
    "FEE_DENOMINATOR",
    "Q96",
    "Q192",
    "ChainId",
    "WETH9_ADDRESSES",
    "Rounding",
]
