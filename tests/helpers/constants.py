"""Shared token constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import WETH, USDC
"""

# =============================================================================
# Synthetic tokens (address order: T0 < T1 < T2 < WETH)
# =============================================================================

T0 = "0x0000000000000000000000000000000000000001"
T1 = "0x0000000000000000000000000000000000000002"
T2 = "0x0000000000000000000000000000000000000003"

# =============================================================================
# Mainnet tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)

# =============================================================================
# Cross-chain
# =============================================================================

MAINNET = 1
OPTIMISM = 10
UNKNOWN_CHAIN = 424242  # No WETH9 deployment known

TOKEN_DECIMALS = {
    T0: 18,
    T1: 18,
    T2: 18,
    WETH: 18,
    USDC: 6,
    DAI: 18,
}


__all__ = [
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
]
