"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_token, make_pool
    # or
    from tests.helpers.factories import make_token, make_pool

    pool = make_pool(make_token(T0), make_token(T1), ratio=(5, 1))
"""

from dataclasses import dataclass, field

from v3route.constants import FEE_MEDIUM
from v3route.entities import Pool, Price, Token
from v3route.math import encode_sqrt_ratio_x96
from tests.helpers.constants import MAINNET, TOKEN_DECIMALS


def make_token(
    address: str,
    chain_id: int = MAINNET,
    decimals: int | None = None,
    symbol: str | None = None,
) -> Token:
    """Create a test token; decimals default to the known value or 18."""
    if decimals is None:
        decimals = TOKEN_DECIMALS.get(address, 18)
    return Token(chain_id=chain_id, address=address, decimals=decimals, symbol=symbol)


def make_pool(
    token_a: Token,
    token_b: Token,
    ratio: tuple[int, int] = (1, 1),
    fee: int = FEE_MEDIUM,
    liquidity: int = 0,
) -> Pool:
    """Create a pool priced at ratio = (amount1, amount0).

    amount1/amount0 is the token1-per-token0 price after the pool orders
    its tokens by address.
    """
    amount1, amount0 = ratio
    return Pool(
        token0=token_a,
        token1=token_b,
        fee=fee,
        sqrt_price_x96=encode_sqrt_ratio_x96(amount1, amount0),
        liquidity=liquidity,
    )


@dataclass
class FixedPricePool:
    """Pool stand-in with an exact token1-per-token0 price.

    Real pools store sqrt prices, so ratios like 1:5 are only approximate
    there. Counts price reads so tests can assert how often they happen.
    """

    token0: Token
    token1: Token
    numerator: int  # token1 per token0
    denominator: int
    price_reads: list[str] = field(default_factory=list)

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def token0_price(self) -> Price:
        self.price_reads.append("token0")
        return Price(self.token0, self.token1, self.denominator, self.numerator)

    @property
    def token1_price(self) -> Price:
        self.price_reads.append("token1")
        return Price(self.token1, self.token0, self.numerator, self.denominator)

    def involves_token(self, token: Token) -> bool:
        return token.equals(self.token0) or token.equals(self.token1)
