"""Pool dataclass for UniswapV3 concentrated liquidity pools."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from v3route.constants import FEE_DENOMINATOR, Q192
from v3route.errors import InvalidPoolError
from v3route.math.sqrt_price import sqrt_price_to_fraction

from .currency import Token
from .fractions import Fraction, Price


@dataclass(eq=False)
class Pool:
    """Represents a UniswapV3 concentrated liquidity pool.

    The pool state includes:
    - The two tokens, ordered by address (token0 sorts first)
    - Current price (as sqrtPriceX96)
    - Current tick
    - Active liquidity at current tick
    - Net liquidity changes at each initialized tick

    Tokens passed in either order are swapped into address order on
    construction. Only the spot price is derived here; swap and tick
    crossing math live elsewhere.
    """

    token0: Token
    token1: Token
    fee: int  # Fee in Uniswap units (e.g., 3000 for 0.3%)
    sqrt_price_x96: int  # Current sqrt(price) * 2^96
    liquidity: int = 0  # Current active liquidity
    tick: int = 0  # Current tick index
    liquidity_net: dict[int, int] = field(default_factory=dict)  # tick -> net liquidity
    address: str | None = None
    liquidity_id: str | None = None  # ID from the liquidity source

    def __post_init__(self) -> None:
        if self.token0.chain_id != self.token1.chain_id:
            raise InvalidPoolError(
                f"Pool tokens on different chains: {self.token0.chain_id} != {self.token1.chain_id}"
            )
        if self.token0.equals(self.token1):
            raise InvalidPoolError(f"Pool tokens are identical: {self.token0.address}")
        if not 0 <= self.fee < FEE_DENOMINATOR:
            raise InvalidPoolError(f"Fee out of range: {self.fee}")
        if self.sqrt_price_x96 < 0:
            raise InvalidPoolError(f"Negative sqrt price: {self.sqrt_price_x96}")
        if not self.token0.sorts_before(self.token1):
            self.token0, self.token1 = self.token1, self.token0

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @cached_property
    def token0_price(self) -> Price[Token, Token]:
        """Current price of token0 in terms of token1."""
        ratio: Fraction = sqrt_price_to_fraction(self.sqrt_price_x96)
        return Price(self.token0, self.token1, ratio.denominator, ratio.numerator)

    @cached_property
    def token1_price(self) -> Price[Token, Token]:
        """Current price of token1 in terms of token0.

        Raises:
            ZeroDenominatorError: If the pool has a zero sqrt price
        """
        return Price(self.token1, self.token0, self.sqrt_price_x96 * self.sqrt_price_x96, Q192)

    def involves_token(self, token: Token) -> bool:
        """Check if token is one of the pool's two tokens."""
        return token.equals(self.token0) or token.equals(self.token1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pool):
            return NotImplemented
        return (
            self.token0.equals(other.token0)
            and self.token1.equals(other.token1)
            and self.fee == other.fee
            and self.sqrt_price_x96 == other.sqrt_price_x96
            and self.liquidity == other.liquidity
            and self.tick == other.tick
        )


__all__ = ["Pool"]
