"""Error classes for route construction and exact price arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from v3route.entities.currency import Token


class RouteError(ValueError):
    """Base error for an invalid pool sequence.

    Raised only while constructing a Route; the route is never built.
    """

    pass


class EmptyRouteError(RouteError):
    """No pools were supplied."""

    def __init__(self) -> None:
        super().__init__("Should not be zero")


class ChainMismatchError(RouteError):
    """Pools span more than one chain id."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"different chain id: expected {expected}, found {found}")


class OutputNotInLastPoolError(RouteError):
    """The wrapped output token is absent from the final pool."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(
            f"last pool does not involve specific token in the output: {token.address}"
        )


class BrokenPathError(RouteError):
    """A pool does not contain the current path token."""

    def __init__(self, hop: int, token: Token) -> None:
        self.hop = hop
        self.token = token
        super().__init__(f"Token not present in current pool: {token.address} at hop {hop}")


class InvalidPoolError(ValueError):
    """Pool tokens or fee are malformed."""

    pass


class UnsupportedChainError(ValueError):
    """No canonical wrapped native token is known for the chain."""

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        super().__init__(f"No wrapped native token for chain {chain_id}")


class ZeroDenominatorError(ArithmeticError):
    """An exact rational was built with a zero denominator.

    This indicates a malformed upstream price and is not recoverable.
    """

    pass


__all__ = [
    "RouteError",
    "EmptyRouteError",
    "ChainMismatchError",
    "OutputNotInLastPoolError",
    "BrokenPathError",
    "InvalidPoolError",
    "UnsupportedChainError",
    "ZeroDenominatorError",
]
