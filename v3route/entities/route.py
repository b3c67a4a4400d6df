"""Route: an ordered chain of pools from an input currency to an output currency."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar

import structlog

from v3route.errors import (
    BrokenPathError,
    ChainMismatchError,
    EmptyRouteError,
    OutputNotInLastPoolError,
)

from .currency import Currency, Token
from .fractions import Price

logger = structlog.get_logger()

TInput = TypeVar("TInput", bound=Currency)
TOutput = TypeVar("TOutput", bound=Currency)


class RoutePool(Protocol):
    """What a Route needs from a pool.

    Pool satisfies this; anything exposing the same two-token view with
    exact directional prices can be routed through.
    """

    token0: Token
    token1: Token

    @property
    def chain_id(self) -> int: ...

    @property
    def token0_price(self) -> Price[Token, Token]: ...

    @property
    def token1_price(self) -> Price[Token, Token]: ...

    def involves_token(self, token: Token) -> bool: ...


class Route(Generic[TInput, TOutput]):
    """A validated path of pools between two currencies.

    The input and output may be native currencies; the pools are walked
    with their wrapped tokens, and token_path always holds tokens
    (len(token_path) == len(pools) + 1).

    Immutable after construction apart from the mid price, which is
    computed on first access and cached.
    """

    def __init__(self, pools: Sequence[RoutePool], input: TInput, output: TOutput) -> None:
        """Validate pools and derive the token path.

        Checks run in order and the first failure is raised:
        empty pools, mixed chain ids, output missing from the last pool,
        then a hop whose pool does not hold the current path token.

        Raises:
            EmptyRouteError: No pools
            ChainMismatchError: Pools on more than one chain
            OutputNotInLastPoolError: Last pool lacks the wrapped output
            BrokenPathError: A pool does not contain the current path token
        """
        pools = tuple(pools)
        if not pools:
            raise EmptyRouteError()

        chain_id = pools[0].chain_id
        for pool in pools:
            if pool.chain_id != chain_id:
                raise ChainMismatchError(chain_id, pool.chain_id)

        wrapped_output = output.wrapped
        if not pools[-1].involves_token(wrapped_output):
            raise OutputNotInLastPoolError(wrapped_output)

        token_path: list[Token] = [input.wrapped]
        for hop, pool in enumerate(pools):
            current = token_path[hop]
            if current.equals(pool.token0):
                token_path.append(pool.token1)
            elif current.equals(pool.token1):
                token_path.append(pool.token0)
            else:
                raise BrokenPathError(hop, current)

        self._pools = pools
        self._token_path = tuple(token_path)
        self._input = input
        self._output = output
        self._mid_price: Price[TInput, TOutput] | None = None
        self._mid_price_lock = threading.Lock()

        logger.debug(
            "route_constructed",
            chain_id=chain_id,
            hops=len(pools),
            path=[token.address for token in token_path],
        )

    @property
    def pools(self) -> tuple[RoutePool, ...]:
        return self._pools

    @property
    def token_path(self) -> tuple[Token, ...]:
        return self._token_path

    @property
    def input(self) -> TInput:
        return self._input

    @property
    def output(self) -> TOutput:
        return self._output

    @property
    def chain_id(self) -> int:
        """Chain of the route (all pools share the first pool's chain)."""
        return self._pools[0].chain_id

    @property
    def mid_price(self) -> Price[TInput, TOutput]:
        """Price of one unit of input in terms of output, ignoring trade size.

        Computed once per route; later reads return the cached Price.
        """
        price = self._mid_price
        if price is not None:
            return price
        with self._mid_price_lock:
            if self._mid_price is None:
                self._mid_price = self._compute_mid_price()
            return self._mid_price

    def _compute_mid_price(self) -> Price[TInput, TOutput]:
        current = self._token_path[0]
        price: Price[Token, Token] = Price(current, current, 1, 1)
        for pool in self._pools:
            if current.equals(pool.token0):
                price = price.multiply(pool.token0_price)
                current = pool.token1
            else:
                price = price.multiply(pool.token1_price)
                current = pool.token0

        logger.debug(
            "route_mid_price_computed",
            chain_id=self.chain_id,
            hops=len(self._pools),
            numerator=str(price.numerator),
            denominator=str(price.denominator),
        )
        # Relabel with the caller's currencies (native input/output stays native)
        return Price(self._input, self._output, price.denominator, price.numerator)

    def __repr__(self) -> str:
        path = " -> ".join(token.symbol or token.address for token in self._token_path)
        return f"Route({path}, chain={self.chain_id})"


__all__ = ["Route", "RoutePool"]
