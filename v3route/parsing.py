"""Parsing of concentrated-liquidity records into Pool objects.

Records follow the solver auction liquidity shape, e.g.:

    {
        "id": "7",
        "kind": "concentratedLiquidity",
        "address": "0x88e6...",
        "tokens": ["0xa0b8...", "0xc02a..."],
        "sqrtPrice": "1234...",
        "liquidity": "5678...",
        "tick": -201000,
        "fee": "0.0005",
        "liquidityNet": {"-887270": "100", "887270": "-100"}
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from v3route.constants import FEE_DENOMINATOR, FEE_MEDIUM
from v3route.entities.currency import Token
from v3route.entities.pool import Pool
from v3route.errors import InvalidPoolError
from v3route.models.types import Address

logger = structlog.get_logger()

CONCENTRATED_LIQUIDITY = "concentratedLiquidity"

# Decimals assumed for tokens missing from the decimals mapping
DEFAULT_TOKEN_DECIMALS = 18


class LiquidityData(BaseModel):
    """A single liquidity source record."""

    id: str
    kind: str
    address: Address | None = None
    tokens: list[Address] | dict[Address, Any]
    sqrt_price: int = Field(default=0, alias="sqrtPrice", ge=0)
    liquidity: int = Field(default=0, ge=0)
    tick: int = 0
    fee: str | None = None
    liquidity_net: dict[int, int] = Field(default_factory=dict, alias="liquidityNet")

    model_config = {"populate_by_name": True, "extra": "allow"}


def parse_pool(
    data: Mapping[str, Any] | LiquidityData,
    chain_id: int,
    decimals: Mapping[str, int] | None = None,
) -> Pool | None:
    """Parse a UniswapV3 pool from a liquidity record.

    Args:
        data: Raw record or an already validated LiquidityData
        chain_id: Chain the pool lives on
        decimals: Token decimals by address (missing tokens default to 18)

    Returns:
        Pool if the record is valid concentrated liquidity, None otherwise
        (including when chain_id or a decimals value cannot form a Token)
    """
    if isinstance(data, LiquidityData):
        liquidity = data
    else:
        try:
            liquidity = LiquidityData.model_validate(data)
        except ValidationError as err:
            logger.debug(
                "v3_pool_invalid_payload",
                liquidity_id=data.get("id"),
                errors=err.error_count(),
            )
            return None

    if liquidity.kind != CONCENTRATED_LIQUIDITY:
        return None

    token_addresses = list(liquidity.tokens)
    if len(token_addresses) != 2:
        logger.debug(
            "v3_pool_wrong_token_count",
            liquidity_id=liquidity.id,
            count=len(token_addresses),
        )
        return None

    decimals_by_address = {k.lower(): v for k, v in (decimals or {}).items()}
    try:
        tokens = [
            Token(
                chain_id=chain_id,
                address=address,
                decimals=decimals_by_address.get(address, DEFAULT_TOKEN_DECIMALS),
            )
            for address in token_addresses
        ]
    except ValidationError as err:
        logger.debug(
            "v3_pool_invalid_token",
            liquidity_id=liquidity.id,
            chain_id=chain_id,
            errors=err.error_count(),
        )
        return None

    try:
        return Pool(
            token0=tokens[0],
            token1=tokens[1],
            fee=_parse_fee(liquidity),
            sqrt_price_x96=liquidity.sqrt_price,
            liquidity=liquidity.liquidity,
            tick=liquidity.tick,
            liquidity_net=dict(liquidity.liquidity_net),
            address=liquidity.address,
            liquidity_id=liquidity.id,
        )
    except InvalidPoolError as err:
        logger.debug("v3_pool_rejected", liquidity_id=liquidity.id, reason=str(err))
        return None


def _parse_fee(liquidity: LiquidityData) -> int:
    """Parse fee from liquidity data.

    Fee can come as:
    - Decimal string "0.003" (0.3%) -> multiply by 1,000,000 -> 3000
    - Integer string "3000" -> use directly

    Returns:
        Fee in Uniswap units (e.g., 3000 for 0.3%)
    """
    if liquidity.fee is None:
        return FEE_MEDIUM  # Default to 0.3%

    try:
        fee = Decimal(liquidity.fee)
        if not fee.is_finite():
            raise InvalidOperation(liquidity.fee)
    except InvalidOperation:
        logger.debug(
            "v3_pool_parse_fee_failed",
            liquidity_id=liquidity.id,
            fee=liquidity.fee,
        )
        return FEE_MEDIUM

    # Below 1 it is a fraction of the amount, otherwise already in Uniswap units
    if fee < 1:
        return int(fee * FEE_DENOMINATOR)
    return int(fee)


__all__ = ["LiquidityData", "parse_pool", "CONCENTRATED_LIQUIDITY", "DEFAULT_TOKEN_DECIMALS"]
