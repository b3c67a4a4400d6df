"""Currency models: ERC20 tokens and the chain's native asset.

Pools only ever hold tokens. A native currency takes part in a route through
its canonical wrapped token (WETH9), exposed by the ``wrapped`` property on
both currency kinds.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, Field

from v3route.constants import WETH9_ADDRESSES
from v3route.errors import UnsupportedChainError
from v3route.models.types import Address


class Token(BaseModel):
    """An ERC20 token on a specific chain.

    Two tokens are equal when they share chain id and address; symbol,
    name and decimals are metadata only.
    """

    chain_id: int = Field(gt=0)
    address: Address
    decimals: int = Field(ge=0, lt=256)
    symbol: str | None = None
    name: str | None = None

    model_config = {"frozen": True}

    @property
    def is_native(self) -> bool:
        return False

    @property
    def is_token(self) -> bool:
        return True

    @property
    def wrapped(self) -> Token:
        """A token is its own wrapped form."""
        return self

    def equals(self, other: object) -> bool:
        """Check if other is the same token (chain id and address)."""
        return (
            isinstance(other, Token)
            and self.chain_id == other.chain_id
            and self.address == other.address
        )

    def sorts_before(self, other: Token) -> bool:
        """Check if this token's address sorts before other's.

        Raises:
            ValueError: If the tokens are on different chains or share an address
        """
        if self.chain_id != other.chain_id:
            raise ValueError(f"Tokens on different chains: {self.chain_id} != {other.chain_id}")
        if self.address == other.address:
            raise ValueError(f"Tokens share address {self.address}")
        return int(self.address, 16) < int(other.address, 16)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __repr__(self) -> str:
        return f"Token({self.symbol or self.address}, chain={self.chain_id})"


class NativeCurrency(BaseModel):
    """The native asset of a chain (e.g. Ether on mainnet)."""

    chain_id: int = Field(gt=0)
    decimals: int = 18
    symbol: str = "ETH"
    name: str = "Ether"

    model_config = {"frozen": True}

    @property
    def is_native(self) -> bool:
        return True

    @property
    def is_token(self) -> bool:
        return False

    @classmethod
    def on_chain(cls, chain_id: int) -> NativeCurrency:
        """Native currency for chain_id."""
        return cls(chain_id=chain_id)

    @property
    def wrapped(self) -> Token:
        """The canonical wrapped token for this chain.

        Raises:
            UnsupportedChainError: If no WETH9 address is known for the chain
        """
        return weth9(self.chain_id)

    def equals(self, other: object) -> bool:
        return isinstance(other, NativeCurrency) and self.chain_id == other.chain_id

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(("native", self.chain_id))


Currency: TypeAlias = Token | NativeCurrency


def weth9(chain_id: int) -> Token:
    """Canonical wrapped native token for chain_id.

    Raises:
        UnsupportedChainError: If the chain has no known WETH9 deployment
    """
    address = WETH9_ADDRESSES.get(chain_id)
    if address is None:
        raise UnsupportedChainError(chain_id)
    return Token(
        chain_id=chain_id,
        address=address,
        decimals=18,
        symbol="WETH",
        name="Wrapped Ether",
    )


__all__ = ["Token", "NativeCurrency", "Currency", "weth9"]
