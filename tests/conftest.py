"""Pytest configuration and fixtures."""

import pytest

from v3route.entities import NativeCurrency, Pool, Token, weth9
from tests.helpers import MAINNET, T0, T1, T2, make_pool, make_token

# =============================================================================
# Currencies
# =============================================================================


@pytest.fixture
def token0() -> Token:
    return make_token(T0, symbol="t0")


@pytest.fixture
def token1() -> Token:
    return make_token(T1, symbol="t1")


@pytest.fixture
def token2() -> Token:
    return make_token(T2, symbol="t2")


@pytest.fixture
def weth() -> Token:
    """Mainnet WETH9."""
    return weth9(MAINNET)


@pytest.fixture
def eth() -> NativeCurrency:
    """Mainnet Ether."""
    return NativeCurrency.on_chain(MAINNET)


# =============================================================================
# Pools (unit price unless named otherwise)
# =============================================================================


@pytest.fixture
def pool_0_1(token0: Token, token1: Token) -> Pool:
    return make_pool(token0, token1)


@pytest.fixture
def pool_0_weth(token0: Token, weth: Token) -> Pool:
    return make_pool(token0, weth)


@pytest.fixture
def pool_1_weth(token1: Token, weth: Token) -> Pool:
    return make_pool(token1, weth)


@pytest.fixture
def pool_1_2(token1: Token, token2: Token) -> Pool:
    return make_pool(token1, token2)
