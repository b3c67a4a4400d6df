"""Unit tests for the Pool dataclass."""

import pytest

from v3route.constants import FEE_MEDIUM
from v3route.entities import Fraction, Pool
from v3route.errors import InvalidPoolError, ZeroDenominatorError
from v3route.math import encode_sqrt_ratio_x96
from tests.helpers import OPTIMISM, T1, make_pool, make_token


class TestPoolCreation:
    """Tests for pool construction and validation."""

    def test_pool_creation(self, token0, token1):
        pool = Pool(
            token0=token0,
            token1=token1,
            fee=FEE_MEDIUM,
            sqrt_price_x96=encode_sqrt_ratio_x96(1, 1),
            liquidity=1000000000,
            tick=0,
        )

        assert pool.token0 == token0
        assert pool.token1 == token1
        assert pool.chain_id == 1
        assert pool.liquidity_net == {}
        assert pool.address is None

    def test_tokens_are_ordered_by_address(self, token0, token1):
        pool = make_pool(token1, token0)

        assert pool.token0 == token0
        assert pool.token1 == token1

    def test_rejects_tokens_on_different_chains(self, token0):
        with pytest.raises(InvalidPoolError, match="different chains"):
            make_pool(token0, make_token(T1, chain_id=OPTIMISM))

    def test_rejects_identical_tokens(self, token0):
        with pytest.raises(InvalidPoolError, match="identical"):
            make_pool(token0, token0)

    @pytest.mark.parametrize("fee", [-1, 1_000_000])
    def test_rejects_fee_out_of_range(self, token0, token1, fee):
        with pytest.raises(InvalidPoolError, match="Fee"):
            make_pool(token0, token1, fee=fee)

    def test_rejects_negative_sqrt_price(self, token0, token1):
        with pytest.raises(InvalidPoolError):
            Pool(token0=token0, token1=token1, fee=FEE_MEDIUM, sqrt_price_x96=-1)

    def test_equality_ignores_metadata(self, token0, token1):
        assert make_pool(token0, token1) == make_pool(token1, token0)
        assert make_pool(token0, token1) != make_pool(token0, token1, ratio=(2, 1))


class TestPoolPrices:
    """Tests for the directional spot prices."""

    def test_token0_price(self, token0, token1):
        pool = make_pool(token0, token1, ratio=(1, 4))

        assert pool.token0_price.equal_to(Fraction(1, 4))
        assert pool.token0_price.base_currency == token0
        assert pool.token0_price.quote_currency == token1

    def test_token1_price(self, token0, token1):
        pool = make_pool(token0, token1, ratio=(1, 4))

        assert pool.token1_price.equal_to(Fraction(4))
        assert pool.token1_price.base_currency == token1
        assert pool.token1_price.quote_currency == token0

    def test_prices_are_reciprocal(self, token0, token1):
        pool = make_pool(token0, token1, ratio=(101, 111))
        assert pool.token0_price.multiply(pool.token1_price).equal_to(Fraction(1))

    def test_prices_are_cached(self, pool_0_1):
        assert pool_0_1.token0_price is pool_0_1.token0_price
        assert pool_0_1.token1_price is pool_0_1.token1_price

    def test_zero_sqrt_price_token1_price(self, token0, token1):
        pool = make_pool(token0, token1, ratio=(0, 1))

        assert pool.token0_price.equal_to(Fraction(0))
        with pytest.raises(ZeroDenominatorError):
            pool.token1_price


class TestPoolTokens:
    """Tests for token membership helpers."""

    def test_involves_token(self, pool_0_1, token0, token1, weth):
        assert pool_0_1.involves_token(token0)
        assert pool_0_1.involves_token(token1)
        assert not pool_0_1.involves_token(weth)

    def test_involves_token_ignores_address_case(self, pool_0_weth):
        upper = make_token("0xC02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2")
        assert pool_0_weth.involves_token(upper)

