"""Unit tests for the shipped market configurations."""

from dataclasses import replace

import pytest

from creditcfg.core.constants import PERCENTAGE_FACTOR, Network
from creditcfg.core.exceptions import UnknownSymbolError
from creditcfg.deploy import validate_pool
from creditcfg.markets import LIVE_TEST_MARKETS, MarketRegistry, live_test_markets
from creditcfg.markets.base import DEFAULT_FEES, PoolUnits
from creditcfg.registry import default_tables

SHIPPED = [
    "mainnet-weth-v3",
    "mainnet-usdc-v3",
    "mainnet-dai-v3",
    "mainnet-usdc-test-v3",
    "arbitrum-usdc-v3",
    "arbitrum-weth-v3",
    "optimism-weth-v3",
]


class TestMarketRegistry:
    """Tests for MarketRegistry."""

    def test_ids_in_declaration_order(self):
        assert MarketRegistry.ids() == SHIPPED

    def test_get(self):
        pool = MarketRegistry.get("mainnet-usdc-v3")
        assert pool.underlying == "USDC"
        assert pool.network is Network.MAINNET

    def test_unknown_id(self):
        with pytest.raises(UnknownSymbolError) as exc_info:
            MarketRegistry.get("mainnet-nope-v3")
        assert exc_info.value.kind == "market"

    def test_for_network(self):
        assert [p.id for p in MarketRegistry.for_network(Network.ARBITRUM)] == ["arbitrum-usdc-v3", "arbitrum-weth-v3"]

    def test_live_test_markets(self):
        assert [p.id for p in live_test_markets()] == LIVE_TEST_MARKETS

    def test_duplicate_registration_rejected(self, sample_pool):
        """A different pool under an existing id is rejected."""
        MarketRegistry.register(sample_pool)
        try:
            clash = replace(sample_pool, name="Other")
            with pytest.raises(ValueError):
                MarketRegistry.register(clash)
        finally:
            MarketRegistry.clear()


class TestShippedMarkets:
    """Every shipped market must be deployable."""

    @pytest.mark.parametrize("market_id", SHIPPED)
    def test_validates_against_default_tables(self, market_id):
        assert validate_pool(MarketRegistry.get(market_id), default_tables()) == []

    @pytest.mark.parametrize("market_id", SHIPPED)
    def test_thresholds_in_range(self, market_id):
        for cm in MarketRegistry.get(market_id).credit_managers:
            assert all(0 <= ct.lt <= PERCENTAGE_FACTOR for ct in cm.collateral_tokens)
            assert cm.min_debt <= cm.max_debt


class TestPoolUnits:
    """Tests for the amount helpers used by market modules."""

    def test_stable_pool(self):
        assert PoolUnits(decimals=6)(1_500) == 1_500_000_000

    def test_divider(self):
        """USD figures are converted at the divider price."""
        assert PoolUnits(decimals=18, divider=2000)(2_000) == 10**18

    def test_fractional_amounts(self):
        """Fractions are scaled before truncation."""
        assert PoolUnits(decimals=18)(0.5) == 5 * 10**17
        assert PoolUnits(decimals=6)(1.25) == 1_250_000
        assert PoolUnits(decimals=18, divider=2000)(1_000.5) == 500_250_000_000_000_000

    def test_fractional_min_debt_kept(self):
        cm = PoolUnits(decimals=18).credit_manager(
            "CM", min_debt=0.5, max_debt=10, pool_limit=100, collateral_tokens=(), adapters=()
        )
        assert cm.min_debt == 5 * 10**17

    def test_credit_manager_defaults(self):
        cm = PoolUnits(decimals=6).credit_manager(
            "CM", min_debt=1, max_debt=2, pool_limit=3, collateral_tokens=(), adapters=()
        )
        assert cm.min_debt == 10**6
        assert cm.fee_interest == DEFAULT_FEES["fee_interest"]

    def test_credit_manager_fee_override(self):
        cm = PoolUnits(decimals=6).credit_manager(
            "CM", 1, 2, 3, collateral_tokens=(), adapters=(), fee_interest=1000
        )
        assert cm.fee_interest == 1000
