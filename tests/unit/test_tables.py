"""Unit tests for the reference tables."""

import re

import pytest

from creditcfg.core.constants import NO_CONTRACT, NOT_DEPLOYED, Network
from creditcfg.core.exceptions import UnknownSymbolError
from creditcfg.core.models import (
    AdapterInterface,
    CurveAdapter,
    CurveLPFeed,
    CurveWrapperAdapter,
    LikeCurveLPFeed,
    SimpleAdapter,
    TokenData,
)
from creditcfg.registry import default_tables

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class TestReferenceTables:
    """Tests for ReferenceTables lookups."""

    def test_token_lookup(self, small_tables):
        """Known tokens resolve, unknown ones raise."""
        assert small_tables.token("WETH").decimals == 18
        with pytest.raises(UnknownSymbolError) as exc_info:
            small_tables.token("NOPE")
        assert exc_info.value.symbol == "NOPE"
        assert exc_info.value.kind == "token"

    def test_has_token_per_network(self, small_tables):
        """Deployment is per network."""
        assert small_tables.has_token("WETH", Network.ARBITRUM)
        assert not small_tables.has_token("USDC", Network.ARBITRUM)
        assert not small_tables.has_token("stkcvx3Crv", Network.MAINNET)
        assert not small_tables.has_token("NOPE", Network.MAINNET)

    def test_tokens_on_keeps_table_order(self, small_tables):
        assert [t.symbol for t in small_tables.tokens_on(Network.ARBITRUM)] == ["WETH", "ARB"]

    def test_contract_address(self, small_tables):
        """Unknown or undeployed contracts have no address."""
        assert small_tables.contract_address("CURVE_3CRV_POOL", Network.ARBITRUM) == NOT_DEPLOYED
        assert small_tables.contract_address("NOPE", Network.MAINNET) == NOT_DEPLOYED
        assert small_tables.has_contract("UNISWAP_V3_ROUTER", Network.ARBITRUM)

    def test_contract_lookup_raises(self, small_tables):
        with pytest.raises(UnknownSymbolError):
            small_tables.contract("NOPE")

    def test_tables_are_read_only(self, small_tables):
        """Mappings cannot be mutated after construction."""
        with pytest.raises(TypeError):
            small_tables.tokens["NEW"] = TokenData("NEW", 18)
        with pytest.raises(TypeError):
            small_tables.token("WETH").addresses[Network.OPTIMISM] = "0x0"


class TestAdapterDescriptors:
    """Tests for adapter descriptor invariants."""

    def test_simple_adapter_rejects_curve_type(self):
        with pytest.raises(ValueError):
            SimpleAdapter("CURVE_3CRV_POOL", AdapterInterface.CURVE_V1_3ASSETS)

    def test_curve_base_pool(self):
        """Metapools containing 3Crv route through the 3Crv pool."""
        meta = CurveAdapter("CURVE_FRAX_POOL", AdapterInterface.CURVE_V1_2ASSETS, "FRAX3CRV", ("FRAX", "3Crv"))
        plain = CurveAdapter("CURVE_3CRV_POOL", AdapterInterface.CURVE_V1_3ASSETS, "3Crv", ("DAI", "USDC", "USDT"))

        assert meta.base_pool == "CURVE_3CRV_POOL"
        assert plain.base_pool == NO_CONTRACT

    def test_wrapper_coin_count(self):
        wrapper = CurveWrapperAdapter("CURVE_SUSD_DEPOSIT", "crvPlain3andSUSD", ("DAI", "USDC", "USDT", "sUSD"))
        assert wrapper.n_coins == 4


class TestDefaultTables:
    """Consistency checks on the shipped tables."""

    @pytest.fixture
    def tables(self):
        return default_tables()

    def test_cached(self, tables):
        assert default_tables() is tables

    def test_addresses_are_well_formed(self, tables):
        """Every address is a 20-byte hex string."""
        for token in tables.tokens.values():
            for network, address in token.addresses.items():
                assert ADDRESS_RE.match(address), f"{token.symbol} on {network.value}: {address}"
        for contract in tables.contracts.values():
            for network, address in contract.addresses.items():
                assert ADDRESS_RE.match(address), f"{contract.name} on {network.value}: {address}"

    def test_price_feeds_reference_known_symbols(self, tables):
        for symbol, feed in tables.price_feeds.items():
            assert symbol in tables.tokens, symbol
            if isinstance(feed, CurveLPFeed):
                assert feed.pool in tables.contracts
                assert all(a in tables.tokens for a in feed.assets)
            if isinstance(feed, LikeCurveLPFeed):
                assert feed.curve_symbol in tables.tokens

    def test_adapters_reference_known_symbols(self, tables):
        for name, adapter in tables.adapters.items():
            assert name in tables.contracts, name
            for symbol in adapter.tokens_referenced:
                assert symbol in tables.tokens, f"{name} -> {symbol}"

    def test_every_adapter_is_deployable(self, tables):
        """Each adapter has its contract and tokens on at least one network."""
        for name, adapter in tables.adapters.items():
            assert any(
                tables.has_contract(name, network)
                and all(tables.has_token(s, network) for s in adapter.tokens_referenced)
                for network in Network
            ), name

    def test_every_token_is_deployed(self, tables):
        undeployed = [s for s, t in tables.tokens.items() if not any(t.is_deployed(n) for n in Network)]
        assert undeployed == []

    def test_every_token_has_a_price_feed(self, tables):
        """Collateral cannot be priced without a feed."""
        missing = [s for s in tables.tokens if tables.price_feed(s) is None]
        assert missing == []

    def test_every_network_has_tokens(self, tables):
        for network in Network:
            assert tables.tokens_on(network), network
