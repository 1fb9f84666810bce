"""Registry of shipped market configurations.

Markets are keyed by their id (e.g. ``mainnet-weth-v3``) and kept in
declaration order, which is also the order the credit-config fixture
renders them in.
"""

import logging
from typing import Dict, List

from creditcfg.core.constants import Network
from creditcfg.core.exceptions import UnknownSymbolError
from creditcfg.core.models import PoolConfig

logger = logging.getLogger(__name__)

# Markets rendered into CreditConfigLive.sol for live tests
LIVE_TEST_MARKETS = ["mainnet-weth-v3", "mainnet-usdc-v3", "mainnet-usdc-test-v3", "arbitrum-weth-v3"]


class MarketRegistry:
    """Lookup table of pool configurations by id."""

    _markets: Dict[str, PoolConfig] = {}

    @classmethod
    def register(cls, pool: PoolConfig) -> None:
        """Register a pool configuration.

        Raises:
            ValueError: If another pool with the same id is already registered
        """
        if pool.id in cls._markets and cls._markets[pool.id] is not pool:
            raise ValueError(f"Market already registered: {pool.id}")
        cls._markets[pool.id] = pool
        logger.debug(f"Registered market {pool.id} ({pool.network.value})")

    @classmethod
    def get(cls, market_id: str) -> PoolConfig:
        """Get a pool configuration by id.

        Raises:
            UnknownSymbolError: If no market with this id is registered
        """
        _ensure_defaults()
        try:
            return cls._markets[market_id]
        except KeyError:
            raise UnknownSymbolError("market", market_id) from None

    @classmethod
    def all(cls) -> List[PoolConfig]:
        _ensure_defaults()
        return list(cls._markets.values())

    @classmethod
    def ids(cls) -> List[str]:
        _ensure_defaults()
        return list(cls._markets.keys())

    @classmethod
    def for_network(cls, network: Network) -> List[PoolConfig]:
        return [pool for pool in cls.all() if pool.network is network]

    @classmethod
    def clear(cls) -> None:
        """Drop every registered market. Primarily useful for testing."""
        global _defaults_loaded
        cls._markets.clear()
        _defaults_loaded = False


_defaults_loaded = False


def _ensure_defaults() -> None:
    if not _defaults_loaded:
        register_default_markets()


def register_default_markets() -> None:
    """Register every market shipped with the package."""
    global _defaults_loaded
    # Import here to avoid circular imports
    from creditcfg.markets import (
        dai_mainnet,
        usdc_arbitrum,
        usdc_mainnet,
        usdc_test_mainnet,
        weth_arbitrum,
        weth_mainnet,
        weth_optimism,
    )

    _defaults_loaded = True
    for module in (
        weth_mainnet,
        usdc_mainnet,
        dai_mainnet,
        usdc_test_mainnet,
        usdc_arbitrum,
        weth_arbitrum,
        weth_optimism,
    ):
        MarketRegistry.register(module.CONFIG)
    logger.debug(f"Registered {len(MarketRegistry._markets)} default markets")


def live_test_markets() -> List[PoolConfig]:
    """Pool configurations rendered into the live-test fixture."""
    return [MarketRegistry.get(market_id) for market_id in LIVE_TEST_MARKETS]

