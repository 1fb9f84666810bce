"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Callable, Sequence

import pytest

from config.settings import Settings
from creditcfg.core.constants import Network, network_addresses
from creditcfg.core.models import (
    AdapterConfig,
    AdapterInterface,
    BoundedFeed,
    ChainlinkFeed,
    CollateralToken,
    ContractData,
    CreditManagerConfig,
    CurveAdapter,
    CurveLPFeed,
    CurveWrapperAdapter,
    IRMParams,
    LikeCurveLPFeed,
    PoolConfig,
    QuotaParams,
    SimpleAdapter,
    TokenData,
    TokenType,
    ZeroFeed,
)
from creditcfg.registry import ReferenceTables

WETH_MAINNET = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WETH_ARBITRUM = "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"
USDC_MAINNET = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
CRV3_MAINNET = "0x6c3F90f043a72FA612cbac8115EE7e52BDe6E490"
UNI_V3_ROUTER = "0xE592427A0AEce92De3Edee1F18E0157C05861564"
CURVE_3CRV_POOL = "0xbEbc44782C7dB0a1A60Cb6fe97d0b483032FF1C7"
ETH_USD_FEED = "0x5f4eC3Df9cbd43714FE2740f5E3616155c5b8419"


@pytest.fixture
def small_tables() -> ReferenceTables:
    """Reference tables with a handful of tokens spread over two networks."""
    tokens = [
        TokenData(
            "WETH",
            18,
            TokenType.WRAPPED_TOKEN,
            network_addresses(mainnet=WETH_MAINNET, arbitrum=WETH_ARBITRUM),
        ),
        TokenData("USDC", 6, addresses=network_addresses(mainnet=USDC_MAINNET)),
        TokenData("DAI", 18, addresses=network_addresses(mainnet="0x6B175474E89094C44Da98b954EedeAC495271d0F")),
        TokenData("USDT", 6, addresses=network_addresses(mainnet="0xdAC17F958D2ee523a2206206994597C13D831ec7")),
        TokenData("3Crv", 18, TokenType.CURVE_LP_TOKEN, network_addresses(mainnet=CRV3_MAINNET)),
        TokenData("ARB", 18, addresses=network_addresses(arbitrum="0x912CE59144191C1204E64559FE8253a0e49E6548")),
        TokenData("stkcvx3Crv", 18, TokenType.CONVEX_STAKED_PHANTOM_TOKEN),
    ]
    contracts = [
        ContractData(
            "UNISWAP_V3_ROUTER",
            "Uniswap V3",
            network_addresses(mainnet=UNI_V3_ROUTER, arbitrum=UNI_V3_ROUTER),
        ),
        ContractData("SUSHISWAP_ROUTER", "Sushiswap", network_addresses(mainnet="0xd9e1cE17f2641f24aE83637ab66a2cca9C378B9F")),
        ContractData("CURVE_3CRV_POOL", "Curve 3Pool", network_addresses(mainnet=CURVE_3CRV_POOL)),
        ContractData(
            "CURVE_SUSD_DEPOSIT",
            "Curve sUSD deposit",
            network_addresses(mainnet="0xFCBa3E75865d2d561BE8D220616520c171F12851"),
        ),
    ]
    price_feeds = [
        ChainlinkFeed("WETH", network_addresses(mainnet=ETH_USD_FEED)),
        ChainlinkFeed("ARB", network_addresses(arbitrum="0xb2A824043730FE05F3DA2efaFa1CBbe83fa548D6")),
        BoundedFeed("USDT", network_addresses(mainnet="0x3E7d1eAB13ad0104d2750B8863b489D65364e32D"), Decimal("1.0")),
        ZeroFeed("DAI"),
        CurveLPFeed("3Crv", assets=("DAI", "USDC", "USDT"), pool="CURVE_3CRV_POOL"),
        LikeCurveLPFeed("stkcvx3Crv", curve_symbol="3Crv"),
    ]
    adapters = [
        SimpleAdapter("UNISWAP_V3_ROUTER", AdapterInterface.UNISWAP_V3_ROUTER),
        SimpleAdapter("SUSHISWAP_ROUTER", AdapterInterface.UNISWAP_V2_ROUTER),
        CurveAdapter(
            "CURVE_3CRV_POOL",
            AdapterInterface.CURVE_V1_3ASSETS,
            lp_token="3Crv",
            tokens=("DAI", "USDC", "USDT"),
        ),
        CurveWrapperAdapter("CURVE_SUSD_DEPOSIT", lp_token="crvPlain3andSUSD", tokens=("DAI", "USDC", "USDT", "sUSD")),
    ]
    return ReferenceTables.from_iterables(tokens, contracts, price_feeds, adapters)


def _credit_manager(
    collateral: Sequence[CollateralToken],
    adapters: Sequence[AdapterConfig] = (),
    name: str = "Test CM",
    **kwargs,
) -> CreditManagerConfig:
    params = dict(
        name=name,
        min_debt=1_000 * 10**18,
        max_debt=100_000 * 10**18,
        fee_interest=2500,
        fee_liquidation=150,
        liquidation_premium=400,
        fee_liquidation_expired=100,
        liquidation_premium_expired=200,
        pool_limit=1_000_000 * 10**18,
        collateral_tokens=tuple(collateral),
        adapters=tuple(adapters),
    )
    params.update(kwargs)
    return CreditManagerConfig(**params)


@pytest.fixture
def make_credit_manager() -> Callable[..., CreditManagerConfig]:
    """Factory for credit managers with default fees and debt limits."""
    return _credit_manager


@pytest.fixture
def make_pool() -> Callable[..., PoolConfig]:
    """Factory for small WETH pools on mainnet."""

    def _make(
        credit_managers: Sequence[CreditManagerConfig],
        pool_id: str = "test-weth",
        network: Network = Network.MAINNET,
        underlying: str = "WETH",
        **kwargs,
    ) -> PoolConfig:
        params = dict(
            id=pool_id,
            symbol="dWETHV3",
            name="Test WETH",
            network=network,
            underlying=underlying,
            account_amount=10 * 10**18,
            withdrawal_fee=0,
            total_debt_limit=50_000 * 10**18,
            irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=200, r_slope2=250, r_slope3=6000),
            rates_and_limits={"USDC": QuotaParams(4, 1200, 1, 5_000 * 10**18)},
            credit_managers=tuple(credit_managers),
        )
        params.update(kwargs)
        return PoolConfig(**params)

    return _make


@pytest.fixture
def sample_pool(make_pool) -> PoolConfig:
    """A valid pool with one credit manager."""
    cm = _credit_manager(
        [CollateralToken("USDC", 9000), CollateralToken("3Crv", 0)],
        [
            AdapterConfig("CURVE_3CRV_POOL"),
            AdapterConfig("UNISWAP_V3_ROUTER", allowed=()),
        ],
    )
    return make_pool([cm])


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings writing fixtures into a temporary directory."""
    return Settings(output_dir=tmp_path / "out", _env_file=None)
