"""USDC.e pool on Arbitrum."""

from creditcfg.core.constants import Network
from creditcfg.core.models import (
    AdapterConfig,
    CollateralToken,
    IRMParams,
    PoolConfig,
    UniV3Pool,
)
from creditcfg.markets.base import PoolUnits

units = PoolUnits(decimals=6)

TIER1_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "USDC_e", 500),
        UniV3Pool("WETH", "WBTC", 500),
        UniV3Pool("WETH", "ARB", 500),
        UniV3Pool("WETH", "ARB", 3000),
        UniV3Pool("wstETH", "WETH", 100),
        UniV3Pool("ARB", "USDC_e", 500),
        UniV3Pool("WBTC", "WETH", 3000),
    ),
)

TIER1_BALANCER = AdapterConfig("BALANCER_VAULT")

TIER1_CREDIT_MANAGER = units.credit_manager(
    "Trade USDC.e Tier 1 Arbitrum",
    min_debt=1_000,
    max_debt=400_000,
    pool_limit=4_000_000,
    collateral_tokens=(
        CollateralToken("WETH", 9400),
        CollateralToken("WBTC", 9400),
        CollateralToken("ARB", 9000),
        CollateralToken("wstETH", 9400),
        CollateralToken("rETH", 9400),
    ),
    adapters=(TIER1_UNI_V3, TIER1_BALANCER),
)

TIER2_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "USDC_e", 500),
        UniV3Pool("GMX", "WETH", 3000),
    ),
)

TIER2_CREDIT_MANAGER = units.credit_manager(
    "Trade USDC.e Tier 2 Arbitrum",
    min_debt=1_000,
    max_debt=100_000,
    pool_limit=1_000_000,
    collateral_tokens=(
        CollateralToken("WETH", 9400),
        CollateralToken("GMX", 8350),
    ),
    adapters=(TIER2_UNI_V3,),
)

CONFIG = PoolConfig(
    id="arbitrum-usdc-v3",
    symbol="dUSDCV3",
    name="Main USDC.e v3",
    network=Network.ARBITRUM,
    underlying="USDC_e",
    account_amount=units(10_000),
    withdrawal_fee=0,
    total_debt_limit=units(100_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=100, r_slope2=125, r_slope3=10000),
    rates_and_limits={
        "WETH": units.quota(4, 1200, 1, 4_500_000),
        "WBTC": units.quota(4, 1200, 1, 7_000_000),
        "ARB": units.quota(80, 2400, 1, 3_000_000),
        "GMX": units.quota(80, 2400, 1, 500_000),
        "wstETH": units.quota(4, 1500, 1, 7_000_000),
        "rETH": units.quota(4, 1500, 1, 7_000_000),
    },
    credit_managers=(TIER1_CREDIT_MANAGER, TIER2_CREDIT_MANAGER),
)
