"""WETH pool on Optimism."""

from creditcfg.core.constants import Network
from creditcfg.core.models import (
    AdapterConfig,
    CollateralToken,
    IRMParams,
    PoolConfig,
    UniV2Pair,
    UniV3Pool,
)
from creditcfg.markets.base import PoolUnits

units = PoolUnits(decimals=18, divider=2000)

UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "USDC", 500),
        UniV3Pool("WETH", "USDC_e", 500),
        UniV3Pool("WETH", "OP", 3000),
        UniV3Pool("WETH", "WBTC", 500),
        UniV3Pool("wstETH", "WETH", 100),
    ),
)

VELODROME_V2 = AdapterConfig(
    "VELODROME_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "OP"),
        UniV2Pair("USDC_e", "WETH"),
        UniV2Pair("wstETH", "WETH"),
    ),
)

TRADE_CREDIT_MANAGER = units.credit_manager(
    "Trade WETH Optimism",
    min_debt=1_000,
    max_debt=150_000,
    pool_limit=2_000_000,
    collateral_tokens=(
        CollateralToken("USDC", 9400),
        CollateralToken("USDC_e", 9400),
        CollateralToken("USDT", 9400),
        CollateralToken("WBTC", 9400),
        CollateralToken("OP", 9000),
        CollateralToken("wstETH", 9600),
        CollateralToken("rETH", 9600),
    ),
    adapters=(UNI_V3, VELODROME_V2, AdapterConfig("BALANCER_VAULT")),
)

CONFIG = PoolConfig(
    id="optimism-weth-v3",
    symbol="dWETHV3",
    name="Main WETH v3",
    network=Network.OPTIMISM,
    underlying="WETH",
    account_amount=units(20_000),
    withdrawal_fee=0,
    total_debt_limit=units(50_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=200, r_slope2=250, r_slope3=6000),
    rates_and_limits={
        "USDC": units.quota(4, 1200, 1, 3_000_000),
        "USDC_e": units.quota(4, 1200, 1, 3_000_000),
        "USDT": units.quota(4, 1200, 1, 1_000_000),
        "WBTC": units.quota(4, 1200, 1, 2_000_000),
        "OP": units.quota(80, 2400, 1, 2_000_000),
        "wstETH": units.quota(4, 1500, 0, 5_000_000),
        "rETH": units.quota(4, 1500, 0, 5_000_000),
    },
    credit_managers=(TRADE_CREDIT_MANAGER,),
)
