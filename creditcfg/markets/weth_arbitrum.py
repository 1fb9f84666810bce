"""WETH pool on Arbitrum."""

from creditcfg.core.constants import Network
from creditcfg.core.models import AdapterConfig, CollateralToken, IRMParams, PoolConfig, UniV3Pool
from creditcfg.markets.base import PoolUnits

units = PoolUnits(decimals=18, divider=2000)

UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "USDC", 500),
        UniV3Pool("WETH", "USDC_e", 500),
        UniV3Pool("WETH", "WBTC", 500),
        UniV3Pool("WETH", "ARB", 500),
        UniV3Pool("wstETH", "WETH", 100),
        UniV3Pool("WETH", "USDT", 500),
    ),
)

CAMELOT_V3 = AdapterConfig(
    "CAMELOT_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "USDC", 0),
        UniV3Pool("GMX", "WETH", 0),
    ),
)

TRADE_CREDIT_MANAGER = units.credit_manager(
    "Trade WETH Arbitrum",
    min_debt=1_000,
    max_debt=400_000,
    pool_limit=4_000_000,
    collateral_tokens=(
        CollateralToken("USDC", 9400),
        CollateralToken("USDC_e", 9400),
        CollateralToken("USDT", 9400),
        CollateralToken("DAI", 9400),
        CollateralToken("WBTC", 9400),
        CollateralToken("ARB", 9000),
        CollateralToken("GMX", 8350),
        CollateralToken("wstETH", 9600),
        CollateralToken("rETH", 9600),
    ),
    adapters=(UNI_V3, CAMELOT_V3, AdapterConfig("SUSHISWAP_ROUTER")),
)

CONFIG = PoolConfig(
    id="arbitrum-weth-v3",
    symbol="dWETHV3",
    name="Main WETH v3",
    network=Network.ARBITRUM,
    underlying="WETH",
    account_amount=units(20_000),
    withdrawal_fee=0,
    total_debt_limit=units(100_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=200, r_slope2=250, r_slope3=6000),
    rates_and_limits={
        "USDC": units.quota(4, 1200, 1, 4_000_000),
        "USDC_e": units.quota(4, 1200, 1, 4_000_000),
        "USDT": units.quota(4, 1200, 1, 2_000_000),
        "DAI": units.quota(4, 1200, 1, 2_000_000),
        "WBTC": units.quota(4, 1200, 1, 4_000_000),
        "ARB": units.quota(80, 2400, 1, 3_000_000),
        "GMX": units.quota(80, 2400, 1, 500_000),
        "wstETH": units.quota(4, 1500, 0, 7_000_000),
        "rETH": units.quota(4, 1500, 0, 7_000_000),
    },
    credit_managers=(TRADE_CREDIT_MANAGER,),
)
