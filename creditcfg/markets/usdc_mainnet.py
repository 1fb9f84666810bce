"""USDC pool on mainnet."""

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

units = PoolUnits(decimals=6)

UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("USDC", "WETH", 500),
        UniV3Pool("WBTC", "WETH", 3000),
        UniV3Pool("DAI", "USDC", 100),
        UniV3Pool("WBTC", "WETH", 500),
        UniV3Pool("USDC", "WETH", 3000),
        UniV3Pool("WETH", "USDT", 500),
        UniV3Pool("USDC", "USDT", 100),
        UniV3Pool("WBTC", "USDC", 3000),
    ),
)

UNI_V2 = AdapterConfig(
    "UNISWAP_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("USDC", "USDT"),
        UniV2Pair("DAI", "USDC"),
        UniV2Pair("WBTC", "WETH"),
    ),
)

TRADE_CREDIT_MANAGER = units.credit_manager(
    "Trade USDC Tier 1",
    min_debt=20_000,
    max_debt=1_000_000,
    pool_limit=10_000_000,
    collateral_tokens=(
        CollateralToken("WETH", 9000),
        CollateralToken("WBTC", 9000),
        CollateralToken("DAI", 9400),
        CollateralToken("USDT", 9400),
        CollateralToken("STETH", 8800),
        CollateralToken("yvWETH", 8700),
        CollateralToken("yvUSDC", 9000),
        CollateralToken("sDAI", 9000),
        # Compatibility
        CollateralToken("3Crv", 0),
        CollateralToken("steCRV", 0),
    ),
    adapters=(
        UNI_V3,
        UNI_V2,
        AdapterConfig("CURVE_3CRV_POOL"),
        AdapterConfig("CURVE_STETH_GATEWAY"),
        AdapterConfig("YEARN_WETH_VAULT"),
        AdapterConfig("YEARN_USDC_VAULT"),
        AdapterConfig("MAKER_DSR_VAULT"),
    ),
)

STABLE_CREDIT_MANAGER = units.credit_manager(
    "Farm USDC Stables",
    min_debt=50_000,
    max_debt=1_000_000,
    pool_limit=20_000_000,
    collateral_tokens=(
        CollateralToken("DAI", 9600),
        CollateralToken("USDT", 9600),
        CollateralToken("FRAX", 9300),
        CollateralToken("LUSD", 9000),
        CollateralToken("3Crv", 9200),
        CollateralToken("crvFRAX", 9200),
        CollateralToken("FRAX3CRV", 9000),
        CollateralToken("LUSD3CRV", 9000),
        CollateralToken("cvx3Crv", 9000),
        CollateralToken("yvDAI", 9200),
        CollateralToken("yvCurve_FRAX", 9000),
        CollateralToken("CRV", 0),
        CollateralToken("CVX", 0),
    ),
    adapters=(
        AdapterConfig("CURVE_3CRV_POOL"),
        AdapterConfig("CURVE_FRAX_USDC_POOL"),
        AdapterConfig("CURVE_FRAX_POOL"),
        AdapterConfig("CURVE_LUSD_POOL"),
        AdapterConfig("CONVEX_BOOSTER"),
        AdapterConfig("YEARN_DAI_VAULT"),
        AdapterConfig("YEARN_CURVE_FRAX_VAULT"),
    ),
)

CONFIG = PoolConfig(
    id="mainnet-usdc-v3",
    symbol="dUSDCV3",
    name="Trade USDC v3",
    network=Network.MAINNET,
    underlying="USDC",
    account_amount=units(100_000),
    withdrawal_fee=0,
    total_debt_limit=units(100_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=100, r_slope2=125, r_slope3=10000),
    rates_and_limits={
        "WETH": units.quota(4, 1200, 1, 30_000_000),
        "WBTC": units.quota(4, 1200, 1, 30_000_000),
        "DAI": units.quota(4, 1200, 1, 50_000_000),
        "USDT": units.quota(4, 1200, 1, 50_000_000),
        "STETH": units.quota(4, 1200, 1, 20_000_000),
        "yvWETH": units.quota(50, 500, 0, 10_000_000),
        "yvUSDC": units.quota(1, 1500, 0, 10_000_000),
        "sDAI": units.quota(1, 1500, 0, 20_000_000),
        "FRAX": units.quota(4, 1200, 1, 10_000_000),
        "LUSD": units.quota(4, 1200, 1, 5_000_000),
        "crvFRAX": units.quota(100, 700, 0, 10_000_000),
        "FRAX3CRV": units.quota(100, 700, 0, 5_000_000),
        "LUSD3CRV": units.quota(100, 700, 0, 5_000_000),
        "cvx3Crv": units.quota(100, 700, 0, 10_000_000),
        "yvDAI": units.quota(1, 1500, 0, 10_000_000),
        "yvCurve_FRAX": units.quota(100, 700, 0, 5_000_000),
    },
    credit_managers=(TRADE_CREDIT_MANAGER, STABLE_CREDIT_MANAGER),
)
