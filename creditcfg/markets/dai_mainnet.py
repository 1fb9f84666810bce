"""DAI pool on mainnet with the stablecoin farming credit manager."""

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

units = PoolUnits(decimals=18)

UNI_V2 = AdapterConfig(
    "UNISWAP_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("USDC", "USDT"),
        UniV2Pair("DAI", "USDC"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("FXS", "FRAX"),
        UniV2Pair("WBTC", "WETH"),
    ),
)

UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("SNX", "WETH", 3000),
        UniV3Pool("WBTC", "WETH", 500),
        UniV3Pool("DAI", "WETH", 500),
        UniV3Pool("USDC", "WETH", 500),
        UniV3Pool("LDO", "WETH", 3000),
        UniV3Pool("FXS", "WETH", 10000),
        UniV3Pool("FRAX", "USDT", 500),
        UniV3Pool("DAI", "USDT", 100),
        UniV3Pool("LUSD", "USDC", 500),
        UniV3Pool("FRAX", "USDC", 100),
        UniV3Pool("DAI", "USDC", 100),
        UniV3Pool("sUSD", "FRAX", 500),
        UniV3Pool("DAI", "FRAX", 500),
        UniV3Pool("CVX", "CRV", 10000),
        UniV3Pool("WETH", "CRV", 3000),
        UniV3Pool("WETH", "CVX", 10000),
    ),
)

SUSHISWAP = AdapterConfig(
    "SUSHISWAP_ROUTER",
    allowed=(
        UniV2Pair("WBTC", "WETH"),
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("WETH", "FXS"),
        UniV2Pair("LDO", "WETH"),
        UniV2Pair("CVX", "WETH"),
        UniV2Pair("CRV", "WETH"),
        UniV2Pair("SNX", "WETH"),
    ),
)

FARM_CREDIT_MANAGER = units.credit_manager(
    "Farm DAI",
    min_debt=150_000,
    max_debt=1_000_000,
    pool_limit=20_000_000,
    collateral_tokens=(
        CollateralToken("WETH", 8500),
        CollateralToken("STETH", 8250),
        CollateralToken("WBTC", 8500),
        CollateralToken("USDC", 9200),
        CollateralToken("USDT", 9000),
        CollateralToken("sUSD", 9000),
        CollateralToken("FRAX", 9000),
        CollateralToken("GUSD", 9000),
        CollateralToken("LUSD", 9000),
        CollateralToken("steCRV", 8250),
        CollateralToken("cvxsteCRV", 8250),
        CollateralToken("3Crv", 9000),
        CollateralToken("cvx3Crv", 9000),
        CollateralToken("FRAX3CRV", 9000),
        CollateralToken("LUSD3CRV", 9000),
        CollateralToken("crvPlain3andSUSD", 9000),
        CollateralToken("gusd3CRV", 9000),
        CollateralToken("crvFRAX", 9000),
        CollateralToken("yvDAI", 9000),
        CollateralToken("yvUSDC", 9000),
        CollateralToken("yvWETH", 8250),
        CollateralToken("yvWBTC", 8250),
        CollateralToken("yvCurve_stETH", 8250),
        CollateralToken("yvCurve_FRAX", 9000),
        CollateralToken("CVX", 2500),
        CollateralToken("FXS", 2500),
        CollateralToken("CRV", 2500),
        CollateralToken("LDO", 0),
        CollateralToken("SNX", 2500),
    ),
    adapters=(
        UNI_V3,
        UNI_V2,
        SUSHISWAP,
        AdapterConfig("CURVE_3CRV_POOL"),
        AdapterConfig("CURVE_FRAX_USDC_POOL"),
        AdapterConfig("CURVE_STETH_GATEWAY"),
        AdapterConfig("CURVE_FRAX_POOL"),
        AdapterConfig("CURVE_SUSD_POOL"),
        AdapterConfig("CURVE_LUSD_POOL"),
        AdapterConfig("CURVE_GUSD_POOL"),
        AdapterConfig("CURVE_SUSD_DEPOSIT"),
        AdapterConfig("YEARN_DAI_VAULT"),
        AdapterConfig("YEARN_USDC_VAULT"),
        AdapterConfig("YEARN_WETH_VAULT"),
        AdapterConfig("YEARN_WBTC_VAULT"),
        AdapterConfig("YEARN_CURVE_FRAX_VAULT"),
        AdapterConfig("YEARN_CURVE_STETH_VAULT"),
        AdapterConfig("CONVEX_BOOSTER"),
    ),
)

CONFIG = PoolConfig(
    id="mainnet-dai-v3",
    symbol="dDAIV3",
    name="Farm DAI v3",
    network=Network.MAINNET,
    underlying="DAI",
    account_amount=units(100_000),
    withdrawal_fee=0,
    total_debt_limit=units(50_000_000),
    irm=IRMParams(u1=8000, u2=9000, r_base=0, r_slope1=100, r_slope2=1000, r_slope3=10000),
    rates_and_limits={
        "WETH": units.quota(4, 1200, 1, 20_000_000),
        "WBTC": units.quota(4, 1200, 1, 20_000_000),
        "STETH": units.quota(10, 300, 1, 3_000_000),
        "crvPlain3andSUSD": units.quota(10, 300, 0, 3_000_000),
        "steCRV": units.quota(50, 1000, 0, 3_000_000),
        "yvCurve_stETH": units.quota(50, 1000, 0, 3_000_000),
    },
    credit_managers=(FARM_CREDIT_MANAGER,),
)
