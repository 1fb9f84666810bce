"""WETH pool on mainnet: three trading tiers and a farming credit manager."""

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

# USD amounts converted at 1 WETH = $2000
units = PoolUnits(decimals=18, divider=2000)

TIER1_UNI_V2 = AdapterConfig(
    "UNISWAP_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("USDC", "USDT"),
        UniV2Pair("DAI", "USDC"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("WBTC", "WETH"),
    ),
)

TIER1_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("USDC", "WETH", 500),
        UniV3Pool("WBTC", "WETH", 3000),
        UniV3Pool("DAI", "USDC", 100),
        UniV3Pool("WBTC", "WETH", 500),
        UniV3Pool("USDC", "WETH", 3000),
        UniV3Pool("WETH", "USDT", 3000),
        UniV3Pool("DAI", "USDC", 500),
        UniV3Pool("WBTC", "USDC", 3000),
        UniV3Pool("WETH", "USDT", 500),
        UniV3Pool("USDC", "USDT", 100),
        UniV3Pool("DAI", "WETH", 3000),
        UniV3Pool("USDC", "USDT", 500),
        UniV3Pool("DAI", "WETH", 500),
        UniV3Pool("WBTC", "USDT", 3000),
        UniV3Pool("USDC", "WETH", 10000),
    ),
)

TIER1_SUSHISWAP = AdapterConfig(
    "SUSHISWAP_ROUTER",
    allowed=(
        UniV2Pair("WBTC", "WETH"),
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("DAI", "WETH"),
    ),
)

TIER1_CREDIT_MANAGER = units.credit_manager(
    "Trade WETH Tier 1",
    min_debt=20_000,
    max_debt=1_000_000,
    pool_limit=3_000_000,
    collateral_tokens=(
        CollateralToken("USDC", 9000),
        CollateralToken("WBTC", 9000),
        CollateralToken("DAI", 9000),
        CollateralToken("USDT", 9000),
        CollateralToken("yvUSDC", 8700),
        CollateralToken("yvWBTC", 8700),
        CollateralToken("sDAI", 8700),
        # Farms
        CollateralToken("yvWETH", 9000),
        CollateralToken("STETH", 9000),
        # Compatibility
        CollateralToken("3Crv", 0),
        CollateralToken("crvUSDTWBTCWETH", 0),
        CollateralToken("steCRV", 0),
    ),
    adapters=(
        TIER1_UNI_V2,
        TIER1_UNI_V3,
        TIER1_SUSHISWAP,
        AdapterConfig("CURVE_3CRV_POOL"),
        AdapterConfig("CURVE_3CRYPTO_POOL"),
        AdapterConfig("CURVE_STETH_GATEWAY"),
        AdapterConfig("YEARN_USDC_VAULT"),
        AdapterConfig("YEARN_WBTC_VAULT"),
        AdapterConfig("YEARN_WETH_VAULT"),
        AdapterConfig("MAKER_DSR_VAULT"),
    ),
)

TIER2_UNI_V2 = AdapterConfig(
    "UNISWAP_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("USDC", "USDT"),
        UniV2Pair("DAI", "USDC"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("DAI", "MKR"),
        UniV2Pair("MKR", "WETH"),
        UniV2Pair("LINK", "WETH"),
    ),
)

TIER2_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("USDC", "WETH", 500),
        UniV3Pool("DAI", "USDC", 100),
        UniV3Pool("USDC", "WETH", 3000),
        UniV3Pool("WETH", "USDT", 3000),
        UniV3Pool("DAI", "USDC", 500),
        UniV3Pool("WETH", "USDT", 500),
        UniV3Pool("UNI", "WETH", 3000),
        UniV3Pool("USDC", "USDT", 100),
        UniV3Pool("MKR", "WETH", 3000),
        UniV3Pool("LINK", "WETH", 3000),
        UniV3Pool("MKR", "WETH", 10000),
        UniV3Pool("DAI", "WETH", 3000),
        UniV3Pool("USDC", "USDT", 500),
        UniV3Pool("DAI", "WETH", 500),
        UniV3Pool("LDO", "WETH", 3000),
        UniV3Pool("USDC", "WETH", 10000),
    ),
)

TIER2_SUSHISWAP = AdapterConfig(
    "SUSHISWAP_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("LDO", "WETH"),
        UniV2Pair("LINK", "WETH"),
    ),
)

TIER2_CREDIT_MANAGER = units.credit_manager(
    "Trade WETH Tier 2",
    min_debt=20_000,
    max_debt=500_000,
    pool_limit=3_000_000,
    collateral_tokens=(
        CollateralToken("USDC", 9000),
        CollateralToken("DAI", 9000),
        CollateralToken("USDT", 9000),
        CollateralToken("MKR", 8250),
        CollateralToken("UNI", 8250),
        CollateralToken("LINK", 8250),
        CollateralToken("LDO", 8250),
    ),
    adapters=(TIER2_UNI_V2, TIER2_UNI_V3, TIER2_SUSHISWAP),
)

TIER3_UNI_V2 = AdapterConfig(
    "UNISWAP_V2_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("USDC", "USDT"),
        UniV2Pair("DAI", "USDC"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("FXS", "FRAX"),
        UniV2Pair("SNX", "WETH"),
    ),
)

TIER3_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("USDC", "WETH", 500),
        UniV3Pool("DAI", "USDC", 100),
        UniV3Pool("FRAX", "USDC", 500),
        UniV3Pool("USDC", "WETH", 3000),
        UniV3Pool("WETH", "USDT", 3000),
        UniV3Pool("DAI", "USDC", 500),
        UniV3Pool("WETH", "USDT", 500),
        UniV3Pool("USDC", "USDT", 100),
        UniV3Pool("DAI", "FRAX", 500),
        UniV3Pool("DAI", "WETH", 3000),
        UniV3Pool("USDC", "USDT", 500),
        UniV3Pool("DAI", "WETH", 500),
        UniV3Pool("USDC", "WETH", 10000),
        UniV3Pool("APE", "WETH", 3000),
        UniV3Pool("WETH", "CRV", 3000),
        UniV3Pool("WETH", "CRV", 10000),
        UniV3Pool("WETH", "CVX", 10000),
        UniV3Pool("FXS", "FRAX", 10000),
    ),
)

TIER3_SUSHISWAP = AdapterConfig(
    "SUSHISWAP_ROUTER",
    allowed=(
        UniV2Pair("WETH", "USDT"),
        UniV2Pair("USDC", "WETH"),
        UniV2Pair("DAI", "WETH"),
        UniV2Pair("WETH", "FXS"),
        UniV2Pair("CVX", "WETH"),
        UniV2Pair("CRV", "WETH"),
    ),
)

TIER3_FRAXSWAP = AdapterConfig(
    "FRAXSWAP_ROUTER",
    allowed=(
        UniV2Pair("FRAX", "FXS"),
        UniV2Pair("FRAX", "WETH"),
    ),
)

TIER3_CREDIT_MANAGER = units.credit_manager(
    "Trade WETH Tier 3",
    min_debt=20_000,
    max_debt=200_000,
    pool_limit=3_000_000,
    collateral_tokens=(
        CollateralToken("USDC", 9000),
        CollateralToken("DAI", 9000),
        CollateralToken("USDT", 9000),
        CollateralToken("FRAX", 9000),
        CollateralToken("CRV", 7250),
        CollateralToken("CVX", 7250),
        CollateralToken("FXS", 7250),
        CollateralToken("APE", 7250),
        # Compatibility
        CollateralToken("crvUSD", 0),
    ),
    adapters=(
        TIER3_UNI_V2,
        TIER3_UNI_V3,
        TIER3_SUSHISWAP,
        TIER3_FRAXSWAP,
    ),
)

FARM_UNI_V3 = AdapterConfig(
    "UNISWAP_V3_ROUTER",
    allowed=(
        UniV3Pool("WETH", "CRV", 3000),
        UniV3Pool("WETH", "CRV", 10000),
        UniV3Pool("WETH", "CVX", 10000),
        UniV3Pool("WBTC", "WETH", 3000),
        UniV3Pool("WBTC", "WETH", 500),
    ),
)

FARM_CREDIT_MANAGER = units.credit_manager(
    "Farm WETH",
    min_debt=50_000,
    max_debt=1_000_000,
    pool_limit=5_000_000,
    degen_nft=True,
    collateral_tokens=(
        CollateralToken("WBTC", 9000),
        CollateralToken("USDT", 9000),
        # LSD
        CollateralToken("STETH", 9000),
        CollateralToken("wstETH", 9000),
        CollateralToken("rETH", 9000),
        CollateralToken("weETH", 9000),
        # Yearn
        CollateralToken("yvWETH", 9000),
        CollateralToken("yvCurve_stETH", 8700),
        # Convex
        CollateralToken("cvxsteCRV", 8500),
        # Rewards
        CollateralToken("CRV", 7250),
        CollateralToken("CVX", 7250),
        CollateralToken("LDO", 0),
        # Compatibility
        CollateralToken("crvUSDTWBTCWETH", 0),
        CollateralToken("steCRV", 0),
        CollateralToken("crvUSD", 0),
    ),
    adapters=(
        FARM_UNI_V3,
        AdapterConfig("CURVE_STETH_GATEWAY"),
        AdapterConfig("CURVE_3CRYPTO_POOL"),
        AdapterConfig("LIDO_WSTETH"),
        AdapterConfig("CONVEX_BOOSTER"),
        AdapterConfig("YEARN_WETH_VAULT"),
        AdapterConfig("YEARN_CURVE_STETH_VAULT"),
    ),
)

CONFIG = PoolConfig(
    id="mainnet-weth-v3",
    symbol="dWETHV3",
    name="Trade WETH v3",
    network=Network.MAINNET,
    underlying="WETH",
    account_amount=units(100_000),
    withdrawal_fee=0,
    total_debt_limit=units(100_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=200, r_slope2=250, r_slope3=6000),
    rates_and_limits={
        # Tradeable tokens
        "WBTC": units.quota(4, 1200, 1, 30_000_000),
        "USDC": units.quota(4, 1200, 1, 30_000_000),
        "DAI": units.quota(4, 1200, 1, 30_000_000),
        "FRAX": units.quota(4, 1200, 1, 30_000_000),
        "USDT": units.quota(4, 1200, 1, 30_000_000),
        "MKR": units.quota(80, 2400, 1, 3_000_000),
        "UNI": units.quota(80, 2400, 1, 5_000_000),
        "LINK": units.quota(80, 2400, 1, 5_000_000),
        "LDO": units.quota(80, 2400, 1, 2_500_000),
        "CRV": units.quota(240, 4000, 1, 2_500_000),
        "CVX": units.quota(240, 4000, 1, 2_500_000),
        "FXS": units.quota(240, 4000, 1, 2_000_000),
        "APE": units.quota(240, 4000, 1, 500_000),
        "yvUSDC": units.quota(1, 1500, 1, 30_000_000),
        "yvWBTC": units.quota(1, 1500, 1, 1_000_000),
        "sDAI": units.quota(1, 1500, 1, 30_000_000),
        # Farms
        "STETH": units.quota(5, 350, 0, 30_000_000),
        "wstETH": units.quota(5, 350, 0, 30_000_000),
        "rETH": units.quota(5, 316, 0, 30_000_000),
        "weETH": units.quota(5, 3000, 0, 5_000_000),
        "yvWETH": units.quota(50, 500, 0, 30_000_000),
        "yvCurve_stETH": units.quota(50, 500, 0, 10_000_000),
        "cvxsteCRV": units.quota(100, 700, 0, 15_000_000),
    },
    credit_managers=(
        TIER1_CREDIT_MANAGER,
        TIER2_CREDIT_MANAGER,
        TIER3_CREDIT_MANAGER,
        FARM_CREDIT_MANAGER,
    ),
)
