"""Adapter parameters for every contract a credit manager can call."""

from types import MappingProxyType
from typing import Mapping

from creditcfg.core.models import (
    Adapter,
    AdapterInterface,
    CurveAdapter,
    CurveStETHAdapter,
    CurveWrapperAdapter,
    SimpleAdapter,
)

_ADAPTERS = [
    # Swappers
    SimpleAdapter("UNISWAP_V2_ROUTER", AdapterInterface.UNISWAP_V2_ROUTER),
    SimpleAdapter("UNISWAP_V3_ROUTER", AdapterInterface.UNISWAP_V3_ROUTER),
    SimpleAdapter("SUSHISWAP_ROUTER", AdapterInterface.UNISWAP_V2_ROUTER),
    SimpleAdapter("FRAXSWAP_ROUTER", AdapterInterface.UNISWAP_V2_ROUTER),
    SimpleAdapter("CAMELOT_V3_ROUTER", AdapterInterface.UNISWAP_V3_ROUTER),
    SimpleAdapter("VELODROME_V2_ROUTER", AdapterInterface.UNISWAP_V2_ROUTER),
    SimpleAdapter("BALANCER_VAULT", AdapterInterface.BALANCER_VAULT),
    # Curve
    CurveAdapter(
        "CURVE_3CRV_POOL",
        AdapterInterface.CURVE_V1_3ASSETS,
        lp_token="3Crv",
        tokens=("DAI", "USDC", "USDT"),
    ),
    CurveAdapter(
        "CURVE_FRAX_USDC_POOL",
        AdapterInterface.CURVE_V1_2ASSETS,
        lp_token="crvFRAX",
        tokens=("FRAX", "USDC"),
    ),
    CurveAdapter(
        "CURVE_FRAX_POOL",
        AdapterInterface.CURVE_V1_2ASSETS,
        lp_token="FRAX3CRV",
        tokens=("FRAX", "3Crv"),
    ),
    CurveAdapter(
        "CURVE_LUSD_POOL",
        AdapterInterface.CURVE_V1_2ASSETS,
        lp_token="LUSD3CRV",
        tokens=("LUSD", "3Crv"),
    ),
    CurveAdapter(
        "CURVE_GUSD_POOL",
        AdapterInterface.CURVE_V1_2ASSETS,
        lp_token="gusd3CRV",
        tokens=("GUSD", "3Crv"),
    ),
    CurveAdapter(
        "CURVE_SUSD_POOL",
        AdapterInterface.CURVE_V1_4ASSETS,
        lp_token="crvPlain3andSUSD",
        tokens=("DAI", "USDC", "USDT", "sUSD"),
    ),
    CurveAdapter(
        "CURVE_3CRYPTO_POOL",
        AdapterInterface.CURVE_V1_3ASSETS,
        lp_token="crvUSDTWBTCWETH",
        tokens=("USDT", "WBTC", "WETH"),
    ),
    CurveWrapperAdapter(
        "CURVE_SUSD_DEPOSIT",
        lp_token="crvPlain3andSUSD",
        tokens=("DAI", "USDC", "USDT", "sUSD"),
    ),
    CurveStETHAdapter("CURVE_STETH_GATEWAY", lp_token="steCRV", tokens=("WETH", "STETH")),
    # Yearn
    SimpleAdapter("YEARN_DAI_VAULT", AdapterInterface.YEARN_V2),
    SimpleAdapter("YEARN_USDC_VAULT", AdapterInterface.YEARN_V2),
    SimpleAdapter("YEARN_WETH_VAULT", AdapterInterface.YEARN_V2),
    SimpleAdapter("YEARN_WBTC_VAULT", AdapterInterface.YEARN_V2),
    SimpleAdapter("YEARN_CURVE_STETH_VAULT", AdapterInterface.YEARN_V2),
    SimpleAdapter("YEARN_CURVE_FRAX_VAULT", AdapterInterface.YEARN_V2),
    # Convex
    SimpleAdapter("CONVEX_BOOSTER", AdapterInterface.CONVEX_V1_BOOSTER),
    # Lido / Maker
    SimpleAdapter("LIDO_WSTETH", AdapterInterface.LIDO_WSTETH_V1),
    SimpleAdapter("MAKER_DSR_VAULT", AdapterInterface.ERC4626_VAULT),
]

ADAPTERS: Mapping[str, Adapter] = MappingProxyType({a.contract: a for a in _ADAPTERS})
