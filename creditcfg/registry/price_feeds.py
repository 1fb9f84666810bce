"""USD price feed wiring for every supported token."""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from creditcfg.core.constants import network_addresses as on
from creditcfg.core.models import (
    BoundedFeed,
    ChainlinkFeed,
    CompositeFeed,
    CurveLPFeed,
    LikeCurveLPFeed,
    PriceFeed,
    WstETHFeed,
    YearnFeed,
    ZeroFeed,
)

ETH_USD_MAINNET = "0x5f4eC3Df9cbd43714FE2740f5E3616155c5b8419"
BTC_USD_MAINNET = "0xF4030086522a5bEEa4988F8cA5B36dbC97BeE88c"

_FEEDS = [
    ChainlinkFeed(
        "WETH",
        on(
            mainnet=ETH_USD_MAINNET,
            arbitrum="0x639Fe6ab55C921f74e7fac1ee960C0B6293ba612",
            optimism="0x13e3Ee699D1909E989722E753853AE30b17e08c5",
        ),
    ),
    ChainlinkFeed(
        "USDC",
        on(
            mainnet="0x8fFfFfd4AfB6115b954Bd326cbe7B4BA576818f6",
            arbitrum="0x50834F3163758fcC1Df9973b6e91f0F0F0434aD3",
            optimism="0x16a9FA2FDa030272Ce99B29CF780dFA30361E0f3",
        ),
    ),
    ChainlinkFeed(
        "USDC_e",
        on(
            arbitrum="0x50834F3163758fcC1Df9973b6e91f0F0F0434aD3",
            optimism="0x16a9FA2FDa030272Ce99B29CF780dFA30361E0f3",
        ),
    ),
    ChainlinkFeed(
        "USDT",
        on(
            mainnet="0x3E7d1eAB13ad0104d2750B8863b489D65364e32D",
            arbitrum="0x3f3f5dF88dC9F13eac63DF89EC16ef6e7E25DdE7",
            optimism="0xECef79E109e997bCA29c1c0897ec9d7b03647F5E",
        ),
    ),
    ChainlinkFeed(
        "DAI",
        on(
            mainnet="0xAed0c38402a5d19df6E4c03F4E2DceD6e29c1ee9",
            arbitrum="0xc5C8E77B397E531B8EC06BFb0048328B30E9eCfB",
            optimism="0x8dBa75e83DA73cc766A7e5a0ee71F656BAb470d6",
        ),
    ),
    ChainlinkFeed(
        "WBTC",
        on(
            mainnet=BTC_USD_MAINNET,
            arbitrum="0x6ce185860a4963106506C203335A2910413708e9",
            optimism="0x718A5788b89454aAE3A028AE9c111A29Be6c2a6F",
        ),
    ),
    ChainlinkFeed("FRAX", on(mainnet="0xB9E1E3A9feFf48998E45Fa90847ed4D467E8BcfD")),
    ChainlinkFeed("LUSD", on(mainnet="0x3D7aE7E594f2f2091Ad8798313450130d0Aba3a0")),
    ChainlinkFeed("sUSD", on(mainnet="0xad35Bd71b9aFE6e4bDc266B345c198eaDEf9Ad94")),
    ChainlinkFeed("CRV", on(mainnet="0xCd627aA160A6fA45Eb793D19Ef54f5062F20f33f")),
    ChainlinkFeed("CVX", on(mainnet="0xd962fC30A72A84cE50161031391756Bf2876Af5D")),
    ChainlinkFeed("FXS", on(mainnet="0x6Ebc52C8C1089be9eB3945C4350B68B8E4C2233f")),
    ChainlinkFeed("SNX", on(mainnet="0xDC3EA94CD0AC27d9A86C180091e7f78C683d3699")),
    ChainlinkFeed("LINK", on(mainnet="0x2c1d072e956AFFC0D435Cb7AC38EF18d24d9127c")),
    ChainlinkFeed("UNI", on(mainnet="0x553303d460EE0afB37EdFf9bE42922D8FF63220e")),
    ChainlinkFeed("MKR", on(mainnet="0xec1D1B3b0443256cc3860e24a46F108e699484Aa")),
    ChainlinkFeed("APE", on(mainnet="0xD10aBbC76679a20055E167BB80A24ac851b37056")),
    ChainlinkFeed("ARB", on(arbitrum="0xb2A824043730FE05F3DA2efaFa1CBbe83fa548D6")),
    ChainlinkFeed("GMX", on(arbitrum="0xDB98056FecFff59D032aB628337A4887110df3dB")),
    ChainlinkFeed("OP", on(optimism="0x0D276FC14719f9292D5C1eA2198673d1f4269246")),
    ChainlinkFeed("STETH", on(mainnet="0xCfE54B5cD566aB89272946F602D76Ea879CAb4a8")),
    # GUSD has no dedicated feed; it is capped at $1 on top of the USDC feed
    BoundedFeed(
        "GUSD",
        underlying=on(mainnet="0x8fFfFfd4AfB6115b954Bd326cbe7B4BA576818f6"),
        upper_bound=Decimal("1.0"),
    ),
    CompositeFeed(
        "rETH",
        target_to_base=on(
            mainnet="0x536218f9E9Eb48863970252233c8F271f554C2d0",
            arbitrum="0xD6aB2298946840262FcC278fF31516D39fF611eF",
            optimism="0x22F3727be377781d1579B7C9222382b21c9d1a8f",
        ),
        base_to_usd=on(
            mainnet=ETH_USD_MAINNET,
            arbitrum="0x639Fe6ab55C921f74e7fac1ee960C0B6293ba612",
            optimism="0x13e3Ee699D1909E989722E753853AE30b17e08c5",
        ),
    ),
    CompositeFeed(
        "weETH",
        target_to_base=on(mainnet="0x5c9C449BbC9a6075A2c061dF312a35fd1E05fF22"),
        base_to_usd=on(mainnet=ETH_USD_MAINNET),
    ),
    CompositeFeed(
        "crvUSD",
        target_to_base=on(mainnet="0xEEf0C605546958c1f899b6fB336C20671f9cD49F"),
        base_to_usd=on(mainnet="0x8fFfFfd4AfB6115b954Bd326cbe7B4BA576818f6"),
    ),
    WstETHFeed("wstETH"),
    YearnFeed("sDAI"),
    # Reward tokens without a reliable oracle
    ZeroFeed("LDO"),
    # Curve LP tokens
    CurveLPFeed("3Crv", assets=("DAI", "USDC", "USDT"), pool="CURVE_3CRV_POOL"),
    CurveLPFeed("steCRV", assets=("STETH", "WETH"), pool="CURVE_STETH_GATEWAY"),
    CurveLPFeed("crvFRAX", assets=("FRAX", "USDC"), pool="CURVE_FRAX_USDC_POOL"),
    CurveLPFeed("FRAX3CRV", assets=("FRAX", "DAI", "USDC", "USDT"), pool="CURVE_FRAX_POOL"),
    CurveLPFeed("LUSD3CRV", assets=("LUSD", "DAI", "USDC", "USDT"), pool="CURVE_LUSD_POOL"),
    CurveLPFeed("crvPlain3andSUSD", assets=("DAI", "USDC", "USDT", "sUSD"), pool="CURVE_SUSD_POOL"),
    CurveLPFeed("gusd3CRV", assets=("GUSD", "DAI", "USDC", "USDT"), pool="CURVE_GUSD_POOL"),
    ZeroFeed("crvUSDTWBTCWETH"),
    # Convex wrappers are priced as their curve LP
    LikeCurveLPFeed("cvx3Crv", curve_symbol="3Crv"),
    LikeCurveLPFeed("cvxsteCRV", curve_symbol="steCRV"),
    # Yearn vaults
    YearnFeed("yvDAI"),
    YearnFeed("yvUSDC"),
    YearnFeed("yvWETH"),
    YearnFeed("yvWBTC"),
    YearnFeed("yvCurve_stETH", curve_lp=True),
    YearnFeed("yvCurve_FRAX", curve_lp=True),
]

PRICE_FEEDS: Mapping[str, PriceFeed] = MappingProxyType({f.token: f for f in _FEEDS})
