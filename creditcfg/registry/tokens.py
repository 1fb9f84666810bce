"""Supported tokens and their addresses per network."""

from types import MappingProxyType
from typing import Mapping

from creditcfg.core.constants import network_addresses
from creditcfg.core.models import TokenData, TokenType


def _token(
    symbol: str,
    decimals: int,
    token_type: TokenType = TokenType.NORMAL_TOKEN,
    *,
    mainnet: str = "",
    arbitrum: str = "",
    optimism: str = "",
) -> TokenData:
    addresses = network_addresses(mainnet, arbitrum, optimism)
    return TokenData(symbol=symbol, decimals=decimals, token_type=token_type, addresses=addresses)


_TOKENS = [
    # Base assets
    _token(
        "WETH", 18, TokenType.WRAPPED_TOKEN,
        mainnet="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        arbitrum="0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
        optimism="0x4200000000000000000000000000000000000006",
    ),
    _token(
        "USDC", 6,
        mainnet="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        arbitrum="0xaf88d065e77c8cC2239327C5EDb3A432268e5831",
        optimism="0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85",
    ),
    _token(
        "USDC_e", 6,
        arbitrum="0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8",
        optimism="0x7F5c764cBc14f9669B88837ca1490cCa17c31607",
    ),
    _token(
        "USDT", 6,
        mainnet="0xdAC17F958D2ee523a2206206994597C13D831ec7",
        arbitrum="0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9",
        optimism="0x94b008aA00579c1307B0EF2c499aD98a8ce58e58",
    ),
    _token(
        "DAI", 18,
        mainnet="0x6B175474E89094C44Da98b954EedeAC495271d0F",
        arbitrum="0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",
        optimism="0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",
    ),
    _token(
        "WBTC", 8,
        mainnet="0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",
        arbitrum="0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f",
        optimism="0x68f180fcCe6836688e9084f035309E29Bf0A2095",
    ),
    _token("FRAX", 18, mainnet="0x853d955aCEf822Db058eb8505911ED77F175b99e"),
    _token("LUSD", 18, mainnet="0x5f98805A4E8be255a32880FDeC7F6728C6568bA0"),
    _token("sUSD", 18, mainnet="0x57Ab1ec28D129707052df4dF418D58a2D46d5f51"),
    _token("GUSD", 2, mainnet="0x056Fd409E1d7A124BD7017459dFEa2F387b6d5Cd"),
    _token("crvUSD", 18, mainnet="0xf939E0A03FB07F59A73314E73794Be0E57ac1b4E"),
    # Governance and reward tokens
    _token("CRV", 18, mainnet="0xD533a949740bb3306d119CC777fa900bA034cd52"),
    _token("CVX", 18, mainnet="0x4e3FBD56CD56c3e72c1403e103b45Db9da5B9D2B"),
    _token("LDO", 18, mainnet="0x5A98FcBEA516Cf06857215779Fd812CA3beF1B32"),
    _token("FXS", 18, mainnet="0x3432B6A60D23Ca0dFCa7761B7ab56459D9C964D0"),
    _token("SNX", 18, mainnet="0xC011a73ee8576Fb46F5E1c5751cA3B9Fe0af2a6F"),
    _token("LINK", 18, mainnet="0x514910771AF9Ca656af840dff83E8264EcF986CA"),
    _token("UNI", 18, mainnet="0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"),
    _token("MKR", 18, mainnet="0x9f8F72aA9304c8B593d555F12eF6589cC3A579A2"),
    _token("APE", 18, mainnet="0x4d224452801ACEd8B2F0aebE155379bb5D594381"),
    _token("ARB", 18, arbitrum="0x912CE59144191C1204E64559FE8253a0e49E6548"),
    _token("GMX", 18, arbitrum="0xfc5A1A6EB076a2C7aD06eD22C90d7E710E35ad0a"),
    _token("OP", 18, optimism="0x4200000000000000000000000000000000000042"),
    # Liquid staking
    _token("STETH", 18, TokenType.STAKED_DERIVATIVE, mainnet="0xae7ab96520DE3A18E5e111B5EaAb095312D7fE84"),
    _token(
        "wstETH", 18, TokenType.STAKED_DERIVATIVE,
        mainnet="0x7f39C581F595B53c5cb19bD0b3f8dA6c935E2Ca0",
        arbitrum="0x5979D7b546E38E414F7E9822514be443A4800529",
        optimism="0x1F32b1c2345538c0c6f582fCB022739c4A194Ebb",
    ),
    _token(
        "rETH", 18, TokenType.STAKED_DERIVATIVE,
        mainnet="0xae78736Cd615f374D3085123A210448E74Fc6393",
        arbitrum="0xEC70Dcb4A1EFa46b8F2D97C310C9c4790ba5ffA8",
        optimism="0x9Bcef72be871e61ED4fBbc7630889beE758eb81D",
    ),
    _token("weETH", 18, TokenType.STAKED_DERIVATIVE, mainnet="0xCd5fE23C85820F7B72D0926FC9b05b43E359b7ee"),
    _token("sDAI", 18, TokenType.ERC4626_VAULT, mainnet="0x83F20F44975D03b1b09e64809B757c47f942BEeA"),
    # Curve LP tokens
    _token("3Crv", 18, TokenType.CURVE_LP_TOKEN, mainnet="0x6c3F90f043a72FA612cbac8115EE7e52BDe6E490"),
    _token("steCRV", 18, TokenType.CURVE_LP_TOKEN, mainnet="0x06325440D014e39736583c165C2963BA99fAf14E"),
    _token("crvFRAX", 18, TokenType.CURVE_LP_TOKEN, mainnet="0x3175Df0976dFA876431C2E9eE6Bc45b65d3473CC"),
    _token("FRAX3CRV", 18, TokenType.CURVE_LP_TOKEN, mainnet="0xd632f22692FaC7611d2AA1C0D552930D43CAEd3B"),
    _token("LUSD3CRV", 18, TokenType.CURVE_LP_TOKEN, mainnet="0xEd279fDD11cA84bEef15AF5D39BB4d4bEE23F0cA"),
    _token("crvPlain3andSUSD", 18, TokenType.CURVE_LP_TOKEN, mainnet="0xC25a3A3b969415c80451098fa907EC722572917F"),
    _token("gusd3CRV", 18, TokenType.CURVE_LP_TOKEN, mainnet="0xD2967f45c4f384DEEa880F807Be904762a3DeA07"),
    _token("crvUSDTWBTCWETH", 18, TokenType.CURVE_LP_TOKEN, mainnet="0xf5f5B97624542D72A9E06f04804Bf81baA15e2B4"),
    # Convex
    _token("cvx3Crv", 18, TokenType.CONVEX_LP_TOKEN, mainnet="0x30D9410ED1D5DA1F6C8391af5338C93ab8d4035C"),
    _token("cvxsteCRV", 18, TokenType.CONVEX_LP_TOKEN, mainnet="0x9518c9063eB0262D791f38d8d6Eb0aca33c63ed0"),
    # Yearn
    _token("yvDAI", 18, TokenType.YEARN_VAULT, mainnet="0xdA816459F1AB5631232FE5e97a05BBBb94970c95"),
    _token("yvUSDC", 6, TokenType.YEARN_VAULT, mainnet="0xa354F35829Ae975e850e23e9615b11Da1B3dC4DE"),
    _token("yvWETH", 18, TokenType.YEARN_VAULT, mainnet="0xa258C4606Ca8206D8aA700cE2143D7db854D168c"),
    _token("yvWBTC", 8, TokenType.YEARN_VAULT, mainnet="0xA696a63cc78DfFa1a63E9E50587C197387FF6C7E"),
    _token("yvCurve_stETH", 18, TokenType.YEARN_VAULT, mainnet="0xdCD90C7f6324cfa40d7169ef80b12031770B4325"),
    _token("yvCurve_FRAX", 18, TokenType.YEARN_VAULT, mainnet="0xB4AdA607B9d6b2c9Ee07A275e9616B84AC560139"),
]

SUPPORTED_TOKENS: Mapping[str, TokenData] = MappingProxyType({t.symbol: t for t in _TOKENS})
