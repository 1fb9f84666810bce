"""External contracts adapters can be attached to."""

from types import MappingProxyType
from typing import Mapping

from creditcfg.core.constants import network_addresses
from creditcfg.core.models import ContractData

UNISWAP_V3_ROUTER_ADDRESS = "0xE592427A0AEce92De3Edee1F18E0157C05861564"
BALANCER_VAULT_ADDRESS = "0xBA12222222228d8Ba445958a75a0704d566BF2C8"


def _contract(
    name: str,
    label: str,
    *,
    mainnet: str = "",
    arbitrum: str = "",
    optimism: str = "",
) -> ContractData:
    addresses = network_addresses(mainnet, arbitrum, optimism)
    return ContractData(name=name, label=label, addresses=addresses)


_CONTRACTS = [
    # Swappers
    _contract("UNISWAP_V2_ROUTER", "Uniswap V2", mainnet="0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D"),
    _contract(
        "UNISWAP_V3_ROUTER", "Uniswap V3",
        mainnet=UNISWAP_V3_ROUTER_ADDRESS,
        arbitrum=UNISWAP_V3_ROUTER_ADDRESS,
        optimism=UNISWAP_V3_ROUTER_ADDRESS,
    ),
    _contract(
        "SUSHISWAP_ROUTER", "Sushiswap",
        mainnet="0xd9e1cE17f2641f24aE83637ab66a2cca9C378B9F",
        arbitrum="0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
    ),
    _contract("FRAXSWAP_ROUTER", "Fraxswap", mainnet="0xC14d550632db8592D1243Edc8B95b0Ad06703867"),
    _contract("CAMELOT_V3_ROUTER", "Camelot V3", arbitrum="0x1F721E2E82F6676FCE4eA07A5958cF098D339e18"),
    _contract("VELODROME_V2_ROUTER", "Velodrome V2", optimism="0xa062aE8A9c5e11aaA026fc2670B0D65cCc8B2858"),
    _contract(
        "BALANCER_VAULT", "Balancer Vault",
        mainnet=BALANCER_VAULT_ADDRESS,
        arbitrum=BALANCER_VAULT_ADDRESS,
        optimism=BALANCER_VAULT_ADDRESS,
    ),
    # Curve
    _contract("CURVE_3CRV_POOL", "Curve 3Pool", mainnet="0xbEbc44782C7dB0a1A60Cb6fe97d0b483032FF1C7"),
    _contract("CURVE_FRAX_USDC_POOL", "Curve crvFRAX", mainnet="0xDcEF968d416a41Cdac0ED8702fAC8128A64241A2"),
    _contract("CURVE_FRAX_POOL", "Curve FRAX3CRV", mainnet="0xd632f22692FaC7611d2AA1C0D552930D43CAEd3B"),
    _contract("CURVE_LUSD_POOL", "Curve LUSD3CRV", mainnet="0xEd279fDD11cA84bEef15AF5D39BB4d4bEE23F0cA"),
    _contract("CURVE_SUSD_POOL", "Curve SUSD", mainnet="0xA5407eAE9Ba41422680e2e00537571bcC53efBfD"),
    _contract("CURVE_SUSD_DEPOSIT", "Curve SUSD Deposit", mainnet="0xFCBa3E75865d2d561BE8D220616520c171F12851"),
    _contract("CURVE_GUSD_POOL", "Curve GUSD", mainnet="0x4f062658EaAF2C1ccf8C8e36D6824CDf41167956"),
    _contract("CURVE_STETH_GATEWAY", "Curve stETH", mainnet="0xDC24316b9AE028F1497c275EB9192a3Ea0f67022"),
    _contract("CURVE_3CRYPTO_POOL", "Curve TricryptoUSDT", mainnet="0xf5f5B97624542D72A9E06f04804Bf81baA15e2B4"),
    _contract("CURVE_TRI_CRV_POOL", "Curve TriCRV", mainnet="0x4eBdF703948ddCEA3B11f675B4D1Fba9d2414A14"),
    # Yearn
    _contract("YEARN_DAI_VAULT", "Yearn DAI", mainnet="0xdA816459F1AB5631232FE5e97a05BBBb94970c95"),
    _contract("YEARN_USDC_VAULT", "Yearn USDC", mainnet="0xa354F35829Ae975e850e23e9615b11Da1B3dC4DE"),
    _contract("YEARN_WETH_VAULT", "Yearn WETH", mainnet="0xa258C4606Ca8206D8aA700cE2143D7db854D168c"),
    _contract("YEARN_WBTC_VAULT", "Yearn WBTC", mainnet="0xA696a63cc78DfFa1a63E9E50587C197387FF6C7E"),
    _contract("YEARN_CURVE_STETH_VAULT", "Yearn Curve stETH", mainnet="0xdCD90C7f6324cfa40d7169ef80b12031770B4325"),
    _contract("YEARN_CURVE_FRAX_VAULT", "Yearn Curve FRAX", mainnet="0xB4AdA607B9d6b2c9Ee07A275e9616B84AC560139"),
    # Convex
    _contract("CONVEX_BOOSTER", "Convex Booster", mainnet="0xF403C135812408BFbE8713b5A23a04b3D48AAE31"),
    # Lido / Maker
    _contract("LIDO_WSTETH", "Lido wstETH", mainnet="0x7f39C581F595B53c5cb19bD0b3f8dA6c935E2Ca0"),
    _contract("MAKER_DSR_VAULT", "Maker DSR (sDAI)", mainnet="0x83F20F44975D03b1b09e64809B757c47f942BEeA"),
]

SUPPORTED_CONTRACTS: Mapping[str, ContractData] = MappingProxyType({c.name: c for c in _CONTRACTS})
