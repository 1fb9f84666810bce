"""Adapter descriptors, one dataclass per adapter shape."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from creditcfg.core.constants import NO_CONTRACT

CURVE_3CRV_POOL = "CURVE_3CRV_POOL"


class AdapterInterface(Enum):
    """Adapter types, named as in the protocol's AdapterType enum."""

    UNISWAP_V2_ROUTER = 1
    UNISWAP_V3_ROUTER = 2
    CURVE_V1_EXCHANGE_ONLY = 3
    YEARN_V2 = 4
    CURVE_V1_2ASSETS = 5
    CURVE_V1_3ASSETS = 6
    CURVE_V1_4ASSETS = 7
    CURVE_V1_STECRV_POOL = 8
    CURVE_V1_WRAPPER = 9
    CONVEX_V1_BASE_REWARD_POOL = 10
    CONVEX_V1_BOOSTER = 11
    CONVEX_V1_CLAIM_ZAP = 12
    LIDO_V1 = 13
    UNIVERSAL = 14
    LIDO_WSTETH_V1 = 15
    BALANCER_VAULT = 16
    AAVE_V2_LENDING_POOL = 17
    ERC4626_VAULT = 18
    MAKER_DSR = 19


# Adapter types rendered as plain ``SimpleAdapter`` entries
SIMPLE_ADAPTER_TYPES = frozenset(
    {
        AdapterInterface.UNISWAP_V2_ROUTER,
        AdapterInterface.UNISWAP_V3_ROUTER,
        AdapterInterface.YEARN_V2,
        AdapterInterface.CONVEX_V1_BOOSTER,
        AdapterInterface.CONVEX_V1_CLAIM_ZAP,
        AdapterInterface.LIDO_V1,
        AdapterInterface.UNIVERSAL,
        AdapterInterface.LIDO_WSTETH_V1,
        AdapterInterface.BALANCER_VAULT,
        AdapterInterface.ERC4626_VAULT,
        AdapterInterface.MAKER_DSR,
    }
)

CURVE_POOL_TYPES = frozenset(
    {
        AdapterInterface.CURVE_V1_2ASSETS,
        AdapterInterface.CURVE_V1_3ASSETS,
        AdapterInterface.CURVE_V1_4ASSETS,
    }
)


@dataclass(frozen=True)
class SimpleAdapter:
    """Router, vault wrapper, booster or gateway with no extra fields."""

    contract: str
    adapter_type: AdapterInterface

    def __post_init__(self):
        if self.adapter_type not in SIMPLE_ADAPTER_TYPES:
            raise ValueError(f"{self.adapter_type.name} is not a simple adapter type")

    @property
    def tokens_referenced(self) -> Tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class CurveAdapter:
    """Curve pool wrapper with 2, 3 or 4 assets."""

    contract: str
    adapter_type: AdapterInterface
    lp_token: str
    tokens: Tuple[str, ...]

    def __post_init__(self):
        if self.adapter_type not in CURVE_POOL_TYPES:
            raise ValueError(f"{self.adapter_type.name} is not a curve pool type")

    @property
    def base_pool(self) -> str:
        """Metapools built on 3Crv route through the 3Crv pool."""
        return CURVE_3CRV_POOL if "3Crv" in self.tokens else NO_CONTRACT

    @property
    def tokens_referenced(self) -> Tuple[str, ...]:
        return (self.lp_token,)


@dataclass(frozen=True)
class CurveStETHAdapter:
    """Gateway in front of the ETH/stETH curve pool."""

    contract: str
    lp_token: str
    tokens: Tuple[str, ...]

    @property
    def adapter_type(self) -> AdapterInterface:
        return AdapterInterface.CURVE_V1_STECRV_POOL

    @property
    def tokens_referenced(self) -> Tuple[str, ...]:
        return (self.lp_token,)


@dataclass(frozen=True)
class CurveWrapperAdapter:
    """Curve deposit zap wrapping an underlying pool."""

    contract: str
    lp_token: str
    tokens: Tuple[str, ...]

    @property
    def adapter_type(self) -> AdapterInterface:
        return AdapterInterface.CURVE_V1_WRAPPER

    @property
    def n_coins(self) -> int:
        return len(self.tokens)

    @property
    def tokens_referenced(self) -> Tuple[str, ...]:
        return (self.lp_token,)


Adapter = Union[
    SimpleAdapter,
    CurveAdapter,
    CurveStETHAdapter,
    CurveWrapperAdapter,
]
