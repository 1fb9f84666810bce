"""Price feed descriptors.

Each oracle kind is its own frozen dataclass; ``PriceFeed`` is the union of
all of them. Kind-specific fields only exist on the kind that uses them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from creditcfg.core.constants import NOT_DEPLOYED, Network


class OracleType(Enum):
    """Oracle kinds a token can be priced with."""

    CHAINLINK_ORACLE = "chainlink"
    ZERO_ORACLE = "zero"
    CURVE_LP_TOKEN_ORACLE = "curve_lp"
    LIKE_CURVE_LP_TOKEN_ORACLE = "like_curve_lp"
    YEARN_TOKEN_ORACLE = "yearn"
    YEARN_CURVE_LP_TOKEN_ORACLE = "yearn_curve_lp"
    WSTETH_ORACLE = "wsteth"
    BOUNDED_ORACLE = "bounded"
    COMPOSITE_ORACLE = "composite"


@dataclass(frozen=True)
class ChainlinkFeed:
    """Direct oracle with an address per network."""

    token: str
    addresses: Mapping[Network, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "addresses", MappingProxyType(dict(self.addresses)))

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.CHAINLINK_ORACLE

    def address(self, network: Network) -> str:
        return self.addresses.get(network, NOT_DEPLOYED)


@dataclass(frozen=True)
class ZeroFeed:
    """Constant zero price."""

    token: str

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.ZERO_ORACLE


@dataclass(frozen=True)
class CurveLPFeed:
    """Curve LP token priced from its pool's virtual price and assets."""

    token: str
    assets: Tuple[str, ...]
    pool: str  # contract name

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.CURVE_LP_TOKEN_ORACLE


@dataclass(frozen=True)
class LikeCurveLPFeed:
    """Token pegged to another token's price (e.g. a Convex wrapper)."""

    token: str
    curve_symbol: str

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.LIKE_CURVE_LP_TOKEN_ORACLE


@dataclass(frozen=True)
class YearnFeed:
    """Yearn vault share priced off its underlying."""

    token: str
    curve_lp: bool = False

    @property
    def oracle_type(self) -> OracleType:
        if self.curve_lp:
            return OracleType.YEARN_CURVE_LP_TOKEN_ORACLE
        return OracleType.YEARN_TOKEN_ORACLE


@dataclass(frozen=True)
class WstETHFeed:
    token: str

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.WSTETH_ORACLE


@dataclass(frozen=True)
class BoundedFeed:
    """Oracle capped at ``upper_bound`` (USD, 8 decimals on chain)."""

    token: str
    underlying: Mapping[Network, str]
    upper_bound: Decimal

    def __post_init__(self):
        object.__setattr__(self, "underlying", MappingProxyType(dict(self.underlying)))

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.BOUNDED_ORACLE

    def address(self, network: Network) -> str:
        return self.underlying.get(network, NOT_DEPLOYED)


@dataclass(frozen=True)
class CompositeFeed:
    """Price composed of a token/base feed and a base/USD feed."""

    token: str
    target_to_base: Mapping[Network, str]
    base_to_usd: Mapping[Network, str]

    def __post_init__(self):
        object.__setattr__(self, "target_to_base", MappingProxyType(dict(self.target_to_base)))
        object.__setattr__(self, "base_to_usd", MappingProxyType(dict(self.base_to_usd)))

    @property
    def oracle_type(self) -> OracleType:
        return OracleType.COMPOSITE_ORACLE

    def addresses_on(self, network: Network) -> Tuple[str, str]:
        return (
            self.target_to_base.get(network, NOT_DEPLOYED),
            self.base_to_usd.get(network, NOT_DEPLOYED),
        )


PriceFeed = Union[
    ChainlinkFeed,
    ZeroFeed,
    CurveLPFeed,
    LikeCurveLPFeed,
    YearnFeed,
    WstETHFeed,
    BoundedFeed,
    CompositeFeed,
]
