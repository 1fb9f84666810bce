"""Token descriptors."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from creditcfg.core.constants import NOT_DEPLOYED, Network


class TokenType(Enum):
    """Token kinds as the protocol's test suite enumerates them."""

    NORMAL_TOKEN = 0
    CURVE_LP_TOKEN = 1
    YEARN_VAULT = 2
    CONVEX_LP_TOKEN = 3
    CONVEX_STAKED_PHANTOM_TOKEN = 4
    BALANCER_LP_TOKEN = 5
    WRAPPED_TOKEN = 6
    STAKED_DERIVATIVE = 7
    ERC4626_VAULT = 8


def _frozen(addresses: Mapping[Network, str]) -> Mapping[Network, str]:
    return MappingProxyType(dict(addresses))


@dataclass(frozen=True)
class TokenData:
    """A token and its address on every network it is deployed on."""

    symbol: str
    decimals: int
    token_type: TokenType = TokenType.NORMAL_TOKEN
    addresses: Mapping[Network, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "addresses", _frozen(self.addresses))

    def address(self, network: Network) -> str:
        """Address on a network, or NOT_DEPLOYED."""
        return self.addresses.get(network, NOT_DEPLOYED)

    def is_deployed(self, network: Network) -> bool:
        return self.address(network) != NOT_DEPLOYED
