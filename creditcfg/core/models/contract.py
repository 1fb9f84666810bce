"""Contract descriptors."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from creditcfg.core.constants import NOT_DEPLOYED, Network


@dataclass(frozen=True)
class ContractData:
    """An external contract adapters can target."""

    name: str
    label: str
    addresses: Mapping[Network, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "addresses", MappingProxyType(dict(self.addresses)))

    def address(self, network: Network) -> str:
        return self.addresses.get(network, NOT_DEPLOYED)

    def is_deployed(self, network: Network) -> bool:
        return self.address(network) != NOT_DEPLOYED
