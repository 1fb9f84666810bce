"""Supported networks and their chain ids."""

from enum import Enum


class Network(Enum):
    """Networks the reference tables carry addresses for."""

    MAINNET = "Mainnet"
    ARBITRUM = "Arbitrum"
    OPTIMISM = "Optimism"

    @property
    def chain_id(self) -> int:
        return CHAIN_IDS[self]

    @property
    def fixture_prefix(self) -> str:
        """Prefix used for per-network markers (empty for mainnet)."""
        if self is Network.MAINNET:
            return ""
        return f"{self.name}_"


CHAIN_IDS = {
    Network.MAINNET: 1,
    Network.ARBITRUM: 42161,
    Network.OPTIMISM: 10,
}


def network_addresses(mainnet: str = "", arbitrum: str = "", optimism: str = "") -> dict:
    """Build a Network -> address dict, skipping networks left empty."""
    addresses = {
        Network.MAINNET: mainnet,
        Network.ARBITRUM: arbitrum,
        Network.OPTIMISM: optimism,
    }
    return {network: address for network, address in addresses.items() if address}
