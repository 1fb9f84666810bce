"""Core constants module."""

from creditcfg.core.constants.generic import (
    PERCENTAGE_FACTOR,
    NOT_DEPLOYED,
    NO_CONTRACT,
)
from creditcfg.core.constants.networks import Network, CHAIN_IDS, network_addresses

__all__ = [
    "PERCENTAGE_FACTOR",
    "NOT_DEPLOYED",
    "NO_CONTRACT",
    "Network",
    "CHAIN_IDS",
    "network_addresses",
]
