"""The fixed list of generated fixtures and the markers each one fills."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple

from creditcfg.codegen import blocks
from creditcfg.core.constants import Network
from creditcfg.core.models import PoolConfig
from creditcfg.registry import ReferenceTables

ALL_NETWORKS: Tuple[Network, ...] = tuple(Network)


@dataclass(frozen=True)
class RenderContext:
    """Inputs every block function is evaluated against."""

    tables: ReferenceTables
    markets: Tuple[PoolConfig, ...] = ()


Block = Callable[[RenderContext], str]


@dataclass(frozen=True)
class Fixture:
    """A template file, the file it renders to and its marker -> block map."""

    template: str
    output: str
    markers: Mapping[str, Block] = field(default_factory=dict)


def marker(name: str, network: Optional[Network] = None) -> str:
    """Marker comment for a block, prefixed per network (none for mainnet)."""
    prefix = network.fixture_prefix if network is not None else ""
    return f"// ${prefix}{name}$"


def _per_network(
    name: str,
    build: Callable[[ReferenceTables, Network], str],
) -> Dict[str, Block]:
    markers = {}
    for network in ALL_NETWORKS:
        markers[marker(name, network)] = lambda ctx, network=network: build(ctx.tables, network)
    return markers


def _enum_tail(members: str) -> str:
    """Members appended after the template's placeholder member, if any."""
    return f",\n{members}" if members else ""


def _credit_managers(ctx: RenderContext, network: Network) -> str:
    return blocks.credit_manager_config(ctx.tables, ctx.markets, network)


FIXTURES = [
    Fixture(
        "Tokens.sol",
        "Tokens.sol",
        {marker("TOKENS"): lambda ctx: _enum_tail(blocks.tokens_enum(ctx.tables, ALL_NETWORKS))},
    ),
    Fixture(
        "TokensDataLive.sol",
        "TokensDataLive.sol",
        _per_network("TOKEN_ADDRESSES", blocks.token_addresses),
    ),
    Fixture(
        "PriceFeedDataLive.sol",
        "PriceFeedDataLive.sol",
        {
            **_per_network("CHAINLINK_PRICE_FEEDS", blocks.chainlink_price_feeds),
            **_per_network("ZERO_PRICE_FEEDS", blocks.zero_price_feeds),
            **_per_network("CURVE_PRICE_FEEDS", blocks.curve_price_feeds),
            **_per_network("CURVE_LIKE_PRICE_FEEDS", blocks.curve_like_price_feeds),
            **_per_network("YEARN_PRICE_FEEDS", blocks.yearn_price_feeds),
            **_per_network("WSTETH_PRICE_FEED", blocks.wsteth_price_feed),
            **_per_network("BOUNDED_PRICE_FEEDS", blocks.bounded_price_feeds),
            **_per_network("COMPOSITE_PRICE_FEEDS", blocks.composite_price_feeds),
        },
    ),
    Fixture(
        "SupportedContracts.sol",
        "SupportedContracts.sol",
        {
            marker("CONTRACTS_ENUM"): lambda ctx: _enum_tail(blocks.contracts_enum(ctx.tables, ALL_NETWORKS)),
            **_per_network("CONTRACTS_ADDRESSES", blocks.contract_addresses),
        },
    ),
    Fixture(
        "CreditConfigLive.sol",
        "CreditConfigLive.sol",
        {
            marker("CREDIT_MANAGER_CONFIG", network): lambda ctx, network=network: _credit_managers(ctx, network)
            for network in ALL_NETWORKS
        },
    ),
    Fixture(
        "AdapterData.sol",
        "AdapterData.sol",
        _per_network("ADAPTERS_LIST", blocks.adapters_list),
    ),
    Fixture(
        "TokenDecimals.sol",
        "TokenDecimals.sol",
        {marker("TOKEN_DECIMALS"): lambda ctx: blocks.token_decimals(ctx.tables, ALL_NETWORKS)},
    ),
]
