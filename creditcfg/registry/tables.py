"""Read-only bundle of the reference tables passed to every consumer."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from creditcfg.core.constants import NOT_DEPLOYED, Network
from creditcfg.core.exceptions import UnknownSymbolError
from creditcfg.core.models import Adapter, ContractData, PriceFeed, TokenData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceTables:
    """Tokens, contracts, price feeds and adapters keyed by symbol / name.

    Iteration order of every mapping is the order entries were declared in,
    and every fixture block preserves it.
    """

    tokens: Mapping[str, TokenData]
    contracts: Mapping[str, ContractData]
    price_feeds: Mapping[str, PriceFeed] = field(default_factory=dict)
    adapters: Mapping[str, Adapter] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("tokens", "contracts", "price_feeds", "adapters"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @classmethod
    def from_iterables(
        cls,
        tokens: Iterable[TokenData],
        contracts: Iterable[ContractData] = (),
        price_feeds: Iterable[PriceFeed] = (),
        adapters: Iterable[Adapter] = (),
    ) -> "ReferenceTables":
        """Build tables from descriptor lists, keeping their order."""
        return cls(
            tokens={t.symbol: t for t in tokens},
            contracts={c.name: c for c in contracts},
            price_feeds={f.token: f for f in price_feeds},
            adapters={a.contract: a for a in adapters},
        )

    # ========== TOKENS ==========

    def token(self, symbol: str) -> TokenData:
        try:
            return self.tokens[symbol]
        except KeyError:
            raise UnknownSymbolError("token", symbol) from None

    def has_token(self, symbol: str, network: Network) -> bool:
        """True if the token is known and deployed on the network."""
        data = self.tokens.get(symbol)
        return data is not None and data.is_deployed(network)

    def token_address(self, symbol: str, network: Network) -> str:
        return self.token(symbol).address(network)

    def tokens_on(self, network: Network) -> List[TokenData]:
        """Tokens deployed on a network, in table order."""
        return [t for t in self.tokens.values() if t.is_deployed(network)]

    # ========== CONTRACTS ==========

    def contract(self, name: str) -> ContractData:
        try:
            return self.contracts[name]
        except KeyError:
            raise UnknownSymbolError("contract", name) from None

    def has_contract(self, name: str, network: Network) -> bool:
        data = self.contracts.get(name)
        return data is not None and data.is_deployed(network)

    def contract_address(self, name: str, network: Network) -> str:
        data = self.contracts.get(name)
        if data is None:
            return NOT_DEPLOYED
        return data.address(network)

    def contracts_on(self, network: Network) -> List[ContractData]:
        return [c for c in self.contracts.values() if c.is_deployed(network)]

    # ========== ADAPTERS / FEEDS ==========

    def adapter(self, contract: str) -> Optional[Adapter]:
        return self.adapters.get(contract)

    def price_feed(self, symbol: str) -> Optional[PriceFeed]:
        return self.price_feeds.get(symbol)


@lru_cache()
def default_tables() -> ReferenceTables:
    """The shipped reference tables, built once per process."""
    from creditcfg.registry.adapters import ADAPTERS
    from creditcfg.registry.contracts import SUPPORTED_CONTRACTS
    from creditcfg.registry.price_feeds import PRICE_FEEDS
    from creditcfg.registry.tokens import SUPPORTED_TOKENS

    tables = ReferenceTables(
        tokens=SUPPORTED_TOKENS,
        contracts=SUPPORTED_CONTRACTS,
        price_feeds=PRICE_FEEDS,
        adapters=ADAPTERS,
    )
    logger.debug(
        f"Loaded reference tables: {len(tables.tokens)} tokens, {len(tables.contracts)} contracts, "
        f"{len(tables.price_feeds)} price feeds, {len(tables.adapters)} adapters"
    )
    return tables
