"""Reference tables: tokens, contracts, price feeds and adapters.

Tokens: creditcfg.registry.tokens
Contracts: creditcfg.registry.contracts
Price feeds: creditcfg.registry.price_feeds
Adapters: creditcfg.registry.adapters
"""

from .tables import ReferenceTables, default_tables

__all__ = [
    "ReferenceTables",
    "default_tables",
]
