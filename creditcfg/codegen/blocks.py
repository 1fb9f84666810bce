"""Text blocks substituted into fixture templates.

Every builder filters one reference table, maps each surviving descriptor
to a single Solidity statement and joins the statements with newlines, in
table order. Descriptors referencing a token or contract that is not
deployed on the target network are dropped and logged at debug level;
they never raise.
"""

import logging
from typing import Iterable, List, Sequence, Type

from creditcfg.codegen.identifiers import contract_ref, safe_enum, token_ref
from creditcfg.core.constants import NO_CONTRACT, NOT_DEPLOYED, Network
from creditcfg.core.models import (
    AdapterConfig,
    BalancerPool,
    BoundedFeed,
    ChainlinkFeed,
    CompositeFeed,
    CreditManagerConfig,
    CurveAdapter,
    CurveLPFeed,
    CurveStETHAdapter,
    CurveWrapperAdapter,
    LikeCurveLPFeed,
    PoolConfig,
    SimpleAdapter,
    TokenData,
    UniV2Pair,
    UniV3Pool,
    WstETHFeed,
    YearnFeed,
    ZeroFeed,
)
from creditcfg.registry import ReferenceTables

logger = logging.getLogger(__name__)

# On-chain USD prices carry 8 decimals
PRICE_DECIMALS = 8

SUSHISWAP_ROUTER = "SUSHISWAP_ROUTER"


def _join(statements: Iterable[str]) -> str:
    return "\n".join(statements)


def _keep(
    tables: ReferenceTables,
    network: Network,
    what: str,
    tokens: Sequence[str] = (),
    contracts: Sequence[str] = (),
) -> bool:
    """True if every referenced token and contract is deployed on the network."""
    missing = [t for t in tokens if not tables.has_token(t, network)]
    missing += [c for c in contracts if not tables.has_contract(c, network)]
    if missing:
        logger.debug(f"Dropping {what} on {network.value}: not deployed {missing}")
        return False
    return True


def _deployed_on_any(tables: ReferenceTables, networks: Sequence[Network]) -> List[TokenData]:
    return [t for t in tables.tokens.values() if any(t.is_deployed(n) for n in networks)]


def _feeds(tables: ReferenceTables, kind: Type) -> list:
    return [f for f in tables.price_feeds.values() if isinstance(f, kind)]


# ========== TOKENS ==========


def tokens_enum(tables: ReferenceTables, networks: Sequence[Network] = (Network.MAINNET,)) -> str:
    """Enum members for every token deployed on one of ``networks``."""
    return ",\n".join(safe_enum(t.symbol) for t in _deployed_on_any(tables, networks))


def token_addresses(tables: ReferenceTables, network: Network) -> str:
    tokens = tables.tokens_on(network)
    statements = [f"td = new TokenData[]({len(tokens)});"]
    for i, token in enumerate(tokens):
        statements.append(
            f"td[{i}] = TokenData({{ id: {token_ref(token.symbol)}, addr: {token.address(network)}, "
            f'symbol: "{token.symbol}", tokenType: TokenType.{token.token_type.name} }});'
        )
    return _join(statements)


def token_decimals(tables: ReferenceTables, networks: Sequence[Network] = (Network.MAINNET,)) -> str:
    return _join(
        f"decimals[{token_ref(t.symbol)}] = {t.decimals};" for t in _deployed_on_any(tables, networks)
    )


# ========== PRICE FEEDS ==========


def chainlink_price_feeds(tables: ReferenceTables, network: Network) -> str:
    statements = []
    for feed in _feeds(tables, ChainlinkFeed):
        address = feed.address(network)
        if address == NOT_DEPLOYED:
            continue
        if not _keep(tables, network, f"chainlink feed {feed.token}", tokens=[feed.token]):
            continue
        statements.append(
            f"chainlinkPriceFeeds.push(ChainlinkPriceFeedData({{ token: {token_ref(feed.token)}, "
            f"priceFeed: {address} }}));"
        )
    return _join(statements)


def zero_price_feeds(tables: ReferenceTables, network: Network) -> str:
    return _join(
        f"zeroPriceFeeds.push(SingleTokenPriceFeedData({{ token: {token_ref(f.token)} }}));"
        for f in _feeds(tables, ZeroFeed)
        if _keep(tables, network, f"zero feed {f.token}", tokens=[f.token])
    )


def curve_price_feeds(tables: ReferenceTables, network: Network) -> str:
    statements = []
    for feed in _feeds(tables, CurveLPFeed):
        if not _keep(
            tables,
            network,
            f"curve feed {feed.token}",
            tokens=(feed.token,) + tuple(feed.assets),
            contracts=[feed.pool],
        ):
            continue
        assets = ", ".join(token_ref(a) for a in feed.assets)
        statements.append(
            f"curvePriceFeeds.push(CurvePriceFeedData({{ lpToken: {token_ref(feed.token)}, "
            f"assets: assets({assets}), pool: {contract_ref(feed.pool)} }}));"
        )
    return _join(statements)


def curve_like_price_feeds(tables: ReferenceTables, network: Network) -> str:
    return _join(
        f"likeCurvePriceFeeds.push(CurveLikePriceFeedData({{ lpToken: {token_ref(f.token)}, "
        f"curveToken: {token_ref(f.curve_symbol)} }}));"
        for f in _feeds(tables, LikeCurveLPFeed)
        if _keep(tables, network, f"curve-like feed {f.token}", tokens=[f.token, f.curve_symbol])
    )


def yearn_price_feeds(tables: ReferenceTables, network: Network) -> str:
    return _join(
        f"yearnPriceFeeds.push(SingleTokenPriceFeedData({{ token: {token_ref(f.token)} }}));"
        for f in _feeds(tables, YearnFeed)
        if _keep(tables, network, f"yearn feed {f.token}", tokens=[f.token])
    )


def wsteth_price_feed(tables: ReferenceTables, network: Network) -> str:
    return _join(
        f"wstethPriceFeed = SingleTokenPriceFeedData({{ token: {token_ref(f.token)} }});"
        for f in _feeds(tables, WstETHFeed)
        if _keep(tables, network, f"wstETH feed {f.token}", tokens=[f.token])
    )


def bounded_price_feeds(tables: ReferenceTables, network: Network) -> str:
    statements = []
    for feed in _feeds(tables, BoundedFeed):
        address = feed.address(network)
        if address == NOT_DEPLOYED:
            continue
        if not _keep(tables, network, f"bounded feed {feed.token}", tokens=[feed.token]):
            continue
        upper_bound = int(feed.upper_bound * 10**PRICE_DECIMALS)
        statements.append(
            f"boundedPriceFeeds.push(BoundedPriceFeedData({{ token: {token_ref(feed.token)}, "
            f"priceFeed: {address}, upperBound: {upper_bound} }}));"
        )
    return _join(statements)


def composite_price_feeds(tables: ReferenceTables, network: Network) -> str:
    statements = []
    for feed in _feeds(tables, CompositeFeed):
        target_to_base, base_to_usd = feed.addresses_on(network)
        if NOT_DEPLOYED in (target_to_base, base_to_usd):
            continue
        if not _keep(tables, network, f"composite feed {feed.token}", tokens=[feed.token]):
            continue
        statements.append(
            f"compositePriceFeeds.push(CompositePriceFeedData({{ token: {token_ref(feed.token)}, "
            f"targetToBaseFeed: {target_to_base}, baseToUSDFeed: {base_to_usd} }}));"
        )
    return _join(statements)


# ========== CONTRACTS ==========


def contracts_enum(tables: ReferenceTables, networks: Sequence[Network] = (Network.MAINNET,)) -> str:
    return ",\n".join(
        c.name for c in tables.contracts.values() if any(c.is_deployed(n) for n in networks)
    )


def contract_addresses(tables: ReferenceTables, network: Network) -> str:
    contracts = tables.contracts_on(network)
    statements = [f"cd = new ContractData[]({len(contracts)});"]
    for i, contract in enumerate(contracts):
        statements.append(
            f"cd[{i}] = ContractData({{ id: {contract_ref(contract.name)}, "
            f'addr: {contract.address(network)}, name: "{contract.label}" }});'
        )
    return _join(statements)


# ========== ADAPTERS ==========


def adapters_list(tables: ReferenceTables, network: Network) -> str:
    """Adapter declarations grouped by shape: simple, curve, stETH, wrappers."""
    adapters = [
        a
        for a in tables.adapters.values()
        if _keep(tables, network, f"adapter {a.contract}", tokens=a.tokens_referenced, contracts=[a.contract])
    ]

    statements = []
    for a in adapters:
        if isinstance(a, SimpleAdapter):
            statements.append(
                f"simpleAdapters.push(SimpleAdapter({{ targetContract: {contract_ref(a.contract)}, "
                f"adapterType: AdapterType.{a.adapter_type.name} }}));"
            )
    for a in adapters:
        if isinstance(a, CurveAdapter):
            if a.base_pool != NO_CONTRACT and not _keep(
                tables, network, f"adapter {a.contract}", contracts=[a.base_pool]
            ):
                continue
            statements.append(
                f"curveAdapters.push(CurveAdapter({{ targetContract: {contract_ref(a.contract)}, "
                f"adapterType: AdapterType.{a.adapter_type.name}, lpToken: {token_ref(a.lp_token)}, "
                f"basePool: {contract_ref(a.base_pool)} }}));"
            )
    for a in adapters:
        if isinstance(a, CurveStETHAdapter):
            statements.append(
                f"curveStEthAdapter = CurveStETHAdapter({{ curveETHGateway: {contract_ref(a.contract)}, "
                f"adapterType: AdapterType.{a.adapter_type.name}, lpToken: {token_ref(a.lp_token)} }});"
            )
    for a in adapters:
        if isinstance(a, CurveWrapperAdapter):
            statements.append(
                f"curveWrappers.push(CurveWrapper({{ targetContract: {contract_ref(a.contract)}, "
                f"adapterType: AdapterType.{a.adapter_type.name}, lpToken: {token_ref(a.lp_token)}, "
                f"nCoins: {a.n_coins} }}));"
            )
    return _join(statements)


# ========== CREDIT MANAGERS ==========


def _liquidation_threshold(lt: int) -> int:
    # A zero threshold would disable the token, so it is rendered as 1 bp
    return 1 if lt == 0 else lt


def _allowlist_statements(
    tables: ReferenceTables,
    network: Network,
    adapter: AdapterConfig,
) -> List[str]:
    statements = []
    router = contract_ref(adapter.contract)
    for entry in adapter.allowed:
        if not _keep(tables, network, f"{adapter.contract} entry {entry}", tokens=entry.tokens):
            continue
        if isinstance(entry, UniV2Pair):
            target = "sushiswapPairs" if adapter.contract == SUSHISWAP_ROUTER else "uniswapV2Pairs"
            statements.append(
                f"cm.{target}.push(UniswapV2Pair({{ router: {router}, "
                f"token0: {token_ref(entry.token0)}, token1: {token_ref(entry.token1)} }}));"
            )
        elif isinstance(entry, UniV3Pool):
            statements.append(
                f"cm.uniswapV3Pools.push(UniswapV3Pool({{ router: {router}, "
                f"token0: {token_ref(entry.token0)}, token1: {token_ref(entry.token1)}, fee: {entry.fee} }}));"
            )
        elif isinstance(entry, BalancerPool):
            statements.append(
                f"cm.balancerPools.push(BalancerPool({{ pool: {token_ref(entry.pool)}, status: {entry.status} }}));"
            )
    return statements


def _credit_manager_statements(
    tables: ReferenceTables,
    pool: PoolConfig,
    cm: CreditManagerConfig,
) -> List[str]:
    network = pool.network
    statements = [
        "cm = creditManagerHumanOpts.push();",
        f"cm.underlying = {token_ref(pool.underlying)};",
        f'cm.name = "{cm.name}";',
        f"cm.minDebt = {cm.min_debt};",
        f"cm.maxDebt = {cm.max_debt};",
        f"cm.poolLimit = {cm.pool_limit};",
        f"cm.feeInterest = {cm.fee_interest};",
        f"cm.feeLiquidation = {cm.fee_liquidation};",
        f"cm.liquidationPremium = {cm.liquidation_premium};",
        f"cm.feeLiquidationExpired = {cm.fee_liquidation_expired};",
        f"cm.liquidationPremiumExpired = {cm.liquidation_premium_expired};",
        f"cm.degenNFT = {str(cm.degen_nft).lower()};",
        f"cm.expirable = {str(cm.expirable).lower()};",
    ]

    for ct in cm.collateral_tokens:
        if _keep(tables, network, f"collateral {ct.token} of {cm.name}", tokens=[ct.token]):
            statements.append(
                f"cm.collateralTokens.push(CollateralTokenHuman({{ token: {token_ref(ct.token)}, "
                f"liquidationThreshold: {_liquidation_threshold(ct.lt)} }}));"
            )

    adapters = [
        a for a in cm.adapters if _keep(tables, network, f"adapter {a.contract} of {cm.name}", contracts=[a.contract])
    ]
    statements.extend(f"cm.contracts.push({contract_ref(a.contract)});" for a in adapters)
    for adapter in adapters:
        statements.extend(_allowlist_statements(tables, network, adapter))
    return statements


def credit_manager_config(
    tables: ReferenceTables,
    markets: Sequence[PoolConfig],
    network: Network = Network.MAINNET,
) -> str:
    """Credit manager setup for every market on ``network``, in market order."""
    statements = []
    for pool in markets:
        if pool.network is not network:
            continue
        if not _keep(tables, network, f"market {pool.id}", tokens=[pool.underlying]):
            continue
        for cm in pool.credit_managers:
            statements.extend(_credit_manager_statements(tables, pool, cm))
    return _join(statements)
