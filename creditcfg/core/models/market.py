"""Market configuration models: pools, credit managers and their parameters."""

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from creditcfg.core.constants import Network


@dataclass(frozen=True)
class IRMParams:
    """Two-kink interest rate model breakpoints, all in basis points."""

    u1: int
    u2: int
    r_base: int
    r_slope1: int
    r_slope2: int
    r_slope3: int
    borrowing_more_u2_forbidden: bool = True

    def to_dict(self) -> dict:
        return {
            "U1": self.u1,
            "U2": self.u2,
            "Rbase": self.r_base,
            "Rslope1": self.r_slope1,
            "Rslope2": self.r_slope2,
            "Rslope3": self.r_slope3,
            "isBorrowingMoreU2Forbidden": self.borrowing_more_u2_forbidden,
        }


@dataclass(frozen=True)
class QuotaParams:
    """Quota rate bounds (bps) and total limit (underlying units) for a token."""

    min_rate: int
    max_rate: int
    quota_increase_fee: int
    limit: int


@dataclass(frozen=True)
class CollateralToken:
    """Collateral token with its liquidation threshold in basis points."""

    token: str
    lt: int


@dataclass(frozen=True)
class UniV2Pair:
    token0: str
    token1: str

    @property
    def tokens(self) -> Tuple[str, ...]:
        return (self.token0, self.token1)


@dataclass(frozen=True)
class UniV3Pool:
    token0: str
    token1: str
    fee: int

    @property
    def tokens(self) -> Tuple[str, ...]:
        return (self.token0, self.token1)


@dataclass(frozen=True)
class BalancerPool:
    """Balancer pool allowlist entry; ``pool`` is the BPT token symbol."""

    pool: str
    status: int  # 1 = swap only, 2 = swap and LP

    @property
    def tokens(self) -> Tuple[str, ...]:
        return (self.pool,)


AllowedEntry = Union[UniV2Pair, UniV3Pool, BalancerPool]


@dataclass(frozen=True)
class AdapterConfig:
    """Adapter enabled for a credit manager, with an optional allowlist."""

    contract: str
    allowed: Tuple[AllowedEntry, ...] = ()


@dataclass(frozen=True)
class CreditManagerConfig:
    """Parameters of one credit manager attached to a pool."""

    name: str
    min_debt: int
    max_debt: int
    fee_interest: int
    fee_liquidation: int
    liquidation_premium: int
    fee_liquidation_expired: int
    liquidation_premium_expired: int
    pool_limit: int
    collateral_tokens: Tuple[CollateralToken, ...]
    adapters: Tuple[AdapterConfig, ...]
    degen_nft: bool = False
    expiration_date: Optional[datetime] = None

    @property
    def expirable(self) -> bool:
        return self.expiration_date is not None


@dataclass(frozen=True)
class PoolConfig:
    """A lending pool and the credit managers borrowing from it."""

    id: str
    symbol: str
    name: str
    network: Network
    underlying: str
    account_amount: int
    withdrawal_fee: int
    total_debt_limit: int
    irm: IRMParams
    rates_and_limits: Mapping[str, QuotaParams]
    credit_managers: Tuple[CreditManagerConfig, ...]
    supports_quotas: bool = True

    def __post_init__(self):
        object.__setattr__(self, "rates_and_limits", MappingProxyType(dict(self.rates_and_limits)))
