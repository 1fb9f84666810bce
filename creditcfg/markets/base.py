"""Shared helpers for declaring pool configurations."""

from dataclasses import dataclass
from decimal import Decimal

from creditcfg.core.models import CreditManagerConfig, QuotaParams

# Fee defaults shared by every v3 credit manager (bps)
DEFAULT_FEES = {
    "fee_interest": 2500,
    "fee_liquidation": 150,
    "liquidation_premium": 400,
    "fee_liquidation_expired": 100,
    "liquidation_premium_expired": 200,
}


@dataclass(frozen=True)
class PoolUnits:
    """Converts human amounts to the pool's underlying units.

    ``divider`` turns USD-denominated figures into underlying amounts for
    non-stable pools (e.g. 2000 for a WETH pool priced at $2000).
    """

    decimals: int
    divider: int = 1

    def __call__(self, amount: float) -> int:
        return int(Decimal(str(amount)).scaleb(self.decimals)) // self.divider

    def quota(self, min_rate: int, max_rate: int, fee: int, limit: float) -> QuotaParams:
        return QuotaParams(min_rate=min_rate, max_rate=max_rate, quota_increase_fee=fee, limit=self(limit))

    def credit_manager(
        self,
        name: str,
        min_debt: float,
        max_debt: float,
        pool_limit: float,
        **kwargs,
    ) -> CreditManagerConfig:
        """Credit manager with amounts converted and default fees applied."""
        params = {**DEFAULT_FEES, **kwargs}
        return CreditManagerConfig(
            name=name,
            min_debt=self(min_debt),
            max_debt=self(max_debt),
            pool_limit=self(pool_limit),
            **params,
        )
