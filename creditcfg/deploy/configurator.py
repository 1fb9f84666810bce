"""Validated view of a pool configuration, ready to be printed or deployed."""

import io
import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from creditcfg.core.constants import PERCENTAGE_FACTOR
from creditcfg.core.exceptions import ConfigValidationError
from creditcfg.core.models import (
    AdapterConfig,
    BalancerPool,
    CreditManagerConfig,
    PoolConfig,
    UniV2Pair,
    UniV3Pool,
)
from creditcfg.registry import ReferenceTables, default_tables

logger = logging.getLogger(__name__)

SUMMARY_WIDTH = 120


class DeployConfigEncoder(json.JSONEncoder):
    """JSON encoder that handles Decimal and datetime values."""

    def default(self, obj):
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class _Problems:
    """Accumulates validation problems for one pool."""

    def __init__(self, pool: PoolConfig, tables: ReferenceTables):
        self.pool = pool
        self.tables = tables
        self.items: List[str] = []

    def add(self, problem: str) -> None:
        self.items.append(problem)

    def token(self, symbol: str, where: str) -> None:
        network = self.pool.network
        if symbol not in self.tables.tokens:
            self.add(f"{where}: unknown token {symbol}")
        elif not self.tables.has_token(symbol, network):
            self.add(f"{where}: token {symbol} is not deployed on {network.value}")

    def contract(self, name: str, where: str) -> None:
        network = self.pool.network
        if name not in self.tables.contracts:
            self.add(f"{where}: unknown contract {name}")
        elif not self.tables.has_contract(name, network):
            self.add(f"{where}: contract {name} is not deployed on {network.value}")
        elif self.tables.adapter(name) is None:
            self.add(f"{where}: no adapter parameters for {name}")


def validate_pool(pool: PoolConfig, tables: ReferenceTables) -> List[str]:
    """Collect every problem with a pool configuration.

    Returns:
        Human-readable problem descriptions, empty if the pool is valid
    """
    problems = _Problems(pool, tables)
    problems.token(pool.underlying, "underlying")

    irm = pool.irm
    if not 0 <= irm.u1 <= irm.u2 <= PERCENTAGE_FACTOR:
        problems.add(f"irm: breakpoints must satisfy 0 <= U1 <= U2 <= {PERCENTAGE_FACTOR} (got {irm.u1}, {irm.u2})")

    for symbol, quota in pool.rates_and_limits.items():
        problems.token(symbol, "quota")
        if quota.min_rate > quota.max_rate:
            problems.add(f"quota {symbol}: min rate {quota.min_rate} exceeds max rate {quota.max_rate}")

    for cm in pool.credit_managers:
        _validate_credit_manager(cm, problems)

    return problems.items


def _validate_credit_manager(cm: CreditManagerConfig, problems: _Problems) -> None:
    where = f"credit manager '{cm.name}'"

    if cm.min_debt > cm.max_debt:
        problems.add(f"{where}: min debt {cm.min_debt} exceeds max debt {cm.max_debt}")

    seen = set()
    for ct in cm.collateral_tokens:
        problems.token(ct.token, f"{where} collateral")
        if not 0 <= ct.lt <= PERCENTAGE_FACTOR:
            problems.add(f"{where} collateral {ct.token}: liquidation threshold {ct.lt} outside [0, {PERCENTAGE_FACTOR}]")
        if ct.token in seen:
            problems.add(f"{where} collateral {ct.token}: listed more than once")
        seen.add(ct.token)

    for adapter in cm.adapters:
        problems.contract(adapter.contract, f"{where} adapter")
        for entry in adapter.allowed:
            for symbol in entry.tokens:
                problems.token(symbol, f"{where} {adapter.contract} allowlist")


def _bps(value: int) -> str:
    return f"{Decimal(value) * 100 / PERCENTAGE_FACTOR:.2f}%"


def _allowed_entry(entry) -> dict:
    if isinstance(entry, UniV3Pool):
        return {"token0": entry.token0, "token1": entry.token1, "fee": entry.fee}
    if isinstance(entry, UniV2Pair):
        return {"token0": entry.token0, "token1": entry.token1}
    if isinstance(entry, BalancerPool):
        return {"pool": entry.pool, "status": entry.status}
    raise TypeError(f"Unsupported allowlist entry: {entry!r}")


class PoolConfigurator:
    """A pool configuration that passed validation against the reference tables.

    Build instances with ``PoolConfigurator.new``; the constructor itself does
    not validate.
    """

    def __init__(self, pool: PoolConfig, tables: ReferenceTables):
        self.pool = pool
        self.tables = tables

    @classmethod
    def new(cls, pool: PoolConfig, tables: Optional[ReferenceTables] = None) -> "PoolConfigurator":
        """Validate a pool configuration and wrap it.

        Raises:
            ConfigValidationError: If any problem is found; all problems are reported at once
        """
        tables = tables or default_tables()
        problems = validate_pool(pool, tables)
        if problems:
            logger.error(f"Configuration {pool.id} has {len(problems)} problem(s)")
            raise ConfigValidationError(pool.id, problems)
        logger.debug(f"Configuration {pool.id} is valid")
        return cls(pool, tables)

    @property
    def network(self):
        return self.pool.network

    @property
    def underlying_decimals(self) -> int:
        return self.tables.token(self.pool.underlying).decimals

    def _amount(self, value: int) -> str:
        """Underlying amount in human units, e.g. 1500000 (6 decimals) -> '1.5'."""
        human = Decimal(value).scaleb(-self.underlying_decimals).normalize()
        return f"{human:,f}"

    def _token_address(self, symbol: str) -> str:
        return self.tables.token_address(symbol, self.network)

    # ========== STRUCTURED ==========

    def deploy_config(self) -> dict:
        """Structured deploy configuration with resolved addresses.

        Large integers are emitted as decimal strings.
        """
        pool = self.pool
        return {
            "id": pool.id,
            "symbol": pool.symbol,
            "name": pool.name,
            "network": self.network.value,
            "chainId": self.network.chain_id,
            "underlying": {
                "symbol": pool.underlying,
                "address": self._token_address(pool.underlying),
            },
            "accountAmount": str(pool.account_amount),
            "withdrawalFee": pool.withdrawal_fee,
            "totalDebtLimit": str(pool.total_debt_limit),
            "supportsQuotas": pool.supports_quotas,
            "irm": pool.irm.to_dict(),
            "ratesAndLimits": [
                {
                    "token": symbol,
                    "address": self._token_address(symbol),
                    "minRate": quota.min_rate,
                    "maxRate": quota.max_rate,
                    "quotaIncreaseFee": quota.quota_increase_fee,
                    "limit": str(quota.limit),
                }
                for symbol, quota in pool.rates_and_limits.items()
            ],
            "creditManagers": [self._credit_manager_config(cm) for cm in pool.credit_managers],
        }

    def _credit_manager_config(self, cm: CreditManagerConfig) -> dict:
        return {
            "name": cm.name,
            "degenNft": cm.degen_nft,
            "expirable": cm.expirable,
            "expirationDate": cm.expiration_date,
            "minDebt": str(cm.min_debt),
            "maxDebt": str(cm.max_debt),
            "poolLimit": str(cm.pool_limit),
            "feeInterest": cm.fee_interest,
            "feeLiquidation": cm.fee_liquidation,
            "liquidationPremium": cm.liquidation_premium,
            "feeLiquidationExpired": cm.fee_liquidation_expired,
            "liquidationPremiumExpired": cm.liquidation_premium_expired,
            "collateralTokens": [
                {"token": ct.token, "address": self._token_address(ct.token), "lt": ct.lt}
                for ct in cm.collateral_tokens
            ],
            "adapters": [self._adapter_config(a) for a in cm.adapters],
        }

    def _adapter_config(self, adapter: AdapterConfig) -> dict:
        params = self.tables.adapter(adapter.contract)
        return {
            "contract": adapter.contract,
            "address": self.tables.contract_address(adapter.contract, self.network),
            "adapterType": params.adapter_type.name,
            "allowed": [_allowed_entry(e) for e in adapter.allowed],
        }

    def deploy_config_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.deploy_config(), indent=indent, cls=DeployConfigEncoder)

    # ========== HUMAN-READABLE ==========

    def to_renderables(self) -> list:
        """Rich renderables summarizing the pool and its credit managers."""
        pool = self.pool
        header = Text()
        header.append(f"{pool.name} ", style="bold cyan")
        header.append(f"({pool.id}, {pool.symbol})\n", style="dim")
        header.append("Network: ", style="dim")
        header.append(f"{self.network.value}", style="yellow")
        header.append("  Underlying: ", style="dim")
        header.append(f"{pool.underlying} {self._token_address(pool.underlying)}\n")
        header.append("Total debt limit: ", style="dim")
        header.append(self._amount(pool.total_debt_limit))
        header.append("  Withdrawal fee: ", style="dim")
        header.append(_bps(pool.withdrawal_fee))
        header.append("  Quotas: ", style="dim")
        header.append("yes" if pool.supports_quotas else "no")

        renderables = [header, self._irm_table()]
        if pool.rates_and_limits:
            renderables.append(self._quota_table())
        for cm in pool.credit_managers:
            renderables.extend(self._credit_manager_tables(cm))
        return renderables

    def _table(self, title: str) -> Table:
        return Table(
            title=title,
            title_justify="left",
            show_header=True,
            header_style="bold orange1",
            border_style="dim",
            padding=(0, 1),
        )

    def _irm_table(self) -> Table:
        irm = self.pool.irm
        table = self._table("Interest rate model")
        for column in ("U1", "U2", "Rbase", "Rslope1", "Rslope2", "Rslope3", "Borrow above U2"):
            table.add_column(column, justify="right")
        table.add_row(
            _bps(irm.u1),
            _bps(irm.u2),
            _bps(irm.r_base),
            _bps(irm.r_slope1),
            _bps(irm.r_slope2),
            _bps(irm.r_slope3),
            "forbidden" if irm.borrowing_more_u2_forbidden else "allowed",
        )
        return table

    def _quota_table(self) -> Table:
        table = self._table("Quotas")
        table.add_column("Token", style="cyan")
        table.add_column("Min rate", justify="right")
        table.add_column("Max rate", justify="right")
        table.add_column("Increase fee", justify="right")
        table.add_column("Limit", justify="right")
        for symbol, quota in self.pool.rates_and_limits.items():
            table.add_row(
                symbol,
                _bps(quota.min_rate),
                _bps(quota.max_rate),
                _bps(quota.quota_increase_fee),
                self._amount(quota.limit),
            )
        return table

    def _credit_manager_tables(self, cm: CreditManagerConfig) -> List[Table]:
        params = self._table(f"Credit manager: {cm.name}")
        params.add_column("Parameter", style="cyan")
        params.add_column("Value", justify="right")
        params.add_row("Min debt", self._amount(cm.min_debt))
        params.add_row("Max debt", self._amount(cm.max_debt))
        params.add_row("Pool limit", self._amount(cm.pool_limit))
        params.add_row("Fee interest", _bps(cm.fee_interest))
        params.add_row("Fee liquidation", _bps(cm.fee_liquidation))
        params.add_row("Liquidation premium", _bps(cm.liquidation_premium))
        params.add_row("Fee liquidation (expired)", _bps(cm.fee_liquidation_expired))
        params.add_row("Liquidation premium (expired)", _bps(cm.liquidation_premium_expired))
        params.add_row("Degen NFT", "yes" if cm.degen_nft else "no")
        params.add_row("Expires", cm.expiration_date.isoformat() if cm.expirable else "never")

        collateral = self._table("Collateral tokens")
        collateral.add_column("Token", style="cyan")
        collateral.add_column("LT", justify="right")
        collateral.add_column("Address", style="dim")
        for ct in cm.collateral_tokens:
            collateral.add_row(ct.token, _bps(ct.lt), self._token_address(ct.token))

        adapters = self._table("Adapters")
        adapters.add_column("Contract", style="cyan")
        adapters.add_column("Type")
        adapters.add_column("Allowed", justify="right")
        for adapter in cm.adapters:
            adapters.add_row(
                adapter.contract,
                self.tables.adapter(adapter.contract).adapter_type.name,
                str(len(adapter.allowed)) if adapter.allowed else "-",
            )
        return [params, collateral, adapters]

    def __str__(self) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=SUMMARY_WIDTH, color_system=None, force_terminal=False)
        for renderable in self.to_renderables():
            console.print(renderable)
        return buffer.getvalue()
