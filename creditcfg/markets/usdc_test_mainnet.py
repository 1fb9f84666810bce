"""Small USDC pool used by the live test suite."""

from creditcfg.core.constants import Network
from creditcfg.core.models import AdapterConfig, CollateralToken, IRMParams, PoolConfig
from creditcfg.markets.base import PoolUnits

units = PoolUnits(decimals=6)

TEST_CREDIT_MANAGER = units.credit_manager(
    "Test Credit Manager",
    min_debt=50_000,
    max_debt=1_000_000,
    pool_limit=5_000_000,
    collateral_tokens=(
        CollateralToken("crvUSD", 9000),
        CollateralToken("3Crv", 0),
    ),
    adapters=(AdapterConfig("CURVE_3CRV_POOL"),),
)

CONFIG = PoolConfig(
    id="mainnet-usdc-test-v3",
    symbol="dUSDC-test-V3",
    name="Test USDC v3",
    network=Network.MAINNET,
    underlying="USDC",
    account_amount=units(100_000),
    withdrawal_fee=0,
    total_debt_limit=units(100_000_000),
    irm=IRMParams(u1=7000, u2=9000, r_base=0, r_slope1=100, r_slope2=125, r_slope3=10000),
    rates_and_limits={
        "crvUSD": units.quota(4, 1500, 1, 10_000_000),
    },
    credit_managers=(TEST_CREDIT_MANAGER,),
)
