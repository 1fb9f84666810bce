"""Core data models: reference descriptors and market configurations."""

from .token import TokenData, TokenType
from .contract import ContractData
from .price_feed import (
    OracleType,
    PriceFeed,
    ChainlinkFeed,
    ZeroFeed,
    CurveLPFeed,
    LikeCurveLPFeed,
    YearnFeed,
    WstETHFeed,
    BoundedFeed,
    CompositeFeed,
)
from .adapter import (
    AdapterInterface,
    Adapter,
    SimpleAdapter,
    CurveAdapter,
    CurveStETHAdapter,
    CurveWrapperAdapter,
)
from .market import (
    IRMParams,
    QuotaParams,
    CollateralToken,
    UniV2Pair,
    UniV3Pool,
    BalancerPool,
    AdapterConfig,
    CreditManagerConfig,
    PoolConfig,
)

__all__ = [
    "TokenData",
    "TokenType",
    "ContractData",
    "OracleType",
    "PriceFeed",
    "ChainlinkFeed",
    "ZeroFeed",
    "CurveLPFeed",
    "LikeCurveLPFeed",
    "YearnFeed",
    "WstETHFeed",
    "BoundedFeed",
    "CompositeFeed",
    "AdapterInterface",
    "Adapter",
    "SimpleAdapter",
    "CurveAdapter",
    "CurveStETHAdapter",
    "CurveWrapperAdapter",
    "IRMParams",
    "QuotaParams",
    "CollateralToken",
    "UniV2Pair",
    "UniV3Pool",
    "BalancerPool",
    "AdapterConfig",
    "CreditManagerConfig",
    "PoolConfig",
]
