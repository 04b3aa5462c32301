"""Request and enumeration types for the Betfair API."""

from .enums import (
    BetStatus,
    Side,
    OrderType,
    PersistenceType,
    OrderStatus,
    OrderProjection,
    MatchProjection,
    MarketProjection,
    MarketSort,
    MarketStatus,
    MarketBettingType,
    OrderBy,
    SortDir,
    GroupBy,
    IncludeItem,
    TimeGranularity,
    PriceData,
    Wallet,
    ExecutionReportStatus,
    ExecutionReportErrorCode,
    InstructionReportStatus,
    InstructionReportErrorCode,
)

from .betting import (
    TimeRange,
    MarketFilter,
    LimitOrder,
    PlaceInstruction,
    FilterRequest,
    ListCurrentOrdersRequest,
    ListClearedOrdersRequest,
    ListMarketBookRequest,
    ListMarketCatalogueRequest,
    ListMarketProfitAndLossRequest,
    ListTimeRangesRequest,
    OrdersRequest,
    CancelOrdersRequest,
)

from .account import (
    CreateDeveloperAppKeysRequest,
    GetAccountFundsRequest,
    GetAccountStatementRequest,
    ListCurrencyRatesRequest,
)

__all__ = [
    # Enumerations
    "BetStatus",
    "Side",
    "OrderType",
    "PersistenceType",
    "OrderStatus",
    "OrderProjection",
    "MatchProjection",
    "MarketProjection",
    "MarketSort",
    "MarketStatus",
    "MarketBettingType",
    "OrderBy",
    "SortDir",
    "GroupBy",
    "IncludeItem",
    "TimeGranularity",
    "PriceData",
    "Wallet",
    "ExecutionReportStatus",
    "ExecutionReportErrorCode",
    "InstructionReportStatus",
    "InstructionReportErrorCode",
    # Betting requests
    "TimeRange",
    "MarketFilter",
    "LimitOrder",
    "PlaceInstruction",
    "FilterRequest",
    "ListCurrentOrdersRequest",
    "ListClearedOrdersRequest",
    "ListMarketBookRequest",
    "ListMarketCatalogueRequest",
    "ListMarketProfitAndLossRequest",
    "ListTimeRangesRequest",
    "OrdersRequest",
    "CancelOrdersRequest",
    # Account requests
    "CreateDeveloperAppKeysRequest",
    "GetAccountFundsRequest",
    "GetAccountStatementRequest",
    "ListCurrencyRatesRequest",
]
