"""REST API client module for Betfair.

This module provides the session-and-dispatch client for the Betfair
exchange JSON API: login, keep-alive and logout against the identity
service, and the betting, account and navigation operations.

Example:
    ```python
    from betfair_ng.api import BetfairClient

    client = BetfairClient({
        "certificatePath": "client-2048.crt",
        "keyPath": "client-2048.key",
        "applicationKey": app_key,
    })
    if await client.login({"username": user, "password": pw}):
        funds = await client.get_account_funds()
    ```
"""

from .client import BetfairClient, USER_AGENT

from .config import ClientConfig

from .endpoints import (
    DEFAULT_TIMEOUT_SECS,
    NAVIGATION_TIMEOUT_SECS,
    EndpointDescriptor,
    EndpointRouter,
    Endpoints,
    Service,
)

from .error import (
    ErrorKind,
    ApiError,
    ConfigurationError,
    InvalidParameterError,
    PreconditionError,
    NotLoggedInError,
    MissingAppKeyError,
    MissingCredentialsError,
    HttpError,
    UnexpectedStatusError,
    BadRequestError,
    ApplicationError,
    LoginFailedError,
    DeserializeError,
)

from .session import SessionState, SessionStatus

from .transport import (
    AiohttpTransport,
    ClientCertificate,
    Transport,
    TransportResponse,
)

from .validation import OPERATIONS, OperationSpec, validate_params

from .types import (
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
    CreateDeveloperAppKeysRequest,
    GetAccountFundsRequest,
    GetAccountStatementRequest,
    ListCurrencyRatesRequest,
)

__all__ = [
    # Client
    "BetfairClient",
    "USER_AGENT",
    "ClientConfig",
    # Endpoints
    "DEFAULT_TIMEOUT_SECS",
    "NAVIGATION_TIMEOUT_SECS",
    "EndpointDescriptor",
    "EndpointRouter",
    "Endpoints",
    "Service",
    # Errors
    "ErrorKind",
    "ApiError",
    "ConfigurationError",
    "InvalidParameterError",
    "PreconditionError",
    "NotLoggedInError",
    "MissingAppKeyError",
    "MissingCredentialsError",
    "HttpError",
    "UnexpectedStatusError",
    "BadRequestError",
    "ApplicationError",
    "LoginFailedError",
    "DeserializeError",
    # Session
    "SessionState",
    "SessionStatus",
    # Transport
    "AiohttpTransport",
    "ClientCertificate",
    "Transport",
    "TransportResponse",
    # Operations
    "OPERATIONS",
    "OperationSpec",
    "validate_params",
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
    # Request types
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
    "CreateDeveloperAppKeysRequest",
    "GetAccountFundsRequest",
    "GetAccountStatementRequest",
    "ListCurrencyRatesRequest",
]
