"""betfair-ng - Python client for the Betfair exchange JSON API.

Example:
    from betfair_ng import BetfairClient

    # Or import from the api module
    from betfair_ng.api import BetfairClient, MarketFilter
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import api

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM API MODULE
# ============================================================================

from .api import (
    BetfairClient,
    ClientConfig,
    Endpoints,
    SessionStatus,
    # Errors
    ErrorKind,
    ApiError,
    ConfigurationError,
    # Request types
    MarketFilter,
    TimeRange,
    LimitOrder,
    PlaceInstruction,
    FilterRequest,
    ListMarketCatalogueRequest,
    ListMarketBookRequest,
    OrdersRequest,
    # Enumerations
    BetStatus,
    Side,
    OrderType,
    PersistenceType,
    MarketProjection,
    TimeGranularity,
)

__all__ = [
    "__version__",
    "api",
    "BetfairClient",
    "ClientConfig",
    "Endpoints",
    "SessionStatus",
    "ErrorKind",
    "ApiError",
    "ConfigurationError",
    "MarketFilter",
    "TimeRange",
    "LimitOrder",
    "PlaceInstruction",
    "FilterRequest",
    "ListMarketCatalogueRequest",
    "ListMarketBookRequest",
    "OrdersRequest",
    "BetStatus",
    "Side",
    "OrderType",
    "PersistenceType",
    "MarketProjection",
    "TimeGranularity",
]
