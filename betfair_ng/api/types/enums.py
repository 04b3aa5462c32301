"""Enumerations of the Betfair exchange schema.

Members subclass ``str`` so they serialize to their wire values.
"""

from enum import Enum


class BetStatus(str, Enum):
    """Status of a cleared bet."""

    SETTLED = "SETTLED"
    VOIDED = "VOIDED"
    LAPSED = "LAPSED"
    CANCELLED = "CANCELLED"


class Side(str, Enum):
    BACK = "BACK"
    LAY = "LAY"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    LIMIT_ON_CLOSE = "LIMIT_ON_CLOSE"
    MARKET_ON_CLOSE = "MARKET_ON_CLOSE"


class PersistenceType(str, Enum):
    """What happens to an unmatched order when the market turns in-play."""

    LAPSE = "LAPSE"
    PERSIST = "PERSIST"
    MARKET_ON_CLOSE = "MARKET_ON_CLOSE"


class OrderStatus(str, Enum):
    EXECUTION_COMPLETE = "EXECUTION_COMPLETE"
    EXECUTABLE = "EXECUTABLE"


class OrderProjection(str, Enum):
    ALL = "ALL"
    EXECUTABLE = "EXECUTABLE"
    EXECUTION_COMPLETE = "EXECUTION_COMPLETE"


class MatchProjection(str, Enum):
    NO_ROLLUP = "NO_ROLLUP"
    ROLLED_UP_BY_PRICE = "ROLLED_UP_BY_PRICE"
    ROLLED_UP_BY_AVG_PRICE = "ROLLED_UP_BY_AVG_PRICE"


class MarketProjection(str, Enum):
    """Sections included in a market catalogue."""

    COMPETITION = "COMPETITION"
    EVENT = "EVENT"
    EVENT_TYPE = "EVENT_TYPE"
    MARKET_START_TIME = "MARKET_START_TIME"
    MARKET_DESCRIPTION = "MARKET_DESCRIPTION"
    RUNNER_DESCRIPTION = "RUNNER_DESCRIPTION"
    RUNNER_METADATA = "RUNNER_METADATA"


class MarketSort(str, Enum):
    MINIMUM_TRADED = "MINIMUM_TRADED"
    MAXIMUM_TRADED = "MAXIMUM_TRADED"
    MINIMUM_AVAILABLE = "MINIMUM_AVAILABLE"
    MAXIMUM_AVAILABLE = "MAXIMUM_AVAILABLE"
    FIRST_TO_START = "FIRST_TO_START"
    LAST_TO_START = "LAST_TO_START"


class MarketStatus(str, Enum):
    INACTIVE = "INACTIVE"
    OPEN = "OPEN"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


class MarketBettingType(str, Enum):
    ODDS = "ODDS"
    LINE = "LINE"
    RANGE = "RANGE"
    ASIAN_HANDICAP_DOUBLE_LINE = "ASIAN_HANDICAP_DOUBLE_LINE"
    ASIAN_HANDICAP_SINGLE_LINE = "ASIAN_HANDICAP_SINGLE_LINE"
    FIXED_ODDS = "FIXED_ODDS"


class OrderBy(str, Enum):
    BY_BET = "BY_BET"  # Deprecated alias of BY_PLACE_TIME
    BY_MARKET = "BY_MARKET"
    BY_MATCH_TIME = "BY_MATCH_TIME"
    BY_PLACE_TIME = "BY_PLACE_TIME"
    BY_SETTLED_TIME = "BY_SETTLED_TIME"
    BY_VOID_TIME = "BY_VOID_TIME"


class SortDir(str, Enum):
    EARLIEST_TO_LATEST = "EARLIEST_TO_LATEST"
    LATEST_TO_EARLIEST = "LATEST_TO_EARLIEST"


class GroupBy(str, Enum):
    EVENT_TYPE = "EVENT_TYPE"
    EVENT = "EVENT"
    MARKET = "MARKET"
    SIDE = "SIDE"
    BET = "BET"


class IncludeItem(str, Enum):
    ALL = "ALL"
    DEPOSITS_WITHDRAWALS = "DEPOSITS_WITHDRAWALS"
    EXCHANGE = "EXCHANGE"
    POKER_ROOM = "POKER_ROOM"


class TimeGranularity(str, Enum):
    DAYS = "DAYS"
    HOURS = "HOURS"
    MINUTES = "MINUTES"


class PriceData(str, Enum):
    SP_AVAILABLE = "SP_AVAILABLE"
    SP_TRADED = "SP_TRADED"
    EX_BEST_OFFERS = "EX_BEST_OFFERS"
    EX_ALL_OFFERS = "EX_ALL_OFFERS"
    EX_TRADED = "EX_TRADED"


class Wallet(str, Enum):
    UK = "UK"
    AUSTRALIAN = "AUSTRALIAN"


class ExecutionReportStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PROCESSED_WITH_ERRORS = "PROCESSED_WITH_ERRORS"
    TIMEOUT = "TIMEOUT"


class ExecutionReportErrorCode(str, Enum):
    ERROR_IN_MATCHER = "ERROR_IN_MATCHER"
    PROCESSED_WITH_ERRORS = "PROCESSED_WITH_ERRORS"
    BET_ACTION_ERROR = "BET_ACTION_ERROR"
    INVALID_ACCOUNT_STATE = "INVALID_ACCOUNT_STATE"
    INVALID_WALLET_STATUS = "INVALID_WALLET_STATUS"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    LOSS_LIMIT_EXCEEDED = "LOSS_LIMIT_EXCEEDED"
    MARKET_SUSPENDED = "MARKET_SUSPENDED"
    MARKET_NOT_OPEN_FOR_BETTING = "MARKET_NOT_OPEN_FOR_BETTING"
    DUPLICATE_TRANSACTION = "DUPLICATE_TRANSACTION"
    INVALID_ORDER = "INVALID_ORDER"
    INVALID_MARKET_ID = "INVALID_MARKET_ID"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    DUPLICATE_BETIDS = "DUPLICATE_BETIDS"
    NO_ACTION_REQUIRED = "NO_ACTION_REQUIRED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    REJECTED_BY_REGULATOR = "REJECTED_BY_REGULATOR"


class InstructionReportStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    TIMEOUT = "TIMEOUT"


class InstructionReportErrorCode(str, Enum):
    INVALID_BET_SIZE = "INVALID_BET_SIZE"
    INVALID_RUNNER = "INVALID_RUNNER"
    BET_TAKEN_OR_LAPSED = "BET_TAKEN_OR_LAPSED"
    BET_IN_PROGRESS = "BET_IN_PROGRESS"
    RUNNER_REMOVED = "RUNNER_REMOVED"
    MARKET_NOT_OPEN_FOR_BETTING = "MARKET_NOT_OPEN_FOR_BETTING"
    LOSS_LIMIT_EXCEEDED = "LOSS_LIMIT_EXCEEDED"
    MARKET_NOT_OPEN_FOR_BSP_BETTING = "MARKET_NOT_OPEN_FOR_BSP_BETTING"
    INVALID_PRICE_EDIT = "INVALID_PRICE_EDIT"
    INVALID_ODDS = "INVALID_ODDS"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_PERSISTENCE_TYPE = "INVALID_PERSISTENCE_TYPE"
    ERROR_IN_MATCHER = "ERROR_IN_MATCHER"
    INVALID_BACK_LAY_COMBINATION = "INVALID_BACK_LAY_COMBINATION"
    ERROR_IN_ORDER = "ERROR_IN_ORDER"
    INVALID_BID_TYPE = "INVALID_BID_TYPE"
    INVALID_BET_ID = "INVALID_BET_ID"
    CANCELLED_NOT_PLACED = "CANCELLED_NOT_PLACED"
    RELATED_ACTION_FAILED = "RELATED_ACTION_FAILED"
    NO_ACTION_REQUIRED = "NO_ACTION_REQUIRED"
