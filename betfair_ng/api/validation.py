"""Operation table and parameter validation for the API client."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .endpoints import Service
from .error import InvalidParameterError
from .types.betting import to_wire

PARAMS_NOT_MAPPING = "Parameters must be a hash ref or anonymous hash"

FILTER_REQUIRED = "Market Filter is Required"
MARKET_IDS_REQUIRED = "Market Ids are Required"
MARKET_ID_REQUIRED = "Market Id is Required"
CREDENTIALS_REQUIRED = "Username and Password Required"


@dataclass(frozen=True)
class OperationSpec:
    """One row of the operation table.

    ``required`` lists ``(field, message)`` pairs in the order they are
    checked. ``checks_status`` marks operations whose execution report must
    carry ``status == "SUCCESS"``.
    """

    name: str
    service: Service
    required: tuple[tuple[str, str], ...] = ()
    requires_app_key: bool = True
    checks_status: bool = False

    @property
    def path(self) -> str:
        if self.service is Service.NAVIGATION:
            return ""
        return f"/{self.name}/"


def _betting(name: str, *required: tuple[str, str], checks_status: bool = False) -> OperationSpec:
    return OperationSpec(name, Service.BETTING, tuple(required), checks_status=checks_status)


def _account(name: str, *required: tuple[str, str], requires_app_key: bool = True) -> OperationSpec:
    return OperationSpec(name, Service.ACCOUNT, tuple(required), requires_app_key=requires_app_key)


_OPERATION_LIST = [
    # Betting
    _betting("listCompetitions", ("filter", FILTER_REQUIRED)),
    _betting("listCountries", ("filter", FILTER_REQUIRED)),
    _betting("listCurrentOrders"),
    _betting("listClearedOrders", ("betStatus", "Bet Status is Required")),
    _betting("listEvents", ("filter", FILTER_REQUIRED)),
    _betting("listEventTypes", ("filter", FILTER_REQUIRED)),
    _betting("listMarketBook", ("marketIds", MARKET_IDS_REQUIRED)),
    _betting(
        "listMarketCatalogue",
        ("filter", FILTER_REQUIRED),
        ("maxResults", "maxResults is Required"),
    ),
    _betting("listMarketProfitAndLoss", ("marketIds", MARKET_IDS_REQUIRED)),
    _betting("listMarketTypes", ("filter", FILTER_REQUIRED)),
    _betting(
        "listTimeRanges",
        ("filter", FILTER_REQUIRED),
        ("granularity", "Time Granularity is Required"),
    ),
    _betting("listVenues", ("filter", FILTER_REQUIRED)),
    _betting(
        "placeOrders",
        ("marketId", MARKET_ID_REQUIRED),
        ("instructions", "Order Instructions are Required"),
        checks_status=True,
    ),
    _betting("cancelOrders"),
    _betting(
        "replaceOrders",
        ("marketId", MARKET_ID_REQUIRED),
        ("instructions", "Replace Instructions are Required"),
        checks_status=True,
    ),
    _betting(
        "updateOrders",
        ("marketId", MARKET_ID_REQUIRED),
        ("instructions", "Update Instructions are Required"),
        checks_status=True,
    ),
    # Accounts
    _account("createDeveloperAppKeys", ("appName", "App Name is Required"), requires_app_key=False),
    _account("getAccountDetails"),
    _account("getAccountFunds"),
    _account("getDeveloperAppKeys", requires_app_key=False),
    _account("getAccountStatement"),
    _account("listCurrencyRates"),
    # Navigation
    OperationSpec("navigationMenu", Service.NAVIGATION),
]

OPERATIONS: dict[str, OperationSpec] = {op.name: op for op in _OPERATION_LIST}


def is_missing(value: Any) -> bool:
    """Check whether a required field counts as absent.

    Absent, None, "", "0" and numeric zero are all missing. An empty filter
    mapping is present.
    """
    if value is None or isinstance(value, str) and value in ("", "0"):
        return True
    return isinstance(value, (int, float)) and value == 0


def validate_params(operation: str, params: Optional[Any]) -> dict:
    """Validate parameters for an operation before dispatch.

    Args:
        operation: Operation name from the operation table
        params: A mapping, a request record with ``to_dict()``, or None

    Returns:
        The parameters as plain JSON values, ready to encode

    Raises:
        InvalidParameterError: If params is not a mapping or a required field is missing
    """
    spec = OPERATIONS[operation]

    if params is None:
        if spec.required:
            raise InvalidParameterError(spec.required[0][1])
        return {}

    if hasattr(params, "to_dict"):
        params = params.to_dict()
    if not isinstance(params, Mapping):
        raise InvalidParameterError(PARAMS_NOT_MAPPING)

    for field_name, message in spec.required:
        if is_missing(params.get(field_name)):
            raise InvalidParameterError(message)

    return {key: to_wire(value) for key, value in params.items()}


def validate_credentials(credentials: Optional[Any]) -> tuple[str, str]:
    """Validate a username/password mapping for the login calls.

    Raises:
        InvalidParameterError: If credentials is not a mapping or lacks
            a username or password
    """
    if credentials is None:
        raise InvalidParameterError(CREDENTIALS_REQUIRED)
    if not isinstance(credentials, Mapping):
        raise InvalidParameterError(PARAMS_NOT_MAPPING)
    username = credentials.get("username")
    password = credentials.get("password")
    if not username or not password:
        raise InvalidParameterError(CREDENTIALS_REQUIRED)
    return str(username), str(password)
