"""Request records for the Betfair betting API."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .enums import (
    BetStatus,
    GroupBy,
    MarketSort,
    MatchProjection,
    OrderBy,
    OrderProjection,
    OrderType,
    PersistenceType,
    Side,
    SortDir,
    TimeGranularity,
)


def to_wire(value: Any) -> Any:
    """Convert records, enums and containers of them to plain JSON values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    return value


def compact(data: dict) -> dict:
    """Drop unset optionals and convert the rest to wire values."""
    return {k: to_wire(v) for k, v in data.items() if v is not None}


@dataclass
class TimeRange:
    """ISO 8601 date range, e.g. ``2014-04-05T14:30Z``."""

    from_: Optional[str] = None
    to: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({"from": self.from_, "to": self.to})


@dataclass
class MarketFilter:
    """Selects the markets a listing call applies to.

    Every field is optional; an empty filter selects all markets.
    """

    text_query: Optional[str] = None
    exchange_ids: Optional[list[str]] = None
    event_type_ids: Optional[list[str]] = None
    event_ids: Optional[list[str]] = None
    competition_ids: Optional[list[str]] = None
    market_ids: Optional[list[str]] = None
    venues: Optional[list[str]] = None
    bsp_only: Optional[bool] = None
    turn_in_play_enabled: Optional[bool] = None
    in_play_only: Optional[bool] = None
    market_betting_types: Optional[list[str]] = None
    market_countries: Optional[list[str]] = None
    market_type_codes: Optional[list[str]] = None
    market_start_time: Optional[TimeRange] = None
    with_orders: Optional[list[str]] = None

    def to_dict(self) -> dict:
        return compact({
            "textQuery": self.text_query,
            "exchangeIds": self.exchange_ids,
            "eventTypeIds": self.event_type_ids,
            "eventIds": self.event_ids,
            "competitionIds": self.competition_ids,
            "marketIds": self.market_ids,
            "venues": self.venues,
            "bspOnly": self.bsp_only,
            "turnInPlayEnabled": self.turn_in_play_enabled,
            "inPlayOnly": self.in_play_only,
            "marketBettingTypes": self.market_betting_types,
            "marketCountries": self.market_countries,
            "marketTypeCodes": self.market_type_codes,
            "marketStartTime": self.market_start_time,
            "withOrders": self.with_orders,
        })


@dataclass
class LimitOrder:
    size: float
    price: float
    persistence_type: Union[PersistenceType, str] = PersistenceType.LAPSE

    def to_dict(self) -> dict:
        return compact({
            "size": self.size,
            "price": self.price,
            "persistenceType": self.persistence_type,
        })


@dataclass
class PlaceInstruction:
    """One order to place.

    ``limit_order`` is required for LIMIT orders; the on-close variants are
    passed as plain dicts.
    """

    selection_id: int
    side: Union[Side, str]
    order_type: Union[OrderType, str] = OrderType.LIMIT
    handicap: Optional[float] = None
    limit_order: Optional[LimitOrder] = None
    limit_on_close_order: Optional[dict] = None
    market_on_close_order: Optional[dict] = None

    def to_dict(self) -> dict:
        return compact({
            "orderType": self.order_type,
            "selectionId": self.selection_id,
            "handicap": self.handicap,
            "side": self.side,
            "limitOrder": self.limit_order,
            "limitOnCloseOrder": self.limit_on_close_order,
            "marketOnCloseOrder": self.market_on_close_order,
        })


# Nested shapes are accepted either as these records or as plain dicts
Filter = Union[MarketFilter, dict]
Instructions = list[Union[PlaceInstruction, dict]]


@dataclass
class FilterRequest:
    """Request for the market-filter listing calls.

    Used by listCompetitions, listCountries, listEvents, listEventTypes,
    listMarketTypes and listVenues.
    """

    filter: Filter
    locale: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({"filter": self.filter, "locale": self.locale})


@dataclass
class ListCurrentOrdersRequest:
    """Request for listCurrentOrders. All fields optional."""

    bet_ids: Optional[list[str]] = None
    market_ids: Optional[list[str]] = None
    order_projection: Optional[Union[OrderProjection, str]] = None
    customer_order_refs: Optional[list[str]] = None
    customer_strategy_refs: Optional[list[str]] = None
    date_range: Optional[TimeRange] = None
    order_by: Optional[Union[OrderBy, str]] = None
    sort_dir: Optional[Union[SortDir, str]] = None
    from_record: Optional[int] = None
    record_count: Optional[int] = None

    def to_dict(self) -> dict:
        return compact({
            "betIds": self.bet_ids,
            "marketIds": self.market_ids,
            "orderProjection": self.order_projection,
            "customerOrderRefs": self.customer_order_refs,
            "customerStrategyRefs": self.customer_strategy_refs,
            "dateRange": self.date_range,
            "orderBy": self.order_by,
            "sortDir": self.sort_dir,
            "fromRecord": self.from_record,
            "recordCount": self.record_count,
        })


@dataclass
class ListClearedOrdersRequest:
    """Request for listClearedOrders."""

    bet_status: Union[BetStatus, str]
    event_type_ids: Optional[list[str]] = None
    event_ids: Optional[list[str]] = None
    market_ids: Optional[list[str]] = None
    runner_ids: Optional[list[str]] = None
    bet_ids: Optional[list[str]] = None
    side: Optional[Union[Side, str]] = None
    settled_date_range: Optional[TimeRange] = None
    group_by: Optional[Union[GroupBy, str]] = None
    include_item_description: Optional[bool] = None
    locale: Optional[str] = None
    from_record: Optional[int] = None
    record_count: Optional[int] = None

    def to_dict(self) -> dict:
        return compact({
            "betStatus": self.bet_status,
            "eventTypeIds": self.event_type_ids,
            "eventIds": self.event_ids,
            "marketIds": self.market_ids,
            "runnerIds": self.runner_ids,
            "betIds": self.bet_ids,
            "side": self.side,
            "settledDateRange": self.settled_date_range,
            "groupBy": self.group_by,
            "includeItemDescription": self.include_item_description,
            "locale": self.locale,
            "fromRecord": self.from_record,
            "recordCount": self.record_count,
        })


@dataclass
class ListMarketBookRequest:
    """Request for listMarketBook."""

    market_ids: list[str]
    price_projection: Optional[dict] = None
    order_projection: Optional[Union[OrderProjection, str]] = None
    match_projection: Optional[Union[MatchProjection, str]] = None
    currency_code: Optional[str] = None
    locale: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({
            "marketIds": self.market_ids,
            "priceProjection": self.price_projection,
            "orderProjection": self.order_projection,
            "matchProjection": self.match_projection,
            "currencyCode": self.currency_code,
            "locale": self.locale,
        })


@dataclass
class ListMarketCatalogueRequest:
    """Request for listMarketCatalogue."""

    filter: Filter
    max_results: int
    market_projection: Optional[list[str]] = None
    sort: Optional[Union[MarketSort, str]] = None
    locale: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({
            "filter": self.filter,
            "marketProjection": self.market_projection,
            "sort": self.sort,
            "maxResults": self.max_results,
            "locale": self.locale,
        })


@dataclass
class ListMarketProfitAndLossRequest:
    """Request for listMarketProfitAndLoss."""

    market_ids: list[str]
    include_settled_bets: Optional[bool] = None
    include_bsp_bets: Optional[bool] = None
    net_of_commission: Optional[bool] = None

    def to_dict(self) -> dict:
        return compact({
            "marketIds": self.market_ids,
            "includeSettledBets": self.include_settled_bets,
            "includeBspBets": self.include_bsp_bets,
            "netOfCommission": self.net_of_commission,
        })


@dataclass
class ListTimeRangesRequest:
    """Request for listTimeRanges."""

    filter: Filter
    granularity: Union[TimeGranularity, str]

    def to_dict(self) -> dict:
        return compact({"filter": self.filter, "granularity": self.granularity})


@dataclass
class OrdersRequest:
    """Request for placeOrders, replaceOrders and updateOrders."""

    market_id: str
    instructions: Instructions
    customer_ref: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({
            "marketId": self.market_id,
            "instructions": self.instructions,
            "customerRef": self.customer_ref,
        })


@dataclass
class CancelOrdersRequest:
    """Request for cancelOrders.

    With no market id every unmatched bet on the account is cancelled.
    """

    market_id: Optional[str] = None
    instructions: Optional[list[dict]] = None
    customer_ref: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({
            "marketId": self.market_id,
            "instructions": self.instructions,
            "customerRef": self.customer_ref,
        })
