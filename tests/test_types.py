"""Tests for request records and enumerations."""

from betfair_ng.api import (
    BetStatus,
    CancelOrdersRequest,
    FilterRequest,
    GetAccountStatementRequest,
    GroupBy,
    IncludeItem,
    ListClearedOrdersRequest,
    ListCurrentOrdersRequest,
    ListMarketBookRequest,
    ListTimeRangesRequest,
    MarketFilter,
    OrderProjection,
    PersistenceType,
    TimeGranularity,
    TimeRange,
    Wallet,
)
from betfair_ng.api.types.betting import compact, to_wire


class TestWireHelpers:
    def test_compact_drops_none(self):
        assert compact({"a": 1, "b": None, "c": ""}) == {"a": 1, "c": ""}

    def test_to_wire_enums(self):
        assert to_wire([Wallet.UK, {"side": GroupBy.MARKET}]) == ["UK", {"side": "MARKET"}]

    def test_str_enum_values(self):
        assert BetStatus.SETTLED == "SETTLED"
        assert TimeGranularity("HOURS") is TimeGranularity.HOURS


class TestMarketFilter:
    def test_empty(self):
        assert MarketFilter().to_dict() == {}

    def test_camel_case(self):
        market_filter = MarketFilter(
            text_query="Arsenal",
            event_type_ids=["1"],
            in_play_only=False,
            market_countries=["GB"],
            market_start_time=TimeRange(from_="2014-04-05T14:30Z"),
        )
        assert market_filter.to_dict() == {
            "textQuery": "Arsenal",
            "eventTypeIds": ["1"],
            "inPlayOnly": False,
            "marketCountries": ["GB"],
            "marketStartTime": {"from": "2014-04-05T14:30Z"},
        }


class TestRequests:
    def test_filter_request(self):
        request = FilterRequest(filter=MarketFilter(event_ids=["29"]), locale="en")
        assert request.to_dict() == {"filter": {"eventIds": ["29"]}, "locale": "en"}

    def test_filter_request_with_dict(self):
        assert FilterRequest(filter={}).to_dict() == {"filter": {}}

    def test_list_current_orders(self):
        request = ListCurrentOrdersRequest(
            market_ids=["1.1"], order_projection=OrderProjection.EXECUTABLE, record_count=10
        )
        assert request.to_dict() == {
            "marketIds": ["1.1"],
            "orderProjection": "EXECUTABLE",
            "recordCount": 10,
        }

    def test_list_cleared_orders(self):
        request = ListClearedOrdersRequest(bet_status=BetStatus.SETTLED, group_by="MARKET")
        assert request.to_dict() == {"betStatus": "SETTLED", "groupBy": "MARKET"}

    def test_list_market_book(self):
        request = ListMarketBookRequest(
            market_ids=["1.1"], price_projection={"priceData": ["EX_BEST_OFFERS"]}
        )
        assert request.to_dict() == {
            "marketIds": ["1.1"],
            "priceProjection": {"priceData": ["EX_BEST_OFFERS"]},
        }

    def test_list_time_ranges(self):
        request = ListTimeRangesRequest(filter=MarketFilter(), granularity=TimeGranularity.DAYS)
        assert request.to_dict() == {"filter": {}, "granularity": "DAYS"}

    def test_cancel_orders_empty(self):
        assert CancelOrdersRequest().to_dict() == {}

    def test_account_statement(self):
        request = GetAccountStatementRequest(
            include_item=IncludeItem.EXCHANGE,
            wallet=Wallet.UK,
            item_date_range=TimeRange(from_="2024-01-01T00:00Z", to="2024-02-01T00:00Z"),
        )
        assert request.to_dict() == {
            "includeItem": "EXCHANGE",
            "wallet": "UK",
            "itemDateRange": {"from": "2024-01-01T00:00Z", "to": "2024-02-01T00:00Z"},
        }

    def test_persistence_default(self):
        assert PersistenceType.LAPSE.value == "LAPSE"
