"""Tests for the operation table and parameter validation."""

import pytest

from betfair_ng.api import (
    OPERATIONS,
    InvalidParameterError,
    ListMarketCatalogueRequest,
    MarketFilter,
    PlaceInstruction,
    Service,
    Side,
    validate_params,
)
from betfair_ng.api.validation import PARAMS_NOT_MAPPING, validate_credentials


class TestOperationTable:
    def test_required_fields(self):
        assert OPERATIONS["listMarketCatalogue"].required == (
            ("filter", "Market Filter is Required"),
            ("maxResults", "maxResults is Required"),
        )
        assert OPERATIONS["listClearedOrders"].required == (
            ("betStatus", "Bet Status is Required"),
        )
        assert OPERATIONS["createDeveloperAppKeys"].required == (
            ("appName", "App Name is Required"),
        )

    @pytest.mark.parametrize(
        "name",
        [
            "listCurrentOrders",
            "cancelOrders",
            "getAccountDetails",
            "getAccountFunds",
            "getDeveloperAppKeys",
            "getAccountStatement",
            "listCurrencyRates",
        ],
    )
    def test_operations_without_required_fields(self, name):
        assert OPERATIONS[name].required == ()

    def test_services(self):
        assert OPERATIONS["listEvents"].service is Service.BETTING
        assert OPERATIONS["getAccountFunds"].service is Service.ACCOUNT
        assert OPERATIONS["navigationMenu"].service is Service.NAVIGATION

    def test_app_key_exemptions(self):
        exempt = {name for name, op in OPERATIONS.items() if not op.requires_app_key}
        assert exempt == {"createDeveloperAppKeys", "getDeveloperAppKeys"}

    def test_status_checked_operations(self):
        checked = {name for name, op in OPERATIONS.items() if op.checks_status}
        assert checked == {"placeOrders", "replaceOrders", "updateOrders"}

    def test_paths(self):
        assert OPERATIONS["listMarketBook"].path == "/listMarketBook/"
        assert OPERATIONS["navigationMenu"].path == ""


class TestValidateParams:
    @pytest.mark.parametrize(
        "operation,params,message",
        [
            ("listCompetitions", {}, "Market Filter is Required"),
            ("listCountries", {"locale": "en"}, "Market Filter is Required"),
            ("listMarketTypes", {}, "Market Filter is Required"),
            ("listEvents", {}, "Market Filter is Required"),
            ("listEventTypes", {"filter": None}, "Market Filter is Required"),
            ("listVenues", {"filter": ""}, "Market Filter is Required"),
            ("listMarketBook", {}, "Market Ids are Required"),
            ("listMarketProfitAndLoss", {}, "Market Ids are Required"),
            ("listMarketCatalogue", {"filter": {}}, "maxResults is Required"),
            ("listTimeRanges", {"filter": {}}, "Time Granularity is Required"),
            ("placeOrders", {"instructions": []}, "Market Id is Required"),
            ("placeOrders", {"marketId": "1.1"}, "Order Instructions are Required"),
            ("replaceOrders", {"marketId": "1.1"}, "Replace Instructions are Required"),
            ("updateOrders", {"marketId": "1.1"}, "Update Instructions are Required"),
            ("createDeveloperAppKeys", {"appName": ""}, "App Name is Required"),
            ("listClearedOrders", {"betStatus": None}, "Bet Status is Required"),
            ("listClearedOrders", {"betStatus": "0"}, "Bet Status is Required"),
            ("listMarketCatalogue", {"filter": {}, "maxResults": 0}, "maxResults is Required"),
            ("listMarketCatalogue", {"filter": {}, "maxResults": 0.0}, "maxResults is Required"),
        ],
    )
    def test_missing_required_field(self, operation, params, message):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_params(operation, params)
        assert exc_info.value.message == message

    def test_no_params_reports_first_required_field(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_params("listMarketCatalogue", None)
        assert exc_info.value.message == "Market Filter is Required"

    def test_no_params_for_optional_operation(self):
        assert validate_params("listCurrentOrders", None) == {}

    @pytest.mark.parametrize("params", [["filter"], "filter", 42])
    def test_non_mapping(self, params):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_params("listEvents", params)
        assert exc_info.value.message == PARAMS_NOT_MAPPING

    def test_empty_filter_is_present(self):
        assert validate_params("listEvents", {"filter": {}}) == {"filter": {}}

    def test_optional_fields_pass_through(self):
        params = {"filter": {"eventTypeIds": ["1"]}, "locale": "en", "extra": {"nested": [1]}}
        assert validate_params("listEvents", params) == params

    def test_request_record(self):
        request = ListMarketCatalogueRequest(
            filter=MarketFilter(event_type_ids=["7"]), max_results=10
        )
        assert validate_params("listMarketCatalogue", request) == {
            "filter": {"eventTypeIds": ["7"]},
            "maxResults": 10,
        }

    def test_nested_records_become_plain_values(self):
        params = {
            "marketId": "1.1",
            "instructions": [PlaceInstruction(selection_id=1, side=Side.BACK)],
            "filter": MarketFilter(in_play_only=True),
        }
        assert validate_params("placeOrders", params) == {
            "marketId": "1.1",
            "instructions": [{"orderType": "LIMIT", "selectionId": 1, "side": "BACK"}],
            "filter": {"inPlayOnly": True},
        }

    def test_nonzero_values_present(self):
        params = {"filter": {}, "maxResults": 1}
        assert validate_params("listMarketCatalogue", params) == params

    def test_error_str_has_prefix(self):
        error = InvalidParameterError("Market Filter is Required")
        assert str(error) == "Invalid parameter: Market Filter is Required"


class TestValidateCredentials:
    def test_valid(self):
        assert validate_credentials({"username": "user", "password": "pw"}) == ("user", "pw")

    @pytest.mark.parametrize(
        "credentials",
        [None, {}, {"username": "user"}, {"password": "pw"}, {"username": "", "password": "pw"}],
    )
    def test_missing(self, credentials):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_credentials(credentials)
        assert exc_info.value.message == "Username and Password Required"

    def test_non_mapping(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_credentials(("user", "pw"))
        assert exc_info.value.message == PARAMS_NOT_MAPPING
