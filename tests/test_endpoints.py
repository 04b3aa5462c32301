"""Tests for service endpoints and routing."""

import pytest

from betfair_ng.api import (
    DEFAULT_TIMEOUT_SECS,
    NAVIGATION_TIMEOUT_SECS,
    OPERATIONS,
    ConfigurationError,
    EndpointRouter,
    Endpoints,
    Service,
)


class TestEndpoints:
    def test_defaults(self):
        endpoints = Endpoints()
        assert endpoints.betting == "https://api.betfair.com/exchange/betting/rest/v1"
        assert endpoints.account == "https://api.betfair.com/exchange/account/rest/v1.0"
        assert endpoints.cert_login == "https://identitysso.betfair.com/api/certlogin"
        assert endpoints.keep_alive == "https://identitysso.betfair.com/api/keepAlive"

    def test_from_dict(self):
        endpoints = Endpoints.from_dict({"account": "http://localhost:9000/account/"})
        assert endpoints.account == "http://localhost:9000/account"
        assert endpoints.betting == Endpoints().betting

    def test_from_dict_unknown(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Endpoints.from_dict({"scores": "http://localhost"})
        assert exc_info.value.message == "Unknown endpoint scores"

    def test_from_dict_non_string(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Endpoints.from_dict({"betting": 8080})
        assert exc_info.value.message == "Endpoint betting must be a URL string"

    def test_host_for(self):
        endpoints = Endpoints()
        assert endpoints.host_for(Service.LOGOUT) == endpoints.logout
        assert endpoints.host_for(Service.NAVIGATION) == endpoints.navigation


class TestEndpointRouter:
    @pytest.fixture
    def router(self):
        return EndpointRouter()

    def test_default_is_betting(self, router):
        assert router.default.service is Service.BETTING
        assert router.default.method == "POST"
        assert router.default.timeout == DEFAULT_TIMEOUT_SECS

    def test_navigation(self, router):
        descriptor = router.descriptor(Service.NAVIGATION)
        assert descriptor.method == "GET"
        assert descriptor.timeout == NAVIGATION_TIMEOUT_SECS

    def test_cert_login(self, router):
        descriptor = router.descriptor(Service.CERT_LOGIN)
        assert descriptor.requires_client_cert
        assert descriptor.headers == {"Content-Type": "application/x-www-form-urlencoded"}

    def test_logout_closes_connection(self, router):
        descriptor = router.descriptor(Service.LOGOUT)
        assert descriptor.method == "GET"
        assert descriptor.headers == {"Connection": "Close"}

    def test_only_cert_login_needs_certificate(self, router):
        needing = [s for s in Service if router.descriptor(s).requires_client_cert]
        assert needing == [Service.CERT_LOGIN]

    def test_route_operations(self, router):
        assert router.route("listMarketBook").service is Service.BETTING
        assert router.route("getAccountStatement").service is Service.ACCOUNT
        assert router.route("navigationMenu").service is Service.NAVIGATION

    def test_every_operation_routes(self, router):
        for name, spec in OPERATIONS.items():
            assert router.route(name).host == router.endpoints.host_for(spec.service)

    def test_unknown_operation(self, router):
        with pytest.raises(KeyError):
            router.route("listRaces")

    def test_custom_endpoints(self):
        router = EndpointRouter(Endpoints(account="http://localhost:9000"))
        assert router.descriptor(Service.ACCOUNT).host == "http://localhost:9000"
