"""Betfair exchange API client implementation."""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union
from urllib.parse import urlencode

from .. import __version__
from .config import ClientConfig
from .endpoints import EndpointDescriptor, EndpointRouter, Endpoints, Service
from .error import (
    ApiError,
    DeserializeError,
    InvalidParameterError,
    LoginFailedError,
    MissingAppKeyError,
    MissingCredentialsError,
    NotLoggedInError,
    UnexpectedStatusError,
    check_execution_report,
    classify_status,
)
from .session import SessionState, SessionStatus
from .transport import AiohttpTransport, Transport, TransportResponse
from .types import (
    CancelOrdersRequest,
    CreateDeveloperAppKeysRequest,
    FilterRequest,
    GetAccountFundsRequest,
    GetAccountStatementRequest,
    ListClearedOrdersRequest,
    ListCurrencyRatesRequest,
    ListCurrentOrdersRequest,
    ListMarketBookRequest,
    ListMarketCatalogueRequest,
    ListMarketProfitAndLossRequest,
    ListTimeRangesRequest,
    OrdersRequest,
)
from .validation import OPERATIONS, validate_credentials, validate_params

logger = logging.getLogger(__name__)

USER_AGENT = f"betfair-ng/{__version__}"

# Sent as X-Application when logging in interactively without a key
LOGIN_PLACEHOLDER_APP_KEY = "login"


class BetfairClient:
    """Betfair exchange API client.

    Every operation performs at most one HTTP round trip. Failures are never
    raised to the caller: the operation returns ``None`` (``False`` for the
    session calls), ``last_error`` holds a short message and
    ``last_exception`` the classified error. ``last_error`` is not reset by
    later successful calls, so always check the return value first. A
    successful call can return an empty list, so test for ``None`` rather
    than falsiness.

    One client supports one operation at a time; use separate clients for
    concurrent work.

    Example:
        ```python
        async with BetfairClient({"applicationKey": app_key}) as client:
            if not await client.interactive_login({"username": user, "password": pw}):
                raise SystemExit(client.last_error)
            event_types = await client.list_event_types({"filter": {}})
        ```
    """

    def __init__(
        self,
        config: Optional[Union[ClientConfig, Mapping]] = None,
        *,
        endpoints: Optional[Union[Endpoints, Mapping]] = None,
        transport: Optional[Transport] = None,
    ):
        """Create a new client.

        Args:
            config: ClientConfig, or a mapping with any of the keys
                certificatePath, keyPath, applicationKey, sessionToken
            endpoints: Optional host overrides, e.g. for a mock service
            transport: Optional transport; defaults to an aiohttp transport

        Raises:
            ConfigurationError: If config or endpoints is malformed
        """
        if isinstance(endpoints, Mapping):
            endpoints = Endpoints.from_dict(endpoints)
        self._router = EndpointRouter(endpoints)
        self._state = SessionState(
            ClientConfig.coerce(config), self._router.default, USER_AGENT
        )
        self._transport: Transport = transport or AiohttpTransport()
        self._last_error = "OK"
        self._last_exception: Optional[ApiError] = None
        self._last_response: Any = {}

    async def __aenter__(self) -> "BetfairClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connection."""
        await self._transport.close()

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def application_key(self) -> str:
        return self._state.application_key

    def set_application_key(self, key: Optional[str]) -> None:
        """Set the application key.

        Also sets the ``X-Application`` header sent with every call, or
        removes it when the key is cleared.
        """
        self._state.set_application_key(key)

    @property
    def certificate_path(self) -> str:
        return self._state.certificate_path

    def set_certificate_path(self, path: Optional[str]) -> None:
        self._state.set_certificate_path(path)

    @property
    def key_path(self) -> str:
        return self._state.key_path

    def set_key_path(self, path: Optional[str]) -> None:
        self._state.set_key_path(path)

    @property
    def session_token(self) -> str:
        """The current session token, ``""`` when logged out."""
        return self._state.session_token

    def set_session_token(self, token: Optional[str]) -> None:
        """Set the session token and the ``X-Authentication`` header with it.

        Normally managed by login, keep-alive and logout, but a token obtained
        elsewhere can be supplied here.
        """
        self._state.set_session_token(token)

    @property
    def status(self) -> SessionStatus:
        return self._state.status

    @property
    def is_logged_in(self) -> bool:
        return self._state.status is SessionStatus.LOGGED_IN

    @property
    def last_error(self) -> str:
        """Message of the most recent failure, ``"OK"`` if none yet."""
        return self._last_error

    @property
    def last_exception(self) -> Optional[ApiError]:
        """The classified error behind ``last_error``."""
        return self._last_exception

    @property
    def last_response(self) -> Any:
        """Decoded body of the most recent call that got as far as the API.

        After a failed call this often holds the exchange's detailed error
        report.
        """
        return self._last_response

    @property
    def host(self) -> str:
        return self._state.host

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._state.headers)

    @property
    def timeout(self) -> float:
        return self._state.timeout

    # =========================================================================
    # Request pipeline
    # =========================================================================

    def _fail(self, error: ApiError) -> None:
        self._last_error = error.message
        self._last_exception = error
        logger.warning(f"Betfair call failed ({error.kind.value}): {error.message}")

    async def _send(
        self,
        descriptor: EndpointDescriptor,
        path: str = "",
        data: Optional[str] = None,
    ) -> TransportResponse:
        url = f"{self._state.host}{path}"
        cert = self._state.client_certificate if descriptor.requires_client_cert else None
        response = await self._transport.request(
            descriptor.method,
            url,
            headers=dict(self._state.headers),
            data=data,
            timeout=self._state.timeout,
            cert=cert,
        )
        logger.debug(f"{descriptor.method} {url} -> {response.status_line}")
        return response

    def _encode(self, body: dict) -> str:
        try:
            return json.dumps(body)
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(f"Parameters cannot be encoded as JSON: {e}")

    def _decode(self, response: TransportResponse) -> Any:
        try:
            return json.loads(response.body)
        except ValueError as e:
            raise DeserializeError(f"Failed to deserialize response: {e}")

    def _handle_response(self, response: TransportResponse) -> Any:
        """Decode a 200 response or raise the classified HTTP error."""
        if response.ok:
            self._last_response = self._decode(response)
            if self._last_response is None:
                raise DeserializeError("Empty response body")
            return self._last_response

        body = None
        if response.status == 400:
            try:
                body = self._decode(response)
                self._last_response = body
            except DeserializeError:
                body = None
        raise classify_status(response.status, response.status_line, body)

    def _handle_identity_response(
        self,
        response: TransportResponse,
        status_field: str = "status",
        error_field: str = "error",
    ) -> dict:
        """Decode a response from the identity service and check its status."""
        if not response.ok:
            raise UnexpectedStatusError(response.status, response.status_line)
        body = self._decode(response)
        self._last_response = body
        if not isinstance(body, dict):
            raise LoginFailedError(None)
        if body.get(status_field) != "SUCCESS":
            raise LoginFailedError(body.get(error_field))
        return body

    def _require_session(self) -> None:
        if not self._state.session_token:
            raise NotLoggedInError()

    async def _call_api(self, operation: str, params: Any = None) -> Optional[Any]:
        """Validate, dispatch and classify one API operation.

        Returns:
            The decoded response, or None on any failure
        """
        spec = OPERATIONS[operation]
        try:
            self._require_session()
            if spec.requires_app_key and not self._state.application_key:
                raise MissingAppKeyError()
            body = validate_params(operation, params)

            descriptor = self._router.route(operation)
            data = self._encode(body) if descriptor.method == "POST" else None
            with self._state.redirect(descriptor):
                response = await self._send(descriptor, spec.path, data)
            result = self._handle_response(response)

            if spec.checks_status:
                check_execution_report(result)
        except ApiError as e:
            self._fail(e)
            return None
        return result

    # =========================================================================
    # Session operations
    # =========================================================================

    async def login(self, credentials: Optional[Mapping]) -> bool:
        """Log in non-interactively with the configured client certificate.

        Args:
            credentials: Mapping with ``username`` and ``password``

        Returns:
            True if a session token was obtained
        """
        try:
            username, password = validate_credentials(credentials)
            self._require_certificate()
            descriptor = self._router.descriptor(Service.CERT_LOGIN)
            data = urlencode({"username": username, "password": password})
            with self._state.redirect(descriptor):
                response = await self._send(descriptor, data=data)
            body = self._handle_identity_response(
                response, status_field="loginStatus", error_field="loginStatus"
            )
        except ApiError as e:
            self._fail(e)
            return False

        self._state.set_session_token(body.get("sessionToken"))
        logger.info("Logged in with client certificate")
        return True

    def _require_certificate(self) -> None:
        if not self._state.certificate_path:
            raise MissingCredentialsError("SSL Client Certificate Required")
        if not self._state.key_path:
            raise MissingCredentialsError("SSL Client Key Required")

    async def interactive_login(self, credentials: Optional[Mapping]) -> bool:
        """Log in without a client certificate.

        Betfair recommends certificate login for unattended use.

        Args:
            credentials: Mapping with ``username`` and ``password``

        Returns:
            True if a session token was obtained
        """
        try:
            username, password = validate_credentials(credentials)
            descriptor = self._router.descriptor(Service.INTERACTIVE_LOGIN)
            headers = {}
            if not self._state.application_key:
                headers["X-Application"] = LOGIN_PLACEHOLDER_APP_KEY
            data = urlencode({"username": username, "password": password})
            with self._state.redirect(descriptor, headers):
                response = await self._send(descriptor, data=data)
            body = self._handle_identity_response(response)
        except ApiError as e:
            self._fail(e)
            return False

        self._state.set_session_token(body.get("token"))
        logger.info("Logged in interactively")
        return True

    async def logout(self) -> bool:
        """End the current session and clear the session token."""
        try:
            self._require_session()
            descriptor = self._router.descriptor(Service.LOGOUT)
            with self._state.redirect(descriptor):
                response = await self._send(descriptor)
            self._handle_identity_response(response)
        except ApiError as e:
            self._fail(e)
            return False

        self._state.set_session_token("")
        logger.info("Logged out")
        return True

    async def keep_alive(self) -> bool:
        """Extend the session.

        Sessions expire after a period of inactivity unless refreshed here;
        other calls do not reset the expiry.
        """
        try:
            self._require_session()
            if not self._state.application_key:
                raise MissingAppKeyError()
            descriptor = self._router.descriptor(Service.KEEP_ALIVE)
            with self._state.redirect(descriptor):
                response = await self._send(descriptor)
            body = self._handle_identity_response(response)
        except ApiError as e:
            self._fail(e)
            return False

        self._state.set_session_token(body.get("token"))
        logger.info("Session kept alive")
        return True

    # =========================================================================
    # Betting operations
    # =========================================================================

    async def list_competitions(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        """List competitions associated with the markets selected by ``filter``.

        Returns:
            List of CompetitionResult records
        """
        return await self._call_api("listCompetitions", params)

    async def list_countries(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        """List countries associated with the markets selected by ``filter``."""
        return await self._call_api("listCountries", params)

    async def list_current_orders(
        self, params: Optional[Union[ListCurrentOrdersRequest, Mapping]] = None
    ) -> Optional[dict]:
        """List current orders, optionally filtered and sorted.

        Returns at most 1000 orders per call; page with ``fromRecord`` and
        ``recordCount``.
        """
        return await self._call_api("listCurrentOrders", params)

    async def list_cleared_orders(
        self, params: Optional[Union[ListClearedOrdersRequest, Mapping]] = None
    ) -> Optional[dict]:
        """List settled, voided, lapsed or cancelled bets by ``betStatus``."""
        return await self._call_api("listClearedOrders", params)

    async def list_events(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        return await self._call_api("listEvents", params)

    async def list_event_types(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        return await self._call_api("listEventTypes", params)

    async def list_market_book(
        self, params: Optional[Union[ListMarketBookRequest, Mapping]] = None
    ) -> Optional[list]:
        """Get dynamic market data: prices, status, traded volume and own orders."""
        return await self._call_api("listMarketBook", params)

    async def list_market_catalogue(
        self, params: Optional[Union[ListMarketCatalogueRequest, Mapping]] = None
    ) -> Optional[list]:
        """Get static market information such as market and runner names."""
        return await self._call_api("listMarketCatalogue", params)

    async def list_market_profit_and_loss(
        self, params: Optional[Union[ListMarketProfitAndLossRequest, Mapping]] = None
    ) -> Optional[list]:
        return await self._call_api("listMarketProfitAndLoss", params)

    async def list_market_types(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        return await self._call_api("listMarketTypes", params)

    async def list_time_ranges(
        self, params: Optional[Union[ListTimeRangesRequest, Mapping]] = None
    ) -> Optional[list]:
        return await self._call_api("listTimeRanges", params)

    async def list_venues(self, params: Optional[Union[FilterRequest, Mapping]] = None) -> Optional[list]:
        return await self._call_api("listVenues", params)

    async def place_orders(self, params: Optional[Union[OrdersRequest, Mapping]] = None) -> Optional[dict]:
        """Place new orders on a market.

        All instructions are placed or none are. A report whose status is not
        SUCCESS is a failure; the full report stays in ``last_response``.
        """
        return await self._call_api("placeOrders", params)

    async def cancel_orders(
        self, params: Optional[Union[CancelOrdersRequest, Mapping]] = None
    ) -> Optional[dict]:
        """Cancel orders. With no parameters, cancels ALL unmatched bets."""
        return await self._call_api("cancelOrders", params)

    async def replace_orders(self, params: Optional[Union[OrdersRequest, Mapping]] = None) -> Optional[dict]:
        """Cancel orders and place replacements at new prices."""
        return await self._call_api("replaceOrders", params)

    async def update_orders(self, params: Optional[Union[OrdersRequest, Mapping]] = None) -> Optional[dict]:
        """Update non-exposure-changing fields, such as persistence type."""
        return await self._call_api("updateOrders", params)

    async def navigation_menu(self) -> Optional[dict]:
        """Get the full navigation menu tree of event types, events and markets."""
        return await self._call_api("navigationMenu")

    # =========================================================================
    # Account operations
    # =========================================================================

    async def create_developer_app_keys(
        self, params: Optional[Union[CreateDeveloperAppKeysRequest, Mapping]] = None
    ) -> Optional[dict]:
        """Create a live and a delayed application key.

        Fails if keys already exist for the account.
        """
        return await self._call_api("createDeveloperAppKeys", params)

    async def get_account_details(self) -> Optional[dict]:
        return await self._call_api("getAccountDetails")

    async def get_account_funds(
        self, params: Optional[Union[GetAccountFundsRequest, Mapping]] = None
    ) -> Optional[dict]:
        """Get the available-to-bet balance and exposure."""
        return await self._call_api("getAccountFunds", params)

    async def get_developer_app_keys(self) -> Optional[list]:
        """Get the application keys owned by the account.

        Works without an application key, so a new client can fetch its key
        here and pass it to ``set_application_key``.
        """
        return await self._call_api("getDeveloperAppKeys")

    async def get_account_statement(
        self, params: Optional[Union[GetAccountStatementRequest, Mapping]] = None
    ) -> Optional[dict]:
        return await self._call_api("getAccountStatement", params)

    async def list_currency_rates(
        self, params: Optional[Union[ListCurrencyRatesRequest, Mapping]] = None
    ) -> Optional[list]:
        return await self._call_api("listCurrencyRates", params)
