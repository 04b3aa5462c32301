"""Service endpoints and per-operation routing."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional

from .error import ConfigurationError

DEFAULT_TIMEOUT_SECS = 5

# The navigation menu is a large static document and is slow to produce
NAVIGATION_TIMEOUT_SECS = 30

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Service(Enum):
    """Logical Betfair services a client can be pointed at."""

    BETTING = "betting"
    ACCOUNT = "account"
    NAVIGATION = "navigation"
    CERT_LOGIN = "cert_login"
    INTERACTIVE_LOGIN = "interactive_login"
    LOGOUT = "logout"
    KEEP_ALIVE = "keep_alive"


@dataclass
class Endpoints:
    """Host URLs for each service.

    Defaults point at the live exchange; override them to run against a
    mock service.
    """

    betting: str = "https://api.betfair.com/exchange/betting/rest/v1"
    account: str = "https://api.betfair.com/exchange/account/rest/v1.0"
    navigation: str = "https://api.betfair.com/exchange/betting/rest/v1/en/navigation/menu.json"
    cert_login: str = "https://identitysso.betfair.com/api/certlogin"
    interactive_login: str = "https://identitysso.betfair.com/api/login"
    logout: str = "https://identitysso.betfair.com/api/logout"
    keep_alive: str = "https://identitysso.betfair.com/api/keepAlive"

    @classmethod
    def from_dict(cls, data: dict) -> "Endpoints":
        """Create from a mapping of service name to host URL."""
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise ConfigurationError(f"Unknown endpoint {key}")
            if not isinstance(data[key], str):
                raise ConfigurationError(f"Endpoint {key} must be a URL string")
        return cls(**{key: value.rstrip("/") for key, value in data.items()})

    def host_for(self, service: Service) -> str:
        return getattr(self, service.value)


@dataclass(frozen=True)
class EndpointDescriptor:
    """Everything needed to reach one service."""

    service: Service
    host: str
    method: str = "POST"
    headers: dict[str, str] = field(default_factory=dict)
    timeout: int = DEFAULT_TIMEOUT_SECS
    requires_client_cert: bool = False


class EndpointRouter:
    """Resolves operations to endpoint descriptors."""

    def __init__(self, endpoints: Optional[Endpoints] = None):
        self._endpoints = endpoints or Endpoints()
        form = {"Content-Type": FORM_CONTENT_TYPE}
        self._descriptors = {
            Service.BETTING: EndpointDescriptor(
                Service.BETTING, self._endpoints.betting
            ),
            Service.ACCOUNT: EndpointDescriptor(
                Service.ACCOUNT, self._endpoints.account
            ),
            Service.NAVIGATION: EndpointDescriptor(
                Service.NAVIGATION,
                self._endpoints.navigation,
                method="GET",
                timeout=NAVIGATION_TIMEOUT_SECS,
            ),
            Service.CERT_LOGIN: EndpointDescriptor(
                Service.CERT_LOGIN,
                self._endpoints.cert_login,
                headers=form,
                requires_client_cert=True,
            ),
            Service.INTERACTIVE_LOGIN: EndpointDescriptor(
                Service.INTERACTIVE_LOGIN,
                self._endpoints.interactive_login,
                headers=form,
            ),
            Service.LOGOUT: EndpointDescriptor(
                Service.LOGOUT,
                self._endpoints.logout,
                method="GET",
                headers={"Connection": "Close"},
            ),
            Service.KEEP_ALIVE: EndpointDescriptor(
                Service.KEEP_ALIVE, self._endpoints.keep_alive, method="GET"
            ),
        }

    @property
    def endpoints(self) -> Endpoints:
        return self._endpoints

    @property
    def default(self) -> EndpointDescriptor:
        """The standing endpoint a client is parked on between calls."""
        return self._descriptors[Service.BETTING]

    def descriptor(self, service: Service) -> EndpointDescriptor:
        return self._descriptors[service]

    def route(self, operation: str) -> EndpointDescriptor:
        """Get the descriptor for a named API operation.

        Raises:
            KeyError: If the operation is not in the operation table
        """
        from .validation import OPERATIONS

        return self._descriptors[OPERATIONS[operation].service]
