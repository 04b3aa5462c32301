"""Authentication state and scoped endpoint redirection."""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from .config import ClientConfig
from .endpoints import EndpointDescriptor
from .transport import ClientCertificate


class SessionStatus(Enum):
    """Whether the client holds a session token."""

    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class SessionState:
    """Mutable state shared by every call on one client.

    Holds the credentials, the session token and the host/headers/timeout the
    client currently targets. Outside of :meth:`redirect` the target is always
    the standing default endpoint.
    """

    def __init__(
        self,
        config: ClientConfig,
        default: EndpointDescriptor,
        user_agent: str,
    ):
        self.host = default.host
        self.timeout = default.timeout
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Connection": "Keep-Alive",
            "Accept-Encoding": "gzip",
            "User-Agent": user_agent,
        }
        self._certificate_path = ""
        self._key_path = ""
        self._application_key = ""
        self._session_token = ""
        self.set_certificate_path(config.certificate_path)
        self.set_key_path(config.key_path)
        self.set_application_key(config.application_key)
        self.set_session_token(config.session_token)

    @property
    def certificate_path(self) -> str:
        return self._certificate_path

    def set_certificate_path(self, path: Optional[str]) -> None:
        self._certificate_path = path or ""

    @property
    def key_path(self) -> str:
        return self._key_path

    def set_key_path(self, path: Optional[str]) -> None:
        self._key_path = path or ""

    @property
    def application_key(self) -> str:
        return self._application_key

    def set_application_key(self, key: Optional[str]) -> None:
        """Set the application key and the ``X-Application`` header with it."""
        self._application_key = key or ""
        self._set_header("X-Application", self._application_key)

    @property
    def session_token(self) -> str:
        return self._session_token

    def set_session_token(self, token: Optional[str]) -> None:
        """Set the session token and the ``X-Authentication`` header with it."""
        self._session_token = token or ""
        self._set_header("X-Authentication", self._session_token)

    @property
    def status(self) -> SessionStatus:
        if self._session_token:
            return SessionStatus.LOGGED_IN
        return SessionStatus.LOGGED_OUT

    @property
    def client_certificate(self) -> Optional[ClientCertificate]:
        if self._certificate_path and self._key_path:
            return ClientCertificate(self._certificate_path, self._key_path)
        return None

    def _set_header(self, name: str, value: str) -> None:
        if value:
            self.headers[name] = value
        else:
            self.headers.pop(name, None)

    @contextmanager
    def redirect(
        self,
        descriptor: EndpointDescriptor,
        headers: Optional[dict[str, str]] = None,
    ) -> Iterator["SessionState"]:
        """Point the client at another service for the duration of a block.

        Host, headers and timeout are restored on exit, whether the block
        returns normally or raises. Changes made to them inside the block
        are discarded, so a new session token must be stored after the
        block has exited.
        """
        saved_host = self.host
        saved_headers = dict(self.headers)
        saved_timeout = self.timeout

        self.host = descriptor.host
        self.timeout = descriptor.timeout
        self.headers.update(descriptor.headers)
        if headers:
            self.headers.update(headers)
        try:
            yield self
        finally:
            self.host = saved_host
            self.headers = saved_headers
            self.timeout = saved_timeout
