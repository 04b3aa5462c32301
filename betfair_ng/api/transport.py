"""HTTP transport used by the Betfair client.

The client only needs one capability from the network layer: perform a
single request and hand back the status, reason phrase and raw body. Any
object implementing :class:`Transport` can be injected, which is how the
tests run without touching the network.
"""

import asyncio
import logging
import ssl
from dataclasses import dataclass
from typing import Optional, Protocol, Union

import aiohttp

from .error import DeserializeError, HttpError

logger = logging.getLogger(__name__)


@dataclass
class ClientCertificate:
    """Paths to the client certificate and key used for mutual TLS."""

    cert_path: str
    key_path: str


@dataclass
class TransportResponse:
    """Raw outcome of one HTTP request."""

    status: int
    reason: str = ""
    body: str = ""

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}".strip()

    @property
    def ok(self) -> bool:
        return self.status == 200


class Transport(Protocol):
    """Minimal request/response capability."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        data: Optional[Union[str, dict[str, str]]] = None,
        timeout: float,
        cert: Optional[ClientCertificate] = None,
    ) -> TransportResponse:
        """Perform one request.

        Raises:
            HttpError: If the request could not be completed
            DeserializeError: If the body is not valid text
        """
        ...

    async def close(self) -> None:
        ...


class AiohttpTransport:
    """Transport backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(self):
        self._session: Optional[aiohttp.ClientSession] = None
        self._ssl_contexts: dict[tuple[str, str], ssl.SSLContext] = {}

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def _ssl_context(self, cert: ClientCertificate) -> ssl.SSLContext:
        key = (cert.cert_path, cert.key_path)
        if key not in self._ssl_contexts:
            context = ssl.create_default_context()
            context.load_cert_chain(cert.cert_path, cert.key_path)
            self._ssl_contexts[key] = context
        return self._ssl_contexts[key]

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        data: Optional[Union[str, dict[str, str]]] = None,
        timeout: float,
        cert: Optional[ClientCertificate] = None,
    ) -> TransportResponse:
        session = await self._ensure_session()
        kwargs = {
            "headers": headers,
            "data": data,
            "timeout": aiohttp.ClientTimeout(total=timeout),
        }
        if cert is not None:
            try:
                kwargs["ssl"] = self._ssl_context(cert)
            except (ssl.SSLError, OSError) as e:
                raise HttpError(f"Can't load client certificate: {e}")

        logger.debug(f"{method} {url} (timeout {timeout}s)")
        try:
            async with session.request(method, url, **kwargs) as response:
                try:
                    body = await response.text()
                except UnicodeDecodeError as e:
                    raise DeserializeError(f"Failed to decode response body: {e}")
                return TransportResponse(
                    status=response.status,
                    reason=response.reason or "",
                    body=body,
                )
        except asyncio.TimeoutError:
            raise HttpError(f"Request timed out after {timeout}s")
        except aiohttp.ClientError as e:
            raise HttpError(str(e) or type(e).__name__)

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
