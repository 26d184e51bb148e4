"""httpx client implementing PubSubClient protocol."""

import logging
from typing import Optional

import httpx

from pubsub_rest.config import PubSubSettings
from pubsub_rest.errors import TransportError
from pubsub_rest.subscription import Subscription

logger = logging.getLogger(__name__)


class HttpClient:
    """
    httpx client implementing PubSubClient protocol.

    One instance is meant to be shared by every subscription of a process.
    The base URL is resolved once, from the settings given at construction.
    Token acquisition is left to the caller: pass a current OAuth2 access
    token, or none when talking to the emulator.
    """

    def __init__(
        self,
        settings: Optional[PubSubSettings] = None,
        token: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or PubSubSettings()
        self.base_url = self.settings.base_url
        self.token = token
        # Only close the underlying client if it was created here
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_s),
        )

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    def subscription(
        self,
        name: str,
        topic: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> Subscription:
        """Return a Subscription handle that sends its requests through this client."""
        return Subscription(name, topic=topic, client=self, logger=logger)

    def build_request(self, method: str, url: str, body: str = "") -> httpx.Request:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return self._http_client.build_request(method, url, content=body or None, headers=headers)

    async def send(self, request: httpx.Request) -> httpx.Response:
        try:
            response = await self._http_client.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e!r}") from e
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return response
