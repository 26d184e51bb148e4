"""Client protocol definitions."""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class PubSubClient(Protocol):
    """
    Protocol for the HTTP client a subscription sends its requests through.

    The client is shared between subscriptions and must allow several
    requests in flight at once.
    """

    base_url: str

    def build_request(self, method: str, url: str, body: str = "") -> httpx.Request:
        """
        Build an authenticated request.

        Args:
            method: HTTP method ("POST", "DELETE", ...)
            url: Absolute request URL
            body: JSON request body, empty for none

        Returns:
            Request ready to be passed to send()
        """
        ...

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and wait for its response.

        Args:
            request: Request built with build_request()

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: If no response could be obtained
        """
        ...
