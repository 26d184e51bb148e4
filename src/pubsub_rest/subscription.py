"""Subscription pull/acknowledge operations over the Pub/Sub REST API."""

import logging
from typing import Iterable, Optional, Type, TypeVar

from pydantic import ValidationError

from pubsub_rest.errors import (
    ClientMissingError,
    DecodeError,
    InvalidResponseError,
    ServicePayloadError,
    SubscriptionDestroyedError,
    SubscriptionNotFound,
    TransportError,
)
from pubsub_rest.models.message import RawMessage, ReceivedMessage
from pubsub_rest.models.request import AcknowledgeRequest, PullRequest
from pubsub_rest.models.response import DecodedMessage, PullResponse
from pubsub_rest.protocols.client import PubSubClient
from pubsub_rest.protocols.decoder import MessageDecoder

T = TypeVar("T", bound=MessageDecoder)

DEFAULT_MAX_MESSAGES = 100


class Subscription:
    """
    Handle on a named subscription.

    Responsibilities:
    - Pull batches of messages (typed or raw)
    - Acknowledge processed messages
    - Delete the subscription

    The client is borrowed: several subscriptions may share one client,
    and the client must outlive all of them. Delivery is at-least-once,
    so callers should acknowledge only after processing succeeds.
    """

    def __init__(
        self,
        name: str,
        topic: Optional[str] = None,
        client: Optional[PubSubClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize a subscription handle.

        Args:
            name: Full subscription path (e.g., 'projects/PROJECT_ID/subscriptions/NAME')
            topic: Full path of the topic the subscription is attached to, if known
            client: Client used to reach the service
            logger: Logger for failed or rejected acknowledgements (defaults to this module's logger)
        """
        self._name = name
        self.topic = topic
        self.max_messages = DEFAULT_MAX_MESSAGES
        self._client = client
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._destroyed = False

    def __repr__(self) -> str:
        return f"Subscription(name={self._name!r}, topic={self.topic!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def client(self) -> PubSubClient:
        """Return the client, failing loudly if the subscription has none."""
        if self._destroyed:
            raise SubscriptionDestroyedError(f"Subscription '{self._name}' was destroyed")
        if self._client is None:
            raise ClientMissingError("Subscription was not created using a client")
        return self._client

    def _url(self, action: str = "") -> str:
        return f"{self.client.base_url}/v1/{self._name}{action}"

    async def get_messages(self, decoder: Type[T]) -> list[DecodedMessage[T]]:
        """
        Pull a batch and decode each message with ``decoder.from_message``.

        A message that fails to decode does not abort the batch: its slot
        carries the DecodeError and its ack id, so the caller can skip it
        and still process the others.

        Args:
            decoder: Class implementing the MessageDecoder protocol

        Returns:
            One DecodedMessage per received message, in server order

        Raises:
            TransportError: If the request could not be sent
            SubscriptionNotFound: If the service answered 404
            ServicePayloadError: If the response carried an error object
            InvalidResponseError: If the response body could not be parsed
        """
        received = await self._pull()
        return [self._decode(decoder, envelope) for envelope in received]

    async def get_messages_raw(self) -> list[RawMessage]:
        """
        Pull a batch without decoding payloads.

        Returns:
            One RawMessage per received message, in server order

        Raises:
            Same errors as get_messages()
        """
        received = await self._pull()
        return [RawMessage.from_received(envelope) for envelope in received]

    async def acknowledge_messages(self, ack_ids: Iterable[str]) -> None:
        """
        Acknowledge messages by their ack ids.

        Transport failures are logged, not raised: an acknowledgement that
        never reaches the service only causes the message to be delivered
        again. A non-2xx answer is logged as a warning.

        Args:
            ack_ids: Ack ids from previous pulls on this subscription
        """
        client = self.client
        ids = list(ack_ids)
        if not ids:
            self._logger.debug("No ack ids to acknowledge on %s", self._name)
            return

        body = AcknowledgeRequest(ack_ids=ids).model_dump_json(by_alias=True)
        request = client.build_request("POST", self._url(":acknowledge"), body)

        try:
            response = await client.send(request)
        except TransportError as e:
            self._logger.error("Failed ACK: %s", e)
            return

        if response.is_error:
            self._logger.warning(
                "ACK rejected by %s (%s): %s", self._name, response.status_code, response.text
            )

    async def destroy(self) -> None:
        """
        Delete the subscription on the service.

        The handle is released even if the request fails; any further
        call on it raises SubscriptionDestroyedError.

        Raises:
            TransportError: If the request could not be sent
        """
        client = self.client
        request = client.build_request("DELETE", self._url())
        self._client = None
        self._destroyed = True
        await client.send(request)

    async def _pull(self) -> list[ReceivedMessage]:
        client = self.client
        body = PullRequest(max_messages=self.max_messages).model_dump_json(by_alias=True)
        request = client.build_request("POST", self._url(":pull"), body)

        response = await client.send(request)

        if response.status_code == 404:
            raise SubscriptionNotFound(self._name)

        try:
            pulled = PullResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected pull response ({response.status_code}) for '{self._name}': {e}"
            ) from e

        # An error object takes precedence over any messages in the same body
        if pulled.error is not None:
            raise ServicePayloadError(pulled.error)

        return pulled.received_messages or []

    @staticmethod
    def _decode(decoder: Type[T], envelope: ReceivedMessage) -> DecodedMessage[T]:
        try:
            value = decoder.from_message(envelope.message)
        except DecodeError as e:
            return DecodedMessage(ack_id=envelope.ack_id, error=e)
        except ValueError as e:
            error = DecodeError(str(e))
            error.__cause__ = e
            return DecodedMessage(ack_id=envelope.ack_id, error=error)
        return DecodedMessage(ack_id=envelope.ack_id, value=value)
