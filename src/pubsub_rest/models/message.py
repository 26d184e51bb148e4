"""Message models matching the Pub/Sub REST structure."""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from pubsub_rest.errors import DecodeError
from pubsub_rest.models.base import CamelCaseModel


class EncodedMessage(CamelCaseModel):
    """
    Message payload in transit.

    ``data`` holds base64 text. ``publish_time`` and ``message_id`` are
    assigned by the service: they are read from responses but never sent.
    """

    data: str
    attributes: Optional[dict[str, str]] = None
    publish_time: Optional[str] = Field(default=None, exclude=True)
    message_id: Optional[str] = Field(default=None, exclude=True)

    @classmethod
    def from_payload(cls, payload: Any) -> "EncodedMessage":
        """
        Build an outgoing message from a JSON-serializable value.

        Args:
            payload: Any value ``json.dumps`` accepts, or a Pydantic model

        Returns:
            EncodedMessage with base64 JSON data and no attributes
        """
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True)
        text = json.dumps(payload)
        return cls(data=base64.b64encode(text.encode("utf-8")).decode("ascii"))

    def decode(self) -> bytes:
        """Return the raw payload bytes, raising DecodeError on invalid base64."""
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid base64 message data: {e}") from e

    def decode_json(self) -> Any:
        """Decode the payload and parse it as JSON."""
        raw = self.decode()
        try:
            return json.loads(raw)
        except ValueError as e:
            raise DecodeError(f"Message data is not valid JSON: {e}") from e

    def to_wire(self) -> dict[str, Any]:
        """Serialize for transmission (server-assigned fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ReceivedMessage(CamelCaseModel):
    """A delivered message paired with the ack id of this delivery attempt."""

    ack_id: str
    message: EncodedMessage


@dataclass(frozen=True)
class RawMessage:
    """Flattened, decode-agnostic view of a received message."""

    ack_id: str
    data: str
    attributes: Optional[dict[str, str]] = None
    publish_time: Optional[str] = None
    message_id: Optional[str] = None

    @classmethod
    def from_received(cls, received: ReceivedMessage) -> "RawMessage":
        message = received.message
        return cls(
            ack_id=received.ack_id,
            data=message.data,
            attributes=message.attributes,
            publish_time=message.publish_time,
            message_id=message.message_id,
        )


class JsonMessage(BaseModel):
    """
    Base model for payloads published as base64-encoded JSON.

    Subclasses declare their fields as usual and can be passed directly to
    ``Subscription.get_messages``:

        class Order(JsonMessage):
            order_id: str

        batch = await subscription.get_messages(Order)
    """

    @classmethod
    def from_message(cls, message: EncodedMessage):
        raw = message.decode()
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"Message does not match {cls.__name__}: {e}") from e
