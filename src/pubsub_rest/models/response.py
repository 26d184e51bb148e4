"""Response models for subscription operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from pubsub_rest.errors import DecodeError
from pubsub_rest.models.base import CamelCaseModel
from pubsub_rest.models.error import ServiceError
from pubsub_rest.models.message import ReceivedMessage

T = TypeVar("T")


class PullResponse(CamelCaseModel):
    """Body of a ``:pull`` response."""

    received_messages: Optional[list[ReceivedMessage]] = None
    error: Optional[ServiceError] = None


@dataclass
class DecodedMessage(Generic[T]):
    """One slot of a typed pull: either a decoded value or the reason it failed."""

    ack_id: str
    value: Optional[T] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
