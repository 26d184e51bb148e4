"""Decoder protocol definitions."""

from typing import Protocol, runtime_checkable

from pubsub_rest.models.message import EncodedMessage


@runtime_checkable
class MessageDecoder(Protocol):
    """
    Protocol for types that can be built from a pulled message.

    Implementations are passed as classes to ``Subscription.get_messages``.
    """

    @classmethod
    def from_message(cls, message: EncodedMessage) -> "MessageDecoder":
        """
        Convert an encoded message into an instance of the implementing type.

        Args:
            message: Message as received from the subscription

        Returns:
            Decoded domain object

        Raises:
            DecodeError: If the payload cannot be decoded or converted.
                The failure is recorded for this message only; the rest of
                the batch is still returned.
        """
        ...
