"""Exceptions raised by the Pub/Sub REST client."""

from pubsub_rest.models.error import ServiceError


class PubSubError(Exception):
    """Base class for recoverable errors reported by this library."""


class TransportError(PubSubError):
    """The HTTP exchange failed before a response was received."""


class SubscriptionNotFound(PubSubError):
    """The service reported the subscription as absent (HTTP 404)."""

    code = 404

    def __init__(self, name: str):
        super().__init__(f"Subscription '{name}' not found")
        self.name = name


class ServicePayloadError(PubSubError):
    """The response body carried an ``error`` object instead of message data."""

    def __init__(self, error: ServiceError):
        super().__init__(f"{error.code} {error.status}: {error.message}")
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def status(self) -> str:
        return self.error.status

    @property
    def message(self) -> str:
        return self.error.message


class InvalidResponseError(PubSubError):
    """The response body could not be parsed as a pull response."""


class DecodeError(PubSubError):
    """A single message could not be decoded or converted.

    Raised by ``EncodedMessage.decode`` and by ``MessageDecoder`` implementations.
    During a typed pull it is captured in the failing message's slot instead
    of aborting the batch.
    """


class ClientMissingError(RuntimeError):
    """An operation that contacts the service was called on a subscription without a client.

    This is a programming error, not an environmental one, so it does not
    derive from ``PubSubError``.
    """


class SubscriptionDestroyedError(ClientMissingError):
    """The subscription was already destroyed and can no longer be used."""
