"""Async client for pulling and acknowledging Pub/Sub messages over the REST API."""

from pubsub_rest.adapters.http import HttpClient
from pubsub_rest.config import PubSubSettings
from pubsub_rest.errors import (
    ClientMissingError,
    DecodeError,
    InvalidResponseError,
    PubSubError,
    ServicePayloadError,
    SubscriptionDestroyedError,
    SubscriptionNotFound,
    TransportError,
)
from pubsub_rest.models.message import EncodedMessage, JsonMessage, RawMessage
from pubsub_rest.models.response import DecodedMessage
from pubsub_rest.subscription import Subscription

__all__ = [
    "ClientMissingError",
    "DecodeError",
    "DecodedMessage",
    "EncodedMessage",
    "HttpClient",
    "InvalidResponseError",
    "JsonMessage",
    "PubSubError",
    "PubSubSettings",
    "RawMessage",
    "ServicePayloadError",
    "Subscription",
    "SubscriptionDestroyedError",
    "SubscriptionNotFound",
    "TransportError",
]
