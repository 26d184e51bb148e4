"""HTTP adapter for pubsub_rest protocols."""

from pubsub_rest.adapters.http.client import HttpClient

__all__ = ["HttpClient"]
