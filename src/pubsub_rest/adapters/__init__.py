"""Adapters implementing pubsub_rest protocols."""
