"""Pub/Sub REST wire models."""
