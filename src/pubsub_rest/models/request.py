"""Request bodies for subscription operations."""

from pubsub_rest.models.base import CamelCaseModel


class PullRequest(CamelCaseModel):
    """Body of a ``:pull`` call."""

    max_messages: int


class AcknowledgeRequest(CamelCaseModel):
    """Body of an ``:acknowledge`` call."""

    ack_ids: list[str]
