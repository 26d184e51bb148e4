"""Error object embedded by the service in a JSON response body."""

from pubsub_rest.models.base import CamelCaseModel


class ServiceError(CamelCaseModel):
    """Structured error returned by the service in place of message data."""

    code: int = 0  # HTTP-equivalent status code (404, 403, ...)
    status: str = ""  # Canonical status name (NOT_FOUND, PERMISSION_DENIED, ...)
    message: str = ""
