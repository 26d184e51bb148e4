"""Message handler protocol definitions."""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class AsyncMessageHandler(Protocol):
    """
    Async protocol for message handlers.

    Handlers receive decoded message objects and are responsible for:
    - Processing the message asynchronously
    - Handling their own domain errors
    """

    async def handle(self, message: Any) -> None:
        """
        Process a decoded message asynchronously.

        Args:
            message: Decoded message object (type depends on the consumer's request model)

        Note:
            If the handler raises, the message is not acknowledged and the
            service will redeliver it.
        """
        ...
