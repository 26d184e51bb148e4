"""Generic async message consumer for a Pub/Sub subscription."""

import logging
from typing import Type

from pubsub_rest.protocols.decoder import MessageDecoder
from pubsub_rest.protocols.handler import AsyncMessageHandler
from pubsub_rest.subscription import Subscription

logger = logging.getLogger(__name__)


class AsyncMessageConsumer:
    """
    Generic asynchronous message consumer for a Pub/Sub subscription.

    Responsibilities:
    - Pull batches from the subscription
    - Decode messages with the request model
    - Route decoded messages to the handler
    - Acknowledge handled messages

    The handler is responsible for:
    - Domain processing logic
    - Publishing results
    - Error handling
    """

    def __init__(
        self,
        subscription: Subscription,
        handler: AsyncMessageHandler,
        request_model: Type[MessageDecoder],
    ):
        """
        Initialize async message consumer.

        Args:
            subscription: Subscription to pull from
            handler: Async message handler implementing AsyncMessageHandler protocol
            request_model: MessageDecoder class used to decode each message
        """
        self.subscription = subscription
        self.handler = handler
        self.request_model = request_model
        self._running = False

    def start(self) -> None:
        """Start the message consumer."""
        self._running = True

    def stop(self) -> None:
        """Stop the message consumer."""
        self._running = False

    async def process_batch(self) -> int:
        """
        Process one pulled batch.

        Undecodable messages are logged and left unacknowledged, so the
        service redelivers them. If the handler raises, messages handled
        before it are still acknowledged and the exception propagates.

        Returns:
            Number of messages acknowledged
        """
        batch = await self.subscription.get_messages(self.request_model)

        handled: list[str] = []
        try:
            for item in batch:
                if not item.ok:
                    logger.warning(
                        "Skipping undecodable message on %s (ack_id=%s): %s",
                        self.subscription.name,
                        item.ack_id,
                        item.error,
                    )
                    continue

                await self.handler.handle(item.value)
                handled.append(item.ack_id)
        finally:
            if handled:
                await self.subscription.acknowledge_messages(handled)

        return len(handled)

    async def run(self) -> None:
        """
        Run the async message consumer loop.

        Continuously processes batches from the subscription while running.
        Call start() before run(), and stop() to exit the loop.
        """
        while self._running:
            await self.process_batch()
