"""
Service layer for board messages.

``MessageService`` holds the business rules for listing and posting
messages on top of a ``MessageStore``.  One service (and one store) is
created per application by ``create_app`` and handed to the endpoints
through ``get_message_service``.
"""

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import Request

from message_board_api.app.core.errors import ValidationError
from message_board_api.app.schemas.message import Message, MessageCreate
from message_board_api.app.services.message_store import MessageStore

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageService:
    """List and create messages."""

    def __init__(self, store: MessageStore) -> None:
        self.store = store

    async def list_messages(self) -> List[Message]:
        """Return every stored message in posting order."""
        return self.store.snapshot()

    async def create_message(self, data: MessageCreate) -> Message:
        """Store a new message built from ``data`` and return it.

        Raises ``ValidationError`` if either field is empty, so callers
        that bypass request validation get the same error as the API.
        """
        if not data.author or not data.content:
            raise ValidationError()
        message = Message(
            id=self.store.next_id(),
            author=data.author.strip(),
            content=data.content.strip(),
            timestamp=utc_timestamp(),
        )
        self.store.append(message)
        logger.info("Message %s posted by %s", message.id, message.author)
        return message


def get_message_service(request: Request) -> MessageService:
    """FastAPI dependency returning the application's message service."""
    return request.app.state.message_service
