"""
Message endpoints.

Anyone may list the board or post to it; there is no authentication.
Validation failures are reported as ``400 {"error": ...}`` by the
exception handlers registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from message_board_api.app.schemas.message import Message, MessageCreate
from message_board_api.app.services.message_service import MessageService, get_message_service

router = APIRouter()


@router.get("", response_model=List[Message])
async def list_messages(service: MessageService = Depends(get_message_service)) -> List[Message]:
    """Return all messages, oldest first."""
    return await service.list_messages()


@router.post("", response_model=Message, status_code=status.HTTP_201_CREATED)
async def create_message(
    message_in: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> Message:
    """Post a new message.

    The body must contain non-empty ``author`` and ``content`` strings.
    Both are stored with surrounding whitespace removed.
    """
    return await service.create_message(message_in)
