"""
In-memory message storage.

``MessageStore`` keeps messages in insertion order for the lifetime of
the process.  Nothing is persisted: a new store starts empty and is
discarded with the application that owns it.  Appends and reads are
serialised by a lock, so a snapshot never observes a half-finished
append even when handlers run on worker threads.
"""

import threading
import time
from typing import List

from message_board_api.app.schemas.message import Message


class MessageStore:
    """Ordered, append-only collection of messages."""

    def __init__(self) -> None:
        self._messages: List[Message] = []
        self._lock = threading.Lock()
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def next_id(self) -> str:
        """Return a new id derived from the current time in milliseconds.

        Two calls within the same millisecond (or after the clock steps
        backwards) still get distinct, increasing ids.
        """
        with self._lock:
            self._last_id = max(int(time.time() * 1000), self._last_id + 1)
            return str(self._last_id)

    def append(self, message: Message) -> Message:
        with self._lock:
            self._messages.append(message)
        return message

    def snapshot(self) -> List[Message]:
        """Return a copy of all messages, oldest first."""
        with self._lock:
            return list(self._messages)
