"""
Feed — writes envelopes to an append-only log and reads them back.

The log itself (storage, replication, peer exchange) is a collaborator;
anything implementing AppendOnlyLog can back a Feed.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Protocol

from hyperchat.models.envelope import Clock, Envelope, MessageVariant
from hyperchat.transport.envelope import decode, encode

logger = logging.getLogger("hyperchat.feed")


class AppendOnlyLog(Protocol):
    def append(self, data: bytes) -> int: ...

    def get(self, index: int) -> bytes: ...

    def __len__(self) -> int: ...


class MemoryLog:
    """In-process log, one bytes entry per append."""

    def __init__(self) -> None:
        self._entries: list[bytes] = []

    def append(self, data: bytes) -> int:
        self._entries.append(bytes(data))
        return len(self._entries) - 1

    def get(self, index: int) -> bytes:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"log index out of range: {index}")
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)


class Feed:
    def __init__(self, log: AppendOnlyLog, author: str, clock: Optional[Clock] = None):
        self._log = log
        self._clock = clock
        self.author = author

    @property
    def log(self) -> AppendOnlyLog:
        return self._log

    def __len__(self) -> int:
        return len(self._log)

    def post(self, variant: MessageVariant, content: str) -> Envelope:
        """Create an envelope for this feed's author and append it."""
        envelope = Envelope.create(variant, content, self.author, clock=self._clock)
        self.append(envelope)
        return envelope

    def append(self, envelope: Envelope) -> int:
        """Validate, encode and append. Invalid envelopes raise and are not written."""
        envelope.validate()
        index = self._log.append(encode(envelope))
        logger.debug("Appended %s entry at index %d", envelope.variant.value, index)
        return index

    def read(self, index: int) -> Envelope:
        return decode(self._log.get(index))

    def entries(self) -> Iterator[Envelope]:
        for index in range(len(self._log)):
            yield self.read(index)
