"""
Message envelope — the unit of data appended to a feed.

Construction never fails; validity is a separate, explicit check so that
transient envelopes (previews, drafts) can exist without being writable.
"""

import time
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from hyperchat.errors import EmptyContentError, MicroblogTooLongError

MICROBLOG_MAX_CHARS = 280
U64_MAX = 2**64 - 1

Clock = Callable[[], int]


def now_ms() -> int:
    """Wall-clock milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class MessageVariant(str, Enum):
    # Wire tag for chat messages is "message", kept for existing feed readers.
    CHAT = "message"
    STATUS = "status"
    MICROBLOG = "microblog"


class Envelope(BaseModel):
    variant: MessageVariant = Field(alias="type")
    content: str
    created_at: int = Field(alias="timestamp", ge=0, le=U64_MAX, strict=True)
    author: str  # display label only, unauthenticated

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        variant: MessageVariant,
        content: str,
        author: str,
        clock: Optional[Clock] = None,
    ) -> "Envelope":
        """Build an envelope stamped with the current time. Does not validate."""
        return cls(
            type=variant,
            content=content,
            timestamp=(clock or now_ms)(),
            author=author,
        )

    def validate(self) -> None:
        """Raise EmptyContentError or MicroblogTooLongError if not writable."""
        if not self.content:
            raise EmptyContentError()
        if self.variant is MessageVariant.MICROBLOG and len(self.content) > MICROBLOG_MAX_CHARS:
            raise MicroblogTooLongError(len(self.content), MICROBLOG_MAX_CHARS)

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except (EmptyContentError, MicroblogTooLongError):
            return False
        return True
