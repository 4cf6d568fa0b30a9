"""
hyperchat — message envelopes for a peer-to-peer chat log.

Typed, validated envelopes with a canonical JSON encoding, plus a Feed that
writes them to any append-only log.
"""

from hyperchat.models.envelope import MICROBLOG_MAX_CHARS, Envelope, MessageVariant, now_ms
from hyperchat.transport.envelope import decode, encode
from hyperchat.feed import AppendOnlyLog, Feed, MemoryLog
from hyperchat.errors import (
    HyperchatError,
    ValidationError,
    EmptyContentError,
    MicroblogTooLongError,
    DecodeError,
    MalformedError,
    UnknownVariantError,
    EncodeError,
)

__version__ = "0.1.0"
__all__ = [
    "Envelope",
    "MessageVariant",
    "MICROBLOG_MAX_CHARS",
    "now_ms",
    "encode",
    "decode",
    "AppendOnlyLog",
    "Feed",
    "MemoryLog",
    "HyperchatError",
    "ValidationError",
    "EmptyContentError",
    "MicroblogTooLongError",
    "DecodeError",
    "MalformedError",
    "UnknownVariantError",
    "EncodeError",
]
