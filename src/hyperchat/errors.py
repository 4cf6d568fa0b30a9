"""
Hyperchat error types — envelope validation and wire codec failures.
"""

from typing import Any, Optional


class HyperchatError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ValidationError(HyperchatError):
    """Envelope content is not eligible for the log."""


class EmptyContentError(ValidationError):
    def __init__(self, message: str = "Content cannot be empty"):
        super().__init__("empty_content", message)


class MicroblogTooLongError(ValidationError):
    def __init__(self, length: int, limit: int):
        super().__init__(
            "microblog_too_long",
            f"Microblog posts must be {limit} characters or less (got {length})",
            {"length": length, "limit": limit},
        )


class DecodeError(HyperchatError):
    """Bytes read back from the log could not be turned into an envelope."""


class MalformedError(DecodeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("malformed", message, details)


class UnknownVariantError(DecodeError):
    def __init__(self, tag: Any):
        super().__init__("unknown_variant", f"Unknown message type: {tag!r}", {"tag": tag})


class EncodeError(HyperchatError):
    def __init__(self, message: str, code: str = "unrepresentable"):
        super().__init__(code, message)
