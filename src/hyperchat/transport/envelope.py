"""
Envelope wire codec — compact UTF-8 JSON records stored verbatim in a feed.

Record shape: {"type": ..., "content": ..., "timestamp": ..., "author": ...}
"""

from typing import Union

import pydantic
from pydantic_core import PydanticSerializationError

from hyperchat.errors import EncodeError, MalformedError, UnknownVariantError
from hyperchat.models.envelope import Envelope


def encode(envelope: Envelope) -> bytes:
    """Encode an envelope for the log. Does not validate."""
    try:
        return envelope.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as e:
        raise EncodeError(f"Envelope cannot be encoded: {e}") from e


def decode(data: Union[bytes, str]) -> Envelope:
    """Decode a record read back from the log. Does not validate.

    Only the wire key names are accepted and extra keys are ignored. A
    ``type`` string that is not a known tag raises
    UnknownVariantError; every other structural problem raises MalformedError.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedError(f"Envelope is not valid UTF-8: {e}") from e
    try:
        return Envelope.model_validate_json(data)
    except pydantic.ValidationError as e:
        errors = e.errors(include_url=False)
        for err in errors:
            if err["loc"] == ("type",) and err["type"] == "enum" and isinstance(err["input"], str):
                raise UnknownVariantError(err["input"]) from e
        raise MalformedError(
            f"Malformed envelope: {e.error_count()} error(s)",
            {"errors": [{"loc": list(err["loc"]), "type": err["type"], "msg": err["msg"]} for err in errors]},
        ) from e
