"""Envelope construction and validation."""

import pydantic
import pytest

from hyperchat import (
    MICROBLOG_MAX_CHARS,
    EmptyContentError,
    Envelope,
    MessageVariant,
    MicroblogTooLongError,
    now_ms,
)


def fixed_clock(value: int = 1_700_000_000_000):
    return lambda: value


class TestConstruction:
    def test_create_sets_fields(self):
        env = Envelope.create(MessageVariant.CHAT, "Hello, world!", "alice", clock=fixed_clock())
        assert env.variant is MessageVariant.CHAT
        assert env.content == "Hello, world!"
        assert env.author == "alice"
        assert env.created_at == 1_700_000_000_000

    def test_create_reads_wall_clock_by_default(self):
        before = now_ms()
        env = Envelope.create(MessageVariant.STATUS, "online", "alice")
        after = now_ms()
        assert before <= env.created_at <= after

    def test_empty_content_is_constructible(self):
        env = Envelope.create(MessageVariant.STATUS, "", "alice")
        assert env.content == ""
        with pytest.raises(EmptyContentError):
            env.validate()

    def test_accepts_wire_names(self):
        env = Envelope(type="microblog", content="hi", timestamp=5, author="bob")
        assert env.variant is MessageVariant.MICROBLOG
        assert env.created_at == 5

    def test_is_immutable(self):
        env = Envelope.create(MessageVariant.CHAT, "hi", "alice", clock=fixed_clock())
        with pytest.raises(pydantic.ValidationError):
            env.content = "changed"

    def test_structural_equality(self):
        a = Envelope.create(MessageVariant.CHAT, "hi", "alice", clock=fixed_clock())
        b = Envelope.create(MessageVariant.CHAT, "hi", "alice", clock=fixed_clock())
        assert a == b
        assert hash(a) == hash(b)


class TestValidation:
    @pytest.mark.parametrize("variant", list(MessageVariant))
    def test_empty_content_fails_for_every_variant(self, variant):
        env = Envelope.create(variant, "", "alice", clock=fixed_clock())
        with pytest.raises(EmptyContentError):
            env.validate()
        assert not env.is_valid

    def test_microblog_at_limit_is_valid(self):
        env = Envelope.create(MessageVariant.MICROBLOG, "a" * MICROBLOG_MAX_CHARS, "bob")
        env.validate()
        assert env.is_valid

    def test_microblog_over_limit_fails(self):
        env = Envelope.create(MessageVariant.MICROBLOG, "a" * 281, "bob")
        with pytest.raises(MicroblogTooLongError) as exc:
            env.validate()
        assert exc.value.details == {"length": 281, "limit": 280}

    def test_microblog_limit_counts_code_points(self):
        # 280 snakes are 1120 UTF-8 bytes
        env = Envelope.create(MessageVariant.MICROBLOG, "🐍" * 280, "bob")
        assert env.is_valid
        assert not Envelope.create(MessageVariant.MICROBLOG, "🐍" * 281, "bob").is_valid

    @pytest.mark.parametrize("variant", [MessageVariant.CHAT, MessageVariant.STATUS])
    def test_length_cap_only_applies_to_microblog(self, variant):
        env = Envelope.create(variant, "a" * 1000, "bob")
        env.validate()

    def test_validate_is_repeatable(self):
        env = Envelope.create(MessageVariant.CHAT, "Hello from Python!", "nolan")
        assert env.validate() is None
        assert env.validate() is None
