"""Unit tests for the password reset token entity."""

from datetime import datetime, timedelta, timezone

from studyfi.domain.entities.reset_token import (
    ResetState,
    ResetToken,
    as_utc,
    hash_token,
    reset_state,
)

ISSUED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestResetToken:
    """Tests for ResetToken.generate."""

    def test_generate_default_ttl_is_one_hour(self):
        token = ResetToken.generate(ISSUED_AT)

        assert token.expires_at == ISSUED_AT + timedelta(hours=1)
        assert token.token_hash == hash_token(token.raw_token)

    def test_generate_custom_ttl(self):
        token = ResetToken.generate(ISSUED_AT, timedelta(minutes=15))
        assert token.expires_at == ISSUED_AT + timedelta(minutes=15)

    def test_tokens_are_unique(self):
        tokens = {ResetToken.generate(ISSUED_AT).raw_token for _ in range(50)}
        assert len(tokens) == 50

    def test_raw_token_is_url_safe(self):
        token = ResetToken.generate(ISSUED_AT)
        assert len(token.raw_token) >= 40
        assert all(c.isalnum() or c in "-_" for c in token.raw_token)

    def test_raw_token_not_in_repr(self):
        token = ResetToken.generate(ISSUED_AT)
        assert token.raw_token not in repr(token)

    def test_hash_is_sha256_hex(self):
        digest = hash_token("abc")
        assert digest == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestResetState:
    """Tests for reset_state and as_utc."""

    def test_idle_when_columns_are_null(self):
        assert reset_state(None, None, ISSUED_AT) is ResetState.IDLE

    def test_pending_before_expiry(self):
        expires_at = ISSUED_AT + timedelta(hours=1)
        assert reset_state("h", expires_at, ISSUED_AT) is ResetState.PENDING

    def test_pending_at_exact_expiry(self):
        expires_at = ISSUED_AT + timedelta(hours=1)
        assert reset_state("h", expires_at, expires_at) is ResetState.PENDING

    def test_expired_just_after_expiry(self):
        expires_at = ISSUED_AT + timedelta(hours=1)
        now = expires_at + timedelta(microseconds=1)
        assert reset_state("h", expires_at, now) is ResetState.EXPIRED

    def test_naive_expiry_treated_as_utc(self):
        naive_expiry = datetime(2026, 3, 1, 13, 0)
        assert reset_state("h", naive_expiry, ISSUED_AT) is ResetState.PENDING
        assert (
            reset_state("h", naive_expiry, ISSUED_AT + timedelta(hours=2))
            is ResetState.EXPIRED
        )

    def test_as_utc_converts_offsets(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2026, 3, 1, 14, 0, tzinfo=plus_two)
        assert as_utc(value) == ISSUED_AT
        assert as_utc(value).tzinfo == timezone.utc
