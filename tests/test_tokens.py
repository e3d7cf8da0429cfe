"""Tests for session token issue / verify."""

import time
from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from studio.modules.auth.tokens import SessionTokens

SECRET = "super-secret-jwt-token-for-testing-only"


class TestSessionTokens:
    def test_round_trip_returns_user_id(self):
        tokens = SessionTokens(SECRET)
        assert tokens.verify(tokens.issue("user-123")) == "user-123"

    def test_expiry_is_seven_days_after_issue(self):
        issued_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        token = SessionTokens(SECRET).issue("user-123", now=issued_at)
        payload = pyjwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
        assert payload["sub"] == "user-123"
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_expired_token_is_rejected(self):
        tokens = SessionTokens(SECRET)
        token = tokens.issue("user-123", now=datetime.now(timezone.utc) - timedelta(days=8))
        assert tokens.verify(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        token = SessionTokens("wrong-secret").issue("user-123")
        assert SessionTokens(SECRET).verify(token) is None

    def test_tampered_payload_is_rejected(self):
        tokens = SessionTokens(SECRET)
        header, _, signature = tokens.issue("user-123").split(".")
        forged = pyjwt.encode(
            {"sub": "user-456", "exp": int(time.time()) + 3600}, "attacker", algorithm="HS256"
        ).split(".")[1]
        assert tokens.verify(f"{header}.{forged}.{signature}") is None

    @pytest.mark.parametrize("token", [None, "", "not.a.jwt", "garbage", "a.b"])
    def test_malformed_input_returns_none(self, token):
        assert SessionTokens(SECRET).verify(token) is None

    def test_token_without_sub_is_rejected(self):
        token = pyjwt.encode({"exp": int(time.time()) + 3600}, SECRET, algorithm="HS256")
        assert SessionTokens(SECRET).verify(token) is None

    def test_missing_secret_raises(self):
        with pytest.raises(ValueError):
            SessionTokens("")
