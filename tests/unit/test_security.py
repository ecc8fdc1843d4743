"""
Unit tests for tagscan.core.security
"""
import time

import jwt
import pytest
from tagscan.core.exceptions import (
    AuthError,
    ExpiredCredentialError,
    InvalidCredentialError,
    MissingCredentialError,
)
from tagscan.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    ensure_token_present,
    subject_from_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_garbage_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        payload = {"sub": "user-123", "email": "test@example.com"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(InvalidCredentialError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)
        assert exc_info.value.reason == "token_invalid"

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-1"})
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(ValueError):
            decode_jwt_token(tampered)

    def test_decode_expired_token_raises_expired(self, mock_settings):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "user-1", "iat": now - 120, "exp": now - 60},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(ExpiredCredentialError) as exc_info:
            decode_jwt_token(token)
        assert exc_info.value.reason == "token_expired"


class TestCredentialPresence:
    """Tests for ensure_token_present and subject_from_token"""

    @pytest.mark.parametrize("token", [None, "", "   ", "null", "undefined"])
    def test_absent_or_placeholder_rejected(self, token):
        with pytest.raises(MissingCredentialError):
            ensure_token_present(token)

    def test_surrounding_whitespace_stripped(self):
        assert ensure_token_present("  abc.def.ghi ") == "abc.def.ghi"

    def test_subject_from_valid_token(self, mock_settings):
        token = create_jwt_token({"sub": "usr-42"})
        assert subject_from_token(token) == "usr-42"

    def test_subject_missing_claim_rejected(self, mock_settings):
        token = create_jwt_token({"email": "nosub@example.com"})
        with pytest.raises(InvalidCredentialError, match="missing user ID"):
            subject_from_token(token)

    def test_undefined_never_reaches_decoder(self, mock_settings):
        with pytest.raises(AuthError) as exc_info:
            subject_from_token("undefined")
        assert exc_info.value.reason == "token_missing"
