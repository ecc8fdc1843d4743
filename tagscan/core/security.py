# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import (
    ExpiredCredentialError,
    InvalidCredentialError,
    MissingCredentialError,
)

# Literal values some clients send when the stored token was never set
PLACEHOLDER_TOKENS = frozenset({"null", "undefined"})


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, email)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def ensure_token_present(token: Optional[str]) -> str:
    """
    Reject absent or placeholder credentials before any verification.

    Raises:
        MissingCredentialError: If token is empty, "null" or "undefined"
    """
    if token is None:
        raise MissingCredentialError("Not authorized, no token provided")
    token = token.strip()
    if not token or token in PLACEHOLDER_TOKENS:
        raise MissingCredentialError("Not authorized, token is malformed or missing")
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ExpiredCredentialError: If the token signature is valid but expired
        InvalidCredentialError: If the token is malformed or its signature is wrong
    """
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
        return decoded
    except ExpiredSignatureError as e:
        raise ExpiredCredentialError(f"Not authorized, token has expired: {str(e)}")
    except InvalidTokenError as e:
        raise InvalidCredentialError(f"Invalid token: {str(e)}")


def subject_from_token(token: Optional[str]) -> str:
    """
    Validate a bearer credential and return its subject (user id).

    Raises:
        AuthError subtype describing why the credential was rejected
    """
    payload = decode_jwt_token(ensure_token_present(token))
    user_id = payload.get("sub")
    if not user_id:
        raise InvalidCredentialError("Invalid authentication payload: missing user ID")
    return str(user_id)
