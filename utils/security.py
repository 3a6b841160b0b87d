"""
security helpers:
- Argon2 password hashing via argon2-cffi
- Session JWT creation/verification via PyJWT
- Opaque refresh token generation
- Authorization header parsing (Bearer / ApiKey)
"""
from __future__ import annotations

import secrets
from functools import lru_cache
from datetime import datetime, timedelta, timezone
from typing import Mapping

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError

ph = PasswordHasher()

TOKEN_ISSUER = "chirpy"
JWT_ALGORITHM = "HS256"
REFRESH_TOKEN_BYTES = 32


class TokenError(Exception):
    """Base class for session token validation failures."""


class MalformedToken(TokenError):
    pass


class InvalidSignature(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class MissingCredentials(Exception):
    """The Authorization header is absent or does not carry the expected scheme."""


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    if not password:
        raise ValueError("password must not be empty")
    return ph.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """ Verify a plaintext password against an Argon2 hash
    """
    try:
        return ph.verify(hashed_password, password)
    except (VerificationError, InvalidHashError):
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """A hash no password matches; verifying against it costs as much as a real check."""
    return ph.hash(secrets.token_hex(16))


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_session_token(user_id: str, secret: str, expires_in: timedelta, algorithm: str = JWT_ALGORITHM) -> str:
    """Issue a signed, self-contained session token for user_id."""
    issued_at = _now()
    payload = {
        "iss": TOKEN_ISSUER,
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_in).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def validate_session_token(token: str, secret: str, algorithm: str = JWT_ALGORITHM) -> str:
    """
    Validate a session token and return the user id it was issued for.
    Raises InvalidSignature, TokenExpired or MalformedToken.
    """
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            issuer=TOKEN_ISSUER,
            options={"require": ["exp", "iat", "sub", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpired("Token expired")
    except jwt.InvalidSignatureError:
        raise InvalidSignature("Token signature does not match")
    except jwt.InvalidTokenError as exc:
        raise MalformedToken(f"Invalid token: {exc}")

    subject = decoded.get("sub")
    if not isinstance(subject, str) or not subject:
        raise MalformedToken("Invalid token: missing subject")
    return subject


def make_refresh_token() -> str:
    """32 random bytes, hex encoded (64 chars)."""
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


def _get_authorization(headers: Mapping[str, str], scheme: str) -> str:
    auth = headers.get("Authorization", "") or ""
    prefix = f"{scheme} "
    if not auth.startswith(prefix):
        raise MissingCredentials(f"Missing or invalid Authorization header ({scheme})")
    value = auth[len(prefix):].strip()
    if not value:
        raise MissingCredentials(f"Empty {scheme} credential")
    return value


def get_bearer_token(headers: Mapping[str, str]) -> str:
    return _get_authorization(headers, "Bearer")


def get_api_key(headers: Mapping[str, str]) -> str:
    return _get_authorization(headers, "ApiKey")
