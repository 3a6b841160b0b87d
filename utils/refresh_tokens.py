"""
Refresh token store.

Refresh tokens are opaque random strings persisted in the refresh_tokens table.
They stay usable until they expire (60 days by default) or are revoked.
"""
from __future__ import annotations

from datetime import timedelta
import logging

from models import storage
from models.base_model import utcnow
from models.refresh_token import RefreshToken
from utils.security import make_refresh_token

logger = logging.getLogger(__name__)

REFRESH_TOKEN_TTL = timedelta(days=60)


class RefreshTokenError(Exception):
    pass


class RefreshTokenNotFound(RefreshTokenError):
    pass


class RefreshTokenExpired(RefreshTokenError):
    pass


class RefreshTokenRevoked(RefreshTokenError):
    pass


def _lookup(token: str) -> RefreshToken:
    rt = storage.get(RefreshToken, token) if token else None
    if rt is None:
        raise RefreshTokenNotFound("Unknown refresh token")
    return rt


def issue_refresh_token(user_id: str, expires_in: timedelta = REFRESH_TOKEN_TTL) -> str:
    token = make_refresh_token()
    rt = RefreshToken(
        token=token,
        user_id=str(user_id),
        expires_at=utcnow() + expires_in,
    )
    storage.new(rt)
    storage.save()
    return token


def resolve_refresh_token(token: str) -> str:
    """Return the id of the user owning a live refresh token."""
    rt = _lookup(token)
    if rt.revoked:
        raise RefreshTokenRevoked("Refresh token has been revoked")
    if rt.is_expired(utcnow()):
        raise RefreshTokenExpired("Refresh token has expired")
    return rt.user_id


def revoke_refresh_token(token: str) -> RefreshToken:
    """Mark a refresh token revoked. Revoking twice keeps the first timestamp."""
    rt = _lookup(token)
    if rt.revoked:
        return rt
    now = utcnow()
    rt.revoked_at = now
    rt.updated_at = now
    storage.new(rt)
    storage.save()
    logger.info("Refresh token revoked for user %s", rt.user_id)
    return rt
