from datetime import timedelta

import pytest

from models import storage
from models.refresh_token import RefreshToken
from models.user import User
from utils.refresh_tokens import (
    issue_refresh_token,
    resolve_refresh_token,
    revoke_refresh_token,
    RefreshTokenExpired,
    RefreshTokenNotFound,
    RefreshTokenRevoked,
    REFRESH_TOKEN_TTL,
)
from utils.security import hash_password

pytestmark = [pytest.mark.db, pytest.mark.auth]


@pytest.fixture()
def db_user(app):
    u = User(email="jesse@breakingbad.com", hashed_password=hash_password("yo"))
    storage.new(u)
    storage.save()
    return u


def test_issue_then_resolve(db_user):
    token = issue_refresh_token(db_user.id)
    assert len(token) == 64
    assert resolve_refresh_token(token) == db_user.id


def test_issue_persists_sixty_day_expiry(db_user):
    token = issue_refresh_token(db_user.id)
    rt = storage.get(RefreshToken, token)
    assert REFRESH_TOKEN_TTL == timedelta(days=60)
    lifetime = rt.expires_at - rt.created_at
    assert timedelta(days=59, hours=23) < lifetime <= timedelta(days=60, seconds=1)
    assert rt.revoked_at is None


def test_resolve_unknown(app):
    with pytest.raises(RefreshTokenNotFound):
        resolve_refresh_token("0" * 64)


def test_resolve_expired(db_user):
    token = issue_refresh_token(db_user.id, expires_in=timedelta(seconds=-1))
    with pytest.raises(RefreshTokenExpired):
        resolve_refresh_token(token)


def test_resolve_revoked(db_user):
    token = issue_refresh_token(db_user.id)
    revoke_refresh_token(token)
    with pytest.raises(RefreshTokenRevoked):
        resolve_refresh_token(token)


def test_revoke_unknown(app):
    with pytest.raises(RefreshTokenNotFound):
        revoke_refresh_token("f" * 64)


def test_revoke_twice_keeps_first_timestamp(db_user):
    token = issue_refresh_token(db_user.id)
    first = revoke_refresh_token(token).revoked_at
    # second call loads the row back from the database
    storage.close()
    second = revoke_refresh_token(token).revoked_at
    assert first is not None
    assert second == first
    assert second.tzinfo is not None


def test_expiry_survives_reload(db_user):
    token = issue_refresh_token(db_user.id)
    storage.close()
    rt = storage.get(RefreshToken, token)
    assert rt.expires_at.utcoffset() == timedelta(0)
    assert resolve_refresh_token(token) == db_user.id
