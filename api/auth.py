"""
Authentication blueprint:
- POST /login
- POST /refresh
- POST /revoke

The implementation:
- Uses argon2 for password hashing (via utils.security)
- Issues short-lived session tokens (JWTs signed with JWT_ALGORITHM, HS256 by default)
- Issues long-lived opaque refresh tokens stored in the DB (RefreshToken model)
  so they can be revoked
"""
from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, abort, current_app

from models import storage
from models.user import User
from models.schemas.user import UserLoginSchema, UserOutSchema
from utils.refresh_tokens import (
    issue_refresh_token,
    resolve_refresh_token,
    revoke_refresh_token,
    RefreshTokenError,
    RefreshTokenNotFound,
)
from utils.security import (
    verify_password,
    dummy_password_hash,
    create_session_token,
    get_bearer_token,
    MissingCredentials,
)

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
user_out_schema = UserOutSchema()


def _session_token_for(user_id: str) -> str:
    return create_session_token(
        user_id,
        current_app.config["JWT_SECRET"],
        current_app.config["SESSION_TOKEN_EXPIRES"],
        current_app.config["JWT_ALGORITHM"],
    )


def _require_bearer() -> str:
    try:
        return get_bearer_token(request.headers)
    except MissingCredentials as e:
        abort(400, description=str(e))


@bp.post("/login")
def login():
    """
    Login: returns the user, a session token and a refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns tokens)
      400:
        description: Malformed body
      401:
        description: Unauthorized
    """
    payload = request.get_json(silent=True) or {}
    data = user_login_schema.load(payload)

    session = storage.get_session()
    user: User = session.query(User).filter(User.email == data["email"]).first()
    # unknown emails still pay for one argon2 verification
    hashed = user.hashed_password if user else dummy_password_hash()
    password_ok = verify_password(data["password"], hashed)
    if not user or not password_ok:
        logger.info("Failed login attempt")
        abort(401, description="Incorrect email or password")

    token = _session_token_for(user.id)
    refresh_token = issue_refresh_token(user.id, current_app.config["REFRESH_TOKEN_EXPIRES"])

    return jsonify(
        {
            "user": user_out_schema.dump(user),
            "token": token,
            "refresh_token": refresh_token,
        }
    ), 200


@bp.post("/refresh")
def refresh():
    """
    Exchange a refresh token for a new session token (the refresh token is unchanged)
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns token)
      400:
        description: Missing refresh token
      401:
        description: Unknown, expired or revoked refresh token
    """
    refresh_token = _require_bearer()
    try:
        user_id = resolve_refresh_token(refresh_token)
    except RefreshTokenError as e:
        abort(401, description=str(e))

    return jsonify({"token": _session_token_for(user_id)}), 200


@bp.post("/revoke")
def revoke():
    """
    Revoke a refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: Revoked (also when it already was)
      400:
        description: Missing refresh token
      500:
        description: Unknown refresh token, nothing to revoke
    """
    refresh_token = _require_bearer()
    try:
        revoke_refresh_token(refresh_token)
    except RefreshTokenNotFound as e:
        logger.warning("Revoke failed: %s", e)
        abort(500, description="Couldn't revoke session")

    return "", 204
