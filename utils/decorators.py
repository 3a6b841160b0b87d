from __future__ import annotations
from functools import wraps
import logging

from flask import request, g, abort, current_app
from utils.security import get_bearer_token, validate_session_token, MissingCredentials, TokenError

logger = logging.getLogger(__name__)


def jwt_required():
    """
    Require a valid session token in the Authorization header.
    The token is trusted on signature and expiry alone; the user id it
    carries is exposed as g.current_user_id.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                token = get_bearer_token(request.headers)
            except MissingCredentials as e:
                abort(401, description=str(e))
            try:
                user_id = validate_session_token(
                    token,
                    current_app.config["JWT_SECRET"],
                    current_app.config["JWT_ALGORITHM"],
                )
            except TokenError as e:
                logger.info("Rejected session token: %s", e)
                abort(401, description=str(e))

            g.current_user_id = user_id
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def dev_only():
    """Allow the view only when PLATFORM is "dev"; 403 otherwise."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if current_app.config.get("PLATFORM") != "dev":
                logger.warning("Refused dev-only route %s on platform %r", request.path, current_app.config.get("PLATFORM"))
                abort(403, description="Method only allowed on dev")
            return fn(*args, **kwargs)

        return wrapper

    return decorator
