"""
Polka payment webhooks.

Polka calls POST /api/polka/webhooks with "Authorization: ApiKey <POLKA_KEY>".
Only user.upgraded events do anything: they flag the user as Chirpy Red.
Any other event is acknowledged with 204 so Polka stops retrying it.
"""
from __future__ import annotations

import hmac
import logging

from flask import Blueprint, request, abort, current_app

from models import storage
from models.user import User
from models.schemas.webhook import PolkaWebhookSchema, USER_UPGRADED
from utils.security import get_api_key, MissingCredentials

logger = logging.getLogger(__name__)

bp = Blueprint("webhooks", __name__)

polka_webhook_schema = PolkaWebhookSchema()


def _check_api_key():
    expected = current_app.config.get("POLKA_KEY")
    try:
        given = get_api_key(request.headers)
    except MissingCredentials as e:
        abort(401, description=str(e))
    if not expected or not hmac.compare_digest(given.encode(), expected.encode()):
        abort(401, description="Invalid API key")


@bp.post("/polka/webhooks")
def polka_webhook():
    """
    Polka webhook: upgrade a user to Chirpy Red
    ---
    tags:
      - Webhooks
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            event: { type: string, example: user.upgraded }
            data:
              type: object
              properties:
                user_id: { type: string }
    responses:
      204:
        description: Handled or ignored
      400:
        description: Malformed body
      401:
        description: Missing or wrong API key
      404:
        description: Unknown user
    """
    _check_api_key()

    payload = request.get_json(silent=True) or {}
    data = polka_webhook_schema.load(payload)
    if data["event"] != USER_UPGRADED:
        return "", 204
    if not data.get("data"):
        abort(400, description="data.user_id is required")

    user = storage.get(User, data["data"]["user_id"])
    if not user:
        abort(404, description="User not found")

    if not user.is_chirpy_red:
        user.is_chirpy_red = True
        user.save()
        logger.info("User %s upgraded to Chirpy Red", user.id)

    return "", 204
