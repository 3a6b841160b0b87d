from __future__ import annotations

import logging

from flask import Blueprint, render_template

from api.metrics import get_hit_counter
from models import storage
from models.user import User
from utils.decorators import dev_only

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__)


@bp.get("/metrics")
def metrics():
    """
    File server hit count, as an HTML page
    ---
    tags:
      - Admin
    produces:
      - text/html
    responses:
      200:
        description: OK
    """
    html = render_template("admin/metrics.html", hits=get_hit_counter().value())
    return html, 200, {"Content-Type": "text/html; charset=utf-8"}


@bp.post("/reset")
@dev_only()
def reset():
    """
    Delete every user (chirps and refresh tokens cascade) and zero the hit counter. - dev only
    ---
    tags:
      - Admin
    responses:
      200:
        description: OK
      403:
        description: Not running on the dev platform
    """
    deleted = storage.delete_all(User)
    get_hit_counter().reset()
    logger.warning("Reset: deleted %d users and zeroed the hit counter", deleted)
    return "", 200
