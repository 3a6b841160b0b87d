"""
Static file server mounted under /app/.
Every request that reaches this blueprint bumps the hit counter, found or not.
"""
from flask import Blueprint, current_app, send_from_directory

from api.metrics import get_hit_counter

bp = Blueprint("fileserver", __name__)


@bp.before_request
def count_hit():
    get_hit_counter().increment()


@bp.get("/app/", defaults={"filename": "index.html"})
@bp.get("/app/<path:filename>")
def serve(filename: str):
    """
    Static assets
    ---
    tags:
      - App
    parameters:
      - in: path
        name: filename
        type: string
        required: true
    responses:
      200:
        description: File contents
      404:
        description: No such file
    """
    # send_from_directory refuses paths that escape the root
    return send_from_directory(current_app.config["FILESERVER_ROOT"], filename)
