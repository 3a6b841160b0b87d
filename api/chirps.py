from __future__ import annotations

from flask import Blueprint, request, jsonify, g, abort

from models import storage
from models.chirp import Chirp
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from utils.decorators import jwt_required
from utils.profanity import clean_body

bp = Blueprint("chirps", __name__)

chirp_create_schema = ChirpCreateSchema()
chirp_out_schema = ChirpOutSchema()
chirps_out_schema = ChirpOutSchema(many=True)

SORT_ORDERS = {
    "asc": Chirp.created_at.asc(),
    "desc": Chirp.created_at.desc(),
}


def parse_sort():
    sort = request.args.get("sort", "asc").lower()
    order = SORT_ORDERS.get(sort)
    if order is None:
        abort(400, description="Unsupported sort order. Allowed: asc, desc")
    return order


@bp.post("/chirps")
@jwt_required()
def create_chirp():
    """
    Post a chirp (at most 140 characters; banned words are masked)
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [body]
          properties:
            body: { type: string }
    responses:
      201:
        description: Created
      400:
        description: Malformed body or chirp too long
      401:
        description: Unauthorized
    """
    payload = request.get_json(silent=True) or {}
    data = chirp_create_schema.load(payload)

    chirp = Chirp(body=clean_body(data["body"]), user_id=g.current_user_id)
    storage.new(chirp)
    storage.save()

    return jsonify(chirp_out_schema.dump(chirp)), 201


@bp.get("/chirps")
def list_chirps():
    """
    List chirps
    ---
    tags:
      - Chirps
    parameters:
      - in: query
        name: author_id
        type: string
        required: false
      - in: query
        name: sort
        type: string
        enum: [asc, desc]
        required: false
    responses:
      200:
        description: OK
    """
    order_by = parse_sort()
    query = storage.get_session().query(Chirp)

    author_id = request.args.get("author_id")
    if author_id:
        query = query.filter(Chirp.user_id == author_id)

    rows = query.order_by(order_by, Chirp.id).all()
    return jsonify(chirps_out_schema.dump(rows)), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get one chirp
    ---
    tags:
      - Chirps
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200:
        description: OK
      404:
        description: Not found
    """
    chirp = storage.get(Chirp, chirp_id)
    if not chirp:
        abort(404, description="Chirp not found")
    return jsonify(chirp_out_schema.dump(chirp)), 200


@bp.delete("/chirps/<chirp_id>")
@jwt_required()
def delete_chirp(chirp_id: str):
    """
    Delete one of your own chirps
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      204:
        description: Deleted
      400:
        description: Chirp not found
      401:
        description: Unauthorized
      403:
        description: Not the author
    """
    chirp = storage.get(Chirp, chirp_id)
    if not chirp:
        abort(400, description="Chirp not found")
    if chirp.user_id != g.current_user_id:
        abort(403, description="You can only delete your own chirps")

    chirp.delete()
    storage.save()
    return "", 204
