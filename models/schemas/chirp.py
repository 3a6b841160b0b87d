from marshmallow import Schema, fields, validates, ValidationError, EXCLUDE

from models.chirp import MAX_CHIRP_LENGTH


class ChirpCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    body = fields.String(required=True)

    @validates("body")
    def _validate_body(self, value, **kwargs):
        # len() counts code points, which is what the limit is defined in
        if len(value) > MAX_CHIRP_LENGTH:
            raise ValidationError("Chirp is too long")


class ChirpOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
    body = fields.String()
    user_id = fields.String()
