from marshmallow import Schema, fields, pre_load, validates, EXCLUDE

from models.schemas.common import normalize_email, validate_password


class CredentialsSchema(Schema):
    """Body of POST /api/users and PUT /api/users."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = normalize_email(data["email"])
        return data

    @validates("password")
    def _validate_password(self, value, **kwargs):
        validate_password(value)


class UserCreateSchema(CredentialsSchema):
    pass


class UserUpdateSchema(CredentialsSchema):
    pass


class UserLoginSchema(Schema):
    """Body of POST /api/login. Any string is accepted; bad credentials are a 401, not a 400."""

    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = normalize_email(data["email"])
        return data


class UserOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
    email = fields.String()
    is_chirpy_red = fields.Boolean()
