from marshmallow import Schema, fields, EXCLUDE

USER_UPGRADED = "user.upgraded"


class WebhookDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.String(required=True)


class PolkaWebhookSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    event = fields.String(required=True)
    # Only user.upgraded events need a payload
    data = fields.Nested(WebhookDataSchema, load_default=None)
