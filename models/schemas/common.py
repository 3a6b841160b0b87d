from marshmallow import ValidationError


def normalize_email(raw):
    return raw.strip().lower() if isinstance(raw, str) else raw


def validate_password(value: str) -> None:
    # Empty passwords are refused before they reach the hasher
    if not value:
        raise ValidationError("Password cannot be empty.")
    if len(value) > 1024:
        raise ValidationError("Password is too long.")


def first_error_message(messages) -> str:
    """Pull the first human-readable message out of a marshmallow error tree."""
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            return first_error_message(value)
    if isinstance(messages, (list, tuple)):
        for value in messages:
            return first_error_message(value)
    return "Invalid input"
