import json
from typing import Any

from pydantic import ValidationError

from errors import MethodNotAllowed, MissingText
from models import TextPayload

ALLOWED_METHOD = "POST"


def validate_method(method: str) -> None:
    if method.upper() != ALLOWED_METHOD:
        raise MethodNotAllowed()


def extract_text(body: bytes) -> str:
    """Returns the ``text`` field of a JSON request body.

    Undecodable bodies, non-object bodies and a missing, empty or non-string
    ``text`` all raise MissingText.
    """
    try:
        data: Any = json.loads(body) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MissingText()
    if not isinstance(data, dict):
        raise MissingText()
    try:
        payload = TextPayload.model_validate(data)
    except ValidationError:
        raise MissingText()
    return payload.text
