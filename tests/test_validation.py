import json

import pytest

from errors import MethodNotAllowed, MissingText
from validation import extract_text, validate_method


def test_post_is_the_only_accepted_method():
    validate_method("POST")
    validate_method("post")
    for method in ("GET", "PUT", "DELETE", "PATCH", "OPTIONS"):
        with pytest.raises(MethodNotAllowed):
            validate_method(method)


def test_extract_text_returns_the_text_field():
    assert extract_text(json.dumps({"text": "Hola"}).encode()) == "Hola"


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"{not json",
        b"[1, 2, 3]",
        b'"just a string"',
        b"{}",
        b'{"text": ""}',
        b'{"text": 42}',
        b'{"text": ["a"]}',
    ],
)
def test_extract_text_rejects_unusable_bodies(body):
    with pytest.raises(MissingText) as exc:
        extract_text(body)

    assert exc.value.status_code == 400
    assert exc.value.message == "El contenido de texto es requerido."
