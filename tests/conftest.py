import json

import pytest

VALID_DOCUMENT = {
    "message": None,
    "request": "get",
    "data": [
        {"id": 1, "name": "New in PHP 7.2", "author": "Carlo Daniele"},
        {"id": 2, "name": "Help for new PHP project", "author": "Khalyomede"},
    ],
    "debug": {"elapsed": 27, "issued_at": 1529617930807795, "resolved_at": 1529617930807822},
}


def make_response(**overrides) -> str:
    """A valid JUR string with top-level attributes replaced (or removed when set to `...`)."""
    document = json.loads(json.dumps(VALID_DOCUMENT))
    for key, value in overrides.items():
        if value is ...:
            document.pop(key, None)
        else:
            document[key] = value
    return json.dumps(document)


def make_debug(**overrides) -> dict:
    debug = dict(VALID_DOCUMENT["debug"])
    for key, value in overrides.items():
        if value is ...:
            debug.pop(key, None)
        else:
            debug[key] = value
    return debug


@pytest.fixture
def valid_response() -> str:
    return make_response()
