"""
Envelope decoding and validation.

Checks run in a fixed order and stop at the first failure so the error
message for a given document is always the same.
"""

import json
import math
from typing import Any

from jur.errors import ErrorMessage, InvalidEnvelopeError, MalformedJsonError
from jur.models.envelope import JurResponse, RequestMethod

REQUIRED_ATTRIBUTES = ("message", "data", "request", "debug")
DEBUG_ATTRIBUTES = ("elapsed", "issued_at", "resolved_at")
REQUEST_METHODS = tuple(method.value for method in RequestMethod)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Unexpected token {name} in JSON")


def decode_json(json_text: str) -> Any:
    try:
        return json.loads(json_text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedJsonError(str(e)) from e


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # 1e400 decodes to inf.
    return isinstance(value, float) and math.isfinite(value)


def validate_envelope(raw: Any) -> JurResponse:
    """Validate a decoded document and return its typed record."""
    response = raw if isinstance(raw, dict) else {}
    for key in REQUIRED_ATTRIBUTES:
        if key not in response:
            raise InvalidEnvelopeError(ErrorMessage.MISSING_ATTRIBUTE.render(key=key), key)

    debug = response["debug"] if isinstance(response["debug"], dict) else {}
    for key in DEBUG_ATTRIBUTES:
        if key not in debug:
            raise InvalidEnvelopeError(ErrorMessage.MISSING_DEBUG_ATTRIBUTE.render(key=key), key)

    message = response["message"]
    if message is not None and not isinstance(message, str):
        raise InvalidEnvelopeError(ErrorMessage.INVALID_MESSAGE.value, "message")

    request = response["request"]
    if not isinstance(request, str) or request not in REQUEST_METHODS:
        raise InvalidEnvelopeError(
            ErrorMessage.INVALID_REQUEST.render(values=", ".join(REQUEST_METHODS)), "request"
        )

    for key in DEBUG_ATTRIBUTES:
        if not _is_number(debug[key]):
            raise InvalidEnvelopeError(ErrorMessage.INVALID_DEBUG_NUMBER.render(key=key), key)

    return JurResponse.model_validate(response)


def decode_envelope(json_text: str) -> tuple[dict[str, Any], JurResponse]:
    """Decode and validate a JUR document. Returns the raw dict and its typed record."""
    raw = decode_json(json_text)
    return raw, validate_envelope(raw)
