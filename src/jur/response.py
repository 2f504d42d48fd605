"""
Jur — parse a JSON Uniform Response and read its fields.

    response = Jur().issued()
    # ... send the request, receive `body` ...
    response.parse(body)
    print(response.message(), response.data(), response.latency("millisecond"))
"""

import logging
from typing import Any, Optional

from jur.envelope import decode_envelope
from jur.errors import InvalidEnvelopeError, IssuedTimeNotSetError, MalformedJsonError, NotParsedError
from jur.models.envelope import JurResponse, TimeUnit
from jur.timing import UnitLike, convert, normalize_unit, now_microseconds

logger = logging.getLogger("jur.response")


class Jur:
    """A JUR envelope. Starts unparsed; `parse` validates and stores a response."""

    def __init__(self) -> None:
        self._issued_at: Optional[int] = None
        self._response: Optional[dict[str, Any]] = None
        self._model: Optional[JurResponse] = None

    @property
    def issued_at_client(self) -> Optional[int]:
        """When the client sent the request, in microseconds. None until `issued()`."""
        return self._issued_at

    @property
    def parsed(self) -> bool:
        return self._response is not None

    def issued(self) -> "Jur":
        """Stamp the time the request is sent."""
        self._issued_at = now_microseconds()
        return self

    def parse(self, json_text: str) -> "Jur":
        """Decode and validate `json_text`, replacing any previously parsed response.

        Raises MalformedJsonError if the text is not JSON and InvalidEnvelopeError
        if it is not a JUR. On failure the previous response, if any, is kept.
        """
        try:
            raw, model = decode_envelope(json_text)
        except (MalformedJsonError, InvalidEnvelopeError) as e:
            logger.debug(f"Rejected response ({e.code}): {e}")
            raise
        self._response = raw
        self._model = model
        logger.debug(f"Parsed {model.request.value} response (elapsed={model.debug.elapsed}us)")
        return self

    def message(self) -> Optional[str]:
        return self._checked()["message"]

    def request(self) -> str:
        return self._checked()["request"]

    def data(self) -> Any:
        return self._checked()["data"]

    def to_object(self) -> dict[str, Any]:
        """The whole decoded response."""
        return self._checked()

    def to_model(self) -> JurResponse:
        self._checked()
        return self._model

    def elapsed(self, unit: UnitLike = TimeUnit.MICROSECOND) -> int:
        """Server processing time, in `unit`."""
        return self._debug_time("elapsed", unit)

    def issued_at(self, unit: UnitLike = TimeUnit.MICROSECOND) -> int:
        """When the server controller received the request, in `unit`."""
        return self._debug_time("issued_at", unit)

    def resolved_at(self, unit: UnitLike = TimeUnit.MICROSECOND) -> int:
        """When the server controller resolved the request, in `unit`."""
        return self._debug_time("resolved_at", unit)

    def latency(self, unit: UnitLike = TimeUnit.MICROSECOND) -> int:
        """Client issue time minus server issue time, in `unit`. Negative when the server clock is ahead.

        Raises NotParsedError, IssuedTimeNotSetError, then UnsupportedUnitError, in that order.
        """
        response = self._checked()
        if self._issued_at is None:
            raise IssuedTimeNotSetError()
        time_unit = normalize_unit(unit)
        return convert(self._issued_at - response["debug"]["issued_at"], time_unit)

    def _debug_time(self, key: str, unit: UnitLike) -> int:
        response = self._checked()
        time_unit = normalize_unit(unit)
        return convert(response["debug"][key], time_unit)

    def _checked(self) -> dict[str, Any]:
        if self._response is None:
            raise NotParsedError()
        return self._response

    def __repr__(self) -> str:
        if self._model is None:
            return f"Jur(parsed=False, issued_at_client={self._issued_at!r})"
        return f"Jur(request={self._model.request.value!r}, message={self._model.message!r})"
