"""
JUR error types — one exception per failure kind, all rooted at JurError.
"""

from enum import Enum
from typing import Optional


class ErrorMessage(str, Enum):
    """Rendered error texts. Kept verbatim for compatibility with other JUR clients."""

    MISSING_ATTRIBUTE = 'The response is not a valid JUR (the attribute "{key}" is missing from the response).'
    MISSING_DEBUG_ATTRIBUTE = 'The response is not a valid JUR (the attribute "{key}" is missing from the attribute "debug").'
    INVALID_MESSAGE = 'The response is not a valid JUR (the attribute "message" must be either a string or null).'
    # Says "debug" although the offending attribute is "request".
    INVALID_REQUEST = 'The response is not a valid JUR (the attribute "debug" must have one of the following value: {values}).'
    INVALID_DEBUG_NUMBER = 'The response is not a valid JUR (the attribute "{key}" of the attribute "debug" must be a number).'
    NOT_PARSED = "Unable to access the property of the response before without parsing it."
    UNIT_NOT_SUPPORTED = "this unit is not supported."
    ISSUED_TIME_NOT_SET = "The issued time should be initialized first."

    def render(self, **kwargs: str) -> str:
        return self.value.format(**kwargs)


class JurError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class MalformedJsonError(JurError, ValueError):
    """The input is not syntactically valid JSON. The message is the decoder's own."""

    def __init__(self, message: str):
        super().__init__("malformed_json", message)


class InvalidEnvelopeError(JurError, ValueError):
    """The decoded JSON does not have the JUR shape."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__("invalid_envelope", message)
        self.key = key


class NotParsedError(JurError):
    def __init__(self, message: str = ErrorMessage.NOT_PARSED.value):
        super().__init__("not_parsed", message)


class UnsupportedUnitError(JurError, ValueError):
    def __init__(self, unit: object = None, message: str = ErrorMessage.UNIT_NOT_SUPPORTED.value):
        super().__init__("unsupported_unit", message)
        self.unit = unit


class IssuedTimeNotSetError(JurError):
    def __init__(self, message: str = ErrorMessage.ISSUED_TIME_NOT_SET.value):
        super().__init__("issued_time_not_set", message)
