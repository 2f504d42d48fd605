"""
jur — JSON Uniform Response client for Python.

Parse a JUR envelope, validate it and read its message, request method,
data and debug timings.
"""

from jur.response import Jur
from jur.errors import (
    JurError,
    MalformedJsonError,
    InvalidEnvelopeError,
    NotParsedError,
    UnsupportedUnitError,
    IssuedTimeNotSetError,
)
from jur.models.envelope import JurResponse, DebugInfo, RequestMethod, TimeUnit

__version__ = "0.1.0"
__all__ = [
    "Jur",
    "JurError",
    "MalformedJsonError",
    "InvalidEnvelopeError",
    "NotParsedError",
    "UnsupportedUnitError",
    "IssuedTimeNotSetError",
    "JurResponse",
    "DebugInfo",
    "RequestMethod",
    "TimeUnit",
]
