"""
JUR envelope models.

    {
      "message": string | null,
      "request": "get" | "post" | "put" | "patch" | "delete",
      "data": <any JSON value>,
      "debug": {"elapsed": number, "issued_at": number, "resolved_at": number}
    }

All debug times are microseconds.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

Number = Union[StrictInt, StrictFloat]


class RequestMethod(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


class TimeUnit(str, Enum):
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"

    @property
    def divisor(self) -> int:
        """Number of microseconds in one unit."""
        return _DIVISORS[self]


_DIVISORS = {
    TimeUnit.MICROSECOND: 1,
    TimeUnit.MILLISECOND: 1_000,
    TimeUnit.SECOND: 1_000_000,
}


class DebugInfo(BaseModel):
    """Server-side timing block."""
    elapsed: Number
    issued_at: Number
    resolved_at: Number


class JurResponse(BaseModel):
    message: Optional[StrictStr] = None
    request: RequestMethod
    data: Any = None
    debug: DebugInfo
