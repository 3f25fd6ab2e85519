"""
Errors raised by APIClient.

Two families share AnimalSpotterError:
- APIError and subclasses, for the account calls (register/authenticate)
- NetworkError and one subclass per NetworkErrorKind, for the data calls
"""
from __future__ import annotations
from enum import Enum
from typing import Optional


class AnimalSpotterError(Exception):
    """Base client error."""


# register / authenticate

class APIError(AnimalSpotterError):
    """Account call failed."""


class SerializationError(APIError):
    """Credentials could not be encoded as JSON; nothing was sent."""


class HTTPStatusError(APIError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"server returned HTTP {status_code}")
        self.status_code = status_code


class TransportError(APIError):
    def __init__(self, original: Exception):
        super().__init__(f"transport error: {original}")
        self.original = original


class DecodeError(APIError):
    """Response body did not match the expected shape."""


# list / detail / image

class NetworkErrorKind(str, Enum):
    NO_AUTH = "noAuth"
    BAD_AUTH = "badAuth"
    OTHER_ERROR = "otherError"
    BAD_DATA = "badData"
    NO_DECODE = "noDecode"


class NetworkError(AnimalSpotterError):
    kind: NetworkErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.kind.value)


class NoAuth(NetworkError):
    """No bearer token stored; the request was not sent."""
    kind = NetworkErrorKind.NO_AUTH


class BadAuth(NetworkError):
    """Server rejected the bearer token (401)."""
    kind = NetworkErrorKind.BAD_AUTH


class OtherError(NetworkError):
    kind = NetworkErrorKind.OTHER_ERROR


class BadData(NetworkError):
    """Missing or unreadable body, or a transport error on a data endpoint."""
    kind = NetworkErrorKind.BAD_DATA


class NoDecode(NetworkError):
    """Body present but not the expected JSON shape."""
    kind = NetworkErrorKind.NO_DECODE
