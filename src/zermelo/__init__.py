"""Python client for the Zermelo school schedule API."""

__version__ = "0.1.0"

from .api_client import ScheduleClient
from .http import (
    AuthenticationFailed,
    HttpRequestError,
    MalformedResponse,
    ResponseError,
    TransportError,
    ZermeloError,
)
from .models import Appointment

__all__ = [
    "ScheduleClient",
    "Appointment",
    "ZermeloError",
    "HttpRequestError",
    "AuthenticationFailed",
    "ResponseError",
    "TransportError",
    "MalformedResponse",
    "__version__",
]
