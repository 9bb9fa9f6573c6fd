"""
subsonic-client — Subsonic API client for Python.

Salted-token authentication and JSON envelope handling for
Subsonic-compatible music servers. Playback is left to the caller.
"""

from subsonic_client.client import AsyncSubsonic, Subsonic
from subsonic_client.auth import Credentials, derive_credentials
from subsonic_client.errors import (
    ApiError,
    AuthError,
    EnvelopeError,
    ErrorCode,
    RequestError,
    SubsonicError,
    TransportError,
)
from subsonic_client.transport.http import API_VERSION

__version__ = "0.1.0"
__all__ = [
    "AsyncSubsonic",
    "Subsonic",
    "Credentials",
    "derive_credentials",
    "SubsonicError",
    "RequestError",
    "TransportError",
    "EnvelopeError",
    "ApiError",
    "AuthError",
    "ErrorCode",
    "API_VERSION",
]
