"""
Subsonic client error types.

Transport, envelope and application failures are distinct kinds so callers
can branch on what actually happened.
"""

from enum import IntEnum
from typing import Any, Optional


class ErrorCode(IntEnum):
    """Error codes the Subsonic API reports inside the response envelope."""

    GENERIC = 0
    MISSING_PARAMETER = 10
    CLIENT_TOO_OLD = 20
    SERVER_TOO_OLD = 30
    WRONG_CREDENTIALS = 40
    TOKEN_AUTH_UNSUPPORTED = 41
    NOT_AUTHORIZED = 50
    TRIAL_EXPIRED = 60
    NOT_FOUND = 70


class SubsonicError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class RequestError(SubsonicError):
    def __init__(self, message: str):
        super().__init__("request_error", message)


class TransportError(SubsonicError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)


class EnvelopeError(SubsonicError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("envelope_error", message, details)


class ApiError(SubsonicError):
    """Failure reported by the server in a well-formed envelope."""

    def __init__(self, error_code: int, message: str):
        super().__init__("api_error", message, {"code": error_code})
        self.error_code = error_code

    @property
    def known_code(self) -> Optional[ErrorCode]:
        try:
            return ErrorCode(self.error_code)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"ApiError(error_code={self.error_code!r}, message={self.message!r})"


class AuthError(SubsonicError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)
