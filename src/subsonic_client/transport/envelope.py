"""
Envelope parsing — turns a raw response body into a payload or an error.
"""

import json
from typing import Any, Union

from pydantic import ValidationError

from subsonic_client.errors import ApiError, EnvelopeError
from subsonic_client.models.envelope import Envelope

ENVELOPE_KEY = "subsonic-response"


def decode_envelope(raw: Union[bytes, str]) -> dict[str, Any]:
    """Decode a response body and return the object under ``subsonic-response``.

    Raises ApiError when the server put an error record in the envelope,
    whatever else sits next to it. Raises EnvelopeError when the body is
    not JSON or not shaped like an envelope.
    """
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise EnvelopeError(f"Response body is not valid JSON: {e}") from e

    try:
        envelope = Envelope.model_validate(data)
    except ValidationError as e:
        raise EnvelopeError(
            f"Response is not a {ENVELOPE_KEY} envelope",
            details={"errors": e.errors(include_url=False)},
        ) from e

    error = envelope.response.error
    if error is not None:
        raise ApiError(error.code, error.message)

    return data[ENVELOPE_KEY]


def payload_field(payload: dict[str, Any], key: str) -> Any:
    """Pull an endpoint's result element out of a decoded payload."""
    try:
        return payload[key]
    except KeyError:
        raise EnvelopeError(f"Response payload has no {key!r} element", details={"keys": sorted(payload)}) from None
