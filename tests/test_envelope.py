"""Response envelope decoding."""

import json

import pytest

from subsonic_client.errors import ApiError, EnvelopeError
from subsonic_client.transport.envelope import decode_envelope, payload_field


def test_success_payload_is_returned_unmodified():
    inner = {
        "status": "ok",
        "version": "1.16.1",
        "type": "navidrome",
        "album": {"id": "1", "name": "Kid A", "song": [{"id": "s1", "title": "Idioteque"}]},
    }
    body = json.dumps({"subsonic-response": inner}).encode()
    assert decode_envelope(body) == inner


def test_str_body_is_accepted():
    assert decode_envelope('{"subsonic-response": {"status": "ok"}}') == {"status": "ok"}


def test_wrong_credentials_error():
    body = b'{"subsonic-response":{"status":"failed","error":{"code":40,"message":"Wrong username or password"}}}'
    with pytest.raises(ApiError) as exc_info:
        decode_envelope(body)
    assert exc_info.value.error_code == 40
    assert exc_info.value.message == "Wrong username or password"


def test_error_record_wins_over_payload_fields():
    body = json.dumps({"subsonic-response": {
        "status": "ok",
        "license": {"valid": True},
        "error": {"code": 70, "message": "  Not found, exactly as sent  "},
    }})
    with pytest.raises(ApiError) as exc_info:
        decode_envelope(body)
    assert exc_info.value.error_code == 70
    assert str(exc_info.value) == "  Not found, exactly as sent  "


def test_null_error_is_not_an_error():
    assert decode_envelope('{"subsonic-response": {"status": "ok", "error": null}}')["status"] == "ok"


@pytest.mark.parametrize("body", [
    b"",
    b"<html>502 Bad Gateway</html>",
    b'{"subsonic-response": ',
    b"\xff\xfe\x00",
    b"[" * 100000 + b"]" * 100000,
])
def test_invalid_json(body):
    with pytest.raises(EnvelopeError):
        decode_envelope(body)


@pytest.mark.parametrize("body", [
    "{}",
    "[]",
    '"subsonic-response"',
    '{"response": {"status": "ok"}}',
    '{"subsonic-response": "ok"}',
    '{"subsonic-response": [1, 2]}',
])
def test_missing_or_malformed_wrapper(body):
    with pytest.raises(EnvelopeError) as exc_info:
        decode_envelope(body)
    assert not isinstance(exc_info.value, ApiError)


def test_malformed_error_record():
    with pytest.raises(EnvelopeError):
        decode_envelope('{"subsonic-response": {"status": "failed", "error": {"message": "no code"}}}')


def test_payload_field():
    payload = {"status": "ok", "license": {"valid": True}}
    assert payload_field(payload, "license") == {"valid": True}
    with pytest.raises(EnvelopeError) as exc_info:
        payload_field(payload, "album")
    assert exc_info.value.details == {"keys": ["license", "status"]}
