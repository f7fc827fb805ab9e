"""Testes do parsing e verificação inicial do webhook Chec."""

from __future__ import annotations

import json

import pytest

from api.connectors.chec.signature import sign_payload
from api.connectors.chec.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    StaleWebhookError,
    parse_webhook_body,
    parse_webhook_request,
)

SECRET = "secret"
NOW = 1_700_000_000.0


def _body(created: float = NOW - 10, secret: str = SECRET) -> bytes:
    payload = {
        "created": created,
        "event": "orders.create",
        "response_code": 201,
        "payload": {"id": "ord_1"},
    }
    return json.dumps(sign_payload(payload, secret), separators=(",", ":")).encode("utf-8")


def test_parse_webhook_request_ok() -> None:
    payload, verification = parse_webhook_request(
        _body(), signing_key=SECRET, max_age_seconds=300, now=NOW
    )

    assert verification.trusted is True
    assert payload["event"] == "orders.create"
    assert "signature" not in payload


@pytest.mark.parametrize("raw", [b"not json", b"", b"{invalid}", b"\xff"])
def test_invalid_json(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_body(raw)


def test_json_array_is_not_an_object() -> None:
    with pytest.raises(InvalidJsonError, match="payload_not_object"):
        parse_webhook_body(b"[1, 2]")


@pytest.mark.parametrize(
    "raw",
    [b'{"created": NaN}', b'{"created": Infinity}', b'{"created": -Infinity}'],
)
def test_non_json_constants_are_rejected(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_body(raw)


def test_lone_surrogate_is_rejected() -> None:
    with pytest.raises(InvalidJsonError, match="invalid_payload_encoding"):
        parse_webhook_body(b'{"payload": {"id": "\\ud800"}}')


def test_invalid_signature_raises_when_enforced() -> None:
    with pytest.raises(InvalidSignatureError, match="signature_mismatch"):
        parse_webhook_request(
            _body(secret="other"), signing_key=SECRET, max_age_seconds=300, now=NOW
        )


def test_stale_webhook_raises_when_enforced() -> None:
    with pytest.raises(StaleWebhookError, match="stale_webhook"):
        parse_webhook_request(
            _body(created=NOW - 301), signing_key=SECRET, max_age_seconds=300, now=NOW
        )


def test_signature_is_checked_before_freshness() -> None:
    with pytest.raises(InvalidSignatureError):
        parse_webhook_request(
            _body(created=NOW - 900, secret="other"),
            signing_key=SECRET,
            max_age_seconds=300,
            now=NOW,
        )


def test_log_only_returns_failures_without_raising() -> None:
    payload, verification = parse_webhook_request(
        _body(created=NOW - 900, secret="other"),
        signing_key=SECRET,
        max_age_seconds=300,
        enforce=False,
        now=NOW,
    )

    assert payload["payload"] == {"id": "ord_1"}
    assert verification.trusted is False
    assert verification.signature.error == "signature_mismatch"
    assert verification.freshness.error == "stale_webhook"
