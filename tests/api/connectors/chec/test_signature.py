"""Testes da assinatura HMAC dos webhooks Chec."""

from __future__ import annotations

import hashlib
import hmac
import json

import pytest

from api.connectors.chec.signature import (
    compute_signature,
    serialize_for_signature,
    sign_payload,
    verify_payload_signature,
)

SECRET = "de1uFAu5eGLAasbuGDp1lMFHHfQCsErq"


def _order_webhook() -> dict[str, object]:
    return {
        "id": "wh_123",
        "created": 1700000000,
        "event": "orders.create",
        "response_code": 201,
        "payload": {
            "id": "ord_p7ZAMo1xwNJ4xX",
            "order": {"total_with_tax": {"formatted_with_symbol": "$42.00"}},
        },
    }


def test_serialization_matches_json_stringify() -> None:
    payload = {"b": 1, "a": {"ç": "ã", "list": [1, 2]}, "url": "https://x/y"}

    assert serialize_for_signature(payload) == (
        '{"b":1,"a":{"ç":"ã","list":[1,2]},"url":"https://x/y"}'.encode()
    )


def test_serialization_with_sorted_keys() -> None:
    assert serialize_for_signature({"b": 1, "a": 2}, sort_keys=True) == b'{"a":2,"b":1}'


def test_compute_signature_is_hmac_sha256_hex() -> None:
    payload = {"event": "orders.create"}
    expected = hmac.new(
        SECRET.encode(), b'{"event":"orders.create"}', hashlib.sha256
    ).hexdigest()

    assert compute_signature(payload, SECRET) == expected


def test_sign_then_verify_round_trip() -> None:
    signed = sign_payload(_order_webhook(), SECRET)

    result = verify_payload_signature(signed, SECRET)

    assert result.valid is True
    assert result.skipped is False
    assert result.error is None


def test_signature_field_is_excluded_from_signed_bytes() -> None:
    signed = sign_payload({**_order_webhook(), "signature": "stale"}, SECRET)
    unsigned = {k: v for k, v in signed.items() if k != "signature"}

    assert signed["signature"] == compute_signature(unsigned, SECRET)


def test_verify_does_not_mutate_payload() -> None:
    signed = sign_payload(_order_webhook(), SECRET)
    snapshot = json.dumps(signed)

    verify_payload_signature(signed, SECRET)

    assert json.dumps(signed) == snapshot
    assert "signature" in signed


@pytest.mark.parametrize("position", [0, 17, 63])
def test_flipping_any_signature_char_fails(position: int) -> None:
    signed = sign_payload(_order_webhook(), SECRET)
    signature = signed["signature"]
    flipped = "0" if signature[position] != "0" else "1"
    signed["signature"] = signature[:position] + flipped + signature[position + 1 :]

    result = verify_payload_signature(signed, SECRET)

    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_uppercase_signature_is_rejected() -> None:
    signed = sign_payload(_order_webhook(), SECRET)
    signed["signature"] = signed["signature"].upper()

    assert verify_payload_signature(signed, SECRET).valid is False


def test_tampered_payload_fails() -> None:
    signed = sign_payload(_order_webhook(), SECRET)
    signed["payload"]["id"] = "ord_other"  # type: ignore[index]

    assert verify_payload_signature(signed, SECRET).valid is False


def test_wrong_secret_fails() -> None:
    signed = sign_payload(_order_webhook(), SECRET)

    assert verify_payload_signature(signed, "other-secret").valid is False


def test_key_order_is_part_of_the_contract() -> None:
    signed = sign_payload({"a": 1, "b": 2}, SECRET)
    reordered = {"b": 2, "a": 1, "signature": signed["signature"]}

    assert verify_payload_signature(reordered, SECRET).valid is False
    canonical = sign_payload({"a": 1, "b": 2}, SECRET, sort_keys=True)
    reordered_canonical = {"b": 2, "a": 1, "signature": canonical["signature"]}
    assert verify_payload_signature(reordered_canonical, SECRET, sort_keys=True).valid is True


def test_missing_signature() -> None:
    result = verify_payload_signature(_order_webhook(), SECRET)

    assert result.valid is False
    assert result.error == "missing_signature"


def test_non_string_signature() -> None:
    result = verify_payload_signature({**_order_webhook(), "signature": 123}, SECRET)

    assert result.valid is False
    assert result.error == "invalid_signature_format"


def test_non_ascii_signature_does_not_raise() -> None:
    result = verify_payload_signature({**_order_webhook(), "signature": "ção"}, SECRET)

    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_missing_secret_skips_verification() -> None:
    result = verify_payload_signature(_order_webhook(), "")

    assert result.valid is True
    assert result.skipped is True
    assert result.error == "missing_secret"


@pytest.mark.parametrize("field", ["signature", "event"])
def test_lone_surrogate_is_invalid_encoding(field: str) -> None:
    webhook = sign_payload(_order_webhook(), SECRET)
    webhook[field] = "\ud800"

    result = verify_payload_signature(webhook, SECRET)

    assert result.valid is False
    assert result.error == "invalid_payload_encoding"
