"""Testes da janela de frescor dos webhooks Chec."""

from __future__ import annotations

import pytest

from api.connectors.chec.freshness import check_freshness, is_webhook_too_old, parse_created

NOW = 1_700_000_000.0


def test_recent_webhook_is_fresh() -> None:
    assert is_webhook_too_old(NOW - 299, 300, now=NOW) is False


def test_old_webhook_is_stale() -> None:
    assert is_webhook_too_old(NOW - 301, 300, now=NOW) is True


def test_age_equal_to_max_age_is_still_fresh() -> None:
    assert is_webhook_too_old(NOW - 300, 300, now=NOW) is False


def test_future_timestamp_is_not_compensated() -> None:
    # clock skew do emissor não é corrigido
    assert is_webhook_too_old(NOW + 3600, 300, now=NOW) is False


def test_default_max_age_is_five_minutes() -> None:
    assert is_webhook_too_old(NOW - 300, now=NOW) is False
    assert is_webhook_too_old(NOW - 301, now=NOW) is True


def test_check_freshness_reports_age() -> None:
    result = check_freshness(int(NOW) - 120, 300, now=NOW)

    assert result.fresh is True
    assert result.age_seconds == 120
    assert result.error is None


def test_check_freshness_stale() -> None:
    result = check_freshness(NOW - 900, 300, now=NOW)

    assert result.fresh is False
    assert result.error == "stale_webhook"
    assert result.age_seconds == 900


@pytest.mark.parametrize("value", [None, "", "abc", True, {"ts": 1}, float("nan")])
def test_invalid_created_is_not_fresh(value: object) -> None:
    result = check_freshness(value, 300, now=NOW)

    assert result.fresh is False
    assert result.error == "invalid_created"


def test_parse_created_accepts_numeric_strings() -> None:
    assert parse_created(" 1700000000 ") == 1_700_000_000.0
    assert parse_created(1700000000) == 1_700_000_000.0
