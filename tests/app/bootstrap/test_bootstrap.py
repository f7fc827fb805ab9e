"""Testes do bootstrap: validação de settings e wiring."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app import bootstrap
from app.bootstrap.dependencies import create_notify_order_use_case, create_sms_sender
from api.connectors.twilio import TwilioSmsClient
from config.settings import (
    SmsSettings,
    get_base_settings,
    get_sms_settings,
    get_webhook_settings,
)

_ENV = {
    "CHEC_WEBHOOK_SIGNING_KEY": "key",
    "SMS_ACCOUNT_SID": "AC1",
    "SMS_AUTH_TOKEN": "tok",
    "SMS_FROM_NUMBER": "+123456789",
    "SMS_TO_NUMBER": "+1987654321",
}


@pytest.fixture(autouse=True)
def _clear_caches() -> Iterator[None]:
    for getter in (get_base_settings, get_webhook_settings, get_sms_settings):
        getter.cache_clear()
    bootstrap.get_notify_order_use_case.cache_clear()
    yield
    for getter in (get_base_settings, get_webhook_settings, get_sms_settings):
        getter.cache_clear()
    bootstrap.get_notify_order_use_case.cache_clear()


def _set_env(monkeypatch: pytest.MonkeyPatch, environment: str, **overrides: str) -> None:
    monkeypatch.setenv("ENVIRONMENT", environment)
    for name, value in {**_ENV, **overrides}.items():
        monkeypatch.setenv(name, value)


def test_validate_runtime_settings_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_env(monkeypatch, "production")

    bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_fails_fast_in_production(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _set_env(monkeypatch, "production", CHEC_WEBHOOK_SIGNING_KEY="")

    with pytest.raises(RuntimeError, match="CHEC_WEBHOOK_SIGNING_KEY"):
        bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_only_warns_in_development(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    _set_env(monkeypatch, "development", SMS_TO_NUMBER="")

    with caplog.at_level("WARNING"):
        bootstrap.validate_runtime_settings()

    failed = [r for r in caplog.records if r.getMessage() == "settings_validation_failed"]
    assert failed[0].errors == ["sms: SMS_TO_NUMBER não configurado"]


def test_create_sms_sender_returns_twilio_client() -> None:
    assert isinstance(create_sms_sender(SmsSettings(account_sid="AC1")), TwilioSmsClient)


def test_use_case_is_wired_with_configured_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_env(monkeypatch, "development")

    use_case = bootstrap.get_notify_order_use_case()
    message = use_case.build_message({"payload": {"id": "ORD-1"}})

    assert use_case is bootstrap.get_notify_order_use_case()
    assert (message.to, message.from_) == ("+1987654321", "+123456789")
    assert create_notify_order_use_case(settings=SmsSettings(to_number="+9")).build_message(
        {}
    ).to == "+9"


def test_initialize_app_uses_configured_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "notifier-staging")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(bootstrap, "configure_logging", lambda **kwargs: calls.append(kwargs))

    bootstrap.initialize_app()

    assert calls[0]["service_name"] == "notifier-staging"
    assert calls[0]["level"] == "DEBUG"
    assert calls[0]["correlation_id_getter"] is bootstrap.get_correlation_id
