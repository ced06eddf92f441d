# -*- coding: utf-8 -*-
"""
tests/shared/config/test_settings_paynet.py

Tests de configuración del SDK de Paynet.
"""

import pytest
from pydantic import ValidationError

from paynet.shared.config.settings_paynet import (
    PaynetSettings,
    get_paynet_settings,
    reset_paynet_settings,
)


def test_paynet_settings_defaults():
    """Verifica defaults seguros (entorno de test de Paynet)."""
    settings = PaynetSettings(_env_file=None)

    assert settings.api_host == "https://api-merchant.test.paynet.md"
    assert settings.portal_host == "https://test.paynet.md"
    assert settings.secret_key is None
    assert settings.get_secret_key() == ""
    assert settings.username is None
    assert settings.get_password() == ""
    assert settings.http_timeout_seconds == 30.0
    assert settings.default_lang == "en-US"
    assert settings.sign_version == "v05"
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.log_format == "plain"


def test_paynet_settings_from_env(monkeypatch):
    """Variables PAYNET_* sobreescriben defaults."""
    monkeypatch.setenv("PAYNET_API_HOST", " https://api-merchant.paynet.md/ ")
    monkeypatch.setenv("PAYNET_SECRET_KEY", "s3cr3t")
    monkeypatch.setenv("PAYNET_USERNAME", "merchant")
    monkeypatch.setenv("PAYNET_PASSWORD", "pw")
    monkeypatch.setenv("PAYNET_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("PAYNET_DEBUG", "true")

    settings = PaynetSettings(_env_file=None)

    assert settings.api_host == "https://api-merchant.paynet.md"
    assert settings.get_secret_key() == "s3cr3t"
    assert settings.username == "merchant"
    assert settings.get_password() == "pw"
    assert settings.http_timeout_seconds == 12.5
    assert settings.debug is True


def test_secrets_are_not_exposed_in_repr(monkeypatch):
    monkeypatch.setenv("PAYNET_SECRET_KEY", "s3cr3t")
    monkeypatch.setenv("PAYNET_PASSWORD", "pw-value")
    settings = PaynetSettings(_env_file=None)
    assert "s3cr3t" not in repr(settings)
    assert "pw-value" not in repr(settings)


@pytest.mark.parametrize("timeout", ["0", "-1"])
def test_timeout_must_be_positive(monkeypatch, timeout):
    monkeypatch.setenv("PAYNET_HTTP_TIMEOUT_SECONDS", timeout)
    with pytest.raises(ValidationError):
        PaynetSettings(_env_file=None)


def test_invalid_log_format_rejected():
    with pytest.raises(ValidationError):
        PaynetSettings(_env_file=None, log_format="xml")


def test_get_paynet_settings_singleton(monkeypatch):
    """get_paynet_settings() cachea la instancia hasta reset."""
    first = get_paynet_settings()
    assert get_paynet_settings() is first

    monkeypatch.setenv("PAYNET_DEFAULT_LANG", "ro-RO")
    assert get_paynet_settings().default_lang == first.default_lang

    reset_paynet_settings()
    assert get_paynet_settings().default_lang == "ro-RO"
