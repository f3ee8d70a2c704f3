# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from compatprobe import config
from compatprobe.config import DEFAULT_MODEL, DEFAULT_USER_AGENT
from compatprobe.errors import ErrorCategory, TransportError, categorize_exception, error_category_to_reason


def test_probe_settings_defaults():
    settings = config.ProbeSettings()
    assert settings.timeout == 30.0
    assert settings.default_model == DEFAULT_MODEL == "gpt-3.5-turbo"
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.verify_ssl is True


def test_probe_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("COMPATPROBE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("COMPATPROBE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("COMPATPROBE_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("COMPATPROBE_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("COMPATPROBE_HTTP_MAX_BODY_BYTES", "1024")
    monkeypatch.setenv("COMPATPROBE_DEFAULT_MODEL", "llama-3")

    settings = config.load_probe_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.max_body_bytes == 1024
    assert settings.default_model == "llama-3"


def test_probe_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("COMPATPROBE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("COMPATPROBE_HTTP_MAX_BODY_BYTES", "-5")
    monkeypatch.setenv("COMPATPROBE_DEFAULT_MODEL", "")

    settings = config.load_probe_settings()

    assert settings.timeout == config.ProbeSettings.timeout
    assert settings.max_body_bytes == config.ProbeSettings.max_body_bytes
    assert settings.default_model == DEFAULT_MODEL


def test_load_probe_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("COMPATPROBE_HTTP_TIMEOUT", "7.7")
    assert config.load_probe_settings().timeout == 7.7
    monkeypatch.setenv("COMPATPROBE_HTTP_TIMEOUT", "8.8")
    assert config.load_probe_settings().timeout == 8.8


def _chained(exc: Exception, cause: BaseException) -> Exception:
    try:
        raise exc from cause
    except Exception as err:  # noqa: BLE001
        return err


def test_categorize_exception_maps_httpx_and_socket_errors():
    request = httpx.Request("GET", "http://example")
    assert categorize_exception(httpx.ReadTimeout("timed out", request=request)) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectTimeout("timed out", request=request)) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) == ErrorCategory.CONNECTION_ERROR

    dns = _chained(httpx.ConnectError("no host"), socket.gaierror(-2, "Name or service not known"))
    assert categorize_exception(dns) == ErrorCategory.DNS_ERROR

    tls = _chained(httpx.ConnectError("tls"), ssl.SSLError("certificate verify failed"))
    assert categorize_exception(tls) == ErrorCategory.SSL_ERROR

    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("odd")) == ErrorCategory.UNKNOWN_ERROR


def test_transport_error_keeps_category():
    err = TransportError("Request timeout after 30s", ErrorCategory.TIMEOUT)
    assert err.message == "Request timeout after 30s"
    assert str(err) == "Request timeout after 30s"
    assert categorize_exception(err) == ErrorCategory.TIMEOUT
    assert TransportError("x").category == ErrorCategory.UNKNOWN_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Network timeout during probe"
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""
