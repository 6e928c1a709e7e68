# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from httpping import config
from httpping.config import DEFAULT_USER_AGENT, ProbeSettings
from httpping.errors import ErrorCategory, InvalidURL, categorize_exception, error_category_to_reason


def test_probe_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPPING_TIMEOUT", "5.5")
    monkeypatch.setenv("HTTPPING_WAIT", "0.25")
    monkeypatch.setenv("HTTPPING_BYTES", "128")
    monkeypatch.setenv("HTTPPING_MAX_REDIRECTS", "3")
    monkeypatch.setenv("HTTPPING_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HTTPPING_VERIFY_SSL", "0")
    monkeypatch.setenv("HTTPPING_REQUIRE_SUCCESS", "yes")

    settings = config.load_probe_settings()

    assert settings.timeout == 5.5
    assert settings.wait == 0.25
    assert settings.max_body_bytes == 128
    assert settings.max_redirects == 3
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.verify_ssl is False
    assert settings.require_success_status is True


def test_probe_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HTTPPING_TIMEOUT", "not-a-number")
    monkeypatch.setenv("HTTPPING_WAIT", "-1")
    monkeypatch.setenv("HTTPPING_BYTES", "0")
    monkeypatch.setenv("HTTPPING_MAX_REDIRECTS", "-4")

    settings = config.load_probe_settings()

    assert settings.timeout == ProbeSettings.timeout
    assert settings.wait == ProbeSettings.wait
    assert settings.max_body_bytes == ProbeSettings.max_body_bytes
    assert settings.max_redirects == ProbeSettings.max_redirects
    assert DEFAULT_USER_AGENT in settings.user_agent


def test_load_probe_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("HTTPPING_TIMEOUT", "7.7")
    assert config.load_probe_settings().timeout == 7.7
    monkeypatch.setenv("HTTPPING_TIMEOUT", "8.8")
    assert config.load_probe_settings().timeout == 8.8


def test_defaults_match_cli_defaults(monkeypatch):
    for name in ("HTTPPING_TIMEOUT", "HTTPPING_WAIT", "HTTPPING_BYTES", "HTTPPING_MAX_REDIRECTS"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_probe_settings()
    assert (settings.timeout, settings.wait, settings.max_body_bytes, settings.max_redirects) == (2.5, 1.0, 64, 10)


def test_categorize_exception_variants():
    request = httpx.Request("HEAD", "https://x.test")
    assert categorize_exception(httpx.ConnectTimeout("slow", request=request)) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(InvalidURL("x", "bad")) == ErrorCategory.INVALID_URL
    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("boom")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_walks_cause_chain():
    request = httpx.Request("HEAD", "https://x.test")

    def wrapped(cause):
        try:
            raise cause
        except Exception as inner:  # noqa: BLE001
            try:
                raise httpx.ConnectError("wrapped", request=request) from inner
            except httpx.ConnectError as outer:
                return outer

    assert categorize_exception(wrapped(socket.gaierror(-2, "lookup"))) == ErrorCategory.DNS_ERROR
    assert categorize_exception(wrapped(ssl.SSLError(1, "handshake"))) == ErrorCategory.SSL_ERROR


def test_error_category_reasons():
    assert error_category_to_reason(ErrorCategory.TOO_MANY_REDIRECTS) == "Too many redirects"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""
