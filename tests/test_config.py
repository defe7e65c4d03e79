from __future__ import annotations

import logging

import pytest

from pynacap.config import NacapConfig
from pynacap.exceptions import NacapConfigError


def test_defaults() -> None:
    config = NacapConfig()
    assert config.vendor == "Netatmo"
    assert config.binding_id == "netatmo"
    assert config.refresh_interval == 0.0
    assert config.trace_payloads is False


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NACAP_VENDOR", "Legrand")
    monkeypatch.setenv("NACAP_REFRESH_INTERVAL", "600")
    monkeypatch.setenv("NACAP_TRACE_PAYLOADS", "yes")

    config = NacapConfig.from_env()

    assert config.vendor == "Legrand"
    assert config.refresh_interval == 600.0
    assert config.trace_payloads is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NACAP_REFRESH_INTERVAL", "not-a-number")
    monkeypatch.setenv("NACAP_TRACE_PAYLOADS", "1")

    config = NacapConfig.from_env(refresh_interval=30.0, trace_payloads=False)

    assert config.refresh_interval == 30.0
    assert config.trace_payloads is False


def test_invalid_interval(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("NACAP_REFRESH_INTERVAL", "soon")
    with caplog.at_level(logging.WARNING, logger="pynacap.config"), pytest.raises(NacapConfigError):
        NacapConfig.from_env()
    assert "soon" in caplog.text


def test_negative_interval(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("NACAP_REFRESH_INTERVAL", "-5")
    with caplog.at_level(logging.WARNING, logger="pynacap.config"), pytest.raises(NacapConfigError):
        NacapConfig.from_env()
    assert "NACAP_REFRESH_INTERVAL" in caplog.text
    assert caplog.records[-1].levelno == logging.WARNING
