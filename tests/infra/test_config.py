from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from showroom_lite.domain.vehicle import GAS_INCREMENT
from showroom_lite.infra.config import Settings, load_settings
from showroom_lite.infra.logging_config import configure_logging

ENV_VARS = ("SHOWROOM_HOST", "SHOWROOM_PORT", "SHOWROOM_LOG_LEVEL", "SHOWROOM_GAS_INCREMENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_environment_is_empty() -> None:
    assert load_settings() == Settings(
        host="127.0.0.1",
        port=8000,
        log_level="INFO",
        gas_increment=GAS_INCREMENT,
    )


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOWROOM_HOST", "0.0.0.0")
    monkeypatch.setenv("SHOWROOM_PORT", "9000")
    monkeypatch.setenv("SHOWROOM_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHOWROOM_GAS_INCREMENT", "1.25")

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.gas_increment == Decimal("1.25")


def test_invalid_port_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOWROOM_PORT", "eighty")

    with pytest.raises(RuntimeError, match="SHOWROOM_PORT"):
        load_settings()


@pytest.mark.parametrize("value", ["lots", "0", "-1", "NaN", "sNaN", "Infinity"])
def test_invalid_gas_increment_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SHOWROOM_GAS_INCREMENT", value)

    with pytest.raises(RuntimeError, match="SHOWROOM_GAS_INCREMENT"):
        load_settings()


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        configure_logging("DEBUG")

        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


@pytest.mark.parametrize("value", ["verbose", "loud"])
def test_invalid_log_level_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SHOWROOM_LOG_LEVEL", value)

    with pytest.raises(RuntimeError, match="SHOWROOM_LOG_LEVEL"):
        load_settings()


def test_log_level_is_accepted_by_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOWROOM_LOG_LEVEL", "warning")
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        configure_logging(load_settings().log_level)

        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
