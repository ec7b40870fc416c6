import logging

import pytest

from deal_payments.infra.config import log_level


def test_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEAL_PAYMENTS_LOG_LEVEL", raising=False)

    assert log_level() == logging.INFO


def test_reads_level_case_insensitively(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_PAYMENTS_LOG_LEVEL", "debug")

    assert log_level() == logging.DEBUG


def test_unknown_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_PAYMENTS_LOG_LEVEL", "chatty")

    with pytest.raises(RuntimeError, match="unknown level"):
        log_level()
