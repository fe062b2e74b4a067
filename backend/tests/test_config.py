"""Environment flag parsing for report settings."""

import pytest

from island_report.config import _env_flag


@pytest.mark.parametrize("raw", ["1", "true", "TRUE", " yes ", "on"])
def test_env_flag_truthy(monkeypatch, raw):
    monkeypatch.setenv("REPORT_TEST_FLAG", raw)
    assert _env_flag("REPORT_TEST_FLAG") is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
def test_env_flag_falsy(monkeypatch, raw):
    monkeypatch.setenv("REPORT_TEST_FLAG", raw)
    assert _env_flag("REPORT_TEST_FLAG") is False


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("REPORT_TEST_FLAG", raising=False)
    assert _env_flag("REPORT_TEST_FLAG") is False
    assert _env_flag("REPORT_TEST_FLAG", default="true") is True
