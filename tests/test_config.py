from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from ga_extractor import config
from ga_extractor.env import load_env_files


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    config.get_extraction_settings.cache_clear()
    config.get_google_analytics_http_settings.cache_clear()
    yield
    config.get_extraction_settings.cache_clear()
    config.get_google_analytics_http_settings.cache_clear()


def test_extraction_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GA_REPORT_PAGE_SIZE",
        "GA_INCLUDE_EMPTY_ROWS",
        "GA_THROTTLE_THRESHOLD",
        "GA_THROTTLE_DELAY_SECONDS",
        "GA_THROTTLE_JITTER_SECONDS",
        "GA_FOLLOW_NEXT_PAGE",
    ):
        monkeypatch.delenv(name, raising=False)

    assert config.get_extraction_settings() == config.ExtractionSettings(
        report_page_size=1000,
        include_empty_rows=True,
        throttle_threshold=100,
        throttle_delay_seconds=1.0,
        throttle_jitter_seconds=0.5,
        follow_next_page=False,
    )


def test_extraction_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GA_REPORT_PAGE_SIZE", "500000")
    monkeypatch.setenv("GA_INCLUDE_EMPTY_ROWS", "no")
    monkeypatch.setenv("GA_THROTTLE_THRESHOLD", "not-a-number")
    monkeypatch.setenv("GA_FOLLOW_NEXT_PAGE", "true")

    settings = config.get_extraction_settings()

    assert settings.report_page_size == config.MAX_REPORT_PAGE_SIZE
    assert settings.include_empty_rows is False
    assert settings.throttle_threshold == 100
    assert settings.follow_next_page is True


def test_http_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GA_ACCESS_TOKEN", "  abc  ")
    monkeypatch.setenv("GA_REPORTING_BASE_URL", "http://localhost:8080/v4/")
    monkeypatch.setenv("GA_HTTP_MAX_RETRIES", "-3")

    settings = config.get_google_analytics_http_settings()

    assert settings.access_token == "abc"
    assert settings.reporting_base_url == "http://localhost:8080/v4"
    assert settings.max_retries == 0


def test_blank_access_token_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GA_ACCESS_TOKEN", "   ")

    assert config.get_google_analytics_http_settings().access_token is None


def test_env_files_do_not_override_process_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(
        "# comment\nGA_TEST_FROM_FILE='file-value'\nGA_TEST_EXISTING=file\n",
        encoding="utf-8",
    )
    (tmp_path / ".env.local").write_text("export GA_TEST_LOCAL=\"local\"\n", encoding="utf-8")
    monkeypatch.delenv("GA_TEST_FROM_FILE", raising=False)
    monkeypatch.delenv("GA_TEST_LOCAL", raising=False)
    monkeypatch.setenv("GA_TEST_EXISTING", "process")

    load_env_files(tmp_path)

    assert os.environ["GA_TEST_FROM_FILE"] == "file-value"
    assert os.environ["GA_TEST_LOCAL"] == "local"
    assert os.environ["GA_TEST_EXISTING"] == "process"
    monkeypatch.delenv("GA_TEST_FROM_FILE")
    monkeypatch.delenv("GA_TEST_LOCAL")
