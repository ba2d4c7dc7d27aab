from __future__ import annotations

import os

import pytest

from trademark_search.config import env, loader

_ENV_NAMES = (
    "TRADEMARK_SEARCH_BASE_URL",
    "TRADEMARK_SEARCH_USER_AGENT",
    "TRADEMARK_SEARCH_TIMEOUT_SECONDS",
    "TRADEMARK_SEARCH_MAX_REDIRECTS",
    "TRADEMARK_SEARCH_PAGE_WORKERS",
    "TRADEMARK_SEARCH_OUTPUT_PATH",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(loader, "load_env_files", lambda: None)
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = loader.load_trademark_search_settings()

    assert settings.base_url == "https://search.ipaustralia.gov.au"
    assert settings.index_url == "https://search.ipaustralia.gov.au/trademarks/search/advanced"
    assert settings.do_search_url == "https://search.ipaustralia.gov.au/trademarks/search/doSearch"
    assert settings.results_url == "https://search.ipaustralia.gov.au/trademarks/search/result"
    assert "Chrome/125" in settings.user_agent
    assert settings.timeout_seconds == 30.0
    assert settings.max_redirects == 5
    assert settings.page_workers == 1
    assert settings.output_path == str(tmp_path.resolve() / "results.json")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("TRADEMARK_SEARCH_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("TRADEMARK_SEARCH_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("TRADEMARK_SEARCH_PAGE_WORKERS", "4")
    monkeypatch.setenv("TRADEMARK_SEARCH_OUTPUT_PATH", str(tmp_path / "out.json"))

    settings = loader.load_trademark_search_settings()

    assert settings.base_url == "http://localhost:8080"
    assert settings.results_url == "http://localhost:8080/trademarks/search/result"
    assert settings.timeout_seconds == 12.5
    assert settings.page_workers == 4
    assert settings.output_path == str(tmp_path / "out.json")


def test_invalid_and_out_of_range_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADEMARK_SEARCH_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("TRADEMARK_SEARCH_MAX_REDIRECTS", "-3")
    monkeypatch.setenv("TRADEMARK_SEARCH_PAGE_WORKERS", "0")
    monkeypatch.setenv("TRADEMARK_SEARCH_USER_AGENT", "   ")

    settings = loader.load_trademark_search_settings()

    assert settings.timeout_seconds == 30.0
    assert settings.max_redirects == 0
    assert settings.page_workers == 1
    assert settings.user_agent == loader.DEFAULT_USER_AGENT


def test_relative_output_path_follows_working_directory(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
) -> None:
    run_dir = tmp_path / "run"
    run_dir.mkdir()
    monkeypatch.chdir(run_dir)
    monkeypatch.setenv("TRADEMARK_SEARCH_OUTPUT_PATH", "out/marks.json")

    settings = loader.load_trademark_search_settings()

    assert settings.output_path == str(run_dir.resolve() / "out" / "marks.json")


def test_env_files_are_read_from_working_directory(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nTRADEMARK_SEARCH_PAGE_WORKERS=3\nTRADEMARK_SEARCH_USER_AGENT=\"EnvAgent/2.0\"\n",
        encoding="utf-8",
    )
    (tmp_path / ".env.local").write_text("TRADEMARK_SEARCH_PAGE_WORKERS=9\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # setenv then delenv so monkeypatch removes the values loaded below on teardown.
    monkeypatch.setenv("TRADEMARK_SEARCH_PAGE_WORKERS", "")
    monkeypatch.delenv("TRADEMARK_SEARCH_PAGE_WORKERS")
    monkeypatch.setenv("TRADEMARK_SEARCH_USER_AGENT", "")
    monkeypatch.delenv("TRADEMARK_SEARCH_USER_AGENT")

    env.load_env_files()

    assert os.environ["TRADEMARK_SEARCH_PAGE_WORKERS"] == "3"
    assert os.environ["TRADEMARK_SEARCH_USER_AGENT"] == "EnvAgent/2.0"


def test_env_files_do_not_override_process_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
) -> None:
    (tmp_path / ".env").write_text("TRADEMARK_SEARCH_PAGE_WORKERS=3\n", encoding="utf-8")
    monkeypatch.setenv("TRADEMARK_SEARCH_PAGE_WORKERS", "7")

    env.load_env_files(tmp_path)

    assert os.environ["TRADEMARK_SEARCH_PAGE_WORKERS"] == "7"
