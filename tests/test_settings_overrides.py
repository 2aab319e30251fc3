from __future__ import annotations

from settings import get_settings


def test_log_level_defaults_to_info(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    try:
        assert get_settings().log_level == "INFO"
    finally:
        get_settings.cache_clear()


def test_log_level_environment_override(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "  debug ")
    get_settings.cache_clear()

    try:
        assert get_settings().log_level == "DEBUG"
    finally:
        get_settings.cache_clear()


def test_blank_log_level_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "   ")
    get_settings.cache_clear()

    try:
        assert get_settings().log_level == "INFO"
    finally:
        get_settings.cache_clear()
