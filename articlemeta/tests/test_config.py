import logging

import pytest
import structlog
from pydantic import ValidationError

from articlemeta.config import LogLevel, Settings, TitleHeuristics, load_settings
from articlemeta.log import configure_logging


def test_title_heuristic_defaults():
    heuristics = TitleHeuristics()
    assert heuristics.min_segment_words == 3
    assert heuristics.max_prefix_words == 5
    assert heuristics.short_title_chars == 15
    assert heuristics.long_title_chars == 150
    assert heuristics.max_rollback_words == 4


def test_title_heuristics_reject_inverted_length_bounds():
    with pytest.raises(ValidationError):
        TitleHeuristics(short_title_chars=200, long_title_chars=150)


def test_title_heuristics_reject_negative_values():
    with pytest.raises(ValidationError):
        TitleHeuristics(max_rollback_words=-1)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings.log_level == LogLevel.WARNING
    assert settings.structured_logging is False
    assert settings.title == TitleHeuristics()


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ARTICLEMETA_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ARTICLEMETA_TITLE__SHORT_TITLE_CHARS", "20")
    settings = load_settings()
    assert settings.log_level == LogLevel.DEBUG
    assert settings.title.short_title_chars == 20
    assert settings.title.long_title_chars == 150


def test_settings_from_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("ARTICLEMETA_STRUCTURED_LOGGING=true\n")
    assert load_settings().structured_logging is True


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(Settings(log_level=LogLevel.DEBUG, structured_logging=True))
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
        structlog.reset_defaults()
