"""Tests for log level selection, handler setup and request log context."""

import logging

import pytest
import structlog
from simplestore.utils.logging import build_handlers, get_log_level, log_context


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, level",
        [("production", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("unknown", "INFO")],
    )
    def test_level_follows_environment(self, clean_env, env, level):
        clean_env.setenv("PROTEAN_ENV", env)
        assert get_log_level() == level

    def test_explicit_level_wins(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"


class TestHandlers:
    def test_console_only_without_log_dir(self):
        handlers = build_handlers("INFO")
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_rotating_files_under_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        handlers = build_handlers("INFO", log_dir)
        try:
            assert sorted(p.name for p in log_dir.iterdir()) == ["simplestore.log", "simplestore_error.log"]
            assert handlers[-1].level == logging.ERROR
        finally:
            for handler in handlers:
                handler.close()


def test_log_context_is_scoped_to_block():
    with log_context(user_id="alice", resource="cart"):
        bound = structlog.contextvars.get_contextvars()
        assert bound["user_id"] == "alice"
        assert bound["resource"] == "cart"
    assert "user_id" not in structlog.contextvars.get_contextvars()
