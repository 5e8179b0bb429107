import sys
import logging
import pathlib

ROOT_SRC = pathlib.Path(__file__).resolve().parents[2] / "src"
if str(ROOT_SRC) not in sys.path:
    sys.path.insert(0, str(ROOT_SRC))

from tornado_stats import config  # noqa: E402


def test_timeout_default(monkeypatch):
    monkeypatch.delenv("TORNADO_STATS_TIMEOUT", raising=False)
    assert config.get_timeout() == config.DEFAULT_TIMEOUT


def test_timeout_from_env(monkeypatch):
    monkeypatch.setenv("TORNADO_STATS_TIMEOUT", "2.5")
    assert config.get_timeout() == 2.5


def test_timeout_invalid_values_fall_back(monkeypatch):
    for raw in ("soon", "0", "-4"):
        monkeypatch.setenv("TORNADO_STATS_TIMEOUT", raw)
        assert config.get_timeout() == config.DEFAULT_TIMEOUT


def test_log_level(monkeypatch):
    monkeypatch.setenv("TORNADO_STATS_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG

    monkeypatch.setenv("TORNADO_STATS_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.INFO
