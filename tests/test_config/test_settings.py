"""Tests for environment-driven settings."""

from config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "ARRIVAL_COUNTER_START", "BENCHMARK_NUM_JOBS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)

    assert s.LOG_LEVEL == "WARNING"
    assert s.ARRIVAL_COUNTER_START == 0
    assert s.BENCHMARK_NUM_JOBS == 100_000


def test_env_vars_override_defaults(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ARRIVAL_COUNTER_START", "50")
    monkeypatch.setenv("BENCHMARK_SEED", "7")
    s = Settings(_env_file=None)

    assert s.LOG_LEVEL == "DEBUG"
    assert s.ARRIVAL_COUNTER_START == 50
    assert s.BENCHMARK_SEED == 7
