"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Job arrival sequence ────────────────────────────────────
    ARRIVAL_COUNTER_START: int = 0     # first arrival_time handed out by the default factory

    # ── Benchmark ───────────────────────────────────────────────
    BENCHMARK_NUM_JOBS: int = 100_000
    BENCHMARK_SEED: int = 42
    BENCHMARK_MAX_PRIORITY: int = 10   # priorities drawn from 1..MAX

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "WARNING"         # demo output goes to stdout, logs to stderr

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
