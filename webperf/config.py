"""Environment-driven settings for the analyzer."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    navigation_timeout_ms: int = 45000
    browser_headless: bool = True
    # Chromium's OS-level sandbox. Only disable inside a disposable container.
    browser_sandbox: bool = False
    max_concurrent_browsers: int = 2

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
