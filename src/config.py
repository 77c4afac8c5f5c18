"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "team-kpi-engine"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # Share of every gross earning retained for the development pool
    pool_rate: float = 0.45

    # 0 = Monday ... 6 = Sunday
    week_start: int = 0

    # Look-back windows used when rebuilding a member's rating snapshot
    snapshot_window_days: int = 30
    vacation_window_days: int = 90

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
