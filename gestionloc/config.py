from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "GESTIONLOC_"}

    # Redis (portfolio result cache)
    redis_url: str = "redis://localhost:6379/0"
    cache_enabled: bool = False
    cache_ttl_seconds: int = 300

    # Local-storage export served by GET /api/v1/profit/portfolio
    snapshot_path: str = "data/gestionloc_export.json"

    # Reminders: send 2 days before and on the due date
    reminder_days_before: list[int] = [2, 0]

    # Dashboard
    lease_expiry_window_days: int = 60

    # Analysis horizons
    default_projection_months: int = 12
    default_trend_months: int = 6

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
