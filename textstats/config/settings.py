from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8000
    api_prefix: str = ""

    storage_backend: str = "postgres"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "textstats"
    db_username: str = "textstats"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_auto_create_schema: bool = True

    analysis_worker_concurrency: int = 1
    analysis_shutdown_timeout_seconds: float = 5.0

    pagination_default_limit: int = 10
    pagination_max_limit: int = 100
