from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Keys must be provided via env / .env (never hardcode secrets in code)
    anthropic_api_key: str | None = None
    anthropic_api_url: str = "https://api.anthropic.com/v1/messages"
    anthropic_version: str = "2023-06-01"
    model_name: str = "claude-sonnet-4-20250514"
    max_tokens: int = 4000

    request_timeout: float = 120.0
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


class DashboardSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_url: str = "http://localhost:3001"
    history_file: str = ".equity-analysis-history.json"
    history_limit: int = 50
    request_timeout: float = 180.0
    # Substitute the illustrative placeholder when the proxy call fails.
    fallback_to_placeholder: bool = True


settings = Settings()  # load once at import
dashboard_settings = DashboardSettings()
