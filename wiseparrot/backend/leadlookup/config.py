from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Minimal B2B Auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- AITable (lead datasheet) ---
    AITABLE_BASE_URL: str = "https://aitable.ai/fusion/v1"
    AITABLE_DATASHEET_ID: str | None = None
    AITABLE_API_TOKEN: str | None = None

    # Field the remote equality filter runs against: filter=<field>=<YYYY-MM-DD>
    AITABLE_DATE_FIELD: str = "date"
    AITABLE_TIMEOUT_S: float = 30.0


settings = Settings()
