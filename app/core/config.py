from pydantic_settings import BaseSettings, SettingsConfigDict



class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    CLIENTS_SOURCE_URL: str = "http://localhost:5000"
    CLIENTS_SOURCE_TOKEN: str | None = None
    CLIENTS_FETCH_LIMIT: int = 99999
    CLIENTS_SOURCE_TIMEOUT: float = 10.0
    REPORT_TIMEZONE: str = "America/Sao_Paulo"
    TREND_DEFAULT_MONTHS: int = 6
    AGENCY_NAME: str = "RODA BEM TURISMO"
    AGENCY_FILE_PREFIX: str = "RodaBem"
    CORS_ORIGINS: list[str] = ["*"]
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


Config = Settings()
