from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "YNABDashboardBridge"
    API_PREFIX: str = ""
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Grafana runs on :3000 by default
    CORS_ORIGINS: List[str] = Field(default=["http://localhost:3000"])

    # YNAB API
    YNAB_BASE_URL: str = Field(default="https://api.ynab.com/v1")
    YNAB_BUDGET_ID: str = Field(default="last-used")
    YNAB_ACCOUNT_ID: str = Field(default="")
    YNAB_TIMEOUT_SECONDS: float = 30.0

    # Aggregation
    MISC_PAYEE_LABEL: str = "Misc"
    MIN_PAYEE_OCCURRENCES: int = 2
    RATE_LIMIT_LABEL: str = "YNAB API Rate Limit"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
