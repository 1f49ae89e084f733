"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "legalflow-finance"
    log_level: str = "INFO"

    # Forecast
    forecast_horizon_months: int = 6
    forecast_trailing_months: int = Field(6, gt=0)  # Divisor of both trailing averages
    retainer_category: str = "Retainer Fee"
    fixed_expense_categories: List[str] = ["Operating Expenses", "Software & Technology", "Marketing"]
    fixed_expense_fallback: float = 2500.0  # Used when last month's fixed spend is zero

    # Health metrics
    receivable_window_days: int = 30


settings = Settings()
