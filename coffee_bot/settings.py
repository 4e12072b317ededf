from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "downtown-coffee-bot"
    env: str = "dev"
    log_level: str = "INFO"
    timezone: str = Field("America/New_York", alias="TIMEZONE")

    telegram_bot_token: str = Field("", alias="TELEGRAM_BOT_TOKEN")
    telegram_api_base_url: str = Field("https://api.telegram.org", alias="TELEGRAM_API_BASE_URL")
    telegram_webhook_secret: str = Field("", alias="TELEGRAM_WEBHOOK_SECRET")
    webhook_url: str = Field("", alias="WEBHOOK_URL")

    shop_name: str = Field("Downtown Coffee", alias="SHOP_NAME")
    support_phone: str = Field("(555) 123-4567", alias="SUPPORT_PHONE")

    # Ordering
    menu_file: str = Field("", alias="MENU_FILE")
    tax_rate: float = Field(0.085, alias="TAX_RATE")
    prep_time_minutes: int = Field(10, alias="PREP_TIME_MINUTES")
    fuzzy_threshold: float = Field(0.7, alias="FUZZY_THRESHOLD")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")


settings = Settings()
