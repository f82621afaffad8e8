from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Bira's Family Business"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_OPEN_TIME: str = "10:00"
    BOOKING_CLOSE_TIME: str = "18:00"
    BOOKING_SPECIAL_DAY_CLOSE_TIME: str = "16:00"
    BOOKING_SLOT_INTERVAL_MINUTES: int = 60
    BOOKING_EXCLUDED_DAYS: list[str] = ["Sunday"]
    BOOKING_SPECIAL_DAYS: list[str] = ["Friday"]
    BOOKING_MAX_PARTICIPANTS: int = 10
    BOOKING_PRICE_FALLBACK: int = 49
    BOOKING_SUBMIT_DELAY_SECONDS: float = 1.0
    BOOKING_MAX_FLOWS: int = 500


settings = Settings()
