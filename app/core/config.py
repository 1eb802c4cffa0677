from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 10000

    BUSINESS_NAME: str = "FightogFitness"
    BOARD_TITLE: str = "Upcoming Personal Training"
    BOARD_SUBTITLE: str = 'Live from the GHL calendar: "Personal Training"'
    DISPLAY_LOCALE: str = "da-DK"

    DEFAULT_DURATION_MINUTES: int = 30
    UPCOMING_LIMIT: int | None = None
    STORE_MAX_APPOINTMENTS: int = 500

    DISPLAY_REFRESH_SECONDS: int = 20
    TV_POLL_SECONDS: int = 15
    ADS_VIDEO_URL: str = "https://www.youtube.com/embed/XzsPWBlKDBU?autoplay=1&mute=1&loop=1"

    OPENING_HOUR: int = 6
    CLOSING_HOUR: int = 22
    ADS_MINUTES_PER_HOUR: int = 7

    CORS_ALLOW_ORIGINS: str = "*"


settings = Settings()
