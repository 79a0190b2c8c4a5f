from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Open-Meteo endpoints
    GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"

    # Icons are resolved as f"{ICON_BASE_URL}/{name}.png"
    ICON_BASE_URL: str = "https://img.icons8.com/emoji/48"

    # Seconds; same as the httpx default
    HTTP_TIMEOUT: float = 5.0

    FORECAST_DAYS: int = 7

    # Logging: numeric level, plus optional rotating file output
    LOGGER: int = 20
    LOG_TO_FILE: bool = True
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
