from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:5127"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "URL Shortener"

    # Prefix for generated short URLs; BaseUrl is the key older deployments set
    BASE_URL: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("BASE_URL", "BaseUrl"),
    )
    LOG_LEVEL: str = "INFO"

settings = Settings()
