from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from configurator.domain.entities.service import ServiceYear


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DEFAULT_SERVICE_YEAR: int = ServiceYear.Y2022.value

    @field_validator("DEFAULT_SERVICE_YEAR")
    @classmethod
    def _known_year(cls, value: int) -> int:
        if value not in {year.value for year in ServiceYear}:
            raise ValueError(f"DEFAULT_SERVICE_YEAR must be one of {[year.value for year in ServiceYear]}")
        return value


settings = Settings()
