# club_assistant/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Club Assistant")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # club identity used in prompts
    CLUB_NAME: str = Field(default="BITSA (BitSa Technology and Innovation Society)")
    CLUB_DESCRIPTION: str = Field(
        default="a tech club at the University of Eastern Africa, Baraton in Kenya"
    )

    # record store
    DATABASE_PATH: str = Field(default="data/club.db")

    # completion service
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None  # e.g. https://api.groq.com/openai/v1
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    USE_OLLAMA: bool = Field(default=False)
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    COMPLETION_TIMEOUT: float = Field(default=60.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
