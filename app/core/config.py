from pydantic import Field
from pydantic_settings import BaseSettings
from datetime import timedelta

class Settings(BaseSettings):
    PROJECT_NAME: str = "Fokus Schedules"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"
    AUTO_CORRECTION_MINUTES: int = Field(90, ge=1)
    EDITOR_SESSION_TTL_MINUTES: int = Field(30, ge=1)
    TIME_FORMAT: str = "%I:%M %p"

    class Config:
        case_sensitive = True
        env_file = ".env"

    @property
    def auto_correction_delta(self) -> timedelta:
        return timedelta(minutes=self.AUTO_CORRECTION_MINUTES)

    @property
    def editor_session_ttl(self) -> timedelta:
        return timedelta(minutes=self.EDITOR_SESSION_TTL_MINUTES)

settings = Settings()
