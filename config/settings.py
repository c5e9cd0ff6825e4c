from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    API_URL: str = Field(
        default="http://localhost:8081",
        description="Base URL of the job description parsing API"
    )
    AUTH_TOKEN: str = Field(
        default="",
        description="Persisted bearer token, checked before the session token"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    LOG_TO_MONGO: bool = Field(
        default=False,
        description="Also ship log records to MongoDB"
    )
    MONGO_URI: str = Field(
        default="mongodb://localhost:27017/",
        description="MongoDB connection URI"
    )
    LOG_DB_NAME: str = Field(
        default="interview_intake",
        description="MongoDB database name for logs"
    )
    LOG_COLLECTION: str = Field(
        default="intake_logs",
        description="MongoDB collection name for logs"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("API_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths are appended with a leading slash"""
        return value.rstrip("/")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
