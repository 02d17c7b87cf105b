from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Problem documents
    problem_base_uri: str = Field(
        default="https://bistro.example.com/problems", alias="PROBLEM_BASE_URI"
    )
    generic_user_message: str = Field(
        default=(
            "An unexpected internal error occurred. Please try again and, "
            "if the problem persists, contact the system administrator."
        ),
        alias="GENERIC_USER_MESSAGE",
    )

    @field_validator("problem_base_uri", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Problem type uris are built as ``<base>/<slug>``."""
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def empty_str_to_default(cls, v: str | None) -> str:
        if not v:
            return "INFO"
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


settings = Settings()
