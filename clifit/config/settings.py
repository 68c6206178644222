from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    workouts_file: str = Field(
        default="workouts.yaml",
        validation_alias="CLIFIT_WORKOUTS_FILE",
        description="Path to the YAML workout definitions",
    )
    log_level: str = Field(default="INFO", validation_alias="CLIFIT_LOG_LEVEL")
    log_file: str = Field(
        default="",
        validation_alias="CLIFIT_LOG_FILE",
        description="Optional log file; empty disables file logging",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
