from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fitplan.training.enums import RedistributionStrategy

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "training" / "catalog" / "exercises.yaml"


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    exercise_cache_ttl_minutes: float = Field(
        default=60.0,
        validation_alias="EXERCISE_CACHE_TTL_MINUTES",
        description="Minutes before a cached exercise selection expires",
    )
    exercise_cache_max_entries: int = Field(
        default=100,
        validation_alias="EXERCISE_CACHE_MAX_ENTRIES",
        description="Maximum cached selections before the oldest is evicted",
    )
    redistribution_strategy: RedistributionStrategy = Field(
        default=RedistributionStrategy.SINGLE_PASS,
        validation_alias="REDISTRIBUTION_STRATEGY",
        description="single_pass (redistribute once, no re-validation) or iterative",
    )
    redistribution_max_iterations: int = Field(
        default=5,
        validation_alias="REDISTRIBUTION_MAX_ITERATIONS",
        description="Upper bound on validate/redistribute rounds for the iterative strategy",
    )
    exercise_catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        validation_alias="EXERCISE_CATALOG_PATH",
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

    @field_validator("exercise_cache_ttl_minutes", "exercise_cache_max_entries", "redistribution_max_iterations")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Cache bounds and iteration caps must be positive."""
        if value <= 0:
            raise ValueError(f"must be positive, got {value}")
        return value

    @field_validator("redistribution_strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, value: object) -> object:
        """Accept strategy names in any case."""
        return value.lower() if isinstance(value, str) else value


settings = Settings()
