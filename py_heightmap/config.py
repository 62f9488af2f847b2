"""Configuration management."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from HEIGHTMAP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEIGHTMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation defaults
    default_size: int = Field(default=513, description="Default grid side, 2^k + 1")
    default_roughness: float = Field(
        default=2.0, ge=0, description="Initial perturbation amplitude"
    )
    default_roughness_decay: float = Field(
        default=1.0, gt=0, description="H exponent; amplitude scales by 2^-H per pass"
    )
    max_grid_size: int = Field(default=2049, ge=3, description="Largest grid side accepted")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    @field_validator("default_size")
    @classmethod
    def _size_is_power_of_two_plus_one(cls, value: int) -> int:
        n = value - 1
        if value < 3 or n & (n - 1) != 0:
            raise ValueError(f"default_size must be 2^k + 1 with k >= 1, got {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _known_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {value!r}")
        return value


# Instantiate singleton settings object
settings = Settings()
