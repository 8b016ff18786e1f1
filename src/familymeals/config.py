"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generator settings loaded from MEALPLAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEALPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Planning
    meals_per_plan: int = Field(5, ge=1)  # one dinner per weekday

    # Pricing
    default_unit_cost: float = Field(1.0, ge=0)  # dollars per unit for unknown ingredients

    # Selection. None keeps the system-seeded generator.
    selection_seed: int | None = None

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_reproducible(self) -> bool:
        """Whether meal selection is pinned to a seed."""
        return self.selection_seed is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
