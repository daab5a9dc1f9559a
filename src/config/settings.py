"""
Berra's Casino - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every field has a default matching the house rules, so no .env file is
required to play.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Blackjack
    blackjack_starting_chips: int = Field(default=1000, gt=0)
    blackjack_rescue_delay: float = Field(default=2.0, ge=0)

    # Slots
    slots_starting_credits: int = Field(default=1000, gt=0)
    slots_bet_step: int = Field(default=10, gt=0)
    slots_min_bet: int = Field(default=10, gt=0)
    slots_max_bet: int = Field(default=100, gt=0)
    slots_rescue_delay: float = Field(default=1.5, ge=0)
    slots_reel_stop_delays: tuple[float, float, float] = (0.6, 1.0, 1.4)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def _check_bet_range(self) -> "Settings":
        if self.slots_min_bet > self.slots_max_bet:
            raise ValueError(
                f"slots_min_bet ({self.slots_min_bet}) cannot exceed "
                f"slots_max_bet ({self.slots_max_bet})."
            )
        for name in ("slots_min_bet", "slots_max_bet"):
            if getattr(self, name) % self.slots_bet_step:
                raise ValueError(
                    f"{name} must be a multiple of slots_bet_step ({self.slots_bet_step})."
                )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
