"""
Klondike - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Variables are prefixed with KLONDIKE_ (e.g. KLONDIKE_RECYCLE_ORDER=reverse).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from klondike.engine.base import EmptyTableauRule, RecycleOrder, RuleSet


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    recycle_order: RecycleOrder = RecycleOrder.PRESERVE
    empty_tableau_rule: EmptyTableauRule = EmptyTableauRule.ANY_CARD

    # Shuffle seed for new games (None = fresh randomness each game)
    seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "KLONDIKE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def rules(self) -> RuleSet:
        """The engine rule options these settings select."""
        return RuleSet(
            recycle_order=self.recycle_order,
            empty_tableau_rule=self.empty_tableau_rule,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
