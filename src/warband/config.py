"""Lightweight configuration for the Warband tools."""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from warband.domain.rules_config import DEFAULT_RULES, RulesConfig


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WARBAND_", env_file=".env", env_file_encoding="utf-8"
    )

    starting_gold: int = Field(
        default=DEFAULT_RULES.economy.starting_gold,
        ge=0,
        description="Gold every newly raised army starts with",
    )
    victory_reward: int = Field(
        default=DEFAULT_RULES.battle.victory_reward,
        ge=0,
        description="Gold credited to the winner of a battle",
    )
    civilizations_file: Path | None = Field(
        default=None,
        description="JSON file with civilization presets; built-in presets are used when unset",
    )
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    def rules(self) -> RulesConfig:
        """Return the rule configuration these settings describe."""

        return RulesConfig(
            economy=replace(DEFAULT_RULES.economy, starting_gold=self.starting_gold),
            battle=replace(DEFAULT_RULES.battle, victory_reward=self.victory_reward),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
