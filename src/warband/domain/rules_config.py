"""Declarative rule configuration for the domain layer."""

from __future__ import annotations

from dataclasses import dataclass, fields


def _require_non_negative(rules: EconomyRules | BattleRules) -> None:
    for item in fields(rules):
        value = getattr(rules, item.name)
        if value < 0:
            raise ValueError(f"{type(rules).__name__}.{item.name} cannot be negative: {value}")


@dataclass(frozen=True, slots=True)
class EconomyRules:
    """Gold endowment for newly raised armies."""

    starting_gold: int = 1000

    def __post_init__(self) -> None:
        _require_non_negative(self)


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Rewards and losses applied when a battle is resolved."""

    victory_reward: int = 100
    defeat_casualties: int = 2
    draw_casualties: int = 1

    def __post_init__(self) -> None:
        _require_non_negative(self)


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    economy: EconomyRules = EconomyRules()
    battle: BattleRules = BattleRules()


DEFAULT_RULES = RulesConfig()
