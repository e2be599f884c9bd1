"""Tests for rule configuration validation."""

from __future__ import annotations

import pytest

from warband.domain.army import Army
from warband.domain.rules_config import DEFAULT_RULES, BattleRules, EconomyRules, RulesConfig


def test_defaults():
    assert DEFAULT_RULES.economy.starting_gold == 1000
    assert DEFAULT_RULES.battle == BattleRules(
        victory_reward=100, defeat_casualties=2, draw_casualties=1
    )


@pytest.mark.parametrize(
    "field_name",
    ["victory_reward", "defeat_casualties", "draw_casualties"],
)
def test_negative_battle_rules_rejected(field_name):
    with pytest.raises(ValueError, match=field_name):
        BattleRules(**{field_name: -1})


def test_negative_starting_gold_rejected():
    with pytest.raises(ValueError, match="starting_gold"):
        EconomyRules(starting_gold=-1)


def test_zero_casualties_allowed(fixed_clock):
    rules = RulesConfig(battle=BattleRules(defeat_casualties=0, draw_casualties=0))
    x = Army("X", [("knight", 1)], rules=rules)
    y = Army("Y", [("pikeman", 1)])

    assert x.battle(y, clock=fixed_clock) == "X wins"
    assert len(y) == 1
    assert y.unit_at(0).service_years == 1
