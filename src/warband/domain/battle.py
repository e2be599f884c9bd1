"""Battle resolution rules.

A battle compares the two armies' total strength as it stood before the
fight.  Every unit on both sides serves one more year, the winner collects
the victory reward, and the loser gives up its strongest units.  A draw
costs each side its single strongest unit and moves no gold.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from warband.domain.army import Army
from warband.domain.enums import BattleOutcome, SideOutcome
from warband.domain.models import ArmyID, BattleRecord, CasualtySnapshot
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

DRAW_LABEL = "Draw"

Clock = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Summary of a resolved battle."""

    outcome: BattleOutcome
    label: str
    winner: ArmyID | None
    when: datetime
    army_record: BattleRecord
    opponent_record: BattleRecord


def utc_now() -> datetime:
    return datetime.now(UTC)


def resolve_battle(
    army: Army,
    opponent: Army,
    *,
    clock: Clock | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleResult:
    """Resolve one battle between ``army`` and ``opponent``, mutating both."""

    if army is opponent:
        raise ValueError("an army cannot battle itself")

    when = (clock or utc_now)()
    army_before = army.total_strength()
    opponent_before = opponent.total_strength()

    army.advance_all_service_years()
    opponent.advance_all_service_years()

    army_gold = 0
    opponent_gold = 0
    army_losses: list[CasualtySnapshot] = []
    opponent_losses: list[CasualtySnapshot] = []

    if army_before > opponent_before:
        outcome = BattleOutcome.SELF_WINS
        winner: ArmyID | None = army.name
        army_gold = rules.battle.victory_reward
        opponent_losses = opponent.remove_top_units(rules.battle.defeat_casualties)
    elif army_before < opponent_before:
        outcome = BattleOutcome.OPPONENT_WINS
        winner = opponent.name
        opponent_gold = rules.battle.victory_reward
        army_losses = army.remove_top_units(rules.battle.defeat_casualties)
    else:
        outcome = BattleOutcome.DRAW
        winner = None
        army_losses = army.remove_top_units(rules.battle.draw_casualties)
        opponent_losses = opponent.remove_top_units(rules.battle.draw_casualties)

    army._credit(army_gold)
    opponent._credit(opponent_gold)

    label = DRAW_LABEL if winner is None else f"{winner} wins"
    army_record = BattleRecord(
        when=when,
        opponent=opponent.name,
        my_score=army_before,
        opp_score=opponent_before,
        result=label,
        outcome=_side_outcome(outcome, attacker=True),
        gold_change=army_gold,
        my_losses=tuple(army_losses),
        opp_losses=tuple(opponent_losses),
    )
    opponent_record = BattleRecord(
        when=when,
        opponent=army.name,
        my_score=opponent_before,
        opp_score=army_before,
        result=label,
        outcome=_side_outcome(outcome, attacker=False),
        gold_change=opponent_gold,
        my_losses=tuple(opponent_losses),
        opp_losses=tuple(army_losses),
    )
    army._record(army_record)
    opponent._record(opponent_record)

    logger.info(
        "battle %s (%d) vs %s (%d): %s; losses %d/%d",
        army.name,
        army_before,
        opponent.name,
        opponent_before,
        label,
        len(army_losses),
        len(opponent_losses),
    )
    return BattleResult(
        outcome=outcome,
        label=label,
        winner=winner,
        when=when,
        army_record=army_record,
        opponent_record=opponent_record,
    )


def _side_outcome(outcome: BattleOutcome, *, attacker: bool) -> SideOutcome:
    if outcome is BattleOutcome.DRAW:
        return SideOutcome.DRAW
    won = (outcome is BattleOutcome.SELF_WINS) == attacker
    return SideOutcome.WON if won else SideOutcome.LOST
