"""Enumerations for the Warband domain."""

from __future__ import annotations

from enum import StrEnum


class UnitKind(StrEnum):
    """Closed set of unit types, ordered along the promotion chain."""

    PIKEMAN = "pikeman"
    ARCHER = "archer"
    KNIGHT = "knight"


class BattleOutcome(StrEnum):
    """Result of a battle as seen by the army that initiated it."""

    SELF_WINS = "self_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"


class SideOutcome(StrEnum):
    """Result of a battle from one side's own perspective."""

    WON = "won"
    LOST = "lost"
    DRAW = "draw"
