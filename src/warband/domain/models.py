"""Dataclasses describing units and battle history entries.

Units are the only mutable entities here; casualty snapshots and battle
records are frozen once created so an army's history cannot be rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NewType

from .enums import SideOutcome, UnitKind
from .registry import UnitTypeDefinition, definition_of

ArmyID = NewType("ArmyID", str)


@dataclass(frozen=True, slots=True)
class CasualtySnapshot:
    """Type and strength of a unit at the moment it was lost."""

    kind: UnitKind
    strength: int


@dataclass(frozen=True, slots=True)
class UnitView:
    """Read-only copy of a unit handed out by an army."""

    kind: UnitKind
    strength: int
    service_years: int


@dataclass(slots=True)
class Unit:
    """One fielded unit."""

    kind: UnitKind
    strength: int
    service_years: int = 0

    @classmethod
    def recruit(cls, kind: UnitKind | str, *, service_years: int = 0) -> Unit:
        """Create a fresh unit at its type's base strength."""

        definition = definition_of(kind)
        return cls(
            kind=definition.kind,
            strength=definition.base_strength,
            service_years=service_years,
        )

    @property
    def definition(self) -> UnitTypeDefinition:
        return definition_of(self.kind)

    def train(self) -> int:
        """Add the type's training bonus and return the new strength."""
        self.strength += self.definition.training_bonus
        return self.strength

    def advance_service_year(self) -> int:
        self.service_years += 1
        return self.service_years

    def snapshot(self) -> CasualtySnapshot:
        return CasualtySnapshot(kind=self.kind, strength=self.strength)

    def view(self) -> UnitView:
        return UnitView(kind=self.kind, strength=self.strength, service_years=self.service_years)


@dataclass(frozen=True, slots=True)
class BattleRecord:
    """One battle as seen by one of the two armies involved."""

    when: datetime
    opponent: ArmyID
    my_score: int
    opp_score: int
    result: str
    outcome: SideOutcome
    gold_change: int
    my_losses: tuple[CasualtySnapshot, ...] = ()
    opp_losses: tuple[CasualtySnapshot, ...] = ()
