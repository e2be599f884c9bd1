from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from warband.domain.army import Army
from warband.domain.enums import SideOutcome, UnitKind
from warband.domain.models import BattleRecord, CasualtySnapshot, UnitView


class UnitReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: UnitKind = Field(..., description="Unit type tag")
    strength: int = Field(..., ge=0, description="Current strength")
    service_years: int = Field(..., ge=0, description="Years of service")

    @classmethod
    def from_unit(cls, unit: UnitView) -> UnitReport:
        return cls(kind=unit.kind, strength=unit.strength, service_years=unit.service_years)


class CasualtyReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: UnitKind
    strength: int

    @classmethod
    def from_snapshot(cls, snapshot: CasualtySnapshot) -> CasualtyReport:
        return cls(kind=snapshot.kind, strength=snapshot.strength)


class BattleRecordReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    when: datetime
    opponent: str
    my_score: int
    opp_score: int
    result: str
    outcome: SideOutcome
    gold_change: int
    my_losses: list[CasualtyReport] = Field(default_factory=list)
    opp_losses: list[CasualtyReport] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: BattleRecord) -> BattleRecordReport:
        return cls(
            when=record.when,
            opponent=record.opponent,
            my_score=record.my_score,
            opp_score=record.opp_score,
            result=record.result,
            outcome=record.outcome,
            gold_change=record.gold_change,
            my_losses=[CasualtyReport.from_snapshot(s) for s in record.my_losses],
            opp_losses=[CasualtyReport.from_snapshot(s) for s in record.opp_losses],
        )

    def summary(self) -> str:
        lost = ", ".join(f"{loss.kind.value}({loss.strength})" for loss in self.my_losses)
        killed = ", ".join(f"{loss.kind.value}({loss.strength})" for loss in self.opp_losses)
        return (
            f"{self.when.isoformat()} vs {self.opponent}: {self.result} "
            f"({self.my_score} vs {self.opp_score}) gold {self.gold_change:+d} "
            f"| lost: {lost or 'none'} | killed: {killed or 'none'}"
        )


class ArmyReport(BaseModel):
    """Snapshot of an army for printing or export."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Army identifier")
    gold: int = Field(..., ge=0, description="Current gold balance")
    total_strength: int = Field(..., ge=0)
    unit_counts: dict[UnitKind, int] = Field(default_factory=dict)
    average_service_years: float = Field(default=0.0, ge=0.0)
    units: list[UnitReport] = Field(default_factory=list)
    history: list[BattleRecordReport] = Field(default_factory=list)

    @classmethod
    def from_army(cls, army: Army) -> ArmyReport:
        return cls(
            name=army.name,
            gold=army.gold,
            total_strength=army.total_strength(),
            unit_counts=army.unit_counts(),
            average_service_years=army.average_service_years(),
            units=[UnitReport.from_unit(unit) for unit in army],
            history=[BattleRecordReport.from_record(record) for record in army.history],
        )

    def summary(self) -> str:
        """One-line text summary used by the walkthrough output."""

        counts = " | ".join(
            f"{kind.value}={count}" for kind, count in self.unit_counts.items()
        )
        return (
            f"{self.name}: gold={self.gold} units={len(self.units)} | {counts} "
            f"| strength={self.total_strength}"
        )
