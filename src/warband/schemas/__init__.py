"""Read models exposed to reporting layers."""

from warband.schemas.report import ArmyReport, BattleRecordReport, CasualtyReport, UnitReport

__all__ = ["ArmyReport", "BattleRecordReport", "CasualtyReport", "UnitReport"]
