"""Tests for the reporting schemas."""

from __future__ import annotations

from warband.domain.army import Army
from warband.domain.enums import SideOutcome, UnitKind
from warband.schemas import ArmyReport


def test_report_from_fresh_army():
    army = Army("Bowmen", [(UnitKind.ARCHER, 2)])
    report = ArmyReport.from_army(army)
    assert report.name == "Bowmen"
    assert report.gold == 1000
    assert report.total_strength == 20
    assert report.unit_counts[UnitKind.ARCHER] == 2
    assert [unit.strength for unit in report.units] == [10, 10]
    assert report.history == []


def test_report_includes_history(fixed_clock):
    army = Army("Strong", [(UnitKind.KNIGHT, 2)])
    foe = Army("Weak", [(UnitKind.PIKEMAN, 2)])
    army.battle(foe, clock=fixed_clock)

    report = ArmyReport.from_army(foe)
    (entry,) = report.history
    assert entry.outcome is SideOutcome.LOST
    assert entry.opponent == "Strong"
    assert [loss.kind for loss in entry.my_losses] == [UnitKind.PIKEMAN, UnitKind.PIKEMAN]
    assert report.average_service_years == 0.0

    payload = report.model_dump(mode="json")
    assert payload["history"][0]["when"].startswith("2025-08-10T12:00:00")
    assert payload["history"][0]["result"] == "Strong wins"


def test_summary_line():
    army = Army("Line", [(UnitKind.PIKEMAN, 1)])
    line = ArmyReport.from_army(army).summary()
    assert line.startswith("Line: gold=1000 units=1")
    assert "pikeman=1" in line
    assert line.endswith("strength=5")


def test_history_summary_line(fixed_clock):
    army = Army("Strong", [(UnitKind.KNIGHT, 2)])
    foe = Army("Weak", [(UnitKind.PIKEMAN, 2)])
    army.battle(foe, clock=fixed_clock)

    winner_line = ArmyReport.from_army(army).history[-1].summary()
    loser_line = ArmyReport.from_army(foe).history[-1].summary()

    assert winner_line == (
        "2025-08-10T12:00:00+00:00 vs Weak: Strong wins (40 vs 10) gold +100 "
        "| lost: none | killed: pikeman(5), pikeman(5)"
    )
    assert loser_line.endswith("gold +0 | lost: pikeman(5), pikeman(5) | killed: none")
