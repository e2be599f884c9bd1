"""Civilization presets: named starting compositions for new armies.

Presets are configuration data.  The built-in table mirrors the classic
three civilizations; alternative tables can be loaded from a JSON file of
the form ``[{"name": "...", "composition": [{"kind": "archer", "count": 3}]}]``.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter

from warband.domain.army import Army
from warband.domain.enums import UnitKind
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig


class UnknownCivilization(KeyError):
    """Raised when a preset name is not present in the table."""


class CompositionEntry(BaseModel):
    kind: UnitKind
    count: int = Field(..., ge=0, description="Number of units of this kind to raise")


class Civilization(BaseModel):
    """A named starting composition."""

    name: str = Field(..., min_length=1)
    composition: list[CompositionEntry] = Field(default_factory=list)

    def as_pairs(self) -> list[tuple[UnitKind, int]]:
        return [(entry.kind, entry.count) for entry in self.composition]


CIVILIZATIONS_ADAPTER: TypeAdapter[list[Civilization]] = TypeAdapter(list[Civilization])


def _preset(name: str, pikemen: int, archers: int, knights: int) -> Civilization:
    return Civilization(
        name=name,
        composition=[
            CompositionEntry(kind=UnitKind.PIKEMAN, count=pikemen),
            CompositionEntry(kind=UnitKind.ARCHER, count=archers),
            CompositionEntry(kind=UnitKind.KNIGHT, count=knights),
        ],
    )


DEFAULT_CIVILIZATIONS: Mapping[str, Civilization] = {
    civ.name: civ
    for civ in (
        _preset("Chinese", 2, 25, 2),
        _preset("English", 10, 10, 10),
        _preset("Byzantine", 5, 8, 15),
    )
}


def load_civilizations(path: Path) -> dict[str, Civilization]:
    """Load and validate a preset table from a JSON file."""

    civilizations = CIVILIZATIONS_ADAPTER.validate_json(path.read_bytes())
    table: dict[str, Civilization] = {}
    for civ in civilizations:
        if civ.name in table:
            raise ValueError(f"duplicate civilization {civ.name!r} in {path}")
        table[civ.name] = civ
    return table


def build_army(
    name: str,
    civilizations: Mapping[str, Civilization] | None = None,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> Army:
    """Raise an army named after the preset ``name``."""

    table = DEFAULT_CIVILIZATIONS if civilizations is None else civilizations
    civ = table.get(name)
    if civ is None:
        raise UnknownCivilization(name)
    return Army(civ.name, civ.as_pairs(), rules=rules)
