"""Unit type registry.

Static table of unit definitions keyed by :class:`UnitKind`, including the
promotion chain pikeman -> archer -> knight.  The table is read-only and
safe to share between armies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from warband.domain.enums import UnitKind


@dataclass(frozen=True, slots=True)
class UnitTypeDefinition:
    """Catalog entry describing one unit type."""

    kind: UnitKind
    display_name: str
    base_strength: int
    training_cost: int
    training_bonus: int
    transformation_cost: int | None = None
    next_kind: UnitKind | None = None

    @property
    def is_terminal(self) -> bool:
        """True when the type cannot be promoted any further."""
        return self.next_kind is None


UNIT_TYPES: Mapping[UnitKind, UnitTypeDefinition] = MappingProxyType(
    {
        UnitKind.PIKEMAN: UnitTypeDefinition(
            kind=UnitKind.PIKEMAN,
            display_name="Pikeman",
            base_strength=5,
            training_cost=10,
            training_bonus=3,
            transformation_cost=30,
            next_kind=UnitKind.ARCHER,
        ),
        UnitKind.ARCHER: UnitTypeDefinition(
            kind=UnitKind.ARCHER,
            display_name="Archer",
            base_strength=10,
            training_cost=20,
            training_bonus=7,
            transformation_cost=40,
            next_kind=UnitKind.KNIGHT,
        ),
        UnitKind.KNIGHT: UnitTypeDefinition(
            kind=UnitKind.KNIGHT,
            display_name="Knight",
            base_strength=20,
            training_cost=30,
            training_bonus=10,
        ),
    }
)


def definition_of(kind: UnitKind | str) -> UnitTypeDefinition:
    """Return the definition for ``kind``."""
    return UNIT_TYPES[UnitKind(kind)]


def next_type_of(kind: UnitKind | str) -> UnitKind | None:
    """Return the kind reached by promoting ``kind``, or ``None`` if terminal."""
    return definition_of(kind).next_kind


def promotion_chain(kind: UnitKind | str) -> tuple[UnitKind, ...]:
    """Return ``kind`` followed by every kind reachable through promotion."""

    chain: list[UnitKind] = []
    current: UnitKind | None = UnitKind(kind)
    while current is not None:
        chain.append(current)
        current = next_type_of(current)
    return tuple(chain)
