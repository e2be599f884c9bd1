"""Army aggregate: gold balance, ordered roster, and battle history.

Index-based operations address the roster in its current order.  That order
changes when casualties are removed (see :meth:`Army.remove_top_units`).
Every fallible operation checks all of its preconditions before touching
gold or the roster.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime

from warband.domain.enums import UnitKind
from warband.domain.errors import InsufficientFunds, NotTransformable, UnitNotFound
from warband.domain.models import ArmyID, BattleRecord, CasualtySnapshot, Unit, UnitView
from warband.domain.registry import UNIT_TYPES, definition_of
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

Composition = Iterable[tuple[UnitKind | str, int]]


class Army:
    """A named army that owns its units and its history exclusively."""

    def __init__(
        self,
        name: str,
        composition: Composition = (),
        *,
        gold: int | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        starting_gold = rules.economy.starting_gold if gold is None else gold
        if starting_gold < 0:
            raise ValueError("starting gold cannot be negative")

        self.name = ArmyID(name)
        self.rules = rules
        self._gold = starting_gold
        self._units: list[Unit] = []
        self._history: list[BattleRecord] = []
        self._raise_units(composition)

    def __repr__(self) -> str:
        return f"Army(name={self.name!r}, gold={self._gold}, units={len(self._units)})"

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[UnitView]:
        return iter(self.units)

    @property
    def gold(self) -> int:
        return self._gold

    @property
    def units(self) -> tuple[UnitView, ...]:
        return tuple(unit.view() for unit in self._units)

    @property
    def history(self) -> tuple[BattleRecord, ...]:
        return tuple(self._history)

    def unit_at(self, index: int) -> UnitView:
        """Return a read-only view of roster slot ``index``."""

        return self._slot(index).view()

    # --- economy ----------------------------------------------------------

    def train_unit(self, index: int) -> UnitView:
        """Pay the training cost of the unit at ``index`` and train it."""

        unit = self._slot(index)
        cost = unit.definition.training_cost
        self._require_funds(cost)

        self._gold -= cost
        unit.train()
        logger.debug(
            "%s trained %s at slot %d (strength %d, gold %d)",
            self.name,
            unit.kind,
            index,
            unit.strength,
            self._gold,
        )
        return unit.view()

    def transform_unit(self, index: int) -> UnitView:
        """Promote the unit at ``index`` to the next type in the chain.

        The replacement starts at the new type's base strength; only
        service years carry over.  Training bonuses are lost.
        """

        current = self._slot(index)
        definition = current.definition
        if definition.next_kind is None or definition.transformation_cost is None:
            logger.debug("%s cannot transform %s at slot %d", self.name, current.kind, index)
            raise NotTransformable(current.kind)
        cost = definition.transformation_cost
        self._require_funds(cost)

        self._gold -= cost
        promoted = Unit.recruit(definition.next_kind, service_years=current.service_years)
        self._units[index] = promoted
        logger.debug(
            "%s transformed %s into %s at slot %d (gold %d)",
            self.name,
            current.kind,
            promoted.kind,
            index,
            self._gold,
        )
        return promoted.view()

    # --- battle support ---------------------------------------------------

    def total_strength(self) -> int:
        return sum(unit.strength for unit in self._units)

    def remove_top_units(self, n: int) -> list[CasualtySnapshot]:
        """Remove the ``n`` strongest units and return snapshots of them.

        The roster is left sorted by descending strength; ties keep their
        previous relative order.
        """

        if n < 0:
            raise ValueError("cannot remove a negative number of units")
        self._units.sort(key=lambda unit: unit.strength, reverse=True)
        removed = self._units[:n]
        del self._units[:n]
        return [unit.snapshot() for unit in removed]

    def advance_all_service_years(self) -> None:
        for unit in self._units:
            unit.advance_service_year()

    def battle(self, opponent: Army, *, clock: Callable[[], datetime] | None = None) -> str:
        """Fight ``opponent`` and return the result label."""

        from warband.domain.battle import resolve_battle

        return resolve_battle(self, opponent, clock=clock, rules=self.rules).label

    # --- reporting --------------------------------------------------------

    def unit_counts(self) -> dict[UnitKind, int]:
        """Number of units per kind, including kinds with no units."""

        counts = Counter(unit.kind for unit in self._units)
        return {kind: counts.get(kind, 0) for kind in UNIT_TYPES}

    def average_service_years(self) -> float:
        if not self._units:
            return 0.0
        total = sum(unit.service_years for unit in self._units)
        return round(total / len(self._units), 2)

    # --- internals --------------------------------------------------------

    def _raise_units(self, composition: Composition) -> None:
        entries = [(definition_of(kind).kind, count) for kind, count in composition]
        if any(count < 0 for _, count in entries):
            raise ValueError("unit count cannot be negative")
        for kind, count in entries:
            self._units.extend(Unit.recruit(kind) for _ in range(count))

    def _slot(self, index: int) -> Unit:
        if not 0 <= index < len(self._units):
            raise UnitNotFound(index, len(self._units))
        return self._units[index]

    def _require_funds(self, cost: int) -> None:
        if self._gold < cost:
            logger.debug("%s rejected spend of %d with %d gold", self.name, cost, self._gold)
            raise InsufficientFunds(cost, self._gold)

    def _credit(self, amount: int) -> None:
        self._gold += amount

    def _record(self, entry: BattleRecord) -> None:
        self._history.append(entry)
