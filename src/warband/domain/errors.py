"""Domain errors raised by army operations.

Every error is a caller-correctable usage error: the operation that raised
it has not touched the army's gold or roster.
"""

from __future__ import annotations

from warband.domain.enums import UnitKind


class ArmyError(Exception):
    """Base class for rejected army operations."""


class UnitNotFound(ArmyError, LookupError):
    """The index does not address an existing roster slot."""

    def __init__(self, index: int, roster_size: int) -> None:
        super().__init__(f"unit not found at index {index} (roster size {roster_size})")
        self.index = index
        self.roster_size = roster_size


class InsufficientFunds(ArmyError):
    """The army cannot afford the requested operation."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"not enough gold: need {required}, have {available}")
        self.required = required
        self.available = available


class NotTransformable(ArmyError):
    """The unit's type has no successor in the promotion chain."""

    def __init__(self, kind: UnitKind) -> None:
        super().__init__(f"{kind} cannot transform")
        self.kind = kind
