"""Command-line walkthrough: raise two armies, train, promote, and fight."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from warband.config import Settings, get_settings
from warband.domain.army import Army
from warband.domain.errors import ArmyError
from warband.logging_config import configure_logging
from warband.presets import (
    DEFAULT_CIVILIZATIONS,
    Civilization,
    build_army,
    load_civilizations,
)
from warband.schemas.report import ArmyReport

logger = logging.getLogger(__name__)

# (side, operation, roster index); side 0 is the army, side 1 the opponent
DEFAULT_TRAINING = ((0, "train", 2), (0, "train", 27), (1, "train", 0))
DEFAULT_TRANSFORMS = ((0, "transform", 0), (1, "transform", 10))
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def apply_step(army: Army, operation: str, index: int) -> bool:
    """Run one economic step, logging and skipping it when rejected."""

    try:
        if operation == "train":
            unit = army.train_unit(index)
        elif operation == "transform":
            unit = army.transform_unit(index)
        else:
            raise ValueError(f"unknown operation {operation!r}")
    except ArmyError as exc:
        logger.warning("%s: %s slot %d skipped: %s", army.name, operation, index, exc)
        return False
    logger.info(
        "%s: %s slot %d -> %s (strength %d, gold %d)",
        army.name,
        operation,
        index,
        unit.kind,
        unit.strength,
        army.gold,
    )
    return True


def run_walkthrough(
    army: Army,
    opponent: Army,
    *,
    on_phase: Callable[[str], None] | None = None,
) -> str:
    """Train, transform, and battle; return the battle result label.

    ``on_phase`` is called with the phase name after training, after
    transformation, and after the battle.
    """

    sides = (army, opponent)
    for phase, steps in (("training", DEFAULT_TRAINING), ("transformation", DEFAULT_TRANSFORMS)):
        for side, operation, index in steps:
            apply_step(sides[side], operation, index)
        if on_phase:
            on_phase(phase)

    logger.info(
        "average service years before battle: %s=%.2f %s=%.2f",
        army.name,
        army.average_service_years(),
        opponent.name,
        opponent.average_service_years(),
    )
    sizes_before = (len(army), len(opponent))
    result = army.battle(opponent)
    logger.info(
        "losses: %s=%d %s=%d",
        army.name,
        sizes_before[0] - len(army),
        opponent.name,
        sizes_before[1] - len(opponent),
    )
    if on_phase:
        on_phase("battle")
    return result


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Warband battle walkthrough")
    parser.add_argument("--army", default="Chinese", help="Civilization of the first army")
    parser.add_argument("--opponent", default="English", help="Civilization of the opponent")
    parser.add_argument(
        "--civilizations",
        type=Path,
        default=settings.civilizations_file,
        help="JSON file with civilization presets",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Log level",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final army reports as JSON",
    )
    return parser


def _print_phase(phase: str, armies: Sequence[Army]) -> None:
    print("=" * 60)
    print(f"After {phase}:")
    for army in armies:
        print(ArmyReport.from_army(army).summary())


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    # choices are not applied to defaults taken from settings
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r}")
    configure_logging(args.log_level)

    civilizations: Mapping[str, Civilization] = DEFAULT_CIVILIZATIONS
    if args.civilizations:
        try:
            civilizations = load_civilizations(args.civilizations)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot load civilizations from {args.civilizations}: {exc}")
    for name in (args.army, args.opponent):
        if name not in civilizations:
            parser.error(
                f"unknown civilization {name!r} (choose from {', '.join(sorted(civilizations))})"
            )

    rules = settings.rules()
    army = build_army(args.army, civilizations, rules=rules)
    opponent = build_army(args.opponent, civilizations, rules=rules)
    armies = (army, opponent)

    if args.json:
        result = run_walkthrough(army, opponent)
        print(f"Battle result: {result}")
        reports = [ArmyReport.from_army(side) for side in armies]
        print(json.dumps([report.model_dump(mode="json") for report in reports], indent=2))
        return 0

    _print_phase("raising", armies)
    result = run_walkthrough(army, opponent, on_phase=lambda phase: _print_phase(phase, armies))
    print("=" * 60)
    print(f"Battle result: {result}")
    for report in (ArmyReport.from_army(side) for side in armies):
        print(f"Last history entry ({report.name}): {report.history[-1].summary()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
