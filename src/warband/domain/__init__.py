"""Domain model for Warband.

The package is split the same way the rules are:

* Unit definitions and the promotion chain (see :mod:`registry`).
* Mutable units and frozen history entries (see :mod:`models`).
* The army aggregate with its economy (see :mod:`army`).
* Battle resolution between two armies (see :mod:`battle`).

Everything here operates purely in memory and holds no global mutable state.
"""

from . import army, battle, enums, errors, models, registry, rules_config

__all__ = [
    "army",
    "battle",
    "enums",
    "errors",
    "models",
    "registry",
    "rules_config",
]
