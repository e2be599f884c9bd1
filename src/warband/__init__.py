"""Warband: typed armies, training, promotion, and deterministic battles."""

__version__ = "0.1.0"
