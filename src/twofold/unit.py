"""Unit marker used for result slots that carry no payload."""

from __future__ import annotations

import enum

__all__ = ["UNIT", "Unit", "is_unit"]


class Unit(enum.Enum):
    """Single-valued marker type; ``UNIT`` is its only member."""

    UNIT = "unit"

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit.UNIT


def is_unit(obj: object) -> bool:
    """Return True when *obj* is the unit marker."""
    return obj is UNIT
