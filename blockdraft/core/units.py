"""Unit conversion.  The canonical drafting unit is the centimeter."""

from __future__ import annotations

from blockdraft.core.errors import InvalidUnit
from blockdraft.models.schemas import Unit

CM_TO_INCHES: float = 0.3937


def coerce_unit(value: Unit | str) -> Unit:
    """Resolve a unit designation, accepting the usual text spellings."""
    if isinstance(value, Unit):
        return value
    try:
        return Unit(value)
    except (ValueError, TypeError) as exc:
        raise InvalidUnit(value) from exc


def to_inches(cm: float) -> float:
    return cm * CM_TO_INCHES


def to_centimeters(inches: float) -> float:
    return inches / CM_TO_INCHES


def convert(value: float, source: Unit | str, target: Unit | str) -> float:
    """Convert *value* from *source* to *target* unit."""
    source = coerce_unit(source)
    target = coerce_unit(target)
    if source == target:
        return value
    if target == Unit.centimeters:
        return to_centimeters(value)
    return to_inches(value)
