"""
Measurement normalizer.

Raw measurements → canonical centimeters → derived measurements.

Every value a caller supplies must be finite and positive.  Absent values
are allowed: the derived quantities that depend on them stay None and the
drafter reports them when a block actually needs them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from blockdraft.core.errors import InvalidMeasurementSet
from blockdraft.core.formulas import FORMULA_VERSION, FORMULAS, RAW_DESCRIPTIONS
from blockdraft.core.units import coerce_unit, convert, to_inches
from blockdraft.models.schemas import (
    DerivedMeasurements,
    MeasurementRow,
    RawMeasurements,
    Unit,
    RAW_MEASUREMENT_NAMES,
)


def _is_usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def missing_measurements(required: Iterable[str], raw: RawMeasurements) -> list[str]:
    """Names in *required* that are absent or not positive in *raw*."""
    values = raw.measurement_values()
    return [name for name in required if not _is_usable(values.get(name))]


def normalize(raw: RawMeasurements, unit: Unit | str | None = None) -> DerivedMeasurements:
    """
    Convert *raw* to centimeters and compute every derived measurement.

    Parameters
    ----------
    raw : RawMeasurements
    unit : overrides ``raw.unit`` when given

    Raises
    ------
    InvalidUnit
        If the unit designation is not recognised.  Checked before any
        conversion.
    InvalidMeasurementSet
        If a supplied value is non-positive or non-finite, or nothing was
        supplied at all.
    """
    source_unit = coerce_unit(unit if unit is not None else raw.unit)

    supplied = {k: v for k, v in raw.measurement_values().items() if v is not None}
    if not supplied:
        raise InvalidMeasurementSet(
            "No measurements supplied", missing=RAW_MEASUREMENT_NAMES,
        )

    invalid = sorted(k for k, v in supplied.items() if not _is_usable(v))
    if invalid:
        raise InvalidMeasurementSet(
            f"Measurements must be positive: {', '.join(invalid)}", missing=invalid,
        )

    canonical = {
        k: convert(v, source_unit, Unit.centimeters) for k, v in supplied.items()
    }

    derived = {
        f.name: f.evaluate(canonical[f.source])
        for f in FORMULAS
        if f.source in canonical
    }

    return DerivedMeasurements(
        **canonical,
        **derived,
        formula_version=FORMULA_VERSION,
    )


def summarize(derived: DerivedMeasurements) -> list[MeasurementRow]:
    """
    Canonical and derived values in both units, raw measurements first and
    then in formula-table order.  Absent values are skipped.
    """
    rows: list[MeasurementRow] = []
    entries = list(RAW_DESCRIPTIONS.items()) + [(f.name, f.description) for f in FORMULAS]
    for key, description in entries:
        value = getattr(derived, key)
        if value is None:
            continue
        rows.append(MeasurementRow(
            key=key,
            description=description,
            value_cm=value,
            value_in=to_inches(value),
        ))
    return rows
