"""
Drafting error taxonomy.

All errors subclass ValueError: they describe bad input, never a transient
fault, so there is nothing to retry.
"""

from __future__ import annotations

from collections.abc import Iterable

from blockdraft.models.schemas import DraftabilityReport


class DraftingError(ValueError):
    """Base class for every error raised by the drafting core."""


class InvalidUnit(DraftingError):
    """Unit designation outside {centimeters, inches}."""

    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Unsupported unit {unit!r}. Allowed: 'cm', 'in'")


class InvalidMeasurementSet(DraftingError):
    """Measurement set is incomplete or holds unusable values."""

    def __init__(self, message: str, missing: Iterable[str] = ()):
        self.missing = list(missing)
        super().__init__(message)


class MissingMeasurement(DraftingError):
    """A block was drafted without the raw measurements it requires."""

    def __init__(self, report: DraftabilityReport):
        self.report = report
        super().__init__(
            f"Block '{report.block_id}' is not draftable; "
            f"missing or non-positive: {', '.join(report.missing)}"
        )


class UnknownBlock(DraftingError, KeyError):
    """Block id not in the pattern block library."""

    def __init__(self, block_id: str):
        self.block_id = block_id
        super().__init__(f"Unknown pattern block: {block_id!r}")

    def __str__(self) -> str:
        # KeyError would repr the message
        return self.args[0]
