"""
Pydantic models for API request/response and internal data transfer.
"""

from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Enums ──────────────────────────────────────────────────────────────

class Unit(str, Enum):
    centimeters = "cm"
    inches = "in"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _UNIT_ALIASES.get(value.strip().lower())
        return None


_UNIT_ALIASES = {
    "cm": Unit.centimeters,
    "centimeter": Unit.centimeters,
    "centimeters": Unit.centimeters,
    "in": Unit.inches,
    "inch": Unit.inches,
    "inches": Unit.inches,
}


class PieceType(str, Enum):
    bodice_front = "bodice-front"
    bodice_back = "bodice-back"
    sleeve = "sleeve"


# ── Measurements ───────────────────────────────────────────────────────

RAW_MEASUREMENT_NAMES: tuple[str, ...] = (
    "body_height",
    "chest_girth",
    "waist_girth",
    "hip_girth",
    "sleeve_length",
)


class RawMeasurements(BaseModel):
    """Body measurements as entered, in ``unit``.  Any field may be absent."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    body_height: float | None = Field(None, alias="bodyHeight")
    chest_girth: float | None = Field(None, alias="chestGirth")
    waist_girth: float | None = Field(None, alias="waistGirth")
    hip_girth: float | None = Field(None, alias="hipGirth")
    sleeve_length: float | None = Field(None, alias="sleeveLength")
    unit: Unit | str = Unit.centimeters

    @field_validator("unit", mode="before")
    @classmethod
    def _resolve_unit_alias(cls, value):
        # unrecognised text is kept; normalize() rejects it as InvalidUnit
        if isinstance(value, str):
            try:
                return Unit(value)
            except ValueError:
                return value
        return value

    def measurement_values(self) -> dict[str, float | None]:
        return {name: getattr(self, name) for name in RAW_MEASUREMENT_NAMES}


class DerivedMeasurements(BaseModel):
    """Canonical raw values plus every derived quantity, all in centimeters.

    A derived field is None when the raw measurement it is computed from
    was not supplied.
    """
    model_config = ConfigDict(frozen=True)

    # canonical raw values
    body_height: float | None = None
    chest_girth: float | None = None
    waist_girth: float | None = None
    hip_girth: float | None = None
    sleeve_length: float | None = None

    # derived
    neck_width: float | None = None
    scye_depth: float | None = None
    back_waist_length: float | None = None
    armhole_depth: float | None = None
    back_width: float | None = None
    chest_width: float | None = None
    shoulder_slope: float | None = None
    shoulder_drop: float | None = None
    bust_level: float | None = None
    bust_dart_width: float | None = None
    dart_width: float | None = None
    wrist_width: float | None = None
    garment_length: float | None = None
    scye_width: float | None = None
    abdomen_width: float | None = None
    total_chest: float | None = None
    half_chest: float | None = None
    ease: float | None = None

    formula_version: str


class MeasurementRow(BaseModel):
    """One line of the measurement summary, in both units."""
    key: str
    description: str
    value_cm: float
    value_in: float


# ── Geometry ───────────────────────────────────────────────────────────

class Point2D(BaseModel):
    """Pattern coordinate in cm.  y is negative below the origin."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Dart(BaseModel):
    """
    A dart as anchor position, opening width and length.

    The legs run from the two base points, ``width / 2`` either side of
    ``position`` on the same y, to the apex ``length`` below ``position``.
    """
    model_config = ConfigDict(frozen=True)

    position: Point2D
    width: float
    length: float

    @property
    def apex(self) -> Point2D:
        return Point2D(x=self.position.x, y=self.position.y - self.length)

    def legs(self) -> tuple[list[Point2D], list[Point2D]]:
        """Return (left leg, right leg), each [base point, apex]."""
        apex = self.apex
        left = Point2D(x=self.position.x - self.width / 2, y=self.position.y)
        right = Point2D(x=self.position.x + self.width / 2, y=self.position.y)
        return [left, apex], [right, apex]


class PatternPiece(BaseModel):
    type: PieceType
    points: dict[str, Point2D]
    seams: dict[str, list[Point2D]]
    darts: dict[str, Dart] = Field(default_factory=dict)
    grain_line: list[Point2D] = Field(default_factory=list)
    seam_lengths: dict[str, float] = Field(default_factory=dict)
    dart_legs: dict[str, list[list[Point2D]]] = Field(default_factory=dict)


# ── Blocks ─────────────────────────────────────────────────────────────

class PatternBlock(BaseModel):
    """Static block metadata.  Not computed."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    pieces: list[PieceType]
    required_measurements: list[str]


class DraftabilityReport(BaseModel):
    block_id: str
    draftable: bool
    missing: list[str] = Field(default_factory=list)


# ── API request / response ─────────────────────────────────────────────

class RenderingSettings(BaseModel):
    seam_allowance_cm: float
    display_scale: float


class NormalizeRequest(BaseModel):
    measurements: RawMeasurements
    unit: str | None = Field(None, description="Overrides measurements.unit when set")


class NormalizeResponse(BaseModel):
    derived: DerivedMeasurements
    summary: list[MeasurementRow]


class DraftRequest(BaseModel):
    piece_type: PieceType
    measurements: RawMeasurements
    unit: str | None = None


class DraftResponse(BaseModel):
    piece: PatternPiece
    rendering: RenderingSettings


class BlockDraftRequest(BaseModel):
    measurements: RawMeasurements
    unit: str | None = None


class BlockDraftResponse(BaseModel):
    block_id: str
    pieces: list[PatternPiece]
    rendering: RenderingSettings


class HealthResponse(BaseModel):
    status: str
    version: str


class ErrorResponse(BaseModel):
    detail: str | dict
