"""
Canonical derived-measurement formulas.

Every derived quantity is a linear function of exactly one canonical raw
measurement (centimeters):

    value = scale × source + offset

Drafting references
───────────────────
Several ratio sets circulate for the same quantity (neck width alone is
drafted as 0.05·Cg + 3, 0.06·Cg, or Cg/16 + 3 depending on the system).
This table fixes one set and versions it.  Any change to a coefficient is
a change of FORMULA_VERSION: drafted geometry is not comparable across
versions.

  Quantity            │  Formula                     │  Source
  ────────────────────┼──────────────────────────────┼────────────
  Neck width          │  Cg × 0.05 + 3               │  chest
  Scye depth          │  Cg / 8 + 12.5               │  chest
  Back waist length   │  Bh / 4                      │  height
  Armhole depth       │  scye depth + 2.5            │  chest
  Back width          │  Cg × 0.2 + 1.2              │  chest
  Chest width         │  Cg × 0.2 + 0.8              │  chest
  Shoulder slope      │  Cg × 0.05                   │  chest
  Shoulder drop       │  Cg × 0.03                   │  chest
  Bust level          │  Bh × 0.25                   │  height
  Bust dart width     │  Cg × 0.1                    │  chest
  Dart width          │  Wg × 0.02                   │  waist
  Wrist width         │  Cg × 0.1                    │  chest
  Garment length      │  Bh/2 − Bh/8 − 3             │  height
  Scye width          │  Cg / 8 + 3                  │  chest
  Abdomen width       │  Wg / 4 − 1.3                │  waist
  Total chest         │  Bw + Sw + Cw                │  chest
  Half chest          │  Cg / 2                      │  chest
  Ease                │  total chest − half chest    │  chest
"""

from __future__ import annotations

from dataclasses import dataclass

FORMULA_VERSION = "1.0"


@dataclass(frozen=True)
class Formula:
    name: str
    source: str  # RawMeasurements field
    scale: float
    offset: float
    description: str

    def evaluate(self, source_cm: float) -> float:
        return self.scale * source_cm + self.offset


# Composite rows are expanded to a single source so no formula reads
# another formula's output.
_SCYE_DEPTH = (1 / 8, 12.5)
_BACK_WIDTH = (0.2, 1.2)
_SCYE_WIDTH = (1 / 8, 3.0)
_CHEST_WIDTH = (0.2, 0.8)
_TOTAL_CHEST = (
    _BACK_WIDTH[0] + _SCYE_WIDTH[0] + _CHEST_WIDTH[0],
    _BACK_WIDTH[1] + _SCYE_WIDTH[1] + _CHEST_WIDTH[1],
)

FORMULAS: tuple[Formula, ...] = (
    Formula("neck_width", "chest_girth", 0.05, 3.0, "Neck Width"),
    Formula("scye_depth", "chest_girth", *_SCYE_DEPTH, "Scye Depth"),
    Formula("back_waist_length", "body_height", 1 / 4, 0.0, "Back Waist Length"),
    Formula("armhole_depth", "chest_girth", _SCYE_DEPTH[0], _SCYE_DEPTH[1] + 2.5, "Armhole Depth"),
    Formula("back_width", "chest_girth", *_BACK_WIDTH, "Back Width"),
    Formula("chest_width", "chest_girth", *_CHEST_WIDTH, "Chest Width"),
    Formula("shoulder_slope", "chest_girth", 0.05, 0.0, "Shoulder Slope"),
    Formula("shoulder_drop", "chest_girth", 0.03, 0.0, "Shoulder Drop"),
    Formula("bust_level", "body_height", 0.25, 0.0, "Bust Level"),
    Formula("bust_dart_width", "chest_girth", 0.1, 0.0, "Bust Dart Width"),
    Formula("dart_width", "waist_girth", 0.02, 0.0, "Dart Width"),
    Formula("wrist_width", "chest_girth", 0.1, 0.0, "Wrist Width"),
    Formula("garment_length", "body_height", 1 / 2 - 1 / 8, -3.0, "Length"),
    Formula("scye_width", "chest_girth", *_SCYE_WIDTH, "Scye Width"),
    Formula("abdomen_width", "waist_girth", 1 / 4, -1.3, "Abdomen Width"),
    Formula("total_chest", "chest_girth", *_TOTAL_CHEST, "Total Chest"),
    Formula("half_chest", "chest_girth", 1 / 2, 0.0, "Minus (1/2 Cg)"),
    Formula("ease", "chest_girth", _TOTAL_CHEST[0] - 1 / 2, _TOTAL_CHEST[1], "Ease"),
)

FORMULAS_BY_NAME: dict[str, Formula] = {f.name: f for f in FORMULAS}

RAW_DESCRIPTIONS: dict[str, str] = {
    "body_height": "Body Height",
    "chest_girth": "Chest Girth",
    "waist_girth": "Waist Girth",
    "hip_girth": "Hip Girth",
    "sleeve_length": "Sleeve Length",
}
