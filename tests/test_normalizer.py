"""
Tests for measurement normalization and the derived formula table.
"""

import math

import pytest

from blockdraft.core.errors import InvalidMeasurementSet, InvalidUnit
from blockdraft.core.formulas import FORMULA_VERSION, FORMULAS, FORMULAS_BY_NAME
from blockdraft.core.normalizer import missing_measurements, normalize, summarize
from blockdraft.core.units import to_centimeters
from blockdraft.models.schemas import RawMeasurements, Unit


class TestCanonicalScenario:

    def test_scye_depth(self, derived):
        assert derived.scye_depth == 25.0

    def test_back_waist_length(self, derived):
        assert derived.back_waist_length == 44.75

    def test_formula_table(self, derived):
        expected = {
            "neck_width": 8.0,
            "armhole_depth": 27.5,
            "back_width": 21.2,
            "chest_width": 20.8,
            "shoulder_slope": 5.0,
            "shoulder_drop": 3.0,
            "bust_level": 44.75,
            "bust_dart_width": 10.0,
            "dart_width": 1.8,
            "wrist_width": 10.0,
            "garment_length": 64.125,
            "scye_width": 15.5,
            "abdomen_width": 21.2,
            "total_chest": 57.5,
            "half_chest": 50.0,
            "ease": 7.5,
        }
        for name, value in expected.items():
            assert getattr(derived, name) == pytest.approx(value), name

    def test_raw_values_pass_through(self, derived, canonical_raw):
        for name, value in canonical_raw.measurement_values().items():
            assert getattr(derived, name) == value

    def test_armhole_is_scye_plus_allowance(self, derived):
        assert derived.armhole_depth == pytest.approx(derived.scye_depth + 2.5)

    def test_total_chest_and_ease_consistent(self, derived):
        assert derived.total_chest == pytest.approx(
            derived.back_width + derived.scye_width + derived.chest_width
        )
        assert derived.ease == pytest.approx(derived.total_chest - derived.half_chest)

    def test_formula_version_recorded(self, derived):
        assert derived.formula_version == FORMULA_VERSION


class TestInches:

    def test_chest_converted(self):
        dm = normalize(RawMeasurements(chest_girth=40, unit=Unit.inches))
        assert dm.chest_girth == pytest.approx(101.60, abs=0.005)
        assert dm.chest_girth == to_centimeters(40)

    def test_unit_argument_overrides_model(self):
        raw = RawMeasurements(chest_girth=40)
        assert normalize(raw, "in").chest_girth == to_centimeters(40)

    def test_derived_from_converted_value(self):
        dm = normalize(RawMeasurements(chest_girth=40, unit="inches"))
        assert dm.scye_depth == pytest.approx(to_centimeters(40) / 8 + 12.5)

    def test_invalid_unit_rejected_first(self):
        raw = RawMeasurements(chest_girth=-1)
        with pytest.raises(InvalidUnit):
            normalize(raw, "furlongs")

    def test_invalid_unit_on_model(self):
        raw = RawMeasurements(chest_girth=-1, unit="furlongs")
        with pytest.raises(InvalidUnit) as info:
            normalize(raw)
        assert info.value.unit == "furlongs"

    def test_unit_alias_resolved_on_model(self):
        assert RawMeasurements(chest_girth=40, unit=" Inches ").unit is Unit.inches


class TestValidation:

    def test_empty_set_rejected(self):
        with pytest.raises(InvalidMeasurementSet):
            normalize(RawMeasurements())

    @pytest.mark.parametrize("bad", [0.0, -5.0, math.nan, math.inf])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(InvalidMeasurementSet) as info:
            normalize(RawMeasurements(chest_girth=100, waist_girth=bad))
        assert info.value.missing == ["waist_girth"]

    def test_absent_source_leaves_derived_empty(self):
        dm = normalize(RawMeasurements(chest_girth=100, body_height=179))
        assert dm.waist_girth is None
        assert dm.dart_width is None
        assert dm.abdomen_width is None
        assert dm.scye_depth == 25.0

    def test_missing_measurements(self, canonical_raw):
        assert missing_measurements(["chest_girth", "waist_girth"], canonical_raw) == []
        partial = RawMeasurements(chest_girth=100, waist_girth=0)
        assert missing_measurements(
            ["body_height", "chest_girth", "waist_girth"], partial,
        ) == ["body_height", "waist_girth"]


class TestMonotonicity:

    @pytest.mark.parametrize("name", ["neck_width", "scye_depth", "back_width", "chest_width"])
    def test_increasing_in_chest(self, name):
        values = [
            getattr(normalize(RawMeasurements(chest_girth=c)), name)
            for c in (60, 80, 100, 100.5, 130, 180)
        ]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_every_formula_has_known_source(self):
        sources = {"body_height", "chest_girth", "waist_girth", "hip_girth", "sleeve_length"}
        assert all(f.source in sources for f in FORMULAS)
        assert len(FORMULAS_BY_NAME) == len(FORMULAS)


class TestDeterminism:

    def test_repeat_normalize_identical(self, canonical_raw):
        assert normalize(canonical_raw) == normalize(canonical_raw)


class TestSummarize:

    def test_raw_rows_first(self, derived):
        rows = summarize(derived)
        assert [r.key for r in rows[:5]] == [
            "body_height", "chest_girth", "waist_girth", "hip_girth", "sleeve_length",
        ]
        assert len(rows) == 5 + len(FORMULAS)

    def test_row_units(self, derived):
        row = next(r for r in summarize(derived) if r.key == "scye_depth")
        assert row.description == "Scye Depth"
        assert row.value_cm == 25.0
        assert row.value_in == pytest.approx(25.0 * 0.3937)

    def test_absent_values_skipped(self):
        rows = summarize(normalize(RawMeasurements(sleeve_length=60)))
        assert [r.key for r in rows] == ["sleeve_length"]
