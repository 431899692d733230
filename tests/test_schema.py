"""Tests for the parameter schema and type enumerations."""

import pytest

from conpave_adviser.exceptions import InvalidParameterValueError, UnknownPavementTypeError
from conpave_adviser.schema import (
    ConfidenceLevel,
    DesignLife,
    ParameterSet,
    PavementType,
    SlabThickness,
    TrafficVolume,
    YesNo,
    coerce_parameters,
)


class TestParameterSet:
    """Validation at the parameter boundary."""

    def test_accepts_camel_case_keys(self):
        params = ParameterSet.from_mapping({"trafficVolume": "3", "marineEnvironment": "Yes"})
        assert params.traffic_volume == TrafficVolume.HIGH
        assert params.marine_environment == YesNo.YES

    def test_accepts_snake_case_keys(self):
        params = ParameterSet.from_mapping({"design_life": "30", "slab_thickness": "250"})
        assert params.design_life == DesignLife.YEARS_30
        assert params.slab_thickness.mm == 250

    def test_numeric_values_are_read_as_buckets(self):
        params = ParameterSet.from_mapping({"trafficVolume": 2, "slabThickness": 300})
        assert params.traffic_volume == TrafficVolume.MEDIUM
        assert params.slab_thickness == SlabThickness.MM_300

    def test_blank_values_are_unset(self):
        params = ParameterSet.from_mapping({"trafficVolume": "  ", "designLife": ""})
        assert params.traffic_volume is None
        assert params.design_life is None

    def test_empty_mapping_is_valid(self):
        params = ParameterSet.from_mapping({})
        assert params.present_primary_fields() == []
        assert not params.has_complete_primary_input()

    @pytest.mark.parametrize("key,value", [
        ("trafficVolume", "5"),
        ("designLife", "25"),
        ("subgradeCBR", "0"),
        ("slabThickness", "175"),
        ("marineEnvironment", "Maybe"),
        ("constructionTime", "Urgent"),
    ], ids=["traffic", "life", "cbr", "slab", "marine", "time"])
    def test_rejects_values_outside_domain(self, key, value):
        with pytest.raises(InvalidParameterValueError) as exc_info:
            ParameterSet.from_mapping({key: value})
        assert exc_info.value.fields == [key]

    def test_rejects_unknown_keys(self):
        with pytest.raises(InvalidParameterValueError):
            ParameterSet.from_mapping({"trafficVolume": "2", "speedLimit": "80"})

    def test_invalid_value_is_also_a_value_error(self):
        with pytest.raises(ValueError):
            ParameterSet.from_mapping({"trafficVolume": "high"})

    def test_is_immutable(self, jpcp_params):
        with pytest.raises(Exception):
            jpcp_params.traffic_volume = TrafficVolume.LOW

    def test_complete_primary_input(self, jpcp_params):
        assert jpcp_params.has_complete_primary_input()
        assert jpcp_params.present_primary_fields() == [
            "traffic_volume", "design_life", "subgrade_cbr", "slab_thickness",
        ]

    def test_to_record_uses_camel_case(self, jpcp_params):
        assert jpcp_params.to_record() == {
            "trafficVolume": "2",
            "designLife": "20",
            "subgradeCBR": "3",
            "slabThickness": "200",
        }

    def test_coerce_passes_parameter_sets_through(self, jpcp_params):
        assert coerce_parameters(jpcp_params) is jpcp_params
        assert coerce_parameters(None) == ParameterSet()


class TestPavementType:
    """Type codes and ordering."""

    def test_canonical_order(self):
        assert [t.value for t in PavementType] == ["JPCP", "JRCP", "CRCP", "PCP"]

    @pytest.mark.parametrize("code", ["crcp", "CRCP", " Crcp "])
    def test_from_string_ignores_case(self, code):
        assert PavementType.from_string(code) == PavementType.CRCP

    def test_from_string_rejects_unknown(self):
        with pytest.raises(UnknownPavementTypeError):
            PavementType.from_string("SMA")


class TestConfidenceLevel:
    """Confidence scale shifting."""

    def test_shift_up_and_down(self):
        assert ConfidenceLevel.MODERATE.shift(1) == ConfidenceLevel.HIGH
        assert ConfidenceLevel.MODERATE.shift(-1) == ConfidenceLevel.LOW

    def test_shift_is_clamped(self):
        assert ConfidenceLevel.VERY_HIGH.shift(1) == ConfidenceLevel.VERY_HIGH
        assert ConfidenceLevel.VERY_LOW.shift(-1) == ConfidenceLevel.VERY_LOW


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
