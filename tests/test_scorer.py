"""Tests for the weighted scoring engine and calibration."""

import itertools
import math

import pytest

from conpave_adviser.calibration import CalibrationWeights, apply_calibration
from conpave_adviser.engine import score_pavement_types
from conpave_adviser.exceptions import (
    CalibrationOutOfRangeError,
    InsufficientInputError,
    InvalidParameterValueError,
)
from conpave_adviser.schema import (
    ConfidenceLevel,
    ConstructionTime,
    DesignLife,
    ParameterSet,
    PavementType,
    SlabThickness,
    SubgradeCBR,
    TrafficVolume,
    YesNo,
)
from conpave_adviser.scorer import PavementScorer, confidence_for, rank
from conpave_adviser.standards import PARAMETER_SPACE

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


@pytest.fixture(scope="module")
def scorer():
    return PavementScorer()


def parameter_space_for(traffic):
    """Every complete parameter set with the given traffic volume."""
    names = [name for name in PARAMETER_SPACE if name != "traffic_volume"]
    for values in itertools.product(*(PARAMETER_SPACE[name] for name in names)):
        yield ParameterSet(traffic_volume=traffic, **dict(zip(names, values)))


def assert_score_invariants(result):
    scores = result.scores
    ordering = rank(scores)
    leader, second = scores[ordering[0]], scores[ordering[1]]

    assert all(0 <= s <= 100 for s in scores.values())
    assert result.recommended_type == ordering[0]
    assert result.highest_score == leader
    assert result.score_difference == leader - second
    assert leader <= math.floor(second * 1.5)
    assert all(s >= math.ceil(leader / 2) for s in scores.values())
    assert 50 <= result.reliability <= 95


class TestScoringScenarios:
    """Literal scenarios with hand-checked results."""

    def test_ideal_jpcp(self, scorer, jpcp_params):
        result = scorer.score(jpcp_params)

        assert result.recommended_type == J
        assert result.scores == {J: 100, R: 67, C: 55, P: 63}
        assert result.highest_score == 100
        assert result.score_difference == 33
        assert result.confidence_level == ConfidenceLevel.VERY_HIGH
        assert result.reliability == 95

    def test_heavy_corridor_favours_crcp(self, scorer, crcp_params):
        result = scorer.score(crcp_params)

        assert result.recommended_type == C
        assert result.scores == {J: 59, R: 66, C: 99, P: 50}
        assert result.confidence_level == ConfidenceLevel.VERY_HIGH
        assert result.reliability == 75

    def test_light_rural_road_favours_pcp(self, scorer, pcp_params):
        result = scorer.score(pcp_params)

        assert result.recommended_type == P
        assert result.scores == {J: 53, R: 45, C: 40, P: 79}
        assert result.score_difference == 26
        assert result.confidence_level == ConfidenceLevel.HIGH

    def test_accepts_plain_mapping(self):
        result = score_pavement_types({"trafficVolume": "2", "designLife": "20"})
        assert result.recommended_type == J

    def test_single_primary_factor_is_enough(self, scorer):
        result = scorer.score({"slabThickness": "300"})
        assert result.recommended_type in PavementType

    def test_ranked_and_runner_up(self, scorer, jpcp_params):
        result = scorer.score(jpcp_params)
        assert [t for t, _ in result.ranked()] == [J, R, P, C]
        assert result.runner_up == R


class TestScoringErrors:
    """Invalid and insufficient input."""

    def test_no_primary_factor_raises(self, scorer):
        with pytest.raises(InsufficientInputError):
            scorer.score({})

    def test_only_secondary_factors_raises(self, scorer):
        with pytest.raises(InsufficientInputError):
            scorer.score({"marineEnvironment": "Yes", "constructionTime": "Limited"})

    def test_invalid_value_raises(self, scorer):
        with pytest.raises(InvalidParameterValueError):
            scorer.score({"trafficVolume": "9"})


class TestScoringInvariants:
    """Properties that hold for every complete primary input."""

    @pytest.mark.parametrize("traffic", list(TrafficVolume), ids=lambda t: f"traffic-{t.value}")
    def test_invariants_over_full_parameter_space(self, scorer, traffic):
        for params in parameter_space_for(traffic):
            assert_score_invariants(scorer.score(params))

    @pytest.mark.parametrize("marine", [None, YesNo.YES], ids=["unset", "marine"])
    @pytest.mark.parametrize("time", [None, ConstructionTime.LIMITED], ids=["any-time", "limited"])
    def test_invariants_with_unset_secondary_fields(self, scorer, marine, time):
        for traffic, life, cbr, slab in itertools.product(TrafficVolume, DesignLife, SubgradeCBR, SlabThickness):
            params = ParameterSet(
                traffic_volume=traffic, design_life=life, subgrade_cbr=cbr, slab_thickness=slab,
                marine_environment=marine, construction_time=time,
            )
            assert_score_invariants(scorer.score(params))

    def test_deterministic(self, scorer):
        params = {"trafficVolume": "3", "designLife": "30", "subgradeCBR": "3",
                  "slabThickness": "250", "longitudinalJoints": "Width7"}
        assert scorer.score(params) == scorer.score(params)

    def test_input_is_not_modified(self, scorer, crcp_params):
        before = crcp_params.model_dump()
        scorer.score(crcp_params)
        assert crcp_params.model_dump() == before

    def test_ties_follow_canonical_order(self):
        assert rank({J: 60, R: 80, C: 80, P: 60}) == [R, C, J, P]


class TestConfidence:
    """Confidence levels from score and margin."""

    @pytest.mark.parametrize("highest,difference,expected", [
        (95, 10, ConfidenceLevel.VERY_HIGH),
        (85, 10, ConfidenceLevel.HIGH),
        (75, 10, ConfidenceLevel.MODERATE),
        (65, 10, ConfidenceLevel.LOW),
        (55, 10, ConfidenceLevel.VERY_LOW),
        (85, 4, ConfidenceLevel.MODERATE),
        (85, 15, ConfidenceLevel.VERY_HIGH),
        (55, 2, ConfidenceLevel.VERY_LOW),
        (95, 20, ConfidenceLevel.VERY_HIGH),
    ], ids=["very-high", "high", "moderate", "low", "very-low",
            "close-margin", "clear-margin", "clamp-bottom", "clamp-top"])
    def test_confidence_for(self, highest, difference, expected):
        assert confidence_for(highest, difference) == expected


class TestReliability:
    """Reliability bonuses, penalties and clamping."""

    def test_base_for_partial_input(self, scorer):
        assert scorer.score({"trafficVolume": "2"}).reliability == 75

    def test_complete_input_bonus(self, scorer):
        params = {"trafficVolume": "2", "designLife": "30", "subgradeCBR": "2", "slabThickness": "250"}
        assert scorer.score(params).reliability == 85

    def test_optimal_crcp_combination_needs_no_hazards(self, scorer):
        params = {"trafficVolume": "4", "designLife": "40", "subgradeCBR": "4", "slabThickness": "300"}
        assert scorer.score(params).reliability == 85
        params.update({"marineEnvironment": "No", "utilityLines": "No"})
        assert scorer.score(params).reliability == 95

    def test_inconsistency_penalties_clamp_at_minimum(self, scorer):
        params = {"trafficVolume": "4", "designLife": "40", "subgradeCBR": "2", "slabThickness": "150"}
        # 75 + 10 - 20 - 15
        assert scorer.score(params).reliability == 50

    def test_light_traffic_long_life_penalty(self, scorer):
        assert scorer.score({"trafficVolume": "1", "designLife": "40"}).reliability == 65


class TestCalibration:
    """Optional per-type calibration."""

    def test_weights_default_to_identity(self):
        weights = CalibrationWeights()
        assert weights.is_identity
        assert weights.as_dict() == {t: 1.0 for t in PavementType}

    @pytest.mark.parametrize("value", [0.49, 1.51, 0.0, 2.0])
    def test_out_of_range_weight_raises(self, value):
        with pytest.raises(CalibrationOutOfRangeError):
            CalibrationWeights(crcp=value)

    def test_from_mapping_accepts_type_codes(self):
        weights = CalibrationWeights.from_mapping({"crcp": 1.5, "PCP": 0.5})
        assert weights.for_type(C) == 1.5
        assert weights.for_type(P) == 0.5
        assert weights.for_type(J) == 1.0

    def test_calibration_can_change_recommendation(self, scorer, pcp_params):
        result = scorer.score(pcp_params)
        calibrated = apply_calibration(result, CalibrationWeights(jpcp=1.5))

        assert calibrated.scores[J] == 80
        assert calibrated.scores[P] == 79
        assert calibrated.recommended_type == J
        assert calibrated.score_difference == 1
        assert calibrated.confidence_level == ConfidenceLevel.MODERATE
        assert calibrated.reliability == result.reliability
        assert calibrated.calibration[J] == 1.5

    def test_calibrated_scores_may_exceed_100(self, scorer, jpcp_params):
        calibrated = apply_calibration(scorer.score(jpcp_params), CalibrationWeights(jpcp=1.5))
        assert calibrated.highest_score == 150

    def test_no_calibration_returns_result_unchanged(self, scorer, jpcp_params):
        result = scorer.score(jpcp_params)
        assert apply_calibration(result, None) is result

    def test_threaded_through_engine(self, pcp_params):
        result = score_pavement_types(pcp_params, calibration={"JPCP": 1.5})
        assert result.recommended_type == J


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
