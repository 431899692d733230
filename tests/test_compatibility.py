"""Tests for the compatibility model and its self-test harness."""

import pytest

from conpave_adviser.compatibility import (
    MODEL_VERSION,
    VALIDATION_CASES,
    CompatibilityModel,
    construction_complexity_score,
    cost_effectiveness_score,
    durability_score,
    special_notes,
)
from conpave_adviser.engine import predict_via_compatibility_model
from conpave_adviser.schema import ParameterSet, PavementType
from conpave_adviser.standards import get_profile

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP

HEAVY_SITE = {
    "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "300",
    "transverseJoints": "No",
}


@pytest.fixture
def model():
    return CompatibilityModel()


class TestPredict:
    """Ranking, alternatives and notes."""

    def test_ideal_jpcp(self, model, jpcp_params):
        prediction = model.predict(jpcp_params)

        assert prediction.top_type == J
        assert prediction.alternative_type != J
        assert 0 <= prediction.confidence_score <= 1
        assert prediction.model_version == MODEL_VERSION
        assert prediction.irc_notes[0].startswith("Design should follow IRC:58-2015")

    def test_empty_input_is_neutral(self, model):
        prediction = model.predict({})

        assert prediction.per_type_scores == {t: 50.0 for t in PavementType}
        assert prediction.top_type == J
        assert prediction.confidence_score == 0.5
        assert prediction.match_details == {}

    def test_match_details_use_parameter_names(self, model, jpcp_params):
        details = model.predict(jpcp_params).match_details
        assert set(details) == {"trafficVolume", "designLife", "subgradeCBR", "slabThickness"}
        assert details["trafficVolume"].matched

    def test_crcp_on_heavy_site(self, model):
        prediction = model.predict(HEAVY_SITE)
        assert prediction.top_type == C
        assert not prediction.hazard_swap_applied

    def test_marine_site_adds_crcp_warning(self, model):
        prediction = model.predict({
            "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "250",
            "steelReinforcement": "Longitudinal", "transverseJoints": "No", "longitudinalJoints": "Width4.5",
            "notForLightTraffic": "Yes", "maintenance": "Minimal", "marineEnvironment": "Yes",
        })

        assert prediction.top_type == C
        assert not prediction.hazard_swap_applied
        assert any(note.startswith("WARNING: IRC:118-2015 3.2(i)") for note in prediction.notes)

    def test_surface_texture_none_is_penalised(self, model, jpcp_params):
        textured = model.predict({**jpcp_params.to_record(), "surfaceTexture": "TineBrush"})
        bare = model.predict({**jpcp_params.to_record(), "surfaceTexture": "No"})
        assert bare.per_type_scores[J] < textured.per_type_scores[J]


class TestHazardSwap:
    """CRCP demotion when a site hazard applies."""

    def test_utility_lines_swap_close_runner_up(self, model):
        prediction = model.predict({**HEAVY_SITE, "utilityLines": "Yes"})

        assert prediction.hazard_swap_applied
        assert prediction.top_type == P
        assert prediction.alternative_type == C

    def test_marine_site_swaps_crcp_for_pcp(self, model):
        prediction = model.predict({**HEAVY_SITE, "marineEnvironment": "Yes"})

        assert prediction.hazard_swap_applied
        assert prediction.top_type == P
        assert prediction.alternative_type == C
        # Raw scores still rank CRCP first: the swap reorders, it does not rescore
        scores = prediction.per_type_scores
        assert scores[C] == pytest.approx(62.5, abs=0.01)
        assert scores[P] == pytest.approx(62.19, abs=0.01)
        assert scores[J] == pytest.approx(58.44, abs=0.01)

    def test_swap_happens_at_most_once(self, model):
        # Feeding the swapped pair back in leaves it alone
        params = ParameterSet.from_mapping({"marineEnvironment": "Yes"})
        scores = {C: 62.5, P: 62.19}
        top, second, swapped = model.apply_hazard_swap(C, P, scores, params)
        assert (top, second, swapped) == (P, C, True)
        assert model.apply_hazard_swap(top, second, scores, params) == (P, C, False)

    def test_swap_requires_close_runner_up(self, model):
        params = ParameterSet.from_mapping({"manualConstruction": "Yes"})
        assert model.apply_hazard_swap(C, J, {C: 50.0, J: 40.0}, params) == (J, C, True)
        assert model.apply_hazard_swap(C, J, {C: 50.0, J: 39.0}, params) == (C, J, False)

    def test_swap_requires_hazard(self, model):
        params = ParameterSet.from_mapping({"marineEnvironment": "No"})
        assert model.apply_hazard_swap(C, J, {C: 50.0, J: 49.0}, params) == (C, J, False)

    def test_swap_only_demotes_crcp(self, model):
        params = ParameterSet.from_mapping({"utilityLines": "Yes"})
        assert model.apply_hazard_swap(J, C, {J: 50.0, C: 49.0}, params) == (J, C, False)

    def test_non_positive_top_score_never_swaps(self, model):
        params = ParameterSet.from_mapping({"utilityLines": "Yes"})
        assert model.apply_hazard_swap(C, J, {C: 0.0, J: -5.0}, params) == (C, J, False)

    def test_ratio_is_configurable(self):
        params = ParameterSet.from_mapping({"utilityLines": "Yes"})
        strict = CompatibilityModel(hazard_swap_ratio=0.95)
        assert strict.apply_hazard_swap(C, J, {C: 50.0, J: 45.0}, params)[2] is False


class TestValidateModel:
    """Fixed self-test battery."""

    def test_report_metrics(self, model):
        report = model.validate_model()

        assert report.test_cases == len(VALIDATION_CASES) == 6
        assert report.accuracy == pytest.approx(4 / 6)
        assert report.precision == pytest.approx(1.0)
        assert report.recall == pytest.approx(0.8)

    def test_ideal_cases_are_correct(self, model):
        results = model.validate_model().results
        assert [r.correct for r in results[:4]] == [True, True, True, True]

    def test_boundary_cases(self, model):
        results = model.validate_model().results
        assert results[4].predicted == J
        assert results[4].expected_in_top_three
        assert results[5].predicted == C
        assert not results[5].expected_in_top_three

    def test_metrics_are_bounded(self, model):
        report = model.validate_model()
        for value in (report.accuracy, report.precision, report.recall):
            assert 0 <= value <= 1


class TestPerformanceProfile:
    """Static performance metrics per type."""

    @pytest.mark.parametrize("pavement_type,durability,cost,complexity", [
        (J, 15, 60, 60),
        (R, 19, 60, 75),
        (C, 30, 87.5, 80),
        (P, 10, 57.5, 40),
    ], ids=["jpcp", "jrcp", "crcp", "pcp"])
    def test_metrics(self, pavement_type, durability, cost, complexity):
        profile = get_profile(pavement_type)
        assert durability_score(profile) == pytest.approx(durability)
        assert cost_effectiveness_score(profile) == pytest.approx(cost)
        assert construction_complexity_score(profile) == pytest.approx(complexity)

    def test_irc_reference_coverage(self):
        assert get_profile(J).irc_reference_coverage == 73

    def test_irc_compliance_for_crcp_checks_steel(self, model):
        with_steel = model.predict({**HEAVY_SITE, "steelReinforcement": "Longitudinal"})
        without = model.predict(HEAVY_SITE)
        assert with_steel.irc_compliance > without.irc_compliance


class TestSpecialNotes:
    """Advisory notes on conflicting inputs."""

    def test_thin_slab_on_jpcp(self):
        notes = special_notes(J, ParameterSet.from_mapping({"slabThickness": "150"}))
        assert any("minimum 200mm slab thickness" in n for n in notes)
        assert any(n.startswith("Selected thickness (150mm)") for n in notes)

    def test_thin_slab_note_not_for_pcp_on_rural_road(self):
        notes = special_notes(P, ParameterSet.from_mapping({"slabThickness": "150", "trafficVolume": "1"}))
        assert notes == []

    def test_crcp_on_light_traffic(self):
        notes = special_notes(C, ParameterSet.from_mapping({"notForLightTraffic": "No"}))
        assert notes[0].startswith("WARNING: CRCP is not recommended for light traffic roads")

    def test_crcp_transverse_joints(self):
        notes = special_notes(C, ParameterSet.from_mapping({
            "transverseJoints": "Regular", "steelReinforcement": "Longitudinal",
        }))
        assert notes == [
            "CRCP does not require transverse joints as it relies on controlled natural cracking "
            "(IRC:118-2015 1/p.1)."
        ]


class TestModuleFunction:
    def test_predict_via_compatibility_model(self, jpcp_params):
        assert predict_via_compatibility_model(jpcp_params).top_type == J


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
