"""Tests for recommendation explanations."""

import pytest

from conpave_adviser.calibration import CalibrationWeights, apply_calibration
from conpave_adviser.exceptions import UnknownPavementTypeError
from conpave_adviser.explainer import (
    RecommendationExplainer,
    describe_pavement_type,
    explain,
    key_factors,
    score_shares,
)
from conpave_adviser.schema import ParameterSet, PavementType
from conpave_adviser.scorer import PavementScorer

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


class TestExplain:
    """Main explanation, score shares and alternatives."""

    def test_clear_winner_has_no_alternative(self, jpcp_params):
        result = PavementScorer().score(jpcp_params)
        explanation = explain(result, jpcp_params)

        assert explanation.main_explanation.startswith(
            "Jointed Plain Concrete Pavement is recommended with a confidence level of Very High (35% probability)."
        )
        assert "Key factors: medium traffic volume, medium design life." in explanation.main_explanation
        assert explanation.alternative_type is None
        assert explanation.alternative_explanation is None

    def test_close_runner_up_is_offered(self, pcp_params):
        result = apply_calibration(PavementScorer().score(pcp_params), CalibrationWeights(jpcp=1.5))
        explanation = explain(result, pcp_params)

        assert explanation.alternative_type == P
        assert explanation.alternative_explanation.startswith(
            "Precast Concrete Pavement is also a viable alternative"
        )

    def test_alternative_margin_is_configurable(self, jpcp_params):
        result = PavementScorer().score(jpcp_params)
        explanation = RecommendationExplainer(alternative_margin=50).explain(result, jpcp_params)
        assert explanation.alternative_type == R

    def test_shares_follow_scores(self, crcp_params):
        result = PavementScorer().score(crcp_params)
        shares = explain(result, crcp_params).probabilities
        assert max(shares, key=shares.get) == C
        assert 98 <= sum(shares.values()) <= 102


class TestKeyFactors:
    """Factor phrases per recommended type."""

    def test_crcp_factors(self):
        params = ParameterSet.from_mapping({
            "trafficVolume": "4", "designLife": "40", "subgradeCBR": "4",
            "constructionTime": "Flexible", "initialCost": "High",
        })
        assert key_factors(C, params) == [
            "very high traffic volume",
            "very long design life",
            "strong subgrade",
            "flexible construction time",
            "high budget availability",
        ]

    def test_low_budget_applies_to_jpcp_and_pcp(self):
        params = ParameterSet.from_mapping({"initialCost": "Low"})
        assert key_factors(J, params) == ["low budget constraints"]
        assert key_factors(P, params) == ["low budget constraints"]
        assert key_factors(R, params) == []

    def test_score_shares(self):
        assert score_shares({J: 50, R: 25, C: 25, P: 0}) == {J: 50, R: 25, C: 25, P: 0}


class TestDescribePavementType:
    """Reference descriptions."""

    @pytest.mark.parametrize("pavement_type", list(PavementType), ids=lambda t: t.value)
    def test_every_type_is_described(self, pavement_type):
        info = describe_pavement_type(pavement_type)
        assert info["type"] == pavement_type.value
        assert info["advantages"]
        assert info["disadvantages"]
        assert info["irc_reference"].startswith("IRC:")

    def test_crcp_reference(self):
        info = describe_pavement_type("crcp")
        assert info["name"] == "Continuously Reinforced Concrete Pavement"
        assert info["irc_reference"] == "IRC:118-2015, Section 4.3, Page 18-22"

    def test_unknown_type(self):
        with pytest.raises(UnknownPavementTypeError):
            describe_pavement_type("XYZ")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
