"""Tests for the engine facade and strategy comparison."""

import pytest

from conpave_adviser.engine import AdviserEngine
from conpave_adviser.exceptions import InsufficientInputError
from conpave_adviser.schema import PavementType


@pytest.fixture
def engine():
    return AdviserEngine()


class TestAdviserEngine:
    def test_score_explain_derive(self, engine, jpcp_params):
        result = engine.score(jpcp_params)
        explanation = engine.explain(result, jpcp_params)
        spec = engine.derive(result.recommended_type, jpcp_params)

        assert explanation.main_explanation.startswith("Jointed Plain Concrete Pavement is recommended")
        assert spec.pavement_type == PavementType.JPCP

    def test_guidelines(self, engine):
        assert engine.guidelines("CRCP")[0].category == "Materials"

    def test_insufficient_input_propagates(self, engine):
        with pytest.raises(InsufficientInputError):
            engine.score({"utilityLines": "Yes"})


class TestCompare:
    """Both strategies on the same input."""

    def test_strategies_agree(self, engine, jpcp_params):
        comparison = engine.compare(jpcp_params)

        assert comparison.agree
        assert comparison.scoring.recommended_type == PavementType.JPCP
        assert comparison.compatibility.top_type == PavementType.JPCP
        assert comparison.signals == []

    def test_hazard_swap_is_signalled(self, engine):
        comparison = engine.compare({
            "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "300",
            "transverseJoints": "No", "utilityLines": "Yes",
        })

        assert comparison.compatibility.hazard_swap_applied
        assert "Site hazards moved the compatibility recommendation from CRCP to PCP" in comparison.signals

    def test_disagreement_is_signalled(self, engine):
        comparison = engine.compare({
            "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "300",
            "transverseJoints": "No", "utilityLines": "Yes",
        })
        disagreement = [s for s in comparison.signals if s.startswith("Scoring engine recommends")]

        assert comparison.scoring.recommended_type != PavementType.PCP
        assert not comparison.agree
        assert len(disagreement) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
