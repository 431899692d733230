"""Adviser engine - single entry point over both recommendation strategies."""

import logging
import random
from typing import Mapping, Optional, Union

from .calibration import CalibrationWeights, apply_calibration
from .compatibility import CompatibilityModel
from .design import construction_guidelines, derive_design_spec as _derive_design_spec
from .explainer import RecommendationExplainer
from .probability import ProbabilityEstimator
from .schema import (
    CompatibilityPrediction,
    ConfidenceLevel,
    DesignSpec,
    GuidelineSection,
    ParameterInput,
    ProbabilityReport,
    RecommendationExplanation,
    RecommendationResult,
    StrategyComparison,
    ValidationReport,
    coerce_parameters,
)
from .scorer import PavementScorer

logger = logging.getLogger(__name__)

CalibrationInput = Union[CalibrationWeights, Mapping[str, float], None]


def _coerce_calibration(calibration: CalibrationInput) -> Optional[CalibrationWeights]:
    if calibration is None or isinstance(calibration, CalibrationWeights):
        return calibration
    return CalibrationWeights.from_mapping(calibration)


class AdviserEngine:
    """Facade over scoring, design derivation, compatibility and simulation.

    Components are built from the active configuration when not supplied.
    """

    def __init__(
        self,
        scorer: Optional[PavementScorer] = None,
        model: Optional[CompatibilityModel] = None,
        explainer: Optional[RecommendationExplainer] = None,
    ):
        self.scorer = scorer or PavementScorer()
        self.model = model or CompatibilityModel()
        self.explainer = explainer or RecommendationExplainer()
        self.estimator = ProbabilityEstimator(self.scorer)

    def score(self, params: ParameterInput, calibration: CalibrationInput = None) -> RecommendationResult:
        result = self.scorer.score(params)
        weights = _coerce_calibration(calibration)
        if weights is not None:
            result = apply_calibration(result, weights, self.scorer.thresholds)
            logger.debug("Calibrated recommendation: %s", result.recommended_type.value)
        return result

    def explain(self, result: RecommendationResult, params: ParameterInput = None) -> RecommendationExplanation:
        return self.explainer.explain(result, params)

    def derive(self, pavement_type, params: ParameterInput) -> DesignSpec:
        return _derive_design_spec(pavement_type, params)

    def guidelines(self, pavement_type, params: ParameterInput = None) -> list[GuidelineSection]:
        return construction_guidelines(pavement_type, params)

    def predict(self, params: ParameterInput) -> CompatibilityPrediction:
        return self.model.predict(params)

    def validate_model(self) -> ValidationReport:
        return self.model.validate_model()

    def estimate(
        self,
        sample_size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        workers: Optional[int] = None,
    ) -> ProbabilityReport:
        return self.estimator.estimate(sample_size, rng=rng, seed=seed, workers=workers)

    def compare(self, params: ParameterInput) -> StrategyComparison:
        """Run both strategies on the same input.

        Disagreement between them, a weak scoring confidence and a hazard
        correction are reported as low-confidence signals.
        """
        params = coerce_parameters(params)
        scoring = self.scorer.score(params)
        compatibility = self.model.predict(params)
        agree = scoring.recommended_type == compatibility.top_type

        signals = []
        if not agree:
            signals.append(
                f"Scoring engine recommends {scoring.recommended_type.value} but the compatibility "
                f"model recommends {compatibility.top_type.value}"
            )
        if scoring.confidence_level in (ConfidenceLevel.LOW, ConfidenceLevel.VERY_LOW):
            signals.append(f"Scoring confidence is {scoring.confidence_level.value}")
        if compatibility.hazard_swap_applied:
            signals.append(
                f"Site hazards moved the compatibility recommendation from "
                f"{compatibility.alternative_type.value} to {compatibility.top_type.value}"
            )

        return StrategyComparison(
            scoring=scoring,
            compatibility=compatibility,
            agree=agree,
            signals=signals,
        )


def score_pavement_types(params: ParameterInput, calibration: CalibrationInput = None) -> RecommendationResult:
    """Score the four pavement types, optionally applying calibration weights."""
    return AdviserEngine().score(params, calibration)


def derive_design_spec(pavement_type, params: ParameterInput) -> DesignSpec:
    return _derive_design_spec(pavement_type, params)


def predict_via_compatibility_model(params: ParameterInput) -> CompatibilityPrediction:
    return CompatibilityModel().predict(params)


def run_monte_carlo_estimate(
    sample_size: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
) -> ProbabilityReport:
    return ProbabilityEstimator().estimate(sample_size, rng=rng, seed=seed, workers=workers)
