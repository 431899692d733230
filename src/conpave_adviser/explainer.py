"""Explainer - human-readable accounts of scoring results."""

from typing import Optional

from .config import get_config
from .schema import (
    ConstructionTime,
    CostLevel,
    DesignLife,
    ParameterInput,
    ParameterSet,
    PavementType,
    RecommendationExplanation,
    RecommendationResult,
    SubgradeCBR,
    TrafficVolume,
    coerce_parameters,
)
from .scorer import round_half_up
from .standards import get_profile

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP

# (type, field, value) -> factor phrase, in display order
KEY_FACTORS = [
    (J, "traffic_volume", TrafficVolume.MEDIUM, "medium traffic volume"),
    (R, "traffic_volume", TrafficVolume.HIGH, "high traffic volume"),
    (C, "traffic_volume", TrafficVolume.VERY_HIGH, "very high traffic volume"),
    (P, "traffic_volume", TrafficVolume.LOW, "low traffic volume"),
    (J, "design_life", DesignLife.YEARS_20, "medium design life"),
    (R, "design_life", DesignLife.YEARS_30, "long design life"),
    (C, "design_life", DesignLife.YEARS_40, "very long design life"),
    (P, "design_life", DesignLife.YEARS_10, "short design life"),
    (P, "subgrade_cbr", SubgradeCBR.BELOW_3, "weak subgrade"),
    (C, "subgrade_cbr", SubgradeCBR.AT_LEAST_8, "strong subgrade"),
    (P, "construction_time", ConstructionTime.LIMITED, "limited construction time"),
    (C, "construction_time", ConstructionTime.FLEXIBLE, "flexible construction time"),
    (J, "initial_cost", CostLevel.LOW, "low budget constraints"),
    (P, "initial_cost", CostLevel.LOW, "low budget constraints"),
    (C, "initial_cost", CostLevel.HIGH, "high budget availability"),
]


def key_factors(pavement_type: PavementType, params: ParameterSet) -> list[str]:
    """Parameters that typically favour the given type."""
    return [
        phrase
        for t, field_name, value, phrase in KEY_FACTORS
        if t == pavement_type and getattr(params, field_name) == value
    ]


def score_shares(scores: dict[PavementType, int]) -> dict[PavementType, int]:
    """Each score as a rounded percentage of the total."""
    total = sum(scores.values())
    if total <= 0:
        return {t: 0 for t in PavementType}
    return {t: round_half_up(scores[t] / total * 100) for t in PavementType}


class RecommendationExplainer:
    """Explains why a type was recommended and whether a close alternative exists."""

    def __init__(self, alternative_margin: Optional[int] = None):
        if alternative_margin is None:
            alternative_margin = get_config().confidence_thresholds.alternative_margin
        self.alternative_margin = alternative_margin

    def explain(self, result: RecommendationResult, params: ParameterInput = None) -> RecommendationExplanation:
        """Build the explanation for a scoring result.

        Args:
            result: Output of the scoring engine.
            params: The parameters that were scored.

        Returns:
            RecommendationExplanation with score shares, key factors and an
            alternative when the margin is small.
        """
        params = coerce_parameters(params)
        recommended = result.recommended_type
        shares = score_shares(result.scores)
        factors = key_factors(recommended, params)

        main = (
            f"{get_profile(recommended).full_name} is recommended with a confidence level of "
            f"{result.confidence_level.value} ({shares[recommended]}% probability)."
        )
        if factors:
            main += f" Key factors: {', '.join(factors)}."

        alternative = None
        alternative_text = None
        if result.score_difference < self.alternative_margin:
            alternative = result.runner_up
            alternative_text = (
                f"{get_profile(alternative).full_name} is also a viable alternative with "
                f"{shares[alternative]}% probability."
            )

        return RecommendationExplanation(
            main_explanation=main,
            probabilities=shares,
            key_factors=factors,
            alternative_type=alternative,
            alternative_explanation=alternative_text,
        )


def explain(result: RecommendationResult, params: ParameterInput = None) -> RecommendationExplanation:
    return RecommendationExplainer().explain(result, params)


def describe_pavement_type(pavement_type) -> dict:
    """Reference description of a pavement type."""
    profile = get_profile(PavementType.from_string(pavement_type))
    return {
        "type": profile.pavement_type.value,
        "name": profile.full_name,
        "description": profile.description,
        "suitable_for": profile.suitable_for,
        "reinforcement": profile.reinforcement,
        "irc_reference": profile.irc_reference,
        "maintenance_interval": profile.maintenance_interval,
        "advantages": list(profile.advantages),
        "disadvantages": list(profile.disadvantages),
    }
