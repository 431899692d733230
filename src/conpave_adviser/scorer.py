"""Scorer - weighted multi-factor scoring of the four pavement types.

Each stage of the pipeline takes a read-only score vector and returns a
new one, so intermediate results can be inspected and no stage can
disturb another's inputs.
"""

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .config import (
    ConfidenceThresholdsConfig,
    ReliabilityConfig,
    ScoreBoundsConfig,
    get_config,
)
from .exceptions import InsufficientInputError
from .schema import (
    ConfidenceLevel,
    ConstructionTime,
    CostLevel,
    DesignLife,
    LongitudinalJoints,
    ParameterInput,
    ParameterSet,
    PavementType,
    RecommendationResult,
    SlabThickness,
    SubgradeCBR,
    TrafficVolume,
    YesNo,
    coerce_parameters,
)
from .standards import (
    CONSTRUCTION_BASE,
    CONSTRUCTION_TIME_MULTIPLIERS,
    DESIGN_LIFE_SCORES,
    ENVIRONMENT_BASE,
    INITIAL_COST_MULTIPLIERS,
    MANUAL_CONSTRUCTION_MULTIPLIERS,
    MARINE_MULTIPLIERS,
    SLAB_THICKNESS_SCORES,
    SUBGRADE_CBR_SCORES,
    TRAFFIC_SCORES,
    UTILITY_LINES_MULTIPLIERS,
    WIDE_CARRIAGEWAY_MULTIPLIERS,
)

logger = logging.getLogger(__name__)

ScoreVector = Mapping[PavementType, float]

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


def _vector(values: Mapping[PavementType, float]) -> ScoreVector:
    return MappingProxyType({t: values[t] for t in PavementType})


def _scaled(vector: ScoreVector, factors: Mapping[PavementType, float]) -> ScoreVector:
    return _vector({t: vector[t] * factors.get(t, 1.0) for t in PavementType})


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rank(scores: Mapping[PavementType, float]) -> list[PavementType]:
    """Types by descending score; ties keep canonical type order."""
    return sorted(PavementType, key=lambda t: -scores[t])


def confidence_for(
    highest: int,
    difference: int,
    thresholds: Optional[ConfidenceThresholdsConfig] = None,
) -> ConfidenceLevel:
    """Confidence from the leading score, moved one level by the margin."""
    thresholds = thresholds or get_config().confidence_thresholds

    if highest >= thresholds.very_high:
        level = ConfidenceLevel.VERY_HIGH
    elif highest >= thresholds.high:
        level = ConfidenceLevel.HIGH
    elif highest >= thresholds.moderate:
        level = ConfidenceLevel.MODERATE
    elif highest >= thresholds.low:
        level = ConfidenceLevel.LOW
    else:
        level = ConfidenceLevel.VERY_LOW

    if difference < thresholds.close_margin:
        return level.shift(-1)
    if difference >= thresholds.clear_margin:
        return level.shift(1)
    return level


@dataclass
class ScoringWeights:
    """Weights for the scoring factors."""
    traffic_volume: float = 0.30
    design_life: float = 0.20
    subgrade_cbr: float = 0.15
    slab_thickness: float = 0.10
    environment: float = 0.10  # Marine exposure
    construction: float = 0.15  # Utilities, labour, cost, time, width

    @classmethod
    def from_config(cls) -> "ScoringWeights":
        return cls(**get_config().scoring_weights.model_dump())


class PavementScorer:
    """Scores all four pavement types for a parameter set.

    Pipeline:
    - Weighted primary factors (only those supplied)
    - Environmental and construction factors
    - Scenario and strongly favorable adjustments
    - Balancing, flooring, scaling to 0-100 and rounding
    - Ranking, confidence and reliability
    """

    PRIMARY_TABLES = (
        ("traffic_volume", TRAFFIC_SCORES),
        ("design_life", DESIGN_LIFE_SCORES),
        ("subgrade_cbr", SUBGRADE_CBR_SCORES),
        ("slab_thickness", SLAB_THICKNESS_SCORES),
    )

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        bounds: Optional[ScoreBoundsConfig] = None,
        thresholds: Optional[ConfidenceThresholdsConfig] = None,
        reliability: Optional[ReliabilityConfig] = None,
    ):
        """Initialize scorer, falling back to the active configuration."""
        config = get_config()
        self.weights = weights or ScoringWeights.from_config()
        self.bounds = bounds or config.score_bounds
        self.thresholds = thresholds or config.confidence_thresholds
        self.reliability_config = reliability or config.reliability

    @property
    def stages(self) -> list[tuple[str, Callable[[ScoreVector, ParameterSet], ScoreVector]]]:
        """Ordered real-valued stages, applied to a zero vector."""
        return [
            ("primary factors", self._apply_primary_factors),
            ("derived factors", self._apply_derived_factors),
            ("scenario adjustments", self._apply_scenario_adjustments),
            ("strongly favorable", self._apply_strongly_favorable),
            ("balance", self._apply_balance),
            ("floor", self._apply_floor),
        ]

    def score(self, params: ParameterInput) -> RecommendationResult:
        """Score the four types and pick a recommendation.

        Args:
            params: A ParameterSet or a plain mapping of parameter values.

        Returns:
            RecommendationResult with integer 0-100 scores.

        Raises:
            InvalidParameterValueError: If a value is outside its domain.
            InsufficientInputError: If no primary factor is supplied.
        """
        params = coerce_parameters(params)
        if not params.present_primary_fields():
            raise InsufficientInputError(
                "At least one of trafficVolume, designLife, subgradeCBR or "
                "slabThickness is required"
            )

        vector = _vector({t: 0.0 for t in PavementType})
        for name, stage in self.stages:
            vector = stage(vector, params)
            logger.debug("After %s: %s", name, {t.value: round(v, 4) for t, v in vector.items()})

        scores = self._finalize(vector)
        ordering = rank(scores)
        recommended = ordering[0]
        highest = scores[recommended]
        difference = highest - scores[ordering[1]]

        return RecommendationResult(
            scores=dict(scores),
            recommended_type=recommended,
            highest_score=highest,
            confidence_level=confidence_for(highest, difference, self.thresholds),
            reliability=self._calculate_reliability(params),
            score_difference=difference,
        )

    # -------------------------------------------------------------------------
    # Factor stages
    # -------------------------------------------------------------------------

    def _apply_primary_factors(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        totals = dict(vector)
        for field_name, table in self.PRIMARY_TABLES:
            value = getattr(params, field_name)
            if value is None:
                continue
            weight = getattr(self.weights, field_name)
            for t in PavementType:
                totals[t] += table[value][t] * weight
        return _vector(totals)

    def _apply_derived_factors(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        environment = self._environment_factor(params)
        construction = self._construction_factor(params)
        return _vector({
            t: vector[t]
            + environment[t] * self.weights.environment
            + construction[t] * self.weights.construction
            for t in PavementType
        })

    def _environment_factor(self, params: ParameterSet) -> ScoreVector:
        factor = _vector(ENVIRONMENT_BASE)
        if params.marine_environment == YesNo.YES:
            factor = _scaled(factor, MARINE_MULTIPLIERS)
        return factor

    def _construction_factor(self, params: ParameterSet) -> ScoreVector:
        factor = _vector(CONSTRUCTION_BASE)
        if params.utility_lines == YesNo.YES:
            factor = _scaled(factor, UTILITY_LINES_MULTIPLIERS)
        if params.manual_construction == YesNo.YES:
            factor = _scaled(factor, MANUAL_CONSTRUCTION_MULTIPLIERS)
        if params.longitudinal_joints == LongitudinalJoints.WIDTH_7:
            factor = _scaled(factor, WIDE_CARRIAGEWAY_MULTIPLIERS)
        if params.initial_cost in INITIAL_COST_MULTIPLIERS:
            factor = _scaled(factor, INITIAL_COST_MULTIPLIERS[params.initial_cost])
        if params.construction_time in CONSTRUCTION_TIME_MULTIPLIERS:
            factor = _scaled(factor, CONSTRUCTION_TIME_MULTIPLIERS[params.construction_time])
        return factor

    # -------------------------------------------------------------------------
    # Adjustment stages
    # -------------------------------------------------------------------------

    def _apply_scenario_adjustments(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        traffic = params.traffic_volume
        life = params.design_life

        if traffic == TrafficVolume.VERY_HIGH and life in (DesignLife.YEARS_30, DesignLife.YEARS_40):
            vector = _scaled(vector, {C: 1.10})
        if traffic == TrafficVolume.LOW and life == DesignLife.YEARS_10:
            vector = _scaled(vector, {P: 1.15})
        if traffic == TrafficVolume.MEDIUM and life == DesignLife.YEARS_20:
            vector = _scaled(vector, {J: 1.10})
        if (
            params.subgrade_cbr == SubgradeCBR.AT_LEAST_8
            and traffic == TrafficVolume.VERY_HIGH
            and params.construction_time == ConstructionTime.FLEXIBLE
        ):
            vector = _scaled(vector, {C: 1.20})
        if (
            params.subgrade_cbr == SubgradeCBR.FROM_6_TO_7
            and params.longitudinal_joints == LongitudinalJoints.WIDTH_7
            and life == DesignLife.YEARS_30
        ):
            vector = _scaled(vector, {R: 1.15})
        if params.marine_environment == YesNo.YES and params.utility_lines == YesNo.YES:
            vector = _scaled(vector, {C: 0.70, P: 1.10})
        return vector

    def _apply_strongly_favorable(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        primaries = (params.traffic_volume, params.design_life, params.subgrade_cbr)

        if primaries == (TrafficVolume.MEDIUM, DesignLife.YEARS_20, SubgradeCBR.FROM_6_TO_7) \
                and params.slab_thickness == SlabThickness.MM_200:
            vector = _scaled(vector, {J: 1.15})
        if primaries == (TrafficVolume.HIGH, DesignLife.YEARS_30, SubgradeCBR.FROM_6_TO_7) \
                and params.slab_thickness == SlabThickness.MM_250:
            vector = _scaled(vector, {R: 1.15})
        if (
            primaries == (TrafficVolume.VERY_HIGH, DesignLife.YEARS_40, SubgradeCBR.AT_LEAST_8)
            and params.utility_lines == YesNo.NO
            and params.marine_environment == YesNo.NO
        ):
            vector = _scaled(vector, {C: 1.20})
        light_short = (
            params.traffic_volume == TrafficVolume.LOW and params.design_life == DesignLife.YEARS_10
        )
        rushed_budget = (
            params.construction_time == ConstructionTime.LIMITED and params.initial_cost == CostLevel.HIGH
        )
        if light_short or rushed_budget:
            vector = _scaled(vector, {P: 1.15})
        return vector

    def _apply_balance(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        leader, runner_up = rank(vector)[:2]
        ceiling = vector[runner_up] * self.bounds.balance_ratio
        if vector[leader] > 0 and vector[runner_up] > 0 and vector[leader] > ceiling:
            return _vector({**vector, leader: ceiling})
        return vector

    def _apply_floor(self, vector: ScoreVector, params: ParameterSet) -> ScoreVector:
        floor = max(vector.values()) * self.bounds.floor_ratio
        return _vector({t: max(v, floor) for t, v in vector.items()})

    def _finalize(self, vector: ScoreVector) -> dict[PavementType, int]:
        """Scale into [0, 1], round to integer percentages, re-check the bounds."""
        top = max(vector.values())
        if top > 1.0:
            vector = _vector({t: v / top for t, v in vector.items()})

        scores = {t: round_half_up(v * 100) for t, v in vector.items()}

        leader, runner_up = rank(scores)[:2]
        if scores[runner_up] > 0:
            scores[leader] = min(scores[leader], math.floor(scores[runner_up] * self.bounds.balance_ratio))
        floor = math.ceil(max(scores.values()) * self.bounds.floor_ratio)
        return {t: max(s, floor) for t, s in scores.items()}

    # -------------------------------------------------------------------------
    # Reliability
    # -------------------------------------------------------------------------

    def _calculate_reliability(self, params: ParameterSet) -> int:
        cfg = self.reliability_config
        reliability = cfg.base

        if params.has_complete_primary_input():
            reliability += cfg.complete_input_bonus

        combination = (
            params.traffic_volume, params.design_life, params.subgrade_cbr, params.slab_thickness
        )
        optimal = [
            (TrafficVolume.MEDIUM, DesignLife.YEARS_20, SubgradeCBR.FROM_6_TO_7, SlabThickness.MM_200),
            (TrafficVolume.HIGH, DesignLife.YEARS_30, SubgradeCBR.FROM_6_TO_7, SlabThickness.MM_250),
            (TrafficVolume.LOW, DesignLife.YEARS_10, SubgradeCBR.BELOW_3, SlabThickness.MM_150),
        ]
        reliability += cfg.optimal_combination_bonus * optimal.count(combination)
        if (
            combination == (TrafficVolume.VERY_HIGH, DesignLife.YEARS_40, SubgradeCBR.AT_LEAST_8, SlabThickness.MM_300)
            and params.marine_environment == YesNo.NO
            and params.utility_lines == YesNo.NO
        ):
            reliability += cfg.optimal_combination_bonus

        thin_slab = params.slab_thickness == SlabThickness.MM_150
        if params.traffic_volume == TrafficVolume.VERY_HIGH and thin_slab:
            reliability -= cfg.heavy_traffic_thin_slab_penalty
        if params.design_life == DesignLife.YEARS_40 and thin_slab:
            reliability -= cfg.long_life_thin_slab_penalty
        if params.traffic_volume == TrafficVolume.LOW and params.design_life == DesignLife.YEARS_40:
            reliability -= cfg.light_traffic_long_life_penalty

        return max(cfg.minimum, min(cfg.maximum, reliability))
