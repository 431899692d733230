"""Optional per-type calibration of scoring results.

Calibration is a separate step after scoring: callers pass weights
explicitly and the scorer itself never reads them.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .config import ConfidenceThresholdsConfig
from .exceptions import CalibrationOutOfRangeError
from .schema import PavementType, RecommendationResult
from .scorer import confidence_for, rank, round_half_up

MIN_WEIGHT = 0.5
MAX_WEIGHT = 1.5


@dataclass(frozen=True)
class CalibrationWeights:
    """Multiplier per pavement type, each within [0.5, 1.5]."""
    jpcp: float = 1.0
    jrcp: float = 1.0
    crcp: float = 1.0
    pcp: float = 1.0

    def __post_init__(self):
        for t in PavementType:
            weight = self.for_type(t)
            if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
                raise CalibrationOutOfRangeError(
                    f"Calibration weight for {t.value} must be between "
                    f"{MIN_WEIGHT} and {MAX_WEIGHT}, got {weight}"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[Any, float]) -> "CalibrationWeights":
        """Build from a mapping keyed by type code (any case) or PavementType."""
        weights = {}
        for key, value in data.items():
            t = PavementType.from_string(key)
            weights[t.value.lower()] = float(value)
        return cls(**weights)

    def for_type(self, pavement_type: PavementType) -> float:
        return getattr(self, pavement_type.value.lower())

    def as_dict(self) -> dict[PavementType, float]:
        return {t: self.for_type(t) for t in PavementType}

    @property
    def is_identity(self) -> bool:
        return all(self.for_type(t) == 1.0 for t in PavementType)


def apply_calibration(
    result: RecommendationResult,
    weights: Optional[CalibrationWeights],
    thresholds: Optional[ConfidenceThresholdsConfig] = None,
) -> RecommendationResult:
    """Multiply each score by its weight and recompute the ranking.

    Calibrated scores are not clamped, so a boosted type may exceed 100.
    Reliability is a property of the input and is carried over unchanged.
    """
    if weights is None:
        return result

    scores = {t: round_half_up(result.scores[t] * weights.for_type(t)) for t in PavementType}
    ordering = rank(scores)
    recommended = ordering[0]
    highest = scores[recommended]
    difference = highest - scores[ordering[1]]

    return result.model_copy(update={
        "scores": scores,
        "recommended_type": recommended,
        "highest_score": highest,
        "score_difference": difference,
        "confidence_level": confidence_for(highest, difference, thresholds),
        "calibration": weights.as_dict(),
    })
