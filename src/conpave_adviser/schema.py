"""Pydantic models for the pavement advisory engine.

Input schema (ParameterSet) with one enumerated domain per design parameter,
and output schemas for the scoring engine, the design generator, the
compatibility model and the probability estimator.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import InvalidParameterValueError, UnknownPavementTypeError


# =============================================================================
# Pavement Types
# =============================================================================


class PavementType(str, Enum):
    """Concrete pavement design categories.

    Declaration order is the canonical iteration order and breaks ties.
    """
    JPCP = "JPCP"  # Jointed Plain Concrete Pavement
    JRCP = "JRCP"  # Jointed Reinforced Concrete Pavement
    CRCP = "CRCP"  # Continuously Reinforced Concrete Pavement
    PCP = "PCP"  # Precast Concrete Pavement

    @classmethod
    def from_string(cls, value: Union[str, "PavementType"]) -> "PavementType":
        """Parse a pavement type code in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise UnknownPavementTypeError(
                f"Unknown pavement type '{value}'. Expected one of: "
                + ", ".join(t.value for t in cls)
            ) from None


class ConfidenceLevel(str, Enum):
    """Qualitative confidence in a recommendation, lowest first."""
    VERY_LOW = "Very Low"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"

    def shift(self, steps: int) -> "ConfidenceLevel":
        """Move up (positive) or down (negative) the scale, clamped at both ends."""
        levels = list(ConfidenceLevel)
        index = max(0, min(len(levels) - 1, levels.index(self) + steps))
        return levels[index]


# =============================================================================
# Parameter Domains
# =============================================================================


class TrafficVolume(str, Enum):
    """Commercial vehicles per day (CVPD), bucketed."""
    LOW = "1"  # < 450 CVPD
    MEDIUM = "2"  # 450-2000 CVPD
    HIGH = "3"  # > 2000 CVPD
    VERY_HIGH = "4"  # Very high commercial traffic

    @property
    def level(self) -> int:
        return int(self.value)


class DesignLife(str, Enum):
    """Design life in years."""
    YEARS_10 = "10"
    YEARS_20 = "20"
    YEARS_30 = "30"
    YEARS_40 = "40"

    @property
    def years(self) -> int:
        return int(self.value)


class SubgradeCBR(str, Enum):
    """Subgrade California Bearing Ratio, bucketed."""
    BELOW_3 = "1"  # < 3%
    FROM_3_TO_5 = "2"  # 3-5%
    FROM_6_TO_7 = "3"  # 6-7%
    AT_LEAST_8 = "4"  # >= 8%


class SlabThickness(str, Enum):
    """Selected slab thickness in millimetres."""
    MM_150 = "150"
    MM_200 = "200"
    MM_250 = "250"
    MM_300 = "300"

    @property
    def mm(self) -> int:
        return int(self.value)


class LongitudinalJoints(str, Enum):
    """Longitudinal joint requirement by carriageway width."""
    NOT_REQUIRED = "NotRequired"
    WIDTH_4_5 = "Width4.5"
    WIDTH_7 = "Width7"


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"


class CostLevel(str, Enum):
    """Initial construction budget."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class ConstructionTime(str, Enum):
    """Available construction window."""
    LIMITED = "Limited"
    NORMAL = "Normal"
    FLEXIBLE = "Flexible"


class MaintenanceLevel(str, Enum):
    """Acceptable maintenance effort."""
    MINIMAL = "Minimal"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class SteelReinforcement(str, Enum):
    NONE = "None"
    AT_JOINTS = "AtJoints"
    LONGITUDINAL = "Longitudinal"


class TransverseJoints(str, Enum):
    REGULAR = "Regular"
    LONGER = "Longer"
    NONE = "No"


class Shoulders(str, Enum):
    TIED_CONCRETE = "TiedConcrete"
    TIED_OTHER = "TiedOther"
    NOT_TIED = "NotTied"


class ProvisionStatus(str, Enum):
    """Whether an optional pavement element is provided."""
    PROVIDED = "Provided"
    NOT_PROVIDED = "NotProvided"


class SurfaceTexture(str, Enum):
    TINE_BRUSH = "TineBrush"
    OTHER = "Other"
    NONE = "No"


# =============================================================================
# Input Parameters
# =============================================================================


PRIMARY_FIELDS = ("traffic_volume", "design_life", "subgrade_cbr", "slab_thickness")


class ParameterSet(BaseModel):
    """A (possibly partial) set of categorical design parameters.

    Every field is optional; unset fields do not contribute to any score.
    Values outside a field's domain are rejected.
    """
    # Primary factors
    traffic_volume: Optional[TrafficVolume] = Field(None, alias="trafficVolume")
    design_life: Optional[DesignLife] = Field(None, alias="designLife")
    subgrade_cbr: Optional[SubgradeCBR] = Field(None, alias="subgradeCBR")
    slab_thickness: Optional[SlabThickness] = Field(None, alias="slabThickness")

    # Environment and construction constraints
    longitudinal_joints: Optional[LongitudinalJoints] = Field(None, alias="longitudinalJoints")
    marine_environment: Optional[YesNo] = Field(None, alias="marineEnvironment")
    utility_lines: Optional[YesNo] = Field(None, alias="utilityLines")
    manual_construction: Optional[YesNo] = Field(None, alias="manualConstruction")
    initial_cost: Optional[CostLevel] = Field(None, alias="initialCost")
    construction_time: Optional[ConstructionTime] = Field(None, alias="constructionTime")

    # Secondary design features
    maintenance: Optional[MaintenanceLevel] = None
    steel_reinforcement: Optional[SteelReinforcement] = Field(None, alias="steelReinforcement")
    transverse_joints: Optional[TransverseJoints] = Field(None, alias="transverseJoints")
    shoulders: Optional[Shoulders] = None
    anti_friction_layer: Optional[ProvisionStatus] = Field(None, alias="antiFrictionLayer")
    edge_support: Optional[ProvisionStatus] = Field(None, alias="edgeSupport")
    terminal_slabs: Optional[YesNo] = Field(None, alias="terminalSlabs")
    special_joints: Optional[YesNo] = Field(None, alias="specialJoints")
    surface_texture: Optional[SurfaceTexture] = Field(None, alias="surfaceTexture")
    not_for_light_traffic: Optional[YesNo] = Field(None, alias="notForLightTraffic")

    class Config:
        frozen = True
        populate_by_name = True
        extra = "forbid"

    @field_validator("*", mode="before")
    @classmethod
    def normalize_raw_value(cls, value: Any) -> Any:
        """Read numeric buckets given as numbers and treat blanks as unset."""
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ParameterSet":
        """Validate a plain mapping (camelCase or snake_case keys).

        Raises:
            InvalidParameterValueError: If any value lies outside its domain
                or a key is not a known parameter.
        """
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            raise InvalidParameterValueError(
                f"Invalid parameter value(s) for: {', '.join(fields)}",
                fields=fields,
            ) from e

    def present_primary_fields(self) -> list[str]:
        """Names of the primary factors that were supplied."""
        return [name for name in PRIMARY_FIELDS if getattr(self, name) is not None]

    def has_complete_primary_input(self) -> bool:
        return len(self.present_primary_fields()) == len(PRIMARY_FIELDS)

    def to_record(self) -> dict[str, str]:
        """Plain camelCase record of the supplied values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


ParameterInput = Union[ParameterSet, Mapping[str, Any], None]


def coerce_parameters(params: ParameterInput) -> ParameterSet:
    """Accept either a validated ParameterSet or a plain mapping."""
    if isinstance(params, ParameterSet):
        return params
    return ParameterSet.from_mapping(params)


# =============================================================================
# Scoring Engine Output
# =============================================================================


class RecommendationResult(BaseModel):
    """Ranked recommendation from the weighted scoring engine."""
    scores: dict[PavementType, int]
    recommended_type: PavementType
    highest_score: int = Field(..., ge=0)
    confidence_level: ConfidenceLevel
    reliability: int = Field(..., ge=50, le=95)
    score_difference: int = Field(..., ge=0)
    calibration: Optional[dict[PavementType, float]] = None

    def ranked(self) -> list[tuple[PavementType, int]]:
        """Types ordered by score, ties in canonical type order."""
        return sorted(
            ((t, self.scores[t]) for t in PavementType),
            key=lambda item: -item[1],
        )

    @property
    def runner_up(self) -> PavementType:
        return next(t for t, _ in self.ranked() if t != self.recommended_type)


class RecommendationExplanation(BaseModel):
    """Human-readable account of a scoring result."""
    main_explanation: str
    probabilities: dict[PavementType, int]
    key_factors: list[str] = Field(default_factory=list)
    alternative_type: Optional[PavementType] = None
    alternative_explanation: Optional[str] = None


# =============================================================================
# Design Recommendation Output
# =============================================================================


class LifecycleCost(BaseModel):
    """Approximate lifecycle cost in lakh INR per km."""
    initial_cost: float
    maintenance_cost: float
    total_lifecycle_cost: float
    annual_cost: float
    design_life: int
    unit: str = "lakh INR/km (7m wide pavement)"
    note: str = (
        "Cost estimates are approximate and based on typical IRC standards. "
        "Actual costs may vary based on local conditions, material availability, "
        "and specific project requirements."
    )


class GuidelineSection(BaseModel):
    """A category of construction guidelines."""
    category: str
    items: list[str] = Field(default_factory=list)


class DesignSpec(BaseModel):
    """Concrete design values derived for one pavement type."""
    pavement_type: PavementType
    name: str
    thickness_mm: int
    thickness: str
    reinforcement: str
    joint_spacing: str
    joint_spacing_m: Optional[float] = None
    design_life: int
    special_considerations: list[str] = Field(default_factory=list)
    lifecycle_cost: LifecycleCost
    irc_reference: str
    maintenance_interval: str


# =============================================================================
# Compatibility Model Output
# =============================================================================


class MatchDetail(BaseModel):
    """How one input field matched a type's standard profile."""
    weight: float
    matched: bool = False
    score: float = 0.0
    note: str = ""


class CompatibilityPrediction(BaseModel):
    """Prediction from the feature-weighted compatibility model."""
    top_type: PavementType
    confidence_score: float = Field(..., ge=0, le=1)
    alternative_type: Optional[PavementType] = None
    alternative_score: float = Field(0.0, ge=0, le=1)
    per_type_scores: dict[PavementType, float]
    match_details: dict[str, MatchDetail] = Field(default_factory=dict)
    hazard_swap_applied: bool = False

    # Performance profile of the top type
    durability: float = 0.0
    cost_effectiveness: float = 0.0
    construction_complexity: float = 0.0
    irc_compliance: int = 0
    irc_reference_coverage: int = 0

    irc_notes: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    model_version: str = "2.1.0"


class ValidationCaseResult(BaseModel):
    """Outcome of one self-test case."""
    name: str
    expected: PavementType
    predicted: PavementType
    correct: bool
    expected_in_top_three: bool
    top_score: float


class ValidationReport(BaseModel):
    """Aggregate metrics of the compatibility model self-test."""
    accuracy: float
    precision: float
    recall: float
    test_cases: int
    results: list[ValidationCaseResult] = Field(default_factory=list)


# =============================================================================
# Probability Estimator Output
# =============================================================================


class ProbabilityReport(BaseModel):
    """Empirical distribution of recommended types over random inputs."""
    sample_size: int = Field(..., ge=1)
    counts: dict[PavementType, int]
    raw_probabilities: dict[PavementType, float]
    formatted_probabilities: dict[PavementType, str]


# =============================================================================
# Strategy Comparison
# =============================================================================


class StrategyComparison(BaseModel):
    """Both recommendation strategies run on the same input."""
    scoring: RecommendationResult
    compatibility: CompatibilityPrediction
    agree: bool
    signals: list[str] = Field(default_factory=list)
