"""Compatibility model - an alternative recommendation strategy.

Scores each pavement type by how well the supplied parameters agree with
that type's standard profile. Each field carries a weight; graded rules
award full or partial credit, or a penalty, and the total is normalised
by the weight actually applied.
"""

import logging
from typing import Optional

from .config import get_config
from .schema import (
    CompatibilityPrediction,
    DesignLife,
    LongitudinalJoints,
    MaintenanceLevel,
    MatchDetail,
    ParameterInput,
    ParameterSet,
    PavementType,
    ProvisionStatus,
    Shoulders,
    SlabThickness,
    SteelReinforcement,
    SubgradeCBR,
    SurfaceTexture,
    TrafficVolume,
    TransverseJoints,
    ValidationCaseResult,
    ValidationReport,
    YesNo,
    coerce_parameters,
)
from .scorer import rank
from .standards import (
    CBR_PERCENT,
    COST_ORDER,
    FEATURE_WEIGHTS,
    MAINTENANCE_ORDER,
    LevelRequirement,
    Range,
    StandardProfile,
    get_profile,
)

logger = logging.getLogger(__name__)

MODEL_VERSION = "2.1.0"

HAZARD_FIELDS = ("marine_environment", "utility_lines", "manual_construction")

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


IRC_NOTES = {
    J: [
        "Design should follow IRC:58-2015 (Guidelines for the Design of Plain Jointed Rigid Pavements for Highways).",
        "Section 6.3.2 (IRC:58-2015) specifies minimum slab thickness of 200mm for highways.",
        "Section 8.1 (IRC:58-2015) recommends contraction joints at 4.5m spacing for 200-250mm thick slabs.",
    ],
    R: [
        "Design should follow IRC:58-2015 with specific attention to section 7.2 for reinforcement requirements.",
        "JRCP requires 6-10mm diameter bars at 60-70cm c/c as per IRC:58-2015.",
        "Wider joint spacing (up to 15m) requires additional attention to joint design as per section 8.2.",
    ],
    C: [
        "Design should follow IRC:118-2015 (Guidelines for Design and Construction of CRCP).",
        "Section 2.2(i) of IRC:118-2015 requires tight crack spacing (1.1-2.4m) with maximum crack width of 0.5mm.",
        "Longitudinal steel percentage should be 0.6-0.7% of cross-sectional area as per section 6.2.",
        "Terminal joint treatment at bridges and structures as per section 8.5 is critical.",
    ],
    P: [
        "Design should follow IRC:SP:62-2014 (Guidelines for Design and Construction of Precast Concrete "
        "Pavement) and SP:140-2024.",
        "PCP systems require special attention to joint design and sealing as per section 8.3.",
        "Factory quality control of precast elements is critical for durability and performance.",
    ],
}


# Fixed self-test battery: four ideal cases and two boundary cases
VALIDATION_CASES = [
    ("Ideal JPCP case", J, {
        "trafficVolume": "2", "designLife": "20", "subgradeCBR": "3", "slabThickness": "200",
        "steelReinforcement": "None", "transverseJoints": "Regular", "longitudinalJoints": "Width7",
        "maintenance": "Low", "initialCost": "High",
    }),
    ("Ideal JRCP case", R, {
        "trafficVolume": "3", "designLife": "20", "subgradeCBR": "3", "slabThickness": "200",
        "steelReinforcement": "AtJoints", "transverseJoints": "Longer", "longitudinalJoints": "Width7",
        "maintenance": "Low", "initialCost": "High",
    }),
    ("Ideal CRCP case", C, {
        "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "250",
        "steelReinforcement": "Longitudinal", "transverseJoints": "No", "longitudinalJoints": "Width4.5",
        "notForLightTraffic": "Yes", "maintenance": "Minimal",
    }),
    ("Ideal PCP case", P, {
        "trafficVolume": "1", "designLife": "10", "subgradeCBR": "2", "slabThickness": "150",
        "steelReinforcement": "None", "maintenance": "Moderate", "initialCost": "Moderate",
    }),
    ("Boundary case - between JPCP and PCP", P, {
        "trafficVolume": "2", "designLife": "20", "subgradeCBR": "2", "slabThickness": "150",
        "steelReinforcement": "None", "transverseJoints": "Regular",
    }),
    ("Boundary case - between JRCP and CRCP", R, {
        "trafficVolume": "4", "designLife": "30", "subgradeCBR": "4", "slabThickness": "300",
        "steelReinforcement": "None", "transverseJoints": "No",
    }),
]


class CompatibilityModel:
    """Feature-weighted profile matching with a CRCP hazard correction.

    Scoring principles:
    - The four structural factors follow graded code rules
    - Secondary features earn credit when they match the type's profile
    - Site hazards penalise types that should avoid them
    - Scores are normalised by the weight of the fields actually supplied
    """

    def __init__(self, weights: Optional[dict] = None, hazard_swap_ratio: Optional[float] = None):
        self.weights = dict(weights or FEATURE_WEIGHTS)
        if hazard_swap_ratio is None:
            hazard_swap_ratio = get_config().compatibility.hazard_swap_ratio
        self.hazard_swap_ratio = hazard_swap_ratio

    def predict(self, params: ParameterInput) -> CompatibilityPrediction:
        """Rank the four types by profile compatibility.

        Args:
            params: A ParameterSet or a plain mapping of parameter values.

        Returns:
            CompatibilityPrediction for the top type, with the runner-up as
            the alternative.
        """
        params = coerce_parameters(params)

        scores = {}
        details = {}
        for t in PavementType:
            scores[t], details[t] = self.score_type(t, params)
        logger.debug("Compatibility scores: %s", {t.value: round(s, 2) for t, s in scores.items()})

        top, second = rank(scores)[:2]
        top, second, swapped = self.apply_hazard_swap(top, second, scores, params)
        if swapped:
            logger.debug("Site hazards moved %s below %s", second.value, top.value)

        profile = get_profile(top)
        notes = special_notes(top, params)
        if top == C:
            notes.extend(
                profile.hazard_warnings[_alias(name)]
                for name in HAZARD_FIELDS
                if getattr(params, name) == YesNo.YES
            )

        return CompatibilityPrediction(
            top_type=top,
            confidence_score=_unit(scores[top]),
            alternative_type=second,
            alternative_score=_unit(scores[second]),
            per_type_scores={t: round(s, 2) for t, s in scores.items()},
            match_details=details[top],
            hazard_swap_applied=swapped,
            durability=durability_score(profile),
            cost_effectiveness=cost_effectiveness_score(profile),
            construction_complexity=construction_complexity_score(profile),
            irc_compliance=irc_compliance_score(top, details[top], params),
            irc_reference_coverage=profile.irc_reference_coverage,
            irc_notes=list(IRC_NOTES[top]),
            notes=notes,
            model_version=MODEL_VERSION,
        )

    def apply_hazard_swap(
        self,
        top: PavementType,
        second: PavementType,
        scores: dict[PavementType, float],
        params: ParameterSet,
    ) -> tuple[PavementType, PavementType, bool]:
        """Demote CRCP once when a site hazard applies and the runner-up is close."""
        hazard = any(getattr(params, name) == YesNo.YES for name in HAZARD_FIELDS)
        if (
            top == C
            and hazard
            and scores[top] > 0
            and scores[second] >= scores[top] * self.hazard_swap_ratio
        ):
            return second, top, True
        return top, second, False

    def score_type(self, pavement_type: PavementType, params: ParameterSet) -> tuple[float, dict[str, MatchDetail]]:
        """Compatibility score (normalised to 100) and per-field details."""
        profile = get_profile(pavement_type)
        rural = params.traffic_volume == TrafficVolume.LOW

        rules = [
            ("traffic_volume", self._match_traffic),
            ("design_life", self._match_design_life),
            ("subgrade_cbr", self._match_subgrade_cbr),
            ("slab_thickness", self._match_slab_thickness),
            ("steel_reinforcement", self._match_steel),
            ("transverse_joints", self._match_transverse_joints),
            ("longitudinal_joints", self._match_longitudinal_joints),
            ("shoulders", self._match_shoulders),
            ("anti_friction_layer", self._match_anti_friction),
            ("edge_support", self._match_edge_support),
            ("terminal_slabs", self._match_terminal_slabs),
            ("special_joints", self._match_special_joints),
            ("surface_texture", self._match_surface_texture),
            ("maintenance", self._match_maintenance),
            ("initial_cost", self._match_initial_cost),
            ("not_for_light_traffic", self._match_light_traffic),
        ]

        total = 0.0
        weight_applied = 0.0
        details = {}

        for name, rule in rules:
            value = getattr(params, name)
            if value is None:
                continue
            weight = self.weights[name]
            credit, note = rule(profile, value, rural)
            details[_alias(name)] = MatchDetail(
                weight=weight, matched=credit > 0, score=round(credit * weight, 4), note=note
            )
            total += credit * weight
            weight_applied += weight

        for name in HAZARD_FIELDS:
            value = getattr(params, name)
            if value is None:
                continue
            weight = self.weights[name]
            compatible = getattr(profile, name.split("_")[0] + "_compatible")
            if value == YesNo.YES and not compatible:
                credit, note = -1.0, f"{profile.pavement_type.value} should be avoided here"
            else:
                credit, note = 1.0, "No site restriction"
            details[_alias(name)] = MatchDetail(weight=weight, matched=credit > 0, score=credit * weight, note=note)
            total += credit * weight
            weight_applied += weight

        if weight_applied == 0:
            return 50.0, details
        return total / weight_applied * 100, details

    # -------------------------------------------------------------------------
    # Structural rules
    # -------------------------------------------------------------------------

    def _match_traffic(self, profile: StandardProfile, value: TrafficVolume, rural: bool):
        req = profile.traffic
        level = value.level
        if req.preferred == "very high" and level == 4:
            return 1.0, "Perfect match for very high traffic volume"
        if req.preferred == "highway" and level in (2, 3):
            return 1.0, "Suitable for highway traffic"
        if req.min_cvpd is not None and level >= 2:
            return 0.8, "Above minimum traffic threshold"
        if req.max_cvpd is not None and level == 1:
            return 1.0, "Suited to low traffic rural roads"
        if req.preferred == "very high" and level < 3:
            return -0.5, "Traffic too light for this pavement type"
        return 0.0, "No clear traffic match"

    def _match_design_life(self, profile: StandardProfile, value: DesignLife, rural: bool):
        req = profile.design_life
        years = value.years

        if req.preferred is None:
            window = req.rural if rural else req.expressway
            if window is not None and window.contains(years):
                return 0.9, "Within design life range for this road class"
            return 0.0, "Outside design life range for this road class"

        difference = abs(years - req.preferred)
        if difference == 0:
            return 1.0, "Matches preferred design life"
        if difference <= 5:
            return 1 - difference / 10, "Close to preferred design life"
        if req.allowed is not None and req.allowed.contains(years):
            return 0.9, "Within acceptable design life range"
        tolerance = Range(req.allowed.minimum - 5, req.allowed.maximum + 5) if req.allowed else None
        if difference > 10 or (tolerance is not None and not tolerance.contains(years)):
            return -0.3, "Design life far from the recommended range"
        return 0.0, "Design life outside the preferred range"

    def _match_subgrade_cbr(self, profile: StandardProfile, value: SubgradeCBR, rural: bool):
        req = profile.subgrade_cbr
        cbr = CBR_PERCENT[value]

        if req.minimum is not None:
            if cbr >= req.minimum:
                return 1.0, "Meets minimum CBR requirement"
            if cbr < req.minimum * 0.8:
                return -1.0, "Well below minimum CBR requirement"
            return 0.0, "Slightly below minimum CBR requirement"

        if cbr >= req.applicable_minimum(rural):
            return 1.0, "Meets CBR requirement for this road class"
        if cbr >= req.rural * 0.8:
            return 0.5, "Slightly below CBR requirement"
        return -0.5, "Below CBR requirement"

    def _match_slab_thickness(self, profile: StandardProfile, value: SlabThickness, rural: bool):
        req = profile.slab_thickness
        mm = value.mm

        if req.minimum is not None:
            if mm >= req.minimum:
                if req.no_reduction:
                    return 1.0, "Meets thickness requirement (no reduction desirable)"
                return 1.0, "Meets minimum thickness requirement"
            if req.no_reduction:
                return -0.8, "Below recommended thickness, no reduction is desirable"
            return -0.8, "Below minimum thickness requirement"

        if mm >= req.applicable_minimum(rural):
            return 1.0, "Meets thickness requirement for this road class"
        return -1.0, "Below minimum thickness requirement"

    # -------------------------------------------------------------------------
    # Secondary feature rules
    # -------------------------------------------------------------------------

    def _match_steel(self, profile: StandardProfile, value: SteelReinforcement, rural: bool):
        if value in profile.steel_matches:
            return 1.0, f"Matches: {profile.longitudinal_steel}"
        return 0.0, f"Profile expects: {profile.longitudinal_steel}"

    def _match_transverse_joints(self, profile: StandardProfile, value: TransverseJoints, rural: bool):
        if value == profile.transverse_joint_match:
            return 1.0, f"Matches: {profile.transverse_joints}"
        return 0.0, f"Profile expects: {profile.transverse_joints}"

    def _match_longitudinal_joints(self, profile: StandardProfile, value: LongitudinalJoints, rural: bool):
        if value == profile.longitudinal_joint_match:
            return 1.0, f"Matches: {profile.longitudinal_joints}"
        if value == LongitudinalJoints.NOT_REQUIRED:
            return 0.5, "Narrow carriageway, joints optional"
        return 0.0, f"Profile expects: {profile.longitudinal_joints}"

    def _match_shoulders(self, profile: StandardProfile, value: Shoulders, rural: bool):
        credit = profile.shoulder_credit.get(value, 0.0)
        if credit >= 1.0:
            return credit, f"Matches: {profile.shoulders}"
        return credit, f"Profile expects: {profile.shoulders}"

    def _match_anti_friction(self, profile: StandardProfile, value: ProvisionStatus, rural: bool):
        if profile.anti_friction_match == value.value:
            return 1.0, "Anti-friction layer matches profile"
        return 0.0, "Anti-friction layer does not match profile"

    def _match_edge_support(self, profile: StandardProfile, value: ProvisionStatus, rural: bool):
        if value == ProvisionStatus.PROVIDED:
            if profile.edge_support_important or profile.edge_support_optional:
                return 1.0, "Edge support provided"
            return 0.0, "Edge support not expected"
        if not profile.edge_support_important:
            return 0.3, "Edge support optional"
        return 0.0, "Edge support is important for this type"

    def _match_terminal_slabs(self, profile: StandardProfile, value: YesNo, rural: bool):
        if value == profile.terminal_slabs:
            return 1.0, "Terminal slab provision matches profile"
        return 0.0, "Terminal slab provision does not match profile"

    def _match_special_joints(self, profile: StandardProfile, value: YesNo, rural: bool):
        if value == YesNo.YES and not profile.special_joints_as_designed:
            return 1.0, "Special joints required"
        if value == YesNo.NO and profile.special_joints_as_designed:
            return 0.7, "Special joints as per design"
        return 0.0, "Special joint provision does not match profile"

    def _match_surface_texture(self, profile: StandardProfile, value: SurfaceTexture, rural: bool):
        if value == SurfaceTexture.NONE:
            return -1.0, "Surface texturing is required for concrete pavements"
        return 1.0, "Surface texture provided"

    def _match_maintenance(self, profile: StandardProfile, value: MaintenanceLevel, rural: bool):
        return _match_level(profile.maintenance, value.value, MAINTENANCE_ORDER, "maintenance")

    def _match_initial_cost(self, profile: StandardProfile, value, rural: bool):
        return _match_level(profile.initial_cost, value.value, COST_ORDER, "initial cost")

    def _match_light_traffic(self, profile: StandardProfile, value: YesNo, rural: bool):
        if (value == YesNo.YES) == profile.not_for_light_traffic:
            return 1.0, "Light traffic restriction matches profile"
        return -0.5, "Light traffic restriction does not match profile"

    # -------------------------------------------------------------------------
    # Self-test
    # -------------------------------------------------------------------------

    def validate_model(self) -> ValidationReport:
        """Run the fixed self-test battery and report accuracy metrics.

        A wrong prediction counts as a false positive when its score exceeds
        80, and as a false negative when the expected type is not among the
        top three.
        """
        results = []
        true_positives = false_positives = false_negatives = 0

        for name, expected, raw in VALIDATION_CASES:
            params = ParameterSet.from_mapping(raw)
            prediction = self.predict(params)
            top_three = rank(prediction.per_type_scores)[:3]
            correct = prediction.top_type == expected
            top_score = prediction.per_type_scores[prediction.top_type]

            if correct:
                true_positives += 1
            else:
                if top_score > 80:
                    false_positives += 1
                if expected not in top_three:
                    false_negatives += 1

            results.append(ValidationCaseResult(
                name=name,
                expected=expected,
                predicted=prediction.top_type,
                correct=correct,
                expected_in_top_three=expected in top_three,
                top_score=top_score,
            ))

        total = len(VALIDATION_CASES)
        report = ValidationReport(
            accuracy=true_positives / total,
            precision=_ratio(true_positives, true_positives + false_positives),
            recall=_ratio(true_positives, true_positives + false_negatives),
            test_cases=total,
            results=results,
        )
        logger.debug("Self-test accuracy %.2f over %d cases", report.accuracy, total)
        return report


# =============================================================================
# Helpers
# =============================================================================


def _alias(field_name: str) -> str:
    """camelCase key used in match details and profile references."""
    field_info = ParameterSet.model_fields[field_name]
    return field_info.alias or field_name


def _unit(score: float) -> float:
    return max(0.0, min(1.0, score / 100))


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else 0.0


def _match_level(requirement: LevelRequirement, value: str, order: tuple, label: str):
    if requirement.level is not None:
        if value == requirement.level:
            return 1.0, f"Matches {label} expectation ({requirement.summary})"
        distance = abs(order.index(value) - order.index(requirement.level))
        return 1 - distance / len(order), f"Partial {label} match ({requirement.summary})"
    if value in (requirement.rural, requirement.expressway):
        return 1.0, f"Matches {label} expectation ({requirement.summary})"
    return 0.5, f"Partial {label} match ({requirement.summary})"


# =============================================================================
# Performance Profile
# =============================================================================


def durability_score(profile: StandardProfile) -> float:
    """Durability of a type from its design life, thickness and steel."""
    life = profile.design_life
    score = 0.0
    if life.preferred is not None:
        score += life.preferred * 0.5
    elif life.allowed is not None:
        score += (life.allowed.minimum + life.allowed.maximum) / 2 * 0.5
    elif life.rural is not None and life.expressway is not None:
        score += (life.rural.maximum + life.expressway.maximum) / 2 * 0.4

    if profile.slab_thickness.minimum is not None:
        score += profile.slab_thickness.minimum * 0.01

    steel = profile.longitudinal_steel
    if "0.65-0.80" in steel:
        score += 10
    elif "along slab length" in steel:
        score += 7
    elif "at joints" in steel:
        score += 3

    return min(100.0, max(0.0, score))


def cost_effectiveness_score(profile: StandardProfile) -> float:
    score = 50.0

    if profile.initial_cost.level == "High":
        score -= 15 if profile.lower_lifecycle_cost else 10
    elif profile.initial_cost.level == "Moderate":
        score -= 5
    if profile.lower_lifecycle_cost:
        score += 20

    maintenance_bonus = {"Minimal": 15, "Low": 10, "Moderate": 5}
    score += maintenance_bonus.get(profile.maintenance.level, 0)

    life = profile.design_life
    if life.preferred is not None:
        score += life.preferred * 0.5
    elif life.rural is not None and life.expressway is not None:
        score += (life.rural.maximum + life.expressway.maximum) / 2 * 0.3

    return min(100.0, max(0.0, score))


def construction_complexity_score(profile: StandardProfile) -> float:
    """Construction complexity, higher is more complex."""
    score = 50.0

    steel = profile.longitudinal_steel
    if "0.65-0.80" in steel:
        score += 20
    elif "along slab length" in steel:
        score += 15
    elif "at joints" in steel:
        score += 5
    elif "Not applicable" in steel:
        score -= 10

    joints = profile.transverse_joints
    if joints == "None":
        score -= 10
    elif "regular intervals" in joints:
        score += 5
    elif "longer intervals" in joints:
        score += 10

    if profile.terminal_slabs == YesNo.YES:
        score += 10
    if not profile.special_joints_as_designed:
        score += 10

    return min(100.0, max(0.0, score))


def irc_compliance_score(
    pavement_type: PavementType,
    details: dict[str, MatchDetail],
    params: ParameterSet,
) -> int:
    """Share of the primary code requirements the input satisfies.

    A primary factor complies when it earned credit; unsupplied factors do
    not comply. CRCP also checks the longitudinal steel provision.
    """
    checks = [details.get(_alias(name)) for name in ("traffic_volume", "design_life", "subgrade_cbr", "slab_thickness")]
    passed = [detail is not None and detail.matched for detail in checks]
    if pavement_type == C:
        passed.append(params.steel_reinforcement == SteelReinforcement.LONGITUDINAL)
    return round(sum(passed) / len(passed) * 100)


def special_notes(pavement_type: PavementType, params: ParameterSet) -> list[str]:
    """Advisory notes on inputs that conflict with the type's profile."""
    notes = []
    thin = params.slab_thickness == SlabThickness.MM_150
    weak_subgrade = params.subgrade_cbr in (SubgradeCBR.BELOW_3, SubgradeCBR.FROM_3_TO_5)

    if pavement_type == C:
        if params.not_for_light_traffic == YesNo.NO:
            notes.append(
                "WARNING: CRCP is not recommended for light traffic roads, village roads, urban streets, "
                "or short length projects (IRC:118-2015 3.2(iii)/p.5)."
            )
        if params.terminal_slabs == YesNo.NO:
            notes.append(
                "Terminal slabs are required for CRCP at transitions to flexible pavements "
                "(IRC:118-2015 2.2(vi)/p.4)."
            )
        if params.shoulders == Shoulders.NOT_TIED:
            notes.append(
                "Concrete shoulders tied to the main slab with no longitudinal joint are strongly "
                "recommended for CRCP (IRC:118-2015 2.2(vii)/p.4)."
            )
        if params.anti_friction_layer == ProvisionStatus.PROVIDED:
            notes.append("Anti-friction layer is not typically provided for CRCP (IRC:118-2015 2.2(iv)/p.3).")
        if params.edge_support == ProvisionStatus.NOT_PROVIDED:
            notes.append(
                "Edge support is important for CRCP; concrete shoulder is recommended (IRC:118-2015 2.2(vii)/p.4)."
            )
        if params.slab_thickness in (SlabThickness.MM_150, SlabThickness.MM_200):
            notes.append("CRCP typically requires thicker slabs; no reduction in thickness is desirable (IRC:118-2015).")
        if params.steel_reinforcement != SteelReinforcement.LONGITUDINAL:
            notes.append("CRCP requires 0.65-0.80% longitudinal steel reinforcement (IRC:118-2015 2.2(vii)/p.4).")

    if pavement_type in (J, R):
        code = pavement_type.value
        if params.traffic_volume == TrafficVolume.LOW:
            notes.append(
                f"{code} is designed for highways/expressways with >=450 CVPD. Consider PCP for lower "
                "traffic volumes (IRC:58-2015 2.1/p.2)."
            )
        if thin:
            notes.append(f"{code} requires minimum 200mm slab thickness per IRC standards (IRC:58-2015 6.3.2/p.26).")
        if weak_subgrade:
            notes.append(
                f"{code} typically requires subgrade CBR >=6%. Consider soil stabilization or increased "
                "thickness (IRC:58-2015 Table 4/p.13)."
            )
        if pavement_type == R and params.steel_reinforcement == SteelReinforcement.NONE:
            notes.append("JRCP requires steel reinforcement at joints and along slab length (IRC:58-2015).")

    if pavement_type == P:
        if params.traffic_volume == TrafficVolume.VERY_HIGH:
            notes.append("For very high traffic volumes, consider CRCP or JRCP instead of PCP (IRC standards).")
        if params.traffic_volume != TrafficVolume.LOW and thin:
            notes.append("For non-rural roads, PCP requires minimum 200mm slab thickness (IRC:SP:62-2014).")
        if params.subgrade_cbr == SubgradeCBR.BELOW_3 and params.traffic_volume == TrafficVolume.LOW:
            notes.append("PCP on rural roads requires minimum CBR >=3%. Consider soil stabilization (IRC:SP:62-2014).")

    if params.subgrade_cbr == SubgradeCBR.BELOW_3:
        notes.append(
            "Subgrade CBR <3% is very low. Consider soil stabilization or increased pavement thickness "
            "to ensure durability."
        )
    if thin and pavement_type != P:
        notes.append(
            "Selected thickness (150mm) is below IRC minimum recommendation for this pavement type. "
            "Consider increasing thickness."
        )
    if params.surface_texture == SurfaceTexture.NONE:
        notes.append(
            "Surface texturing is required for all concrete pavements per IRC standards "
            "(IRC:118-2015 2.2(viii)/p.4)."
        )
    if pavement_type == C and params.transverse_joints != TransverseJoints.NONE:
        notes.append(
            "CRCP does not require transverse joints as it relies on controlled natural cracking "
            "(IRC:118-2015 1/p.1)."
        )

    return notes
