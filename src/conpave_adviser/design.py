"""Derived design recommendations for a chosen pavement type.

Turns a pavement type and the user's parameters into concrete design
values (thickness, joint spacing, design life, reinforcement), site
considerations, an approximate lifecycle cost and construction
guidelines.
"""

import logging
import math
from typing import Optional

from .schema import (
    CostLevel,
    DesignSpec,
    GuidelineSection,
    LifecycleCost,
    ParameterInput,
    ParameterSet,
    PavementType,
    SubgradeCBR,
    TrafficVolume,
    YesNo,
    coerce_parameters,
)
from .standards import (
    BASE_DESIGN_LIFE_YEARS,
    BASE_THICKNESS_MM,
    CRCP_JOINT_SPACING,
    JOINT_SPACING_CAP_M,
    LIFECYCLE_COST_BASE,
    LIFECYCLE_TRAFFIC_MULTIPLIERS,
    MARINE_COST_MULTIPLIER,
    PCP_JOINT_SPACING,
    get_profile,
)

logger = logging.getLogger(__name__)

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


def _round_money(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def derive_design_spec(pavement_type, params: ParameterInput) -> DesignSpec:
    """Derive design values for a pavement type.

    Args:
        pavement_type: PavementType or type code (any case).
        params: A ParameterSet or a plain mapping of parameter values.

    Returns:
        DesignSpec with thickness, joint spacing, design life, reinforcement,
        special considerations and lifecycle cost.
    """
    pavement_type = PavementType.from_string(pavement_type)
    params = coerce_parameters(params)
    profile = get_profile(pavement_type)

    thickness = calculate_thickness(pavement_type, params)
    joint_spacing, joint_spacing_m = calculate_joint_spacing(pavement_type, thickness)
    design_life = calculate_design_life(pavement_type, params)

    logger.debug(
        "Derived %s: %d mm, joints %s, %d years",
        pavement_type.value, thickness, joint_spacing, design_life,
    )

    return DesignSpec(
        pavement_type=pavement_type,
        name=profile.name,
        thickness_mm=thickness,
        thickness=f"{thickness} mm (IRC:58-2015)",
        reinforcement=profile.reinforcement,
        joint_spacing=joint_spacing,
        joint_spacing_m=joint_spacing_m,
        design_life=design_life,
        special_considerations=special_considerations(pavement_type, params),
        lifecycle_cost=estimate_lifecycle_cost(pavement_type, params),
        irc_reference=profile.irc_reference,
        maintenance_interval=profile.maintenance_interval,
    )


def calculate_thickness(pavement_type: PavementType, params: ParameterSet) -> int:
    """Slab thickness in mm from traffic, corrected for subgrade strength."""
    traffic = params.traffic_volume or TrafficVolume.MEDIUM
    thickness = BASE_THICKNESS_MM[pavement_type][traffic]

    if params.subgrade_cbr == SubgradeCBR.BELOW_3:
        thickness += 20
    elif params.subgrade_cbr == SubgradeCBR.AT_LEAST_8:
        thickness -= 10

    # Never exceed the thickness the user selected
    if params.slab_thickness is not None:
        thickness = min(thickness, params.slab_thickness.mm)

    return thickness


def calculate_joint_spacing(pavement_type: PavementType, thickness_mm: int) -> tuple[str, Optional[float]]:
    """Joint spacing text and, for jointed types, the value in metres.

    Jointed types use 25 times the slab thickness, capped per type and
    rounded to the nearest half metre.
    """
    if pavement_type == C:
        return CRCP_JOINT_SPACING, None
    if pavement_type == P:
        return PCP_JOINT_SPACING, None

    spacing = min(25 * thickness_mm / 1000, JOINT_SPACING_CAP_M[pavement_type])
    spacing = math.floor(spacing * 2 + 0.5) / 2
    return f"{spacing:g} m", spacing


def calculate_design_life(pavement_type: PavementType, params: ParameterSet) -> int:
    life = BASE_DESIGN_LIFE_YEARS[pavement_type]
    if params.design_life is not None:
        life = max(life, params.design_life.years)
    if params.traffic_volume == TrafficVolume.VERY_HIGH:
        life = math.floor(life * 0.9 + 0.5)
    return life


def special_considerations(pavement_type: PavementType, params: ParameterSet) -> list[str]:
    """Site-specific advice, in the order subgrade, marine, utilities, labour, cost."""
    considerations = []

    if params.subgrade_cbr == SubgradeCBR.BELOW_3:
        considerations.append("Additional subbase treatment recommended due to low subgrade strength")

    if params.marine_environment == YesNo.YES:
        if pavement_type in (C, R):
            considerations.append(
                "Use epoxy-coated or galvanized reinforcement to prevent corrosion in marine environment"
            )
        considerations.append("Increase concrete cover over reinforcement by 10mm")
        considerations.append("Use sulfate-resistant cement (IRC:15-2017)")

    if params.utility_lines == YesNo.YES:
        if pavement_type == C:
            considerations.append("Not recommended for areas with many utility lines. Consider JPCP as alternative")
        else:
            considerations.append("Design access chambers aligned with joint patterns")

    if params.manual_construction == YesNo.YES:
        if pavement_type == C:
            considerations.append("Not suitable for manual construction. Requires specialized equipment")
        elif pavement_type in (J, P):
            considerations.append("Well-suited for manual construction with proper quality control")

    if params.initial_cost == CostLevel.LOW:
        if pavement_type == C:
            considerations.append("Higher initial cost but lower life-cycle cost. Consider staged construction")
        elif pavement_type == J:
            considerations.append("Most economical rigid pavement option for initial construction")

    return considerations


def estimate_lifecycle_cost(pavement_type, params: ParameterInput) -> LifecycleCost:
    """Approximate lifecycle cost in lakh INR per km of 7 m wide pavement.

    Routine maintenance accrues every year; a major repair is added every
    8 years (12 for CRCP) except in the final year of the design life.
    """
    pavement_type = PavementType.from_string(pavement_type)
    params = coerce_parameters(params)
    base = LIFECYCLE_COST_BASE[pavement_type]

    if params.design_life is not None:
        design_life = params.design_life.years
    elif pavement_type == C:
        design_life = 30
    elif pavement_type == P and params.traffic_volume == TrafficVolume.LOW:
        design_life = 15
    else:
        design_life = 20

    traffic_multiplier = LIFECYCLE_TRAFFIC_MULTIPLIERS.get(params.traffic_volume, 1.0)
    environment_multiplier = MARINE_COST_MULTIPLIER if params.marine_environment == YesNo.YES else 1.0

    initial_cost = base.initial * traffic_multiplier * environment_multiplier
    annual_maintenance = base.annual_maintenance * (1 + design_life / 100)

    maintenance_cost = 0.0
    for year in range(1, design_life + 1):
        maintenance_cost += annual_maintenance
        if year % base.major_repair_interval == 0 and year < design_life:
            maintenance_cost += base.major_repair

    total = initial_cost + maintenance_cost
    return LifecycleCost(
        initial_cost=_round_money(initial_cost),
        maintenance_cost=_round_money(maintenance_cost),
        total_lifecycle_cost=_round_money(total),
        annual_cost=_round_money(total / design_life),
        design_life=design_life,
    )


# =============================================================================
# Construction Guidelines
# =============================================================================

_COMMON_WATER = "Water: Potable water with pH 6-8, free from harmful materials"

_JOINTED_SEQUENCE_START = [
    "Prepare subgrade with proper compaction to achieve minimum specified CBR (IRC:58-2015 6.2/p.25)",
    "Place separation membrane/anti-friction layer if specified (IRC:58-2015 6.1/p.25)",
]
_JOINTED_SEQUENCE_END = [
    "Place concrete with slump 25±15mm and ensure proper compaction (IRC:58-2015 8.7/p.35)",
    "Apply specified surface texturing using tine brush (IRC:58-2015 8.9/p.36)",
    "Begin curing immediately after texturing for minimum 14 days (IRC:58-2015 8.10/p.37)",
]
_JOINTED_JOINT_END = [
    "Longitudinal joints: Place tie bars at 500-1000mm spacing if width > 7m (IRC:58-2015 8.5/p.36)",
    "Construction joints: Install at end of day's work with proper dowel alignment (IRC:58-2015 8.4/p.35)",
    "Seal joints with appropriate sealant after 28-day concrete curing (IRC:58-2015 8.3/p.34)",
]
_IRC58_MATERIALS = [
    "Cement: Use 43/53 grade OPC conforming to IS:8112/IS:12269 (IRC:58-2015 5.1/p.20)",
    "Aggregates: Use crushed material with Los Angeles Abrasion value < 35% (IRC:58-2015 5.2/p.20)",
    f"{_COMMON_WATER} (IRC:58-2015 5.3/p.21)",
]

MARINE_GUIDELINES = GuidelineSection(
    category="Marine Environment Requirements",
    items=[
        "Use sulphate-resistant cement or appropriate cement with mineral admixtures in marine environment (IRC standards)",
        "Consider lower water-cement ratio (<= 0.45) to reduce permeability (IRC standards)",
        "Provide additional concrete cover (min. 50mm) to reinforcement in marine areas (IRC standards)",
        "Use corrosion inhibitors or surface treatments to protect reinforcement (IRC standards)",
    ],
)


def _jpcp_guidelines() -> list[GuidelineSection]:
    return [
        GuidelineSection(category="Materials", items=_IRC58_MATERIALS + [
            "Reinforcement: Dowel bars to be 25-40mm diameter, 450-500mm length (IRC:58-2015 7.4/p.33)",
        ]),
        GuidelineSection(category="Construction Sequence", items=_JOINTED_SEQUENCE_START + [
            "Arrange dowel assemblies and tie bars at designed spacing (IRC:58-2015 8.2/p.34)",
        ] + _JOINTED_SEQUENCE_END),
        GuidelineSection(category="Joint Construction", items=[
            "Transverse contraction joints: Cut to depth D/3 to D/4 within 6-12 hours (IRC:58-2015 8.2/p.34)",
        ] + _JOINTED_JOINT_END),
    ]


def _jrcp_guidelines() -> list[GuidelineSection]:
    return [
        GuidelineSection(category="Materials", items=_IRC58_MATERIALS + [
            "Reinforcement: Longitudinal steel 0.15-0.25% of cross-section (IRC:58-2015 7.2/p.32)",
            "Dowel bars: 32-40mm diameter, 450-500mm length (IRC:58-2015 7.4/p.33)",
        ]),
        GuidelineSection(category="Construction Sequence", items=_JOINTED_SEQUENCE_START + [
            "Place and secure reinforcement with proper cover (IRC:58-2015 7.2/p.32)",
            "Arrange dowel assemblies at designed joint spacing (IRC:58-2015 8.2/p.34)",
        ] + _JOINTED_SEQUENCE_END),
        GuidelineSection(category="Joint Construction", items=[
            "Transverse contraction joints: Place at 9-10m spacing (IRC:58-2015 8.2/p.33)",
        ] + _JOINTED_JOINT_END),
    ]


def _crcp_guidelines() -> list[GuidelineSection]:
    return [
        GuidelineSection(category="Materials", items=[
            "Cement: Use 43/53 grade OPC conforming to IS:8112/IS:12269 (IRC:118-2015 5.1/p.7)",
            "Aggregates: Use crushed material with Los Angeles Abrasion value < 30% (IRC:118-2015 5.2/p.7)",
            f"{_COMMON_WATER} (IRC:118-2015 5.3/p.8)",
            "Longitudinal Steel: 0.65-0.80% of cross-section area (IRC:118-2015 2.2(vii)/p.4)",
            "Transverse Steel: 0.08-0.10% of cross-section area (IRC:118-2015 6.2/p.9)",
        ]),
        GuidelineSection(category="Construction Sequence", items=[
            "Prepare subgrade with proper compaction to achieve CBR >= 6% (IRC:118-2015 6.3/p.10)",
            "Do not provide anti-friction layer (IRC:118-2015 2.2(iv)/p.3)",
            "Place and secure reinforcement with proper cover and splicing (IRC:118-2015 7.1/p.11)",
            "Place concrete with mechanized equipment (IRC:118-2015 3.2(iv)/p.5)",
            "Apply specified surface texturing using tine brush (IRC:118-2015 2.2(viii)/p.4)",
            "Begin curing immediately after texturing for minimum 14 days (IRC:118-2015 8.4/p.14)",
        ]),
        GuidelineSection(category="Special Requirements", items=[
            "Terminal joints: Provide at bridges and structures (IRC:118-2015 2.2(vi)/p.4)",
            "Longitudinal joints: Provide if width > 4.5m (IRC:118-2015 2.2(ii)/p.3)",
            "Cracks: Should develop at 0.5-2.0m spacing with width <= 0.6mm (IRC:118-2015 2.2(i)/p.3)",
            "Shoulders: Use tied concrete shoulders with no longitudinal joint (IRC:118-2015 2.2(vii)/p.4)",
            "Epoxy-coated rebars: Use in marine/corrosive environments (IRC:118-2015 3.2(i)/p.5)",
        ]),
    ]


def _pcp_guidelines(rural: bool) -> list[GuidelineSection]:
    standard = "IRC:SP:62-2014" if rural else "IRC:SP:140-2024"
    return [
        GuidelineSection(category="Materials", items=[
            f"Cement: Use {'33/43' if rural else '43/53'} grade OPC conforming to IS standards ({standard})",
            f"Aggregates: Use crushed material with Los Angeles Abrasion value < {'40' if rural else '35'}% ({standard})",
            f"Water: Potable water free from harmful materials ({standard})",
            f"Base/Subbase: {'Optional GSB layer' if rural else 'Required DLC/GSB layer'} ({standard})",
        ]),
        GuidelineSection(category="Construction Sequence", items=[
            f"Prepare subgrade with proper compaction to achieve CBR >= {'3' if rural else '5'}% ({standard})",
            f"{'Consider' if rural else 'Provide'} anti-friction layer if no base course ({standard})",
            f"Place concrete with slump {'25±15mm' if rural else '25±10mm'} ({standard})",
            f"Apply specified surface texturing ({standard})",
            f"Begin curing immediately after texturing for minimum {'7' if rural else '14'} days ({standard})",
        ]),
        GuidelineSection(category="Joint Construction", items=[
            f"Transverse contraction joints: Cut to depth D/3 to D/4 at {'3.0-3.6m' if rural else '4.5m'} spacing ({standard})",
            f"Longitudinal joints: Place if width exceeds recommended values ({standard})",
            f"Construction joints: Install at end of day's work ({standard})",
            f"Seal joints with appropriate sealant after curing ({standard})",
        ]),
    ]


def construction_guidelines(pavement_type, params: ParameterInput = None) -> list[GuidelineSection]:
    """Categorised construction guidelines for a pavement type.

    PCP follows the rural road code for traffic bucket 1 and the
    expressway code otherwise. A marine section is appended for marine sites.
    """
    pavement_type = PavementType.from_string(pavement_type)
    params = coerce_parameters(params)

    if pavement_type == J:
        sections = _jpcp_guidelines()
    elif pavement_type == R:
        sections = _jrcp_guidelines()
    elif pavement_type == C:
        sections = _crcp_guidelines()
    else:
        sections = _pcp_guidelines(rural=params.traffic_volume == TrafficVolume.LOW)

    if params.marine_environment == YesNo.YES:
        sections.append(MARINE_GUIDELINES.model_copy(deep=True))

    return sections
