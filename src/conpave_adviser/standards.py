"""Reference data for the pavement advisory engine.

Enumerated parameter domains, per-value score tables for the weighted
scoring engine, and the per-type standard profiles used by the design
generator and the compatibility model. Everything here is read-only.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .schema import (
    ConstructionTime,
    CostLevel,
    DesignLife,
    LongitudinalJoints,
    MaintenanceLevel,
    PavementType,
    Shoulders,
    SlabThickness,
    SteelReinforcement,
    SubgradeCBR,
    TrafficVolume,
    TransverseJoints,
    YesNo,
)

J, R, C, P = PavementType.JPCP, PavementType.JRCP, PavementType.CRCP, PavementType.PCP


def _per_type(jpcp: float, jrcp: float, crcp: float, pcp: float) -> Mapping[PavementType, float]:
    return MappingProxyType({J: jpcp, R: jrcp, C: crcp, P: pcp})


# =============================================================================
# Parameter Space
# =============================================================================

# Domains sampled by the Monte Carlo estimator, keyed by ParameterSet field
PARAMETER_SPACE: Mapping[str, tuple] = MappingProxyType({
    "traffic_volume": tuple(TrafficVolume),
    "design_life": tuple(DesignLife),
    "subgrade_cbr": tuple(SubgradeCBR),
    "slab_thickness": tuple(SlabThickness),
    "longitudinal_joints": tuple(LongitudinalJoints),
    "marine_environment": tuple(YesNo),
    "utility_lines": tuple(YesNo),
    "manual_construction": tuple(YesNo),
    "initial_cost": tuple(CostLevel),
    "construction_time": tuple(ConstructionTime),
})

# Representative CBR (%) of each bucket
CBR_PERCENT: Mapping[SubgradeCBR, float] = MappingProxyType({
    SubgradeCBR.BELOW_3: 2.0,
    SubgradeCBR.FROM_3_TO_5: 4.0,
    SubgradeCBR.FROM_6_TO_7: 6.5,
    SubgradeCBR.AT_LEAST_8: 8.0,
})


# =============================================================================
# Weighted Scoring Tables
# =============================================================================

TRAFFIC_SCORES = MappingProxyType({
    TrafficVolume.LOW: _per_type(0.65, 0.55, 0.30, 0.95),
    TrafficVolume.MEDIUM: _per_type(0.95, 0.80, 0.60, 0.70),
    TrafficVolume.HIGH: _per_type(0.70, 0.95, 0.85, 0.55),
    TrafficVolume.VERY_HIGH: _per_type(0.60, 0.75, 0.98, 0.40),
})

DESIGN_LIFE_SCORES = MappingProxyType({
    DesignLife.YEARS_10: _per_type(0.65, 0.50, 0.30, 0.95),
    DesignLife.YEARS_20: _per_type(0.95, 0.75, 0.60, 0.70),
    DesignLife.YEARS_30: _per_type(0.65, 0.95, 0.80, 0.50),
    DesignLife.YEARS_40: _per_type(0.50, 0.65, 0.98, 0.30),
})

SUBGRADE_CBR_SCORES = MappingProxyType({
    SubgradeCBR.BELOW_3: _per_type(0.40, 0.45, 0.35, 0.95),
    SubgradeCBR.FROM_3_TO_5: _per_type(0.70, 0.95, 0.60, 0.75),
    SubgradeCBR.FROM_6_TO_7: _per_type(0.95, 0.80, 0.70, 0.65),
    SubgradeCBR.AT_LEAST_8: _per_type(0.70, 0.80, 0.95, 0.60),
})

SLAB_THICKNESS_SCORES = MappingProxyType({
    SlabThickness.MM_150: _per_type(0.50, 0.40, 0.30, 0.95),
    SlabThickness.MM_200: _per_type(0.95, 0.75, 0.60, 0.75),
    SlabThickness.MM_250: _per_type(0.75, 0.95, 0.80, 0.60),
    SlabThickness.MM_300: _per_type(0.65, 0.80, 0.95, 0.50),
})

# Derived factor scorers: base score and multipliers applied per condition
ENVIRONMENT_BASE = _per_type(0.85, 0.75, 0.70, 0.80)
MARINE_MULTIPLIERS = _per_type(0.95, 0.75, 0.55, 0.90)

CONSTRUCTION_BASE = _per_type(0.80, 0.75, 0.70, 0.85)
UTILITY_LINES_MULTIPLIERS = _per_type(0.90, 0.85, 0.55, 0.95)
MANUAL_CONSTRUCTION_MULTIPLIERS = _per_type(0.95, 0.75, 0.55, 1.15)
WIDE_CARRIAGEWAY_MULTIPLIERS = _per_type(0.90, 0.85, 0.95, 0.75)
INITIAL_COST_MULTIPLIERS = MappingProxyType({
    CostLevel.LOW: _per_type(0.95, 0.80, 0.55, 0.75),
    CostLevel.HIGH: _per_type(0.85, 0.90, 1.20, 0.95),
})
CONSTRUCTION_TIME_MULTIPLIERS = MappingProxyType({
    ConstructionTime.LIMITED: _per_type(0.70, 0.65, 0.55, 1.35),
    ConstructionTime.FLEXIBLE: _per_type(0.90, 0.95, 1.15, 0.80),
})


# =============================================================================
# Standard Profiles
# =============================================================================


@dataclass(frozen=True)
class IRCReference:
    """Citation of a design-code clause, for display only."""
    code: str
    section: str
    page: str
    description: str


@dataclass(frozen=True)
class Range:
    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class TrafficRequirement:
    preferred: Optional[str] = None  # "highway" or "very high"
    min_cvpd: Optional[int] = None
    max_cvpd: Optional[int] = None
    summary: str = ""


@dataclass(frozen=True)
class DesignLifeRequirement:
    preferred: Optional[int] = None
    allowed: Optional[Range] = None
    rural: Optional[Range] = None
    expressway: Optional[Range] = None
    summary: str = ""


@dataclass(frozen=True)
class MinimumRequirement:
    """A structural minimum, either single or split by road class."""
    minimum: Optional[float] = None
    rural: Optional[float] = None
    expressway: Optional[float] = None
    no_reduction: bool = False
    summary: str = ""

    def applicable_minimum(self, rural_road: bool) -> Optional[float]:
        if self.minimum is not None:
            return self.minimum
        return self.rural if rural_road else self.expressway


@dataclass(frozen=True)
class LevelRequirement:
    """A maintenance or cost level, either single or split by road class."""
    level: Optional[str] = None
    rural: Optional[str] = None
    expressway: Optional[str] = None
    summary: str = ""


@dataclass(frozen=True)
class StandardProfile:
    """Per-type design standard record."""
    pavement_type: PavementType
    name: str
    full_name: str
    description: str
    suitable_for: str

    # Structural requirements
    traffic: TrafficRequirement
    design_life: DesignLifeRequirement
    subgrade_cbr: MinimumRequirement
    slab_thickness: MinimumRequirement

    # Secondary features, as credit per input option
    steel_matches: frozenset = frozenset()
    transverse_joint_match: Optional[TransverseJoints] = None
    longitudinal_joint_match: Optional[LongitudinalJoints] = None
    shoulder_credit: Mapping[Shoulders, float] = field(default_factory=dict)
    anti_friction_match: Optional[str] = None
    edge_support_important: bool = False
    edge_support_optional: bool = False
    terminal_slabs: Optional[YesNo] = None
    special_joints_as_designed: bool = True
    maintenance: LevelRequirement = LevelRequirement()
    initial_cost: LevelRequirement = LevelRequirement()
    lower_lifecycle_cost: bool = False
    not_for_light_traffic: bool = False

    # Site hazards: compatible or avoid, with the warning shown when avoided
    marine_compatible: bool = True
    utility_compatible: bool = True
    manual_compatible: bool = True
    hazard_warnings: Mapping[str, str] = field(default_factory=dict)

    # Descriptive text
    longitudinal_steel: str = ""
    transverse_joints: str = ""
    longitudinal_joints: str = ""
    shoulders: str = ""
    crack_spacing: Optional[str] = None
    max_crack_width: Optional[str] = None

    # Design generator data
    reinforcement: str = ""
    irc_reference: str = ""
    maintenance_interval: str = ""
    advantages: tuple[str, ...] = ()
    disadvantages: tuple[str, ...] = ()

    # Code references
    main_code: str = ""
    references: tuple[IRCReference, ...] = ()
    feature_refs: Mapping[str, Optional[str]] = field(default_factory=dict)

    @property
    def irc_reference_coverage(self) -> int:
        """Percentage of profile features backed by a code clause."""
        if not self.feature_refs:
            return 70
        cited = sum(1 for ref in self.feature_refs.values() if ref)
        return round(cited / len(self.feature_refs) * 100)


STANDARD_PROFILES: Mapping[PavementType, StandardProfile] = MappingProxyType({
    J: StandardProfile(
        pavement_type=J,
        name="Jointed Plain Concrete Pavement (JPCP)",
        full_name="Jointed Plain Concrete Pavement",
        description=(
            "A high-performance rigid pavement with transverse joints to control "
            "cracking without reinforcement. Suitable for highways and expressways "
            "with medium to high traffic."
        ),
        suitable_for="Highways, expressways, major roads with moderate to high traffic",
        traffic=TrafficRequirement(preferred="highway", min_cvpd=450, summary=">=450 CVPD highways/expressways"),
        design_life=DesignLifeRequirement(preferred=20, allowed=Range(20, 20), summary="20 years"),
        subgrade_cbr=MinimumRequirement(minimum=6, summary=">=6%"),
        slab_thickness=MinimumRequirement(minimum=200, summary=">=200 mm"),
        steel_matches=frozenset({SteelReinforcement.NONE, SteelReinforcement.AT_JOINTS}),
        transverse_joint_match=TransverseJoints.REGULAR,
        longitudinal_joint_match=LongitudinalJoints.WIDTH_7,
        shoulder_credit={Shoulders.TIED_CONCRETE: 0.8, Shoulders.TIED_OTHER: 0.8, Shoulders.NOT_TIED: 0.5},
        anti_friction_match="Provided",
        edge_support_optional=True,
        terminal_slabs=YesNo.NO,
        maintenance=LevelRequirement(level="Low", summary="Low"),
        initial_cost=LevelRequirement(level="High", summary="High"),
        longitudinal_steel="None (except at joints)",
        transverse_joints="At regular intervals",
        longitudinal_joints="If width >7 m",
        shoulders="May be tied to slab",
        reinforcement="None (except dowels at joints)",
        irc_reference="IRC:58-2015, Section 7.2, Page 32-34",
        maintenance_interval="6-8 years (joint resealing)",
        advantages=(
            "Lower initial cost compared to CRCP",
            "Well-established construction practices",
            "Easier to repair specific slabs",
        ),
        disadvantages=(
            "Regular joint maintenance required",
            "More joints than JRCP",
            "Potential for pumping at joints under heavy traffic",
        ),
        main_code="IRC:58-2015",
        references=(
            IRCReference("IRC:58-2015", "2.1", "2", "Traffic volume requirements"),
            IRCReference("IRC:58-2015", "Table 4", "13", "Subgrade CBR requirements"),
            IRCReference("IRC:58-2015", "6.3.2", "26", "Slab thickness specifications"),
            IRCReference("IRC:58-2015", "8.5", "36", "Longitudinal joint requirements"),
        ),
        feature_refs={
            "trafficVolume": "IRC:58-2015 2.1/p.2",
            "designLife": "IRC:58-2015 2.1/p.2",
            "subgradeCBR": "IRC:58-2015 Table 4/p.13",
            "slabThickness": "IRC:58-2015 6.3.2/p.26",
            "longitudinalSteel": "IRC:58-2015 7.1/p.31",
            "transverseJoints": "IRC:58-2015 2.1/p.2",
            "longitudinalJoints": "IRC:58-2015 8.5/p.36",
            "shoulders": "IRC:58-2015 9.1/p.38",
            "antiFrictionLayer": "IRC:58-2015 6.1/p.25",
            "edgeSupport": "IRC:58-2015 9.1/p.38",
            "terminalSlabs": None,
            "specialJoints": "IRC:58-2015 8.6/p.36",
            "surfaceTexture": "IRC:58-2015 8.9/p.36",
            "maintenance": "IRC:58-2015 11/p.44",
            "initialCost": "IRC:58-2015 1.2/p.1",
            "crackSpacing": None,
            "maxCrackWidth": None,
            "notForLightTraffic": None,
            "marineEnvironment": "IRC:58-2015 5.4/p.21",
            "utilityLines": "IRC:58-2015 13/p.46",
            "manualConstruction": None,
            "environmentSuitability": None,
        },
    ),
    R: StandardProfile(
        pavement_type=R,
        name="Jointed Reinforced Concrete Pavement (JRCP)",
        full_name="Jointed Reinforced Concrete Pavement",
        description=(
            "Concrete pavement with steel reinforcement and transverse joints at "
            "longer intervals. The reinforcement holds cracks tightly together."
        ),
        suitable_for="Highways, expressways, major roads with high traffic volume",
        traffic=TrafficRequirement(preferred="highway", min_cvpd=450, summary=">=450 CVPD highways/expressways"),
        design_life=DesignLifeRequirement(preferred=20, allowed=Range(20, 20), summary="20 years"),
        subgrade_cbr=MinimumRequirement(minimum=6, summary=">=6%"),
        slab_thickness=MinimumRequirement(minimum=200, summary=">=200 mm"),
        steel_matches=frozenset({SteelReinforcement.AT_JOINTS}),
        transverse_joint_match=TransverseJoints.LONGER,
        longitudinal_joint_match=LongitudinalJoints.WIDTH_7,
        shoulder_credit={Shoulders.TIED_CONCRETE: 0.8, Shoulders.TIED_OTHER: 0.8, Shoulders.NOT_TIED: 0.5},
        anti_friction_match="Provided",
        edge_support_optional=True,
        terminal_slabs=YesNo.NO,
        maintenance=LevelRequirement(level="Low", summary="Low"),
        initial_cost=LevelRequirement(level="High", summary="High"),
        longitudinal_steel="At joints and along slab length",
        transverse_joints="At longer intervals than JPCP",
        longitudinal_joints="If width >7 m",
        shoulders="May be tied to slab",
        reinforcement="0.15-0.25% of cross-sectional area",
        irc_reference="IRC:58-2015, Section 9.5, Page 48-50",
        maintenance_interval="8-10 years (joint resealing)",
        advantages=(
            "Fewer joints than JPCP",
            "Better load transfer across cracks",
            "Less susceptible to pumping",
        ),
        disadvantages=(
            "Higher initial cost than JPCP",
            "More complex construction",
            "Reinforcement may corrode in marine environments",
        ),
        main_code="IRC:58-2015",
        references=(
            IRCReference("IRC:58-2015", "2.1", "2", "Traffic volume and design life"),
            IRCReference("IRC:58-2015", "7.2", "32", "Longitudinal steel requirements"),
            IRCReference("IRC:58-2015", "8.2", "33", "Transverse joint specifications"),
        ),
        feature_refs={
            "trafficVolume": "IRC:58-2015 2.1/p.2",
            "designLife": "IRC:58-2015 2.1/p.2",
            "subgradeCBR": "IRC:58-2015 Table 4/p.13",
            "slabThickness": "IRC:58-2015 6.3.2/p.26",
            "longitudinalSteel": "IRC:58-2015 7.2/p.32",
            "transverseJoints": "IRC:58-2015 2.1/p.2",
            "longitudinalJoints": "IRC:58-2015 8.5/p.36",
            "shoulders": "IRC:58-2015 9.1/p.38",
            "antiFrictionLayer": "IRC:58-2015 6.1/p.25",
            "edgeSupport": "IRC:58-2015 9.1/p.38",
            "terminalSlabs": None,
            "specialJoints": "IRC:58-2015 8.6/p.36",
            "surfaceTexture": "IRC:58-2015 8.9/p.36",
            "maintenance": "IRC:58-2015 11/p.44",
            "initialCost": "IRC:58-2015 1.2/p.1",
            "crackSpacing": None,
            "maxCrackWidth": None,
            "notForLightTraffic": None,
            "marineEnvironment": "IRC:58-2015 5.4/p.21",
            "utilityLines": "IRC:58-2015 13/p.46",
            "manualConstruction": None,
            "environmentSuitability": None,
        },
    ),
    C: StandardProfile(
        pavement_type=C,
        name="Continuously Reinforced Concrete Pavement (CRCP)",
        full_name="Continuously Reinforced Concrete Pavement",
        description=(
            "High-performance pavement with continuous longitudinal reinforcement "
            "and no transverse joints except at structures. Provides superior "
            "long-term performance for high-traffic roads."
        ),
        suitable_for="Heavy-duty expressways, high-volume commercial corridors, ports",
        traffic=TrafficRequirement(preferred="very high", summary="Very high volume of commercial traffic"),
        design_life=DesignLifeRequirement(preferred=35, allowed=Range(30, 40), summary="30-40 years"),
        subgrade_cbr=MinimumRequirement(minimum=6, summary="High strength recommended, >=6%"),
        slab_thickness=MinimumRequirement(
            minimum=250, no_reduction=True, summary="No reduction in thickness is desirable"
        ),
        steel_matches=frozenset({SteelReinforcement.LONGITUDINAL}),
        transverse_joint_match=TransverseJoints.NONE,
        longitudinal_joint_match=LongitudinalJoints.WIDTH_4_5,
        shoulder_credit={Shoulders.TIED_CONCRETE: 1.0, Shoulders.TIED_OTHER: 0.8},
        anti_friction_match="NotProvided",
        edge_support_important=True,
        terminal_slabs=YesNo.YES,
        special_joints_as_designed=False,
        maintenance=LevelRequirement(level="Minimal", summary="Minimal (no joint seals except longitudinal)"),
        initial_cost=LevelRequirement(level="High", summary="Higher (but lower life cycle cost)"),
        lower_lifecycle_cost=True,
        not_for_light_traffic=True,
        marine_compatible=False,
        utility_compatible=False,
        manual_compatible=False,
        hazard_warnings={
            "marineEnvironment": (
                "WARNING: IRC:118-2015 3.2(i)/p.5 states CRCP should be avoided in marine/corrosive "
                "environments unless epoxy/galvanized steel is used."
            ),
            "utilityLines": (
                "WARNING: IRC:118-2015 3.2(ii)/p.5 states CRCP should be avoided in areas with many "
                "utility lines under the pavement."
            ),
            "manualConstruction": (
                "WARNING: IRC:118-2015 3.2(iv)/p.5 states CRCP should be avoided for manual "
                "construction projects."
            ),
        },
        longitudinal_steel="0.65-0.80% of area",
        transverse_joints="None",
        longitudinal_joints="If width >4.5 m",
        shoulders="Concrete shoulders recommended, tied, no longitudinal joint",
        crack_spacing="0.5-2.0 m",
        max_crack_width="<=1 mm (good), <=0.6 mm (effective for water)",
        reinforcement="0.65-0.80% of cross-sectional area",
        irc_reference="IRC:118-2015, Section 4.3, Page 18-22",
        maintenance_interval="12-15 years (minimal maintenance)",
        advantages=(
            "No transverse joints (smoother ride)",
            "Longer service life",
            "Lower maintenance costs over lifetime",
            "Superior performance in heavy traffic",
        ),
        disadvantages=(
            "Highest initial cost",
            "Most complex construction",
            "Specialized equipment and skilled labor required",
            "Potential for steel corrosion",
        ),
        main_code="IRC:118-2015",
        references=(
            IRCReference("IRC:118-2015", "1", "1", "Traffic volume requirements"),
            IRCReference("IRC:118-2015", "2.2(i)", "3", "Crack spacing and width"),
            IRCReference("IRC:118-2015", "2.2(vii)", "4", "Longitudinal steel percentage"),
            IRCReference("IRC:118-2015", "3.1", "5", "Design life specifications"),
            IRCReference("IRC:118-2015", "3.2", "5", "Environmental restrictions"),
        ),
        feature_refs={
            "trafficVolume": "IRC:118-2015 1/p.1",
            "designLife": "IRC:118-2015 3.1/p.5",
            "subgradeCBR": "IRC:118-2015 6.3/p.10",
            "slabThickness": "IRC:118-2015 6.3/p.10",
            "longitudinalSteel": "IRC:118-2015 2.2(vii)/p.4",
            "crackSpacing": "IRC:118-2015 2.2(i)/p.3",
            "maxCrackWidth": "IRC:118-2015 2.2(i)/p.3",
            "transverseJoints": "IRC:118-2015 1/p.1",
            "longitudinalJoints": "IRC:118-2015 2.2(ii)/p.3",
            "shoulders": "IRC:118-2015 2.2(vii)/p.4",
            "antiFrictionLayer": "IRC:118-2015 2.2(iv)/p.3",
            "edgeSupport": "IRC:118-2015 2.2(vii)/p.4",
            "terminalSlabs": "IRC:118-2015 2.2(vi)/p.4",
            "specialJoints": "IRC:118-2015 2.2(v)/p.4",
            "surfaceTexture": "IRC:118-2015 2.2(viii)/p.4",
            "maintenance": "IRC:118-2015 3.1/p.4",
            "initialCost": "IRC:118-2015 3.1/p.5",
            "notForLightTraffic": "IRC:118-2015 3.2(iii)/p.5",
            "marineEnvironment": "IRC:118-2015 3.2(i)/p.5",
            "utilityLines": "IRC:118-2015 3.2(ii)/p.5",
            "manualConstruction": "IRC:118-2015 3.2(iv)/p.5",
            "environmentSuitability": None,
        },
    ),
    P: StandardProfile(
        pavement_type=P,
        name="Precast Concrete Pavement (PCP)",
        full_name="Precast Concrete Pavement",
        description=(
            "Factory-produced concrete panels installed on-site. Ideal for rapid "
            "construction, repairs, and areas with limited construction windows."
        ),
        suitable_for="Rural roads, urban streets with moderate traffic",
        traffic=TrafficRequirement(max_cvpd=450, summary="<450 CVPD (rural), high volume (expwy)"),
        design_life=DesignLifeRequirement(
            rural=Range(10, 20), expressway=Range(20, 30),
            summary="10-20 years (rural), 20-30 years (expwy)",
        ),
        subgrade_cbr=MinimumRequirement(rural=3, expressway=5, summary=">=3% (rural), >=5% (expwy)"),
        slab_thickness=MinimumRequirement(rural=150, expressway=200, summary=">=150 mm (rural), >=200 mm (expwy)"),
        edge_support_important=True,
        maintenance=LevelRequirement(rural="Moderate", expressway="Low", summary="Moderate (rural), Low (expwy)"),
        initial_cost=LevelRequirement(rural="Moderate", expressway="High", summary="Moderate (rural), High (expwy)"),
        longitudinal_steel="Not applicable",
        transverse_joints="As per design",
        longitudinal_joints="As needed",
        shoulders="Recommended for expressways",
        reinforcement="As per design requirements",
        irc_reference="IRC:SP:62-2014, Section 5.3, Page 25-28",
        maintenance_interval="8-12 years (joint maintenance)",
        advantages=(
            "Rapid construction/installation",
            "Factory quality control",
            "Reduced traffic disruption",
            "Suitable for repair/rehabilitation",
        ),
        disadvantages=(
            "Higher initial cost than JPCP",
            "More joints",
            "Specialized transportation needed",
            "Limited panel size options",
        ),
        main_code="IRC:SP:62-2014, IRC:SP:140-2024",
        references=(
            IRCReference("IRC:SP:62-2014", "2.1", "5", "Traffic volume for rural roads"),
            IRCReference("IRC:SP:62-2014", "5.3", "12", "Subgrade CBR requirements"),
            IRCReference("IRC:SP:62-2014", "7.1", "15", "Slab thickness specifications"),
            IRCReference("IRC:SP:140-2024", "4.1", "", "Design life for expressways"),
        ),
        feature_refs={
            "trafficVolume": "IRC:SP:62-2014 2.1/p.5, IRC:SP:140-2024 3.1",
            "designLife": "IRC:SP:62-2014 3.1/p.8, IRC:SP:140-2024 4.1",
            "subgradeCBR": "IRC:SP:62-2014 5.3/p.12, IRC:SP:140-2024 6.2",
            "slabThickness": "IRC:SP:62-2014 7.1/p.15, IRC:SP:140-2024 8.1",
            "longitudinalSteel": "IRC:SP:62-2014 7.3/p.17",
            "transverseJoints": "IRC:SP:62-2014 8.1/p.18",
            "surfaceTexture": "IRC:SP:62-2014 8.4/p.20",
            "maintenance": "IRC:SP:62-2014 11/p.24",
            "initialCost": "IRC:SP:62-2014 12/p.24",
            "crackSpacing": None,
            "maxCrackWidth": None,
            "longitudinalJoints": "IRC:SP:62-2014 8.3/p.19",
            "shoulders": "IRC:SP:62-2014 9.1/p.21",
            "antiFrictionLayer": "IRC:SP:62-2014 6.2/p.14",
            "edgeSupport": "IRC:SP:140-2024 9.1",
            "terminalSlabs": "IRC:SP:140-2024 8.6",
            "specialJoints": "IRC:SP:62-2014 8.5/p.19",
            "notForLightTraffic": None,
            "marineEnvironment": "IRC:SP:62-2014 5.4/p.13",
            "utilityLines": "IRC:SP:62-2014 13/p.25",
            "manualConstruction": "IRC:SP:62-2014 10/p.22",
            "environmentSuitability": None,
        },
    ),
})


def get_profile(pavement_type: PavementType) -> StandardProfile:
    return STANDARD_PROFILES[pavement_type]


# =============================================================================
# Compatibility Model Weights
# =============================================================================

# Relative weights of each input field; normalised by the weight actually applied
FEATURE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "traffic_volume": 15,
    "design_life": 12,
    "subgrade_cbr": 10,
    "slab_thickness": 10,
    "steel_reinforcement": 8,
    "transverse_joints": 8,
    "longitudinal_joints": 8,
    "shoulders": 6,
    "anti_friction_layer": 5,
    "edge_support": 7,
    "terminal_slabs": 5,
    "special_joints": 5,
    "surface_texture": 4,
    "maintenance": 7,
    "initial_cost": 9,
    "not_for_light_traffic": 8,
    "marine_environment": 9,
    "utility_lines": 8,
    "manual_construction": 8,
})

MAINTENANCE_ORDER = tuple(level.value for level in MaintenanceLevel)
COST_ORDER = tuple(level.value for level in CostLevel)


# =============================================================================
# Design Generator Tables
# =============================================================================

BASE_THICKNESS_MM = MappingProxyType({
    J: {TrafficVolume.LOW: 180, TrafficVolume.MEDIUM: 220, TrafficVolume.HIGH: 250, TrafficVolume.VERY_HIGH: 280},
    R: {TrafficVolume.LOW: 180, TrafficVolume.MEDIUM: 220, TrafficVolume.HIGH: 240, TrafficVolume.VERY_HIGH: 260},
    C: {TrafficVolume.LOW: 180, TrafficVolume.MEDIUM: 200, TrafficVolume.HIGH: 230, TrafficVolume.VERY_HIGH: 250},
    P: {TrafficVolume.LOW: 150, TrafficVolume.MEDIUM: 180, TrafficVolume.HIGH: 200, TrafficVolume.VERY_HIGH: 220},
})

# Joint spacing cap in metres for jointed types
JOINT_SPACING_CAP_M = MappingProxyType({J: 4.5, R: 9.0})

CRCP_JOINT_SPACING = "None required (except at structures)"
PCP_JOINT_SPACING = "Panel length (typically 3-5m)"

BASE_DESIGN_LIFE_YEARS = MappingProxyType({J: 20, R: 25, C: 30, P: 15})


@dataclass(frozen=True)
class LifecycleCostBase:
    """Base costs in lakh INR per km of 7 m wide pavement."""
    initial: float
    annual_maintenance: float
    major_repair: float
    major_repair_interval: int = 8


LIFECYCLE_COST_BASE = MappingProxyType({
    J: LifecycleCostBase(initial=125, annual_maintenance=0.5, major_repair=12),
    R: LifecycleCostBase(initial=135, annual_maintenance=0.6, major_repair=15),
    C: LifecycleCostBase(initial=145, annual_maintenance=0.3, major_repair=8, major_repair_interval=12),
    P: LifecycleCostBase(initial=110, annual_maintenance=0.8, major_repair=18),
})

LIFECYCLE_TRAFFIC_MULTIPLIERS = MappingProxyType({
    TrafficVolume.LOW: 0.85,
    TrafficVolume.MEDIUM: 1.0,
    TrafficVolume.HIGH: 1.15,
    TrafficVolume.VERY_HIGH: 1.25,
})
MARINE_COST_MULTIPLIER = 1.15
