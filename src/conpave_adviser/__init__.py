"""ConPave pavement type adviser.

Recommends a rigid pavement type (JPCP, JRCP, CRCP or PCP) from categorical
design parameters and derives design values per IRC standards.
"""

from .calibration import CalibrationWeights, apply_calibration
from .compatibility import CompatibilityModel
from .design import construction_guidelines, estimate_lifecycle_cost
from .engine import (
    AdviserEngine,
    derive_design_spec,
    predict_via_compatibility_model,
    run_monte_carlo_estimate,
    score_pavement_types,
)
from .exceptions import (
    AdviserError,
    CalibrationOutOfRangeError,
    ConfigurationError,
    InsufficientInputError,
    InvalidParameterValueError,
    SampleSizeError,
    SampleSizeLimitError,
    UnknownPavementTypeError,
    ZeroSampleSizeError,
)
from .explainer import describe_pavement_type, explain
from .schema import ConfidenceLevel, ParameterSet, PavementType

__version__ = "1.0.0"

__all__ = [
    "AdviserEngine",
    "AdviserError",
    "CalibrationOutOfRangeError",
    "CalibrationWeights",
    "CompatibilityModel",
    "ConfidenceLevel",
    "ConfigurationError",
    "InsufficientInputError",
    "InvalidParameterValueError",
    "ParameterSet",
    "PavementType",
    "SampleSizeError",
    "SampleSizeLimitError",
    "UnknownPavementTypeError",
    "ZeroSampleSizeError",
    "apply_calibration",
    "construction_guidelines",
    "derive_design_spec",
    "describe_pavement_type",
    "estimate_lifecycle_cost",
    "explain",
    "predict_via_compatibility_model",
    "run_monte_carlo_estimate",
    "score_pavement_types",
]
