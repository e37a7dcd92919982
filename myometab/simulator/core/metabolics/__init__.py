"""
Metabolic energy components.

This module contains the Bhargava et al. (2004) heat and work rate equations, the
per-muscle metabolic parameters and the probe summing them into metabolic power.
"""

from .configuration import MetabolicsProbeConfiguration
from .heat_rates import (
    MuscleHeatRates,
    compute_activation_heat_rate,
    compute_basal_heat_rate,
    compute_maintenance_heat_rate,
    compute_mechanical_work_rate,
    compute_muscle_heat_rates,
    compute_shortening_heat_rate,
)
from .parameters import (
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    ResolvedMetabolicMuscle,
)
from .probe import Bhargava2004MetabolicsProbe
from .trajectory import evaluate_trajectory

__all__ = [
    "MetabolicsProbeConfiguration",
    "MuscleHeatRates",
    "compute_activation_heat_rate",
    "compute_basal_heat_rate",
    "compute_maintenance_heat_rate",
    "compute_mechanical_work_rate",
    "compute_muscle_heat_rates",
    "compute_shortening_heat_rate",
    "MetabolicMuscleParameter",
    "MetabolicMuscleParameterSet",
    "ResolvedMetabolicMuscle",
    "Bhargava2004MetabolicsProbe",
    "evaluate_trajectory",
]
