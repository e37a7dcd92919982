"""
MyoMetab Simulator Module

This module provides the muscle metabolic energy model and the minimal host model
it is evaluated against.
"""

from myometab.simulator.core.curves import (
    PiecewiseLinearFunction,
    default_maintenance_length_dependence,
)
from myometab.simulator.core.muscle import (
    Muscle,
    MuscleMechanicalState,
    MusculoskeletalModel,
)
from myometab.simulator.core.metabolics import (
    Bhargava2004MetabolicsProbe,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MetabolicsProbeConfiguration,
    MuscleHeatRates,
    evaluate_trajectory,
)

__all__ = [
    "PiecewiseLinearFunction",
    "default_maintenance_length_dependence",
    "Muscle",
    "MuscleMechanicalState",
    "MusculoskeletalModel",
    "Bhargava2004MetabolicsProbe",
    "MetabolicMuscleParameter",
    "MetabolicMuscleParameterSet",
    "MetabolicsProbeConfiguration",
    "MuscleHeatRates",
    "evaluate_trajectory",
]
