"""
Core components for the simulator package.

This module contains the core classes and functions that are used across
the simulator package, organized to eliminate circular dependencies.
"""

from .curves import PiecewiseLinearFunction
from .muscle import Muscle, MuscleMechanicalState, MusculoskeletalModel
from .metabolics import Bhargava2004MetabolicsProbe

__all__ = [
    "PiecewiseLinearFunction",
    "Muscle",
    "MuscleMechanicalState",
    "MusculoskeletalModel",
    "Bhargava2004MetabolicsProbe",
]
