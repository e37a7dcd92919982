"""
Muscle domain components.

This module contains the reference host model the metabolic probe reads from.
"""

from .muscle import Muscle, MuscleMechanicalState, MusculoskeletalModel

__all__ = ["Muscle", "MuscleMechanicalState", "MusculoskeletalModel"]
