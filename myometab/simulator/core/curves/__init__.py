"""
Curve components.

This module contains the curves used to modulate heat rates.
"""

from .piecewise_linear import PiecewiseLinearFunction, default_maintenance_length_dependence

__all__ = ["PiecewiseLinearFunction", "default_maintenance_length_dependence"]
