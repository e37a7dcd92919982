from dataclasses import dataclass, field

from myometab.simulator.core.curves import (
    PiecewiseLinearFunction,
    default_maintenance_length_dependence,
)
from myometab.utils.types import beartowertype


@beartowertype
@dataclass(frozen=True)
class MetabolicsProbeConfiguration:
    """
    Settings of a :class:`Bhargava2004MetabolicsProbe`, fixed once constructed.

    Parameters
    ----------
    activation_rate_on : bool, default=True
        Whether the activation heat rate is calculated.
    maintenance_rate_on : bool, default=True
        Whether the maintenance heat rate is calculated.
    shortening_rate_on : bool, default=True
        Whether the shortening heat rate is calculated.
    basal_rate_on : bool, default=True
        Whether the basal heat rate is calculated.
    mechanical_work_rate_on : bool, default=True
        Whether the mechanical work rate is calculated.
    use_force_dependent_shortening_prop_constant : bool, default=False
        Whether the shortening heat proportionality constant depends on fiber force.
    normalize_mechanical_work_rate_by_muscle_mass : bool, default=False
        Whether the mechanical work rate of each muscle is divided by its mass.
    basal_coefficient : float, default=1.51
        Basal metabolic coefficient in W/kg.
    basal_exponent : float, default=1.0
        Basal metabolic exponent.
    normalized_fiber_length_dependence_on_maintenance_rate : PiecewiseLinearFunction
        Normalized fiber length dependence of the maintenance heat rate. Defaults to
        :func:`default_maintenance_length_dependence`.
    report_individual_muscle_metabolics : bool, default=False
        Whether the probe reports the basal rate and each muscle's rate in addition
        to the total.
    """

    activation_rate_on: bool = True
    maintenance_rate_on: bool = True
    shortening_rate_on: bool = True
    basal_rate_on: bool = True
    mechanical_work_rate_on: bool = True
    use_force_dependent_shortening_prop_constant: bool = False
    normalize_mechanical_work_rate_by_muscle_mass: bool = False
    basal_coefficient: float = 1.51
    basal_exponent: float = 1.0
    normalized_fiber_length_dependence_on_maintenance_rate: PiecewiseLinearFunction = field(
        default_factory=default_maintenance_length_dependence
    )
    report_individual_muscle_metabolics: bool = False
