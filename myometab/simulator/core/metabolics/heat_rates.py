r"""
Heat and work rate equations of Bhargava et al. (2004) [1]_.

Total metabolic power is the sum of the basal heat rate and, for every muscle, the
activation heat rate, the maintenance heat rate, the shortening heat rate and the
mechanical work rate:

.. math:: \dot{E} = \dot{B} + \sum_{muscles} (\dot{A} + \dot{M} + \dot{S} + \dot{W})

All functions are pure and accept either floats or numpy arrays (element-wise).

.. note::
    Fiber velocity sign convention. The published probe documentation states that a
    positive :math:`v_{CE}` is lengthening, yet labels the :math:`v_{CE} \geq 0` branch
    of the shortening heat and work rate formulas as concentric/isometric. The two
    statements contradict each other. The formulas are implemented exactly as
    documented: :math:`v_{CE} \geq 0` selects the concentric/isometric constants and
    :math:`v_{CE} < 0` the eccentric ones.

References
----------
.. [1] Bhargava, L.J., Pandy, M.G., Anderson, F.C., 2004.
       A phenomenological model for estimating metabolic energy consumption in muscle contraction.
       Journal of Biomechanics 37, 81–88. https://doi.org/10.1016/S0021-9290(03)00239-2
"""

from typing import NamedTuple

import numpy as np

from myometab.simulator.core.curves import PiecewiseLinearFunction
from myometab.simulator.core.metabolics.configuration import MetabolicsProbeConfiguration
from myometab.simulator.core.metabolics.parameters import ResolvedMetabolicMuscle
from myometab.simulator.core.muscle.muscle import MuscleMechanicalState
from myometab.utils.types import SCALAR_OR_ARRAY, beartowertype


class MuscleHeatRates(NamedTuple):
    """Per-muscle heat and work rates in W (the work rate in W/kg if normalized)."""

    activation: float
    maintenance: float
    shortening: float
    mechanical_work: float

    @property
    def total(self) -> float:
        return self.activation + self.maintenance + self.shortening + self.mechanical_work


def _as_output(value, *inputs) -> SCALAR_OR_ARRAY:
    if all(np.ndim(x) == 0 for x in inputs):
        return float(value)
    return np.asarray(value, dtype=float)


def _fiber_type_recruitment(
    excitation: SCALAR_OR_ARRAY, ratio_slow_twitch_fibers: float
) -> tuple[SCALAR_OR_ARRAY, SCALAR_OR_ARRAY]:
    """Slow and fast twitch weights: r sin(pi/2 u) and (1 - r)(1 - cos(pi/2 u))."""
    slow = ratio_slow_twitch_fibers * np.sin(np.pi / 2 * excitation)
    fast = (1 - ratio_slow_twitch_fibers) * (1 - np.cos(np.pi / 2 * excitation))
    return slow, fast


@beartowertype
def compute_activation_heat_rate(
    excitation: SCALAR_OR_ARRAY,
    muscle_mass__kg: float,
    ratio_slow_twitch_fibers: float,
    activation_constant_slow_twitch: float,
    activation_constant_fast_twitch: float,
) -> SCALAR_OR_ARRAY:
    r"""
    Activation heat rate.

    .. math::
        \dot{A} = m \left[ \dot{A}_{slow} \, r \sin\left(\frac{\pi}{2} u\right)
        + \dot{A}_{fast} \, (1 - r) \left(1 - \cos\left(\frac{\pi}{2} u\right)\right) \right]

    Parameters
    ----------
    excitation : float | np.ndarray
        Muscle excitation :math:`u`.
    muscle_mass__kg : float
        Muscle mass :math:`m` in kg.
    ratio_slow_twitch_fibers : float
        Ratio of slow twitch fibers :math:`r`.
    activation_constant_slow_twitch : float
        :math:`\dot{A}_{slow}` in W/kg.
    activation_constant_fast_twitch : float
        :math:`\dot{A}_{fast}` in W/kg.

    Returns
    -------
    float | np.ndarray
        Activation heat rate in W.
    """
    slow, fast = _fiber_type_recruitment(excitation, ratio_slow_twitch_fibers)
    rate = muscle_mass__kg * (
        activation_constant_slow_twitch * slow + activation_constant_fast_twitch * fast
    )
    return _as_output(rate, excitation)


@beartowertype
def compute_maintenance_heat_rate(
    excitation: SCALAR_OR_ARRAY,
    normalized_fiber_length: SCALAR_OR_ARRAY,
    muscle_mass__kg: float,
    ratio_slow_twitch_fibers: float,
    maintenance_constant_slow_twitch: float,
    maintenance_constant_fast_twitch: float,
    length_dependence: PiecewiseLinearFunction,
) -> SCALAR_OR_ARRAY:
    r"""
    Maintenance heat rate.

    .. math::
        \dot{M} = m \, f(\tilde{l}) \left[ \dot{M}_{slow} \, r \sin\left(\frac{\pi}{2} u\right)
        + \dot{M}_{fast} \, (1 - r) \left(1 - \cos\left(\frac{\pi}{2} u\right)\right) \right]

    where :math:`f` is the normalized fiber length dependence curve.

    Returns
    -------
    float | np.ndarray
        Maintenance heat rate in W.
    """
    slow, fast = _fiber_type_recruitment(excitation, ratio_slow_twitch_fibers)
    f = length_dependence.evaluate(normalized_fiber_length)
    rate = (
        muscle_mass__kg
        * f
        * (maintenance_constant_slow_twitch * slow + maintenance_constant_fast_twitch * fast)
    )
    return _as_output(rate, excitation, normalized_fiber_length)


@beartowertype
def compute_shortening_heat_rate(
    fiber_velocity: SCALAR_OR_ARRAY,
    active_fiber_force: SCALAR_OR_ARRAY,
    isometric_fiber_force: SCALAR_OR_ARRAY,
    use_force_dependent_shortening_prop_constant: bool = False,
) -> SCALAR_OR_ARRAY:
    r"""
    Shortening heat rate :math:`\dot{S} = -\alpha v_{CE}`.

    With a force dependent proportionality constant:

        - :math:`\alpha = 0.16 F_{CE,iso} + 0.18 F_{CE}` for :math:`v_{CE} \geq 0`
        - :math:`\alpha = 0.157 F_{CE}` for :math:`v_{CE} < 0`

    Otherwise :math:`\alpha = 0.25` for :math:`v_{CE} \geq 0` and :math:`0` for
    :math:`v_{CE} < 0`.

    Returns
    -------
    float | np.ndarray
        Shortening heat rate in W.
    """
    concentric = np.greater_equal(fiber_velocity, 0)

    if use_force_dependent_shortening_prop_constant:
        alpha = np.where(
            concentric,
            0.16 * np.asarray(isometric_fiber_force) + 0.18 * np.asarray(active_fiber_force),
            0.157 * np.asarray(active_fiber_force),
        )
    else:
        alpha = np.where(concentric, 0.25, 0.0)

    rate = -alpha * fiber_velocity
    return _as_output(rate, fiber_velocity, active_fiber_force, isometric_fiber_force)


@beartowertype
def compute_mechanical_work_rate(
    fiber_velocity: SCALAR_OR_ARRAY,
    active_fiber_force: SCALAR_OR_ARRAY,
    muscle_mass__kg: float | None = None,
) -> SCALAR_OR_ARRAY:
    r"""
    Mechanical work rate.

    :math:`\dot{W} = -F_{CE} v_{CE}` for :math:`v_{CE} \geq 0` and :math:`0` otherwise.

    Parameters
    ----------
    fiber_velocity : float | np.ndarray
        Contractile element velocity :math:`v_{CE}`.
    active_fiber_force : float | np.ndarray
        Contractile element force :math:`F_{CE}`.
    muscle_mass__kg : float, optional
        If given, the work rate is divided by this mass (W/kg).

    Returns
    -------
    float | np.ndarray
        Mechanical work rate in W, or W/kg if normalized.
    """
    rate = np.where(
        np.greater_equal(fiber_velocity, 0),
        -np.asarray(active_fiber_force) * fiber_velocity,
        0.0,
    )
    if muscle_mass__kg is not None:
        rate = rate / muscle_mass__kg
    return _as_output(rate, fiber_velocity, active_fiber_force)


@beartowertype
def compute_basal_heat_rate(
    body_mass__kg: float, basal_coefficient: float = 1.51, basal_exponent: float = 1.0
) -> float:
    r"""
    Basal heat rate :math:`\dot{B} = c \, m_{body}^{e}` of the whole body, in W.
    """
    return float(basal_coefficient * body_mass__kg**basal_exponent)


@beartowertype
def compute_muscle_heat_rates(
    resolved: ResolvedMetabolicMuscle,
    state: MuscleMechanicalState,
    configuration: MetabolicsProbeConfiguration,
) -> MuscleHeatRates:
    """
    Evaluate the enabled per-muscle terms for one muscle. Disabled terms are 0.

    Parameters
    ----------
    resolved : ResolvedMetabolicMuscle
        Validated metabolic parameters of the muscle.
    state : MuscleMechanicalState
        Current mechanical state of the muscle.
    configuration : MetabolicsProbeConfiguration
        Probe settings.

    Returns
    -------
    MuscleHeatRates
        The four per-muscle rates.
    """
    m = resolved.muscle_mass__kg

    activation = 0.0
    if configuration.activation_rate_on:
        activation = compute_activation_heat_rate(
            state.excitation,
            m,
            resolved.ratio_slow_twitch_fibers,
            resolved.activation_constant_slow_twitch,
            resolved.activation_constant_fast_twitch,
        )

    maintenance = 0.0
    if configuration.maintenance_rate_on:
        maintenance = compute_maintenance_heat_rate(
            state.excitation,
            state.normalized_fiber_length,
            m,
            resolved.ratio_slow_twitch_fibers,
            resolved.maintenance_constant_slow_twitch,
            resolved.maintenance_constant_fast_twitch,
            configuration.normalized_fiber_length_dependence_on_maintenance_rate,
        )

    shortening = 0.0
    if configuration.shortening_rate_on:
        shortening = compute_shortening_heat_rate(
            state.fiber_velocity,
            state.active_fiber_force,
            state.isometric_fiber_force,
            configuration.use_force_dependent_shortening_prop_constant,
        )

    mechanical_work = 0.0
    if configuration.mechanical_work_rate_on:
        mechanical_work = compute_mechanical_work_rate(
            state.fiber_velocity,
            state.active_fiber_force,
            m if configuration.normalize_mechanical_work_rate_by_muscle_mass else None,
        )

    return MuscleHeatRates(
        activation=float(activation),
        maintenance=float(maintenance),
        shortening=float(shortening),
        mechanical_work=float(mechanical_work),
    )
