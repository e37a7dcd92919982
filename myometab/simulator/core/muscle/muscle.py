import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from myometab.utils.types import MuscleHandle, beartowertype

logger = logging.getLogger(__name__)


@beartowertype
@dataclass(frozen=True)
class MuscleMechanicalState:
    """
    Mechanical state of one muscle at one instant, as supplied by the host simulation.

    Parameters
    ----------
    excitation : float
        Neural excitation :math:`u \\in [0, 1]`.
    activation : float
        Active state :math:`a \\in [0, 1]`.
    fiber_velocity : float
        Contractile element velocity :math:`v_{CE}` (m/s).
    active_fiber_force : float
        Force developed by the contractile element :math:`F_{CE}` (N).
    isometric_fiber_force : float
        Force the contractile element would develop isometrically at the current
        activation and fiber length :math:`F_{CE,iso}` (N).
    normalized_fiber_length : float
        Fiber length divided by the optimal fiber length.
    """

    excitation: float
    activation: float
    fiber_velocity: float
    active_fiber_force: float
    isometric_fiber_force: float
    normalized_fiber_length: float


@beartowertype
class Muscle:
    """
    Muscle description used by :class:`MusculoskeletalModel`.

    Parameters
    ----------
    name : str
        Unique name of the muscle in the model.
    max_isometric_force__N : float
        Maximum isometric force in N.
    optimal_fiber_length__m : float
        Optimal fiber length in m.
    specific_tension__Pa : float, default=0.25e6
        Specific tension of mammalian muscle in N/m².
    density__kg_m3 : float, default=1059.7
        Density of mammalian muscle in kg/m³.
    mass__kg : float, optional
        Muscle mass in kg. If not given, the mass is derived from the muscle
        architecture (see Notes).

    Notes
    -----
    Without an explicit mass, the physiological cross-sectional area
    :math:`F_{max} / \\sigma` times the optimal fiber length gives the muscle volume:

    .. math:: m = \\frac{F_{max}}{\\sigma} \\cdot \\rho \\cdot l_{opt}
    """

    def __init__(
        self,
        name: str,
        max_isometric_force__N: float,
        optimal_fiber_length__m: float,
        specific_tension__Pa: float = 0.25e6,
        density__kg_m3: float = 1059.7,
        mass__kg: float | None = None,
    ):
        self.name = name
        self.max_isometric_force__N = max_isometric_force__N
        self.optimal_fiber_length__m = optimal_fiber_length__m
        self.specific_tension__Pa = specific_tension__Pa
        self.density__kg_m3 = density__kg_m3
        self._mass__kg = mass__kg

    @property
    def mass__kg(self) -> float:
        if self._mass__kg is not None:
            return float(self._mass__kg)
        return float(
            self.max_isometric_force__N
            / self.specific_tension__Pa
            * self.density__kg_m3
            * self.optimal_fiber_length__m
        )

    def __repr__(self) -> str:
        return f"Muscle(name={self.name!r}, mass__kg={self.mass__kg:.4g})"


@beartowertype
class MusculoskeletalModel:
    """
    Minimal host model holding a muscle inventory and the whole-body mass.

    It serves both host interfaces of the metabolic probe: the muscle inventory
    (:meth:`find_muscle`) and the mechanical state provider
    (:meth:`get_mechanical_state`, :meth:`get_total_mass`). The per-step state is a
    mapping from muscle name to :class:`MuscleMechanicalState`.

    Parameters
    ----------
    muscles : Sequence[Muscle]
        Muscles of the model. Names must be unique.
    body_mass__kg : float
        Mass of the whole body in kg.

    Raises
    ------
    ValueError
        If two muscles share a name or the body mass is not positive.
    """

    def __init__(self, muscles: Sequence[Muscle], body_mass__kg: float):
        self._muscles: dict[str, Muscle] = {}
        for muscle in muscles:
            if muscle.name in self._muscles:
                raise ValueError(f"Duplicate muscle name: {muscle.name}")
            self._muscles[muscle.name] = muscle

        if not np.isfinite(body_mass__kg) or body_mass__kg <= 0:
            raise ValueError(f"body_mass__kg must be positive. Got {body_mass__kg}.")
        self.body_mass__kg = body_mass__kg

        logger.debug(
            "Created model with %d muscles and body mass %.3g kg",
            len(self._muscles),
            self.body_mass__kg,
        )

    @property
    def muscles(self) -> list[Muscle]:
        return list(self._muscles.values())

    def find_muscle(self, name: str) -> Muscle | None:
        return self._muscles.get(name)

    def get_mechanical_state(
        self, state: Mapping[str, MuscleMechanicalState], muscle: MuscleHandle
    ) -> MuscleMechanicalState:
        try:
            return state[muscle.name]
        except KeyError:
            raise KeyError(f"No mechanical state supplied for muscle {muscle.name!r}")

    def get_total_mass(self, state: Mapping[str, MuscleMechanicalState]) -> float:
        return float(self.body_mass__kg)
