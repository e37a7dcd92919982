import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from myometab.utils.errors import ConfigurationError, ConfigurationErrorReason
from myometab.utils.types import MuscleHandle, MuscleInventory, beartowertype

logger = logging.getLogger(__name__)


@beartowertype
class MetabolicMuscleParameter:
    """
    Metabolic constants of one muscle for the Bhargava et al. (2004) [1]_ model.

    .. note::
        All default values are the constants published in [1]_.

    Parameters
    ----------
    muscle_name : str
        Name of the muscle in the host model this parameter refers to.
    ratio_slow_twitch_fibers : float, default=0.5
        Ratio of slow twitch fibers in the muscle. Must be in [0, 1].
    activation_constant_slow_twitch : float, default=40.0
        Activation heat rate constant for slow twitch fibers in W/kg.
    activation_constant_fast_twitch : float, default=133.0
        Activation heat rate constant for fast twitch fibers in W/kg.
    maintenance_constant_slow_twitch : float, default=74.0
        Maintenance heat rate constant for slow twitch fibers in W/kg.
    maintenance_constant_fast_twitch : float, default=111.0
        Maintenance heat rate constant for fast twitch fibers in W/kg.
    muscle_mass__kg : float, optional
        Muscle mass in kg. If None, the mass of the muscle in the host model is used
        (resolved once, in :meth:`validate`).

    References
    ----------
    .. [1] Bhargava, L.J., Pandy, M.G., Anderson, F.C., 2004.
           A phenomenological model for estimating metabolic energy consumption in muscle contraction.
           Journal of Biomechanics 37, 81–88. https://doi.org/10.1016/S0021-9290(03)00239-2
    """

    def __init__(
        self,
        muscle_name: str,
        ratio_slow_twitch_fibers: float = 0.5,
        activation_constant_slow_twitch: float = 40.0,
        activation_constant_fast_twitch: float = 133.0,
        maintenance_constant_slow_twitch: float = 74.0,
        maintenance_constant_fast_twitch: float = 111.0,
        muscle_mass__kg: float | None = None,
    ):
        self.muscle_name = muscle_name
        self.ratio_slow_twitch_fibers = ratio_slow_twitch_fibers
        self.activation_constant_slow_twitch = activation_constant_slow_twitch
        self.activation_constant_fast_twitch = activation_constant_fast_twitch
        self.maintenance_constant_slow_twitch = maintenance_constant_slow_twitch
        self.maintenance_constant_fast_twitch = maintenance_constant_fast_twitch
        self.muscle_mass__kg = muscle_mass__kg

    @property
    def uses_provided_muscle_mass(self) -> bool:
        return self.muscle_mass__kg is not None

    def validate(self, inventory: MuscleInventory) -> "ResolvedMetabolicMuscle":
        """
        Check this parameter against the muscles of the host model.

        Parameters
        ----------
        inventory : MuscleInventory
            Muscle inventory of the host model.

        Returns
        -------
        ResolvedMetabolicMuscle
            The parameter bound to its muscle, with the muscle mass resolved.

        Raises
        ------
        ConfigurationError
            ``UNKNOWN_MUSCLE`` if the muscle is not in the inventory,
            ``INVALID_RATIO`` if the slow twitch ratio is outside [0, 1] and
            ``INVALID_MASS`` if the resolved mass is not positive.
        """
        muscle = inventory.find_muscle(self.muscle_name)
        if muscle is None:
            raise ConfigurationError(
                ConfigurationErrorReason.UNKNOWN_MUSCLE,
                self.muscle_name,
                f"Muscle {self.muscle_name!r} was not found in the model.",
            )

        r = self.ratio_slow_twitch_fibers
        if not (np.isfinite(r) and 0.0 <= r <= 1.0):
            raise ConfigurationError(
                ConfigurationErrorReason.INVALID_RATIO,
                self.muscle_name,
                f"ratio_slow_twitch_fibers of {self.muscle_name!r} must be between 0 and 1. Got {r}.",
            )

        if self.muscle_mass__kg is not None:
            mass = float(self.muscle_mass__kg)
        else:
            mass = float(muscle.mass__kg)
            logger.debug("Resolved mass of %r from the model: %.4g kg", self.muscle_name, mass)

        if not (np.isfinite(mass) and mass > 0.0):
            raise ConfigurationError(
                ConfigurationErrorReason.INVALID_MASS,
                self.muscle_name,
                f"Mass of {self.muscle_name!r} must be positive. Got {mass}.",
            )

        return ResolvedMetabolicMuscle(
            muscle_name=self.muscle_name,
            muscle=muscle,
            muscle_mass__kg=mass,
            ratio_slow_twitch_fibers=float(r),
            activation_constant_slow_twitch=float(self.activation_constant_slow_twitch),
            activation_constant_fast_twitch=float(self.activation_constant_fast_twitch),
            maintenance_constant_slow_twitch=float(self.maintenance_constant_slow_twitch),
            maintenance_constant_fast_twitch=float(self.maintenance_constant_fast_twitch),
        )

    def __repr__(self) -> str:
        return (
            f"MetabolicMuscleParameter(muscle_name={self.muscle_name!r}, "
            f"ratio_slow_twitch_fibers={self.ratio_slow_twitch_fibers}, "
            f"muscle_mass__kg={self.muscle_mass__kg})"
        )


@dataclass(frozen=True)
class ResolvedMetabolicMuscle:
    """
    Validated metabolic constants of one muscle, bound to its muscle handle.

    The constants are copied at validation, so later changes to the
    :class:`MetabolicMuscleParameter` do not reach a validated probe.
    """

    muscle_name: str
    muscle: MuscleHandle
    muscle_mass__kg: float
    ratio_slow_twitch_fibers: float
    activation_constant_slow_twitch: float
    activation_constant_fast_twitch: float
    maintenance_constant_slow_twitch: float
    maintenance_constant_fast_twitch: float

    @property
    def name(self) -> str:
        return self.muscle_name


@beartowertype
class MetabolicMuscleParameterSet:
    """
    Ordered collection of :class:`MetabolicMuscleParameter`, at most one per muscle.

    Iteration follows insertion order, which is also the order of any per-muscle
    outputs of the probe.

    Parameters
    ----------
    parameters : Iterable[MetabolicMuscleParameter], optional
        Initial parameters.

    Raises
    ------
    ConfigurationError
        ``DUPLICATE_MUSCLE`` if two parameters refer to the same muscle.
    """

    def __init__(self, parameters: Iterable[MetabolicMuscleParameter] = ()):
        self._parameters: dict[str, MetabolicMuscleParameter] = {}
        for parameter in parameters:
            self.add(parameter)

    def add(self, parameter: MetabolicMuscleParameter) -> None:
        if parameter.muscle_name in self._parameters:
            raise ConfigurationError(
                ConfigurationErrorReason.DUPLICATE_MUSCLE,
                parameter.muscle_name,
                f"Metabolic parameters for {parameter.muscle_name!r} were given twice.",
            )
        self._parameters[parameter.muscle_name] = parameter

    @property
    def muscle_names(self) -> list[str]:
        return list(self._parameters)

    def __getitem__(self, muscle_name: str) -> MetabolicMuscleParameter:
        return self._parameters[muscle_name]

    def __contains__(self, muscle_name: object) -> bool:
        return muscle_name in self._parameters

    def __iter__(self) -> Iterator[MetabolicMuscleParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def validate(self, inventory: MuscleInventory) -> tuple[ResolvedMetabolicMuscle, ...]:
        """
        Validate every parameter, stopping at the first invalid one.

        Parameters
        ----------
        inventory : MuscleInventory
            Muscle inventory of the host model.

        Returns
        -------
        tuple[ResolvedMetabolicMuscle, ...]
            Resolved muscles in insertion order.

        Raises
        ------
        ConfigurationError
            See :meth:`MetabolicMuscleParameter.validate`.
        """
        resolved = tuple(parameter.validate(inventory) for parameter in self)
        logger.debug("Validated metabolic parameters of %d muscles", len(resolved))
        return resolved
