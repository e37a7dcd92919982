import logging
from typing import Any

import numpy as np

from myometab.simulator.core.metabolics.configuration import MetabolicsProbeConfiguration
from myometab.simulator.core.metabolics.heat_rates import (
    MuscleHeatRates,
    compute_basal_heat_rate,
    compute_muscle_heat_rates,
)
from myometab.simulator.core.metabolics.parameters import (
    MetabolicMuscleParameterSet,
    ResolvedMetabolicMuscle,
)
from myometab.utils.errors import NumericalError
from myometab.utils.types import (
    PROBE_OUTPUT__VECTOR,
    MechanicalStateProvider,
    MuscleInventory,
    beartowertype,
)

logger = logging.getLogger(__name__)


@beartowertype
class Bhargava2004MetabolicsProbe:
    r"""
    Net metabolic power of a set of muscles following Bhargava et al. (2004) [1]_.

    .. math:: \dot{E} = \dot{B} + \sum_{muscles} (\dot{A} + \dot{M} + \dot{S} + \dot{W})

    The probe is set up once with :meth:`validate` and then evaluated with
    :meth:`compute` for each state of the host model. Evaluation does not modify the
    probe, so one probe can be evaluated concurrently for independent states.

    Parameters
    ----------
    parameters : MetabolicMuscleParameterSet
        Metabolic parameters of every muscle to include.
    configuration : MetabolicsProbeConfiguration, optional
        Probe settings. Defaults to :class:`MetabolicsProbeConfiguration()`.
    name : str, default="metabolic_power"
        Name of the probe, used as the label of the reported total.

    References
    ----------
    .. [1] Bhargava, L.J., Pandy, M.G., Anderson, F.C., 2004.
           A phenomenological model for estimating metabolic energy consumption in muscle contraction.
           Journal of Biomechanics 37, 81–88. https://doi.org/10.1016/S0021-9290(03)00239-2

    Examples
    --------
    >>> from myometab.simulator import (
    ...     MetabolicMuscleParameter, MetabolicMuscleParameterSet, Muscle,
    ...     MuscleMechanicalState, MusculoskeletalModel,
    ... )
    >>> model = MusculoskeletalModel([Muscle("soleus", 3549.0, 0.05)], body_mass__kg=70.0)
    >>> probe = Bhargava2004MetabolicsProbe(
    ...     MetabolicMuscleParameterSet([MetabolicMuscleParameter("soleus", 0.8)])
    ... )
    >>> probe.validate(model)
    >>> state = MuscleMechanicalState(1.0, 1.0, 0.0, 3549.0, 3549.0, 1.0)
    >>> probe.compute(model, {"soleus": state})
    array([...])
    """

    def __init__(
        self,
        parameters: MetabolicMuscleParameterSet,
        configuration: MetabolicsProbeConfiguration | None = None,
        name: str = "metabolic_power",
    ):
        self.parameters = parameters
        self.configuration = (
            configuration if configuration is not None else MetabolicsProbeConfiguration()
        )
        self.name = name

        self._resolved_muscles: tuple[ResolvedMetabolicMuscle, ...] | None = None

    @property
    def is_validated(self) -> bool:
        return self._resolved_muscles is not None

    @property
    def resolved_muscles(self) -> tuple[ResolvedMetabolicMuscle, ...]:
        if self._resolved_muscles is None:
            raise ValueError("Probe must be validated first using validate()")
        return self._resolved_muscles

    def validate(self, inventory: MuscleInventory) -> None:
        """
        Bind the metabolic parameters to the muscles of the host model.

        Must be called once before :meth:`compute`. Nothing is kept if any parameter
        is invalid.

        Parameters
        ----------
        inventory : MuscleInventory
            Muscle inventory of the host model.

        Raises
        ------
        ConfigurationError
            If any metabolic parameter is invalid (see
            :meth:`MetabolicMuscleParameter.validate`).
        """
        self._resolved_muscles = None
        self._resolved_muscles = self.parameters.validate(inventory)

        logger.info(
            "Probe %r set up for %d muscles (total mass %.4g kg)",
            self.name,
            len(self._resolved_muscles),
            sum(r.muscle_mass__kg for r in self._resolved_muscles),
        )

    def _muscle_names(self) -> list[str]:
        # Fixed by validate(); the parameter set is only read before setup
        if self._resolved_muscles is not None:
            return [resolved.name for resolved in self._resolved_muscles]
        return self.parameters.muscle_names

    def output_count(self) -> int:
        """Number of values returned by :meth:`compute`."""
        if self.configuration.report_individual_muscle_metabolics:
            return 2 + len(self._muscle_names())
        return 1

    def output_labels(self) -> list[str]:
        """
        Labels of the values returned by :meth:`compute`.

        The first label is the probe name (total metabolic power). With
        ``report_individual_muscle_metabolics`` it is followed by ``<name>_BASAL`` and
        ``<name>_<muscle>`` for each muscle in parameter set order.
        """
        labels = [self.name]
        if self.configuration.report_individual_muscle_metabolics:
            labels.append(f"{self.name}_BASAL")
            labels.extend(f"{self.name}_{muscle_name}" for muscle_name in self._muscle_names())
        return labels

    def compute_basal_heat_rate(self, model: MechanicalStateProvider, state: Any) -> float:
        """Basal heat rate of the whole body in W, or 0 if disabled."""
        if not self.configuration.basal_rate_on:
            return 0.0

        body_mass__kg = model.get_total_mass(state)
        if not (np.isfinite(body_mass__kg) and body_mass__kg > 0):
            raise NumericalError(f"Body mass must be finite and positive. Got {body_mass__kg}.")

        basal = compute_basal_heat_rate(
            body_mass__kg,
            self.configuration.basal_coefficient,
            self.configuration.basal_exponent,
        )
        if not np.isfinite(basal):
            raise NumericalError(f"Basal heat rate is not finite ({basal}).")
        return basal

    def compute_muscle_heat_rates(
        self, model: MechanicalStateProvider, state: Any
    ) -> dict[str, MuscleHeatRates]:
        """
        Heat and work rates of every muscle.

        Parameters
        ----------
        model : MechanicalStateProvider
            Host model supplying the mechanical state of the muscles.
        state : Any
            Current state of the host model.

        Returns
        -------
        dict[str, MuscleHeatRates]
            Rates per muscle name, in parameter set order.

        Raises
        ------
        ValueError
            If the probe has not been validated.
        NumericalError
            If any rate is not finite.
        """
        rates = {}
        for resolved in self.resolved_muscles:
            muscle_rates = compute_muscle_heat_rates(
                resolved,
                model.get_mechanical_state(state, resolved.muscle),
                self.configuration,
            )

            for term, value in muscle_rates._asdict().items():
                if not np.isfinite(value):
                    raise NumericalError(
                        f"{term} rate of muscle {resolved.name!r} is not finite ({value})."
                    )

            rates[resolved.name] = muscle_rates
        return rates

    def compute(self, model: MechanicalStateProvider, state: Any) -> PROBE_OUTPUT__VECTOR:
        """
        Total metabolic power for the given state of the host model.

        Parameters
        ----------
        model : MechanicalStateProvider
            Host model supplying the mechanical state of the muscles and the body mass.
        state : Any
            Current state of the host model.

        Returns
        -------
        PROBE_OUTPUT__VECTOR
            Vector of length :meth:`output_count` matching :meth:`output_labels`.
            The first value is the total metabolic power in W.

        Raises
        ------
        ValueError
            If the probe has not been validated.
        NumericalError
            If any rate is not finite.
        """
        muscle_rates = self.compute_muscle_heat_rates(model, state)
        basal = self.compute_basal_heat_rate(model, state)

        muscle_totals = np.array([rates.total for rates in muscle_rates.values()], dtype=float)
        total = basal + float(np.sum(muscle_totals))
        if not np.isfinite(total):
            raise NumericalError(f"Total metabolic power is not finite ({total}).")

        if self.configuration.report_individual_muscle_metabolics:
            return np.concatenate([[total, basal], muscle_totals])
        return np.array([total])
