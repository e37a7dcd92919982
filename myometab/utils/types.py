from typing import TYPE_CHECKING, Annotated, Any, Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt
from beartype import beartype, BeartypeConf
from beartype.vale import Is

if TYPE_CHECKING:
    from myometab.simulator.core.muscle.muscle import MuscleMechanicalState


# See https://beartype.readthedocs.io/en/latest/api_decor/#beartype.BeartypeConf.is_pep484_tower
beartowertype = beartype(conf=BeartypeConf(is_pep484_tower=True))

# Scalar or element-wise array input to the heat rate equations
SCALAR_OR_ARRAY = float | npt.NDArray[np.floating]

# Probe output vector: (output_channels,)
PROBE_OUTPUT__VECTOR = Annotated[
    npt.NDArray[np.floating],
    Is[lambda x: x.ndim == 1],
]

# Probe outputs over a trajectory: (samples, output_channels)
PROBE_OUTPUT__MATRIX = Annotated[
    npt.NDArray[np.floating],
    Is[lambda x: x.ndim == 2],
]


@runtime_checkable
class MuscleHandle(Protocol):
    """A muscle as exposed by the host model."""

    name: str

    @property
    def mass__kg(self) -> float: ...


@runtime_checkable
class MuscleInventory(Protocol):
    """Lookup of muscles by name."""

    def find_muscle(self, name: str) -> MuscleHandle | None: ...


@runtime_checkable
class MechanicalStateProvider(Protocol):
    """Per-step access to the mechanical state of the host model."""

    def get_mechanical_state(
        self, state: Any, muscle: MuscleHandle
    ) -> "MuscleMechanicalState": ...

    def get_total_mass(self, state: Any) -> float: ...
