from collections.abc import Sequence
from typing import Any

import numpy as np
from joblib import Parallel, delayed
from tqdm import tqdm

from myometab.simulator.core.metabolics.probe import Bhargava2004MetabolicsProbe
from myometab.utils.types import PROBE_OUTPUT__MATRIX, MechanicalStateProvider, beartowertype


@beartowertype
def evaluate_trajectory(
    probe: Bhargava2004MetabolicsProbe,
    model: MechanicalStateProvider,
    states: Sequence[Any],
    n_jobs: int = 1,
    verbose: bool = False,
) -> PROBE_OUTPUT__MATRIX:
    """
    Evaluate the probe at every sample of a recorded trajectory.

    Each row is the instantaneous output of :meth:`Bhargava2004MetabolicsProbe.compute`
    for one state. The samples are independent of each other; no energy is accumulated.

    Parameters
    ----------
    probe : Bhargava2004MetabolicsProbe
        A validated probe.
    model : MechanicalStateProvider
        Host model supplying the mechanical state for each sample.
    states : Sequence[Any]
        States of the host model, one per sample.
    n_jobs : int, default=1
        Number of parallel jobs (see :class:`joblib.Parallel`). ``1`` evaluates the
        samples sequentially.
    verbose : bool, default=False
        If True, show a progress bar.

    Returns
    -------
    PROBE_OUTPUT__MATRIX
        Matrix of shape (n_samples, probe.output_count()). Columns follow
        :meth:`Bhargava2004MetabolicsProbe.output_labels`.

    Raises
    ------
    ValueError
        If the probe has not been validated or ``states`` is empty.
    NumericalError
        If any sample produces a non-finite rate.
    """
    if not probe.is_validated:
        raise ValueError("Probe must be validated first using validate()")
    if len(states) == 0:
        raise ValueError("At least one state is required.")

    iterator = tqdm(states, desc="Metabolic power is evaluated", disable=not verbose)

    if n_jobs == 1:
        rows = [probe.compute(model, state) for state in iterator]
    else:
        rows = Parallel(n_jobs=n_jobs)(
            delayed(probe.compute)(model, state) for state in iterator
        )

    return np.vstack(rows)
