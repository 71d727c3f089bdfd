"""Background-noise correction of measured levels on an energy scale.

The correction removes the noise energy from a noise-contaminated level:

    X = 10*log10(10**(XN/10) - 10**(N/10))

``XN`` and ``N`` may be RMS or exposure levels. The correction is best applied
to levels averaged over several observations; it is not meant for
instantaneous metrics such as peak or peak-to-peak levels.
"""

from __future__ import annotations

import numpy as np

from ..inputs import broadcast_pair, restore_labels
from ..units import db_to_energy, energy_to_db


def noise_correction(xn, n):
    """Return noise-corrected levels from signal-plus-noise and noise levels.

    Args:
        xn (array_like): Signal-plus-noise levels [dB].
        n (array_like): Noise levels [dB], same or broadcastable shape.

    Returns:
        float | numpy.ndarray | pandas.Series | pandas.DataFrame: Corrected
        signal levels [dB] with the broadcast shape of the inputs. Entries
        where ``xn < n`` are ``-inf`` (no signal detectable above the noise),
        as are entries where ``xn == n``.

    Raises:
        TypeError: If either input is not numeric.
        ValueError: If the shapes cannot be broadcast together.

    Note:
        A noise level of ``-inf`` dB is zero energy and leaves ``xn``
        unchanged.
    """
    xn_arr, n_arr = broadcast_pair(xn, n, ("XN", "N"))
    corrected = energy_to_db(db_to_energy(xn_arr) - db_to_energy(n_arr))
    corrected = np.where(xn_arr < n_arr, -np.inf, corrected)
    return restore_labels(corrected, xn, n)
