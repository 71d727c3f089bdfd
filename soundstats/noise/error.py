"""Noise error as a function of signal-to-noise ratio, and ratio conversions.

The noise error is the difference between the level of a noise-contaminated
signal (SN) and the level of the noise-corrected signal (S). In terms of the
signal-to-noise ratio (SNR):

    ERR = 10*log10(1 + 10**(-SNR/10))

In practice the signal-plus-noise to noise ratio (SNNR) is what gets
measured, and then:

    ERR = -10*log10(1 - 10**(-SNNR/10))
"""

from __future__ import annotations

import numbers

import numpy as np

from ..inputs import as_numeric_array, restore_labels
from ..units import db_to_energy, energy_to_db
from .correction import noise_correction


def _as_snnr_flag(is_snnr) -> bool:
    # A single-element selector is accepted, as a scalar.
    if isinstance(is_snnr, np.ndarray) and is_snnr.ndim == 0 and is_snnr.dtype.kind in "biuf":
        is_snnr = is_snnr.item()
    if isinstance(is_snnr, (bool, np.bool_)):
        return bool(is_snnr)
    if isinstance(is_snnr, numbers.Real) and is_snnr in (0, 1):
        return bool(is_snnr)
    raise ValueError(
        f"Input argument is_snnr must be 0, 1 or a boolean, got {is_snnr!r}"
    )


def noise_error(ratio, is_snnr=False):
    """Return the dB bias caused by uncorrected background noise.

    Args:
        ratio (array_like): Signal-to-noise ratios (SNR) or
            signal-plus-noise to noise ratios (SNNR) [dB].
        is_snnr (bool | int, optional): ``False``/``0`` (default) when
            ``ratio`` holds SNR values, ``True``/``1`` for SNNR values.

    Returns:
        float | numpy.ndarray | pandas.Series: Noise error [dB], same shape as
        ``ratio``. An SNNR of 0 dB gives ``+inf``.

    Raises:
        TypeError: If ``ratio`` is not numeric.
        ValueError: If ``is_snnr`` is not boolean-like.
    """
    values = as_numeric_array(ratio, "RATIO")
    snnr = _as_snnr_flag(is_snnr)
    inverse = db_to_energy(-values)
    if snnr:
        err = -energy_to_db(1.0 - inverse)
    else:
        err = energy_to_db(1.0 + inverse)
    return restore_labels(err, ratio)


def snr_to_snnr(snr):
    """Convert signal-to-noise ratios to signal-plus-noise to noise ratios [dB]."""
    values = as_numeric_array(snr, "SNR")
    return restore_labels(energy_to_db(db_to_energy(values) + 1.0), snr)


def snnr_to_snr(snnr):
    """Convert signal-plus-noise to noise ratios to signal-to-noise ratios [dB].

    This is the noise correction of the SNNR against a 0 dB noise level, so a
    negative SNNR yields ``-inf``.
    """
    values = as_numeric_array(snnr, "SNNR")
    return restore_labels(np.asarray(noise_correction(values, 0.0)), snnr)
