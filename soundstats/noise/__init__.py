"""
Background-noise handling for measured sound levels.

Modules:
    correction:
        Energy-domain subtraction of a noise level from a signal-plus-noise
        level.

    error:
        Closed-form noise error from SNR or SNNR, plus conversions between the
        two ratio conventions.
"""

from .correction import noise_correction
from .error import noise_error, snnr_to_snr, snr_to_snnr

__all__ = ["noise_correction", "noise_error", "snnr_to_snr", "snr_to_snnr"]
