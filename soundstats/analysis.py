"""
Noise-corrected levels with coverage intervals.

This module composes the level-statistics engine and the noise-correction
transform into the measurement workflow used in practice:

1) Compute the mean level and its expanded uncertainty for the
   signal-plus-noise observations (SN) and for the noise observations (N).
2) Correct the central value: S = correct(SN, N).
3) Top limit: correct(SN + U_SN, N - U_N), i.e. the largest signal against
   the smallest noise.
4) Bottom limit: correct(SN - U_SN, N + U_N).

The bounds are not symmetric about the central value because the correction
is nonlinear in dB.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .inputs import as_numeric_array
from .noise.correction import noise_correction
from .schema import DEFAULT_CONFIDENCE, DEFAULT_METHOD, LevelStatsConfig, StatsMethod
from .stats.levels import level_stats_from_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CorrectedLevel:
    """Noise-corrected level and the limits of its coverage interval [dB]."""

    level: np.ndarray
    lower: np.ndarray
    upper: np.ndarray


def corrected_level_interval(xn_mean, xn_uncertainty, n_mean, n_uncertainty) -> CorrectedLevel:
    """Correct a mean level for noise and bound it with a coverage interval.

    Args:
        xn_mean (array_like): Mean signal-plus-noise level [dB].
        xn_uncertainty (array_like): Expanded uncertainty of ``xn_mean`` [dB].
        n_mean (array_like): Mean noise level [dB].
        n_uncertainty (array_like): Expanded uncertainty of ``n_mean`` [dB].

    Returns:
        CorrectedLevel: Central corrected level with bottom and top limits.
        Any of them may be ``-inf`` when the signal is not detectable above
        the noise at that bound.

    Raises:
        TypeError: If any input is not numeric.
        ValueError: If the inputs cannot be broadcast together.
    """
    xn = as_numeric_array(xn_mean, "XN")
    u_xn = as_numeric_array(xn_uncertainty, "U_XN")
    n = as_numeric_array(n_mean, "N")
    u_n = as_numeric_array(n_uncertainty, "U_N")

    level = np.asarray(noise_correction(xn, n))
    upper = np.asarray(noise_correction(xn + u_xn, n - u_n))
    lower = np.asarray(noise_correction(xn - u_xn, n + u_n))
    return CorrectedLevel(level=level, lower=lower, upper=upper)


def correct_observations(
    signal_noise_levels,
    noise_levels,
    confidence: float = DEFAULT_CONFIDENCE,
    method: "StatsMethod | str" = DEFAULT_METHOD,
):
    """Run the full workflow from raw level observations.

    Both observation sets are summarised with the same estimator and
    confidence level before the correction is applied.

    Returns:
        tuple[CorrectedLevel, LevelStatistics, LevelStatistics]: Corrected
        level with its interval, then the statistics of the signal-plus-noise
        and of the noise observations.
    """
    config = LevelStatsConfig.create(confidence, method)
    sn_stats = level_stats_from_config(signal_noise_levels, config)
    n_stats = level_stats_from_config(noise_levels, config)
    logger.debug(
        "Correcting %d row(s) with method=%s at %.3f %% confidence",
        len(sn_stats.mean),
        config.method.value,
        config.confidence,
    )
    corrected = corrected_level_interval(
        sn_stats.mean, sn_stats.u_mean, n_stats.mean, n_stats.u_mean
    )
    return corrected, sn_stats, n_stats


def corrected_level_frame(
    corrected: CorrectedLevel, labels: Optional[Sequence] = None
) -> pd.DataFrame:
    """Tabulate a corrected level and its interval, one row per variable."""
    return pd.DataFrame(
        {
            "corrected": np.atleast_1d(corrected.level),
            "lower": np.atleast_1d(corrected.lower),
            "upper": np.atleast_1d(corrected.upper),
        },
        index=labels,
    )
