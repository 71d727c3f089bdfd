"""Statistics and expanded uncertainties of repeated sound level observations.

The engine accepts an ``(R, C)`` matrix of levels in dB: ``R`` independent
variables (for instance the bands of a spectrum) each observed ``C`` times.
For every row it reports the mean level, the expanded uncertainty of the
mean, the standard deviation and, where a closed form exists, the expanded
uncertainty of the standard deviation.

Three estimators are available (see :class:`~soundstats.schema.StatsMethod`):

* ``level``: arithmetic statistics of the dB values. The uncertainty of the
  standard deviation uses the Gaussian result
  ``u_s = k * s * sqrt(1 - 2/(C-1) * (Gamma(C/2) / Gamma((C-1)/2))**2)``.
* ``energy1``: energy mean level ``10*log10(mean(w))`` with
  ``s = 10/ln(10) * sw/w``, the "GUM method" of Taraldsen et al.
* ``energy2``: the same energy mean level with
  ``s = 10*log10(1 + sw/w)``, their "finite difference method".

In every case the expanded uncertainty of the mean is ``k * s / sqrt(C)``.

References:
    Taraldsen, G. et al. (2015). Uncertainty of decibel levels. J. Acoust.
    Soc. Am. 138(3), EL264-EL269.
    JCGM 100:2008, Evaluation of measurement data (GUM).
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from ..inputs import as_observation_matrix
from ..schema import (
    DEFAULT_CONFIDENCE,
    DEFAULT_METHOD,
    DegenerateSampleWarning,
    LevelStatsConfig,
    StatsMethod,
)
from ..units import DB_PER_NEPER_ENERGY, db_to_energy, energy_to_db
from .coverage import coverage_factor
from .special import gamma_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class LevelStatistics:
    """Per-row statistics of a level observation set.

    Attributes:
        mean: Mean level per row [dB].
        u_mean: Expanded uncertainty of the mean per row [dB].
        std: Standard deviation per row [dB].
        u_std: Expanded uncertainty of the standard deviation per row [dB],
            or ``None`` for the energy methods, which have no closed form.
        method: Estimator that produced the values.
        confidence: Confidence level actually used [%].
        coverage_factor: Coverage factor ``k`` derived from ``confidence``.
        n_observations: Number of observations ``C`` per row.
        labels: Row labels carried over from a ``pandas.DataFrame`` input.

    Unpacking yields ``(mean, u_mean, std, u_std)``; an undefined ``u_std``
    is rendered as a vector of NaN so positional callers always receive four
    arrays.
    """

    mean: np.ndarray
    u_mean: np.ndarray
    std: np.ndarray
    u_std: Optional[np.ndarray]
    method: StatsMethod
    confidence: float
    coverage_factor: float
    n_observations: int
    labels: Optional[pd.Index] = None

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.as_tuple())

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        u_std = self.u_std if self.u_std is not None else np.full_like(self.mean, np.nan)
        return self.mean, self.u_mean, self.std, u_std

    def to_frame(self) -> pd.DataFrame:
        """Return the statistics as a DataFrame with one row per variable."""
        mean, u_mean, std, u_std = self.as_tuple()
        return pd.DataFrame(
            {"mean": mean, "u_mean": u_mean, "std": std, "u_std": u_std},
            index=self.labels,
        )


# Each estimator maps an (R, C) level matrix to per-row (mean, std).
_Estimator = Callable[[np.ndarray], Tuple[np.ndarray, np.ndarray]]


def _sample_std(values: np.ndarray) -> np.ndarray:
    n_rows, n_obs = values.shape
    if n_obs < 2:
        return np.full(n_rows, np.nan)
    with np.errstate(invalid="ignore"):
        return np.std(values, axis=1, ddof=1)


def _std_uncertainty_factor(n_obs: int) -> float:
    """Relative standard uncertainty of a Gaussian sample standard deviation."""
    if n_obs < 2:
        return float("nan")
    c4_squared = 2.0 / (n_obs - 1) * float(gamma_ratio(n_obs)) ** 2
    return float(np.sqrt(max(1.0 - c4_squared, 0.0)))


def _level_estimates(x: np.ndarray):
    with np.errstate(invalid="ignore"):
        mean = np.mean(x, axis=1)
    return mean, _sample_std(x)


def _energy_moments(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    w = db_to_energy(x)
    w_avg = np.mean(w, axis=1)
    w_std = _sample_std(w)
    with np.errstate(divide="ignore", invalid="ignore"):
        relative_spread = w_std / w_avg
    return w_avg, relative_spread


def _energy_gum_estimates(x: np.ndarray):
    w_avg, rel = _energy_moments(x)
    return energy_to_db(w_avg), DB_PER_NEPER_ENERGY * rel


def _energy_finite_difference_estimates(x: np.ndarray):
    w_avg, rel = _energy_moments(x)
    return energy_to_db(w_avg), energy_to_db(1.0 + rel)


_ESTIMATORS: Dict[StatsMethod, _Estimator] = {
    StatsMethod.LEVEL: _level_estimates,
    StatsMethod.ENERGY1: _energy_gum_estimates,
    StatsMethod.ENERGY2: _energy_finite_difference_estimates,
}


def _compute(
    matrix: np.ndarray, labels: Optional[pd.Index], config: LevelStatsConfig
) -> LevelStatistics:
    n_rows, n_obs = matrix.shape
    k = coverage_factor(config.confidence)
    logger.debug(
        "level_stats: %d row(s) x %d observation(s), method=%s, k=%.6f",
        n_rows,
        n_obs,
        config.method.value,
        k,
    )
    if n_obs < 2:
        warnings.warn(
            "A single observation per row leaves the standard deviation and "
            "all uncertainties undefined; NaN is returned for them.",
            DegenerateSampleWarning,
            stacklevel=3,
        )

    mean, std = _ESTIMATORS[config.method](matrix)
    # k is infinite at 100 % confidence; inf * 0 stays NaN.
    with np.errstate(invalid="ignore"):
        u_mean = k * std / np.sqrt(n_obs)
        if config.method.has_std_uncertainty:
            u_std = k * std * _std_uncertainty_factor(n_obs)
        else:
            u_std = None

    return LevelStatistics(
        mean=mean,
        u_mean=u_mean,
        std=std,
        u_std=u_std,
        method=config.method,
        confidence=config.confidence,
        coverage_factor=k,
        n_observations=n_obs,
        labels=labels,
    )


def level_stats(
    x,
    confidence: float = DEFAULT_CONFIDENCE,
    method: "StatsMethod | str" = DEFAULT_METHOD,
) -> LevelStatistics:
    """Compute mean, standard deviation and their expanded uncertainties.

    Args:
        x (array_like): Levels in dB. On a matrix each row is a variable and
            each column an observation; a vector is one variable observed
            ``len(x)`` times. A ``pandas.DataFrame`` keeps its index.
        confidence (float, optional): Confidence level of the expanded
            uncertainties [%]. Defaults to 68.269 (k = 1). An invalid value
            is replaced by the default with a ``ConfidenceWarning``.
        method (StatsMethod | str, optional): ``"level"``, ``"energy1"`` or
            ``"energy2"`` (default), case-insensitive.

    Returns:
        LevelStatistics: Per-row results; unpack as
        ``x_avg, u_avg, x_std, u_std = level_stats(x)``.

    Raises:
        TypeError: If ``x`` is not numeric or ``method`` is not a string.
        ValueError: If ``x`` has more than two dimensions or no observations,
            or ``method`` is not supported.

    Note:
        With a single observation per row the spread is undefined: NaN is
        returned for ``std`` and the uncertainties and a
        ``DegenerateSampleWarning`` is issued.
    """
    matrix, labels = as_observation_matrix(x)
    config = LevelStatsConfig.create(confidence, method)
    return _compute(matrix, labels, config)


def level_stats_from_config(x, config: LevelStatsConfig) -> LevelStatistics:
    """Same as :func:`level_stats` with the options bundled in ``config``."""
    matrix, labels = as_observation_matrix(x)
    config = LevelStatsConfig.create(config.confidence, config.method)
    return _compute(matrix, labels, config)
