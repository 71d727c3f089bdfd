"""
Statistical utilities for decibel level observations.

This subpackage provides the numerical routines behind the level-statistics
engine. All functions operate on arrays and primitive types; no knowledge of
noise correction is included.

Modules:
    special:
        Numerics interface to the inverse error function and log-gamma
        ratios (scipy.special backend).

    coverage:
        Coverage factor k from a confidence percentage under a Gaussian
        model.

    levels:
        Mean, standard deviation and expanded uncertainties of repeated level
        observations with the ``level``, ``energy1`` and ``energy2`` methods.

Design Principle:
    This subpackage has no dependencies on noise/ or the CLI.
"""

from .coverage import coverage_factor
from .levels import LevelStatistics, level_stats, level_stats_from_config

__all__ = [
    "coverage_factor",
    "LevelStatistics",
    "level_stats",
    "level_stats_from_config",
]
