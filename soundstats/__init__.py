"""
A Python package for statistics, uncertainties and noise correction of sound levels.

Estimates mean levels and their expanded uncertainties from repeated decibel
observations, and removes background noise from measured levels on an energy
scale, after Taraldsen et al. (2015) and the GUM.

Modules:
    - stats: Level statistics (level, energy1, energy2 methods) and coverage factors.
    - noise: Noise correction, noise error and SNR/SNNR conversions.
    - analysis: Corrected level with a coverage interval from raw observations.
    - schema: Estimation methods, configuration defaults and warning categories.
    - units: Decibel/energy conversions.
"""

__version__ = "1.0.0"

from .analysis import (
    CorrectedLevel,
    correct_observations,
    corrected_level_frame,
    corrected_level_interval,
)
from .noise import noise_correction, noise_error, snnr_to_snr, snr_to_snnr
from .schema import (
    DEFAULT_CONFIDENCE,
    DEFAULT_METHOD,
    ConfidenceWarning,
    DegenerateSampleWarning,
    LevelStatsConfig,
    StatsMethod,
)
from .stats import LevelStatistics, coverage_factor, level_stats, level_stats_from_config
from .units import db_to_energy, energy_to_db

__all__ = [
    # Statistics
    "coverage_factor",
    "level_stats",
    "level_stats_from_config",
    "LevelStatistics",
    # Noise
    "noise_correction",
    "noise_error",
    "snr_to_snnr",
    "snnr_to_snr",
    # Workflow
    "CorrectedLevel",
    "corrected_level_interval",
    "correct_observations",
    "corrected_level_frame",
    # Configuration
    "DEFAULT_CONFIDENCE",
    "DEFAULT_METHOD",
    "StatsMethod",
    "LevelStatsConfig",
    "ConfidenceWarning",
    "DegenerateSampleWarning",
    # Units
    "db_to_energy",
    "energy_to_db",
]
