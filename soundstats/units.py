"""Centralized decibel/energy conversion utilities."""

from __future__ import annotations

import numpy as np

DB_PER_BEL: float = 10.0
# 10/ln(10): dB change per unit relative change in energy, to first order.
DB_PER_NEPER_ENERGY: float = DB_PER_BEL / np.log(10.0)


def db_to_energy(level_db):
    """Convert power-type levels in dB to normalized energies.

    Args:
        level_db (array_like): Levels in dB re an arbitrary reference.

    Returns:
        numpy.ndarray: Energies ``10**(L/10)`` normalized by the same
        reference. ``-inf`` dB maps to an energy of exactly zero and levels
        beyond the float range map to ``inf``, without runtime warnings.

    Note:
        Averaging incoherent sound must happen on these values, not on dB.
    """
    with np.errstate(over="ignore"):
        return np.power(10.0, np.asarray(level_db, dtype=float) / DB_PER_BEL)


def energy_to_db(energy):
    """Convert normalized energies back to dB.

    Args:
        energy (array_like): Non-negative energies.

    Returns:
        numpy.ndarray: ``10*log10(w)``; zero energy gives ``-inf`` and a
        negative energy gives ``nan``, without emitting runtime warnings.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return DB_PER_BEL * np.log10(np.asarray(energy, dtype=float))
