"""Special functions used by the statistics engine.

Every special-function evaluation in the package goes through this module so
the backend can be swapped without touching the statistics code. The current
backend is :mod:`scipy.special`, which evaluates both functions to double
precision.
"""

from __future__ import annotations

import numpy as np
from scipy import special as _sp


def erfinv(y):
    """Inverse error function; ``erfinv(1)`` is ``+inf``."""
    return _sp.erfinv(y)


def gamma_ratio(n):
    """Return ``Gamma(n/2) / Gamma((n-1)/2)`` for ``n >= 2``.

    Evaluated through log-gamma differences so large sample counts do not
    overflow ``Gamma`` itself.
    """
    n = np.asarray(n, dtype=float)
    return np.exp(_sp.gammaln(n / 2.0) - _sp.gammaln((n - 1.0) / 2.0))
