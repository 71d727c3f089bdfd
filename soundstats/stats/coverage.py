"""Coverage factors for expanded uncertainties under a Gaussian model."""

from __future__ import annotations

import math

from ..schema import is_valid_confidence
from .special import erfinv


def coverage_factor(confidence: float) -> float:
    """Return the two-sided Gaussian coverage factor for a confidence level.

    Args:
        confidence (float): Confidence level in percent, in ``(0, 100]``.

    Returns:
        float: ``k = sqrt(2) * erfinv(confidence / 100)``. 68.269 % gives
        k ≈ 1, 95 % gives k ≈ 1.96 and 100 % gives ``inf``.

    Raises:
        ValueError: If ``confidence`` is not a finite number in ``(0, 100]``.

    Note:
        This function is strict. The statistics engine applies the lenient
        fallback (default confidence plus a warning) before calling it.

    References:
        JCGM 100:2008 (GUM), section 6.2 and Annex G.
    """
    if not is_valid_confidence(confidence):
        raise ValueError(
            f"confidence must be a number in (0, 100], got {confidence!r}"
        )
    return float(math.sqrt(2.0) * erfinv(float(confidence) / 100.0))
