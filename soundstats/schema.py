"""Define estimation methods, per-call configuration and warning categories."""

from __future__ import annotations

import math
import numbers
import warnings
from dataclasses import dataclass
from enum import Enum

import numpy as np

DEFAULT_CONFIDENCE: float = 68.269


class ConfidenceWarning(UserWarning):
    """Raised when an invalid confidence level is replaced by the default."""


class DegenerateSampleWarning(UserWarning):
    """Raised when too few observations are available for a spread estimate."""


class StatsMethod(str, Enum):
    """Estimation methods for the statistics of repeated level observations.

    Attributes:
        LEVEL: Arithmetic mean and sample standard deviation taken directly on
            the decibel values. Physically naive for incoherent sound but kept
            as the comparison baseline.
        ENERGY1: Energy mean level with the standard deviation transported to
            decibels by first-order (GUM) propagation.
        ENERGY2: Energy mean level with the standard deviation transported to
            decibels by the finite-difference form ``10*log10(1 + sw/w)``.

    Note:
        Only ``LEVEL`` has a closed form for the uncertainty of the standard
        deviation.

    References:
        Taraldsen, G., Berge, T., Haukland, F., Lindqvist, B. H. & Jonasson, H.
        (2015). Uncertainty of decibel levels. J. Acoust. Soc. Am. 138(3).
    """

    LEVEL = "level"
    ENERGY1 = "energy1"
    ENERGY2 = "energy2"

    @classmethod
    def parse(cls, value: "StatsMethod | str") -> "StatsMethod":
        """Resolve a method token, case-insensitively.

        Raises:
            TypeError: If ``value`` is neither a ``StatsMethod`` nor a string.
            ValueError: If the string does not name a supported method.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"Input 'method' must be a string of characters, got {type(value).__name__}"
            )
        token = value.strip().lower()
        for member in cls:
            if member.value == token:
                return member
        supported = ", ".join(repr(m.value) for m in cls)
        raise ValueError(f"Non-supported method {value!r}; expected one of {supported}.")

    @property
    def has_std_uncertainty(self) -> bool:
        return self is StatsMethod.LEVEL


DEFAULT_METHOD: StatsMethod = StatsMethod.ENERGY2


def _as_scalar(value: object) -> object:
    """Unwrap a zero-dimensional numeric array into a Python scalar."""
    if isinstance(value, np.ndarray) and value.ndim == 0 and value.dtype.kind in "iuf":
        return value.item()
    return value


def is_valid_confidence(confidence: object) -> bool:
    """Return ``True`` for a real, finite percentage in ``(0, 100]``."""
    confidence = _as_scalar(confidence)
    if isinstance(confidence, bool) or not isinstance(confidence, numbers.Real):
        return False
    value = float(confidence)
    return math.isfinite(value) and 0.0 < value <= 100.0


def resolve_confidence(confidence: object, stacklevel: int = 2) -> float:
    """Return ``confidence`` as a float, or the default after warning.

    An out-of-range or non-numeric confidence is not fatal: the default of
    68.269 % (coverage factor k = 1) is substituted and a
    :class:`ConfidenceWarning` is issued so the caller may escalate it.
    """
    if is_valid_confidence(confidence):
        return float(_as_scalar(confidence))
    warnings.warn(
        f"Input 'confidence' must be a numeric value between 0 and 100 "
        f"(got {confidence!r}). The default value of {DEFAULT_CONFIDENCE} will be used.",
        ConfidenceWarning,
        stacklevel=stacklevel,
    )
    return DEFAULT_CONFIDENCE


@dataclass(frozen=True)
class LevelStatsConfig:
    """Per-call configuration of the level-statistics engine.

    Attributes:
        confidence: Confidence level of the expanded uncertainties in percent.
            Defaults to 68.269, which corresponds to a coverage factor k = 1.
        method: Estimation method. Defaults to ``StatsMethod.ENERGY2``.

    Note:
        Build instances with :meth:`create` when the values come from user
        input; it applies the confidence fallback and method parsing.
    """

    confidence: float = DEFAULT_CONFIDENCE
    method: StatsMethod = DEFAULT_METHOD

    @classmethod
    def create(
        cls,
        confidence: object = DEFAULT_CONFIDENCE,
        method: "StatsMethod | str" = DEFAULT_METHOD,
    ) -> "LevelStatsConfig":
        parsed = StatsMethod.parse(method)
        return cls(confidence=resolve_confidence(confidence, stacklevel=4), method=parsed)
