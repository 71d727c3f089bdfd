"""Validate and normalise numeric inputs before any computation runs."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

_NUMERIC_KINDS = frozenset("iuf")


def as_numeric_array(values, name: str) -> np.ndarray:
    """Return ``values`` as a float array, rejecting non-numeric content.

    Args:
        values (array_like): Scalar, sequence, ``numpy.ndarray`` or pandas
            object holding decibel values.
        name (str): Argument name used in error messages.

    Returns:
        numpy.ndarray: Float64 copy of the input.

    Raises:
        TypeError: If the input is boolean, complex, textual or otherwise not
            a real numeric array.

    Note:
        Booleans are rejected even though numpy would cast them; a level of
        ``True`` is almost certainly a caller mistake.
    """
    if isinstance(values, (pd.Series, pd.DataFrame)):
        arr = values.to_numpy()
    else:
        arr = np.asarray(values)
    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(
            f"Input argument {name} must be a numeric vector or matrix, "
            f"got dtype '{arr.dtype}'."
        )
    return arr.astype(float, copy=True)


def as_observation_matrix(x) -> Tuple[np.ndarray, Optional[pd.Index]]:
    """Coerce level observations into an ``(R, C)`` matrix.

    Rows are independent variables (frequency bands, positions, ...) and
    columns are repeated observations. A vector is a single row, a scalar a
    single observation. A ``pandas.DataFrame`` keeps its index as row labels.

    Raises:
        TypeError: For non-numeric input.
        ValueError: For arrays with more than two dimensions or no
            observations.
    """
    labels = None
    if isinstance(x, pd.DataFrame):
        labels = x.index
    elif isinstance(x, pd.Series) and x.name is not None:
        labels = pd.Index([x.name])

    arr = as_numeric_array(x, "X")
    if arr.ndim > 2:
        raise ValueError(
            f"Input argument X must be a numeric vector or matrix, got {arr.ndim} dimensions."
        )
    matrix = np.atleast_2d(arr)
    if matrix.shape[1] == 0:
        raise ValueError("Input argument X must contain at least one observation.")
    return matrix, labels


def broadcast_pair(a, b, names: Tuple[str, str]) -> Tuple[np.ndarray, np.ndarray]:
    """Validate two numeric inputs and broadcast them to a common shape.

    Raises:
        TypeError: If either input is non-numeric.
        ValueError: If the shapes are not broadcast-compatible.
    """
    a_arr = as_numeric_array(a, names[0])
    b_arr = as_numeric_array(b, names[1])
    try:
        return tuple(np.broadcast_arrays(a_arr, b_arr))
    except ValueError as exc:
        raise ValueError(
            f"Input arguments {names[0]} {a_arr.shape} and {names[1]} {b_arr.shape} "
            "must have the same or broadcastable shapes."
        ) from exc


def restore_labels(values: np.ndarray, *templates):
    """Return ``values`` in the form of the first matching pandas template.

    A zero-dimensional result is returned as ``float``. If one of the
    templates is a Series or DataFrame with exactly the result's shape, its
    index (and columns) are re-attached; otherwise the bare array is returned.
    """
    if values.ndim == 0:
        return float(values)
    for template in templates:
        if isinstance(template, pd.Series) and template.shape == values.shape:
            return pd.Series(values, index=template.index, name=template.name)
        if isinstance(template, pd.DataFrame) and template.shape == values.shape:
            return pd.DataFrame(values, index=template.index, columns=template.columns)
    return values
