"""Exceptions and input checks shared by the estimation pipeline.

Every exception derives from :class:`ValueError`, so callers that already
guard the estimators with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np


class MutualInformationError(ValueError):
    """Base class for invalid input or configuration."""


class LengthMismatchError(MutualInformationError):
    """Paired sample sequences have different lengths."""


class EmptyInputError(MutualInformationError):
    """A sample sequence has no observations."""


class NonFiniteInputError(MutualInformationError):
    """A sample sequence contains NaN or infinite values."""


class ConfigurationError(MutualInformationError):
    """Invalid estimator option (bin count, logarithm base or unknown key)."""


def _all_python_ints(arr: np.ndarray) -> bool:
    return arr.ndim == 1 and all(
        isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in arr
    )


def as_sample_array(values: Sequence[Any] | np.ndarray, name: str = "dataset") -> np.ndarray:
    """Convert a sample sequence into a 1-D NumPy array.

    Integer inputs keep an integer dtype so the already-discrete path can
    return them unchanged; Python ints outside the int64 range are kept as an
    object array of ints. Everything else is converted to float64.

    Parameters
    ----------
    values
        Sequence or array-like of numbers.
    name
        Argument name used in error messages.

    Returns
    -------
    np.ndarray
        One-dimensional array of the observations.

    Raises
    ------
    TypeError
        If the values are not numeric.
    ValueError
        If the values are not one-dimensional.
    NonFiniteInputError
        If any float value is NaN or infinite.
    """
    arr = np.asarray(values)
    if arr.dtype.kind in "USV":
        raise TypeError(f"{name} must contain only numeric values, got dtype {arr.dtype}.")
    if arr.dtype == object:
        # Ints beyond the int64 range stay exact as an object array of ints.
        if not _all_python_ints(arr):
            try:
                arr = np.asarray(values, dtype=np.float64)
            except (TypeError, ValueError) as exc:
                raise TypeError(f"{name} must contain only numeric values.") from exc
    elif arr.dtype.kind == "b":
        raise TypeError(f"{name} must contain numbers, not booleans.")
    elif arr.dtype.kind not in "iuf":
        raise TypeError(f"{name} must contain only real numbers, got dtype {arr.dtype}.")

    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional. Got ndim={arr.ndim}.")

    if arr.dtype.kind == "f" and not np.all(np.isfinite(arr)):
        n_bad = int(np.count_nonzero(~np.isfinite(arr)))
        raise NonFiniteInputError(
            f"{name} contains {n_bad} non-finite value(s); missing values are not supported."
        )
    return arr


def check_non_empty(values: Sequence[Any] | np.ndarray, name: str = "dataset") -> None:
    """Raise :class:`EmptyInputError` when ``values`` has no observations."""
    if len(values) == 0:
        raise EmptyInputError(f"{name} cannot be empty.")


def check_paired_lengths(
    dataset_x: Sequence[Any] | np.ndarray,
    dataset_y: Sequence[Any] | np.ndarray,
) -> None:
    """Validate a pair of sample sequences for joint estimation.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length.
    EmptyInputError
        If the sequences are empty.
    """
    n_x, n_y = len(dataset_x), len(dataset_y)
    if n_x != n_y:
        raise LengthMismatchError(
            f"Datasets must have the same length. Got len(x)={n_x}, len(y)={n_y}."
        )
    if n_x == 0:
        raise EmptyInputError("Datasets cannot be empty.")


__all__ = [
    "MutualInformationError",
    "LengthMismatchError",
    "EmptyInputError",
    "NonFiniteInputError",
    "ConfigurationError",
    "as_sample_array",
    "check_non_empty",
    "check_paired_lengths",
]
