"""Equal-width discretization of sample sequences.

Two strategies are supported:

- ``"discrete"``: every value is already an integer; the codes are the values
  themselves and the bin count is ignored.
- ``"equal_width"``: at least one value is not an integer; values are mapped
  to ``bins`` equal-width intervals spanning ``[min, max]``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Sequence

import numpy as np

from ..core_utils.validation import ConfigurationError, as_sample_array

logger = logging.getLogger(__name__)

DiscretizationStrategy = Literal["discrete", "equal_width"]


def is_discrete(values: Sequence[Any] | np.ndarray) -> bool:
    """Return True when every value is an integer (already discrete data).

    Floats with integral values such as ``1.0`` count as continuous. Python
    ints outside the int64 range arrive as an object array of ints.
    """
    arr = as_sample_array(values)
    return arr.dtype.kind in "iu" or arr.dtype == object


def select_strategy(values: Sequence[Any] | np.ndarray) -> DiscretizationStrategy:
    """Pick the discretization strategy for ``values``."""
    return "discrete" if is_discrete(values) else "equal_width"


def _check_bins(bins: int) -> None:
    if isinstance(bins, bool) or not isinstance(bins, (int, np.integer)):
        raise ConfigurationError(f"bins must be a positive integer. Got {bins!r}.")
    if bins < 1:
        raise ConfigurationError(f"bins must be >= 1. Got bins={bins}.")


def discretize_equal_width(values: Sequence[Any] | np.ndarray, bins: int) -> np.ndarray:
    """
    Map continuous values to equal-width bin codes in ``[0, bins - 1]``.

    The code of a value is ``floor((value - min) / bin_width)`` with
    ``bin_width = (max - min) / bins``, clamped into ``[0, bins - 1]`` so the
    maximum lands in the last bin. A zero-variance input maps every value to
    code 0.

    Parameters
    ----------
    values : array-like
        Numeric samples, shape (n_samples,).
    bins : int
        Number of bins, >= 1.

    Returns
    -------
    np.ndarray
        Integer codes of shape (n_samples,).

    Examples
    --------
    >>> discretize_equal_width([0.0, 0.5, 1.0], 2)
    array([0, 1, 1])
    """
    _check_bins(bins)
    a = as_sample_array(values).astype(np.float64, copy=False)
    if a.size == 0:
        return np.zeros(0, dtype=np.int64)

    min_val = a.min()
    max_val = a.max()
    if min_val == max_val:
        logger.debug(
            "Zero-variance input (value=%s) collapsed into a single bin.", min_val
        )
        return np.zeros(a.size, dtype=np.int64)

    # Relative position in [0, 1]; equivalent to (value - min) / bin_width but
    # without bin_width underflowing to 0 for subnormal ranges.
    span = max_val - min_val
    if np.isfinite(span):
        position = (a - min_val) / span
    else:
        # max - min overflows near the ends of the float range.
        position = (a / 2 - min_val / 2) / (max_val / 2 - min_val / 2)

    codes = np.floor(position * bins).astype(np.int64)
    # The maximum (and rounding just below it) would otherwise land in bin `bins`.
    return np.clip(codes, 0, bins - 1)


def discretize(values: Sequence[Any] | np.ndarray, bins: int) -> np.ndarray:
    """
    Convert a sample sequence into integer codes.

    Integer-valued input is returned unchanged (as an integer array);
    anything else is binned with :func:`discretize_equal_width`.

    Parameters
    ----------
    values : array-like
        Numeric samples, shape (n_samples,).
    bins : int
        Number of equal-width bins for continuous input, >= 1.

    Returns
    -------
    np.ndarray
        Integer codes of shape (n_samples,).

    Raises
    ------
    ConfigurationError
        If ``bins`` is not a positive integer.
    NonFiniteInputError
        If the input contains NaN or infinite values.
    """
    _check_bins(bins)
    arr = as_sample_array(values)
    strategy = select_strategy(arr)
    logger.debug("Discretizing %d values with strategy %r.", arr.size, strategy)

    if strategy == "discrete":
        return arr
    return discretize_equal_width(arr, bins)


__all__ = [
    "DiscretizationStrategy",
    "is_discrete",
    "select_strategy",
    "discretize_equal_width",
    "discretize",
]
