"""Histogram-based mutual information between paired samples.

Entry points wire discretization, distribution estimation and the
information calculators together and validate their inputs:

- :func:`compute`: mutual information I(X;Y)
- :func:`entropy`: Shannon entropy H(X)
- :func:`normalized`: I(X;Y) / min(H(X), H(Y)), in [0, 1]
- :func:`compute_vec`: I(X;Y_i) for every row Y_i of a matrix

Examples
--------
>>> compute([1, 2, 3, 4, 5, 1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 1, 2, 3, 4, 5])  # doctest: +ELLIPSIS
2.32192809488736...
>>> compute([1, 1, 2, 2, 3, 3], [1, 2, 1, 2, 1, 2])
0.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Mapping, Sequence

import numpy as np

from .config import EstimatorOptions, resolve_options
from .core_utils.validation import (
    LengthMismatchError,
    as_sample_array,
    check_non_empty,
    check_paired_lengths,
)
from .discretization import discretize
from .information_metrics.entropy import entropy_from_distribution
from .information_metrics.mutual_information import mutual_information
from .information_metrics.probability import joint_probability, marginal_probability

logger = logging.getLogger(__name__)

Options = EstimatorOptions | Mapping[str, Any] | None


def compute(
    dataset_x: Sequence[Any] | np.ndarray,
    dataset_y: Sequence[Any] | np.ndarray,
    options: Options = None,
) -> float:
    """
    Mutual information between two paired sample sequences.

    Each sequence is discretized independently (integer data as-is,
    continuous data into ``options.bins`` equal-width bins), then
    I(X;Y) is computed from the plug-in joint and marginal distributions.

    Parameters
    ----------
    dataset_x, dataset_y : array-like
        Paired numeric samples of equal, non-zero length.
    options : EstimatorOptions, mapping or None
        ``bins`` (default 10) and ``base`` (default 2).

    Returns
    -------
    float
        MI in units of ``options.base`` (bits by default).

    Raises
    ------
    LengthMismatchError
        If the datasets differ in length.
    EmptyInputError
        If the datasets are empty.
    ConfigurationError
        If the options are invalid.
    """
    opts = resolve_options(options)
    check_paired_lengths(dataset_x, dataset_y)

    x_codes = discretize(as_sample_array(dataset_x, "dataset_x"), opts.bins)
    y_codes = discretize(as_sample_array(dataset_y, "dataset_y"), opts.bins)

    joint = joint_probability(x_codes, y_codes)
    marginal_x = marginal_probability(x_codes)
    marginal_y = marginal_probability(y_codes)

    return mutual_information(joint, marginal_x, marginal_y, opts.base)


def entropy(dataset: Sequence[Any] | np.ndarray, options: Options = None) -> float:
    """
    Shannon entropy of a discretized sample sequence.

    Parameters
    ----------
    dataset : array-like
        Numeric samples, non-empty.
    options : EstimatorOptions, mapping or None
        ``bins`` (default 10) and ``base`` (default 2).

    Returns
    -------
    float
        H(X) in units of ``options.base``.

    Raises
    ------
    EmptyInputError
        If the dataset is empty.
    """
    opts = resolve_options(options)
    check_non_empty(dataset)

    codes = discretize(as_sample_array(dataset), opts.bins)
    return entropy_from_distribution(marginal_probability(codes), opts.base)


def normalized(
    dataset_x: Sequence[Any] | np.ndarray,
    dataset_y: Sequence[Any] | np.ndarray,
    options: Options = None,
) -> float:
    """
    Normalized mutual information MI(X,Y) / min(H(X), H(Y)).

    Returns 0.0 when either input has zero entropy (e.g. a constant
    sequence). The ratio is clipped into [0, 1] to absorb rounding.

    The ratio is unit-free, so it is taken in nats whatever ``options.base``
    is; with a base below 1 every entropy is negative and ``min`` would
    otherwise select the larger one.
    """
    opts = replace(resolve_options(options), base=math.e)
    mi = compute(dataset_x, dataset_y, opts)

    h_x = entropy(dataset_x, opts)
    h_y = entropy(dataset_y, opts)
    min_entropy = min(h_x, h_y)

    if min_entropy == 0:
        logger.debug("Minimum entropy is zero; normalized MI defined as 0.0.")
        return 0.0
    return float(np.clip(mi / min_entropy, 0.0, 1.0))


def compute_vec(
    dataset_x: Sequence[Any] | np.ndarray,
    y_vectors: Sequence[Sequence[Any]] | np.ndarray,
    options: Options = None,
) -> np.ndarray:
    """
    Mutual information between X and each row of a matrix of Y vectors.

    Parameters
    ----------
    dataset_x : array-like
        Samples of X, shape (n_samples,).
    y_vectors : array-like
        Shape (n_vectors, n_samples); each row is one Y variable.
    options : EstimatorOptions, mapping or None
        Shared by every pair.

    Returns
    -------
    np.ndarray
        Shape (n_vectors,), MI values in units of ``options.base``.
    """
    opts = resolve_options(options)
    rows = list(y_vectors)
    if not rows:
        return np.array([], dtype=float)

    n_samples = len(dataset_x)
    for i, row in enumerate(rows):
        if len(row) != n_samples:
            raise LengthMismatchError(
                f"Row {i} of y_vectors has length {len(row)}; expected {n_samples}."
            )

    return np.array([compute(dataset_x, row, opts) for row in rows], dtype=float)


__all__ = ["compute", "entropy", "normalized", "compute_vec"]
