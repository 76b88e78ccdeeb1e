"""Plug-in (frequency) estimates of marginal and joint distributions.

Probabilities are ``count / N`` over observed codes only. No smoothing is
applied: unobserved codes and pairs are absent from the mappings rather than
stored with probability zero.
"""

from __future__ import annotations

from typing import Dict, Hashable, Mapping, Sequence, Tuple

import numpy as np

from ...core_utils.validation import LengthMismatchError

MarginalDistribution = Dict[int, float]
JointDistribution = Dict[Tuple[int, int], float]


def marginal_probability(codes: Sequence[int] | np.ndarray) -> MarginalDistribution:
    """
    Empirical marginal distribution of a discretized sequence.

    Parameters
    ----------
    codes : array-like
        Integer codes, shape (n_samples,).

    Returns
    -------
    dict[int, float]
        ``{code: count / n_samples}`` for every observed code. Empty for an
        empty input.

    Examples
    --------
    >>> marginal_probability([1, 1, 2, 3])
    {1: 0.5, 2: 0.25, 3: 0.25}
    """
    arr = np.asarray(codes).reshape(-1)
    n_samples = arr.size
    if n_samples == 0:
        return {}

    values, counts = np.unique(arr, return_counts=True)
    return {
        int(value): int(count) / n_samples
        for value, count in zip(values.tolist(), counts.tolist())
    }


def joint_probability(
    codes_x: Sequence[int] | np.ndarray, codes_y: Sequence[int] | np.ndarray
) -> JointDistribution:
    """
    Empirical joint distribution of two index-aligned code sequences.

    Parameters
    ----------
    codes_x, codes_y : array-like
        Integer codes of equal length, shape (n_samples,).

    Returns
    -------
    dict[tuple[int, int], float]
        ``{(code_x, code_y): count / n_samples}`` for every observed pair.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length.
    """
    x = np.asarray(codes_x).reshape(-1)
    y = np.asarray(codes_y).reshape(-1)
    if x.size != y.size:
        raise LengthMismatchError(
            f"Code sequences must have the same length. Got {x.size} and {y.size}."
        )

    n_samples = x.size
    if n_samples == 0:
        return {}

    # Pair up inverse indices rather than the codes themselves: stacking
    # uint64 with int64 codes would promote to float64 and merge large codes.
    ux, ix = np.unique(x, return_inverse=True)
    uy, iy = np.unique(y, return_inverse=True)
    pairs, counts = np.unique(
        np.column_stack((ix.reshape(-1), iy.reshape(-1))), axis=0, return_counts=True
    )
    ux_list, uy_list = ux.tolist(), uy.tolist()
    return {
        (int(ux_list[i]), int(uy_list[j])): int(count) / n_samples
        for (i, j), count in zip(pairs.tolist(), counts.tolist())
    }


def get_or_zero(distribution: Mapping[Hashable, float], key: Hashable) -> float:
    """Probability of ``key``, or 0.0 when it was never observed."""
    return float(distribution.get(key, 0.0))


__all__ = [
    "MarginalDistribution",
    "JointDistribution",
    "marginal_probability",
    "joint_probability",
    "get_or_zero",
]
