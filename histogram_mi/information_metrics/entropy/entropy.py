"""Shannon entropy of an empirical marginal distribution."""

from __future__ import annotations

from typing import Hashable, Mapping

import numpy as np
from scipy.special import entr


def log_base(values: float | np.ndarray, base: float) -> float | np.ndarray:
    """
    Logarithm in an arbitrary base: ``ln(v) / ln(base)``.

    Parameters
    ----------
    values : float or np.ndarray
        Positive values.
    base : float
        Logarithm base (2 -> bits, e -> nats, 10 -> hartleys).

    Returns
    -------
    float or np.ndarray
        ``log_base(values)`` with the same shape as ``values``.
    """
    return np.log(values) / np.log(base)


def entropy_from_distribution(marginal: Mapping[Hashable, float], base: float) -> float:
    """
    Shannon entropy H = -sum_x p(x) log_base p(x).

    Uses ``scipy.special.entr`` (``-p ln p`` with ``0 ln 0 = 0``), so a
    zero-probability entry contributes nothing instead of producing
    ``log(0)``.

    Parameters
    ----------
    marginal : Mapping
        ``{code: probability}`` over observed codes.
    base : float
        Logarithm base.

    Returns
    -------
    float
        Entropy in units of ``base``; 0.0 for an empty distribution.
    """
    if not marginal:
        return 0.0

    probs = np.fromiter(marginal.values(), dtype=np.float64, count=len(marginal))
    nats = float(np.sum(entr(probs)))
    return nats * float(log_base(np.e, base))


__all__ = ["log_base", "entropy_from_distribution"]
