"""Scikit-learn based Mutual Information (MI) for discretized codes."""

from __future__ import annotations

import numpy as np
from sklearn.metrics import mutual_info_score

from ..entropy.entropy import log_base


def mutual_information_sklearn(
    codes_x: np.ndarray, codes_y: np.ndarray, base: float
) -> float:
    """
    Calculate plug-in Mutual Information using scikit-learn's mutual_info_score.

    Serves as an independent reference for :func:`mutual_information`: both
    use contingency counts over the same codes, so they must agree up to
    floating-point rounding.

    Parameters
    ----------
    codes_x : np.ndarray
        Integer codes of X, shape (n_samples,).
    codes_y : np.ndarray
        Integer codes of Y, shape (n_samples,).
    base : float
        Logarithm base of the result.

    Returns
    -------
    float
        MI in units of ``base``.
    """
    x = np.asarray(codes_x).reshape(-1)
    y = np.asarray(codes_y).reshape(-1)
    if x.size == 0:
        return 0.0

    # mutual_info_score returns nats
    return float(mutual_info_score(x, y)) * float(log_base(np.e, base))


__all__ = ["mutual_information_sklearn"]
