"""Mutual Information (MI) from empirical joint and marginal distributions.

MI(X;Y) = sum_{x,y} p(x,y) * log_base( p(x,y) / (p(x) * p(y)) )

The sum runs over the observed pairs of the joint distribution only; the
marginal probabilities of each pair are fetched with ``get_or_zero``.
"""

from __future__ import annotations

import logging
from typing import Hashable, Mapping, Tuple

import numpy as np
from scipy.special import rel_entr

from ...config import MI_CLIP_TOLERANCE
from ..entropy.entropy import log_base
from ..probability.distributions import get_or_zero

logger = logging.getLogger(__name__)


def _safe_mi_contrib(p_xy: np.ndarray, p_x: np.ndarray, p_y: np.ndarray) -> np.ndarray:
    """
    Calculate the element-wise contribution to Mutual Information in nats.

    Computes the term:
    $$ p(x,y) \\cdot \\log \\left( \\frac{p(x,y)}{p(x) \\cdot p(y)} \\right) $$

    Terms where any of the three probabilities is not positive contribute 0.0,
    consistent with the limit $\\lim_{p \\to 0} p \\log p = 0$, instead of
    producing ``inf`` or ``nan``.

    Parameters
    ----------
    p_xy : np.ndarray
        Joint probabilities $p(x,y)$.
    p_x : np.ndarray
        Marginal probabilities $p(x)$.
    p_y : np.ndarray
        Marginal probabilities $p(y)$.

    Returns
    -------
    np.ndarray
        Element-wise MI contributions. Zeros where input probabilities are zero.
    """
    p_xy = np.asarray(p_xy, dtype=float)
    p_x = np.asarray(p_x, dtype=float)
    p_y = np.asarray(p_y, dtype=float)

    contribution = np.zeros_like(p_xy, dtype=float)
    valid_mask = (p_xy > 0.0) & (p_x > 0.0) & (p_y > 0.0)

    if np.any(valid_mask):
        contribution[valid_mask] = rel_entr(
            p_xy[valid_mask], p_x[valid_mask] * p_y[valid_mask]
        )

    return contribution


def mutual_information(
    joint: Mapping[Tuple[Hashable, Hashable], float],
    marginal_x: Mapping[Hashable, float],
    marginal_y: Mapping[Hashable, float],
    base: float,
) -> float:
    """
    Mutual Information I(X;Y) from plug-in distributions.

    Parameters
    ----------
    joint : Mapping
        ``{(code_x, code_y): p(x,y)}`` over observed pairs.
    marginal_x, marginal_y : Mapping
        ``{code: p}`` for each variable. Codes missing from a marginal are
        treated as probability 0 and their terms are skipped.
    base : float
        Logarithm base.

    Returns
    -------
    float
        MI in units of ``base``. Non-negative: rounding noise just below zero
        is clamped to 0.0.
    """
    if not joint:
        return 0.0

    keys = list(joint)
    p_xy = np.fromiter((joint[k] for k in keys), dtype=float, count=len(keys))
    p_x = np.fromiter(
        (get_or_zero(marginal_x, kx) for kx, _ in keys), dtype=float, count=len(keys)
    )
    p_y = np.fromiter(
        (get_or_zero(marginal_y, ky) for _, ky in keys), dtype=float, count=len(keys)
    )

    nats = float(np.sum(_safe_mi_contrib(p_xy, p_x, p_y)))
    mi = nats * float(log_base(np.e, base))

    if -MI_CLIP_TOLERANCE < mi < 0.0:
        logger.debug("Clamping MI rounding noise %.3e to 0.0.", mi)
        mi = 0.0
    return mi


__all__ = ["mutual_information"]
