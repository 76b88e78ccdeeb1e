"""Empirical probability distributions.

This subpackage provides:
- Marginal and joint plug-in distributions over integer codes
- A get-or-zero accessor for absent (unobserved) codes
"""

from .distributions import (
    get_or_zero,
    joint_probability,
    marginal_probability,
)

__all__ = [
    "get_or_zero",
    "joint_probability",
    "marginal_probability",
]
