"""Information-theoretic metrics and utilities.

This package provides:
- Marginal and joint plug-in probability distributions
- Shannon entropy for discrete distributions
- Mutual Information (MI) for discrete distributions
"""

from .entropy import entropy_from_distribution, log_base
from .mutual_information import (
    mutual_information,
    mutual_information_sklearn,
)
from .probability import (
    get_or_zero,
    joint_probability,
    marginal_probability,
)

__all__ = [
    # Distributions
    "marginal_probability",
    "joint_probability",
    "get_or_zero",
    # Entropy
    "log_base",
    "entropy_from_distribution",
    # MI functions
    "mutual_information",
    "mutual_information_sklearn",
]
