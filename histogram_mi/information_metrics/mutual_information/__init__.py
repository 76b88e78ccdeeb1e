"""Mutual Information calculations.

This subpackage provides:
- Mutual Information (MI) from joint and marginal plug-in distributions
- A scikit-learn reference implementation over discretized codes
"""

from .mi import _safe_mi_contrib, mutual_information
from .mi_sklearn import mutual_information_sklearn

__all__ = [
    "_safe_mi_contrib",
    "mutual_information",
    "mutual_information_sklearn",
]
